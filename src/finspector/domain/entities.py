"""Domain model entities for finspector.

These are pure data classes representing business concepts, independent of
database schema. The service layer never holds live parent/child object
references: a category points at its parent by id only.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Category:
    """Expense category domain entity.

    ``id`` is None until the category has been saved; ``parent_id`` is None
    for root categories.
    """

    id: Optional[int]
    name: str
    description: Optional[str] = None
    color_code: Optional[str] = None
    icon_name: Optional[str] = None
    sort_order: Optional[int] = None
    parent_id: Optional[int] = None
    is_active: bool = True
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_on: Optional[datetime] = None
    updated_on: Optional[datetime] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


@dataclass(frozen=True)
class CategorySummary:
    """Short reference to a category, used for parent/subcategory listings."""

    id: int
    name: str
    color_code: Optional[str]
    icon_name: Optional[str]

    @classmethod
    def of(cls, category: Category) -> "CategorySummary":
        return cls(
            id=category.id,
            name=category.name,
            color_code=category.color_code,
            icon_name=category.icon_name,
        )


@dataclass(frozen=True)
class CategoryDetails:
    """A category together with its parent and active subcategories."""

    category: Category
    parent: Optional[CategorySummary]
    subcategories: tuple[CategorySummary, ...]
