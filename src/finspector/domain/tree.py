"""Structural checks for the category forest.

Each check reads the current state through the Database and raises a domain
error on violation. None of them write. CategoryService composes the subset an
operation needs before issuing its single write.
"""

from typing import Optional

from finspector.database.base import Database
from finspector.domain.entities import Category
from finspector.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    category_circular_reference,
    category_own_parent,
    duplicate_category_name,
    parent_category_not_found,
)


def ensure_not_own_parent(category_id: int, parent_id: int) -> None:
    """Reject a category being assigned as its own parent.

    Raises:
        ValidationError: If parent_id equals category_id
    """
    if parent_id == category_id:
        raise ValidationError(category_own_parent())


def ensure_no_cycle(db: Database, category_id: int, parent: Category) -> None:
    """Reject a re-parenting that would put the category below itself.

    Walks the ancestor chain starting at the proposed parent. The walk is
    bounded by the number of stored categories, so it terminates even if the
    stored data already contains a cycle.

    Args:
        db: Database instance
        category_id: Category being moved
        parent: Proposed new parent

    Raises:
        ValidationError: If category_id is the parent or one of its ancestors
    """
    remaining = db.count_categories()
    current: Optional[Category] = parent
    while current is not None and remaining >= 0:
        if current.id == category_id:
            raise ValidationError(category_circular_reference())
        if current.parent_id is None:
            return
        current = db.get_category(current.parent_id)
        remaining -= 1


def ensure_name_available(db: Database, name: str, exclude_id: Optional[int] = None) -> None:
    """Reject a name already used by another active category, ignoring case.

    Args:
        db: Database instance
        name: Proposed category name
        exclude_id: Category being renamed; a match on itself is allowed

    Raises:
        ConflictError: If another active category has the name
    """
    if exclude_id is None:
        if db.category_name_exists(name):
            raise ConflictError(duplicate_category_name(name))
        return

    existing = db.get_category_by_name(name)
    if existing is not None and existing.id != exclude_id:
        raise ConflictError(duplicate_category_name(name))


def require_parent(db: Database, parent_id: int) -> Category:
    """Return the active parent category.

    Raises:
        NotFoundError: If the parent does not exist or is inactive
    """
    parent = db.get_active_category(parent_id)
    if parent is None:
        raise NotFoundError(parent_category_not_found(parent_id))
    return parent
