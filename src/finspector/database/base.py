"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional

# Import entities directly to avoid circular import through domain/__init__.py
from finspector.domain.entities import Category


class Database(ABC):
    """Abstract category store for finspector.

    Lookups return None for absent rows rather than raising. Backend faults
    surface as StorageError.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Category lookups
    @abstractmethod
    def get_active_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID, only if it is active."""
        pass

    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID regardless of its active flag."""
        pass

    @abstractmethod
    def get_category_by_name(self, name: str) -> Optional[Category]:
        """Get the active category whose name matches, ignoring case."""
        pass

    @abstractmethod
    def category_name_exists(self, name: str) -> bool:
        """Check if an active category already uses this name, ignoring case."""
        pass

    # Category listings, ordered by (sort_order, name)
    @abstractmethod
    def list_categories(self) -> list[Category]:
        """List all active categories."""
        pass

    @abstractmethod
    def list_root_categories(self) -> list[Category]:
        """List active categories without a parent."""
        pass

    @abstractmethod
    def list_child_categories(self, parent_id: int) -> list[Category]:
        """List active categories whose parent is parent_id."""
        pass

    @abstractmethod
    def search_categories(self, query: str, roots_only: bool = False) -> list[Category]:
        """Search active categories by case-insensitive substring of name or description.

        Args:
            query: Substring to look for
            roots_only: If True, only return categories without a parent
        """
        pass

    @abstractmethod
    def count_categories(self, active_only: bool = False) -> int:
        """Count categories, optionally only the active ones."""
        pass

    @abstractmethod
    def has_referencing_expenses(self, category_id: int) -> bool:
        """Check if any expense references the category."""
        pass

    # Category writes
    @abstractmethod
    def save_category(self, category: Category) -> Category:
        """Insert (id is None) or update a category.

        Returns the persisted category with id and timestamps populated.
        """
        pass

    @abstractmethod
    def delete_category(self, category: Category) -> None:
        """Remove the category row."""
        pass

    # Expense operations
    @abstractmethod
    def create_expense(
        self,
        category_id: int,
        amount: Decimal,
        spent_on: date,
        description: Optional[str] = None,
    ) -> int:
        """Record an expense against a category. Returns expense ID."""
        pass
