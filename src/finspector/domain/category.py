"""Category domain service."""

from dataclasses import replace
from typing import Any, Optional

from finspector.database.base import Database
from finspector.domain import tree
from finspector.domain.entities import Category, CategoryDetails, CategorySummary
from finspector.domain.errors import (
    DependencyError,
    NotFoundError,
    category_delete_blocked,
    category_not_found,
)
from finspector.logger import get_logger

logger = get_logger(__name__)

DEFAULT_ACTOR = "system"

HARD_DELETE = "hard"
SOFT_DELETE = "soft"


class CategoryService:
    """Service for managing the global expense category forest.

    Every mutating operation validates against the stored state first and then
    performs exactly one save or delete. Nothing is written when a check fails.
    """

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_active(self, category_id: int) -> Category:
        category = self.db.get_active_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    # Queries
    def list_categories(self) -> list[Category]:
        """List all active categories ordered by sort order, then name."""
        logger.info("Fetching all categories")
        return self.db.list_categories()

    def get_category(self, category_id: int) -> Category:
        """Get an active category by ID.

        Raises:
            NotFoundError: If the category does not exist or is inactive
        """
        logger.info("Fetching category with id: %s", category_id)
        return self._require_active(category_id)

    def list_root_categories(self) -> list[Category]:
        """List active top-level categories."""
        logger.info("Fetching root categories")
        return self.db.list_root_categories()

    def list_subcategories(self, parent_id: int) -> list[Category]:
        """List the active children of an active category.

        Raises:
            NotFoundError: If the parent does not exist or is inactive
        """
        logger.info("Fetching subcategories for parent: %s", parent_id)
        tree.require_parent(self.db, parent_id)
        return self.db.list_child_categories(parent_id)

    def search_categories(self, query: str, roots_only: bool = False) -> list[Category]:
        """Search active categories by name or description.

        Args:
            query: Case-insensitive substring; an empty query matches everything
            roots_only: Only return top-level categories
        """
        logger.info("Searching categories with query: '%s', roots_only: %s", query, roots_only)
        return self.db.search_categories(query, roots_only=roots_only)

    def count_active_categories(self) -> int:
        """Count active categories."""
        return self.db.count_categories(active_only=True)

    def describe_category(self, category_id: int) -> CategoryDetails:
        """Get an active category with its parent and active subcategories.

        Raises:
            NotFoundError: If the category does not exist or is inactive
        """
        category = self._require_active(category_id)
        parent = None
        if category.parent_id is not None:
            # Inactive parents referenced before their soft delete are still shown
            parent_category = self.db.get_category(category.parent_id)
            if parent_category is not None:
                parent = CategorySummary.of(parent_category)
        children = self.db.list_child_categories(category_id)
        return CategoryDetails(
            category=category,
            parent=parent,
            subcategories=tuple(CategorySummary.of(child) for child in children),
        )

    def get_category_tree(self) -> list[dict[str, Any]]:
        """Get the active category forest.

        Returns:
            List of top-level category dicts, each with a nested 'children' list.
            Active categories below an inactive or removed parent are top-level.
        """
        categories = self.db.list_categories()
        active_ids = {cat.id for cat in categories}
        by_parent: dict[Optional[int], list[Category]] = {}
        for cat in categories:
            # Parents that are inactive or gone leave the child at the top level
            parent_id = cat.parent_id if cat.parent_id in active_ids else None
            by_parent.setdefault(parent_id, []).append(cat)

        def build(parent_id: Optional[int], seen: frozenset[int]) -> list[dict[str, Any]]:
            nodes = []
            for cat in by_parent.get(parent_id, []):
                if cat.id in seen:
                    continue
                nodes.append(
                    {
                        "id": cat.id,
                        "name": cat.name,
                        "sort_order": cat.sort_order,
                        "children": build(cat.id, seen | {cat.id}),
                    }
                )
            return nodes

        return build(None, frozenset())

    def format_category_path(self, category_id: int) -> str:
        """Get full path for a category.

        Args:
            category_id: Category ID

        Returns:
            Full category path (e.g., "Travel > Flights"), or "" if not found
        """
        cat = self.db.get_category(category_id)
        if cat is None:
            return ""

        path_parts = [cat.name]
        seen = {cat.id}
        current_parent_id = cat.parent_id

        while current_parent_id is not None and current_parent_id not in seen:
            parent = self.db.get_category(current_parent_id)
            if parent is None:
                break
            path_parts.append(parent.name)
            seen.add(parent.id)
            current_parent_id = parent.parent_id

        return " > ".join(reversed(path_parts))

    # Mutations
    def create_category(
        self,
        name: str,
        description: Optional[str] = None,
        color_code: Optional[str] = None,
        icon_name: Optional[str] = None,
        sort_order: Optional[int] = None,
        parent_id: Optional[int] = None,
        actor: str = DEFAULT_ACTOR,
    ) -> Category:
        """Create an active category.

        Args:
            name: Category name, unique among active categories ignoring case
            description: Optional description
            color_code: Optional "#RRGGBB" color
            icon_name: Optional icon identifier
            sort_order: Optional display position
            parent_id: Optional parent category ID; None creates a root
            actor: Who is making the change

        Returns:
            The saved category

        Raises:
            ConflictError: If the name is taken
            NotFoundError: If the parent does not exist or is inactive
        """
        logger.info("Creating category '%s' by: %s", name, actor)

        tree.ensure_name_available(self.db, name)
        if parent_id is not None:
            tree.require_parent(self.db, parent_id)

        category = Category(
            id=None,
            name=name,
            description=description,
            color_code=color_code,
            icon_name=icon_name,
            sort_order=sort_order,
            parent_id=parent_id,
            is_active=True,
            created_by=actor,
            updated_by=actor,
        )
        saved = self.db.save_category(category)
        logger.info("Category created with id: %s by: %s", saved.id, actor)
        return saved

    def update_category(
        self,
        category_id: int,
        name: str,
        description: Optional[str] = None,
        color_code: Optional[str] = None,
        icon_name: Optional[str] = None,
        sort_order: Optional[int] = None,
        parent_id: Optional[int] = None,
        actor: str = DEFAULT_ACTOR,
    ) -> Category:
        """Replace all editable fields of an active category.

        A parent_id of None moves the category to the top level.

        Returns:
            The saved category

        Raises:
            NotFoundError: If the category or the new parent does not exist or is inactive
            ValidationError: If the new parent is the category itself or one of its descendants
            ConflictError: If another active category has the name
        """
        logger.info("Updating category with id: %s by: %s", category_id, actor)

        category = self._require_active(category_id)

        if parent_id is not None:
            tree.ensure_not_own_parent(category_id, parent_id)
            parent = tree.require_parent(self.db, parent_id)
            tree.ensure_no_cycle(self.db, category_id, parent)

        tree.ensure_name_available(self.db, name, exclude_id=category_id)

        updated = replace(
            category,
            name=name,
            description=description,
            color_code=color_code,
            icon_name=icon_name,
            sort_order=sort_order,
            parent_id=parent_id,
            updated_by=actor,
        )
        saved = self.db.save_category(updated)
        logger.info("Category updated with id: %s by: %s", saved.id, actor)
        return saved

    def delete_category(self, category_id: int, actor: str = DEFAULT_ACTOR) -> str:
        """Delete an active category.

        Categories referenced by expenses are deactivated instead of removed.

        Returns:
            HARD_DELETE if the row was removed, SOFT_DELETE if it was deactivated

        Raises:
            NotFoundError: If the category does not exist or is inactive
            DependencyError: If the category has active subcategories
        """
        logger.info("Deleting category with id: %s by: %s", category_id, actor)

        category = self._require_active(category_id)

        if self.db.list_child_categories(category_id):
            raise DependencyError(category_delete_blocked())

        if self.db.has_referencing_expenses(category_id):
            self.db.save_category(replace(category, is_active=False, updated_by=actor))
            logger.info("Category soft deleted (marked inactive) with id: %s by: %s", category_id, actor)
            return SOFT_DELETE

        self.db.delete_category(category)
        logger.info("Category hard deleted with id: %s by: %s", category_id, actor)
        return HARD_DELETE

    def activate_category(self, category_id: int, actor: str = DEFAULT_ACTOR) -> Category:
        """Mark a category active again. Already-active categories are saved unchanged.

        Raises:
            NotFoundError: If no category has the ID, active or not
            ConflictError: If an active category took the name while this one was inactive
        """
        logger.info("Activating category with id: %s by: %s", category_id, actor)

        category = self.db.get_category(category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        if not category.is_active:
            tree.ensure_name_available(self.db, category.name, exclude_id=category_id)

        saved = self.db.save_category(replace(category, is_active=True, updated_by=actor))
        logger.info("Category activated with id: %s by: %s", saved.id, actor)
        return saved
