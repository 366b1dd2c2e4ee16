"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or a structural rule violation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist or is not active."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(ValidationError):
    """Operation blocked due to dependent domain data."""


class StorageError(Exception):
    """The persistence backend failed (connectivity, constraint violation).

    Not a DomainError: callers cannot correct it by changing their input.
    """


def category_not_found(category_id: int) -> str:
    """Return message for missing category by ID."""
    return f"Category not found with id: {category_id}"


def parent_category_not_found(parent_id: int) -> str:
    """Return message for missing or inactive parent category."""
    return f"Parent category not found with id: {parent_id}"


def duplicate_category_name(name: str) -> str:
    """Return message for a name already used by an active category."""
    return f"Category name '{name}' already exists"


def category_own_parent() -> str:
    """Return message for a category assigned to itself as parent."""
    return "Category cannot be its own parent"


def category_circular_reference() -> str:
    """Return message for a re-parenting that would close a cycle."""
    return "Moving category would create a circular reference"


def category_delete_blocked() -> str:
    """Return message when a category still has active subcategories."""
    return "Cannot delete category with active subcategories"
