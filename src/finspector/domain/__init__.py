"""Domain layer for finspector application.

Services are imported from their modules (e.g. ``finspector.domain.category``)
so that importing the entities from the database layer stays cycle-free.
"""

from finspector.domain.entities import Category, CategoryDetails, CategorySummary
from finspector.domain.errors import (
    DomainError,
    ValidationError,
    NotFoundError,
    ConflictError,
    DependencyError,
    StorageError,
)

__all__ = [
    "Category",
    "CategoryDetails",
    "CategorySummary",
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "DependencyError",
    "StorageError",
]
