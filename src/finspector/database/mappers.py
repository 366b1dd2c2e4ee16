"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the service layer only ever sees
frozen domain entities.
"""

from finspector.domain import entities as domain
from finspector.database.models import Category as ORMCategory


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        description=orm_category.description,
        color_code=orm_category.color_code,
        icon_name=orm_category.icon_name,
        sort_order=orm_category.sort_order,
        parent_id=orm_category.parent_id,
        is_active=orm_category.is_active,
        created_by=orm_category.created_by,
        updated_by=orm_category.updated_by,
        created_on=orm_category.created_on,
        updated_on=orm_category.updated_on,
    )


def apply_category_fields(category: domain.Category, orm_category: ORMCategory) -> ORMCategory:
    """Copy the caller-controlled fields of a domain Category onto a SQLAlchemy row.

    Server-assigned fields (id, created_on, updated_on) are left to the store.
    """
    orm_category.name = category.name
    orm_category.description = category.description
    orm_category.color_code = category.color_code
    orm_category.icon_name = category.icon_name
    orm_category.sort_order = category.sort_order
    orm_category.parent_id = category.parent_id
    orm_category.is_active = category.is_active
    orm_category.created_by = category.created_by
    orm_category.updated_by = category.updated_by
    return orm_category

