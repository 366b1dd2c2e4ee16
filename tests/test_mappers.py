"""Tests for database mappers."""

import pytest
from datetime import datetime, UTC

from finspector.database.models import Category as ORMCategory
from finspector.database.mappers import apply_category_fields, category_to_domain
from finspector.domain.entities import Category, CategorySummary


class TestCategoryMapper:
    """Tests for Category mapper."""

    def test_category_to_domain(self):
        """Test converting ORM Category to domain Category."""
        now = datetime.now(UTC)
        orm_category = ORMCategory(
            id=1,
            name="Food & Dining",
            description="Restaurants and groceries",
            color_code="#FF5722",
            icon_name="restaurant",
            sort_order=1,
            parent_id=None,
            is_active=True,
            created_by="admin",
            updated_by="admin",
            created_on=now,
            updated_on=now,
        )
        domain_category = category_to_domain(orm_category)

        assert isinstance(domain_category, Category)
        assert domain_category.id == 1
        assert domain_category.name == "Food & Dining"
        assert domain_category.description == "Restaurants and groceries"
        assert domain_category.color_code == "#FF5722"
        assert domain_category.icon_name == "restaurant"
        assert domain_category.sort_order == 1
        assert domain_category.parent_id is None
        assert domain_category.is_active is True
        assert domain_category.is_root is True
        assert domain_category.created_on == now

    def test_category_with_parent_to_domain(self):
        """Test converting ORM Category with parent to domain Category."""
        orm_category = ORMCategory(
            id=2,
            name="Groceries",
            parent_id=1,
            is_active=False,
            created_on=datetime.now(UTC),
            updated_on=datetime.now(UTC),
        )
        domain_category = category_to_domain(orm_category)

        assert domain_category.parent_id == 1
        assert domain_category.is_active is False
        assert domain_category.is_root is False

    def test_apply_category_fields(self):
        """Test copying domain fields onto an ORM row."""
        category = Category(
            id=None,
            name="Flights",
            description="Air travel",
            color_code="#03A9F4",
            icon_name="flight",
            sort_order=2,
            parent_id=7,
            is_active=True,
            created_by="alice",
            updated_by="bob",
        )
        row = apply_category_fields(category, ORMCategory())

        assert row.id is None
        assert row.name == "Flights"
        assert row.description == "Air travel"
        assert row.color_code == "#03A9F4"
        assert row.icon_name == "flight"
        assert row.sort_order == 2
        assert row.parent_id == 7
        assert row.is_active is True
        assert row.created_by == "alice"
        assert row.updated_by == "bob"


class TestDomainEntities:
    """Tests for domain entities."""

    def test_category_immutability(self):
        """Test that Category entities are immutable."""
        category = Category(id=1, name="Food")
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            category.name = "New Name"

    def test_category_defaults(self):
        """Test default field values of a new Category."""
        category = Category(id=None, name="Food")

        assert category.is_active is True
        assert category.parent_id is None
        assert category.sort_order is None
        assert category.created_on is None

    def test_category_summary_of(self):
        """Test building a summary from a category."""
        category = Category(id=3, name="Travel", color_code="#000000", icon_name="flight")

        assert CategorySummary.of(category) == CategorySummary(
            id=3, name="Travel", color_code="#000000", icon_name="flight"
        )
