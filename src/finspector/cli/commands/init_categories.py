"""Initialize default categories."""

import click
from finspector.domain.category import CategoryService
from finspector.domain.errors import DomainError


# Initial category tree structure: (name, parent name, icon, color)
# Names are global, so no two entries may share one.
INITIAL_CATEGORIES = [
    # Root categories
    ("Food & Dining", None, "restaurant", "#FF5722"),
    ("Transportation", None, "directions_car", "#3F51B5"),
    ("Shopping", None, "shopping_cart", "#9C27B0"),
    ("Bills & Utilities", None, "receipt", "#607D8B"),
    ("Entertainment", None, "local_movies", "#E91E63"),
    ("Health & Fitness", None, "fitness_center", "#4CAF50"),
    ("Travel", None, "flight", "#03A9F4"),
    ("Other", None, "category", "#9E9E9E"),
    # Food & Dining subcategories
    ("Groceries", "Food & Dining", "local_grocery_store", None),
    ("Restaurants", "Food & Dining", "restaurant_menu", None),
    ("Coffee & Snacks", "Food & Dining", "local_cafe", None),
    # Transportation subcategories
    ("Fuel", "Transportation", "local_gas_station", None),
    ("Public Transit", "Transportation", "directions_bus", None),
    ("Parking", "Transportation", "local_parking", None),
    ("Car Maintenance", "Transportation", "build", None),
    # Shopping subcategories
    ("Clothing", "Shopping", "checkroom", None),
    ("Electronics", "Shopping", "devices", None),
    ("Home & Garden", "Shopping", "yard", None),
    # Bills & Utilities subcategories
    ("Electricity", "Bills & Utilities", "bolt", None),
    ("Water", "Bills & Utilities", "water_drop", None),
    ("Internet", "Bills & Utilities", "wifi", None),
    ("Phone", "Bills & Utilities", "phone", None),
    # Entertainment subcategories
    ("Movies", "Entertainment", "movie", None),
    ("Music", "Entertainment", "music_note", None),
    ("Sports", "Entertainment", "sports_soccer", None),
    # Health & Fitness subcategories
    ("Gym", "Health & Fitness", "fitness_center", None),
    ("Pharmacy", "Health & Fitness", "local_pharmacy", None),
    ("Doctor", "Health & Fitness", "medical_services", None),
    # Travel subcategories
    ("Flights", "Travel", "flight_takeoff", None),
    ("Hotels", "Travel", "hotel", None),
]


@click.command("init-categories")
@click.option("--force", is_flag=True, help="Add missing defaults even if categories exist")
@click.pass_context
def init_categories(ctx, force: bool):
    """Initialize database with default category tree."""
    db = ctx.obj["db"]
    actor = ctx.obj["actor"]
    service = CategoryService(db)

    # Check if categories already exist
    existing = service.list_categories()
    if existing and not force:
        click.echo("Categories already exist. Use --force to add missing defaults.")
        return

    click.echo("Creating initial category tree...")

    # Sort order follows position among siblings
    positions: dict[str | None, int] = {}
    ids: dict[str, int] = {
        cat.name: cat.id for cat in existing if cat.id is not None
    }

    created = 0
    errors = 0

    # Roots come first in INITIAL_CATEGORIES, so parents exist before children
    for name, parent_name, icon, color in INITIAL_CATEGORIES:
        positions[parent_name] = positions.get(parent_name, 0) + 1
        if name in ids:
            continue

        parent_id = None
        if parent_name is not None:
            parent_id = ids.get(parent_name)
            if parent_id is None:
                click.echo(f"Warning: Could not create category '{name}': parent '{parent_name}' missing", err=True)
                errors += 1
                continue

        try:
            category = service.create_category(
                name=name,
                icon_name=icon,
                color_code=color,
                sort_order=positions[parent_name],
                parent_id=parent_id,
                actor=actor,
            )
            ids[name] = category.id
            created += 1
        except DomainError as e:
            click.echo(f"Warning: Could not create category '{name}': {e}", err=True)
            errors += 1

    if errors == 0:
        click.echo(f"Successfully created {created} categories.")
    else:
        click.echo(f"Created {created} categories with {errors} errors.")


def register_commands(cli):
    """Register init-categories command with main CLI."""
    cli.add_command(init_categories)
