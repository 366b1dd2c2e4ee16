"""Category management commands."""

import click
from finspector.cli.error_handling import handle_domain_error
from finspector.domain.category import CategoryService, HARD_DELETE
from finspector.domain.entities import Category
from finspector.domain.errors import DomainError, StorageError


def print_category_tree(categories: list[dict], indent: int = 0) -> None:
    """Recursively print category tree."""
    for cat in categories:
        prefix = "  " * indent
        click.echo(f"{prefix}{cat['name']} (ID: {cat['id']})")
        if cat.get("children"):
            print_category_tree(cat["children"], indent + 1)


def print_category_rows(categories: list[Category]) -> None:
    """Print one line per category."""
    for cat in categories:
        order = "-" if cat.sort_order is None else str(cat.sort_order)
        click.echo(f"ID: {cat.id:3d} | {cat.name:25s} | Order: {order}")


def validate_name(ctx, param, value: str) -> str:
    """Reject names that are empty or only whitespace."""
    if not value.strip():
        raise click.BadParameter("Category name must not be blank")
    return value


def category_options(func):
    """Shared options for create and update."""
    func = click.option("--parent", "parent_id", type=int, help="Parent category ID")(func)
    func = click.option("--sort-order", type=int, help="Display position among siblings")(func)
    func = click.option("--icon", "icon_name", help="Icon name")(func)
    func = click.option("--color", "color_code", help="Color code in #RRGGBB format")(func)
    func = click.option("--description", help="Category description")(func)
    return func


@click.group()
def category_group():
    """Manage categories."""
    pass


@category_group.command("list")
@click.pass_context
def list_categories(ctx):
    """List all active categories in tree format."""
    service = CategoryService(ctx.obj["db"])

    try:
        tree = service.get_category_tree()
        count = service.count_active_categories()
    except StorageError as e:
        handle_domain_error(ctx, e)
        return

    if not tree:
        click.echo("No categories found. Run 'init-categories' to create default categories.")
        return

    click.echo(f"\nCategories ({count} active):")
    print_category_tree(tree)


@category_group.command("roots")
@click.pass_context
def list_roots(ctx):
    """List top-level categories."""
    service = CategoryService(ctx.obj["db"])

    try:
        categories = service.list_root_categories()
    except StorageError as e:
        handle_domain_error(ctx, e)
        return

    if not categories:
        click.echo("No categories found.")
        return
    print_category_rows(categories)


@category_group.command("children")
@click.argument("parent_id", type=int)
@click.pass_context
def list_children(ctx, parent_id: int):
    """List subcategories of PARENT_ID."""
    service = CategoryService(ctx.obj["db"])

    try:
        categories = service.list_subcategories(parent_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
        return

    if not categories:
        click.echo("No subcategories found.")
        return
    print_category_rows(categories)


@category_group.command("show")
@click.argument("category_id", type=int)
@click.pass_context
def show_category(ctx, category_id: int):
    """Show details of a category."""
    service = CategoryService(ctx.obj["db"])

    try:
        details = service.describe_category(category_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
        return

    cat = details.category
    click.echo(f"ID:          {cat.id}")
    click.echo(f"Name:        {cat.name}")
    click.echo(f"Path:        {service.format_category_path(cat.id)}")
    if cat.description:
        click.echo(f"Description: {cat.description}")
    if cat.color_code:
        click.echo(f"Color:       {cat.color_code}")
    if cat.icon_name:
        click.echo(f"Icon:        {cat.icon_name}")
    if cat.sort_order is not None:
        click.echo(f"Sort order:  {cat.sort_order}")
    if details.parent is not None:
        click.echo(f"Parent:      {details.parent.name} (ID: {details.parent.id})")
    if details.subcategories:
        names = ", ".join(sub.name for sub in details.subcategories)
        click.echo(f"Children:    {names}")
    click.echo(f"Updated:     {cat.updated_on:%Y-%m-%d %H:%M} by {cat.updated_by}")


@category_group.command("search")
@click.argument("query")
@click.option("--roots-only", is_flag=True, help="Only search top-level categories")
@click.pass_context
def search_categories(ctx, query: str, roots_only: bool):
    """Search categories by name or description."""
    service = CategoryService(ctx.obj["db"])

    try:
        categories = service.search_categories(query, roots_only=roots_only)
    except StorageError as e:
        handle_domain_error(ctx, e)
        return

    if not categories:
        click.echo(f"No categories matching '{query}'.")
        return
    print_category_rows(categories)


@category_group.command("create")
@click.argument("name", callback=validate_name)
@category_options
@click.pass_context
def create_category(ctx, name: str, description, color_code, icon_name, sort_order, parent_id):
    """Create a new category."""
    service = CategoryService(ctx.obj["db"])

    try:
        category = service.create_category(
            name=name,
            description=description,
            color_code=color_code,
            icon_name=icon_name,
            sort_order=sort_order,
            parent_id=parent_id,
            actor=ctx.obj["actor"],
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
        return

    parent_str = ""
    if parent_id is not None:
        parent_str = f" under '{service.format_category_path(parent_id)}'"
    click.echo(f"Created category '{category.name}'{parent_str} (ID: {category.id})")


@category_group.command("update")
@click.argument("category_id", type=int)
@click.argument("name", callback=validate_name)
@category_options
@click.pass_context
def update_category(
    ctx, category_id: int, name: str, description, color_code, icon_name, sort_order, parent_id
):
    """Replace the fields of CATEGORY_ID.

    Options left out are cleared; without --parent the category becomes
    top-level.
    """
    service = CategoryService(ctx.obj["db"])

    try:
        category = service.update_category(
            category_id,
            name=name,
            description=description,
            color_code=color_code,
            icon_name=icon_name,
            sort_order=sort_order,
            parent_id=parent_id,
            actor=ctx.obj["actor"],
        )
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Updated category '{service.format_category_path(category.id)}'")


@category_group.command("delete")
@click.argument("category_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_category(ctx, category_id: int, yes: bool):
    """Delete a category.

    Categories used by expenses are deactivated instead of removed and can
    be restored with 'category activate'.
    """
    service = CategoryService(ctx.obj["db"])

    try:
        category = service.get_category(category_id)
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
        return

    if not yes and not click.confirm(
        f"Are you sure you want to delete category '{category.name}' (ID: {category_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        outcome = service.delete_category(category_id, actor=ctx.obj["actor"])
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
        return

    if outcome == HARD_DELETE:
        click.echo(f"Deleted category '{category.name}'")
    else:
        click.echo(f"Deactivated category '{category.name}' (it is used by expenses)")


@category_group.command("activate")
@click.argument("category_id", type=int)
@click.pass_context
def activate_category(ctx, category_id: int):
    """Reactivate a deactivated category."""
    service = CategoryService(ctx.obj["db"])

    try:
        category = service.activate_category(category_id, actor=ctx.obj["actor"])
    except (DomainError, StorageError) as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Activated category '{category.name}' (ID: {category.id})")


def register_commands(cli):
    """Register category commands with main CLI."""
    cli.add_command(category_group, name="category")
