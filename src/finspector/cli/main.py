"""Main CLI entry point."""

import click
from finspector.database.factories import create_sqlite_database
from finspector.domain.category import DEFAULT_ACTOR
from finspector.logger import setup_logging

# Import and register all commands at module level
from finspector.cli.commands import (
    category,
    init_categories,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINSPECTOR_DB_PATH environment variable)",
    envvar="FINSPECTOR_DB_PATH",
)
@click.option(
    "--actor",
    default=DEFAULT_ACTOR,
    show_default=True,
    envvar="FINSPECTOR_ACTOR",
    help="Name recorded as the creator/updater of changed categories",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    envvar="FINSPECTOR_LOG_LEVEL",
    help="Logging verbosity",
)
@click.pass_context
def cli(ctx, db_path: str | None, actor: str, log_level: str):
    """Finspector - expense category management.

    Maintain the global tree of expense categories: create, re-parent,
    rename, deactivate and reactivate them.
    """
    ctx.ensure_object(dict)
    setup_logging(log_level)
    ctx.obj["actor"] = actor

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
init_categories.register_commands(cli)
category.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
