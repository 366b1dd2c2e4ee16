"""CLI error handling helpers."""

import click

from finspector.domain.errors import DomainError, StorageError


def handle_domain_error(ctx: click.Context, error: DomainError | StorageError) -> None:
    """Render a domain or storage error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
