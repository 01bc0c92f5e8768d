"""CLI commands for user records."""

from __future__ import annotations

import click

from storefront.application.register_user import RegisterUserHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import user_repository


@click.command("register")
@click.option("--username", required=True)
@click.option("--email", required=True)
def user_register(username: str, email: str) -> None:
    """Create a user record."""
    handler = RegisterUserHandler(user_repo=user_repository())

    try:
        user = handler.handle(username=username, email=email)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.id} '{user.username}' registered")
