from __future__ import annotations

import asyncio
import logging

import typer

from .demo import DEFAULT_USERS, AuthState, DatabaseError, run_demo
from .result import Result


def _select_users(user: list[int] | None) -> tuple[tuple[int, str], ...]:
    if not user:
        return DEFAULT_USERS
    passwords: dict[int, str] = dict(DEFAULT_USERS)
    return tuple((user_id, passwords.get(user_id, "password")) for user_id in user)


app: typer.Typer = typer.Typer()


@app.callback()
def main() -> None:
    """Result type walkthroughs."""


@app.command()
def demo(
    user: list[int] | None = typer.Option(None, "--user", "-u", help="User id to sign in; repeatable."),
    delay: float = typer.Option(0.0, help="Seconds the fake API waits before answering."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Sign in fake users and print the resulting auth state of each.

    Users 0-4 each exercise a different path: a validation failure, a
    network failure, an unknown user, a storage failure and a success.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG)
    result: Result[tuple[AuthState, ...], DatabaseError] = asyncio.run(
        run_demo(_select_users(user), delay)
    )
    if result.is_failure:
        typer.echo(f"Error setting up the database: {result.maybe_error}", err=True)
        raise typer.Exit(1)
    states: tuple[AuthState, ...] = result.value_or_throw()
    for state in states:
        typer.echo(str(state))


if __name__ == "__main__":
    app()
