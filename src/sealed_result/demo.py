"""A small sign-in walkthrough showing the ways to build and consume a Result.

1. Set up a local database.
2. Call an API for a user to sign in.
3. Store the user data in the database.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from .catching import catching_async
from .nothing import Nothing, nothing
from .result import Result, failure, success

logger = logging.getLogger(__name__)

DEFAULT_USERS: tuple[tuple[int, str], ...] = (
    (0, "b"),
    (1, "password"),
    (2, "password"),
    (3, "password"),
    (4, "password"),
)


class DatabaseError(Exception):
    pass


class HttpError(Exception):
    pass


@dataclass(frozen=True, slots=True)
class User:
    id: int


@dataclass(frozen=True, slots=True)
class AuthFailure:
    message: str

    @classmethod
    def network(cls, error: HttpError) -> AuthFailure:
        return cls(f"Network error: {error}")

    @classmethod
    def storage(cls, error: DatabaseError) -> AuthFailure:
        return cls(f"Database error: {error}")

    @classmethod
    def validation(cls, message: str) -> AuthFailure:
        return cls(f"Validation error: {message}")

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True, slots=True)
class AuthState:
    message: str

    @classmethod
    def authenticated(cls, user: User) -> AuthState:
        return cls(f"Authenticated user {user.id}.")

    @classmethod
    def unauthenticated(cls) -> AuthState:
        return cls("Bad user or password.")

    @classmethod
    def error(cls, failure: AuthFailure) -> AuthState:
        return cls(f"Authentication error: {failure}")

    def __str__(self) -> str:
        return self.message


class FakeHttpClient:
    """Pretend API: user 1 times out, user 2 does not exist."""

    def __init__(self, delay: float = 0.0) -> None:
        self.delay = delay

    async def get(self, user_id: int) -> int | None:
        await asyncio.sleep(self.delay)
        if user_id == 1:
            raise HttpError("Socket timeout")
        if user_id == 2:
            return None
        return user_id


class Database:
    async def save(self, user: User | None) -> None:
        if user is not None and user.id == 3:
            raise DatabaseError(f"Cannot save user {user.id}.")


def create_database() -> Result[Nothing, DatabaseError]:
    return success(nothing)


async def save_user_data(database: Database, user: User | None) -> Result[User | None, AuthFailure]:
    # try/except, returning success or failure directly
    try:
        await database.save(user)
    except DatabaseError as exc:
        return failure(AuthFailure.storage(exc))
    return success(user)


async def api_sign_in(
    client: FakeHttpClient, user_id: int, password: str
) -> Result[User | None, AuthFailure]:
    if len(password) < 2:
        return failure(AuthFailure.validation("Password too short."))
    # catching, then translate both the value and the error
    api_result: Result[int | None, HttpError] = await catching_async(
        lambda: client.get(user_id), HttpError
    )
    return api_result.map_when(
        success=lambda found: User(found) if found is not None else None,
        failure=AuthFailure.network,
    )


async def authenticate(
    client: FakeHttpClient, database: Database, user_id: int, password: str
) -> AuthState:
    result: Result[User | None, AuthFailure] = await api_sign_in(client, user_id, password)
    if result.is_success:
        result = await save_user_data(database, result.maybe_value)
    state: AuthState = result.when(
        success=lambda user: AuthState.unauthenticated()
        if user is None
        else AuthState.authenticated(user),
        failure=AuthState.error,
    )
    logger.debug("user %d: %s", user_id, state)
    return state


async def run_demo(
    users: tuple[tuple[int, str], ...] = DEFAULT_USERS, delay: float = 0.0
) -> Result[tuple[AuthState, ...], DatabaseError]:
    database_result: Result[Nothing, DatabaseError] = create_database()
    if database_result.is_failure:
        return failure(database_result.maybe_error)
    client: FakeHttpClient = FakeHttpClient(delay)
    database: Database = Database()
    states: list[AuthState] = []
    for user_id, password in users:
        states.append(await authenticate(client, database, user_id, password))
    return success(tuple(states))
