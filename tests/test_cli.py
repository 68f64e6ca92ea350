from __future__ import annotations

from unittest.mock import patch

from typer.testing import CliRunner

from sealed_result.cli import _select_users, app
from sealed_result.demo import DEFAULT_USERS, DatabaseError
from sealed_result.result import failure

runner: CliRunner = CliRunner()


class TestSelectUsers:
    def test_defaults_to_every_demo_user(self) -> None:
        """No users selected means every demo user."""
        assert _select_users(None) == DEFAULT_USERS
        assert _select_users([]) == DEFAULT_USERS

    def test_keeps_the_demo_password_for_known_users(self) -> None:
        """Known users keep their walkthrough password."""
        assert _select_users([0, 4]) == ((0, "b"), (4, "password"))

    def test_unknown_users_get_a_valid_password(self) -> None:
        """Unknown users get a password that passes validation."""
        assert _select_users([9]) == ((9, "password"),)


class TestDemoCommand:
    def test_demo_prints_every_auth_state(self) -> None:
        """Test that the demo prints one auth state per default user."""
        result = runner.invoke(app, ["demo"])
        assert result.exit_code == 0
        lines: list[str] = result.output.strip().splitlines()
        assert lines == [
            "Authentication error: Validation error: Password too short.",
            "Authentication error: Network error: Socket timeout",
            "Bad user or password.",
            "Authentication error: Database error: Cannot save user 3.",
            "Authenticated user 4.",
        ]

    def test_demo_selected_users(self) -> None:
        """Test that --user limits and orders the walkthrough."""
        result = runner.invoke(app, ["demo", "--user", "4", "--user", "2"])
        assert result.exit_code == 0
        assert result.output.strip().splitlines() == [
            "Authenticated user 4.",
            "Bad user or password.",
        ]

    def test_demo_database_failure_exits_with_error(self) -> None:
        """Test that a database set-up failure exits with code 1."""
        with patch(
            "sealed_result.demo.create_database",
            return_value=failure(DatabaseError("disk full")),
        ):
            result = runner.invoke(app, ["demo"])
        assert result.exit_code == 1
        assert "Error setting up the database: disk full" in result.output
