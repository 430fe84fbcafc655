from __future__ import annotations

from dataclasses import dataclass


class LoginError(ValueError):
    """Raised when the login form is submitted with a missing field."""


MISSING_FIELDS_MESSAGE = "Please fill in all fields"


def validate_credentials(username: str, password: str) -> None:
    """Check that both login fields are filled in. Nothing is authenticated."""
    if not username.strip() or not password.strip():
        raise LoginError(MISSING_FIELDS_MESSAGE)


@dataclass
class Profile:
    """Local, process-lifetime profile shown on the profile tab."""

    username: str
    notifications_on: bool = True
    sounds_on: bool = True
