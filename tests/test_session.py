"""Tests for pixelhabits.core.session – login field validation and profile."""

from __future__ import annotations

import pytest

from pixelhabits.core.session import (
    MISSING_FIELDS_MESSAGE,
    LoginError,
    Profile,
    validate_credentials,
)


class TestValidateCredentials:
    def test_both_filled(self):
        validate_credentials("pixel", "secret")

    @pytest.mark.parametrize(
        "username, password",
        [("", ""), ("pixel", ""), ("", "secret"), ("   ", "secret"), ("pixel", "\t")],
    )
    def test_missing_field(self, username, password):
        with pytest.raises(LoginError) as exc:
            validate_credentials(username, password)
        assert str(exc.value) == MISSING_FIELDS_MESSAGE

    def test_login_error_is_value_error(self):
        assert issubclass(LoginError, ValueError)

    def test_message(self):
        assert MISSING_FIELDS_MESSAGE == "Please fill in all fields"


class TestProfile:
    def test_defaults(self):
        p = Profile(username="PixelMaster")
        assert p.notifications_on is True
        assert p.sounds_on is True

    def test_mutable(self):
        p = Profile(username="PixelMaster")
        p.sounds_on = False
        assert p.sounds_on is False
