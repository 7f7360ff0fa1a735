"""User entity — full name composition and email shape check."""

from datetime import timezone

import pytest

from catalog_api.core.user import User


def test_full_name_joins_first_and_last():
    assert User(first_name="John", last_name="Doe").full_name == "John Doe"


def test_full_name_trims_outer_whitespace_only():
    user = User(first_name="  John ", last_name=" Doe  ")
    assert user.full_name == "John   Doe"


@pytest.mark.parametrize(
    "first, last, expected",
    [("John", "", "John"), ("", "Doe", "Doe"), ("", "", "")],
)
def test_full_name_with_missing_parts(first, last, expected):
    assert User(first_name=first, last_name=last).full_name == expected


@pytest.mark.parametrize(
    "email, expected",
    [
        ("a@b.com", True),
        ("@", True),
        ("no-at-sign.com", False),
        ("", False),
        ("   ", False),
    ],
)
def test_is_email_valid_checks_at_sign_only(email, expected):
    assert User(email=email).is_email_valid() is expected


def test_defaults_active_and_utc_timestamp():
    user = User()
    assert user.is_active is True
    assert user.created_at.tzinfo is timezone.utc
