"""Tests for bearer token helpers."""

import pytest

from core.exceptions import AuthorizationError
from routes.helpers import check_bearer_token, extract_bearer_token


def test_extract_bearer_token():
    """extract_bearer_token returns the token after the Bearer scheme."""
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("  BEARER   abc  ") == "abc"


def test_extract_bearer_token_rejects_other_values():
    """Missing header, other schemes and empty tokens give None."""
    assert extract_bearer_token(None) is None
    assert extract_bearer_token("") is None
    assert extract_bearer_token("Bearer") is None
    assert extract_bearer_token("Bearer   ") is None
    assert extract_bearer_token("Basic abc") is None
    assert extract_bearer_token("abc") is None


def test_check_bearer_token_accepts_matching_secret():
    """Matching token is returned."""
    assert check_bearer_token("Bearer s3cret", "s3cret") == "s3cret"


@pytest.mark.parametrize(
    "header, secret",
    [
        ("Bearer s3cret", None),
        ("Bearer s3cret", ""),
        (None, "s3cret"),
        ("Bearer other", "s3cret"),
        ("Bearer s3cre", "s3cret"),
        ("Basic s3cret", "s3cret"),
    ],
)
def test_check_bearer_token_raises(header, secret):
    """Missing secret, missing token or mismatch raise AuthorizationError."""
    with pytest.raises(AuthorizationError):
        check_bearer_token(header, secret)
