"""
Pytest configuration and shared fixtures for nostrtags tests.

Provides:
- Sample public keys and relay URLs
- Sample raw tags for the ``e``, ``p`` and ``a`` shapes
- A mock ``nostr_sdk.Event`` exposing ``tags().to_vec()``
"""

import logging
from unittest.mock import MagicMock

import pytest

from nostrtags.models import PublicKey, Tag


# ============================================================================
# Logging Configuration
# ============================================================================


@pytest.fixture(scope="session", autouse=True)
def setup_logging() -> None:
    """Configure logging for tests."""
    logging.basicConfig(level=logging.DEBUG)


# ============================================================================
# Sample Data
# ============================================================================


PUBKEY_HEX = "abcdef" * 10 + "abcd"
OTHER_PUBKEY_HEX = "0123456789" * 6 + "0123"
EVENT_ID_HEX = "ee" * 32
RELAY_URL = "wss://relay.example.com"


@pytest.fixture
def pubkey_hex() -> str:
    return PUBKEY_HEX


@pytest.fixture
def pubkey() -> PublicKey:
    return PublicKey(PUBKEY_HEX)


@pytest.fixture
def other_pubkey() -> PublicKey:
    return PublicKey(OTHER_PUBKEY_HEX)


@pytest.fixture
def relay_url() -> str:
    return RELAY_URL


@pytest.fixture
def article_coordinates_tag() -> Tag:
    """An ``a`` tag pointing to a long-form article with a relay hint."""
    return Tag("a", f"30023:{PUBKEY_HEX}:my-article", (RELAY_URL,))


@pytest.fixture
def relay_list_coordinates_tag() -> Tag:
    """An ``a`` tag pointing to a normal replaceable relay list (empty identifier)."""
    return Tag("a", f"10002:{PUBKEY_HEX}:")


@pytest.fixture
def sample_raw_tags() -> list[list[str]]:
    """A realistic tag list mixing every supported shape and some noise."""
    return [
        ["e", EVENT_ID_HEX, RELAY_URL],
        ["p", PUBKEY_HEX],
        ["a", f"30023:{PUBKEY_HEX}:my-article", RELAY_URL],
        ["a", f"10002:{PUBKEY_HEX}:"],
        ["a", "not-a-coordinate"],
        ["t", "nostr"],
        ["client"],
    ]


@pytest.fixture
def mock_nostr_event(sample_raw_tags: list[list[str]]) -> MagicMock:
    """Create a mock nostr_sdk Event whose tags() chain yields *sample_raw_tags*."""
    mock_tags = []
    for values in sample_raw_tags:
        mock_tag = MagicMock()
        mock_tag.to_vec.return_value = values
        mock_tags.append(mock_tag)

    tags = MagicMock()
    tags.to_vec.return_value = mock_tags

    event = MagicMock()
    event.tags.return_value = tags
    return event
