"""Shared constants for the models layer.

Defines the reserved tag names and the semantic event-kind table used by
the tag interpretations. Placing them here avoids circular dependencies
between the model modules.

See Also:
    [NIP-01 kinds](https://github.com/nostr-protocol/nips/blob/master/01.md#kinds):
        NIP-01 definition of regular, replaceable, ephemeral, and
        addressable kind ranges.
    [EventCoordinates][nostrtags.models.event_coordinates.EventCoordinates]:
        Uses [EventKind][nostrtags.models.constants.EventKind] and the
        replaceability predicates to validate coordinates.
    [ReferenceTag][nostrtags.models.reference_tag.ReferenceTag]: Uses
        [TagName][nostrtags.models.constants.TagName] discriminators.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum


EVENT_KIND_MAX = 65_535

# NIP-01 kind ranges (upper bounds exclusive)
_REGULAR_RANGE = range(1_000, 10_000)
_REPLACEABLE_RANGE = range(10_000, 20_000)
_EPHEMERAL_RANGE = range(20_000, 30_000)
_ADDRESSABLE_RANGE = range(30_000, 40_000)
_REPLACEABLE_LEGACY = frozenset({0, 3})


class TagName(StrEnum):
    """Reserved single-letter and well-known tag names.

    Attributes:
        EVENT: ``e`` -- reference to another event by id.
        PUBKEY: ``p`` -- reference to a public key.
        EVENT_COORDINATES: ``a`` -- coordinates of a replaceable event.
        IDENTIFIER: ``d`` -- identifier of an addressable event.
        KIND: ``k`` -- stringified event kind.
        HASHTAG: ``t`` -- hashtag.
        WEBPAGE_URL: ``r`` -- reference to a URL.
        QUOTE: ``q`` -- quoted event reference.
        TITLE: ``title`` -- human-readable title.
    """

    EVENT = "e"
    PUBKEY = "p"
    EVENT_COORDINATES = "a"
    IDENTIFIER = "d"
    KIND = "k"
    HASHTAG = "t"
    WEBPAGE_URL = "r"
    QUOTE = "q"
    TITLE = "title"


def is_regular(kind: int) -> bool:
    """Return True if *kind* is stored by relays without replacement."""
    return (
        kind in _REGULAR_RANGE
        or (4 <= kind < 45)  # noqa: PLR2004
        or kind in (1, 2)
    )


def is_normal_replaceable(kind: int) -> bool:
    """Return True if only the latest event per (kind, pubkey) is kept."""
    return kind in _REPLACEABLE_LEGACY or kind in _REPLACEABLE_RANGE


def is_ephemeral(kind: int) -> bool:
    """Return True if relays are not expected to store the event."""
    return kind in _EPHEMERAL_RANGE


def is_addressable(kind: int) -> bool:
    """Return True if only the latest event per (kind, pubkey, d tag) is kept."""
    return kind in _ADDRESSABLE_RANGE


class EventKind(IntEnum):
    """Well-known Nostr event kinds.

    The table is intentionally partial: coordinates and references may
    carry kinds unknown to this library, in which case
    [from_int()][nostrtags.models.constants.EventKind.from_int] returns
    ``None`` and the module-level predicates still classify the raw integer.

    Examples:
        ```python
        EventKind.from_int(30023)                   # EventKind.LONGFORM_CONTENT
        EventKind.LONGFORM_CONTENT.is_addressable   # True
        EventKind.RELAY_LIST.is_normal_replaceable  # True
        EventKind.from_int(30078)                   # None (not in the table)
        ```
    """

    SET_METADATA = 0
    TEXT_NOTE = 1
    RECOMMEND_RELAY = 2
    CONTACTS = 3
    LEGACY_ENCRYPTED_DIRECT_MESSAGE = 4
    DELETION = 5
    REPOST = 6
    REACTION = 7
    SEAL = 13
    DIRECT_MESSAGE = 14
    GENERIC_REPOST = 16
    GIFT_WRAP = 1_059
    REPORT = 1_984
    MUTE_LIST = 10_000
    PIN_LIST = 10_001
    RELAY_LIST = 10_002
    BOOKMARKS = 10_003
    AUTHENTICATION = 22_242
    FOLLOW_SETS = 30_000
    RELAY_SETS = 30_002
    BOOKMARK_SETS = 30_003
    LONGFORM_CONTENT = 30_023
    LONGFORM_DRAFT = 30_024
    DATE_BASED_CALENDAR_EVENT = 31_922
    TIME_BASED_CALENDAR_EVENT = 31_923
    CALENDAR = 31_924
    CALENDAR_EVENT_RSVP = 31_925

    @classmethod
    def from_int(cls, value: int) -> EventKind | None:
        """Map a raw kind integer to its semantic kind, or ``None`` if unknown."""
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def is_regular(self) -> bool:
        return is_regular(self.value)

    @property
    def is_normal_replaceable(self) -> bool:
        return is_normal_replaceable(self.value)

    @property
    def is_ephemeral(self) -> bool:
        return is_ephemeral(self.value)

    @property
    def is_addressable(self) -> bool:
        return is_addressable(self.value)
