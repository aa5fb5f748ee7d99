"""Frozen dataclasses with zero I/O for Nostr tags and their interpretations.

The models layer is the foundation of the package. It depends only on the
standard library, [nostrtags.exceptions][], ``rfc3986`` for relay URL
parsing, and ``nostr_sdk`` for interop conversions. Every model uses
``@dataclass(frozen=True, slots=True)`` for immutability and memory
efficiency, and all structural validation happens in ``__post_init__`` so
invalid instances never escape the constructor.

Attributes:
    Tag: Generic ``[name, value, *other_parameters]`` tag with list, JSON,
        and ``nostr_sdk.Tag`` encodings.
    PublicKey: 32-byte public key in lowercase hex form.
    EventKind: Semantic table of well-known event kinds with NIP-01
        replaceability predicates.
    TagName: Reserved tag names (``e``, ``p``, ``a``, ``d``, ...).
    Relay: Validated, normalized relay URL with network detection.
    ReferenceTag: Decoded ``e``/``p`` reference with optional relay hint.
    EventCoordinates: Decoded ``a`` tag with lazily interpreted kind,
        pubkey, identifier, and relay hint.

Note:
    Models use ``object.__setattr__`` in ``__post_init__`` to set computed
    fields on frozen dataclasses. This is safe because ``__post_init__``
    runs during ``__init__`` before the instance is exposed to external code.

See Also:
    [nostrtags.models.event_tags][]: Tag-collection accessors that apply
        these models to a whole event.
"""

from .constants import (
    EVENT_KIND_MAX,
    EventKind,
    TagName,
    is_addressable,
    is_ephemeral,
    is_normal_replaceable,
    is_regular,
)
from .event_coordinates import EventCoordinates
from .event_tags import (
    referenced_event_coordinates,
    referenced_events,
    referenced_pubkeys,
    tags_from_event,
)
from .public_key import PublicKey
from .reference_tag import ReferenceKind, ReferenceTag
from .relay import NetworkType, Relay, validate_relay_url
from .tag import Tag


__all__ = [
    "EVENT_KIND_MAX",
    "EventCoordinates",
    "EventKind",
    "NetworkType",
    "PublicKey",
    "ReferenceKind",
    "ReferenceTag",
    "Relay",
    "Tag",
    "TagName",
    "is_addressable",
    "is_ephemeral",
    "is_normal_replaceable",
    "is_regular",
    "referenced_event_coordinates",
    "referenced_events",
    "referenced_pubkeys",
    "tags_from_event",
    "validate_relay_url",
]
