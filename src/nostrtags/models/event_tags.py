"""Tolerant tag-collection accessors.

Turns the raw tag list of an event into typed interpretations, keeping only
the tags that apply. Structurally invalid entries are logged at DEBUG level
and skipped: a single malformed tag must not make the rest of an event
unreadable.

Examples:
    ```python
    from nostrtags.models.event_tags import referenced_event_coordinates, tags_from_event

    tags = tags_from_event(nostr_event)
    for coords in referenced_event_coordinates(tags):
        print(coords.kind, coords.identifier)
    ```
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from nostrtags.exceptions import MalformedTagError

from .constants import TagName
from .event_coordinates import EventCoordinates
from .reference_tag import ReferenceKind, ReferenceTag
from .tag import Tag


if TYPE_CHECKING:
    from nostr_sdk import Event as NostrEvent

logger = logging.getLogger(__name__)


def coerce_tags(tags: Iterable[Tag | Sequence[Any]]) -> list[Tag]:
    """Normalize a mix of [Tag][nostrtags.models.tag.Tag] objects and wire lists.

    Wire lists that cannot be decoded are logged and discarded.
    """
    results: list[Tag] = []
    for item in tags:
        if isinstance(item, Tag):
            results.append(item)
            continue
        try:
            results.append(Tag.from_list(item))
        except MalformedTagError as e:
            logger.debug("tag_skipped tag=%r error=%s", item, e)
    return results


def tags_from_event(event: NostrEvent) -> list[Tag]:
    """Extract the tags of a ``nostr_sdk.Event`` as [Tag][nostrtags.models.tag.Tag] objects."""
    return coerce_tags(list(tag.to_vec()) for tag in event.tags().to_vec())


def referenced_event_coordinates(tags: Iterable[Tag | Sequence[Any]]) -> list[EventCoordinates]:
    """Return the structurally valid ``a`` tags as [EventCoordinates][nostrtags.models.event_coordinates.EventCoordinates]."""
    results: list[EventCoordinates] = []
    for tag in coerce_tags(tags):
        if tag.name != TagName.EVENT_COORDINATES:
            continue
        coords = EventCoordinates.from_tag(tag)
        if coords is None:
            logger.debug("coordinates_skipped value=%r", tag.value)
            continue
        results.append(coords)
    return results


def _references(tags: Iterable[Tag | Sequence[Any]], kind: ReferenceKind) -> list[ReferenceTag]:
    results: list[ReferenceTag] = []
    for tag in coerce_tags(tags):
        if tag.name != kind.value:
            continue
        # Tag guarantees two string elements, so strict decoding cannot fail here
        results.append(ReferenceTag.decode(tag.to_list(), strict=True))
    return results


def referenced_events(tags: Iterable[Tag | Sequence[Any]]) -> list[ReferenceTag]:
    """Return every ``e`` tag as a [ReferenceTag][nostrtags.models.reference_tag.ReferenceTag]."""
    return _references(tags, ReferenceKind.EVENT)


def referenced_pubkeys(tags: Iterable[Tag | Sequence[Any]]) -> list[ReferenceTag]:
    """Return every ``p`` tag as a [ReferenceTag][nostrtags.models.reference_tag.ReferenceTag]."""
    return _references(tags, ReferenceKind.PUBKEY)


__all__ = [
    "coerce_tags",
    "referenced_event_coordinates",
    "referenced_events",
    "referenced_pubkeys",
    "tags_from_event",
]
