"""
Coordinates to an addressable or normal replaceable event (NIP-01 ``a`` tags).

Wire shape::

    ["a", "<kind>:<pubkey hex>:<identifier>", <relay url>?]

The identifier is empty for normal replaceable kinds and non-empty for
addressable kinds. Decoding only checks structure (tag name and at least
three colon-delimited segments); every component is exposed through an
independent accessor that returns ``None`` on malformed content, so a
coordinate to a kind or pubkey this library cannot interpret is still kept.

See Also:
    [NIP-01 tags](https://github.com/nostr-protocol/nips/blob/master/01.md#tags):
        Protocol definition of the ``a`` tag.
    [EventKind][nostrtags.models.constants.EventKind]: Semantic kind table
        and replaceability predicates.
    [validate_relay_url][nostrtags.models.relay.validate_relay_url]: Relay
        hint validation shared by decode and construction.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from nostrtags.exceptions import InvalidInputError, InvalidRelayUrlError, MalformedTagError

from ._validation import validate_instance, validate_str_no_null
from .constants import EVENT_KIND_MAX, EventKind, TagName, is_addressable, is_normal_replaceable
from .public_key import PublicKey
from .relay import Relay, validate_relay_url
from .tag import Tag


_SEPARATOR = ":"
_SEGMENT_COUNT = 3


@dataclass(frozen=True, slots=True)
class EventCoordinates:
    """Immutable coordinates to a replaceable event, backed by a raw ``a`` tag.

    The wrapped [Tag][nostrtags.models.tag.Tag] is the single source of
    truth: equality and hashing compare the tag only, never the derived
    fields. The colon-split of the tag value is computed once in
    ``__post_init__`` and cached in a non-compared field.

    The identifier is everything after the second colon, so identifiers
    containing ``:`` survive a round trip through
    [new()][nostrtags.models.event_coordinates.EventCoordinates.new].

    Attributes:
        tag: The underlying ``a`` tag.

    Raises:
        TypeError: If *tag* is not a [Tag][nostrtags.models.tag.Tag].
        MalformedTagError: If the tag name is not ``a`` or the value has
            fewer than three colon-delimited segments.

    Examples:
        ```python
        coords = EventCoordinates.from_list(
            ["a", f"30023:{'ab' * 32}:my-article", "wss://relay.example.com"]
        )
        coords.kind          # EventKind.LONGFORM_CONTENT
        coords.pubkey.hex    # 'abab...'
        coords.identifier    # 'my-article'
        coords.relay_url     # Relay(url='wss://relay.example.com', ...)

        EventCoordinates.from_list(["a", "10002::"]).identifier   # None
        EventCoordinates.from_list(["e", "10002::"])              # None
        ```
    """

    tag: Tag
    _components: tuple[str, ...] = field(
        default=(), init=False, repr=False, compare=False, hash=False
    )

    def __post_init__(self) -> None:
        validate_instance(self.tag, Tag, "tag")
        if self.tag.name != TagName.EVENT_COORDINATES:
            raise MalformedTagError(
                f"Event coordinates tag name must be '{TagName.EVENT_COORDINATES}', "
                f"got '{self.tag.name}'"
            )

        # Empty segments are significant: "<kind>:<pubkey>:" has no identifier
        components = tuple(self.tag.value.split(_SEPARATOR, _SEGMENT_COUNT - 1))
        if len(components) < _SEGMENT_COUNT:
            raise MalformedTagError(
                f"Event coordinates value must have {_SEGMENT_COUNT} ':'-separated parts, "
                f"got {len(components)}"
            )
        object.__setattr__(self, "_components", components)

    # -- Decode -------------------------------------------------------------

    @classmethod
    def from_tag(cls, tag: Tag) -> EventCoordinates | None:
        """Wrap *tag* if it is a structurally valid ``a`` tag, else return ``None``."""
        try:
            return cls(tag)
        except MalformedTagError:
            return None

    @classmethod
    def from_list(cls, values: Sequence[Any]) -> EventCoordinates | None:
        """Decode the wire list form, returning ``None`` if it is not a coordinates tag."""
        try:
            return cls(Tag.from_list(values))
        except MalformedTagError:
            return None

    # -- Derived fields -----------------------------------------------------

    @property
    def coordinate(self) -> str:
        """The raw ``<kind>:<pubkey>:<identifier>`` string."""
        return self.tag.value

    @property
    def kind_number(self) -> int | None:
        """The kind integer, or ``None`` if the kind part is not a valid kind number."""
        raw = self._components[0]
        if not (raw.isascii() and raw.isdigit()):
            return None
        value = int(raw)
        return value if value <= EVENT_KIND_MAX else None

    @property
    def kind(self) -> EventKind | None:
        """The semantic kind, or ``None`` if malformed or not in the kind table."""
        value = self.kind_number
        if value is None:
            return None
        return EventKind.from_int(value)

    @property
    def pubkey(self) -> PublicKey | None:
        """The author of the referenced event, or ``None`` if the pubkey part is malformed."""
        return PublicKey.from_hex(self._components[1])

    @property
    def identifier(self) -> str | None:
        """The ``d`` tag value, or ``None`` for normal replaceable events."""
        return self._components[2] or None

    @property
    def relay_url(self) -> Relay | None:
        """A relay where the referenced event may be found, or ``None`` if absent or invalid."""
        return self.resolve_relay_url()

    def resolve_relay_url(self, *, allow_local: bool = False) -> Relay | None:
        """Validate the relay hint with an explicit local-address policy."""
        if not self.tag.other_parameters:
            return None
        try:
            return validate_relay_url(self.tag.other_parameters[0], allow_local=allow_local)
        except InvalidRelayUrlError:
            return None

    # -- Encode -------------------------------------------------------------

    @classmethod
    def new(
        cls,
        kind: EventKind | int,
        pubkey: PublicKey,
        identifier: str | None = None,
        relay_url: str | Relay | None = None,
        *,
        allow_local: bool = False,
    ) -> EventCoordinates:
        """Build coordinates from typed components.

        Args:
            kind: Kind of the referenced event. Must be addressable when an
                identifier is given, normal replaceable otherwise. Raw
                integers outside the kind table are classified by range.
            pubkey: Author of the referenced event.
            identifier: ``d`` tag value; required (and non-empty) for
                addressable kinds, forbidden for normal replaceable kinds.
            relay_url: Optional relay hint, validated before encoding.
            allow_local: Accept local/private relay hosts.

        Raises:
            TypeError: If *kind* is not an int or *pubkey* not a PublicKey.
            InvalidInputError: If the identifier does not match the kind's
                replaceability class.
            InvalidRelayUrlError: If *relay_url* fails validation.
        """
        if isinstance(kind, bool):
            raise TypeError("kind must be an int, got bool")
        validate_instance(kind, int, "kind")
        validate_instance(pubkey, PublicKey, "pubkey")
        if identifier is not None:
            try:
                validate_str_no_null(identifier, "identifier")
            except ValueError as e:
                raise InvalidInputError(str(e)) from None

        addressable_ok = is_addressable(kind) and bool(identifier)
        replaceable_ok = is_normal_replaceable(kind) and identifier is None
        if not (addressable_ok or replaceable_ok):
            raise InvalidInputError(
                f"Kind {int(kind)} with identifier {identifier!r} does not describe a "
                "replaceable event: addressable kinds require a non-empty identifier, "
                "normal replaceable kinds require none"
            )

        other_parameters: tuple[str, ...] = ()
        if relay_url is not None:
            relay = validate_relay_url(relay_url, allow_local=allow_local)
            other_parameters = (relay.url,)

        tag = Tag(
            name=TagName.EVENT_COORDINATES.value,
            value=f"{int(kind)}{_SEPARATOR}{pubkey.hex}{_SEPARATOR}{identifier or ''}",
            other_parameters=other_parameters,
        )
        return cls(tag)

    def to_list(self) -> list[str]:
        return self.tag.to_list()
