"""
Generic reference tags pointing to events (``e``) or public keys (``p``).

Wire shape: ``["e"|"p", <target id>, <relay hint>?, ...]``. Neither the
target id nor the relay hint is validated at this layer; callers that need a
validated relay pass the hint through
[validate_relay_url][nostrtags.models.relay.validate_relay_url].

Unknown discriminators are decoded leniently as event references. The raw
discriminator is preserved in
[ReferenceTag.discriminator][nostrtags.models.reference_tag.ReferenceTag] and
[is_fallback][nostrtags.models.reference_tag.ReferenceTag.is_fallback] makes
the coercion visible; ``strict=True`` rejects such tags instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from nostrtags.exceptions import MalformedTagError

from .constants import TagName
from .tag import Tag


_MIN_REFERENCE_LENGTH = 2


class ReferenceKind(StrEnum):
    """Entity a reference tag points to.

    Attributes:
        EVENT: ``e`` -- an event id. Also the fallback for unknown discriminators.
        PUBKEY: ``p`` -- a public key.
    """

    EVENT = TagName.EVENT.value
    PUBKEY = TagName.PUBKEY.value


@dataclass(frozen=True, slots=True)
class ReferenceTag:
    """Immutable reference to an event or a public key.

    Attributes:
        kind: Which entity the tag points to.
        target_id: Hex id of the referenced event or public key (unvalidated).
        recommended_relay_url: Relay hint, present iff the source tag had a
            third element (unvalidated).
        discriminator: The raw first element of the source tag. Defaults to
            ``kind.value`` when the reference is built directly.

    Examples:
        ```python
        ref = ReferenceTag.decode(["p", "ab" * 32, "wss://relay.example.com"])
        ref.kind                    # ReferenceKind.PUBKEY
        ref.recommended_relay_url   # 'wss://relay.example.com'

        ref = ReferenceTag.decode(["x", "deadbeef"])
        ref.kind          # ReferenceKind.EVENT
        ref.is_fallback   # True
        ```
    """

    kind: ReferenceKind
    target_id: str
    recommended_relay_url: str | None = None
    discriminator: str = field(default=None)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ReferenceKind):
            raise TypeError(f"kind must be a ReferenceKind, got {type(self.kind).__name__}")
        if self.discriminator is None:
            object.__setattr__(self, "discriminator", self.kind.value)

    @property
    def is_fallback(self) -> bool:
        """True if the discriminator was unknown and coerced to ``EVENT``."""
        return self.discriminator != self.kind.value

    @classmethod
    def decode(cls, values: Sequence[Any], *, strict: bool = False) -> ReferenceTag:
        """Decode the wire list form of a reference tag.

        Args:
            values: ``[discriminator, target_id, relay_hint?, ...]``.
            strict: Reject discriminators other than ``e`` and ``p``
                instead of coercing them to ``EVENT``.

        Raises:
            MalformedTagError: If fewer than two elements are present, a
                used element is not a string, or *strict* is set and the
                discriminator is unknown.
        """
        if isinstance(values, str) or not isinstance(values, Sequence):
            raise MalformedTagError(f"Reference tag must be a list, got {type(values).__name__}")
        if len(values) < _MIN_REFERENCE_LENGTH:
            raise MalformedTagError(
                f"Reference tag requires a discriminator and a target id, got {len(values)} element(s)"
            )

        used = values[:3]
        for i, value in enumerate(used):
            if not isinstance(value, str):
                raise MalformedTagError(
                    f"Reference tag element {i} must be a str, got {type(value).__name__}"
                )

        discriminator = used[0]
        try:
            kind = ReferenceKind(discriminator)
        except ValueError:
            if strict:
                raise MalformedTagError(f"Unknown reference discriminator: {discriminator!r}") from None
            kind = ReferenceKind.EVENT

        return cls(
            kind=kind,
            target_id=used[1],
            recommended_relay_url=used[2] if len(used) > _MIN_REFERENCE_LENGTH else None,
            discriminator=discriminator,
        )

    @classmethod
    def parse(cls, values: Sequence[Any], *, strict: bool = False) -> ReferenceTag | None:
        """Lenient form of [decode()][nostrtags.models.reference_tag.ReferenceTag.decode].

        Returns ``None`` for structurally invalid input instead of raising.
        """
        try:
            return cls.decode(values, strict=strict)
        except MalformedTagError:
            return None

    @classmethod
    def from_tag(cls, tag: Tag, *, strict: bool = False) -> ReferenceTag | None:
        """Interpret a generic [Tag][nostrtags.models.tag.Tag] as a reference."""
        return cls.parse(tag.to_list(), strict=strict)

    def to_list(self) -> list[str]:
        """Encode to the wire list form, preserving the raw discriminator."""
        values = [self.discriminator, self.target_id]
        if self.recommended_relay_url is not None:
            values.append(self.recommended_relay_url)
        return values

    def to_tag(self) -> Tag:
        return Tag.from_list(self.to_list())
