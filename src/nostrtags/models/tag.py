"""
Generic Nostr tag: an ordered list of strings attached to an event.

A tag is ``[name, value, *other_parameters]``. This module only handles the
generic shape and its wire encodings (Python list, JSON array,
``nostr_sdk.Tag``); structured interpretations live in
[nostrtags.models.reference_tag][] and [nostrtags.models.event_coordinates][].
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from nostr_sdk import Tag as NostrTag

from nostrtags.exceptions import MalformedTagError

from ._validation import validate_str_no_null


_MIN_TAG_LENGTH = 2


@dataclass(frozen=True, slots=True)
class Tag:
    """Immutable Nostr tag.

    Attributes:
        name: First element of the tag (e.g. ``"e"``, ``"p"``, ``"a"``).
        value: Second element of the tag.
        other_parameters: Remaining elements, in order.

    Raises:
        TypeError: If any element is not a string, or *other_parameters*
            is a bare string instead of a sequence of strings.
        ValueError: If any element contains null bytes.

    Examples:
        ```python
        tag = Tag.from_list(["e", "ab" * 32, "wss://relay.example.com"])
        tag.name               # 'e'
        tag.other_parameters   # ('wss://relay.example.com',)
        tag.to_list()          # ['e', 'abab...', 'wss://relay.example.com']
        ```
    """

    name: str
    value: str
    other_parameters: tuple[str, ...] = field(default=())

    def __post_init__(self) -> None:
        validate_str_no_null(self.name, "name")
        validate_str_no_null(self.value, "value")
        if isinstance(self.other_parameters, str):
            raise TypeError("other_parameters must be a sequence of str, got str")
        # Accept any sequence but store a tuple so the tag stays hashable
        object.__setattr__(self, "other_parameters", tuple(self.other_parameters))
        for i, param in enumerate(self.other_parameters):
            validate_str_no_null(param, f"other_parameters[{i}]")

    @classmethod
    def from_list(cls, values: Sequence[Any]) -> Tag:
        """Decode the wire list form ``[name, value, *other_parameters]``.

        Raises:
            MalformedTagError: If fewer than two elements are present, or an
                element is not a null-free string.
        """
        if isinstance(values, str) or not isinstance(values, Sequence):
            raise MalformedTagError(f"Tag must be a list of strings, got {type(values).__name__}")
        if len(values) < _MIN_TAG_LENGTH:
            raise MalformedTagError(f"Tag requires a name and a value, got {len(values)} element(s)")
        try:
            return cls(values[0], values[1], tuple(values[2:]))
        except (TypeError, ValueError) as e:
            raise MalformedTagError(str(e)) from None

    def to_list(self) -> list[str]:
        return [self.name, self.value, *self.other_parameters]

    @classmethod
    def from_json(cls, data: str) -> Tag:
        """Decode a JSON array such as ``'["p", "abcd..."]'``.

        Raises:
            MalformedTagError: If the JSON is invalid or not a valid tag list.
        """
        try:
            values = json.loads(data)
        except json.JSONDecodeError as e:
            raise MalformedTagError(f"Invalid tag JSON: {e}") from None
        if not isinstance(values, list):
            raise MalformedTagError("Tag JSON must be an array")
        return cls.from_list(values)

    def to_json(self) -> str:
        return json.dumps(self.to_list())

    @classmethod
    def from_nostr(cls, tag: NostrTag) -> Tag:
        """Convert a ``nostr_sdk.Tag`` via its ``to_vec()`` representation."""
        return cls.from_list(list(tag.to_vec()))

    def to_nostr(self) -> NostrTag:
        """Convert to a ``nostr_sdk.Tag``."""
        return NostrTag.parse(self.to_list())
