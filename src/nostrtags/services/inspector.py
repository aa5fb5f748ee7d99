"""Tag inspection: decode raw tags into JSON-serializable reports.

[TagInspector][nostrtags.services.inspector.TagInspector] applies the
typed interpretations of the models layer to raw tag lists and renders
the result as plain dictionaries, suitable for printing or for feeding
into other tooling. Inspection never raises on bad input: structural
failures are reported in an ``error`` field and counted in the summary
log line.

Examples:
    ```python
    inspector = TagInspector()
    inspector.inspect(["a", f"30023:{'ab' * 32}:my-article"])
    # {'type': 'coordinates', 'tag': [...], 'kind': 30023,
    #  'kind_name': 'LONGFORM_CONTENT', 'pubkey': 'abab...',
    #  'identifier': 'my-article', 'relay_url': None, ...}
    ```
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from typing import Any

from nostrtags.core.config import InspectorConfig
from nostrtags.core.logger import Logger
from nostrtags.exceptions import InvalidRelayUrlError, MalformedTagError
from nostrtags.models import (
    EventCoordinates,
    ReferenceTag,
    Tag,
    TagName,
    is_addressable,
    is_normal_replaceable,
    validate_relay_url,
)


_REFERENCE_NAMES = frozenset({TagName.EVENT.value, TagName.PUBKEY.value})


class TagInspector:
    """Decode raw tags according to an [InspectorConfig][nostrtags.core.config.InspectorConfig].

    Attributes:
        config: The active configuration.
    """

    def __init__(self, config: InspectorConfig | None = None) -> None:
        self.config = config or InspectorConfig()
        self._logger = Logger("inspector", json_output=self.config.logging.json_output)

    def inspect(self, values: Sequence[Any]) -> dict[str, Any]:
        """Decode a single raw tag into a report dictionary.

        The report always carries ``type`` (``coordinates``, ``reference``,
        ``tag`` or ``invalid``) and ``tag`` (the raw input).
        """
        try:
            tag = Tag.from_list(values)
        except MalformedTagError as e:
            self._logger.debug("tag_invalid", error=str(e))
            return {"type": "invalid", "tag": _raw(values), "error": str(e)}

        if tag.name == TagName.EVENT_COORDINATES:
            return self._inspect_coordinates(tag)
        if tag.name in _REFERENCE_NAMES:
            return self._inspect_reference(tag)
        return {"type": "tag", "tag": tag.to_list(), "name": tag.name, "value": tag.value}

    def inspect_many(self, tags: Iterable[Sequence[Any]]) -> list[dict[str, Any]]:
        """Inspect every tag and log a summary line."""
        reports = [self.inspect(values) for values in tags]
        errors = sum(1 for report in reports if "error" in report)
        self._logger.info("tags_inspected", count=len(reports), errors=errors)
        return reports

    def inspect_json(self, data: str) -> list[dict[str, Any]]:
        """Inspect a JSON document holding a tag, a list of tags, or an event object.

        Raises:
            MalformedTagError: If the document is not valid JSON or none of
                the accepted shapes.
        """
        try:
            document = json.loads(data)
        except json.JSONDecodeError as e:
            raise MalformedTagError(f"Invalid JSON input: {e}") from None

        if isinstance(document, dict):
            tags = document.get("tags")
            if not isinstance(tags, list):
                raise MalformedTagError("Event object must contain a 'tags' array")
            return self.inspect_many(tags)
        if isinstance(document, list):
            # A single tag starts with its name; anything else is a list of tags
            if document and isinstance(document[0], str):
                return self.inspect_many([document])
            return self.inspect_many(document)
        raise MalformedTagError(
            f"Expected a tag, a list of tags, or an event object, got {type(document).__name__}"
        )

    def _inspect_coordinates(self, tag: Tag) -> dict[str, Any]:
        coords = EventCoordinates.from_tag(tag)
        if coords is None:
            error = "not a valid event coordinates value"
            self._logger.debug("coordinates_invalid", value=tag.value)
            return {"type": "invalid", "tag": tag.to_list(), "error": error}

        kind_number = coords.kind_number
        kind = coords.kind
        pubkey = coords.pubkey
        relay = coords.resolve_relay_url(allow_local=self.config.relay.allow_local)
        replaceability = None
        if kind_number is not None:
            if is_addressable(kind_number):
                replaceability = "addressable"
            elif is_normal_replaceable(kind_number):
                replaceability = "normal_replaceable"
            else:
                replaceability = "not_replaceable"
        return {
            "type": "coordinates",
            "tag": tag.to_list(),
            "kind": kind_number,
            "kind_name": kind.name if kind is not None else None,
            "replaceability": replaceability,
            "pubkey": pubkey.hex if pubkey is not None else None,
            "identifier": coords.identifier,
            "relay_url": relay.url if relay is not None else None,
        }

    def _inspect_reference(self, tag: Tag) -> dict[str, Any]:
        # Dispatch guarantees an "e" or "p" name, so decoding cannot fail
        reference = ReferenceTag.decode(tag.to_list(), strict=True)

        relay_url = None
        if reference.recommended_relay_url:
            try:
                relay_url = validate_relay_url(
                    reference.recommended_relay_url,
                    allow_local=self.config.relay.allow_local,
                ).url
            except InvalidRelayUrlError as e:
                self._logger.debug(
                    "relay_hint_invalid", url=reference.recommended_relay_url, error=str(e)
                )
        return {
            "type": "reference",
            "tag": tag.to_list(),
            "kind": reference.kind.name.lower(),
            "target_id": reference.target_id,
            "recommended_relay_url": reference.recommended_relay_url,
            "relay_url": relay_url,
        }


def _raw(values: Any) -> Any:
    """Return *values* as a JSON-friendly list when possible."""
    if isinstance(values, Sequence) and not isinstance(values, str):
        return list(values)
    return values
