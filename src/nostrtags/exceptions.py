"""nostrtags exception hierarchy.

Provides typed exceptions for the two failure families of tag handling:
structural decode failures on untrusted wire data, and invariant
violations on typed, caller-supplied input. Both families subclass
``ValueError`` so model constructors keep the usual ``ValueError``
contract.

Exception hierarchy:

```text
NostrTagsError (base -- never raised directly)
├── ConfigurationError        -- config validation, bad YAML
├── MalformedTagError         -- wrong tag name, too few elements/segments
└── InvalidInputError         -- typed constructor invariant violated
    └── InvalidRelayUrlError  -- relay URL rejected by validation
```

This module sits below every other layer and imports nothing from the
package, so it can be used from [nostrtags.models][] as well as from
[nostrtags.core][] and [nostrtags.services][].

See Also:
    [EventCoordinates][nostrtags.models.event_coordinates.EventCoordinates]:
        Raises [MalformedTagError][nostrtags.exceptions.MalformedTagError]
        on structurally invalid tags and
        [InvalidInputError][nostrtags.exceptions.InvalidInputError] from
        its typed constructor.
    [ReferenceTag][nostrtags.models.reference_tag.ReferenceTag]: Raises
        [MalformedTagError][nostrtags.exceptions.MalformedTagError] when
        required elements are missing.
    [Relay][nostrtags.models.relay.Relay]: Raises
        [InvalidRelayUrlError][nostrtags.exceptions.InvalidRelayUrlError].
"""

from __future__ import annotations


class NostrTagsError(Exception):
    """Base exception for all nostrtags errors.

    Never raised directly -- always use a specific subclass.
    """


# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------


class ConfigurationError(NostrTagsError):
    """Invalid or missing configuration (YAML, CLI flags).

    See Also:
        [InspectorConfig][nostrtags.core.config.InspectorConfig]: Pydantic
            model whose validation failures are wrapped in this exception.
    """


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------


class MalformedTagError(NostrTagsError, ValueError):
    """A tag is structurally unusable for the requested interpretation.

    Raised for missing required elements, non-string elements, a tag name
    that does not match, or a composite value with too few segments.
    Lenient entry points (``from_tag``, ``parse``) convert it to ``None``.
    """


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class InvalidInputError(NostrTagsError, ValueError):
    """Typed input violates a construction invariant.

    Signals a caller error rather than bad wire data, e.g. an identifier
    supplied for a normal replaceable kind.
    """


class InvalidRelayUrlError(InvalidInputError):
    """A relay URL is malformed, uses a disallowed scheme, or points to a local host.

    See Also:
        [validate_relay_url][nostrtags.models.relay.validate_relay_url]:
            The validator that raises this exception.
    """
