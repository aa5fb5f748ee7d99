r"""nostrtags -- Typed interpretation of Nostr (NIP-01) tags.

Decodes the structured tag shapes carried by Nostr events: ``e``/``p``
references to events and public keys, and ``a`` coordinates to replaceable
events, with relay hint validation and ``nostr_sdk`` interop.

Architecture follows a layered dependency structure where imports flow
strictly downward:

```text
              services         Tag inspection (reports for the CLI)
                 |
               core            Logging, YAML loading, configuration
                 |
              models           Frozen dataclasses (zero I/O)
                 |
            exceptions         Error hierarchy
```

Attributes:
    models: Tag, PublicKey, EventKind, Relay, ReferenceTag, EventCoordinates.
    core: Structured logger, YAML loading, pydantic configuration.
    services: [TagInspector][nostrtags.services.inspector.TagInspector].

Note:
    Top-level imports (``from nostrtags import EventCoordinates``) use lazy
    loading and resolve on first access.
"""

import importlib
from importlib.metadata import version as _get_version


__version__ = _get_version("nostrtags")

__all__ = [
    "ConfigurationError",
    "EventCoordinates",
    "EventKind",
    "InspectorConfig",
    "InvalidInputError",
    "InvalidRelayUrlError",
    "Logger",
    "MalformedTagError",
    "NetworkType",
    "NostrTagsError",
    "PublicKey",
    "ReferenceKind",
    "ReferenceTag",
    "Relay",
    "Tag",
    "TagInspector",
    "TagName",
]

_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "ConfigurationError": ("nostrtags.exceptions", "ConfigurationError"),
    "InvalidInputError": ("nostrtags.exceptions", "InvalidInputError"),
    "InvalidRelayUrlError": ("nostrtags.exceptions", "InvalidRelayUrlError"),
    "MalformedTagError": ("nostrtags.exceptions", "MalformedTagError"),
    "NostrTagsError": ("nostrtags.exceptions", "NostrTagsError"),
    "EventCoordinates": ("nostrtags.models", "EventCoordinates"),
    "EventKind": ("nostrtags.models", "EventKind"),
    "NetworkType": ("nostrtags.models", "NetworkType"),
    "PublicKey": ("nostrtags.models", "PublicKey"),
    "ReferenceKind": ("nostrtags.models", "ReferenceKind"),
    "ReferenceTag": ("nostrtags.models", "ReferenceTag"),
    "Relay": ("nostrtags.models", "Relay"),
    "Tag": ("nostrtags.models", "Tag"),
    "TagName": ("nostrtags.models", "TagName"),
    "InspectorConfig": ("nostrtags.core", "InspectorConfig"),
    "Logger": ("nostrtags.core", "Logger"),
    "TagInspector": ("nostrtags.services", "TagInspector"),
}


def __getattr__(name: str) -> object:
    if name in _LAZY_IMPORTS:
        module_path, attr_name = _LAZY_IMPORTS[name]
        module = importlib.import_module(module_path)
        value = getattr(module, attr_name)
        globals()[name] = value  # Cache for subsequent access
        return value
    raise AttributeError(f"module 'nostrtags' has no attribute {name!r}")


def __dir__() -> list[str]:
    return __all__
