"""Services layer: components that combine models, configuration, and logging.

Attributes:
    TagInspector: Decodes raw tags into JSON-serializable reports.
        See [TagInspector][nostrtags.services.inspector.TagInspector].
"""

from .inspector import TagInspector


__all__ = ["TagInspector"]
