"""
Structured logging for inspection runs.

[Logger][nostrtags.core.logger.Logger] wraps a stdlib ``logging.Logger``
and attaches keyword arguments to each record. In text mode the arguments
travel in the ``structured_kv`` extra field and are rendered by
[StructuredFormatter][nostrtags.core.logger.StructuredFormatter] as
``key=value`` pairs; in JSON mode the whole record is serialized into the
message.

The CLI installs ``StructuredFormatter`` on the root handler, so plain
``logging.getLogger(__name__)`` records from the models layer share the
same ``level name message`` layout.

Examples:
    ```python
    from nostrtags.core.logger import Logger

    logger = Logger("inspector")
    logger.info("tags_inspected", count=3, errors=0)
    # info inspector tags_inspected count=3 errors=0

    Logger("inspector", json_output=True).info("tags_inspected", count=3)
    # {"timestamp": "...", "level": "info", "service": "inspector", ...}
    ```
"""

import datetime
import json
import logging
from typing import Any, ClassVar


def _truncate(value: Any, max_length: int | None) -> Any:
    """Cut the string form of *value* to *max_length* characters, noting the loss."""
    s = str(value)
    if not max_length or len(s) <= max_length:
        return value
    return s[:max_length] + f"...<truncated {len(s) - max_length} chars>"


def format_kv_pairs(kwargs: dict[str, Any], max_value_length: int | None = 1000) -> str:
    """Render *kwargs* as `` key=value`` pairs with a leading space.

    Values that are empty or contain spaces, ``=`` or quotes are wrapped in
    double quotes with backslashes and double quotes escaped. Returns an
    empty string for an empty mapping.
    """
    parts = []
    for key, value in kwargs.items():
        s = str(_truncate(value, max_value_length))
        if not s or any(c in s for c in " =\"'"):
            escaped = s.replace("\\", "\\\\").replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        else:
            parts.append(f"{key}={s}")
    return " " + " ".join(parts) if parts else ""


class StructuredFormatter(logging.Formatter):
    """Render records as ``level name message key=value ...``.

    Records without a ``structured_kv`` extra (plain stdlib loggers) are
    rendered with the same prefix and no pairs.
    """

    def format(self, record: logging.LogRecord) -> str:
        line = f"{record.levelname.lower()} {record.name} {record.getMessage()}"
        return line + format_kv_pairs(getattr(record, "structured_kv", {}))


class Logger:
    """Structured logger: ``logger.info("event_name", key=value, ...)``.

    Args:
        name: Name passed to ``logging.getLogger``.
        json_output: Serialize each record as a JSON object instead of
            attaching ``key=value`` pairs.
        max_value_length: Truncation limit for individual values in text
            mode. Defaults to 1000 characters.
    """

    _DEFAULT_MAX_VALUE_LENGTH: ClassVar[int] = 1000

    def __init__(
        self,
        name: str,
        *,
        json_output: bool = False,
        max_value_length: int | None = None,
    ) -> None:
        self._logger = logging.getLogger(name)
        self._json_output = json_output
        self._max_value_length = (
            self._DEFAULT_MAX_VALUE_LENGTH if max_value_length is None else max_value_length
        )

    def _log(self, level: int, msg: str, kwargs: dict[str, Any]) -> None:
        if self._json_output:
            record = {
                "timestamp": datetime.datetime.now(datetime.UTC).isoformat(),
                "level": logging.getLevelName(level).lower(),
                "service": self._logger.name,
                "message": msg,
                **kwargs,
            }
            self._logger.log(level, json.dumps(record, default=str))
            return

        extra: dict[str, Any] = {}
        if kwargs:
            extra["structured_kv"] = {
                key: _truncate(value, self._max_value_length) for key, value in kwargs.items()
            }
        self._logger.log(level, msg, extra=extra)

    def debug(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, msg, kwargs)

    def info(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.INFO, msg, kwargs)

    def error(self, msg: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, msg, kwargs)
