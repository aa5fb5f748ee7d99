"""CLI entry point for tag inspection.

Reads a JSON document (a single tag, a list of tags, or an event object
with a ``tags`` array) from a file or standard input and prints one JSON
report per tag.

Examples:
    ```bash
    python -m nostrtags event.json
    echo '["a", "30023:<pubkey hex>:my-article"]' | python -m nostrtags
    python -m nostrtags --config config/inspector.yaml --log-level DEBUG tags.json
    ```
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from nostrtags.core.config import InspectorConfig
from nostrtags.core.logger import Logger, StructuredFormatter
from nostrtags.exceptions import ConfigurationError, MalformedTagError
from nostrtags.services.inspector import TagInspector


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="nostrtags",
        description="Decode Nostr reference and event-coordinate tags",
    )

    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="JSON file to inspect (default: read standard input)",
    )

    parser.add_argument(
        "--config",
        type=Path,
        help="Inspector config path (YAML)",
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides the config file)",
    )

    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit JSON log lines (overrides the config file)",
    )

    return parser.parse_args(argv)


def setup_logging(level: str) -> None:
    """Configure the root logger with structured formatting on standard error.

    Installs a ``StructuredFormatter`` on the root handler so that output
    from ``Logger`` and from plain ``logging.getLogger()`` calls in the
    models layer is unified as ``level name message key=value ...``.
    """
    logging.root.setLevel(getattr(logging, level))
    if any(isinstance(h.formatter, StructuredFormatter) for h in logging.root.handlers):
        return
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(StructuredFormatter())
    logging.root.addHandler(handler)


def load_config(args: argparse.Namespace) -> InspectorConfig:
    """Build the effective configuration from the config file and CLI overrides.

    Raises:
        ConfigurationError: If the config file is missing or invalid.
    """
    if args.config is None:
        data: dict = {}
    else:
        try:
            data = InspectorConfig.from_yaml(str(args.config)).model_dump()
        except FileNotFoundError as e:
            raise ConfigurationError(str(e)) from e

    logging_section = data.setdefault("logging", {})
    if args.log_level:
        logging_section["level"] = args.log_level
    if args.json_logs:
        logging_section["json_output"] = True
    return InspectorConfig.from_dict(data)


def main(argv: list[str] | None = None) -> int:
    """Main entry point: parse args, load config, inspect, and print reports."""
    args = parse_args(argv)

    try:
        config = load_config(args)
    except ConfigurationError as e:
        setup_logging("ERROR")
        Logger("cli", json_output=args.json_logs).error("config_failed", error=str(e))
        return 1

    setup_logging(config.logging.level)
    logger = Logger("cli", json_output=config.logging.json_output)

    try:
        data = args.input.read_text(encoding="utf-8") if args.input else sys.stdin.read()
    except OSError as e:
        logger.error("input_failed", path=str(args.input), error=str(e))
        return 1

    inspector = TagInspector(config)
    try:
        reports = inspector.inspect_json(data)
    except MalformedTagError as e:
        logger.error("input_invalid", error=str(e))
        return 1

    for report in reports:
        print(json.dumps(report))
    return 0


def cli() -> None:
    """Synchronous entry point for console_scripts."""
    sys.exit(main())


if __name__ == "__main__":
    cli()
