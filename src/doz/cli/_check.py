"""``doz check`` — validate a JSON document against a schema.

Resolves the schema import string, loads the document, prints the
result as JSON to stdout. Exits with code 1 if validation fails.
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any
from urllib.parse import SplitResult

from doz.aggregate import validate
from doz.cli._resolve import resolve_schema
from doz.config import ValidationConfig
from doz.rules.temporal import isoformat

logger = logging.getLogger("doz.cli")


def _load_document(source: str) -> Any:
    if source == "-":
        return json.load(sys.stdin)
    return json.loads(Path(source).read_text(encoding="utf-8"))


def _jsonable(value: Any) -> Any:
    """Make coerced rule outputs printable (parsed URLs are tuples to json)."""
    if isinstance(value, SplitResult):
        return value.geturl()
    if isinstance(value, datetime):
        return isoformat(value)
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [_jsonable(item) for item in value]
    return value


def run_check(args: argparse.Namespace) -> None:
    """Validate ``args.file`` against the schema named by ``args.schema``."""
    try:
        schema = resolve_schema(args.schema)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    try:
        document = _load_document(args.file)
    except (OSError, json.JSONDecodeError) as exc:
        print(f"Error: cannot read {args.file}: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if not isinstance(document, dict):
        print("Error: document must be a JSON object", file=sys.stderr)
        raise SystemExit(1)

    result = validate(document, schema, ValidationConfig(flag_policy=args.policy))
    logger.debug("Checked %s against %s: valid=%s", args.file, args.schema, result.valid)

    print(json.dumps(_jsonable(result.to_dict()), indent=2, default=str))
    if not result:
        raise SystemExit(1)
