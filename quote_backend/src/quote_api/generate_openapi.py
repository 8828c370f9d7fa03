"""
Write the OpenAPI schema of the quote backend to disk.

Usage:
    python -m src.quote_api.generate_openapi [OUTPUT_PATH]

Without an argument the schema goes to interfaces/openapi.json under the
backend root (the directory holding ``src``).
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .main import app, openapi_tags

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path(__file__).resolve().parents[2] / "interfaces" / "openapi.json"


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Add any tag from ``openapi_tags`` missing in the schema. Existing tag
    definitions are left as they are.
    """
    tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    names = {t.get("name") for t in tags if isinstance(t, dict)}
    tags.extend(tag for tag in openapi_tags if tag.get("name") not in names)
    if tags:
        schema["tags"] = tags


# PUBLIC_INTERFACE
def generate_openapi(output: Optional[Path] = None) -> Path:
    """Generate the OpenAPI schema file and return the written file path."""
    out_path = Path(output) if output is not None else DEFAULT_OUTPUT
    schema = app.openapi()
    _ensure_tags(schema)

    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    logger.info("Wrote OpenAPI schema to %s", out_path)
    return out_path


def main(argv: Optional[List[str]] = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    path = generate_openapi(Path(args[0]) if args else None)
    print(f"Wrote OpenAPI schema to: {path}")


if __name__ == "__main__":
    main()
