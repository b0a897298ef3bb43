"""CLI entrypoint: build a search index file from an exported page collection."""

import argparse
import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from pydantic import ValidationError

from indexly.log import configure_logging
from indexly.models.page import PageModel
from indexly.services.collector import build_index
from indexly.services.indexer import IndexerError
from indexly.services.renderer import render

logger = logging.getLogger(__name__)

_DEFAULT_OUTPUTS = {"json": "search_index.json", "js": "search_index.js"}


def load_pages(path: Path) -> List[PageModel]:
    """Read pages from *path*.

    The file holds either a JSON array of pages or an object with a
    ``pages`` array (a section export).
    """
    payload: Any = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(payload, dict):
        payload = payload.get("pages", [])
    if not isinstance(payload, list):
        raise ValueError(f"{path} does not contain a list of pages")
    return [PageModel.model_validate(item) for item in payload]


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Build a client-side search index from site pages")
    parser.add_argument("--pages", required=True, help="JSON file with the ordered page collection")
    parser.add_argument("--output", default=None, help="Where to write the index (default depends on --format)")
    parser.add_argument("--format", choices=sorted(_DEFAULT_OUTPUTS), default="json", help="Output file format")
    parser.add_argument(
        "--include-permalink",
        action="store_true",
        help="Copy each page's permalink into its search document",
    )
    args = parser.parse_args(argv)

    configure_logging()

    output = Path(args.output or _DEFAULT_OUTPUTS[args.format])
    try:
        pages = load_pages(Path(args.pages))
    except (OSError, ValueError, ValidationError) as exc:
        logger.error("Cannot read pages from %s: %s", args.pages, exc)
        return 1

    try:
        artifact = build_index(pages, include_permalink=args.include_permalink)
    except IndexerError as exc:
        logger.error("Index generation failed: %s", exc)
        return 1

    output.write_text(render(artifact, args.format), encoding="utf-8")

    summary = {"documents_indexed": len(pages), "output": str(output), "format": args.format}
    print(json.dumps(summary, ensure_ascii=True, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
