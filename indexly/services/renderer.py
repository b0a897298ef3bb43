"""Rendering of index artifacts into the files a static site ships."""

import json
from typing import Any, Literal

OutputFormat = Literal["json", "js"]

# Global the search widget reads the index from
DEFAULT_JS_VARIABLE = "window.searchIndex"


def render_json(artifact: Any) -> str:
    return json.dumps(artifact, ensure_ascii=False, separators=(",", ":"))


def render_js(artifact: Any, variable: str = DEFAULT_JS_VARIABLE) -> str:
    """Return a script assigning the artifact to *variable*."""
    return f"{variable} = {render_json(artifact)};"


def render(artifact: Any, fmt: str) -> str:
    """Render *artifact* as ``"json"`` or ``"js"``."""
    if fmt == "json":
        return render_json(artifact)
    if fmt == "js":
        return render_js(artifact)
    raise ValueError(f"Unsupported output format: {fmt!r}")
