"""Tests for renderer.render."""

import json

import pytest

from indexly.services.renderer import render, render_js, render_json

_ARTIFACT = {"version": "2.3.9", "fields": ["title"], "invertedIndex": []}


class TestRender:
    def test_json_round_trips(self):
        assert json.loads(render_json(_ARTIFACT)) == _ARTIFACT

    def test_js_assigns_window_search_index(self):
        script = render_js(_ARTIFACT)
        assert script.startswith("window.searchIndex = ")
        assert script.endswith(";")

    def test_js_custom_variable(self):
        assert render_js({}, variable="var idx").startswith("var idx = ")

    def test_keeps_non_ascii_text(self):
        assert "café" in render_json({"t": "café"})

    def test_dispatches_on_format(self):
        assert render(_ARTIFACT, "json") == render_json(_ARTIFACT)
        assert render(_ARTIFACT, "js") == render_js(_ARTIFACT)

    def test_unknown_format_raises(self):
        with pytest.raises(ValueError):
            render(_ARTIFACT, "xml")
