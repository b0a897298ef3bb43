"""Tests for indexer.lunr_index."""

from unittest.mock import patch

import pytest
from lunr import __TARGET_JS_VERSION__
from lunr.index import Index

from indexly.services.indexer import IndexerError, lunr_index

_FIELDS = ("title", "content", "permalink")


def _docs():
    return [
        {"id": "1", "title": "Static sites", "content": "Generators render Markdown", "extra": {}},
        {"id": "2", "title": "Search widgets", "content": "Lunr runs in the browser", "extra": {}},
    ]


class TestLunrIndex:
    def test_serialized_index_declares_fields(self):
        serialized = lunr_index(_docs(), _FIELDS)
        assert serialized["fields"] == list(_FIELDS)

    def test_missing_permalink_does_not_fail(self):
        serialized = lunr_index(_docs(), _FIELDS)
        refs = {ref for ref, _ in serialized["fieldVectors"]}
        assert "permalink/1" in refs

    def test_index_is_searchable_after_load(self):
        index = Index.load(lunr_index(_docs(), _FIELDS))
        results = index.search("browser")
        assert [r["ref"] for r in results] == ["2"]

    def test_empty_documents_yield_empty_index(self):
        serialized = lunr_index([], _FIELDS)
        assert serialized["fields"] == list(_FIELDS)
        assert serialized["fieldVectors"] == []
        assert serialized["invertedIndex"] == []
        assert serialized["version"] == __TARGET_JS_VERSION__

    def test_empty_index_loads(self):
        index = Index.load(lunr_index([], _FIELDS))
        assert index.search("anything") == []

    def test_lunr_failure_raises_indexer_error(self):
        with patch("indexly.services.indexer.lunr", side_effect=ValueError("boom")):
            with pytest.raises(IndexerError) as excinfo:
                lunr_index(_docs(), _FIELDS)
        assert isinstance(excinfo.value.__cause__, ValueError)

    def test_document_without_id_is_rejected(self):
        with pytest.raises(IndexerError):
            lunr_index([{"title": "No id"}], _FIELDS)
