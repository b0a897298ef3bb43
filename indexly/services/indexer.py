"""Default full-text indexer: builds and serializes a lunr index."""

from typing import Any, Dict, Iterable, List, Mapping, Sequence

from lunr import __TARGET_JS_VERSION__, get_default_builder, lunr

# Documents are looked up by this key in search results
_REF = "id"


class IndexerError(Exception):
    """Raised when the indexer rejects the documents it was given."""


def _field_extractor(name: str):
    """Return an extractor that indexes a missing or null field as empty text."""

    def extract(doc: Mapping[str, Any]) -> str:
        value = doc.get(name)
        return "" if value is None else str(value)

    return extract


def _empty_index(fields: Sequence[str]) -> Dict[str, Any]:
    """Return the serialized form of an index holding no documents.

    lunr cannot average field lengths over zero documents, so the empty case
    is serialized directly in the shape ``Index.serialize`` produces.
    """
    builder = get_default_builder()
    return {
        "version": __TARGET_JS_VERSION__,
        "fields": list(fields),
        "fieldVectors": [],
        "invertedIndex": [],
        "pipeline": builder.search_pipeline.serialize(),
    }


def lunr_index(docs: Iterable[Mapping[str, Any]], fields: Sequence[str]) -> Dict[str, Any]:
    """Build a lunr index over *fields* of *docs* and return it serialized.

    Every document must carry an ``id``.  Fields a document lacks are indexed
    as empty text.
    """
    documents: List[Mapping[str, Any]] = list(docs)
    if not documents:
        return _empty_index(fields)

    field_specs = [
        {"field_name": name, "extractor": _field_extractor(name)} for name in fields
    ]
    try:
        index = lunr(ref=_REF, fields=field_specs, documents=documents)
    except (KeyError, TypeError, ValueError, ZeroDivisionError) as exc:
        raise IndexerError(f"lunr rejected the documents: {exc!r}") from exc
    return index.serialize()
