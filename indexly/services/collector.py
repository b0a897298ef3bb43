"""Search document collection: turns an ordered page collection into an index.

Each page becomes exactly one :class:`SearchDocument`, numbered by its
1-based position in the collection.  The finished document list is handed to
an indexer callable with the fixed field list and whatever the indexer returns
is passed back untouched.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Sequence, Union

from indexly.models.document import SearchDocument
from indexly.models.page import PageModel
from indexly.services.indexer import lunr_index
from indexly.services.stripper import strip_tags

logger = logging.getLogger(__name__)

# Fields the search widget queries.  ``permalink`` is declared even when no
# document carries one.
DEFAULT_FIELDS = ("title", "content", "permalink")

PageInput = Union[PageModel, Mapping[str, Any]]
Indexer = Callable[[List[Dict[str, Any]], Sequence[str]], Any]


def _as_page(page: PageInput) -> PageModel:
    if isinstance(page, PageModel):
        return page
    return PageModel.model_validate(dict(page))


def build_documents(
    pages: Iterable[PageInput],
    include_permalink: bool = False,
) -> List[SearchDocument]:
    """Build one search document per page, preserving order.

    Args:
        pages:             Ordered pages, as :class:`PageModel` or plain mappings.
        include_permalink: Copy each page's permalink into its document.

    Returns:
        The documents, ``id`` ``"1"`` for the first page, ``"2"`` for the
        second and so on.
    """
    documents: List[SearchDocument] = []
    for position, raw_page in enumerate(pages, start=1):
        page = _as_page(raw_page)
        documents.append(
            SearchDocument(
                id=str(position),
                title=page.title,
                content=strip_tags(page.content),
                extra=dict(page.extra),
                permalink=page.permalink if include_permalink else None,
            )
        )
    return documents


def build_index(
    pages: Iterable[PageInput],
    indexer: Indexer = lunr_index,
    fields: Sequence[str] = DEFAULT_FIELDS,
    include_permalink: bool = False,
) -> Any:
    """Collect search documents from *pages* and index them.

    *indexer* is called exactly once, even for an empty collection, and any
    exception it raises propagates to the caller unchanged.
    """
    documents = build_documents(pages, include_permalink=include_permalink)
    logger.info("Collected %d search documents", len(documents))
    return indexer([_to_record(doc) for doc in documents], fields)


def _to_record(document: SearchDocument) -> Dict[str, Any]:
    """Return *document* as a plain dict, omitting an unset permalink."""
    record = document.model_dump()
    if record["permalink"] is None:
        del record["permalink"]
    return record
