from typing import Optional

from bs4 import BeautifulSoup


def strip_tags(html: Optional[str]) -> str:
    """Remove every markup tag from *html* and return the remaining text.

    Text nodes are concatenated in document order with the whitespace the
    author wrote between them, so ``"<p>Hello <b>world</b></p>"`` becomes
    ``"Hello world"``.  Entities are decoded by the parser and not re-encoded.

    lxml drops whitespace before the first element and text that is only
    whitespace, so ``"  leading"`` gives ``"leading"`` and ``"   "`` gives ``""``.
    """
    if not html:
        return ""
    soup = BeautifulSoup(html, "lxml")
    return soup.get_text()
