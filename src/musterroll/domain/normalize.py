"""Text normalisation shared by the parser and the matchers."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup

_SINGLE_QUOTES = re.compile("[‘’`´]")
_DOUBLE_QUOTES = re.compile("[“”]")
_EXTRA_BLANK_LINES = re.compile(r"\n{3,}")


def normalize_name(name: str) -> str:
    """Fold smart quotes to straight ones, trim, and lower-case."""

    folded = _SINGLE_QUOTES.sub("'", name)
    folded = _DOUBLE_QUOTES.sub('"', folded)
    return folded.strip().lower()


def strip_html(html: str | None) -> str:
    """Reduce catalog rich text to plain text.

    Line breaks become newlines and list items become ``- `` bullets; entities
    are decoded and non-breaking spaces folded to plain spaces.
    """

    if not html:
        return ""
    soup = BeautifulSoup(html, "html.parser")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for item in soup.find_all("li"):
        item.insert(0, "- ")
        item.append("\n")
    text = soup.get_text().replace("\xa0", " ")
    return _EXTRA_BLANK_LINES.sub("\n\n", text).strip()
