"""Utility for deriving a display title from a page URL."""

from urllib.parse import unquote, urlsplit

from crates_llms_txt.item_kind import PAGE_PREFIXES

_KNOWN_PREFIXES = frozenset(PAGE_PREFIXES.values())


def title_from_link(link: str) -> str:
    """Return the last path segment of a link without extension or kind prefix.

    ``.../clap/struct.Command.html`` -> ``Command``; ``.../clap/index.html`` ->
    ``clap``.
    """
    segments = [s for s in urlsplit(link).path.split("/") if s]
    if not segments:
        return link
    name = segments[-1]
    if name == "index.html" and len(segments) > 1:
        name = segments[-2]

    stem, dot, ext = name.rpartition(".")
    if dot and stem and ext.isalpha():
        name = stem

    prefix, dot, rest = name.partition(".")
    if dot and rest and prefix in _KNOWN_PREFIXES:
        name = rest
    return unquote(name)
