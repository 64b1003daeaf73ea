"""Logic for extracting a one-line description from documentation text."""

import re

DEFAULT_MAX_DESCRIPTION_LENGTH = 200

BLANK_LINE_RE = re.compile(r"\n\s*\n")
SENTENCE_END_RE = re.compile(r"(?<=[.!?])\s")
WHITESPACE_RE = re.compile(r"\s+")


def summarize_docs(
    docs: str | None,
    max_length: int = DEFAULT_MAX_DESCRIPTION_LENGTH,
) -> str:
    """Return the first sentence of the first paragraph, bounded in length."""
    if not docs:
        return ""
    paragraph = BLANK_LINE_RE.split(docs.strip(), maxsplit=1)[0]
    paragraph = WHITESPACE_RE.sub(" ", paragraph).strip()
    sentence = SENTENCE_END_RE.split(paragraph, maxsplit=1)[0]
    if max_length > 0 and len(sentence) > max_length:
        # Reserve one character for the ellipsis
        sentence = sentence[: max_length - 1].rstrip() + "…"
    return sentence
