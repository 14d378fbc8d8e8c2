"""Text canonicalization for free-text answer comparison."""

import re

PUNCTUATION = ".,!?;:'\""

_PUNCT_RE = re.compile("[" + re.escape(PUNCTUATION) + "]")
_SPACE_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Canonicalize text before comparing it with a reference answer.

    Lowercases, removes the characters in ``PUNCTUATION``, collapses runs of
    whitespace to one space and trims. Punctuation goes first so that a
    stray mark between two spaces cannot leave a double space behind, which
    keeps ``normalize(normalize(x)) == normalize(x)``.

    Both sides of a comparison must go through this function.
    """
    if not text:
        return ""
    text = text.lower()
    text = _PUNCT_RE.sub("", text)
    text = _SPACE_RE.sub(" ", text)
    return text.strip()


def answers_match(candidate: str | None, reference: str | None) -> bool:
    return normalize(candidate) == normalize(reference)


def count_words(text: str | None) -> int:
    return len((text or "").split())
