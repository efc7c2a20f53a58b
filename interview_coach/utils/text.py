import re
from typing import List

_NOISE = re.compile(r"[^\w\s'-]")
_SPACES = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"[.!?]+")


def normalize_text(text: str) -> str:
    """Lowercase text and replace punctuation noise with single spaces.

    - Keeps letters, digits, apostrophes and hyphens
    - Collapses whitespace runs and trims the ends
    """
    lowered = (text or "").lower()
    return _SPACES.sub(" ", _NOISE.sub(" ", lowered)).strip()


def split_sentences(text: str) -> List[str]:
    return [s for s in _SENTENCE_END.split(text or "") if s.strip()]


def words(text: str) -> List[str]:
    """Whitespace tokens of ``text``, lowercased."""
    return (text or "").lower().split()
