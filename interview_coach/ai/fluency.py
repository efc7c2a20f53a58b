import re
from collections import Counter
from typing import List

from .models import FluencyMetrics
from ..utils.numbers import round_half_up
from ..utils.text import split_sentences, words

FILLER_WORDS: List[str] = [
    "um", "uh", "like", "you know", "basically", "actually", "literally",
    "sort of", "kind of", "i mean", "right", "okay", "so yeah", "anyway",
    "i guess", "i think", "maybe", "probably", "stuff", "things", "whatever",
]

_FILLER_PATTERNS = [(f, re.compile(r"\b%s\b" % re.escape(f), re.IGNORECASE)) for f in FILLER_WORDS]

STOP_WORDS = {"the", "and", "that", "this", "with", "from", "have", "been", "were", "would", "could", "should"}


def meaningful_words(tokens: List[str]) -> List[str]:
    return [w for w in tokens if len(w) > 3 and w not in STOP_WORDS]


def analyze_fluency(text: str) -> FluencyMetrics:
    """Fluency signals from the raw answer text (case and punctuation intact)."""
    tokens = words(text)
    word_count = len(tokens)
    unique_ratio = len(set(tokens)) / word_count if word_count else 0.0

    lowered = (text or "").lower()
    filler_count = 0
    detected: List[str] = []
    for filler, pattern in _FILLER_PATTERNS:
        hits = len(pattern.findall(lowered))
        if hits:
            filler_count += hits
            detected.append(filler)

    meaningful = meaningful_words(tokens)
    frequency = Counter(meaningful)
    repeated = sum(1 for count in frequency.values() if count > 2)
    repetition = repeated / len(meaningful) * 100 if meaningful else 0.0
    richness = len(frequency) / len(meaningful) * 100 if meaningful else 0.0

    sentences = split_sentences(text)
    avg_sentence = word_count / len(sentences) if sentences else word_count

    return FluencyMetrics(
        word_count=word_count,
        unique_word_ratio=round_half_up(unique_ratio * 100) / 100,
        filler_word_count=filler_count,
        filler_words=detected,
        repetition_score=max(0, min(100, round_half_up(repetition))),
        average_sentence_length=round_half_up(avg_sentence),
        vocabulary_richness=max(0, min(100, round_half_up(richness))),
    )
