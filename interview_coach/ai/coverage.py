import re
from typing import Callable, List, Optional, Sequence, Tuple

from .knowledge_base import CONCEPT_KNOWLEDGE, concept_weight, find_known_concepts
from .models import ConceptMatch, Confidence, CoverageAnalysis
from ..utils.numbers import round_half_up

MAX_REQUIRED_CONCEPTS = 15
MAX_PROPER_TERMS = 10
MAX_BONUS_CONCEPTS = 5
FUZZY_THRESHOLD = 0.7

_CAPITALIZED_TERM = re.compile(r"\b[A-Z][a-zA-Z]+(?:\s+[A-Z][a-zA-Z]+)*\b")
_SENTENCE_STARTERS = {"The", "This", "That", "When", "What", "How", "Why", "For", "And", "But"}

# Credit multipliers per confidence tier.
TIER_CREDIT = {
    Confidence.EXACT: 1.0,
    Confidence.SYNONYM: 0.9,
    Confidence.RELATED: 0.7,
    Confidence.PARTIAL: 0.5,
}


def _opens_sentence(raw: str, start: int) -> bool:
    before = raw[:start].rstrip()
    return not before or before[-1] in ".!?"


def extract_concepts(normalized: str, raw: Optional[str] = None) -> List[str]:
    """Concepts named in a text: knowledge-base hits first, then proper nouns.

    Capitalised terms are read from ``raw`` because ``normalized`` has already
    been lowercased. A lone capitalised word opening a sentence is only
    ordinary capitalisation unless the knowledge base knows it.
    """
    concepts = find_known_concepts(normalized)

    raw = raw or ""
    proper = []
    for m in _CAPITALIZED_TERM.finditer(raw):
        term = m.group()
        if len(term) <= 3 or term in _SENTENCE_STARTERS:
            continue
        if " " not in term and _opens_sentence(raw, m.start()) and term.lower() not in CONCEPT_KNOWLEDGE:
            continue
        proper.append(term)
    for term in proper[:MAX_PROPER_TERMS]:
        lowered = term.lower()
        if lowered not in concepts:
            concepts.append(lowered)

    return concepts[:MAX_REQUIRED_CONCEPTS]


def character_similarity(a: str, b: str) -> float:
    """Share of the longer word's characters also found in the shorter one.

    Each character of the shorter word can be consumed once. This is a cheap
    heuristic, not an edit distance: anagrams score 1.0.
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0
    longer, shorter = (a, b) if len(a) > len(b) else (b, a)
    remaining = list(shorter)
    matches = 0
    for char in longer:
        if char in remaining:
            remaining.remove(char)
            matches += 1
    return matches / len(longer)


def find_fuzzy_match(text: str, term: str) -> Optional[str]:
    prefix = term[:min(4, len(term))]
    for word in text.split():
        if len(word) < 3:
            continue
        if word.startswith(prefix) and abs(len(word) - len(term)) <= 3:
            return word
        if character_similarity(word, term) > FUZZY_THRESHOLD:
            return word
    return None


def _exact(text, concept, entry):
    return concept if concept in text else None


def _synonym(text, concept, entry):
    if entry is None:
        return None
    return next((s for s in entry.synonyms if s in text), None)


def _related(text, concept, entry):
    if entry is None:
        return None
    return next((r for r in entry.related if r in text), None)


def _partial(text, concept, entry):
    return find_fuzzy_match(text, concept)


MATCHERS: Sequence[Tuple[Confidence, Callable]] = (
    (Confidence.EXACT, _exact),
    (Confidence.SYNONYM, _synonym),
    (Confidence.RELATED, _related),
    (Confidence.PARTIAL, _partial),
)


def match_concept(user_text: str, concept: str) -> Optional[ConceptMatch]:
    """Try each confidence tier in order and return the first hit."""
    concept_lower = concept.lower()
    entry = CONCEPT_KNOWLEDGE.get(concept_lower)
    for confidence, matcher in MATCHERS:
        found = matcher(user_text, concept_lower, entry)
        if found:
            matched_as = concept if confidence is Confidence.EXACT else found
            return ConceptMatch(concept=concept, matched_as=matched_as, confidence=confidence)
    return None


def resolve_required_concepts(
    user_text: str,
    ideal_text: str,
    explicit_keywords: Optional[Sequence[str]] = None,
    raw_ideal: Optional[str] = None,
    raw_user: Optional[str] = None,
) -> List[str]:
    if explicit_keywords:
        required = [k for k in explicit_keywords if k and k.strip()]
        if required:
            return required
    required = extract_concepts(ideal_text, raw_ideal)
    if not required:
        # Reference answer without terminology: judge the answer on its own terms.
        required = extract_concepts(user_text, raw_user)
    return required


def analyze_coverage(
    user_text: str,
    ideal_text: str,
    explicit_keywords: Optional[Sequence[str]] = None,
    raw_ideal: Optional[str] = None,
    raw_user: Optional[str] = None,
) -> CoverageAnalysis:
    """Weighted coverage of the required concepts in a normalized answer."""
    required = resolve_required_concepts(user_text, ideal_text, explicit_keywords, raw_ideal, raw_user)

    covered: List[ConceptMatch] = []
    missed: List[str] = []
    total_weight = 0.0
    covered_weight = 0.0

    for concept in required:
        weight = concept_weight(concept)
        total_weight += weight
        match = match_concept(user_text, concept)
        if match is None:
            missed.append(concept)
            continue
        covered.append(match)
        covered_weight += weight * TIER_CREDIT[match.confidence]

    seen = {c.lower() for c in required} | {m.concept.lower() for m in covered}
    bonus = [c for c in find_known_concepts(user_text) if c not in seen]
    for concept in bonus[:MAX_BONUS_CONCEPTS]:
        half = concept_weight(concept) * 0.5
        covered.append(ConceptMatch(concept=concept, matched_as=concept, confidence=Confidence.EXACT))
        covered_weight += half
        total_weight += half

    coverage_score = round_half_up(100 * covered_weight / total_weight) if total_weight > 0 else 0
    technical_depth = round_half_up(min(100, len(covered) * 15 + coverage_score * 0.4))

    return CoverageAnalysis(
        covered=covered,
        missed=missed,
        coverage_score=coverage_score,
        technical_depth=technical_depth,
    )
