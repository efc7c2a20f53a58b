import logging
from typing import Dict, Optional, Union

from .models import (
    CoverageAnalysis,
    DimensionScores,
    FluencyMetrics,
    QuestionCategory,
    StructureAnalysis,
    Verdict,
)
from ..utils.numbers import round_half_up

logger = logging.getLogger(__name__)

DEFAULT_WEIGHTS: Dict[str, float] = {
    "technical": 0.35,
    "completeness": 0.30,
    "structure": 0.15,
    "communication": 0.20,
}

CATEGORY_WEIGHTS: Dict[QuestionCategory, Dict[str, float]] = {
    QuestionCategory.TECHNICAL: DEFAULT_WEIGHTS,
    QuestionCategory.BEHAVIORAL: {
        "technical": 0.20,
        "completeness": 0.25,
        "structure": 0.30,
        "communication": 0.25,
    },
    QuestionCategory.SYSTEM_DESIGN: {
        "technical": 0.40,
        "completeness": 0.30,
        "structure": 0.15,
        "communication": 0.15,
    },
}

# (minimum overall, minimum of technical/completeness, verdict), checked top-down.
VERDICT_RULES = [
    (75, 50, Verdict.STRONG_HIRE),
    (60, 40, Verdict.HIRE),
    (45, 30, Verdict.LEAN_HIRE),
    (30, 0, Verdict.LEAN_NO_HIRE),
]


def clamp(value: float, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, round_half_up(value)))


def parse_category(category: Union[str, QuestionCategory, None]) -> QuestionCategory:
    """Map a caller-supplied category onto the enum, defaulting to technical."""
    if isinstance(category, QuestionCategory):
        return category
    if category:
        try:
            return QuestionCategory(str(category).strip().lower())
        except ValueError:
            logger.debug("Unknown question category %r, using technical weights", category)
    return QuestionCategory.TECHNICAL


def calculate_dimension_scores(
    coverage: CoverageAnalysis,
    structure: StructureAnalysis,
    fluency: FluencyMetrics,
    ideal_text: str,
) -> DimensionScores:
    technical = coverage.coverage_score * 0.7 + coverage.technical_depth * 0.3

    # Full length credit at half the reference answer's word count.
    ideal_words = len(ideal_text.split())
    length_ratio = min(fluency.word_count / (ideal_words * 0.5), 1) if ideal_words else 0.0
    completeness = coverage.coverage_score * 0.6 + length_ratio * 100 * 0.4

    communication = 100.0
    communication -= min(fluency.filler_word_count * 3, 20)
    communication -= min(fluency.repetition_score * 0.5, 15)
    communication += min((fluency.vocabulary_richness - 50) * 0.3, 15)
    if fluency.word_count < 30:
        communication -= 20
    elif fluency.word_count < 50:
        communication -= 10
    if 10 <= fluency.average_sentence_length <= 25:
        communication += 10

    return DimensionScores(
        technical=clamp(technical),
        completeness=clamp(completeness),
        structure=clamp(structure.organization_score),
        communication=clamp(communication),
    )


def calculate_overall_score(scores: DimensionScores, category: Optional[QuestionCategory] = None) -> int:
    weights = CATEGORY_WEIGHTS.get(category, DEFAULT_WEIGHTS)
    overall = sum(getattr(scores, dimension) * weight for dimension, weight in weights.items())
    return clamp(overall)


def determine_verdict(overall: int, scores: DimensionScores) -> Verdict:
    floor = min(scores.technical, scores.completeness)
    for min_overall, min_floor, verdict in VERDICT_RULES:
        if overall >= min_overall and floor >= min_floor:
            return verdict
    return Verdict.NO_HIRE
