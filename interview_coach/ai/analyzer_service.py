import logging
from typing import Optional, Sequence, Union

from .coverage import analyze_coverage
from .feedback import generate_feedback, generate_improvements, generate_strengths
from .fluency import analyze_fluency
from .models import EvaluationResult, QuestionCategory
from .scoring import (
    calculate_dimension_scores,
    calculate_overall_score,
    determine_verdict,
    parse_category,
)
from .structure import analyze_structure
from ..utils.text import normalize_text

logger = logging.getLogger(__name__)


def evaluate(
    user_answer: str,
    ideal_answer: str,
    required_concepts: Optional[Sequence[str]] = None,
    question_category: Union[str, QuestionCategory, None] = None,
) -> EvaluationResult:
    """Score a candidate answer against a reference answer.

    Runs offline and never raises for ordinary input: empty answers and
    unknown categories degrade to low scores and technical weighting.
    """
    user_answer = user_answer or ""
    ideal_answer = ideal_answer or ""
    category = parse_category(question_category)

    normalized_user = normalize_text(user_answer)
    normalized_ideal = normalize_text(ideal_answer)

    coverage = analyze_coverage(
        normalized_user,
        normalized_ideal,
        required_concepts,
        raw_ideal=ideal_answer,
        raw_user=user_answer,
    )
    structure = analyze_structure(normalized_user, category, raw_text=user_answer)
    fluency = analyze_fluency(user_answer)

    scores = calculate_dimension_scores(coverage, structure, fluency, normalized_ideal)
    overall = calculate_overall_score(scores, category)
    verdict = determine_verdict(overall, scores)

    logger.debug(
        "Evaluated answer: score=%s verdict=%s words=%s coverage=%s category=%s",
        overall, verdict.value, fluency.word_count, coverage.coverage_score, category.value,
    )

    return EvaluationResult(
        score=overall,
        verdict=verdict,
        scores=scores,
        key_points_covered=coverage.covered,
        key_points_missed=coverage.missed,
        feedback=generate_feedback(scores, coverage, structure, fluency),
        strengths=generate_strengths(scores, coverage, structure, fluency),
        improvements=generate_improvements(scores, coverage, structure, fluency),
        structure_analysis=structure,
        fluency_metrics=fluency,
    )
