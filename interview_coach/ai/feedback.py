from typing import List

from .models import Confidence, CoverageAnalysis, DimensionScores, FluencyMetrics, StructureAnalysis

MAX_ITEMS = 4


def generate_feedback(
    scores: DimensionScores,
    coverage: CoverageAnalysis,
    structure: StructureAnalysis,
    fluency: FluencyMetrics,
) -> str:
    """Summary paragraph: overall assessment, coverage, structure and fluency notes."""
    parts: List[str] = []

    average = scores.mean()
    if average >= 70:
        parts.append("Strong answer that demonstrates solid understanding.")
    elif average >= 55:
        parts.append("Good answer with room for improvement.")
    elif average >= 40:
        parts.append("Decent attempt that covers some key points.")
    else:
        parts.append("Answer needs more depth and coverage of key concepts.")

    covered = len(coverage.covered)
    if coverage.coverage_score >= 70:
        parts.append(f"You covered {covered} key concepts effectively.")
    elif coverage.coverage_score >= 40:
        parts.append(f"You mentioned {covered} concepts but missed some important ones.")
    else:
        parts.append("Try to include more specific technical terms and concepts.")

    if structure.uses_star:
        parts.append("Great use of structured storytelling!")
    elif structure.has_examples:
        parts.append("Good job including concrete examples.")

    if fluency.filler_word_count > 5:
        parts.append(f'Watch out for filler words like "{", ".join(fluency.filler_words[:2])}".')

    return " ".join(parts)


def generate_strengths(
    scores: DimensionScores,
    coverage: CoverageAnalysis,
    structure: StructureAnalysis,
    fluency: FluencyMetrics,
) -> List[str]:
    strengths: List[str] = []

    if scores.technical >= 60:
        strengths.append("Demonstrated solid technical knowledge")
    if len(coverage.covered) >= 3:
        exact = [m.concept for m in coverage.covered if m.confidence is Confidence.EXACT]
        if exact:
            strengths.append(f"Used correct terminology: {', '.join(exact[:3])}")

    if structure.uses_star:
        strengths.append("Excellent use of STAR method for structured response")
    elif structure.has_examples:
        strengths.append("Included concrete examples to illustrate points")
    if structure.has_introduction and structure.has_conclusion:
        strengths.append("Well-organized answer with clear beginning and end")

    if fluency.filler_word_count <= 2:
        strengths.append("Clear and confident delivery with minimal filler words")
    if fluency.vocabulary_richness >= 60:
        strengths.append("Rich vocabulary demonstrating expertise")
    if fluency.word_count >= 80:
        strengths.append("Comprehensive answer with good depth")

    if not strengths:
        if fluency.word_count >= 30:
            strengths.append("Made an effort to provide a complete answer")
        else:
            strengths.append("Attempted to address the question")

    return strengths[:MAX_ITEMS]


def generate_improvements(
    scores: DimensionScores,
    coverage: CoverageAnalysis,
    structure: StructureAnalysis,
    fluency: FluencyMetrics,
) -> List[str]:
    improvements: List[str] = []

    if scores.technical < 60 and coverage.missed:
        improvements.append(f"Consider mentioning: {', '.join(coverage.missed[:3])}")
    if scores.technical < 40:
        improvements.append("Study the core technical concepts more thoroughly")

    if not structure.has_examples:
        improvements.append("Add specific examples from your experience")
    if not structure.uses_star and scores.structure < 50:
        improvements.append("Try using the STAR method: Situation, Task, Action, Result")
    if not structure.has_conclusion:
        improvements.append("End with a clear summary or key takeaway")

    if fluency.filler_word_count > 5:
        improvements.append(f"Reduce filler words ({', '.join(fluency.filler_words[:2])})")
    if fluency.word_count < 50:
        improvements.append("Provide more detailed explanations")
    if fluency.repetition_score > 20:
        improvements.append("Vary your vocabulary to avoid repetition")

    if scores.completeness < 50:
        improvements.append("Cover more aspects of the question")

    return improvements[:MAX_ITEMS]
