from .analyzer_service import evaluate
from .models import (
    ConceptMatch,
    Confidence,
    DimensionScores,
    EvaluationResult,
    FluencyMetrics,
    QuestionCategory,
    StructureAnalysis,
    Verdict,
)

__all__ = [
    "evaluate",
    "ConceptMatch",
    "Confidence",
    "DimensionScores",
    "EvaluationResult",
    "FluencyMetrics",
    "QuestionCategory",
    "StructureAnalysis",
    "Verdict",
]
