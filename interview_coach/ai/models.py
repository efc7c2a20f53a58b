from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict


class Confidence(str, Enum):
    EXACT = "exact"
    SYNONYM = "synonym"
    RELATED = "related"
    PARTIAL = "partial"


class Verdict(str, Enum):
    STRONG_HIRE = "strong-hire"
    HIRE = "hire"
    LEAN_HIRE = "lean-hire"
    LEAN_NO_HIRE = "lean-no-hire"
    NO_HIRE = "no-hire"


class QuestionCategory(str, Enum):
    TECHNICAL = "technical"
    BEHAVIORAL = "behavioral"
    SYSTEM_DESIGN = "system-design"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ConceptMatch(_Frozen):
    concept: str
    matched_as: str
    confidence: Confidence


class CoverageAnalysis(_Frozen):
    covered: List[ConceptMatch] = []
    missed: List[str] = []
    coverage_score: int = 0
    technical_depth: int = 0


class StarComponents(_Frozen):
    situation: bool = False
    task: bool = False
    action: bool = False
    result: bool = False

    @property
    def count(self) -> int:
        return sum([self.situation, self.task, self.action, self.result])


class StructureAnalysis(_Frozen):
    has_introduction: bool = False
    has_examples: bool = False
    has_conclusion: bool = False
    uses_star: bool = False
    star_components: StarComponents = StarComponents()
    organization_score: int = 0


class FluencyMetrics(_Frozen):
    word_count: int = 0
    unique_word_ratio: float = 0.0
    filler_word_count: int = 0
    filler_words: List[str] = []
    repetition_score: int = 0
    average_sentence_length: int = 0
    vocabulary_richness: int = 0


class DimensionScores(_Frozen):
    technical: int
    completeness: int
    structure: int
    communication: int

    def mean(self) -> float:
        return (self.technical + self.completeness + self.structure + self.communication) / 4


class EvaluationResult(_Frozen):
    """Everything the evaluator knows about one answer. Callers own persistence."""

    score: int
    verdict: Verdict
    scores: DimensionScores
    key_points_covered: List[ConceptMatch]
    key_points_missed: List[str]
    feedback: str
    strengths: List[str]
    improvements: List[str]
    structure_analysis: StructureAnalysis
    fluency_metrics: FluencyMetrics
