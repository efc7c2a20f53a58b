from typing import Optional

from .models import QuestionCategory, StarComponents, StructureAnalysis
from ..utils.text import split_sentences

INTRODUCTION = ["first", "to start", "let me explain", "the main", "essentially", "in summary", "overall"]
INTRODUCTION_OPENERS = ("so ", "well ", "i would")
EXAMPLES = ["for example", "for instance", "such as", "like when", "in one case", "specifically", "concrete example"]
CONCLUSION = ["in conclusion", "to summarize", "overall", "in the end", "finally", "the key takeaway", "most importantly"]

STAR_INDICATORS = {
    "situation": ["situation", "context", "background", "scenario", "when i was", "at my previous",
                  "in my role", "there was a time"],
    "task": ["task", "goal", "objective", "responsible for", "needed to", "had to", "my job was",
             "challenge was"],
    "action": ["action", "i did", "i decided", "i implemented", "i created", "i led", "i worked",
               "steps i took", "approach"],
    "result": ["result", "outcome", "impact", "achieved", "improved", "reduced", "increased",
               "learned", "success"],
}

FLOW_WORDS = ["first", "second", "then", "next", "finally", "also", "additionally", "however", "therefore"]


def _mentions(text: str, phrases) -> bool:
    return any(p in text for p in phrases)


def analyze_structure(
    text: str,
    question_category: Optional[QuestionCategory] = None,
    raw_text: Optional[str] = None,
) -> StructureAnalysis:
    """Detect intro/example/conclusion markers and STAR components in normalized text.

    Normalization strips sentence punctuation, so sentences are counted on
    ``raw_text`` when the caller still has it. Counting on ``text`` always
    finds one sentence and never awards the sentence bonus; that is what a
    caller passing only normalized text gets.
    """
    text = text.lower()

    has_introduction = _mentions(text, INTRODUCTION) or text.startswith(INTRODUCTION_OPENERS)
    has_examples = _mentions(text, EXAMPLES)
    has_conclusion = _mentions(text, CONCLUSION)

    star = StarComponents(**{part: _mentions(text, phrases) for part, phrases in STAR_INDICATORS.items()})
    star_count = star.count

    score = 0
    if has_introduction:
        score += 20
    if has_examples:
        score += 25
    if has_conclusion:
        score += 15

    # STAR counts double for behavioral questions.
    score += star_count * (10 if question_category is QuestionCategory.BEHAVIORAL else 5)

    sentence_count = len(split_sentences(text if raw_text is None else raw_text))
    if sentence_count >= 3:
        score += 10
    if sentence_count >= 5:
        score += 10

    flow_count = sum(1 for w in FLOW_WORDS if w in text)
    score += min(flow_count * 5, 20)

    return StructureAnalysis(
        has_introduction=has_introduction,
        has_examples=has_examples,
        has_conclusion=has_conclusion,
        uses_star=star_count >= 3,
        star_components=star,
        organization_score=max(0, min(100, score)),
    )
