from interview_coach.ai.models import QuestionCategory
from interview_coach.ai.structure import analyze_structure
from interview_coach.utils.text import normalize_text

STAR_STORY = (
    "There was a time at my previous job when our deploys kept failing. "
    "My job was to stabilize the pipeline. "
    "I decided to add automated checks and I implemented canary releases. "
    "As a result, failed deploys were reduced by half."
)


def test_star_components_detected():
    result = analyze_structure(normalize_text(STAR_STORY), QuestionCategory.BEHAVIORAL, raw_text=STAR_STORY)
    assert result.uses_star
    parts = result.star_components
    assert parts.situation and parts.task and parts.action and parts.result


def test_star_counts_double_for_behavioral():
    normalized = normalize_text(STAR_STORY)
    behavioral = analyze_structure(normalized, QuestionCategory.BEHAVIORAL, raw_text=STAR_STORY)
    technical = analyze_structure(normalized, QuestionCategory.TECHNICAL, raw_text=STAR_STORY)
    # 4 STAR components plus 10 for having at least three sentences.
    assert behavioral.organization_score == 50
    assert technical.organization_score == 30


def test_introduction_opener():
    assert analyze_structure("so we cache everything").has_introduction
    assert analyze_structure("i would start with a queue").has_introduction
    assert not analyze_structure("we cache everything").has_introduction


def test_examples_conclusion_and_flow_words():
    text = "first we shard the data for example by user id then we add replicas finally we monitor"
    result = analyze_structure(text)
    assert result.has_introduction
    assert result.has_examples
    assert result.has_conclusion
    assert not result.uses_star
    # 20 + 25 + 15 + three flow words (first, then, finally)
    assert result.organization_score == 75


def test_sentence_bonus_uses_raw_text():
    raw = "We shard. We replicate. We cache. We monitor. We alert."
    without_raw = analyze_structure(normalize_text(raw))
    with_raw = analyze_structure(normalize_text(raw), raw_text=raw)
    assert with_raw.organization_score - without_raw.organization_score == 20


def test_score_is_clamped():
    text = (
        "first to start for example in conclusion finally there was a time my job was "
        "i decided the result second then next also additionally however therefore"
    )
    raw = text.replace(" ", ". ")
    result = analyze_structure(text, QuestionCategory.BEHAVIORAL, raw_text=raw)
    assert result.organization_score == 100


def test_empty_text():
    result = analyze_structure("")
    assert result.organization_score == 0
    assert not (result.has_introduction or result.has_examples or result.has_conclusion or result.uses_star)
