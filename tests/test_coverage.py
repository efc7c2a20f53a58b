from interview_coach.ai.coverage import (
    analyze_coverage,
    character_similarity,
    extract_concepts,
    find_fuzzy_match,
    match_concept,
)
from interview_coach.ai.knowledge_base import CONCEPT_KNOWLEDGE, concept_weight
from interview_coach.ai.models import Confidence


def test_knowledge_base_is_read_only():
    try:
        CONCEPT_KNOWLEDGE["new"] = None
    except TypeError:
        pass
    else:
        raise AssertionError("knowledge base accepted a write")
    assert all(1 <= e.weight <= 3 for e in CONCEPT_KNOWLEDGE.values())


def test_unknown_concepts_weigh_one():
    assert concept_weight("Caching") == 3
    assert concept_weight("serialization") == 1


def test_synonym_and_exact_tiers():
    result = analyze_coverage(
        "we use a load balancing layer and redis caching",
        "",
        ["load balancer", "caching"],
    )
    tiers = {m.concept: m for m in result.covered}
    assert tiers["load balancer"].confidence is Confidence.SYNONYM
    assert tiers["load balancer"].matched_as == "load balancing"
    assert tiers["caching"].confidence is Confidence.EXACT
    assert result.missed == []
    assert result.coverage_score == 95
    assert result.technical_depth == 68


def test_related_tier():
    result = analyze_coverage("we put redis in front", "", ["caching"])
    assert result.covered[0].confidence is Confidence.RELATED
    assert result.covered[0].matched_as == "redis"
    assert result.coverage_score == 70


def test_partial_tier():
    match = match_concept("we were serializing payloads", "serialization")
    assert match.confidence is Confidence.PARTIAL
    assert match.matched_as == "serializing"
    result = analyze_coverage("we were serializing payloads", "", ["serialization"])
    assert result.coverage_score == 50


def test_unmatched_concept_is_missed():
    result = analyze_coverage("we used plain http calls", "", ["graphql"])
    assert result.covered == []
    assert result.missed == ["graphql"]
    assert result.coverage_score == 0
    assert result.technical_depth == 0


def test_bonus_concepts_earn_half_credit():
    result = analyze_coverage("caching with docker containers", "", ["caching"])
    assert [m.concept for m in result.covered] == ["caching", "docker"]
    assert result.covered[1].confidence is Confidence.EXACT
    assert result.coverage_score == 100


def test_required_concepts_come_from_ideal_answer():
    result = analyze_coverage(
        "sharding spreads rows",
        "shard the database and add replicas",
        raw_ideal="Shard the database and add replicas",
    )
    names = {m.concept for m in result.covered} | set(result.missed)
    assert {"database", "replication", "sharding"} <= names
    assert "sharding" in {m.concept for m in result.covered}


def test_extract_concepts_reads_proper_nouns_from_raw_text():
    concepts = extract_concepts("we use postgres and kafka streams", "We use Postgres and Kafka Streams")
    assert concepts == ["postgres", "kafka streams"]


def test_extract_concepts_is_capped():
    text = " ".join(CONCEPT_KNOWLEDGE)
    assert len(extract_concepts(text, text)) == 15


def test_falls_back_to_user_answer_when_ideal_has_no_terms():
    user = "Caching and a Load Balancer keep the service fast."
    result = analyze_coverage(
        "caching and a load balancer keep the service fast",
        "it depends on many factors and tradeoffs",
        raw_ideal="it depends on many factors and tradeoffs",
        raw_user=user,
    )
    assert {m.concept for m in result.covered} == {"load balancer", "caching"}
    assert result.missed == []
    assert result.coverage_score == 100


def test_nothing_to_cover_scores_zero():
    result = analyze_coverage("", "")
    assert result.covered == [] and result.missed == []
    assert result.coverage_score == 0


def test_blank_keywords_fall_back_to_extraction():
    result = analyze_coverage("caching everywhere", "caching", ["", "  "])
    assert result.covered[0].concept == "caching"


def test_character_similarity():
    assert character_similarity("cache", "cache") == 1.0
    assert character_similarity("abc", "") == 0.0
    # Anagrams are indistinguishable to this heuristic.
    assert character_similarity("listen", "silent") == 1.0


def test_find_fuzzy_match():
    assert find_fuzzy_match("we were caching", "cache") == "caching"
    assert find_fuzzy_match("the silent server", "listen") == "silent"
    assert find_fuzzy_match("a b c", "cache") is None


def test_adding_exact_terms_never_lowers_coverage():
    required = ["load balancer", "caching", "sharding", "replication"]
    answer = "we put redis in front"
    previous = analyze_coverage(answer, "", required).coverage_score
    for concept in required:
        answer = f"{answer} {concept}"
        score = analyze_coverage(answer, "", required).coverage_score
        assert score >= previous
        previous = score
    assert previous == 100


def test_sentence_openers_are_not_proper_nouns():
    concepts = extract_concepts(
        "honestly we use postgres kafka streams help",
        "Honestly, we use Postgres. Kafka Streams help.",
    )
    assert concepts == ["postgres", "kafka streams"]


def test_sentence_opener_kept_when_knowledge_base_knows_it():
    assert extract_concepts("", "Kubernetes runs the pods.") == ["kubernetes"]


def test_capitalised_reference_without_terms_falls_back_to_user_answer():
    ideal = "Honestly, it depends on many factors and tradeoffs."
    user = "Caching and a Load Balancer keep the service fast."
    result = analyze_coverage(
        "caching and a load balancer keep the service fast",
        "honestly it depends on many factors and tradeoffs",
        raw_ideal=ideal,
        raw_user=user,
    )
    assert {m.concept for m in result.covered} == {"load balancer", "caching"}
    assert result.missed == []
