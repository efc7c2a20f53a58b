from interview_coach.ai.fluency import analyze_fluency


def test_empty_answer():
    metrics = analyze_fluency("")
    assert metrics.word_count == 0
    assert metrics.unique_word_ratio == 0
    assert metrics.filler_word_count == 0
    assert metrics.filler_words == []
    assert metrics.repetition_score == 0
    assert metrics.average_sentence_length == 0
    assert metrics.vocabulary_richness == 0


def test_fillers_counted_per_occurrence_listed_once():
    metrics = analyze_fluency("Um, I think we basically, um, cache things.")
    assert metrics.filler_word_count == 5
    assert metrics.filler_words == ["um", "basically", "i think", "things"]


def test_fillers_respect_word_boundaries():
    assert analyze_fluency("Likely unlike the others").filler_word_count == 0


def test_unique_word_ratio():
    assert analyze_fluency("cache cache layer").unique_word_ratio == 0.67


def test_average_sentence_length():
    assert analyze_fluency("One two three. Four five six.").average_sentence_length == 3
    # No sentence boundary: the whole answer counts as one sentence.
    assert analyze_fluency("one two three four").average_sentence_length == 4


def test_stop_words_are_not_meaningful():
    metrics = analyze_fluency("the and with would should")
    assert metrics.vocabulary_richness == 0
    assert metrics.repetition_score == 0


def test_repetition_and_richness():
    metrics = analyze_fluency("cache cache cache layer layer proxy")
    # Only "cache" occurs more than twice; three distinct words out of six.
    assert metrics.repetition_score == 17
    assert metrics.vocabulary_richness == 50


def test_half_word_sentence_average_rounds_up():
    assert analyze_fluency("One two. Three four five.").average_sentence_length == 3
