from interview_coach.utils.numbers import round_half_up


def test_ties_round_up():
    assert round_half_up(2.5) == 3
    assert round_half_up(48.5) == 49
    assert round_half_up(-2.5) == -2


def test_non_ties_round_to_nearest():
    assert round_half_up(0.4) == 0
    assert round_half_up(74.6) == 75
    assert round_half_up(-15.6) == -16
