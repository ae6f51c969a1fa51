from vesseltrack.confidence import deviation_from_confidence, score_deviation

INTERVAL = (1.0, 10.0)


def test_within_interval_is_zero():
    assert deviation_from_confidence(5.0, INTERVAL) == 0.0


def test_lower_bound_is_zero():
    assert deviation_from_confidence(INTERVAL[0], INTERVAL) == 0.0


def test_upper_bound_is_zero():
    assert deviation_from_confidence(INTERVAL[1], INTERVAL) == 0.0


def test_distance_one_below():
    assert deviation_from_confidence(INTERVAL[0] - 1.0, INTERVAL) == 1.0


def test_square_error_is_squaring():
    assert score_deviation(12.0, INTERVAL) == 4.0


def test_score_is_zero_inside():
    assert score_deviation(5.0, INTERVAL) == 0.0