from spartyboots.score import Score


def test_defaults():
    score = Score()
    assert (score.level_score, score.game_score) == (0, 0)
    assert (score.good, score.bad) == (10, -5)


def test_update_level_score_correct_and_incorrect():
    score = Score()
    score.update_level_score(True)
    assert score.level_score == score.good
    score.update_level_score(False)
    assert score.level_score == score.good + score.bad


def test_custom_points():
    score = Score()
    score.good = 7
    score.bad = -3
    score.update_level_score(True)
    score.update_level_score(True)
    score.update_level_score(False)
    assert score.level_score == 7 + 7 - 3


def test_end_level_accumulates():
    score = Score()
    score.update_level_score(True)
    first = score.level_score
    score.end_level()
    assert (score.level_score, score.game_score) == (0, first)
    score.update_level_score(True)
    score.end_level()
    assert score.game_score == 2 * first


def test_reset_keeps_game_score():
    score = Score()
    score.update_level_score(True)
    score.end_level()
    total = score.game_score
    score.update_level_score(True)
    score.reset()
    assert (score.level_score, score.game_score) == (0, total)


def test_hard_reset_clears_all():
    score = Score()
    score.update_level_score(True)
    score.end_level()
    score.update_level_score(True)
    score.hard_reset()
    assert (score.level_score, score.game_score) == (0, 0)