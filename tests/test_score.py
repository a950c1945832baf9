import random

import pytest

from passcraft.generator import generate_password
from passcraft.score import StrengthScore, label_for_score, score_password


def test_short_password():
    assert score_password("abc") == StrengthScore(15, "Very Weak")


def test_empty_password():
    result = score_password("")
    assert result.score == 0
    assert result.label == "Very Weak"


def test_seven_chars_skip_variety():
    # would earn variety points if it were long enough
    assert score_password("Ab1!xyz").score == 35


def test_all_classes_twelve_chars():
    score, label = score_password("Abcdefgh12!?")
    assert score == 96
    assert label == "Very Strong"


def test_ten_chars_upper_only_is_medium():
    result = score_password("ABCDEfghij")
    assert result.score == 40
    assert result.label == "Medium"


def test_two_types_ten_chars_gets_one_bonus():
    # 30 + 20 + 15
    assert score_password("Abcdefgh12").score == 65


def test_lowercase_contributes_nothing():
    assert score_password("abcdefgh").score == 24
    assert score_password("abcdefghijklmnop").score == 40


def test_capped_at_100():
    assert score_password("Aa1!" * 3).score == 96
    assert score_password("A1!" + "x" * 40).score == 100


def test_unknown_characters_are_scored():
    result = score_password("pässwörd~~~~ü")
    assert 0 <= result.score <= 100
    assert result.score == 39


def test_deterministic():
    assert score_password("Tr0ub4dor&3") == score_password("Tr0ub4dor&3")


@pytest.mark.parametrize("score,label", [
    (0, "Very Weak"), (19, "Very Weak"),
    (20, "Weak"), (39, "Weak"),
    (40, "Medium"), (59, "Medium"),
    (60, "Strong"), (79, "Strong"),
    (80, "Very Strong"), (100, "Very Strong"),
])
def test_label_thresholds(score, label):
    assert label_for_score(score) == label


def test_score_bounds_for_random_strings():
    rng = random.Random(7)
    for _ in range(300):
        pw = "".join(chr(rng.randrange(32, 0x2FF)) for _ in range(rng.randrange(0, 60)))
        assert 0 <= score_password(pw).score <= 100


def test_generated_full_policy_scores_very_strong():
    pw = generate_password(16)
    assert score_password(pw).label == "Very Strong"


def test_scorer_and_generator_share_symbol_alphabet():
    from passcraft import charsets, generator, score

    assert score.SYMBOLS is charsets.SYMBOLS
    assert generator.CharacterClass.SYMBOL.alphabet == charsets.SYMBOLS
    assert not hasattr(score, "generate_password")
