"""Unit tests for the square-root game rules."""

import math

import pytest

from classroom.domain.model.guess import Guess, GuessRating
from classroom.domain.service.root_scorer import (
    classify,
    count_correct_digits,
    generate_target,
    initial_guess,
    is_valid_number,
    parse_guess,
    root_decimals,
    square_of,
)
from tests.fakes import FakeRandom

# sqrt(113) = 10.630145812734649...
TARGET = 113


class TestGenerateTarget:

    def test_lowest(self):
        assert generate_target(FakeRandom(0.0)) == 50

    def test_highest(self):
        assert generate_target(FakeRandom(0.9999999)) == 250

    def test_middle(self):
        assert generate_target(FakeRandom(0.5)) == 150

    def test_real_rng_stays_in_range(self):
        import random

        rng = random.Random(1234)
        assert all(50 <= generate_target(rng) <= 250 for _ in range(500))


class TestInitialGuess:

    def test_integer_part_and_dot(self):
        assert initial_guess(113) == "10."

    def test_perfect_square(self):
        assert initial_guess(144) == "12."

    def test_negative_target_uses_magnitude(self):
        assert initial_guess(-50) == "7."


class TestIsValidNumber:

    @pytest.mark.parametrize("text", ["3.14", "3.", "-3.14", ".5", "+7", "10", "-0"])
    def test_valid(self, text):
        assert is_valid_number(text)

    @pytest.mark.parametrize(
        "text", ["", ".", "-", "+", "-.", "abc", "10.63a", "1.2.3", "1e5", " 3", "3 ", "٣"]
    )
    def test_invalid(self, text):
        assert not is_valid_number(text)


class TestParseGuess:

    def test_number(self):
        assert parse_guess("10.63") == 10.63

    def test_trailing_dot(self):
        assert parse_guess("3.") == 3.0

    def test_invalid_is_nan(self):
        assert math.isnan(parse_guess("abc"))

    def test_degenerate_is_nan(self):
        assert math.isnan(parse_guess("-."))


class TestRootDecimals:

    def test_ten_digits(self):
        assert root_decimals(TARGET) == "6301458127"

    def test_perfect_square(self):
        assert root_decimals(144) == "0000000000"


class TestCountCorrectDigits:

    def test_prefix_match(self):
        assert count_correct_digits("10.63014", TARGET) == 5

    def test_stops_at_first_mismatch(self):
        assert count_correct_digits("10.6302", TARGET) == 3

    def test_later_matches_do_not_count(self):
        # position 1 wrong, position 2 right
        assert count_correct_digits("10.73", TARGET) == 0

    def test_no_decimals_typed(self):
        assert count_correct_digits("10", TARGET) == 0
        assert count_correct_digits("10.", TARGET) == 0

    def test_invalid_text_scores_zero(self):
        assert count_correct_digits("10.63a", TARGET) == 0

    def test_negative_guess_scores_zero(self):
        assert count_correct_digits("-10.63", TARGET) == 0

    def test_overflowing_guess_scores_zero(self):
        assert count_correct_digits("9" * 400 + ".6", TARGET) == 0

    def test_integer_part_is_not_checked(self):
        assert count_correct_digits("3.63", TARGET) == 2

    def test_digits_past_ten_never_match(self):
        assert count_correct_digits("10.63014581270", TARGET) == 10
        assert count_correct_digits("12.00000000000", 144) == 10

    def test_full_ten(self):
        assert count_correct_digits("10.6301458127", TARGET) == 10


class TestSquareOf:

    def test_valid(self):
        assert square_of("3") == 9.0

    def test_invalid_is_nan(self):
        assert math.isnan(square_of("."))


class TestClassify:

    def test_boundaries(self):
        assert classify(5, 5) is GuessRating.CORRECT
        assert classify(5, 4) is GuessRating.VERY_CLOSE
        assert classify(5, 3) is GuessRating.CLOSE
        assert classify(5, 2) is GuessRating.FAR

    def test_more_digits_than_needed_is_correct(self):
        assert classify(5, 8) is GuessRating.CORRECT

    def test_zero_precision(self):
        assert classify(0, 0) is GuessRating.CORRECT

    def test_values(self):
        assert classify(5, 4).value == "very-close"


class TestGuess:

    def test_validity_follows_squared(self):
        assert Guess(1, "3", 0, 9.0).is_valid
        assert not Guess(2, "x", 0, math.nan).is_valid
