"""
Unit tests for cards/generator.py.

Tests card generation, result calculation and range validation.
"""

import pytest

from magic_number.cards.generator import (
    InvalidRangeError,
    calculate_result,
    generate_cards,
    responses_for,
)
from magic_number.types import Card


class TestGenerateCards:
    """Tests for generate_cards()."""

    # =========================================================================
    # Card count
    # =========================================================================

    @pytest.mark.parametrize("max_number,expected", [(31, 5), (63, 6), (127, 7)])
    def test_card_count(self, max_number, expected):
        assert len(generate_cards(max_number)) == expected

    def test_key_numbers_are_powers_of_two_in_order(self, cards_63):
        assert [c.key_number for c in cards_63] == [1, 2, 4, 8, 16, 32]
        assert [c.bit_position for c in cards_63] == [0, 1, 2, 3, 4, 5]

    # =========================================================================
    # Members
    # =========================================================================

    def test_first_card_holds_odd_numbers(self, cards_63):
        assert cards_63[0].numbers == tuple(range(1, 64, 2))

    def test_highest_card_of_31(self):
        cards = generate_cards(31)
        assert cards[-1].numbers == tuple(range(16, 32))

    def test_card_for_bit_one_starts_2_3_6_7(self, cards_63):
        assert cards_63[1].numbers[:4] == (2, 3, 6, 7)

    def test_every_card_has_half_the_range(self, max_number):
        # For 2^k - 1 ceilings each bit is set in exactly half of 0..max
        for card in generate_cards(max_number):
            assert len(card) == (max_number + 1) // 2

    def test_members_ascending_and_in_range(self, max_number):
        for card in generate_cards(max_number):
            assert list(card.numbers) == sorted(card.numbers)
            assert card.numbers[0] >= 1
            assert card.numbers[-1] <= max_number

    def test_deterministic(self):
        assert generate_cards(127) == generate_cards(127)

    def test_fresh_list_each_call(self):
        first = generate_cards(31)
        first.pop()
        assert len(generate_cards(31)) == 5

    # =========================================================================
    # Validation
    # =========================================================================

    @pytest.mark.parametrize("bad", [0, -1, -63])
    def test_rejects_non_positive(self, bad):
        with pytest.raises(InvalidRangeError):
            generate_cards(bad)

    @pytest.mark.parametrize("bad", [1, 30, 64, 100, 255])
    def test_rejects_unsupported_ceiling(self, bad):
        with pytest.raises(InvalidRangeError, match="Unsupported"):
            generate_cards(bad)

    @pytest.mark.parametrize("bad", [63.0, "63", None, True])
    def test_rejects_non_integers(self, bad):
        with pytest.raises(InvalidRangeError):
            generate_cards(bad)

    def test_invalid_range_is_value_error(self):
        with pytest.raises(ValueError):
            generate_cards(0)

    def test_non_strict_accepts_any_positive(self):
        cards = generate_cards(100, strict=False)
        assert len(cards) == 7
        assert cards[6].numbers == tuple(range(64, 101))

    def test_non_strict_still_rejects_zero(self):
        with pytest.raises(InvalidRangeError):
            generate_cards(0, strict=False)

    def test_non_strict_single_number(self):
        assert generate_cards(1, strict=False) == [Card(key_number=1, bit_position=0, numbers=(1,))]


class TestCalculateResult:
    """Tests for calculate_result()."""

    def test_example_nineteen(self, cards_63):
        """Yes to 1, 2 and 16 reveals 19."""
        responses = [True, True, False, False, True, False]
        assert calculate_result(responses, cards_63) == 19

    def test_all_no_is_zero(self):
        cards = generate_cards(31)
        assert calculate_result([False] * 5, cards) == 0

    @pytest.mark.parametrize("max_number", [31, 63, 127])
    def test_all_yes_is_ceiling(self, max_number):
        cards = generate_cards(max_number)
        assert calculate_result([True] * len(cards), cards) == max_number

    def test_accepts_tuple_responses(self, cards_63):
        assert calculate_result((False, False, False, False, False, True), cards_63) == 32

    def test_mismatch_raises_in_strict_mode(self, cards_63):
        with pytest.raises(ValueError, match="6 cards"):
            calculate_result([True, True], cards_63)

    def test_mismatch_truncates_when_not_strict(self, cards_63):
        assert calculate_result([True, True], cards_63, strict=False) == 3
        assert calculate_result([True] * 10, cards_63, strict=False) == 63

    def test_empty(self):
        assert calculate_result([], []) == 0


class TestResponsesFor:
    """Tests for responses_for()."""

    def test_nineteen(self, cards_63):
        assert responses_for(19, cards_63) == [True, True, False, False, True, False]

    def test_round_trip_all_numbers(self, max_number):
        cards = generate_cards(max_number)
        for n in range(1, max_number + 1):
            assert calculate_result(responses_for(n, cards), cards) == n
