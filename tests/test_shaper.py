"""
Unit tests for response shaping.
"""
import pytest

from fwew_api.errors import NoResultsError
from fwew_api.shaper import DISCORD_BUDGET, Shape, fit_budget, flatten, serialized_length, shape

GROUPED = [[{"Navi": "tìng", "EN": "give"}, {"Navi": "tìng", "EN": "gift"}], [], [{"Navi": "ikran"}]]


class TestShape:
    """Tests for the shape tags."""

    def test_two_dimensional_keeps_groups(self):
        assert shape(GROUPED, Shape.TWO_D) == GROUPED

    def test_two_dimensional_wraps_flat_results(self):
        assert shape([{"Navi": "ikran"}], Shape.TWO_D) == [[{"Navi": "ikran"}]]

    def test_one_dimensional_is_flattened_two_dimensional(self):
        assert flatten(shape(GROUPED, Shape.TWO_D)) == shape(GROUPED, Shape.ONE_D)
        assert [w["EN"] for w in shape(GROUPED, Shape.ONE_D)[:2]] == ["give", "gift"]

    def test_flat_results_stay_flat(self):
        assert shape(["a", "b"], Shape.ONE_D) == ["a", "b"]

    @pytest.mark.parametrize("result", [[], [[]], [[], []], None, {}])
    def test_empty_results_raise(self, result):
        with pytest.raises(NoResultsError):
            shape(result, Shape.ONE_D)

    def test_native_passes_through(self):
        number = {"name": "vol", "octal": "0o10", "decimal": "8"}
        assert shape(number, Shape.NATIVE) is number

    def test_scalar_and_sentence(self):
        assert shape(2730, Shape.SCALAR) == 2730
        assert shape(2730, Shape.SENTENCE) == "There are 2730 words in the dictionary."
        assert shape(2730, Shape.SENTENCE, "sv") == "Det finns 2730 ord i ordboken."

    def test_zero_count_is_not_an_error(self):
        assert shape(0, Shape.SCALAR) == 0


class TestDiscordBudget:
    """Chat-capped shaping drops whole items only."""

    def test_fifty_names_are_cut_to_a_prefix(self):
        names = [f"Name{i:02d}".ljust(42, "x") for i in range(50)]
        assert serialized_length(names) > 2200
        capped = shape(names, Shape.DISCORD)
        assert serialized_length(capped) <= DISCORD_BUDGET
        assert capped == names[: len(capped)]
        assert serialized_length(names[: len(capped) + 1]) > DISCORD_BUDGET

    def test_small_results_untouched(self):
        assert shape(["a", "b"], Shape.DISCORD) == ["a", "b"]

    def test_grouped_results_flattened_before_capping(self):
        grouped = [["x" * 900], ["y" * 900], ["z" * 900]]
        assert shape(grouped, Shape.DISCORD) == ["x" * 900, "y" * 900]

    def test_non_ascii_counted_as_characters(self):
        items = ["ì" * 990, "ä" * 990]
        assert fit_budget(items) == items

    def test_single_oversized_item_is_dropped(self):
        assert fit_budget(["x" * 2500]) == []
