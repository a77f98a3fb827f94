"""
Unit tests for mode token resolution.
"""
import pytest

from fwew_api.enums import DEFAULTS, AdjectiveMode, Dialect, DigraphMode, Ending, NounMode, resolve


class TestResolve:
    """Resolution is total: unknown tokens fall back to the category default."""

    @pytest.mark.parametrize("token, code", [
        ("maybe", 0),
        ("false", 2),
        ("true", 1),
        ("", 1),
        (None, 1),
        ("fals", 1),
        ("MAYBE", 0),
    ])
    def test_digraphs(self, token, code):
        assert resolve("digraphs", token) == code
        assert isinstance(resolve("digraphs", token), DigraphMode)

    @pytest.mark.parametrize("token, code", [
        ("forest", 1),
        ("reef", 2),
        ("interdialect", 0),
        ("common", 0),
        ("", 0),
        (None, 0),
        (" Reef ", 2),
    ])
    def test_dialect(self, token, code):
        assert resolve("dialect", token) == code

    def test_adjective_any_differs_from_none(self):
        assert resolve("adjective", "any") is AdjectiveMode.ANY
        assert resolve("adjective", "none") is AdjectiveMode.NONE
        assert AdjectiveMode.ANY == -1
        assert AdjectiveMode.NONE == 0

    @pytest.mark.parametrize("token, mode", [
        ("genitive noun", AdjectiveMode.GENITIVE_NOUN),
        ("origin noun", AdjectiveMode.ORIGIN_NOUN),
        ("participle verb", AdjectiveMode.PARTICIPLE),
        ("active participle verb", AdjectiveMode.ACTIVE_PARTICIPLE),
        ("passive participle verb", AdjectiveMode.PASSIVE_PARTICIPLE),
        ("normal adjective", AdjectiveMode.NORMAL),
        ("blue", AdjectiveMode.ANY),
    ])
    def test_adjective_phrases(self, token, mode):
        assert resolve("adjective", token) is mode

    @pytest.mark.parametrize("token, mode", [
        ("normal noun", NounMode.NORMAL),
        ("verb-er", NounMode.VERB_ER),
        ("something", NounMode.ANY),
        ("whatever", NounMode.NORMAL),
    ])
    def test_noun_phrases(self, token, mode):
        assert resolve("noun", token) is mode

    def test_endings(self):
        assert resolve("ending", "ite") is Ending.ITE
        assert resolve("ending", "'itan") is Ending.ITAN
        assert resolve("ending", "random") is Ending.RANDOM

    def test_every_category_has_a_default(self):
        for category, default in DEFAULTS.items():
            assert resolve(category, "\x00unknown") is default

    def test_unknown_category(self):
        with pytest.raises(KeyError):
            resolve("colour", "red")

    def test_dialect_codes(self):
        assert [d.value for d in Dialect] == [0, 1, 2]
