"""
Pytest configuration and fixtures.
The dictionary engine is replaced by a small in-memory fake that records calls.
"""
import pytest
from fastapi.testclient import TestClient

from fwew_api.config import Settings
from fwew_api.engine import EngineError, EngineQueryError
from fwew_api.main import create_app

WORDS = [
    {"ID": "1", "Navi": "kaltxì", "PartOfSpeech": "intj.", "EN": "hello", "DE": "hallo"},
    {"ID": "2", "Navi": "ikran", "PartOfSpeech": "n.", "EN": "banshee", "DE": "Ikran"},
    {"ID": "3", "Navi": "tìng", "PartOfSpeech": "vtr.", "EN": "give", "DE": "geben"},
    {"ID": "4", "Navi": "tìng", "PartOfSpeech": "n.", "EN": "gift", "DE": "Geschenk"},
    {"ID": "5", "Navi": "kxetse", "PartOfSpeech": "n.", "EN": "tail", "DE": "Schwanz"},
    {"ID": "6", "Navi": "kelku", "PartOfSpeech": "n.", "EN": "home", "DE": "Heim"},
]

DIGITS = ["kew", "'aw", "mune", "pxey", "tsìng", "mrr", "pukap", "kinä"]
SUFFIXES = ("ìl", "it", "ti")


def _spell(value: int) -> str:
    return "-".join(DIGITS[int(d)] for d in format(value, "o"))


def name_of_length(i: int, length: int = 42) -> str:
    return f"Tsyal{i:02d}".ljust(length, "a")


class FakeEngine:
    """In-memory stand-in for the dictionary engine."""

    def __init__(self):
        self.calls = []
        self.fail_reload = False
        self.reject_navi = False
        self.reloads = 0

    def _record(self, *call):
        self.calls.append(call)

    def _match_navi(self, token, check_affixes):
        found = [w for w in WORDS if w["Navi"] == token]
        if not found and check_affixes:
            for suffix in SUFFIXES:
                if token.endswith(suffix):
                    found = [w for w in WORDS if w["Navi"] == token[: -len(suffix)]]
                    break
        return found

    def translate_from_navi(self, words, check_affixes):
        self._record("translate_from_navi", words, check_affixes)
        if self.reject_navi:
            raise EngineQueryError("not Na'vi")
        return [self._match_navi(token, check_affixes) for token in words.split()]

    def translate_to_navi(self, text, language_code):
        self._record("translate_to_navi", text, language_code)
        field = language_code.upper()
        return [[w for w in WORDS if w.get(field, "").lower() == token.lower()] for token in text.split()]

    def _filter(self, terms):
        words = list(WORDS)
        terms = list(terms)
        while len(terms) >= 3:
            what, cond, value = terms[:3]
            terms = terms[3:]
            if what == "pos" and cond == "is":
                words = [w for w in words if w["PartOfSpeech"] in value.split(",")]
            elif what == "word" and cond == "starts":
                words = [w for w in words if w["Navi"].startswith(value)]
        return words

    def list_words(self, filter_terms, digraph_mode):
        self._record("list_words", tuple(filter_terms), digraph_mode)
        return self._filter(filter_terms)

    def random_words(self, count, filter_terms, digraph_mode):
        self._record("random_words", count, tuple(filter_terms), digraph_mode)
        return self._filter(filter_terms)[:max(count, 0)]

    def navi_to_number(self, word):
        self._record("navi_to_number", word)
        try:
            return int("".join(str(DIGITS.index(d)) for d in word.split("-")), 8)
        except ValueError:
            raise EngineQueryError(f"not a number: {word}")

    def number_to_navi(self, value):
        self._record("number_to_navi", value)
        return _spell(value)

    def single_names(self, count, syllables, dialect):
        self._record("single_names", count, syllables, dialect)
        return [name_of_length(i) for i in range(count)]

    def full_names(self, ending, count, syllables, dialect):
        self._record("full_names", ending, count, tuple(syllables), dialect)
        return [f"{name_of_length(i, 20)} te Ikran{ending}" for i in range(count)]

    def alu_names(self, count, syllables, noun_mode, adjective_mode, dialect):
        self._record("alu_names", count, syllables, noun_mode, adjective_mode, dialect)
        return [f"{name_of_length(i, 20)} alu Ikran" for i in range(count)]

    def phoneme_distributions(self, language_code):
        self._record("phoneme_distributions", language_code)
        return {"Language": language_code, "Onsets": [["t", "120"], ["k", "98"]]}

    def homonyms(self):
        self._record("homonyms")
        return ["tìng"]

    def oddballs(self):
        self._record("oddballs")
        return []

    def multi_ipa(self):
        self._record("multi_ipa")
        return [{"Navi": "kaltxì", "IPA": "kal.ˈtʼɪ or ˈkal.tʼɪ"}]

    def validity(self, candidate, language_code):
        self._record("validity", candidate, language_code)
        return [f"{word}: valid" for word in candidate.split()]

    def dictionary_size(self):
        self._record("dictionary_size")
        return len(WORDS)

    def reload(self):
        self._record("reload")
        if self.fail_reload:
            raise EngineError("dictionary download failed")
        self.reloads += 1

    def version(self):
        return {"version": "5.0.0-test", "dict_build": "abc123"}


@pytest.fixture(scope="function")
def engine():
    """Fresh fake engine for each test."""
    return FakeEngine()


@pytest.fixture(scope="function")
def settings():
    return Settings(web_root="https://example.org/api")


@pytest.fixture(scope="function")
def app(settings, engine):
    return create_app(settings=settings, engine=engine)


@pytest.fixture(scope="function")
def client(app):
    """Create a test client; the context manager runs the app lifespan."""
    with TestClient(app) as test_client:
        yield test_client
