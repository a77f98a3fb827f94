"""
The dictionary engine collaborator.

The API treats the engine as a black box: DictionaryEngine describes the
operations it consumes and RemoteDictionaryEngine talks to an engine service
over HTTP/JSON.
"""
import logging
from typing import Any, Dict, List, Optional, Protocol, Sequence

import requests

from fwew_api.schemas import Word

logger = logging.getLogger(__name__)


class EngineError(Exception):
    """The engine failed internally or could not be reached."""


class EngineQueryError(EngineError):
    """The engine rejected a well-formed query, e.g. an unknown numeral."""


class DictionaryEngine(Protocol):
    """Operations the API layer needs from the dictionary engine."""

    def translate_from_navi(self, words: str, check_affixes: bool) -> List[List[Word]]:
        ...

    def translate_to_navi(self, text: str, language_code: str) -> List[List[Word]]:
        ...

    def list_words(self, filter_terms: Sequence[str], digraph_mode: int) -> List[Word]:
        ...

    def random_words(self, count: int, filter_terms: Sequence[str], digraph_mode: int) -> List[Word]:
        ...

    def navi_to_number(self, word: str) -> int:
        ...

    def number_to_navi(self, value: int) -> str:
        ...

    def single_names(self, count: int, syllables: int, dialect: int) -> List[str]:
        ...

    def full_names(self, ending: str, count: int, syllables: Sequence[int], dialect: int) -> List[str]:
        ...

    def alu_names(self, count: int, syllables: int, noun_mode: int, adjective_mode: int, dialect: int) -> List[str]:
        ...

    def phoneme_distributions(self, language_code: str) -> Any:
        ...

    def homonyms(self) -> List[Any]:
        ...

    def oddballs(self) -> List[Any]:
        ...

    def multi_ipa(self) -> List[Any]:
        ...

    def validity(self, candidate: str, language_code: str) -> List[str]:
        ...

    def dictionary_size(self) -> int:
        ...

    def reload(self) -> None:
        ...

    def version(self) -> Dict[str, str]:
        """Return {"version": engine semantic version, "dict_build": dictionary build id}."""
        ...


class RemoteDictionaryEngine:
    """
    DictionaryEngine backed by an engine service reachable over HTTP.

    4xx answers mean the engine understood the query and rejected it
    (EngineQueryError); transport failures, 5xx answers and unreadable
    bodies are EngineError.
    """

    def __init__(self, base_url: str, timeout: float = 10.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, **params) -> Any:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, params=params or None, timeout=self.timeout)
        except requests.RequestException as e:
            raise EngineError(f"Failed to reach dictionary engine at {url}: {e}") from e

        if 400 <= response.status_code < 500:
            raise EngineQueryError(f"Engine rejected {path}: HTTP {response.status_code}")
        try:
            response.raise_for_status()
            return response.json() if response.content else None
        except requests.HTTPError as e:
            raise EngineError(f"Dictionary engine error on {path}: {e}") from e
        except ValueError as e:
            raise EngineError(f"Unreadable engine response from {path}") from e

    def _get(self, path: str, **params) -> Any:
        return self._request("GET", path, **params)

    def _field(self, path: str, key: str, **params) -> Any:
        data = self._get(path, **params)
        try:
            return data[key]
        except (KeyError, TypeError) as e:
            raise EngineError(f"Engine response from {path} has no {key!r}") from e

    def translate_from_navi(self, words: str, check_affixes: bool) -> List[List[Word]]:
        return self._get("/translate/navi", q=words, affixes=str(check_affixes).lower())

    def translate_to_navi(self, text: str, language_code: str) -> List[List[Word]]:
        return self._get("/translate/local", q=text, lang=language_code)

    def list_words(self, filter_terms: Sequence[str], digraph_mode: int) -> List[Word]:
        return self._get("/list", args=list(filter_terms), digraphs=digraph_mode)

    def random_words(self, count: int, filter_terms: Sequence[str], digraph_mode: int) -> List[Word]:
        return self._get("/random", n=count, args=list(filter_terms), digraphs=digraph_mode)

    def navi_to_number(self, word: str) -> int:
        return int(self._field("/number/navi", "decimal", word=word))

    def number_to_navi(self, value: int) -> str:
        return self._field("/number/decimal", "navi", n=value)

    def single_names(self, count: int, syllables: int, dialect: int) -> List[str]:
        return self._get("/names/single", n=count, s=syllables, dialect=dialect)

    def full_names(self, ending: str, count: int, syllables: Sequence[int], dialect: int) -> List[str]:
        return self._get("/names/full", ending=ending, n=count, s=list(syllables), dialect=dialect)

    def alu_names(self, count: int, syllables: int, noun_mode: int, adjective_mode: int, dialect: int) -> List[str]:
        return self._get("/names/alu", n=count, s=syllables, nm=noun_mode, am=adjective_mode, dialect=dialect)

    def phoneme_distributions(self, language_code: str) -> Any:
        return self._get("/phonemes", lang=language_code)

    def homonyms(self) -> List[Any]:
        return self._get("/homonyms")

    def oddballs(self) -> List[Any]:
        return self._get("/oddballs")

    def multi_ipa(self) -> List[Any]:
        return self._get("/multi-ipa")

    def validity(self, candidate: str, language_code: str) -> List[str]:
        return self._get("/valid", text=candidate, lang=language_code)

    def dictionary_size(self) -> int:
        return int(self._field("/size", "words"))

    def reload(self) -> None:
        logger.info("Requesting dictionary reload from %s", self.base_url)
        try:
            self._request("POST", "/reload")
        except EngineQueryError as e:
            raise EngineError(f"Dictionary reload failed: {e}") from e

    def version(self) -> Dict[str, str]:
        data = self._get("/version")
        try:
            return {"version": str(data["version"]), "dict_build": str(data["dict_build"])}
        except (KeyError, TypeError) as e:
            raise EngineError("Engine version response is incomplete") from e
