"""
Typed queries produced by the parameter decoder.

Exactly one of these is built per request. All mode codes are already
resolved enum members by the time a query exists.
"""
from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from fwew_api.enums import AdjectiveMode, Dialect, DigraphMode, Ending, NounMode

MAX_NUMBER = 32767


class Query(BaseModel):
    """Base class for all typed queries."""
    model_config = ConfigDict(frozen=True)


class SearchQuery(Query):
    """Na'vi to local-language search."""
    words: str
    check_affixes: bool = True


class ReverseSearchQuery(Query):
    """Local-language to Na'vi search."""
    language_code: str
    localized_text: str


class BidirectionalQuery(Query):
    """Search that tries Na'vi first and falls back to the local language."""
    language_code: str
    text: str
    check_affixes: bool = True


class ListQuery(Query):
    """Attribute-filtered listing of the whole dictionary."""
    filter_terms: Tuple[str, ...] = ()
    digraph_mode: DigraphMode = DigraphMode.TRUE


class RandomQuery(Query):
    """Random sample, optionally filtered like ListQuery."""
    count: int
    filter_terms: Tuple[str, ...] = ()
    digraph_mode: DigraphMode = DigraphMode.TRUE


class NumberQuery(Query):
    """Numeral conversion in either direction."""
    navi_word: Optional[str] = None
    value: Optional[int] = Field(default=None, ge=0, le=MAX_NUMBER)

    @model_validator(mode="after")
    def _exactly_one(self):
        if (self.navi_word is None) == (self.value is None):
            raise ValueError("exactly one of navi_word and value must be set")
        return self


class NameQuery(Query):
    """Name generation in one of three styles."""
    variant: Literal["single", "full", "alu"]
    count: int
    syllable_counts: Tuple[int, ...]
    dialect: Dialect = Dialect.INTERDIALECT
    ending: Ending = Ending.RANDOM
    noun_mode: NounMode = NounMode.NORMAL
    adjective_mode: AdjectiveMode = AdjectiveMode.ANY
    discord_safe: bool = False


class ValidityQuery(Query):
    """Phonotactic validity check of candidate words."""
    candidate: str
    language_code: str = "en"
    discord_safe: bool = False


class ReportQuery(Query):
    """Dictionary-wide reports that take no arguments besides a language."""
    report: Literal["phonemes", "homonyms", "oddballs", "multi_ipa"]
    language_code: str = "en"


class WordCountQuery(Query):
    language_code: str = "en"


class ReloadQuery(Query):
    pass
