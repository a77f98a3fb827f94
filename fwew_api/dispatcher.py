"""
Maps each typed query to exactly one engine operation.
"""
import logging
from typing import Any, Callable, Dict, Type

from fwew_api.engine import DictionaryEngine, EngineQueryError
from fwew_api.queries import (
    BidirectionalQuery,
    ListQuery,
    NameQuery,
    NumberQuery,
    Query,
    RandomQuery,
    ReloadQuery,
    ReportQuery,
    ReverseSearchQuery,
    SearchQuery,
    ValidityQuery,
    WordCountQuery,
)
from fwew_api.schemas import Message, Number
from fwew_api.shaper import flatten

logger = logging.getLogger(__name__)


def _search(engine: DictionaryEngine, query: SearchQuery) -> Any:
    return engine.translate_from_navi(query.words, query.check_affixes)


def _search_reverse(engine: DictionaryEngine, query: ReverseSearchQuery) -> Any:
    return engine.translate_to_navi(query.localized_text, query.language_code)


def _search_both(engine: DictionaryEngine, query: BidirectionalQuery) -> Any:
    # Na'vi wins when the text reads both ways
    try:
        words = engine.translate_from_navi(query.text, query.check_affixes)
    except EngineQueryError as exc:
        logger.debug("Na'vi direction rejected %r: %s", query.text, exc)
        words = None
    if words and flatten(words):
        return words
    return engine.translate_to_navi(query.text, query.language_code)


def _list(engine: DictionaryEngine, query: ListQuery) -> Any:
    return engine.list_words(query.filter_terms, int(query.digraph_mode))


def _random(engine: DictionaryEngine, query: RandomQuery) -> Any:
    return engine.random_words(query.count, query.filter_terms, int(query.digraph_mode))


def _number(engine: DictionaryEngine, query: NumberQuery) -> Any:
    if query.navi_word is not None:
        return Number.of(query.navi_word, engine.navi_to_number(query.navi_word)).model_dump()
    return Number.of(engine.number_to_navi(query.value), query.value).model_dump()


def _name(engine: DictionaryEngine, query: NameQuery) -> Any:
    dialect = int(query.dialect)
    if query.variant == "single":
        return engine.single_names(query.count, query.syllable_counts[0], dialect)
    if query.variant == "full":
        return engine.full_names(query.ending.value, query.count, query.syllable_counts, dialect)
    return engine.alu_names(
        query.count,
        query.syllable_counts[0],
        int(query.noun_mode),
        int(query.adjective_mode),
        dialect,
    )


def _valid(engine: DictionaryEngine, query: ValidityQuery) -> Any:
    return engine.validity(query.candidate, query.language_code)


def _report(engine: DictionaryEngine, query: ReportQuery) -> Any:
    if query.report == "phonemes":
        return engine.phoneme_distributions(query.language_code)
    return getattr(engine, query.report)()


def _word_count(engine: DictionaryEngine, query: WordCountQuery) -> Any:
    return engine.dictionary_size()


def _reload(engine: DictionaryEngine, query: ReloadQuery) -> Any:
    engine.reload()
    logger.info("Dictionary reloaded")
    return Message(message="updated dictionary").model_dump()


DISPATCH: Dict[Type[Query], Callable[[DictionaryEngine, Any], Any]] = {
    SearchQuery: _search,
    ReverseSearchQuery: _search_reverse,
    BidirectionalQuery: _search_both,
    ListQuery: _list,
    RandomQuery: _random,
    NumberQuery: _number,
    NameQuery: _name,
    ValidityQuery: _valid,
    ReportQuery: _report,
    WordCountQuery: _word_count,
    ReloadQuery: _reload,
}


def dispatch(engine: DictionaryEngine, query: Query) -> Any:
    """
    Invoke the engine operation for a query.

    Args:
        engine: Dictionary engine to forward to
        query: Decoded query

    Returns:
        Any: Raw engine result

    Raises:
        EngineError: If the engine fails
        EngineQueryError: If the engine rejects the query
    """
    return DISPATCH[type(query)](engine, query)
