"""
Turns raw path segments into typed queries.

Decoding only checks shape and type; it never calls the engine. Numeric
segments use strict base-aware parsing and fail with InvalidNumberError
carrying the original token. Mode segments never fail, see enums.resolve.
"""
import re
from functools import partial
from typing import Callable, Dict, Mapping, Tuple

from fwew_api.enums import resolve
from fwew_api.errors import InvalidNumberError
from fwew_api.queries import (
    MAX_NUMBER,
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
from fwew_api.routes import Route
from fwew_api.shaper import Shape

_INT_LITERAL = re.compile(
    r"""
    (?P<sign>[+-]?)
    (?:
        0[xX](?P<hex>_?[0-9a-fA-F](?:_?[0-9a-fA-F])*)
      | 0[oO](?P<oct>_?[0-7](?:_?[0-7])*)
      | 0[bB](?P<bin>_?[01](?:_?[01])*)
      | 0(?P<zoct>_?[0-7](?:_?[0-7])*)
      | (?P<dec>[1-9](?:_?[0-9])*|0)
    )
    """,
    re.VERBOSE,
)

_BASES = (("hex", 16), ("oct", 8), ("bin", 2), ("zoct", 8), ("dec", 10))

Segments = Mapping[str, str]


def parse_int(token: str, key: str = "invalidDecimalError") -> int:
    """
    Parse an integer literal with its base taken from the prefix.

    Accepts decimal, leading-zero octal (017), 0o, 0x and 0b literals with an
    optional sign and underscores between digits.

    Args:
        token: Raw path segment
        key: Message key used if the token is rejected

    Returns:
        int: The parsed value

    Raises:
        InvalidNumberError: If the token is not an integer literal
    """
    match = _INT_LITERAL.fullmatch(token or "")
    if match is None:
        raise InvalidNumberError(token, key)
    for group, base in _BASES:
        digits = match.group(group)
        if digits is not None:
            value = int(digits.replace("_", ""), base)
            return -value if match.group("sign") == "-" else value
    raise InvalidNumberError(token, key)


def split_terms(raw: str) -> Tuple[str, ...]:
    """
    Split a space-delimited list segment.

    ", " is first collapsed to "," so "a, b c" and "a,b c" decode alike.
    """
    if not raw:
        return ()
    return tuple(term for term in raw.replace(", ", ",").split(" ") if term)


def _search(segments: Segments, check_affixes: bool) -> Query:
    return SearchQuery(words=segments["nav"], check_affixes=check_affixes)


def _search_reverse(segments: Segments) -> Query:
    return ReverseSearchQuery(language_code=segments["lang"], localized_text=segments["local"])


def _search_both(segments: Segments) -> Query:
    return BidirectionalQuery(language_code=segments["lang"], text=segments["words"])


def _list(segments: Segments) -> Query:
    return ListQuery(
        filter_terms=split_terms(segments.get("args", "")),
        digraph_mode=resolve("digraphs", segments.get("digraphs")),
    )


def _random(segments: Segments) -> Query:
    return RandomQuery(
        count=parse_int(segments["n"]),
        filter_terms=split_terms(segments.get("args", "")),
        digraph_mode=resolve("digraphs", segments.get("digraphs")),
    )


def _number_to_navi(segments: Segments) -> Query:
    token = segments["num"]
    value = parse_int(token, "invalidIntError")
    if not 0 <= value <= MAX_NUMBER:
        raise InvalidNumberError(token, "invalidIntError")
    return NumberQuery(value=value)


def _navi_to_number(segments: Segments) -> Query:
    return NumberQuery(navi_word=segments["word"])


def _name(segments: Segments, variant: str, syllable_keys: Tuple[str, ...], discord_safe: bool) -> Query:
    return NameQuery(
        variant=variant,
        count=parse_int(segments["n"]),
        syllable_counts=tuple(parse_int(segments[key]) for key in syllable_keys),
        dialect=resolve("dialect", segments.get("dialect")),
        ending=resolve("ending", segments.get("ending")),
        noun_mode=resolve("noun", segments.get("nm")),
        adjective_mode=resolve("adjective", segments.get("am")),
        discord_safe=discord_safe,
    )


def _valid(segments: Segments, discord_safe: bool) -> Query:
    return ValidityQuery(candidate=segments["i"], language_code=segments["lang"], discord_safe=discord_safe)


def _report(segments: Segments, report: str) -> Query:
    return ReportQuery(report=report, language_code=segments.get("lang", "en"))


def _word_count(segments: Segments) -> Query:
    return WordCountQuery(language_code=segments.get("lang", "en"))


def _update(segments: Segments) -> Query:
    return ReloadQuery()


def _decoders(discord_safe: bool) -> Dict[str, Callable[[Segments], Query]]:
    return {
        "search": partial(_search, check_affixes=True),
        "search_simple": partial(_search, check_affixes=False),
        "search_reverse": _search_reverse,
        "search_both": _search_both,
        "list": _list,
        "random": _random,
        "number_to_navi": _number_to_navi,
        "navi_to_number": _navi_to_number,
        "name_single": partial(_name, variant="single", syllable_keys=("s",), discord_safe=discord_safe),
        "name_full": partial(_name, variant="full", syllable_keys=("s1", "s2", "s3"), discord_safe=discord_safe),
        "name_alu": partial(_name, variant="alu", syllable_keys=("s",), discord_safe=discord_safe),
        "valid": partial(_valid, discord_safe=discord_safe),
        "phonemes": partial(_report, report="phonemes"),
        "homonyms": partial(_report, report="homonyms"),
        "oddballs": partial(_report, report="oddballs"),
        "multi_ipa": partial(_report, report="multi_ipa"),
        "word_count": _word_count,
        "update": _update,
    }


_DECODERS = {
    False: _decoders(discord_safe=False),
    True: _decoders(discord_safe=True),
}


def decode(route: Route, segments: Segments) -> Query:
    """
    Build the typed query for a route from its raw path segments.

    Args:
        route: The route being served
        segments: Path parameters as matched by the router

    Returns:
        Query: The typed query for the route's endpoint

    Raises:
        InvalidNumberError: If a numeric segment cannot be parsed
        KeyError: If the route has no decoder (static endpoints)
    """
    return _DECODERS[route.shape is Shape.DISCORD][route.endpoint](segments)
