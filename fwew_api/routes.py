"""
The versioned route table.

Routes are declared once, tagged with the API generation that introduced them.
A generation serves every route whose `since` is not newer than itself, so
later generations only ever add routes. Paths are relative to API_PREFIX.
"""
from dataclasses import dataclass
from typing import Dict, FrozenSet, Optional, Tuple, Type

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
from fwew_api.shaper import Shape

API_PREFIX = "/api"

API_VERSIONS: Dict[int, str] = {
    1: "1.2.1",
    2: "2.0.0",
    3: "3.0.0",
    4: "4.0.0",
    5: "5.0.0",
    6: "6.0.0",
}
CURRENT_GENERATION = max(API_VERSIONS)


@dataclass(frozen=True)
class Route:
    name: str
    path: str
    endpoint: str
    shape: Shape
    since: int
    description: str

    @property
    def mounted_path(self) -> str:
        return API_PREFIX + self.path


# endpoint -> query variant it decodes to; None for static endpoints
ENDPOINT_QUERIES: Dict[str, Optional[Type[Query]]] = {
    "catalog": None,
    "lenition": None,
    "version": None,
    "search": SearchQuery,
    "search_simple": SearchQuery,
    "search_reverse": ReverseSearchQuery,
    "search_both": BidirectionalQuery,
    "list": ListQuery,
    "random": RandomQuery,
    "number_to_navi": NumberQuery,
    "navi_to_number": NumberQuery,
    "name_single": NameQuery,
    "name_full": NameQuery,
    "name_alu": NameQuery,
    "valid": ValidityQuery,
    "phonemes": ReportQuery,
    "homonyms": ReportQuery,
    "oddballs": ReportQuery,
    "multi_ipa": ReportQuery,
    "word_count": WordCountQuery,
    "update": ReloadQuery,
}

ALLOWED_SHAPES: Dict[Optional[Type[Query]], FrozenSet[Shape]] = {
    None: frozenset({Shape.NATIVE}),
    SearchQuery: frozenset({Shape.TWO_D, Shape.ONE_D}),
    ReverseSearchQuery: frozenset({Shape.TWO_D, Shape.ONE_D}),
    BidirectionalQuery: frozenset({Shape.TWO_D, Shape.ONE_D}),
    ListQuery: frozenset({Shape.ONE_D}),
    RandomQuery: frozenset({Shape.ONE_D}),
    NumberQuery: frozenset({Shape.NATIVE}),
    NameQuery: frozenset({Shape.ONE_D, Shape.DISCORD}),
    ValidityQuery: frozenset({Shape.ONE_D, Shape.DISCORD}),
    ReportQuery: frozenset({Shape.NATIVE, Shape.ONE_D}),
    WordCountQuery: frozenset({Shape.SENTENCE, Shape.SCALAR}),
    ReloadQuery: frozenset({Shape.NATIVE}),
}

ROUTES: Tuple[Route, ...] = (
    # generation 1
    Route("endpoints", "/", "catalog", Shape.NATIVE, 1, "This list of endpoints"),
    Route("search", "/fwew/{nav}", "search", Shape.TWO_D, 1,
          "Na'vi to local-language search, affixes included"),
    Route("search_reverse", "/fwew/r/{lang}/{local}", "search_reverse", Shape.TWO_D, 1,
          "Local-language to Na'vi search"),
    Route("list", "/list", "list", Shape.ONE_D, 1, "Every word in the dictionary"),
    Route("list_filter", "/list/{args}", "list", Shape.ONE_D, 1,
          "Words matching space-separated attribute filters"),
    Route("random", "/random/{n}", "random", Shape.ONE_D, 1, "n random words"),
    Route("random_filter", "/random/{n}/{args}", "random", Shape.ONE_D, 1,
          "n random words matching attribute filters"),
    Route("number_to_navi", "/number/r/{num}", "number_to_navi", Shape.NATIVE, 1,
          "Na'vi numeral for a decimal, octal or hex integer"),
    Route("navi_to_number", "/number/{word}", "navi_to_number", Shape.NATIVE, 1,
          "Value of a Na'vi numeral"),
    Route("lenition", "/lenition", "lenition", Shape.NATIVE, 1, "Lenition table"),
    Route("version", "/version", "version", Shape.NATIVE, 1, "API, engine and dictionary versions"),
    # generation 2
    Route("search_simple", "/fwew-simple/{nav}", "search_simple", Shape.TWO_D, 2,
          "Na'vi search without derivational affix analysis"),
    Route("search_both", "/search/{lang}/{words}", "search_both", Shape.TWO_D, 2,
          "Search in either direction, Na'vi first"),
    Route("list_digraphs", "/list2/{digraphs}/{args}", "list", Shape.ONE_D, 2,
          "Filtered list with digraph mode true, maybe or false"),
    Route("random_digraphs", "/random2/{n}/{digraphs}/{args}", "random", Shape.ONE_D, 2,
          "Filtered random words with digraph mode true, maybe or false"),
    # generation 3
    Route("name_single", "/name/single/{n}/{s}/{dialect}", "name_single", Shape.ONE_D, 3,
          "n single names of s syllables"),
    Route("name_full", "/name/full/{ending}/{n}/{s1}/{s2}/{s3}/{dialect}", "name_full", Shape.ONE_D, 3,
          "n full names with the given ending and syllable counts"),
    Route("name_alu", "/name/alu/{n}/{s}/{nm}/{am}/{dialect}", "name_alu", Shape.ONE_D, 3,
          "n alu names with noun mode nm and adjective mode am"),
    # generation 4
    Route("search_1d", "/fwew-1d/{nav}", "search", Shape.ONE_D, 4,
          "Na'vi search as a flat list"),
    Route("search_simple_1d", "/fwew-simple-1d/{nav}", "search_simple", Shape.ONE_D, 4,
          "Na'vi search without affix analysis as a flat list"),
    Route("search_reverse_1d", "/fwew-1d/r/{lang}/{local}", "search_reverse", Shape.ONE_D, 4,
          "Local-language search as a flat list"),
    Route("search_both_1d", "/search-1d/{lang}/{words}", "search_both", Shape.ONE_D, 4,
          "Search in either direction as a flat list"),
    Route("total_words", "/total-words", "word_count", Shape.SENTENCE, 4,
          "Dictionary size as a sentence"),
    Route("dict_len", "/dict-len", "word_count", Shape.SCALAR, 4, "Dictionary size as a number"),
    # generation 5
    Route("total_words_lang", "/total-words/{lang}", "word_count", Shape.SENTENCE, 5,
          "Dictionary size as a sentence in the given language"),
    Route("phonemes", "/phonemedistros", "phonemes", Shape.NATIVE, 5, "Phoneme distributions"),
    Route("phonemes_lang", "/phonemedistros/{lang}", "phonemes", Shape.NATIVE, 5,
          "Phoneme distributions labelled in the given language"),
    Route("homonyms", "/homonyms", "homonyms", Shape.ONE_D, 5, "Words sharing a spelling"),
    Route("oddballs", "/oddballs", "oddballs", Shape.ONE_D, 5, "Words breaking phonotactic rules"),
    Route("multi_ipa", "/multi-ipa", "multi_ipa", Shape.ONE_D, 5, "Words with several pronunciations"),
    Route("valid", "/valid/{lang}/{i}", "valid", Shape.ONE_D, 5, "Phonotactic validity of each word"),
    Route("update", "/update", "update", Shape.NATIVE, 5, "Reload the dictionary"),
    # generation 6
    Route("name_single_discord", "/discord/name/single/{n}/{s}/{dialect}", "name_single", Shape.DISCORD, 6,
          "Single names capped to one chat message"),
    Route("name_full_discord", "/discord/name/full/{ending}/{n}/{s1}/{s2}/{s3}/{dialect}", "name_full",
          Shape.DISCORD, 6, "Full names capped to one chat message"),
    Route("name_alu_discord", "/discord/name/alu/{n}/{s}/{nm}/{am}/{dialect}", "name_alu", Shape.DISCORD, 6,
          "Alu names capped to one chat message"),
    Route("valid_discord", "/discord/valid/{lang}/{i}", "valid", Shape.DISCORD, 6,
          "Validity check capped to one chat message"),
)


def check_table(routes: Tuple[Route, ...] = ROUTES) -> None:
    """
    Validate the table: unique names and paths, known endpoints and
    generations, and a shape every route's query variant can produce.

    Raises:
        ValueError: On the first inconsistency found
    """
    names, paths = set(), set()
    for route in routes:
        if route.name in names or route.path in paths:
            raise ValueError(f"Duplicate route {route.name} {route.path}")
        names.add(route.name)
        paths.add(route.path)
        if route.endpoint not in ENDPOINT_QUERIES:
            raise ValueError(f"Unknown endpoint {route.endpoint!r} for {route.path}")
        if route.since not in API_VERSIONS:
            raise ValueError(f"Unknown generation {route.since} for {route.path}")
        if route.shape not in ALLOWED_SHAPES[ENDPOINT_QUERIES[route.endpoint]]:
            raise ValueError(f"{route.path} cannot be shaped as {route.shape.value}")


def routes_for(generation: int = CURRENT_GENERATION) -> Tuple[Route, ...]:
    """Routes served by the given API generation."""
    return tuple(route for route in ROUTES if route.since <= generation)


check_table()
