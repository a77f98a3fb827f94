"""
Mode tokens used in URL segments and the engine codes they resolve to.

Every category is a closed Enum plus a synonym table. Resolution is total:
an unknown or missing token falls back to the category default instead of
failing, so new synonyms only ever need a new table entry.
"""
import logging
from enum import Enum, IntEnum
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class Dialect(IntEnum):
    """Na'vi dialect used by the name generators."""
    INTERDIALECT = 0
    FOREST = 1
    REEF = 2


class DigraphMode(IntEnum):
    """How strictly digraphs (kx, ng, ts, ...) are detected while filtering."""
    MAYBE = 0
    TRUE = 1
    FALSE = 2


class NounMode(IntEnum):
    """Kind of noun heading an alu name."""
    ANY = -1
    NORMAL = 1
    VERB_ER = 2


class AdjectiveMode(IntEnum):
    """Kind of adjective attached to an alu name. NONE is a real choice, ANY lets the engine pick."""
    ANY = -1
    NONE = 0
    NORMAL = 1
    GENITIVE_NOUN = 2
    ORIGIN_NOUN = 3
    PARTICIPLE = 4
    ACTIVE_PARTICIPLE = 5
    PASSIVE_PARTICIPLE = 6


class Ending(str, Enum):
    """Family-name ending for full names; RANDOM lets the engine pick one."""
    RANDOM = ""
    ITAN = "'itan"
    ITE = "'ite"
    ITU = "'itu"


_TABLES: Dict[str, Dict[str, Enum]] = {
    "dialect": {
        "forest": Dialect.FOREST,
        "reef": Dialect.REEF,
    },
    "digraphs": {
        "maybe": DigraphMode.MAYBE,
        "false": DigraphMode.FALSE,
    },
    "noun": {
        "any": NounMode.ANY,
        "something": NounMode.ANY,
        "normal noun": NounMode.NORMAL,
        "normal": NounMode.NORMAL,
        "verb-er": NounMode.VERB_ER,
    },
    "adjective": {
        "any": AdjectiveMode.ANY,
        "something": AdjectiveMode.ANY,
        "none": AdjectiveMode.NONE,
        "normal adjective": AdjectiveMode.NORMAL,
        "normal": AdjectiveMode.NORMAL,
        "genitive noun": AdjectiveMode.GENITIVE_NOUN,
        "genitive": AdjectiveMode.GENITIVE_NOUN,
        "origin noun": AdjectiveMode.ORIGIN_NOUN,
        "origin": AdjectiveMode.ORIGIN_NOUN,
        "participle verb": AdjectiveMode.PARTICIPLE,
        "participle": AdjectiveMode.PARTICIPLE,
        "active participle verb": AdjectiveMode.ACTIVE_PARTICIPLE,
        "active participle": AdjectiveMode.ACTIVE_PARTICIPLE,
        "passive participle verb": AdjectiveMode.PASSIVE_PARTICIPLE,
        "passive participle": AdjectiveMode.PASSIVE_PARTICIPLE,
    },
    "ending": {
        "'itan": Ending.ITAN,
        "itan": Ending.ITAN,
        "'ite": Ending.ITE,
        "ite": Ending.ITE,
        "'itu": Ending.ITU,
        "itu": Ending.ITU,
    },
}

DEFAULTS: Dict[str, Enum] = {
    "dialect": Dialect.INTERDIALECT,
    "digraphs": DigraphMode.TRUE,
    "noun": NounMode.NORMAL,
    "adjective": AdjectiveMode.ANY,
    "ending": Ending.RANDOM,
}


def resolve(category: str, token: Optional[str]) -> Enum:
    """
    Resolve a human-readable mode token to its engine code.

    Args:
        category: One of "dialect", "digraphs", "noun", "adjective", "ending"
        token: Raw path segment, may be None when the segment is absent

    Returns:
        Enum: The matching member, or the category default for unknown tokens

    Raises:
        KeyError: If the category itself does not exist
    """
    table = _TABLES[category]
    key = (token or "").strip().lower()
    if key in table:
        return table[key]

    default = DEFAULTS[category]
    if key:
        logger.debug("Unknown %s token %r, using %s", category, token, default.name)
    return default
