"""
Reshapes engine output into the form a route promises its clients.
"""
import json
from enum import Enum
from typing import Any, List, Optional

from fwew_api import messages
from fwew_api.errors import NoResultsError

DISCORD_BUDGET = 2000


class Shape(str, Enum):
    """Per-route response shape tag."""
    TWO_D = "2d"
    ONE_D = "1d"
    DISCORD = "discord"
    SENTENCE = "sentence"
    SCALAR = "scalar"
    NATIVE = "native"


def serialized_length(payload: Any) -> int:
    """Length of the payload as it is written on the wire."""
    return len(json.dumps(payload, ensure_ascii=False, separators=(",", ":")))


def _is_grouped(result: List[Any]) -> bool:
    return any(isinstance(group, list) for group in result)


def flatten(result: List[Any]) -> List[Any]:
    """Flatten grouped results, keeping group order then intra-group order."""
    flat = []
    for group in result:
        if isinstance(group, list):
            flat.extend(group)
        else:
            flat.append(group)
    return flat


def fit_budget(items: List[Any], budget: int = DISCORD_BUDGET) -> List[Any]:
    """
    Drop whole items from the end until the serialized list fits the budget.

    Args:
        items: Flat list of result items
        budget: Maximum serialized length in characters

    Returns:
        List[Any]: The longest prefix of items that fits
    """
    kept = list(items)
    while kept and serialized_length(kept) > budget:
        kept.pop()
    return kept


def _is_empty(result: Any) -> bool:
    if result is None:
        return True
    if isinstance(result, list):
        return not flatten(result)
    if isinstance(result, (dict, str)):
        return not result
    return False


def shape(result: Any, tag: Shape, language_code: Optional[str] = None) -> Any:
    """
    Convert an engine result into the response body for a route.

    Args:
        result: Engine output (grouped list, flat list, scalar or structure)
        tag: Shape tag of the route being served
        language_code: Locale for sentence responses

    Returns:
        Any: JSON-serializable response body

    Raises:
        NoResultsError: If a collection result holds no items
    """
    if tag is Shape.SCALAR:
        return int(result)
    if tag is Shape.SENTENCE:
        return messages.text("totalWords", language_code, count=int(result))

    if _is_empty(result):
        raise NoResultsError()

    if tag is Shape.TWO_D:
        if _is_grouped(result):
            return result
        return [result]
    if tag is Shape.ONE_D:
        return flatten(result)
    if tag is Shape.DISCORD:
        return fit_budget(flatten(result))
    return result
