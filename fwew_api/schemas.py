"""
Pydantic schemas for the fixed-shape responses.
Word entries and reports are passed through in the engine's own structure.
"""
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field

Word = Dict[str, Any]


class Message(BaseModel):
    """Envelope for every error and for plain acknowledgements."""
    message: str


class Number(BaseModel):
    """A Na'vi numeral with its octal and decimal forms."""
    name: str
    octal: str
    decimal: str

    @classmethod
    def of(cls, name: str, value: int) -> "Number":
        return cls(name=name, octal=oct(value), decimal=str(value))


class VersionInfo(BaseModel):
    """API, engine and dictionary versions, fixed at startup."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    api_version: str = Field(..., alias="APIVersion")
    fwew_version: str = Field(..., alias="FwewVersion")
    dict_build: str = Field(..., alias="DictVersion")
