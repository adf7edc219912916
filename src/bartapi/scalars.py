"""Decoders for the irregular scalar shapes emitted by the BART JSON API.

The JSON surface is an automatic conversion of BART's XML output, so text
nodes keep their CDATA wrappers, numbers and flags arrive as quoted strings,
and real-time minutes use the word "Leaving" instead of zero. The plain
functions below are usable on their own; the annotated types at the bottom
plug them into the response records.
"""

import re
from typing import Annotated, Any, List, TypeVar

from pydantic import BeforeValidator, ValidationInfo

from .errors import BartDecodeError

CDATA_KEY = "#cdata-section"
LEAVING = "Leaving"

_INT_RE = re.compile(r"^[+-]?\d+$")
_FLOAT_RE = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_BOOLS = {"1": True, "true": True, "0": False, "false": False}


def decode_cdata(value: Any, field: str = "value") -> str:
    """Unwrap a ``{"#cdata-section": "..."}`` object into its text.

    An empty string is accepted as empty text, since BART drops the wrapper
    when an element has no content.
    """
    if isinstance(value, dict) and isinstance(value.get(CDATA_KEY), str):
        return value[CDATA_KEY]
    if value == "":
        return ""
    raise BartDecodeError(f"{field}: expected CDATA section, got {value!r}")


def decode_int(value: Any, field: str = "value") -> int:
    """Parse a decimal integer that may arrive quoted."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and _INT_RE.match(value.strip()):
        return int(value)
    raise BartDecodeError(f"{field}: expected integer string, got {value!r}")


def decode_float(value: Any, field: str = "value") -> float:
    """Parse an integer or floating point literal that may arrive quoted."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, str) and _FLOAT_RE.match(value.strip()):
        return float(value)
    raise BartDecodeError(f"{field}: expected numeric string, got {value!r}")


def decode_minute(value: Any, field: str = "value") -> int:
    """Parse minutes until departure, where "Leaving" means 0."""
    if value == LEAVING:
        return 0
    return decode_int(value, field)


def decode_bool(value: Any, field: str = "value") -> bool:
    """Parse "0", "1", "true" or "false"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value in _BOOLS:
        return _BOOLS[value]
    raise BartDecodeError(f"{field}: expected boolean string, got {value!r}")


def ensure_list(value: Any) -> Any:
    """Wrap a lone object or string in a list.

    XML elements that repeat are converted to JSON arrays only when there is
    more than one of them. An empty string stands for no elements at all.
    """
    if value == "":
        return []
    if isinstance(value, (dict, str)):
        return [value]
    return value


def _field_validator(decoder):
    def validator(value: Any, info: ValidationInfo) -> Any:
        return decoder(value, info.field_name or "value")

    return BeforeValidator(validator)


T = TypeVar("T")

CData = Annotated[str, _field_validator(decode_cdata)]
IntStr = Annotated[int, _field_validator(decode_int)]
FloatStr = Annotated[float, _field_validator(decode_float)]
Minute = Annotated[int, _field_validator(decode_minute)]
Boolish = Annotated[bool, _field_validator(decode_bool)]
XmlList = Annotated[List[T], BeforeValidator(ensure_list)]

__all__ = [
    "CDATA_KEY",
    "LEAVING",
    "decode_cdata",
    "decode_int",
    "decode_float",
    "decode_minute",
    "decode_bool",
    "ensure_list",
    "CData",
    "IntStr",
    "FloatStr",
    "Minute",
    "Boolish",
    "XmlList",
]
