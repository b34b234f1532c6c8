"""
serialization.py — JSON interchange without float

Decimals travel as plain JSON numbers, never quoted and never through float:

    dumps({"price": ExactRational.from_string("19.99")})  -> '{"price": 19.99}'
    loads('{"price": 19.99}')["price"]                    -> ExactRational('19.99')

loads() hands every number token, integers included, to parse_decimal, so the
usual grammar and 200-digit limits apply to all of them.

read_decimal_field() pulls one decimal out of a decoded mapping:
- missing key -> None (left unset)
- number      -> ExactRational
- anything else (string, list, null, ...) -> ParseError
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from .core import Money
from .errors import ParseError
from .parser import parse_decimal
from .rational import ExactRational


def dumps_decimal(value: ExactRational) -> str:
    """
    Plain numeric text of a finite decimal: "-0.02", "12345".

    Raises:
        PrecisionError: value is repeating and has no decimal text
    """
    value.fraction_digit_count()
    return str(value)


def dumps(obj: Any) -> str:
    """
    JSON text where ExactRational values are written as bare numbers and
    Money as its to_dict() mapping. float is refused.
    """
    if isinstance(obj, ExactRational):
        return dumps_decimal(obj)
    if isinstance(obj, Money):
        return dumps(obj.to_dict())
    if isinstance(obj, float):
        raise TypeError("float is not serialized, use ExactRational")
    if isinstance(obj, Mapping):
        items = []
        for key, value in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"keys must be str, not {type(key).__name__}")
            items.append(f"{json.dumps(key)}: {dumps(value)}")
        return "{" + ", ".join(items) + "}"
    if isinstance(obj, (list, tuple)):
        return "[" + ", ".join(dumps(item) for item in obj) + "]"
    return json.dumps(obj)


def _reject_constant(token: str) -> Any:
    raise ParseError(f"{token} is not a valid decimal amount")


def loads(text: str) -> Any:
    """Decode JSON, reading every number exactly as an ExactRational."""
    return json.loads(
        text,
        parse_float=parse_decimal,
        parse_int=parse_decimal,
        parse_constant=_reject_constant,
    )


def _token_text(value: Any) -> str:
    if isinstance(value, ExactRational):
        return str(value)
    try:
        return json.dumps(value)
    except TypeError:
        return repr(value)


def read_decimal_field(data: Mapping[str, Any], key: str) -> Optional[ExactRational]:
    """
    Read a decimal field from a mapping produced by loads().

    Raises:
        ParseError: the field is present but is not a number
    """
    if key not in data:
        return None
    value = data[key]
    if isinstance(value, ExactRational):
        return value
    raise ParseError(f"{_token_text(value)} is not a valid decimal amount")
