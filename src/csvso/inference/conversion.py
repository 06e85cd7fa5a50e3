"""
Conversion policy between CSV tokens and typed record values.

Import never rejects a token: malformed ints and floats become zero,
malformed booleans become False, strings pass through unchanged.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable

from csvso.canonical.column import Column, ColumnType

INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

INTEGER_PATTERN = re.compile(r"^[+-]?[0-9]+$")
FLOAT_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
FLOAT_SPECIALS = {
    "nan": math.nan,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
}

DEFAULTS: Dict[ColumnType, Any] = {
    ColumnType.INT: 0,
    ColumnType.FLOAT: 0.0,
    ColumnType.BOOL: False,
    ColumnType.STRING: "",
}


def _parse_int(token: str) -> int:
    v = token.strip()
    if not INTEGER_PATTERN.fullmatch(v):
        return 0
    value = int(v)
    if value < INT32_MIN or value > INT32_MAX:
        return 0
    return value


def _parse_float(token: str) -> float:
    v = token.strip()
    special = FLOAT_SPECIALS.get(v.lower())
    if special is not None:
        return special
    if not FLOAT_PATTERN.fullmatch(v):
        return 0.0
    return float(v)


def _parse_bool(token: str) -> bool:
    return token.strip().lower() == "true"


def parse_or_default(token: str, type_name: str) -> Any:
    """
    Convert a CSV token to the value for the declared column type.
    Total: any token produces a value, never an exception.
    """
    kind = ColumnType.from_name(type_name)
    if token is None:
        return DEFAULTS[kind]
    if kind is ColumnType.INT:
        return _parse_int(token)
    if kind is ColumnType.FLOAT:
        return _parse_float(token)
    if kind is ColumnType.BOOL:
        return _parse_bool(token)
    return token


def default_for(type_name: str) -> Any:
    return DEFAULTS[ColumnType.from_name(type_name)]


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def render_value(value: Any, type_name: str) -> str:
    """
    Primitive string form used by Export.
    No quoting or escaping of delimiters.
    """
    kind = ColumnType.from_name(type_name)
    if value is None:
        value = DEFAULTS[kind]
    if kind is ColumnType.INT:
        return str(int(value))
    if kind is ColumnType.FLOAT:
        return _render_float(float(value))
    if kind is ColumnType.BOOL:
        return "True" if value else "False"
    return str(value)


# --------------------------------------------------
# Field bindings
# --------------------------------------------------
@dataclass(frozen=True)
class FieldBinding:
    """
    Typed setter/getter pair for one column, resolved once per schema.
    """
    name: str
    type_name: str
    parse: Callable[[str], Any]
    render: Callable[[Any], str]
    default: Any


def build_bindings(columns: Iterable[Column]) -> Dict[str, FieldBinding]:
    bindings: Dict[str, FieldBinding] = {}
    for column in columns:
        type_name = column.type_name
        bindings[column.name] = FieldBinding(
            name=column.name,
            type_name=type_name,
            parse=lambda token, t=type_name: parse_or_default(token, t),
            render=lambda value, t=type_name: render_value(value, t),
            default=default_for(type_name),
        )
    return bindings
