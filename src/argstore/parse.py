"""
Parser for the one-line `Args` grammar:

    Key1=Value1,Key2=Value2,...

There's no escaping, so neither `,` nor `=` can appear inside a key or value.
Each value's type is inferred, trying (in order) integer, real, boolean and
falling back to the raw text as a string.
"""

import re

from .errors import MalformedConstructionError
from .values import Value, ValueType


INTEGER_RE = re.compile(r'[+-]?[0-9]+')
REAL_RE = re.compile(r'[+-]?([0-9]+\.[0-9]*|\.[0-9]+|[0-9]+)([eE][+-]?[0-9]+)?')

# case-sensitive, so `TRUE` stays a string
BOOLEAN_LITERALS = {
    'true': True,
    'True': True,
    'false': False,
    'False': False,
}


def parse_literal(text:str) -> Value:
    """
    Infer the type of `text`. Surrounding whitespace is ignored when matching
    a number or boolean, but a string keeps the text exactly as given.
    """
    stripped = text.strip()
    if INTEGER_RE.fullmatch(stripped):
        return Value(ValueType.INTEGER, int(stripped))
    if REAL_RE.fullmatch(stripped):
        return Value(ValueType.REAL, float(stripped))
    if stripped in BOOLEAN_LITERALS:
        return Value(ValueType.BOOLEAN, BOOLEAN_LITERALS[stripped])
    return Value(ValueType.STRING, text)


def parse_spec(spec:str) -> list[tuple[str, Value]]:
    """
    Split `spec` into `(key, value)` pairs, in order of appearance.
    Duplicate keys are kept; it's up to the caller to let later ones win.
    There has to be at least one entry, so an empty `spec` is malformed.
    """
    pairs = []
    for segment in spec.split(','):
        if segment.count('=') != 1:
            raise MalformedConstructionError(
                f'expected exactly one "=" in "{segment}" (from "{spec}")'
            )
        key, literal = segment.split('=')
        key = key.strip()
        if key == '':
            raise MalformedConstructionError(
                f'empty key in "{segment}" (from "{spec}")'
            )
        pairs.append((key, parse_literal(literal)))
    return pairs
