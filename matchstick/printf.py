"""A small printf-style formatter with the conversions the game uses.

Supported conversions: ``%s`` string, ``%c`` character, ``%d``/``%i``/``%u``
decimal, ``%o`` octal and ``%b`` binary of the 32-bit unsigned value,
``%x``/``%X`` signed hexadecimal, ``%S`` string with non-printable
characters shown as three-digit octal escapes, ``%p`` hexadecimal with a
``0x`` prefix, and ``%%``.  Any other character after ``%`` is dropped.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF


def _string(value: Any) -> str:
    return str(value)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c needs a single character")
        return value
    return chr(operator.index(value))


def _decimal(value: Any) -> str:
    return str(operator.index(value))


def _octal(value: Any) -> str:
    return format(operator.index(value) & _UINT_MASK, "o")


def _binary(value: Any) -> str:
    return format(operator.index(value) & _UINT_MASK, "b")


def _signed_hex(value: Any, upper: bool) -> str:
    number = operator.index(value)
    sign = "-" if number < 0 else ""
    return sign + format(abs(number), "X" if upper else "x")


def _hex_lower(value: Any) -> str:
    return _signed_hex(value, upper=False)


def _hex_upper(value: Any) -> str:
    return _signed_hex(value, upper=True)


def _pointer(value: Any) -> str:
    return "0x" + _signed_hex(value, upper=True)


def _escaped(value: Any) -> str:
    pieces = []
    for ch in str(value):
        code = ord(ch)
        if code < 32 or code >= 127:
            pieces.append(f"\\{code:03o}")
        else:
            pieces.append(ch)
    return "".join(pieces)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": _string,
    "c": _char,
    "i": _decimal,
    "u": _decimal,
    "o": _octal,
    "b": _binary,
    "d": _decimal,
    "x": _hex_lower,
    "X": _hex_upper,
    "S": _escaped,
    "p": _pointer,
}


def _next_argument(arguments: Iterator[Any]) -> Any:
    try:
        return next(arguments)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def format_string(template: str, *args: Any) -> str:
    """Expand ``template`` with ``args``.

    A character is read as a conversion whenever the character before it
    in the template is ``%``; so in ``"%%d"`` the ``d`` is a conversion too.
    """
    arguments = iter(args)
    out = []
    previous = ""
    for ch in template:
        if previous == "%":
            if ch == "%":
                out.append("%")
            elif ch in _CONVERSIONS:
                out.append(_CONVERSIONS[ch](_next_argument(arguments)))
        elif ch != "%":
            out.append(ch)
        previous = ch
    return "".join(out)