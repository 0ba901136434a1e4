"""Option definitions and value validators for command-line analysis."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Sequence

__all__ = [
    "ArgsError",
    "ExtArgsType",
    "ArgOption",
    "INT_KINDS",
    "DOUBLE_KINDS",
    "STRING_KINDS",
    "IPADDR_KINDS",
    "SET_KINDS",
    "RANGE_KINDS",
    "DEFAULTING_KINDS",
    "is_strict_int",
    "is_strict_double",
    "is_valid_ipv4",
    "ipv4_to_int",
    "int_to_ipv4",
]

_DIGITS = frozenset("0123456789")
_INT_MAX_DIGITS = "2147483647"
_INT_MIN_DIGITS = "2147483648"
_IPV4_MAX = 0xFFFFFFFF


class ArgsError(ValueError):
    """Raised when an option definition or a command line is invalid."""


class ExtArgsType(enum.Enum):
    """Kind of value an option takes; the value is its display name."""

    BOOLEAN = "Bool"
    INT_WITH_DEFAULT = "IntWithDefault"
    INT_WITH_ERROR = "IntWithError"
    INT_WITH_SET_DEFAULT = "IntSETWithDefault"
    INT_WITH_SET_ERROR = "IntSETWithError"
    DOUBLE_WITH_DEFAULT = "DoubleWithDefault"
    DOUBLE_WITH_ERROR = "DoubleWithError"
    DOUBLE_WITH_SET_DEFAULT = "DoubleSETWithDefault"
    DOUBLE_WITH_SET_ERROR = "DoubleSETWithError"
    STR = "String"
    STR_WITH_SET_DEFAULT = "StringSETWithDefault"
    STR_WITH_SET_ERROR = "StringSETWithError"
    IPADDR_WITH_DEFAULT = "IPAddrWithDefault"
    IPADDR_WITH_ERROR = "IPAddrWithError"


INT_KINDS = frozenset(
    {
        ExtArgsType.INT_WITH_DEFAULT,
        ExtArgsType.INT_WITH_ERROR,
        ExtArgsType.INT_WITH_SET_DEFAULT,
        ExtArgsType.INT_WITH_SET_ERROR,
    }
)
DOUBLE_KINDS = frozenset(
    {
        ExtArgsType.DOUBLE_WITH_DEFAULT,
        ExtArgsType.DOUBLE_WITH_ERROR,
        ExtArgsType.DOUBLE_WITH_SET_DEFAULT,
        ExtArgsType.DOUBLE_WITH_SET_ERROR,
    }
)
STRING_KINDS = frozenset(
    {ExtArgsType.STR, ExtArgsType.STR_WITH_SET_DEFAULT, ExtArgsType.STR_WITH_SET_ERROR}
)
IPADDR_KINDS = frozenset({ExtArgsType.IPADDR_WITH_DEFAULT, ExtArgsType.IPADDR_WITH_ERROR})
SET_KINDS = frozenset(
    {
        ExtArgsType.INT_WITH_SET_DEFAULT,
        ExtArgsType.INT_WITH_SET_ERROR,
        ExtArgsType.DOUBLE_WITH_SET_DEFAULT,
        ExtArgsType.DOUBLE_WITH_SET_ERROR,
        ExtArgsType.STR_WITH_SET_DEFAULT,
        ExtArgsType.STR_WITH_SET_ERROR,
    }
)
RANGE_KINDS = frozenset(
    {
        ExtArgsType.INT_WITH_DEFAULT,
        ExtArgsType.INT_WITH_ERROR,
        ExtArgsType.DOUBLE_WITH_DEFAULT,
        ExtArgsType.DOUBLE_WITH_ERROR,
    }
)
DEFAULTING_KINDS = frozenset(
    {
        ExtArgsType.INT_WITH_DEFAULT,
        ExtArgsType.INT_WITH_SET_DEFAULT,
        ExtArgsType.DOUBLE_WITH_DEFAULT,
        ExtArgsType.DOUBLE_WITH_SET_DEFAULT,
        ExtArgsType.STR_WITH_SET_DEFAULT,
        ExtArgsType.IPADDR_WITH_DEFAULT,
    }
)


def _strip_sign(text: str) -> tuple[bool, str]:
    if text[:1] in ("+", "-"):
        return text[0] == "-", text[1:]
    return False, text


def is_strict_int(text: str) -> bool:
    """True if text is an optionally signed decimal that fits a 32-bit int."""
    if not text:
        return False
    negative, body = _strip_sign(text)
    if not body or not set(body) <= _DIGITS:
        return False
    significant = body.lstrip("0")
    if len(significant) > 10:
        return False
    if len(significant) == 10:
        return significant <= (_INT_MIN_DIGITS if negative else _INT_MAX_DIGITS)
    return True


def is_strict_double(text: str) -> bool:
    """True if text is an optionally signed decimal with at most one point."""
    if not text:
        return False
    _, body = _strip_sign(text)
    if not body or body.count(".") > 1:
        return False
    digits = body.replace(".", "")
    return bool(digits) and set(digits) <= _DIGITS


def is_valid_ipv4(text: str) -> bool:
    """True if text is four dot-separated decimal fields, each 0..255."""
    if not text:
        return False
    parts = text.split(".")
    if len(parts) != 4:
        return False
    return all(part and set(part) <= _DIGITS and int(part) <= 255 for part in parts)


def ipv4_to_int(text: str) -> int:
    """Convert dotted-quad text to its 32-bit integer form."""
    if not is_valid_ipv4(text):
        raise ArgsError(f"invalid IPv4 address: {text!r}")
    value = 0
    for part in text.split("."):
        value = (value << 8) | int(part)
    return value


def int_to_ipv4(value: int) -> str:
    """Convert a 32-bit integer to dotted-quad text."""
    if not 0 <= value <= _IPV4_MAX:
        raise ArgsError(f"IPv4 value out of range: {value}")
    return ".".join(str((value >> shift) & 0xFF) for shift in (24, 16, 8, 0))


def _fixed6(value: float) -> str:
    return f"{value:.6f}"


def _general(value: float) -> str:
    return f"{value:g}"


def _pick_default(choices: Sequence[Any], default_index: int) -> Any:
    if not choices:
        raise ArgsError("an option with a set of values needs at least one choice")
    if 0 <= default_index < len(choices):
        return choices[default_index]
    return choices[0]


@dataclass
class ArgOption:
    """One named command-line option, its constraints and its parsed state."""

    name: str
    kind: ExtArgsType
    default: Any
    minimum: Any = None
    maximum: Any = None
    choices: tuple = ()
    existed: bool = False
    value: Any = None
    ip_value: int = field(default=0)

    def __post_init__(self) -> None:
        if self.value is None:
            self.value = self.default
        if self.kind in IPADDR_KINDS:
            self.ip_value = ipv4_to_int(self.default)

    @classmethod
    def boolean(cls, name: str, default: bool = False) -> "ArgOption":
        return cls(name, ExtArgsType.BOOLEAN, bool(default))

    @classmethod
    def int_range(
        cls, name: str, default: int, minimum: int, maximum: int, strict: bool = False
    ) -> "ArgOption":
        kind = ExtArgsType.INT_WITH_ERROR if strict else ExtArgsType.INT_WITH_DEFAULT
        return cls(name, kind, int(default), int(minimum), int(maximum))

    @classmethod
    def int_set(
        cls, name: str, choices: Sequence[int], default_index: int = 0, strict: bool = False
    ) -> "ArgOption":
        kind = ExtArgsType.INT_WITH_SET_ERROR if strict else ExtArgsType.INT_WITH_SET_DEFAULT
        values = tuple(int(c) for c in choices)
        return cls(name, kind, _pick_default(values, default_index), choices=values)

    @classmethod
    def double_range(
        cls,
        name: str,
        default: float,
        minimum: float,
        maximum: float,
        strict: bool = False,
    ) -> "ArgOption":
        kind = ExtArgsType.DOUBLE_WITH_ERROR if strict else ExtArgsType.DOUBLE_WITH_DEFAULT
        return cls(name, kind, float(default), float(minimum), float(maximum))

    @classmethod
    def double_set(
        cls,
        name: str,
        choices: Sequence[float],
        default_index: int = 0,
        strict: bool = False,
    ) -> "ArgOption":
        kind = (
            ExtArgsType.DOUBLE_WITH_SET_ERROR if strict else ExtArgsType.DOUBLE_WITH_SET_DEFAULT
        )
        values = tuple(float(c) for c in choices)
        return cls(name, kind, _pick_default(values, default_index), choices=values)

    @classmethod
    def string(cls, name: str, default: str = "") -> "ArgOption":
        return cls(name, ExtArgsType.STR, str(default))

    @classmethod
    def string_set(
        cls, name: str, choices: Sequence[str], default_index: int = 0, strict: bool = False
    ) -> "ArgOption":
        kind = ExtArgsType.STR_WITH_SET_ERROR if strict else ExtArgsType.STR_WITH_SET_DEFAULT
        values = tuple(str(c) for c in choices)
        return cls(name, kind, _pick_default(values, default_index), choices=values)

    @classmethod
    def ipaddr(cls, name: str, default: str = "", strict: bool = False) -> "ArgOption":
        kind = ExtArgsType.IPADDR_WITH_ERROR if strict else ExtArgsType.IPADDR_WITH_DEFAULT
        return cls(name, kind, default or "0.0.0.0")

    def type_name(self) -> str:
        """Display name of the option's kind."""
        return self.kind.value

    def range_text(self) -> str:
        """Allowed range or set, doubles shown with six decimals; "/" if none."""
        if self.kind in RANGE_KINDS:
            fmt = _fixed6 if self.kind in DOUBLE_KINDS else str
            return f"[{fmt(self.minimum)}..{fmt(self.maximum)}]"
        if self.kind in SET_KINDS:
            fmt = _fixed6 if self.kind in DOUBLE_KINDS else str
            return "/".join(fmt(c) for c in self.choices) or "/"
        return "/"

    def range_text_double(self) -> str:
        """Allowed range or set of a double option in short form; "/" otherwise."""
        if self.kind not in DOUBLE_KINDS:
            return "/"
        if self.kind in RANGE_KINDS:
            return f"[{_general(self.minimum)}..{_general(self.maximum)}]"
        return "/".join(_general(c) for c in self.choices) or "/"

    def str_ipaddr(self) -> str:
        """The current IP address value as dotted-quad text."""
        return int_to_ipv4(self.ip_value)