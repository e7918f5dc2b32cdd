"""
leaptime.fields.format
----------------------
A small ISO-8601 formatter/parser over the field protocol.

A layout is a sequence of elements (literal text, a numeric field value, a
decimal fraction of a field). Formatting reads every field from a
TemporalAccessor; parsing produces a ParsedTemporal holding the raw values,
validated against each field's range. UTC fields are validated against
range_refined_by, so "23:59:60" only parses on a day that ends with a leap.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Dict, Sequence, Tuple, Union

from ..core.errors import OutOfRangeError, ParseError, UnsupportedFieldError
from .chrono import ChronoField, TemporalAccessor, TemporalField
from .temporal import date_of
from .utc_fields import AbstractUTCField, UTCSecondOfMinute

if TYPE_CHECKING:
    from ..scales.utc import UTCScale


class SignStyle(Enum):
    NORMAL = "normal"              # '-' for negative values only
    NOT_NEGATIVE = "not_negative"  # negative values are an error
    EXCEEDS_PAD = "exceeds_pad"    # '+' once the value is wider than min_width


@dataclass(frozen=True)
class Literal:
    text: str


@dataclass(frozen=True)
class Value:
    field: TemporalField
    min_width: int
    max_width: int
    sign_style: SignStyle = SignStyle.NOT_NEGATIVE


@dataclass(frozen=True)
class FractionValue:
    """Field printed as a decimal fraction of its (fixed, zero-based) range."""
    field: TemporalField
    min_width: int
    max_width: int
    decimal_point: bool = True


Element = Union[Literal, Value, FractionValue]


class ParsedTemporal:
    """Field values read from text; answers only the fields that were parsed."""

    def __init__(self, values: Dict[TemporalField, int]):
        self._values = dict(values)

    def is_supported(self, field: TemporalField) -> bool:
        return field in self._values

    def get_long(self, field: TemporalField) -> int:
        try:
            return self._values[field]
        except KeyError:
            raise UnsupportedFieldError(f"Unsupported field: {field}") from None

    def fields(self) -> Tuple[TemporalField, ...]:
        return tuple(self._values)

    def __repr__(self) -> str:
        inner = ", ".join(f"{f}={v}" for f, v in self._values.items())
        return f"ParsedTemporal({inner})"


class DateTimeFormatter:

    def __init__(self, elements: Sequence[Element]):
        self._elements = tuple(elements)

    @property
    def elements(self) -> Tuple[Element, ...]:
        return self._elements

    # ---------------------------------------------------------
    # Formatting
    # ---------------------------------------------------------
    def format(self, temporal: TemporalAccessor) -> str:
        out = []
        for e in self._elements:
            if isinstance(e, Literal):
                out.append(e.text)
            elif isinstance(e, Value):
                out.append(_format_value(e, temporal.get_long(e.field)))
            else:
                out.append(_format_fraction(e, temporal.get_long(e.field)))
        return "".join(out)

    # ---------------------------------------------------------
    # Parsing
    # ---------------------------------------------------------
    def parse(self, text: str) -> ParsedTemporal:
        pos = 0
        values: Dict[TemporalField, int] = {}
        for e in self._elements:
            if isinstance(e, Literal):
                if not text.startswith(e.text, pos):
                    raise ParseError(f"text {text!r} could not be parsed at index {pos}: expected {e.text!r}")
                pos += len(e.text)
            elif isinstance(e, Value):
                values[e.field], pos = _parse_value(e, text, pos)
            else:
                values[e.field], pos = _parse_fraction(e, text, pos)
        if pos != len(text):
            raise ParseError(f"text {text!r} could not be parsed, unparsed text found at index {pos}")

        parsed = ParsedTemporal(values)
        try:
            if all(f in values for f in (ChronoField.YEAR, ChronoField.MONTH_OF_YEAR, ChronoField.DAY_OF_MONTH)):
                date_of(parsed)
            for field, value in values.items():
                if isinstance(field, AbstractUTCField):
                    field.range_refined_by(parsed).check_valid_value(value, field)
                else:
                    field.range().check_valid_value(value, field)
        except OutOfRangeError as e:
            raise ParseError(f"text {text!r} could not be parsed: {e}") from e
        return parsed


def _format_value(e: Value, value: int) -> str:
    digits = str(abs(value))
    if len(digits) > e.max_width:
        raise OutOfRangeError(f"field {e.field} cannot be printed as the value {value} "
                              f"exceeds the maximum print width of {e.max_width}")
    digits = digits.rjust(e.min_width, "0")
    if value < 0:
        if e.sign_style is SignStyle.NOT_NEGATIVE:
            raise OutOfRangeError(f"field {e.field} cannot be printed as the value {value} is negative")
        return "-" + digits
    if e.sign_style is SignStyle.EXCEEDS_PAD and len(digits) > e.min_width:
        return "+" + digits
    return digits


def _parse_value(e: Value, text: str, pos: int) -> Tuple[int, int]:
    sign = ""
    if pos < len(text) and text[pos] in "+-" and e.sign_style is not SignStyle.NOT_NEGATIVE:
        sign = text[pos]
        pos += 1
    end = pos
    while end < len(text) and end - pos < e.max_width and text[end].isdigit():
        end += 1
    digits = text[pos:end]
    if len(digits) < e.min_width:
        raise ParseError(f"text {text!r} could not be parsed at index {pos}: expected {e.field}")
    if e.sign_style is SignStyle.EXCEEDS_PAD and len(digits) > e.min_width and sign != "+" and sign != "-":
        raise ParseError(f"text {text!r} could not be parsed at index {pos}: {e.field} needs a sign")
    value = int(digits)
    return (-value if sign == "-" else value), end


def _fraction_span(field: TemporalField) -> Tuple[int, int]:
    r = field.range()
    if not r.is_fixed():
        raise OutOfRangeError(f"field {field} must have a fixed set of values")
    return r.minimum, r.maximum - r.minimum + 1


def _format_fraction(e: FractionValue, value: int) -> str:
    minimum, span = _fraction_span(e.field)
    scaled = (value - minimum) * 10 ** e.max_width // span
    digits = f"{scaled:0{e.max_width}d}".rstrip("0").ljust(e.min_width, "0")
    if not digits:
        return ""
    return ("." if e.decimal_point else "") + digits


def _parse_fraction(e: FractionValue, text: str, pos: int) -> Tuple[int, int]:
    minimum, span = _fraction_span(e.field)
    start = pos
    if e.decimal_point:
        if pos >= len(text) or text[pos] != ".":
            if e.min_width > 0:
                raise ParseError(f"text {text!r} could not be parsed at index {pos}: expected '.'")
            return minimum, pos
        pos += 1
    end = pos
    while end < len(text) and end - pos < e.max_width and text[end].isdigit():
        end += 1
    digits = text[pos:end]
    if len(digits) < max(e.min_width, 1 if e.decimal_point else 0):
        raise ParseError(f"text {text!r} could not be parsed at index {start}: expected a fraction")
    scaled = int(digits.ljust(e.max_width, "0")) if digits else 0
    return minimum + scaled * span // 10 ** e.max_width, end


def _date_elements() -> Tuple[Element, ...]:
    return (
        Value(ChronoField.YEAR, 4, 10, SignStyle.EXCEEDS_PAD),
        Literal("-"),
        Value(ChronoField.MONTH_OF_YEAR, 2, 2),
        Literal("-"),
        Value(ChronoField.DAY_OF_MONTH, 2, 2),
        Literal("T"),
        Value(ChronoField.HOUR_OF_DAY, 2, 2),
        Literal(":"),
        Value(ChronoField.MINUTE_OF_HOUR, 2, 2),
        Literal(":"),
    )


def iso_local_date_time() -> DateTimeFormatter:
    """YYYY-MM-DDTHH:MM:SS[.fffffffff] for scales without leap seconds."""
    return DateTimeFormatter(_date_elements() + (
        Value(ChronoField.SECOND_OF_MINUTE, 2, 2),
        FractionValue(ChronoField.NANO_OF_SECOND, 0, 9),
    ))


def iso_utc_date_time(utc: "UTCScale") -> DateTimeFormatter:
    """Same layout, with a second of minute that may read 60 during a leap."""
    return DateTimeFormatter(_date_elements() + (
        Value(UTCSecondOfMinute(utc), 2, 19),
        FractionValue(ChronoField.NANO_OF_SECOND, 0, 9),
    ))
