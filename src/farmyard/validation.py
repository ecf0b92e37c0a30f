"""Field validators for animal attributes.

Each validator returns the normalised value or raises ValidationError.
"""

from __future__ import annotations

import logging
import math
import re
from datetime import date, datetime

from farmyard.models import InvalidField, Sex, ValidationError

logger = logging.getLogger(__name__)

CODE_PATTERN = re.compile(r"[0-9a-z]{5}")
ISO_DATE_PATTERN = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def _reject(field: InvalidField, value, message: str) -> ValidationError:
    logger.debug("Rejected %s=%r: %s", field.value, value, message)
    return ValidationError(field, value, message)


def validate_code(value) -> str:
    if not isinstance(value, str) or CODE_PATTERN.fullmatch(value) is None:
        raise _reject(
            InvalidField.CODE,
            value,
            f"code must be 5 characters of 0-9 or a-z, got {value!r}",
        )
    return value


def parse_birth_date(value) -> date:
    """Accept ISO ``YYYY-MM-DD`` text or a ``date`` (not a ``datetime``)."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    if not isinstance(value, str):
        raise _reject(InvalidField.BIRTH_DATE, value, f"expected YYYY-MM-DD text, got {value!r}")

    m = ISO_DATE_PATTERN.fullmatch(value)
    if m is None:
        raise _reject(InvalidField.BIRTH_DATE, value, f"birth date must be YYYY-MM-DD, got {value!r}")
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError as exc:
        raise _reject(InvalidField.BIRTH_DATE, value, f"no such date {value!r}: {exc}") from exc


def parse_sex(value, notation: str = "en") -> Sex:
    if isinstance(value, Sex):
        return value
    if not isinstance(value, str):
        raise _reject(InvalidField.SEX, value, f"sex must be a Sex or a symbol, got {value!r}")
    try:
        return Sex.from_symbol(value, notation)
    except ValidationError as exc:
        raise _reject(InvalidField.SEX, value, exc.message) from None


def validate_weight(value) -> float:
    # bool is an int subclass; True must not pass as 1 kg
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise _reject(InvalidField.WEIGHT, value, f"weight must be a number, got {value!r}")
    try:
        weight = float(value)
    except OverflowError:
        weight = math.inf
    if not math.isfinite(weight) or weight <= 0:
        raise _reject(InvalidField.WEIGHT, value, f"weight must be a finite number > 0, got {value!r}")
    return weight
