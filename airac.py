#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
AIRAC cycle calculations.

Regular, planned Aeronautical Information Publications become effective at
fixed dates: every 28 days since a common reference date. This module maps
calendar dates to AIRAC cycles and back, and parses and formats the "YYOO"
cycle identifiers (two digit year, two digit ordinal within that year).

Cycles are counted from 1901-01-10 00:00:00 UTC. Dates before that epoch or
after year 2192 may produce wrong data.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

# ---------------------------------------------------------------------
#  Constants
# ---------------------------------------------------------------------
EPOCH = datetime(1901, 1, 10, tzinfo=timezone.utc)
AIRAC_CYCLE_DAYS = 28
CYCLE_DURATION = timedelta(days=AIRAC_CYCLE_DAYS)
DATE_FORMAT = "%Y-%m-%d"
IDENTIFIER_PATTERN = re.compile(r"(\d{2})(\d{2})", re.ASCII)

# Two digit years from 64 on belong to the 1900s, everything below to the
# 2000s, i.e. identifiers cover 1964 to 2063.
CENTURY_PIVOT = 64


# ---------------------------------------------------------------------
#  Errors
# ---------------------------------------------------------------------
class AiracError(ValueError):
    """Base class for AIRAC identifier errors.

    Args:
        identifier: The offending input
        message (str): Human readable reason
    """

    def __init__(self, identifier, message: str):
        super().__init__(message)
        self.identifier = identifier


class MalformedIdentifierError(AiracError):
    """Identifier is not made of exactly four decimal digits."""

    def __init__(self, identifier):
        super().__init__(identifier, f"illegal airac identifier: {identifier!r}")


class OrdinalOutOfRangeError(AiracError):
    """Ordinal is 0 or larger than the number of cycles in the year."""

    def __init__(self, identifier, year: int, ordinal: int):
        super().__init__(
            identifier,
            f"year {year} does not have {ordinal} airac cycles "
            f"(identifier {identifier!r})",
        )
        self.year = year
        self.ordinal = ordinal


# ---------------------------------------------------------------------
#  Helpers
# ---------------------------------------------------------------------
def _as_utc(value: date) -> datetime:
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def parse_identifier(yyoo: str) -> tuple[int, int]:
    """Split a "YYOO" identifier into a full year and an ordinal.

    Surrounding whitespace is ignored. The ordinal is not checked against the
    year here.

    Args:
        yyoo (str): AIRAC identifier, e.g. "2014"

    Returns:
        tuple[int, int]: (year, ordinal), e.g. (2020, 14)

    Raises:
        MalformedIdentifierError: If the identifier is not four digits
    """
    if not isinstance(yyoo, str):
        raise MalformedIdentifierError(yyoo)
    match = IDENTIFIER_PATTERN.fullmatch(yyoo.strip())
    if match is None:
        raise MalformedIdentifierError(yyoo)

    year = int(match.group(1))
    ordinal = int(match.group(2))
    if year >= CENTURY_PIVOT:
        year += 1900
    else:
        year += 2000
    return year, ordinal


# ---------------------------------------------------------------------
#  AIRAC cycle
# ---------------------------------------------------------------------
@dataclass(frozen=True, order=True)
class Airac:
    """An AIRAC cycle, i.e. the number of 28 day cycles since the epoch.

    Instances are immutable and ordered chronologically, so a list of cycles
    sorts with ``sorted()``.
    """

    index: int

    def __post_init__(self):
        if not isinstance(self.index, int) or isinstance(self.index, bool):
            raise TypeError(f"AIRAC cycle index must be an int, not {type(self.index).__name__}")

    # --- Construction ---
    @classmethod
    def from_date(cls, when: date) -> "Airac":
        """Return the AIRAC cycle that is effective at ``when``.

        Naive datetimes are taken as UTC, plain dates as UTC midnight.

        Args:
            when (date): Calendar date or datetime

        Returns:
            Airac: The cycle effective at that instant
        """
        return cls((_as_utc(when) - EPOCH) // CYCLE_DURATION)

    @classmethod
    def from_string(cls, yyoo: str) -> "Airac":
        """Return the AIRAC cycle matching the identifier "YYOO".

        Identifiers "6401" to "9913" belong to the years 1964 to 1999,
        "0001" to "6313" to the years 2000 to 2063.

        Args:
            yyoo (str): AIRAC identifier

        Returns:
            Airac: The identified cycle

        Raises:
            MalformedIdentifierError: If the identifier is not four digits
            OrdinalOutOfRangeError: If the year has no such cycle
        """
        year, ordinal = parse_identifier(yyoo)
        if ordinal == 0:
            raise OrdinalOutOfRangeError(yyoo, year, ordinal)

        last_of_previous_year = cls.from_date(date(year - 1, 12, 31))
        airac = last_of_previous_year + ordinal
        if airac.year != year:
            raise OrdinalOutOfRangeError(yyoo, year, ordinal)

        return airac

    @classmethod
    def from_string_must(cls, yyoo: str) -> "Airac":
        """Like ``from_string``, but fails hard on invalid identifiers.

        Only meant for identifiers known to be valid, e.g. literals in code.

        Raises:
            AssertionError: If the identifier does not parse
        """
        try:
            return cls.from_string(yyoo)
        except AiracError as e:
            raise AssertionError(f"invalid AIRAC literal {yyoo!r}: {e}") from e

    # --- Dates ---
    @property
    def effective(self) -> datetime:
        """Effective date (UTC midnight) of this cycle."""
        return EPOCH + self.index * CYCLE_DURATION

    @property
    def expires(self) -> datetime:
        """Last instant of this cycle."""
        return self.next_cycle().effective - timedelta(microseconds=1)

    @property
    def year(self) -> int:
        return self.effective.year

    @property
    def ordinal(self) -> int:
        return (self.effective.timetuple().tm_yday - 1) // AIRAC_CYCLE_DAYS + 1

    # --- Neighbours ---
    def next_cycle(self) -> "Airac":
        return self + 1

    def previous_cycle(self) -> "Airac":
        return self - 1

    # --- Formatting ---
    def short_string(self) -> str:
        """Return the identifier "YYOO"."""
        return f"{self.year % 100:02d}{self.ordinal:02d}"

    def long_string(self) -> str:
        """Return "YYOO (effective: YYYY-MM-DD; expires: YYYY-MM-DD)"."""
        return (
            f"{self.short_string()} "
            f"(effective: {self.effective.strftime(DATE_FORMAT)}; "
            f"expires: {self.expires.strftime(DATE_FORMAT)})"
        )

    def __str__(self) -> str:
        return self.short_string()

    # --- Arithmetic ---
    def __int__(self) -> int:
        return self.index

    def __add__(self, other):
        if isinstance(other, int) and not isinstance(other, bool):
            return Airac(self.index + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Airac):
            return self.index - other.index
        if isinstance(other, int) and not isinstance(other, bool):
            return Airac(self.index - other)
        return NotImplemented
