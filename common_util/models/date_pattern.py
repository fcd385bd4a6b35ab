"""
Date Pattern model.

Compiles SimpleDateFormat-style patterns ("yyyy-MM-dd HH:mm:ss") into tokens
that can render a datetime or parse one back from text.

Parsing is lenient: only a prefix of the text has to match, and out of range
fields roll over into the next unit (2024-02-30 is 2024-03-01).
"""

import calendar
import re
import string
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Callable, Dict, List, Optional, Sequence

from dateutil import tz
from dateutil.relativedelta import relativedelta


# Numeric fields rendered as zero padded integers
NUMERIC_FIELDS: Dict[str, Callable[[datetime], int]] = {
    'd': lambda dt: dt.day,
    'H': lambda dt: dt.hour,
    'h': lambda dt: dt.hour % 12 or 12,
    'm': lambda dt: dt.minute,
    's': lambda dt: dt.second,
    'S': lambda dt: dt.microsecond // 1000,
    'D': lambda dt: dt.timetuple().tm_yday,
}

NUMERIC_LETTERS = frozenset('ydHhmsSD')

ZONE_FIELDS = frozenset('zZX')

PATTERN_LETTERS = frozenset('yMdHhmsSEaDzZX')

# Used when the pattern has no year field
DEFAULT_YEAR = 1970

ZONE_OFFSET_REGEX = r'Z|[+-]\d{2}(?::?\d{2})?'


@dataclass(frozen=True)
class PatternToken:
    """A single field or literal run of a date pattern."""

    letter: str = ''
    width: int = 0
    literal: str = ''

    @property
    def is_field(self) -> bool:
        return bool(self.letter)

    @property
    def is_numeric(self) -> bool:
        if self.letter == 'M':
            return self.width <= 2
        return self.letter in NUMERIC_LETTERS


class DatePattern:
    """A compiled date pattern."""

    def __init__(self, pattern: str):
        """
        Compile a date pattern.

        Args:
            pattern: SimpleDateFormat-style pattern string

        Raises:
            ValueError: If the pattern contains an unknown letter, an
                unterminated quote or an X field wider than three
        """
        self.pattern = pattern
        self.tokens = self._tokenize(pattern)

    def _tokenize(self, pattern: str) -> List[PatternToken]:
        """Split a pattern into field and literal tokens."""
        tokens = []
        i = 0
        n = len(pattern)

        while i < n:
            ch = pattern[i]

            if ch == "'":
                # '' outside quotes is an escaped quote
                if i + 1 < n and pattern[i + 1] == "'":
                    tokens.append(PatternToken(literal="'"))
                    i += 2
                    continue

                i += 1
                chars = []
                while True:
                    if i >= n:
                        raise ValueError(f"Unterminated quote in pattern: {pattern}")
                    if pattern[i] == "'":
                        if i + 1 < n and pattern[i + 1] == "'":
                            chars.append("'")
                            i += 2
                            continue
                        i += 1
                        break
                    chars.append(pattern[i])
                    i += 1
                tokens.append(PatternToken(literal=''.join(chars)))

            elif ch in string.ascii_letters:
                if ch not in PATTERN_LETTERS:
                    raise ValueError(f"Illegal pattern character '{ch}'")
                start = i
                while i < n and pattern[i] == ch:
                    i += 1
                if ch == 'X' and i - start > 3:
                    raise ValueError(f"Invalid ISO 8601 format: length={i - start}")
                tokens.append(PatternToken(letter=ch, width=i - start))

            else:
                tokens.append(PatternToken(literal=ch))
                i += 1

        return tokens

    @property
    def has_zone(self) -> bool:
        return any(token.letter in ZONE_FIELDS for token in self.tokens if token.is_field)

    def format(self, value: date) -> str:
        """
        Render a date or datetime with this pattern.

        A plain date is rendered as midnight of that day. Naive datetimes are
        taken to be in the local zone when the pattern prints zone fields.
        """
        if not isinstance(value, datetime):
            value = datetime.combine(value, time.min)
        if value.tzinfo is None and self.has_zone:
            value = value.replace(tzinfo=tz.tzlocal())

        return ''.join(
            self._format_field(token, value) if token.is_field else token.literal
            for token in self.tokens
        )

    def _format_field(self, token: PatternToken, dt: datetime) -> str:
        letter, width = token.letter, token.width

        if letter == 'y':
            if width == 2:
                return f"{dt.year % 100:02d}"
            return str(dt.year).zfill(width)
        if letter == 'M':
            if width >= 4:
                return dt.strftime('%B')
            if width == 3:
                return dt.strftime('%b')
            return str(dt.month).zfill(width)
        if letter == 'E':
            return dt.strftime('%A' if width >= 4 else '%a')
        if letter == 'a':
            return 'AM' if dt.hour < 12 else 'PM'
        if letter == 'z':
            return dt.tzname() or ''
        if letter == 'Z':
            return dt.strftime('%z')
        if letter == 'X':
            return _format_iso_offset(dt.utcoffset(), width)

        return str(NUMERIC_FIELDS[letter](dt)).zfill(width)

    def to_regex(self) -> re.Pattern:
        """
        Build a regular expression matching text in this pattern.

        Each field is captured in a group named f<token index>. A numeric field
        directly followed by another numeric field takes exactly its width in
        digits, so "yyyyMMdd" splits "20240115" correctly.
        """
        parts = []
        for index, token in enumerate(self.tokens):
            if not token.is_field:
                parts.append(re.escape(token.literal))
                continue

            name = f"f{index}"
            if token.is_numeric:
                following = self.tokens[index + 1] if index + 1 < len(self.tokens) else None
                if following is not None and following.is_numeric:
                    digits = rf"\d{{{token.width}}}"
                else:
                    digits = r"\d+"
                parts.append(f"(?P<{name}>{digits})")
            elif token.letter in ('M', 'E'):
                parts.append(rf"(?P<{name}>[^\W\d_]+)")
            elif token.letter == 'a':
                parts.append(f"(?P<{name}>[ap]m)")
            elif token.letter == 'z':
                parts.append(rf"(?P<{name}>[A-Za-z][\w/+\-]*)")
            else:
                parts.append(f"(?P<{name}>{ZONE_OFFSET_REGEX})")

        return re.compile(''.join(parts), re.IGNORECASE)

    def parse(self, text: str) -> datetime:
        """
        Parse text with this pattern.

        Text after the matched prefix is ignored. Fields that overflow roll
        over (month 13 is January of the next year, hour 25 is 1am the next
        day). Fields missing from the pattern default to 1970-01-01 00:00.

        Returns:
            A naive datetime, or an aware one if the pattern has a zone field

        Raises:
            ValueError: If the text does not match the pattern
        """
        match = self.to_regex().match(text)
        if match is None:
            raise ValueError(f"Unparseable date: '{text}' does not match '{self.pattern}'")

        fields: Dict[str, int] = {}
        tzinfo = None
        for index, token in enumerate(self.tokens):
            if not token.is_field:
                continue

            value = match.group(f"f{index}")
            letter = token.letter
            if letter == 'y':
                fields['y'] = _parse_year(value, token.width)
            elif token.is_numeric:
                fields[letter] = int(value)
            elif letter == 'M':
                fields['M'] = _lookup_name(value, (calendar.month_name, calendar.month_abbr))
            elif letter == 'E':
                # Day of week is checked but does not move the date
                _lookup_name(value, (calendar.day_name, calendar.day_abbr))
            elif letter == 'a':
                fields['a'] = 12 if value.upper() == 'PM' else 0
            elif letter == 'z':
                tzinfo = tz.gettz(value)
                if tzinfo is None:
                    raise ValueError(f"Unknown time zone: {value}")
            else:
                tzinfo = _parse_offset(value)

        return self._resolve(fields, tzinfo)

    def _resolve(self, fields: Dict[str, int], tzinfo) -> datetime:
        """Combine parsed fields into a datetime, rolling over out of range values."""
        if 'H' in fields:
            hour = fields['H']
        else:
            hour = fields.get('h', 0) % 12 + fields.get('a', 0)

        if 'D' in fields and 'M' not in fields and 'd' not in fields:
            months, days = 0, fields['D'] - 1
        else:
            months, days = fields.get('M', 1) - 1, fields.get('d', 1) - 1

        base = datetime(fields.get('y', DEFAULT_YEAR), 1, 1, tzinfo=tzinfo)
        return base + relativedelta(
            months=months,
            days=days,
            hours=hour,
            minutes=fields.get('m', 0),
            seconds=fields.get('s', 0),
            microseconds=fields.get('S', 0) * 1000,
        )

    def __repr__(self) -> str:
        return f"DatePattern({self.pattern!r})"


def _format_iso_offset(offset: Optional[timedelta], width: int) -> str:
    """Render a UTC offset the way ISO 8601 X fields do: Z, +01, +0100 or +01:00."""
    if not offset:
        return 'Z'

    total_minutes = int(offset.total_seconds()) // 60
    sign = '-' if total_minutes < 0 else '+'
    hours, minutes = divmod(abs(total_minutes), 60)
    if width == 1:
        return f"{sign}{hours:02d}"
    if width == 2:
        return f"{sign}{hours:02d}{minutes:02d}"
    return f"{sign}{hours:02d}:{minutes:02d}"


def _parse_offset(value: str):
    if value.upper() == 'Z':
        return tz.UTC

    sign = -1 if value[0] == '-' else 1
    digits = value[1:].replace(':', '')
    hours = int(digits[:2])
    minutes = int(digits[2:] or 0)
    return tz.tzoffset(None, sign * (hours * 3600 + minutes * 60))


def _parse_year(value: str, width: int) -> int:
    """
    Parse a year field.

    Two digits under a "yy" field are placed in the century window running
    from 80 years before now to 20 years after. Anything else is literal.
    """
    if width != 2 or len(value) != 2:
        return int(value)

    current = datetime.now().year
    year = current - current % 100 + int(value)
    if year > current + 20:
        year -= 100
    elif year <= current - 80:
        year += 100
    return year


def _lookup_name(value: str, tables: Sequence[Sequence[str]]) -> int:
    """Find a month or weekday name (full or abbreviated) and return its index."""
    lowered = value.lower()
    for table in tables:
        for number, name in enumerate(table):
            if name and name.lower() == lowered:
                return number
    raise ValueError(f"Unknown name: {value}")
