"""
Date formatting and parsing utility.
"""

import logging
from datetime import date, datetime
from typing import Optional

from common_util.models.date_pattern import DatePattern


class DateUtils:
    """Utility class for formatting and parsing dates with a pattern."""

    def __init__(self):
        self.logger = logging.getLogger('DateUtils')

    def format_date(self, value: Optional[date], pattern: Optional[str]) -> Optional[str]:
        """
        Format a date or datetime to string.

        A new DatePattern is compiled on every call; compiled patterns are
        never shared between calls.

        Args:
            value: datetime (or date) to format
            pattern: Pattern string, e.g. "yyyy-MM-dd HH:mm:ss"

        Returns:
            Formatted string, or None if value or pattern is None

        Raises:
            ValueError: If the pattern contains an unknown pattern letter
        """
        if value is None or pattern is None:
            return None

        return DatePattern(pattern).format(value)

    def parse_date(self, date_string: Optional[str], pattern: Optional[str]) -> Optional[datetime]:
        """
        Parse a date string with a pattern.

        Only a prefix of date_string has to match; out of range fields roll
        over as in lenient SimpleDateFormat parsing.

        Args:
            date_string: String containing a date
            pattern: Pattern string, e.g. "yyyy-MM-dd"

        Returns:
            datetime object or None if either argument is None or parsing fails
        """
        if date_string is None or pattern is None:
            return None

        try:
            return DatePattern(pattern).parse(date_string)
        except (ValueError, TypeError, OverflowError) as e:
            self.logger.debug(f"Could not parse date '{date_string}' with pattern '{pattern}': {e}")
            return None


def format_date(value: Optional[date], pattern: Optional[str]) -> Optional[str]:
    """
    Convenience function to format a date.

    Args:
        value: datetime (or date) to format
        pattern: Pattern string

    Returns:
        Formatted string or None
    """
    return DateUtils().format_date(value, pattern)


def parse_date(date_string: Optional[str], pattern: Optional[str]) -> Optional[datetime]:
    """
    Convenience function to parse a date string.

    Args:
        date_string: String containing a date
        pattern: Pattern string

    Returns:
        datetime object or None
    """
    return DateUtils().parse_date(date_string, pattern)
