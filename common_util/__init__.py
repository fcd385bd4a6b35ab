"""
common_util - Date formatting and collection helper utilities.

Small, stateless helpers: pattern based date formatting/parsing and
None-tolerant collection operations.
"""

from .utils.date_utils import DateUtils, format_date, parse_date
from .utils.collection_utils import CollectionUtils
from .models.date_pattern import DatePattern

__version__ = "1.0.0"
__all__ = [
    'DateUtils',
    'format_date',
    'parse_date',
    'CollectionUtils',
    'DatePattern',
]
