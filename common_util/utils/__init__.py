"""
Utils package - Date and collection helpers.
"""

from common_util.utils.date_utils import DateUtils, format_date, parse_date
from common_util.utils.collection_utils import CollectionUtils

__all__ = [
    'DateUtils',
    'format_date',
    'parse_date',
    'CollectionUtils',
]
