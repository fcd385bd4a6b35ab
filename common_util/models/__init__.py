"""
Models package - Data classes for the application.
"""

from common_util.models.date_pattern import DatePattern, PatternToken

__all__ = ['DatePattern', 'PatternToken']
