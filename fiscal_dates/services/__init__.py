"""
Services package for the fiscal dates helpers.

Higher-level operations composed from the date utilities.
"""

from .label_resolver import LabelResolver, resolve_date_range_label

__all__ = ['LabelResolver', 'resolve_date_range_label']
