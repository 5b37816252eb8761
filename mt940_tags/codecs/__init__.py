"""
Field codecs sub-package for mt940-tags.

Pure functions that turn a restricted-grammar substring of a tag into a
domain value. They are shared by several tag grammars:
  - dates.py: calendar dates (YYMMDD parts) and offset date-times.
  - amounts.py: signed monetary amounts driven by debit/credit marks.

Every codec raises FieldValueError on bad input and has no side effects.
"""

from mt940_tags.codecs.amounts import parse_amount
from mt940_tags.codecs.dates import parse_date, parse_offset_datetime

__all__ = ["parse_amount", "parse_date", "parse_offset_datetime"]
