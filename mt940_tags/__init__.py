"""
mt940-tags: parse SWIFT MT940/MT942 statement tags into typed field records.

Public API surface:

- ``create_tag(tag_id, sub_id, data)`` -- **recommended entry point**.
  Resolves the grammar rule for the tag and returns an immutable ``Tag``
  whose ``fields`` mapping holds dates, currencies, signed ``Decimal``
  amounts and reference strings.

- ``TagFactory(rules=None, config=None)`` -- the same with a custom
  grammar file or ``ParserConfig`` (2-digit year base, strict dates).

- ``parse_date`` / ``parse_offset_datetime`` / ``parse_amount`` -- the
  field codecs shared by the tag grammars.

Splitting a message into tags and assembling statements is left to the
caller.
"""

from __future__ import annotations

from mt940_tags.codecs import parse_amount, parse_date, parse_offset_datetime
from mt940_tags.config import ParserConfig, load_config, save_config
from mt940_tags.exceptions import (
    ConfigValidationError,
    FieldValueError,
    GrammarMismatchError,
    Mt940TagsError,
    UnknownTagError,
)
from mt940_tags.tag_registry import TagKind, TagRule, load_rules
from mt940_tags.tags import Tag, TagFactory, create_tag, get_default_factory
from mt940_tags.visitor import TagVisitor

__all__ = [
    "create_tag",
    "Tag",
    "TagFactory",
    "TagKind",
    "TagRule",
    "TagVisitor",
    "get_default_factory",
    "load_rules",
    "ParserConfig",
    "load_config",
    "save_config",
    "parse_amount",
    "parse_date",
    "parse_offset_datetime",
    "Mt940TagsError",
    "UnknownTagError",
    "GrammarMismatchError",
    "FieldValueError",
    "ConfigValidationError",
]
