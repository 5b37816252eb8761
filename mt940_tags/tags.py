"""
Tag factory and tag instances for mt940-tags.

Usage::

    from mt940_tags import create_tag

    tag = create_tag(61, "", "2301230123D150,00NTRFNONREF//B123")
    tag.kind               # TagKind.STATEMENT_LINE
    tag.fields["amount"]   # Decimal('-150.00')

Resolution algorithm (TagFactory.resolve):
1. Normalize the id: purely numeric ids lose leading zeros ("061" -> "61").
2. Look up id + sub-id ("60" + "F" -> "60F").
3. If missing and the id is numeric, fall back to the bare id ("60").
4. Otherwise raise UnknownTagError.

Extraction (TagFactory.create_tag):
- Regular rules match once at the start of the data.
- Scanning rules (the message block) are searched repeatedly, each
  search starting where the previous match ended, until none is left.
- No match at all raises GrammarMismatchError; a bad value raises
  FieldValueError. Nothing is returned on failure.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any, Iterable, Iterator, Mapping

from mt940_tags.config import ParserConfig
from mt940_tags.exceptions import (
    ConfigValidationError,
    FieldValueError,
    GrammarMismatchError,
    UnknownTagError,
)
from mt940_tags.projections import PROJECTIONS
from mt940_tags.tag_registry import TagKind, TagRule, load_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Tag:
    """One parsed tag.

    Attributes:
        id: Id of the rule that parsed the tag ("61", "60", "MB", ...).
            A sub-id that fell back to the bare id is not part of it.
        kind: Tag family.
        data: The raw tag data as given.
        fields: Read-only field record.
    """
    id: str
    kind: TagKind
    data: str
    fields: Mapping[str, Any] = field(hash=False)

    @property
    def is_starting(self) -> bool:
        """True for a message block that opens a message (has block 1)."""
        return self.kind is TagKind.MESSAGE_BLOCK and "1" in self.fields

    def accept(self, visitor: Any) -> Any:
        """Call ``visitor.visit_<kind>(self)`` and return its result."""
        method_name = f"visit_{self.kind.value}"
        method = getattr(visitor, method_name, None)
        if method is None:
            raise TypeError(
                f"{type(visitor).__name__} cannot visit tag {self.id}: "
                f"no method '{method_name}'"
            )
        return method(self)


def scan_matches(pattern: re.Pattern, data: str) -> Iterator[re.Match]:
    """Yield successive non-overlapping matches of *pattern* in *data*.

    The cursor starts at 0 and moves to the end of each match. ``^`` in
    the pattern still refers to the real start of *data*.
    """
    pos = 0
    while pos <= len(data):
        match = pattern.search(data, pos)
        if match is None:
            return
        yield match
        # An empty match must still advance the cursor
        pos = match.end() if match.end() > pos else pos + 1


def normalize_tag_id(tag_id: str | int) -> str:
    """Stringify a tag id; numeric ids lose leading zeros and padding."""
    text = str(tag_id).strip()
    if text.isdecimal():
        return str(int(text))
    return text


class TagFactory:
    """Resolves tag ids to grammar rules and builds Tag instances.

    The rule table and config are fixed at construction; a factory can be
    shared freely between threads.
    """

    def __init__(
        self,
        rules: Iterable[TagRule] | None = None,
        config: ParserConfig | None = None,
    ) -> None:
        self.config = config or ParserConfig()
        if rules is None:
            rules = load_rules(self.config.grammar_path)

        table: dict[str, TagRule] = {}
        for rule in rules:
            if rule.id in table:
                raise ConfigValidationError(f"Duplicate tag id '{rule.id}'")
            table[rule.id] = rule
        self._rules: Mapping[str, TagRule] = MappingProxyType(table)

    def tag_ids(self) -> list[str]:
        """Registered tag ids in grammar order."""
        return list(self._rules)

    def resolve(self, tag_id: str | int, sub_id: str | None = "") -> TagRule:
        """Find the rule for a tag id and optional sub-id.

        Raises:
            UnknownTagError: If neither the composite nor the bare numeric
                id is registered.
        """
        bare = normalize_tag_id(tag_id)
        full = bare + (str(sub_id) if sub_id else "")
        rule = self._rules.get(full)
        if rule is None and bare.isdecimal():
            rule = self._rules.get(bare)
        if rule is None:
            raise UnknownTagError(f"Unknown tag {full}")
        return rule

    def create_tag(self, tag_id: str | int, sub_id: str | None, data: str) -> Tag:
        """Parse *data* with the rule for (tag_id, sub_id).

        Raises:
            UnknownTagError: If the tag id is not registered.
            GrammarMismatchError: If the data does not match the grammar.
            FieldValueError: If a matched value is invalid.
        """
        rule = self.resolve(tag_id, sub_id)
        return Tag(
            id=rule.id,
            kind=rule.kind,
            data=data,
            fields=MappingProxyType(self.extract_fields(rule, data)),
        )

    def extract_fields(self, rule: TagRule, data: str) -> dict[str, Any]:
        """Match *data* against *rule* and project the field record."""
        if rule.scan:
            matches = list(scan_matches(rule.pattern, data))
        else:
            match = rule.pattern.match(data)
            matches = [match] if match else []
        if not matches:
            raise GrammarMismatchError(f"Cannot parse tag {rule.id}: {data}")

        project = PROJECTIONS[rule.projection].func
        fields: dict[str, Any] = {}
        try:
            for match in matches:
                logger.debug("Tag %s matched %r", rule.id, match.group(0))
                fields.update(project(match, self.config))
        except FieldValueError as e:
            raise FieldValueError(f"Tag {rule.id}: {e}") from e
        return fields


@lru_cache(maxsize=None)
def get_default_factory() -> TagFactory:
    """The process-wide factory over the packaged grammar, built once."""
    return TagFactory()


def create_tag(tag_id: str | int, sub_id: str | None, data: str) -> Tag:
    """Parse one tag with the default factory. See TagFactory.create_tag."""
    return get_default_factory().create_tag(tag_id, sub_id, data)
