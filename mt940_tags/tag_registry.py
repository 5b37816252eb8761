"""
Grammar rule loader for mt940-tags.

Loads the tag grammar table from mt940_tags/grammars/tags.yaml (or a
caller-supplied file) into frozen Pydantic models. Each rule defines:
- id: tag identifier ("20", "34F", "NS", ...), unique within a file
- kind: tag family, used for visitor dispatch
- pattern: regular expression applied to the tag data
- projection: name of the function that builds the field record
- scan: if True the pattern is searched repeatedly over the whole data

Why YAML instead of hardcoded:
- Grammars are data; a bank-specific variant can ship its own file.
- Patterns stay readable next to a short description of each tag.
- Separation of grammar knowledge (YAML) from extraction logic (Python).
"""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from mt940_tags.exceptions import ConfigValidationError
from mt940_tags.projections import PROJECTIONS

logger = logging.getLogger(__name__)

# Directory containing grammar YAML files (sibling package)
_GRAMMARS_DIR = Path(__file__).parent / "grammars"
DEFAULT_GRAMMAR_PATH = _GRAMMARS_DIR / "tags.yaml"


class TagKind(str, Enum):
    """Tag families. ``Tag.accept`` calls ``visit_<value>`` on a visitor."""

    TRANSACTION_REFERENCE_NUMBER = "transaction_reference_number"
    RELATED_REFERENCE = "related_reference"
    ACCOUNT_IDENTIFICATION = "account_identification"
    STATEMENT_NUMBER = "statement_number"
    DEBIT_AND_CREDIT_FLOOR_LIMIT = "debit_and_credit_floor_limit"
    DATE_TIME_INDICATION = "date_time_indication"
    NON_SWIFT = "non_swift"
    OPENING_BALANCE = "opening_balance"
    CLOSING_BALANCE = "closing_balance"
    NUMBER_AND_SUM_OF_ENTRIES = "number_and_sum_of_entries"
    STATEMENT_LINE = "statement_line"
    TRANSACTION_DETAILS = "transaction_details"
    CLOSING_AVAILABLE_BALANCE = "closing_available_balance"
    FORWARD_AVAILABLE_BALANCE = "forward_available_balance"
    MESSAGE_BLOCK = "message_block"


class TagRule(BaseModel):
    """A single grammar rule loaded from YAML."""

    model_config = ConfigDict(frozen=True)

    id: str
    kind: TagKind
    pattern: re.Pattern
    projection: str
    scan: bool = False
    description: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def _stringify_id(cls, value: Any) -> str:
        # YAML reads an unquoted 20 as int
        return str(value).strip()

    @field_validator("projection")
    @classmethod
    def _known_projection(cls, value: str) -> str:
        if value not in PROJECTIONS:
            raise ValueError(
                f"Unknown projection '{value}'. Expected one of {sorted(PROJECTIONS)}"
            )
        return value

    @model_validator(mode="after")
    def _check_groups(self) -> TagRule:
        """The pattern must define every named group its projection reads."""
        missing = PROJECTIONS[self.projection].groups - set(self.pattern.groupindex)
        if missing:
            raise ValueError(
                f"Pattern for tag {self.id} lacks groups {sorted(missing)} "
                f"required by projection '{self.projection}'"
            )
        return self


def load_rules(path: str | Path | None = None) -> list[TagRule]:
    """Load grammar rules from a YAML file, in file order.

    Args:
        path: Grammar YAML with a top-level ``tags`` list. Defaults to
            the packaged grammars/tags.yaml.

    Returns:
        List of TagRule objects.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the file is empty, a rule is invalid
            or a tag id appears twice.
    """
    path = Path(path) if path is not None else DEFAULT_GRAMMAR_PATH
    if not path.exists():
        raise FileNotFoundError(f"Grammar file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if not raw or not raw.get("tags"):
        raise ConfigValidationError(f"Grammar file has no tags: {path}")

    rules: list[TagRule] = []
    seen: set[str] = set()
    for entry in raw["tags"]:
        try:
            rule = TagRule.model_validate(entry)
        except ValidationError as e:
            raise ConfigValidationError(
                f"Invalid grammar rule in {path}: {entry!r}\n{e}"
            ) from e
        if rule.id in seen:
            raise ConfigValidationError(f"Duplicate tag id '{rule.id}' in {path}")
        seen.add(rule.id)
        rules.append(rule)
        logger.debug("Loaded rule: %s (%s)", rule.id, rule.kind.value)

    logger.info("Loaded %d tag rules from %s", len(rules), path)
    return rules
