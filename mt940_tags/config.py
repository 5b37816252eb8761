"""
Configuration model and YAML I/O for mt940-tags.

The parser needs very little configuration; the settings that exist
control how dates are read and which grammar file backs the tag registry.

Key model:
- ParserConfig: year_base, strict_dates, grammar_path.

Key functions:
- load_config(path) -> ParserConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Example YAML::

    year_base: 2000
    strict_dates: true
    grammar_path: my_grammars/tags.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mt940_tags.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ParserConfig(BaseModel):
    """Settings applied by a TagFactory to every tag it creates."""

    model_config = ConfigDict(frozen=True)

    year_base: int = Field(
        2000,
        ge=100,
        le=9900,
        description="Century added to 2-digit years (e.g. 2000 -> '23' is 2023)",
    )
    strict_dates: bool = Field(
        False,
        description=(
            "If True, reject out-of-range days/months instead of rolling "
            "them over into the next month"
        ),
    )
    grammar_path: str | None = Field(
        None,
        description="Alternative tag grammar YAML; None uses the packaged one",
    )

    @field_validator("year_base")
    @classmethod
    def _check_century(cls, value: int) -> int:
        if value % 100:
            raise ValueError(f"year_base must be a whole century, got {value}")
        return value


def load_config(path: str | Path) -> ParserConfig:
    """Read parser settings from a YAML mapping.

    Keys left out of the file keep their ParserConfig defaults. A relative
    ``grammar_path`` is resolved against the config file's directory, so a
    config and its grammar can be moved together.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty, is not a mapping or
            holds an invalid setting.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config file must hold a mapping of settings, got "
            f"{type(raw).__name__}: {path}"
        )

    grammar = raw.get("grammar_path")
    if isinstance(grammar, str) and grammar and not Path(grammar).is_absolute():
        raw = {**raw, "grammar_path": str(path.parent / grammar)}

    try:
        config = ParserConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid parser config in {path}:\n{e}") from e
    logger.info(
        "Loaded config from %s (year_base=%d, strict_dates=%s)",
        path, config.year_base, config.strict_dates,
    )
    return config


def save_config(config: ParserConfig, path: str | Path) -> None:
    """Write only the settings that differ from the defaults.

    An all-default config produces a file holding just the header and an
    empty mapping, which load_config reads back as ParserConfig().
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    changed = config.model_dump(mode="json", exclude_defaults=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write("# mt940-tags parser configuration\n")
        f.write(f"# Settings: {', '.join(ParserConfig.model_fields)}\n\n")
        yaml.safe_dump(changed, f, default_flow_style=False, sort_keys=False)
    logger.info("Saved config to %s (%d non-default settings)", path, len(changed))
