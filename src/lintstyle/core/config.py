import json
import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lintstyle.core.languages import normalize_language
from lintstyle.core.rules import RULE_TYPES, Rule
from lintstyle.errors import ConfigurationError
from lintstyle.models import Severity

logger = logging.getLogger(__name__)


class RuleSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    enabled: bool | None = None
    severity: Severity | None = None
    parameters: dict[str, Any] = Field(default_factory=dict)


class RuleSetConfig(BaseModel):
    """Which rules run and with what parameters.

    Rules absent from ``rules`` keep their defaults.
    """

    model_config = ConfigDict(extra="forbid")

    language: str | None = None
    rules: dict[str, RuleSettings] = Field(default_factory=dict)


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "<root>"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts)


def parse_config(data: dict[str, Any]) -> RuleSetConfig:
    try:
        config = RuleSetConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {_format_validation_error(exc)}") from exc

    unknown = sorted(set(config.rules) - set(RULE_TYPES))
    if unknown:
        raise ConfigurationError(f"Unknown rule id(s): {', '.join(unknown)}. Known: {', '.join(RULE_TYPES)}")
    if config.language is not None:
        try:
            normalize_language(config.language)
        except ValueError as exc:
            raise ConfigurationError(str(exc)) from exc
    return config


def load_config(path: str | Path) -> RuleSetConfig:
    """Read a TOML (default) or JSON rule set configuration document."""
    config_path = Path(path)
    try:
        raw = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Cannot read configuration file {config_path}: {exc}") from exc

    try:
        if config_path.suffix.lower() == ".json":
            data = json.loads(raw)
        else:
            data = tomllib.loads(raw)
    except (json.JSONDecodeError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationError(f"Cannot parse configuration file {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping.")

    logger.debug("Loaded configuration from %s", config_path)
    return parse_config(data)


def build_rules(config: RuleSetConfig | None = None) -> list[Rule]:
    """Instantiate the enabled rules in registry order.

    Parameters are validated for disabled rules too.
    """
    config = config or RuleSetConfig()
    rules: list[Rule] = []

    for rule_id, rule_type in RULE_TYPES.items():
        settings = config.rules.get(rule_id, RuleSettings())
        parameters = dict(settings.parameters)
        if settings.severity is not None:
            parameters["severity"] = settings.severity
        try:
            rule = rule_type.model_validate(parameters)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid parameters for rule '{rule_id}': {_format_validation_error(exc)}"
            ) from exc
        enabled = rule_type.default_enabled if settings.enabled is None else settings.enabled
        if enabled:
            rules.append(rule)

    logger.debug("Active rules: %s", ", ".join(rule.id for rule in rules))
    return rules
