"""Configuration model: which rules run, with which parameters, and what is reported."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

import yaml

from .exceptions import ConfigurationError
from .utils import read_yaml_file

DEFAULT_INCLUDES: Tuple[str, ...] = (".*",)
RULE_SETUP_KEYS = frozenset({"active", "includes", "excludes"})
TOP_LEVEL_KEYS = frozenset({"threshold", "reports", "rules"})
RESERVED_PARAMS = frozenset({"name", "setup"})


class Report(str, Enum):
    """Report kinds that can be requested."""

    CHECKSTYLE = "checkstyle"
    HTML = "html"


@dataclass(frozen=True)
class RuleSetup:
    """Activation state, file filters and parameters for one rule."""

    active: bool = True
    includes: Tuple[str, ...] = DEFAULT_INCLUDES
    excludes: Tuple[str, ...] = ()
    params: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


DEFAULT_RULE_SETUP = RuleSetup()


@dataclass(frozen=True)
class Configuration:
    rules: Mapping[str, RuleSetup] = field(default_factory=lambda: MappingProxyType({}))
    reports: FrozenSet[Report] = frozenset(Report)
    threshold: int = 0

    def rule_setup(self, name: str) -> RuleSetup:
        """Return the setup for ``name``; unconfigured rules are active with defaults."""

        return self.rules.get(name, DEFAULT_RULE_SETUP)

    def wants(self, report: Report) -> bool:
        return report in self.reports


class ConfigurationBuilder:
    """Fluent builder for :class:`Configuration`.

    >>> config = ConfigurationBuilder().rule("SingleH1Rule", active=False).threshold(2).build()
    """

    def __init__(self) -> None:
        self._rules: Dict[str, RuleSetup] = {}
        self._reports: FrozenSet[Report] = frozenset(Report)
        self._threshold = 0

    def rule(
        self,
        name: str,
        active: bool = True,
        includes: Optional[Iterable[str]] = None,
        excludes: Optional[Iterable[str]] = None,
        **params: Any,
    ) -> "ConfigurationBuilder":
        if not isinstance(active, bool):
            raise ConfigurationError(f"Rule '{name}': 'active' must be true or false")
        self._rules[name] = RuleSetup(
            active=active,
            includes=_patterns(name, "includes", includes, DEFAULT_INCLUDES),
            excludes=_patterns(name, "excludes", excludes, ()),
            params=MappingProxyType(dict(params)),
        )
        return self

    def reports(self, *reports: Report | str) -> "ConfigurationBuilder":
        """Replace the requested reports; calling with no arguments disables reporting."""

        resolved = set()
        for report in reports:
            try:
                resolved.add(Report(report))
            except ValueError:
                known = ", ".join(item.value for item in Report)
                raise ConfigurationError(f"Unknown report '{report}' (expected one of: {known})") from None
        self._reports = frozenset(resolved)
        return self

    def threshold(self, value: int) -> "ConfigurationBuilder":
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigurationError(f"Threshold must be a non-negative integer, got {value!r}")
        self._threshold = value
        return self

    def build(self) -> Configuration:
        return Configuration(
            rules=MappingProxyType(dict(self._rules)),
            reports=self._reports,
            threshold=self._threshold,
        )


def _patterns(name: str, key: str, value: Optional[Iterable[str]], default: Tuple[str, ...]) -> Tuple[str, ...]:
    if value is None:
        return default
    if isinstance(value, str):
        return (value,)
    patterns = tuple(value)
    if not all(isinstance(pattern, str) for pattern in patterns):
        raise ConfigurationError(f"Rule '{name}': '{key}' must be a list of regular expressions")
    return patterns


def default_configuration() -> Configuration:
    """All catalog rules active, both reports, zero tolerance."""

    return ConfigurationBuilder().build()


def configuration_from_mapping(data: Any) -> Configuration:
    """Build a configuration from the mapping form used in YAML files."""

    if not isinstance(data, dict):
        raise ConfigurationError("expected a mapping at the top level")
    unknown = sorted(set(data) - TOP_LEVEL_KEYS)
    if unknown:
        raise ConfigurationError(f"unknown keys: {', '.join(map(str, unknown))}")

    builder = ConfigurationBuilder()
    if "threshold" in data:
        builder.threshold(data["threshold"])
    if "reports" in data:
        reports = data["reports"] or []
        if isinstance(reports, str):
            reports = [reports]
        if not isinstance(reports, list):
            raise ConfigurationError("'reports' must be a list")
        builder.reports(*reports)

    rules = data.get("rules") or {}
    if not isinstance(rules, dict):
        raise ConfigurationError("'rules' must be a mapping of rule name to settings")
    for name, settings in rules.items():
        if settings is None:
            settings = {}
        elif isinstance(settings, bool):
            settings = {"active": settings}
        if not isinstance(settings, dict):
            raise ConfigurationError(f"Rule '{name}': settings must be a mapping")
        params = {key: value for key, value in settings.items() if key not in RULE_SETUP_KEYS}
        for key in params:
            if not isinstance(key, str) or not key.isidentifier() or key in RESERVED_PARAMS:
                raise ConfigurationError(f"Rule '{name}': invalid setting {key!r}")
        builder.rule(
            str(name),
            active=settings.get("active", True),
            includes=settings.get("includes"),
            excludes=settings.get("excludes"),
            **params,
        )
    return builder.build()


def load_configuration(path: Path) -> Configuration:
    """Evaluate a YAML configuration file.

    Raises ``ConfigurationError`` when the file is missing, empty, not valid
    YAML or does not describe a configuration.
    """

    path = Path(path)
    try:
        data = read_yaml_file(path)
    except (yaml.YAMLError, OSError, UnicodeDecodeError) as exc:
        raise ConfigurationError(f"Invalid configuration of markdownlint in {path}: {exc}") from exc
    if data is None:
        raise ConfigurationError(f"Invalid configuration of markdownlint in {path}")
    try:
        return configuration_from_mapping(data)
    except ConfigurationError as exc:
        raise ConfigurationError(f"Invalid configuration of markdownlint in {path}: {exc}") from exc
