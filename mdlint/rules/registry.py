"""Catalog of built-in rules and selection of the active subset."""

from __future__ import annotations

import re
from typing import Dict, List, Tuple, Type

from mdlint.config import Configuration
from mdlint.exceptions import ConfigurationError

from . import Rule
from .blanks_around_headers import BlanksAroundHeadersRule
from .first_header_h1 import FirstHeaderH1Rule
from .hr_style import HrStyleRule
from .line_length import LineLengthRule
from .no_hard_tabs import NoHardTabsRule
from .no_multiple_blanks import NoMultipleBlanksRule
from .no_trailing_spaces import NoTrailingSpacesRule
from .no_whitespace_in_filename import NoWhitespaceInFilenameRule
from .single_h1 import SingleH1Rule

# Declared order is the order errors appear in for a single file.
RULES: Tuple[Type[Rule], ...] = (
    NoHardTabsRule,
    NoTrailingSpacesRule,
    NoMultipleBlanksRule,
    LineLengthRule,
    FirstHeaderH1Rule,
    SingleH1Rule,
    BlanksAroundHeadersRule,
    HrStyleRule,
    NoWhitespaceInFilenameRule,
)

RULES_BY_NAME: Dict[str, Type[Rule]] = {rule.name: rule for rule in RULES}


def instantiate(config: Configuration) -> List[Rule]:
    """Construct the active rules in catalog order.

    Raises ``ConfigurationError`` when the configuration names a rule that
    does not exist or passes parameters a rule cannot accept.
    """

    unknown = sorted(name for name in config.rules if name not in RULES_BY_NAME)
    if unknown:
        raise ConfigurationError(f"Unknown rules in configuration: {', '.join(unknown)}")

    rules: List[Rule] = []
    for rule_class in RULES:
        if not rule_class.is_active(config):
            continue
        setup = config.rule_setup(rule_class.name)
        try:
            rules.append(rule_class(setup=setup, **setup.params))
        except (TypeError, ValueError, re.error) as exc:
            raise ConfigurationError(f"Invalid configuration for rule '{rule_class.name}': {exc}") from exc
    return rules
