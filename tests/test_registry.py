import pytest

from mdlint.config import ConfigurationBuilder, default_configuration
from mdlint.exceptions import ConfigurationError
from mdlint.rules.hr_style import HrStyleRule
from mdlint.rules.line_length import LineLengthRule
from mdlint.rules.registry import RULES, instantiate


def test_default_configuration_activates_whole_catalog_in_order():
    rules = instantiate(default_configuration())

    assert [type(rule) for rule in rules] == list(RULES)


def test_rule_names_are_unique():
    names = [rule.name for rule in RULES]

    assert len(names) == len(set(names))
    assert all(names)


def test_disabled_rule_is_not_instantiated():
    config = ConfigurationBuilder().rule("SingleH1Rule", active=False).build()

    names = [rule.name for rule in instantiate(config)]

    assert "SingleH1Rule" not in names
    assert len(names) == len(RULES) - 1


def test_rule_parameters_are_passed_to_constructor():
    config = (
        ConfigurationBuilder()
        .rule("LineLengthRule", max_line_length=120, code_blocks=False)
        .rule("HrStyleRule", style="asterisk")
        .build()
    )

    rules = {rule.name: rule for rule in instantiate(config)}

    line_length = rules["LineLengthRule"]
    assert isinstance(line_length, LineLengthRule)
    assert line_length.max_line_length == 120
    assert line_length.code_blocks is False
    hr_style = rules["HrStyleRule"]
    assert isinstance(hr_style, HrStyleRule)
    assert hr_style.style == "asterisk"


def test_unknown_rule_is_a_configuration_error():
    config = ConfigurationBuilder().rule("NoSuchRule").build()

    with pytest.raises(ConfigurationError) as excinfo:
        instantiate(config)

    assert "NoSuchRule" in str(excinfo.value)


@pytest.mark.parametrize(
    "name, params",
    [
        ("NoHardTabsRule", {"unexpected": 1}),
        ("LineLengthRule", {"max_line_length": 0}),
        ("FirstHeaderH1Rule", {"level": 9}),
        ("HrStyleRule", {"style": ""}),
    ],
)
def test_invalid_rule_parameters_are_configuration_errors(name, params):
    config = ConfigurationBuilder().rule(name, **params).build()

    with pytest.raises(ConfigurationError):
        instantiate(config)


def test_invalid_include_pattern_is_a_configuration_error():
    config = ConfigurationBuilder().rule("NoHardTabsRule", includes=["[unclosed"]).build()

    with pytest.raises(ConfigurationError):
        instantiate(config)
