import pytest

from mdlint.config import (
    ConfigurationBuilder,
    Report,
    configuration_from_mapping,
    default_configuration,
    load_configuration,
)
from mdlint.exceptions import ConfigurationError


def test_default_configuration():
    config = default_configuration()

    assert config.threshold == 0
    assert config.reports == frozenset({Report.CHECKSTYLE, Report.HTML})
    setup = config.rule_setup("SingleH1Rule")
    assert setup.active is True
    assert setup.includes == (".*",)
    assert setup.excludes == ()


def test_builder_sets_rules_reports_and_threshold():
    config = (
        ConfigurationBuilder()
        .rule("SingleH1Rule", active=False)
        .rule("LineLengthRule", excludes=["CHANGELOG\\.md"], max_line_length=120)
        .reports("html")
        .threshold(3)
        .build()
    )

    assert config.rule_setup("SingleH1Rule").active is False
    line_length = config.rule_setup("LineLengthRule")
    assert line_length.excludes == ("CHANGELOG\\.md",)
    assert dict(line_length.params) == {"max_line_length": 120}
    assert config.wants(Report.HTML)
    assert not config.wants(Report.CHECKSTYLE)
    assert config.threshold == 3


def test_builder_without_reports_disables_reporting():
    config = ConfigurationBuilder().reports().build()

    assert config.reports == frozenset()


@pytest.mark.parametrize("threshold", [-1, 1.5, "2", True])
def test_builder_rejects_invalid_threshold(threshold):
    with pytest.raises(ConfigurationError):
        ConfigurationBuilder().threshold(threshold)


def test_builder_rejects_unknown_report():
    with pytest.raises(ConfigurationError):
        ConfigurationBuilder().reports("pdf")


def test_load_configuration_from_yaml(tmp_path):
    config_file = tmp_path / "markdownlint.yaml"
    config_file.write_text(
        """
threshold: 1
reports:
  - checkstyle
rules:
  SingleH1Rule:
    active: false
  HrStyleRule:
    style: dash
  NoHardTabsRule: false
        """.strip(),
        encoding="utf-8",
    )

    config = load_configuration(config_file)

    assert config.threshold == 1
    assert config.reports == frozenset({Report.CHECKSTYLE})
    assert config.rule_setup("SingleH1Rule").active is False
    assert dict(config.rule_setup("HrStyleRule").params) == {"style": "dash"}
    assert config.rule_setup("NoHardTabsRule").active is False


def test_empty_configuration_file_is_invalid(tmp_path):
    config_file = tmp_path / "markdownlint.yaml"
    config_file.write_text("", encoding="utf-8")

    with pytest.raises(ConfigurationError) as excinfo:
        load_configuration(config_file)

    assert "Invalid configuration of markdownlint" in str(excinfo.value)


def test_missing_configuration_file_is_invalid(tmp_path):
    with pytest.raises(ConfigurationError):
        load_configuration(tmp_path / "missing.yaml")


def test_malformed_yaml_is_invalid(tmp_path):
    config_file = tmp_path / "markdownlint.yaml"
    config_file.write_text("rules: [unclosed", encoding="utf-8")

    with pytest.raises(ConfigurationError):
        load_configuration(config_file)


@pytest.mark.parametrize(
    "data",
    [
        ["threshold", 1],
        {"thresold": 1},
        {"rules": ["SingleH1Rule"]},
        {"rules": {"SingleH1Rule": "off"}},
        {"rules": {"SingleH1Rule": {"active": "no"}}},
        {"rules": {"SingleH1Rule": {"includes": [1, 2]}}},
        {"reports": {"html": True}},
        {"rules": {"LineLengthRule": {"name": "x"}}},
        {"rules": {"LineLengthRule": {"setup": "x"}}},
        {"rules": {"LineLengthRule": {1: "x"}}},
    ],
)
def test_invalid_mappings(data):
    with pytest.raises(ConfigurationError):
        configuration_from_mapping(data)


@pytest.mark.parametrize("setting", ["name: x", "1: x"])
def test_invalid_rule_setting_in_file_is_invalid(tmp_path, setting):
    config_file = tmp_path / "markdownlint.yaml"
    config_file.write_text(f"rules:\n  LineLengthRule:\n    {setting}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError) as excinfo:
        load_configuration(config_file)

    assert f"Invalid configuration of markdownlint in {config_file}" in str(excinfo.value)
