import io

import pytest

from mdlint.config import ConfigurationBuilder, Report
from mdlint.exceptions import ConfigurationError
from mdlint.processing import DEFAULT_REPORTS_DIR, process

BAD = "# Welcome to my project\n\nThis is the introduction\n\n# Section 2\n\nThis is the next section\n"


def write(root, relative, content):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def test_repeated_runs_produce_identical_reports(tmp_path):
    write(tmp_path, "README.md", BAD)
    write(tmp_path, "docs/guide.md", "\tindented\n\n# A\n\n# B\n")
    reports_dir = tmp_path / DEFAULT_REPORTS_DIR

    process(tmp_path)
    first_xml = (reports_dir / "markdownlint.xml").read_bytes()
    first_html = (reports_dir / "markdownlint.html").read_bytes()
    process(tmp_path)

    assert (reports_dir / "markdownlint.xml").read_bytes() == first_xml
    assert (reports_dir / "markdownlint.html").read_bytes() == first_html


@pytest.mark.parametrize("threshold, passed", [(1, True), (0, False)])
def test_threshold_boundary(tmp_path, threshold, passed):
    write(tmp_path, "README.md", BAD)
    config = ConfigurationBuilder().threshold(threshold).build()

    outcome = process(tmp_path, config=config)

    assert outcome.error_count == 1
    assert outcome.passed is passed
    assert outcome.exit_code() == (0 if passed else 1)


def test_failure_outcome_carries_counts_and_still_writes_reports(tmp_path):
    write(tmp_path, "README.md", BAD)
    write(tmp_path, "CHANGES.md", BAD)

    outcome = process(tmp_path, reports_dir=tmp_path / "reports")

    assert outcome.failure_message == "Build failure threshold of 0 reached with 2 errors!"
    assert set(outcome.reports) == {Report.CHECKSTYLE, Report.HTML}
    assert (tmp_path / "reports" / "markdownlint.xml").exists()


def test_summary_stream_receives_summary_and_report_paths(tmp_path):
    write(tmp_path, "README.md", BAD)
    stream = io.StringIO()

    process(tmp_path, config=ConfigurationBuilder().reports("html").build(), summary_stream=stream)

    lines = stream.getvalue().splitlines()
    assert lines[:4] == [
        "1 markdown files were analysed",
        "",
        "Errors:",
        "    SingleH1Rule at README.md:5:1",
    ]
    assert lines[-1].startswith("Successfully generated HTML report at ")


def test_unwritable_reports_do_not_change_the_outcome(tmp_path):
    write(tmp_path, "README.md", BAD)
    blocker = write(tmp_path, "blocker", "not a directory")
    config = ConfigurationBuilder().threshold(5).build()

    outcome = process(tmp_path, reports_dir=blocker / "reports", config=config)

    assert outcome.passed
    assert outcome.reports == {}
    assert len(outcome.report_failures) == 2


def test_configuration_file_is_used(tmp_path):
    write(tmp_path, "README.md", BAD)
    config_file = write(tmp_path, "lint.yaml", "reports: []\nrules:\n  SingleH1Rule: false\n")

    outcome = process(tmp_path, config_file=config_file)

    assert outcome.passed
    assert outcome.result.file_count == 1
    assert outcome.reports == {}


def test_invalid_configuration_aborts_before_reports(tmp_path):
    write(tmp_path, "README.md", BAD)
    config_file = write(tmp_path, "lint.yaml", "threshold: -1\n")

    with pytest.raises(ConfigurationError):
        process(tmp_path, config_file=config_file)

    assert not (tmp_path / DEFAULT_REPORTS_DIR).exists()
