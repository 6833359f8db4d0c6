import pytest

from carbon_footprint import cli
from carbon_footprint.emitters import Building


def test_main_without_arguments_prints_reference_report(capsys, reference_report):
    assert cli.main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == reference_report
    assert captured.err == ""


def test_main_summary_appends_table(capsys, reference_report):
    assert cli.main(["--summary"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(reference_report)
    assert "footprint_mt_co2" in out


def test_main_reports_failure_on_stderr(capsys, monkeypatch):
    monkeypatch.setattr(cli, "build_reference_emitters", lambda: [Building("Annex")])
    assert cli.main([]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.strip() == "An error occurred: Emission data is incomplete for building: Annex"


def test_main_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        cli.main(["--log-level", "LOUD"])
