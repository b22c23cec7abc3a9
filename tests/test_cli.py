"""Tests for the CLI module."""

import json

from click.testing import CliRunner

from inbox_triage.cli import cli

MESSAGES = [
    {
        "id": "m1",
        "from": "Accounts <accounts@smithbuilders.com.au>",
        "subject": "Invoice INV-2041",
        "bodyPreview": "Please find attached our invoice for the kitchen renovation",
        "date": "2026-03-01T10:30:00Z",
    },
    {
        "id": "m2",
        "from": "Facilities <facilities@westfield.com.au>",
        "subject": "URGENT: burst pipe",
        "bodyPreview": "Emergency, water everywhere, flood in the store room, need someone asap",
        "date": "2026-03-01T10:35:00Z",
    },
]


def _write_messages(tmp_path) -> str:
    path = tmp_path / "messages.json"
    path.write_text(json.dumps(MESSAGES))
    return str(path)


def test_cli_help():
    """CLI --help should work and show commands."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "triage" in result.output
    assert "analyze" in result.output
    assert "export" in result.output
    assert "auth" in result.output


def test_cli_version():
    """CLI --version should show version."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_triage_no_credentials(tmp_path, monkeypatch):
    """Triage without credentials should show clear error."""
    import inbox_triage.auth as auth_module

    monkeypatch.setattr(auth_module, "CREDENTIALS_PATH", tmp_path / "nonexistent.json")
    monkeypatch.setattr(auth_module, "TOKEN_PATH", tmp_path / "token.json")
    monkeypatch.setattr(auth_module, "CONFIG_DIR", tmp_path)

    runner = CliRunner()
    result = runner.invoke(cli, ["triage"])
    assert result.exit_code != 0
    assert "Credentials file not found" in result.output


def test_analyze(tmp_path):
    """Analyze shows the table, summary and requested detail panels."""
    runner = CliRunner()
    result = runner.invoke(cli, ["analyze", _write_messages(tmp_path), "--detail", "1"])
    assert result.exit_code == 0
    assert "Triage Results" in result.output
    assert "Summary" in result.output
    assert "Message Detail" in result.output


def test_analyze_urgent_only(tmp_path):
    """--urgent-only shows the urgent digest."""
    runner = CliRunner()
    result = runner.invoke(cli, ["analyze", _write_messages(tmp_path), "--urgent-only"])
    assert result.exit_code == 0
    assert "Urgent Messages" in result.output


def test_analyze_with_export(tmp_path):
    """Exported rows follow the ranked order."""
    output = tmp_path / "out.json"
    runner = CliRunner()
    result = runner.invoke(
        cli, ["analyze", _write_messages(tmp_path), "--format", "json", "-o", str(output)]
    )
    assert result.exit_code == 0
    rows = json.loads(output.read_text())
    assert [row["message_id"] for row in rows] == ["m2", "m1"]


def test_export(tmp_path):
    """Export writes the file and reports where."""
    output = tmp_path / "out.csv"
    runner = CliRunner()
    result = runner.invoke(cli, ["export", _write_messages(tmp_path), "-o", str(output)])
    assert result.exit_code == 0
    assert "Results saved" in result.output
    assert output.exists()


def test_export_requires_output(tmp_path):
    """Export needs an output path."""
    runner = CliRunner()
    result = runner.invoke(cli, ["export", _write_messages(tmp_path)])
    assert result.exit_code != 0


def test_analyze_bad_input(tmp_path):
    """Malformed input files should produce a clean error."""
    path = tmp_path / "bad.json"
    path.write_text("{not json")

    runner = CliRunner()
    result = runner.invoke(cli, ["analyze", str(path)])
    assert result.exit_code != 0
    assert "not valid JSON" in result.output


def test_analyze_missing_file(tmp_path):
    """A missing input file is a clean error."""
    runner = CliRunner()
    result = runner.invoke(cli, ["analyze", str(tmp_path / "nope.json")])
    assert result.exit_code != 0
    assert "Error" in result.output


def test_auth_success(monkeypatch):
    """Auth should report the authenticated account."""
    monkeypatch.setattr("inbox_triage.cli.check_auth", lambda: (True, "office@acme.com"))

    runner = CliRunner()
    result = runner.invoke(cli, ["auth"])
    assert result.exit_code == 0
    assert "Authenticated as office@acme.com" in result.output


def test_auth_failure(monkeypatch):
    """Auth failures should be reported with a nonzero exit."""
    monkeypatch.setattr("inbox_triage.cli.check_auth", lambda: (False, "token revoked"))

    runner = CliRunner()
    result = runner.invoke(cli, ["auth"])
    assert result.exit_code == 1
    assert "Authentication failed" in result.output
    assert "token revoked" in result.output


def test_check_auth_without_credentials(tmp_path, monkeypatch, capsys):
    """check_auth returns the failure quietly instead of printing it."""
    import inbox_triage.auth as auth_module

    monkeypatch.setattr(auth_module, "CREDENTIALS_PATH", tmp_path / "nonexistent.json")
    monkeypatch.setattr(auth_module, "TOKEN_PATH", tmp_path / "token.json")
    monkeypatch.setattr(auth_module, "CONFIG_DIR", tmp_path)

    ok, detail = auth_module.check_auth()
    assert ok is False
    assert "Credentials file not found" in detail
    assert capsys.readouterr().out == ""
