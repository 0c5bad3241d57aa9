"""Tests for the CLI commands."""

import json
from pathlib import Path

from typer.testing import CliRunner

from linedrift.cli import app

runner = CliRunner()

ABC = "abc\nabc\nxyz\n"
SPIKE = "aaaa\naaaa\nbbbb\naaaa\naaaa\n"


class TestVersion:
    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "linedrift" in result.output


class TestScan:
    def test_stdin_plain(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5"], input=ABC)
        assert result.exit_code == 0
        assert result.stdout == "1!\tabc\n3!\txyz\n3 lines processed\n"

    def test_file_argument(self, workdir: Path):
        (workdir / "in.txt").write_text(ABC)
        result = runner.invoke(app, ["scan", "-t", "50%", "in.txt"])
        assert result.exit_code == 0
        assert result.stdout.splitlines()[-1] == "3 lines processed"

    def test_line_numbers_span_files(self, workdir: Path):
        (workdir / "a.txt").write_text("abc\nabc\n")
        (workdir / "b.txt").write_text("xyz\n")
        result = runner.invoke(app, ["scan", "-t", "0.5", "a.txt", "b.txt"])
        assert result.stdout == "1!\tabc\n3!\txyz\n3 lines processed\n"

    def test_before_context(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "-B", "1"], input=ABC)
        assert result.stdout == "1!\tabc\n2.\tabc\n3!\txyz\n3 lines processed\n"

    def test_context_both_sides(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "-C", "1"], input=SPIKE)
        assert result.stdout == (
            "1!\taaaa\n2.\taaaa\n3!\tbbbb\n4!\taaaa\n5.\taaaa\n5 lines processed\n"
        )

    def test_after_overrides_context(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "-C", "1", "-A", "0"], input=SPIKE)
        assert result.stdout == "1!\taaaa\n2.\taaaa\n3!\tbbbb\n4!\taaaa\n5 lines processed\n"

    def test_fields(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.1", "-f", "1"], input="a 111 x\nb 111 y\n")
        assert result.stdout == "1!\ta 111 x\n2 lines processed\n"

    def test_offset_and_chars_compose(self, workdir: Path):
        result = runner.invoke(
            app, ["scan", "-t", "0.5", "-o", "2", "-c", "0..2"], input="xxab\nyyab\nyycd\n"
        )
        assert result.stdout == "1!\txxab\n3!\tyycd\n3 lines processed\n"

    def test_no_summary(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "--no-summary"], input=ABC)
        assert result.stdout == "1!\tabc\n3!\txyz\n"

    def test_profile(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.1", "-p", "words"], input="a  b\na b\n")
        assert result.stdout == "1!\ta  b\n2 lines processed\n"

    def test_threshold_from_config(self, workdir: Path):
        (workdir / ".linedrift.toml").write_text('[detect]\nthreshold = "50%"\n')
        result = runner.invoke(app, ["scan"], input=ABC)
        assert result.exit_code == 0
        assert result.stdout.startswith("1!\tabc\n3!\txyz\n")

    def test_json_format(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "--format", "json"], input=ABC)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["flagged"] == 2
        assert data["total_lines"] == 3
        assert [r["line"] for r in data["records"]] == [1, 3]

    def test_terminal_format(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "--format", "terminal"], input=ABC)
        assert result.exit_code == 0
        assert "xyz" in result.stdout
        assert "Lines read:" in result.stdout


class TestExitCodes:
    def test_fail_on_change(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "--fail-on-change"], input=ABC)
        assert result.exit_code == 1

    def test_fail_on_change_clean(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "--fail-on-change"], input="\n\n")
        assert result.exit_code == 0
        assert result.stdout == "2 lines processed\n"

    def test_missing_threshold(self, workdir: Path):
        result = runner.invoke(app, ["scan"], input=ABC)
        assert result.exit_code == 2

    def test_invalid_threshold(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "lots"], input=ABC)
        assert result.exit_code == 2

    def test_conflicting_modes(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "-o", "2", "-f", "1"], input=ABC)
        assert result.exit_code == 2

    def test_bad_char_spec(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "-c", "x..y"], input=ABC)
        assert result.exit_code == 2

    def test_bad_format(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "--format", "xml"], input=ABC)
        assert result.exit_code == 2

    def test_missing_file(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "absent.txt"])
        assert result.exit_code == 2
        assert "lines processed" not in result.stdout

    def test_unknown_profile(self, workdir: Path):
        result = runner.invoke(app, ["scan", "-t", "0.5", "-p", "nope"], input=ABC)
        assert result.exit_code == 2

    def test_detector_failure_in_plain_mode(self, workdir: Path, monkeypatch):
        def explode(raw_line, mode):
            raise RuntimeError("boom")

        monkeypatch.setattr("linedrift.detector.engine.reduce", explode)
        result = runner.invoke(app, ["scan", "-t", "0.5"], input=ABC)
        assert result.exit_code == 2
        assert "Detector error" in result.output


class TestInit:
    def test_creates_config(self, workdir: Path):
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 0
        assert (workdir / ".linedrift.toml").exists()

    def test_created_config_loads(self, workdir: Path):
        runner.invoke(app, ["init"])
        result = runner.invoke(app, ["scan"], input=ABC)
        assert result.exit_code == 0

    def test_refuses_overwrite(self, workdir: Path):
        (workdir / ".linedrift.toml").write_text("existing")
        result = runner.invoke(app, ["init"])
        assert result.exit_code == 1


class TestProfiles:
    def test_lists_builtins(self, workdir: Path):
        result = runner.invoke(app, ["profiles"])
        assert result.exit_code == 0
        assert "syslog" in result.stdout
        assert "csv" in result.stdout
