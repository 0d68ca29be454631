import importlib
from pathlib import Path
import textwrap

from typer.testing import CliRunner

from vigil.cli.app import app

runner = CliRunner()


def test_no_arguments_runs_fixed_demo(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, [])

    assert result.exit_code == 0
    assert result.stderr == ""
    assert "Warning: This is a warning message." in result.stdout
    assert "Fatal Error: This is a fatal error message." in result.stdout
    assert "Error: This is an error message." not in result.stdout
    assert (tmp_path / "error_log.txt").read_text() == "Error: This is an error message.\n"
    assert (tmp_path / "fatal_error_log.txt").read_text() == "Fatal Error: This is a fatal error message.\n"


def test_repeated_runs_append(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    runner.invoke(app, [])
    runner.invoke(app, [])

    assert len((tmp_path / "error_log.txt").read_text().splitlines()) == 2


def test_config_file_and_run_log(tmp_path: Path):
    cfg = tmp_path / "vigil.yaml"
    cfg.write_text(textwrap.dedent(f"""
        error_log: {tmp_path / 'errors.txt'}
        fatal_log: {tmp_path / 'fatal.txt'}
        log_dir: {tmp_path / 'logs'}
        messages:
          warning: w1
          error: e1
          fatal: f1
    """))

    result = runner.invoke(app, ["--config", str(cfg)])

    assert result.exit_code == 0
    assert result.stdout.index("Warning: w1") < result.stdout.index("Fatal Error: f1")
    assert (tmp_path / "errors.txt").read_text() == "Error: e1\n"
    assert (tmp_path / "fatal.txt").read_text() == "Fatal Error: f1\n"
    logs = list((tmp_path / "logs").glob("vigil-*.log"))
    assert len(logs) == 1
    assert "vigil run started" in logs[0].read_text()


def test_bad_config_exits_2(tmp_path: Path):
    cfg = tmp_path / "bad.yaml"
    cfg.write_text("nonsense: true\n")

    result = runner.invoke(app, ["--config", str(cfg)])

    assert result.exit_code == 2
    assert result.stderr.startswith("Config error: ")
    assert "nonsense" in result.stderr


def test_verbose_logs_debug_to_stderr(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    result = runner.invoke(app, ["--verbose"])

    assert result.exit_code == 0
    assert "vigil run started" in result.stderr
    assert "dispatching warning to 3 listener(s)" in result.stderr
    assert "Warning: This is a warning message." in result.stdout


def test_unusable_log_dir_exits_2(tmp_path: Path):
    blocker = tmp_path / "file"
    blocker.write_text("not a directory\n")
    cfg = tmp_path / "vigil.yaml"
    cfg.write_text(f"log_dir: {blocker / 'logs'}\n")

    result = runner.invoke(app, ["--config", str(cfg)])

    assert result.exit_code == 2
    assert result.stderr.startswith(f"Config error: cannot create log dir {blocker / 'logs'}")
    assert "Warning:" not in result.stdout


def test_importing_main_module_does_not_run_demo(tmp_path: Path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    importlib.import_module("vigil.__main__")

    assert capsys.readouterr().out == ""
    assert not (tmp_path / "error_log.txt").exists()
