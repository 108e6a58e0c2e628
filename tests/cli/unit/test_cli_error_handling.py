"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from scenario_suite_generator.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--input" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["generate-template", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_scenario_file_exits_with_message(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "generate",
            "--input",
            str(tmp_path / "missing.xlsx"),
            "--output-dir",
            str(tmp_path / "suite"),
            "--template-only",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Scenario file not found" in captured.err
    assert "Traceback" not in captured.err


def test_existing_config_is_not_overwritten(tmp_path: Path, capsys) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("pages:\n  login: LoginPage\n", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(config_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err
    assert config_path.read_text(encoding="utf-8") == "pages:\n  login: LoginPage\n"


def test_generate_with_directory_as_config_exits_with_message(tmp_path: Path, capsys) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()

    exit_code = main(
        [
            "generate",
            "--input",
            str(tmp_path / "scenarios.xlsx"),
            "--config",
            str(config_dir),
            "--template-only",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read configuration file" in captured.err
    assert "Traceback" not in captured.err


def test_check_service_with_directory_as_config_exits_with_message(
    tmp_path: Path, capsys
) -> None:
    config_dir = tmp_path / "conf"
    config_dir.mkdir()

    exit_code = main(["check-service", "--config", str(config_dir)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read configuration file" in captured.err
    assert "Traceback" not in captured.err
