"""Tests for CLI parser and main behavior."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from entityfield.cli.main import build_parser, main


def _record(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "entity.yaml"
    path.write_text(content, encoding="utf-8")
    return path


def test_build_parser_accepts_evaluate_flags(tmp_path: Path) -> None:
    parser = build_parser()

    args = parser.parse_args(
        ["evaluate", "-c", str(tmp_path), "-e", str(tmp_path / "e.yaml"), "-b", "article", "--format", "json"]
    )

    assert args.command == "evaluate"
    assert args.config == tmp_path
    assert args.bundle == "article"
    assert args.format == "json"
    assert args.verbose is False


def test_build_parser_rejects_unknown_format(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["evaluate", "-c", str(tmp_path), "-e", "e.yaml", "--format", "xml"])


def test_evaluate_passing_record_exits_zero(
    article_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    entity = _record(tmp_path, "title: Hello\nsummary: null\ncolor: [blue, red]\n")

    code = main(["evaluate", "-c", str(article_config), "-e", str(entity)])

    out = capsys.readouterr().out
    assert code == 0
    assert "PASS has_title: Article field title [all]" in out
    assert out.rstrip().endswith("PASS (and of 3 condition(s))")


def test_evaluate_failing_record_exits_one(
    article_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    entity = _record(tmp_path, "title: Hello\nsummary: null\ncolor: [green]\n")

    code = main(["evaluate", "-c", str(article_config), "-e", str(entity), "--format", "json"])

    report = json.loads(capsys.readouterr().out)
    assert code == 1
    assert report["passed"] is False
    assert {entry["name"]: entry["passed"] for entry in report["conditions"]} == {
        "has_title": True,
        "no_summary": True,
        "is_red": False,
    }


def test_evaluate_other_bundle_fails_every_condition(
    article_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    entity = _record(tmp_path, "title: Hello\nsummary: null\ncolor: red\n")

    code = main(["evaluate", "-c", str(article_config), "-e", str(entity), "-b", "page", "--format", "json"])

    report = json.loads(capsys.readouterr().out)
    assert code == 1
    assert not any(entry["passed"] for entry in report["conditions"])


def test_evaluate_invalid_config_exits_two(write_yaml, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
    config = write_yaml("entityfield.yaml", {"conditions": {"a": {"bundle": "node", "field_status": "any"}}})
    entity = _record(tmp_path, "title: Hello\n")

    code = main(["evaluate", "-c", str(config), "-e", str(entity)])

    err = capsys.readouterr().err
    assert code == 2
    assert "[CFG006]" in err
    assert "[CFG007]" in err


def test_evaluate_invalid_entity_exits_two(
    article_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    entity = _record(tmp_path, "- title\n- body\n")

    code = main(["evaluate", "-c", str(article_config), "-e", str(entity)])

    assert code == 2
    assert "Entity error" in capsys.readouterr().err


def test_evaluate_missing_entity_exits_two(
    article_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    code = main(["evaluate", "-c", str(article_config), "-e", str(tmp_path / "missing.yaml")])

    assert code == 2
    assert "Failed to read entity record" in capsys.readouterr().err


def test_validate_config_prints_valid_on_success(article_config: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = main(["validate-config", "-c", str(article_config)])

    assert code == 0
    assert "Configuration is valid." in capsys.readouterr().out


def test_validate_config_reports_errors(write_yaml, capsys: pytest.CaptureFixture[str]) -> None:  # type: ignore[no-untyped-def]
    config = write_yaml("entityfield.yaml", {"logic": "xor"})

    code = main(["validate-config", "-c", str(config)])

    assert code == 2
    assert "[CFG006]" in capsys.readouterr().err


def test_evaluate_non_utf8_entity_exits_two(
    article_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    entity = tmp_path / "entity.yaml"
    entity.write_bytes(b"title: \xff\n")

    code = main(["evaluate", "-c", str(article_config), "-e", str(entity)])

    assert code == 2
    assert "not valid UTF-8" in capsys.readouterr().err


def test_evaluate_non_utf8_config_exits_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "entityfield.yaml"
    config.write_bytes(b"title: \xff\n")
    entity = _record(tmp_path, "title: Hello\n")

    code = main(["evaluate", "-c", str(config), "-e", str(entity)])

    assert code == 2
    assert "[CFG002]" in capsys.readouterr().err


def test_validate_config_non_utf8_exits_two(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "entityfield.yaml"
    config.write_bytes(b"title: \xff\n")

    code = main(["validate-config", "-c", str(config)])

    assert code == 2
    assert "[CFG002]" in capsys.readouterr().err


def test_evaluate_empty_entity_fails_every_condition(
    article_config: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    entity = _record(tmp_path, "")

    code = main(["evaluate", "-c", str(article_config), "-e", str(entity), "--format", "json"])

    report = json.loads(capsys.readouterr().out)
    assert code == 1
    assert [entry["passed"] for entry in report["conditions"]] == [False, False, False]
