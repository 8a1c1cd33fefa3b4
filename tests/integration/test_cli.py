import io
import json
from pathlib import Path

import pytest

from json_renamer.main import main
from json_renamer.words.months import MONTHS


@pytest.fixture(autouse=True)
def _example_words(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("WORD_SOURCE", "example")
    monkeypatch.setenv("RANDOM_SEED", "3")


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "input.json"
    path.write_text(text, encoding="utf-8")
    return path


class TestCliSuccess:
    def test_anonymizes_file_to_stdout(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write(
            tmp_path,
            '{"name": "Alice Smith", "month": "May", "age": 30, "home": "https://a.io"}',
        )

        exit_code = main([str(path)])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["name"] == "Amber Basil"
        assert data["month"] in MONTHS
        assert data["age"] == 30
        assert data["home"] == "https://a.io"

    def test_output_is_indented_json(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write(tmp_path, '{"a": 1}')
        main([str(path)])
        assert capsys.readouterr().out == '{\n  "a": 1\n}\n'

    def test_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO('["Hello", "Hello"]'))

        exit_code = main([])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == ["Amber", "Amber"]

    def test_dash_reads_stdin(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO('{"note": "N/A"}'))
        assert main(["-"]) == 0
        assert json.loads(capsys.readouterr().out) == {"note": "N/A"}

    def test_writes_output_file(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        source = _write(tmp_path, '{"city": "Paris"}')
        target = tmp_path / "out.json"

        exit_code = main([str(source), "--output", str(target)])

        assert exit_code == 0
        assert capsys.readouterr().out == ""
        assert json.loads(target.read_text(encoding="utf-8")) == {"city": "Amber"}


class TestCliErrors:
    def test_empty_input(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "   ")
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Input is empty." in captured.err

    def test_invalid_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = _write(tmp_path, "{bad json")
        assert main([str(path)]) == 1
        assert "Expecting property name" in capsys.readouterr().err

    def test_missing_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([str(tmp_path / "nope.json")]) == 1
        assert "Cannot read input" in capsys.readouterr().err

    def test_non_utf8_file(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"a": "caf\xe9"}')
        assert main([str(path)]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot read input" in captured.err
        assert "utf-8" in captured.err

    def test_error_message_reported_once(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        path = _write(tmp_path, "")
        assert main([str(path)]) == 1
        assert capsys.readouterr().err.count("Input is empty.") == 1


class TestCliConfiguration:
    def test_unknown_word_source(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("WORD_SOURCE", "thesaurus")
        assert main([str(_write(tmp_path, '{"a": "b"}'))]) == 1
        err = capsys.readouterr().err
        assert "Invalid configuration" in err
        assert "Unknown word source 'thesaurus'" in err

    def test_invalid_seed(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("RANDOM_SEED", "abc")
        assert main([str(_write(tmp_path, '{"a": "b"}'))]) == 1
        assert "Invalid configuration" in capsys.readouterr().err

    def test_invalid_log_level(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        assert main([str(_write(tmp_path, '{"a": "b"}'))]) == 1
        assert "Invalid configuration" in capsys.readouterr().err
