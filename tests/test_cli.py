import json
from pathlib import Path

from tweetnorm.cli import main


def test_cli_no_args_shows_help(capsys) -> None:
    exit_code = main([])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "usage: tweetnorm" in captured.out


def test_cli_run_returns_json(capsys, tweet: str) -> None:
    exit_code = main(["run", tweet])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["normalized"] == "die bedcon ist die großartigste konferenz des jahres "
    assert payload["metadata"]["level"] == "character"
    assert payload["metadata"]["window_size"] == 2
    assert payload["ngrams"][0] == "di"


def test_cli_run_word_level_with_custom_chain(capsys) -> None:
    exit_code = main(
        [
            "run",
            "Hello World!",
            "-n",
            "lowercase",
            "-n",
            "punctuation",
            "--level",
            "word",
            "--window-size",
            "1",
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["metadata"]["normalizers"] == ["lowercase", "punctuation"]
    assert payload["ngrams"] == ["hello", "world"]


def test_cli_run_reads_input_file(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "tweet.txt"
    input_path.write_text("Größe 😀", encoding="utf-8")

    exit_code = main(["run", "-i", str(input_path), "-w", "3"])
    captured = capsys.readouterr()

    assert exit_code == 0
    payload = json.loads(captured.out)
    assert payload["normalized"] == "größe "
    assert payload["ngrams"] == ["grö", "röß", "öße", "ße "]


def test_cli_run_writes_json_file(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "out" / "ngrams.json"
    exit_code = main(["run", "a b c", "--level", "word", "-o", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 0
    assert output_path.exists()
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["ngrams"] == ["a b", "b c"]
    assert "Wrote pipeline json" in captured.out


def test_cli_run_without_text_fails(capsys) -> None:
    exit_code = main(["run"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "text or --input-file is required" in captured.err


def test_cli_run_unknown_normalizer_fails(capsys) -> None:
    exit_code = main(["run", "hello", "-n", "stemmer"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "unknown normalizer 'stemmer'" in captured.err


def test_cli_run_invalid_level_fails(capsys) -> None:
    exit_code = main(["run", "hello", "--level", "sentence"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert captured.err.startswith("error:")


def test_cli_lists_normalizers(capsys) -> None:
    exit_code = main(["normalizers"])
    captured = capsys.readouterr()

    assert exit_code == 0
    lines = captured.out.splitlines()
    assert "urls (default)" in lines
    assert "hashtags" in lines


def test_cli_run_missing_input_file_fails(tmp_path: Path, capsys) -> None:
    missing = tmp_path / "missing.txt"
    exit_code = main(["run", "-i", str(missing)])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert captured.err.startswith(f"error: cannot read {missing}")


def test_cli_run_undecodable_input_file_fails(tmp_path: Path, capsys) -> None:
    input_path = tmp_path / "latin1.txt"
    input_path.write_bytes("Größe".encode("latin-1"))

    exit_code = main(["run", "-i", str(input_path)])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "cannot read" in captured.err


def test_cli_run_text_format(capsys) -> None:
    exit_code = main(["run", "a b c", "--level", "word", "--format", "text"])
    captured = capsys.readouterr()

    assert exit_code == 0
    lines = captured.out.splitlines()
    assert lines[0] == 'normalized: "a b c"'
    assert lines[2] == "ngrams: 2 (word level, window 2)"
    assert lines[3:] == ['  "a b"', '  "b c"']


def test_cli_invalid_config_level_fails(monkeypatch, capsys) -> None:
    monkeypatch.setenv("TWEETNORM_LEVEL", "sentence")

    exit_code = main(["run", "hello"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "invalid configuration: level must be one of" in captured.err
