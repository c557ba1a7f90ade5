import json
from pathlib import Path

from typer.testing import CliRunner

from document_statistics.cli import app

runner = CliRunner()


def test_cli_analyze_outputs_metrics(tmp_path: Path):
    """analyze reports document-wide metrics as JSON."""
    path = tmp_path / "chapter.txt"
    path.write_text("The quick brown fox.\n\nIt jumps.", encoding="utf-8")

    result = runner.invoke(app, ["analyze", "--input-path", str(path)])

    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    entry = payload["documents"][0]
    assert entry["doc_id"] == "chapter.txt"
    assert entry["scope"] == "document"
    assert entry["metrics"]["word_count"] == 6
    assert entry["metrics"]["paragraph_count"] == 2
    assert entry["reading_time"] == "< 1m"


def test_cli_analyze_selection(tmp_path: Path):
    """Selection offsets switch the report to selection scope."""
    path = tmp_path / "chapter.txt"
    path.write_text("One two three.\nFour five six seven.", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(path),
            "--selection-start",
            "15",
            "--selection-end",
            "35",
        ],
    )

    assert result.exit_code == 0
    entry = json.loads(result.stdout)["documents"][0]
    assert entry["scope"] == "selection"
    assert entry["metrics"]["word_count"] == 4
    assert entry["metrics"]["total_word_count"] == 7


def test_cli_analyze_directory(tmp_path: Path):
    """Each supported file in a directory gets its own entry."""
    corpus = tmp_path / "corpus"
    (corpus / "notes").mkdir(parents=True)
    (corpus / "a.txt").write_text("Alpha beta.", encoding="utf-8")
    (corpus / "notes" / "b.md").write_text("Gamma.", encoding="utf-8")
    (corpus / "image.png").write_bytes(b"\x89PNG")

    result = runner.invoke(app, ["analyze", "--input-path", str(corpus)])

    assert result.exit_code == 0
    doc_ids = [doc["doc_id"] for doc in json.loads(result.stdout)["documents"]]
    assert len(doc_ids) == 2
    assert doc_ids[0] == "a.txt"
    assert doc_ids[1].endswith("b.md")


def test_cli_rejects_bad_selection(tmp_path: Path):
    path = tmp_path / "chapter.txt"
    path.write_text("short", encoding="utf-8")

    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(path), "--selection-start", "3"],
    )
    assert result.exit_code != 0

    result = runner.invoke(
        app,
        [
            "analyze",
            "--input-path",
            str(path),
            "--selection-start",
            "0",
            "--selection-end",
            "50",
        ],
    )
    assert result.exit_code != 0


def test_cli_rejects_unknown_sentence_finder(tmp_path: Path):
    path = tmp_path / "chapter.txt"
    path.write_text("short", encoding="utf-8")

    result = runner.invoke(
        app, ["analyze", "--input-path", str(path), "--sentence-finder", "icu"]
    )

    assert result.exit_code != 0


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])

    assert result.exit_code == 0
    assert "sentence_finder" in result.stdout
