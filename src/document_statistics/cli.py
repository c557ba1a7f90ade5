from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple, TypedDict

import typer
import yaml

from .boundaries import create_boundary_finder
from .config import StatisticsConfig, load_config
from .document import PlainTextDocument
from .engine import DocumentStatistics
from .formatting import format_reading_time, lix_reading_ease

app = typer.Typer(help="Document statistics CLI.", no_args_is_help=True)

# File types the CLI knows how to load into documents.
SUPPORTED_INPUT_EXTENSIONS = {".txt", ".md", ".markdown"}


class DocumentSummary(TypedDict):
    doc_id: str
    scope: str
    metrics: dict[str, int]
    reading_ease: str
    reading_time: str


@app.command()
def analyze(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    sentence_finder: str | None = typer.Option(
        None,
        "--sentence-finder",
        "-s",
        help="Sentence boundary finder to use ('unicode' or 'punkt').",
    ),
    selection_start: int | None = typer.Option(
        None, help="Start offset of a selection to measure instead of the document."
    ),
    selection_end: int | None = typer.Option(
        None, help="End offset (exclusive) of the selection."
    ),
) -> None:
    """Compute statistics for each input document and emit a JSON summary."""
    cfg = load_config(config)
    if sentence_finder:
        cfg.sentence_finder = sentence_finder
    _configure_logging(cfg)
    try:
        create_boundary_finder(cfg.sentence_finder)
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    selection = _selection_range(selection_start, selection_end)
    summary: List[DocumentSummary] = []
    for doc_id, text in _load_texts(input_path):
        summary.append(_analyze_text(doc_id, text, cfg, selection))
    typer.echo(json.dumps({"documents": summary}, indent=2))


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = StatisticsConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _configure_logging(config: StatisticsConfig) -> None:
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise typer.BadParameter(f"Unknown log level '{config.log_level}'.")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _selection_range(start: int | None, end: int | None) -> Tuple[int, int] | None:
    """Validate the optional selection offsets given on the command line."""
    if start is None and end is None:
        return None
    if start is None or end is None:
        raise typer.BadParameter(
            "--selection-start and --selection-end must be given together."
        )
    if start < 0 or end < start:
        raise typer.BadParameter(f"Invalid selection range [{start}, {end}).")
    return start, end


def _load_texts(input_path: Path) -> List[Tuple[str, str]]:
    """Expand the input path into (doc_id, text) pairs."""
    if input_path.is_file():
        return [(input_path.name, _read_text(input_path))]
    files = sorted(
        p
        for p in input_path.rglob("*")
        if p.is_file() and p.suffix.lower() in SUPPORTED_INPUT_EXTENSIONS
    )
    return [(str(file.relative_to(input_path)), _read_text(file)) for file in files]


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise typer.BadParameter(f"Unable to read {path}: {exc}") from exc


def _analyze_text(
    doc_id: str,
    text: str,
    config: StatisticsConfig,
    selection: Tuple[int, int] | None,
) -> DocumentSummary:
    document = PlainTextDocument()
    statistics = DocumentStatistics(document, config)
    document.set_text(text)

    if selection is not None:
        # Offsets address the normalized text the document holds.
        content = document.text
        start, end = selection
        if end > len(content):
            raise typer.BadParameter(
                f"Selection end {end} beyond length {len(content)} of {doc_id}."
            )
        statistics.on_text_selected(content[start:end], start, end)

    snapshot = statistics.snapshot
    return {
        "doc_id": doc_id,
        "scope": statistics.scope.value,
        "metrics": snapshot.to_dict(),
        "reading_ease": lix_reading_ease(snapshot.lix_score),
        "reading_time": format_reading_time(snapshot.reading_time_minutes),
    }


if __name__ == "__main__":
    main()
