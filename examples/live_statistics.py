"""Minimal example showing live metrics while a document is edited."""

from __future__ import annotations

from document_statistics import DocumentStatistics, MetricsSnapshot, PlainTextDocument
from document_statistics.formatting import format_reading_time, lix_reading_ease


def print_snapshot(snapshot: MetricsSnapshot) -> None:
    print(
        f"words={snapshot.word_count} sentences={snapshot.sentence_count} "
        f"paragraphs={snapshot.paragraph_count} lix={snapshot.lix_score} "
        f"({lix_reading_ease(snapshot.lix_score)}) "
        f"cli={snapshot.readability_index} "
        f"time={format_reading_time(snapshot.reading_time_minutes)}"
    )


def main() -> None:
    document = PlainTextDocument()
    statistics = DocumentStatistics(document)
    statistics.subscribe(print_snapshot)

    document.set_text("The quick brown fox jumps over the lazy dog.")
    document.insert(len(document.text), "\n\nAn extraordinarily well-known pangram.")
    statistics.on_text_selected("The quick brown fox", 0, 19)
    statistics.on_text_deselected()
    document.clear()


if __name__ == "__main__":
    main()
