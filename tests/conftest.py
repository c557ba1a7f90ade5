from __future__ import annotations

from typing import List

import pytest

from document_statistics.document import PlainTextDocument
from document_statistics.engine import DocumentStatistics
from document_statistics.models import MetricsSnapshot


@pytest.fixture
def document() -> PlainTextDocument:
    return PlainTextDocument()


@pytest.fixture
def statistics(document: PlainTextDocument) -> DocumentStatistics:
    return DocumentStatistics(document)


@pytest.fixture
def published(statistics: DocumentStatistics) -> List[MetricsSnapshot]:
    snapshots: List[MetricsSnapshot] = []
    statistics.subscribe(snapshots.append)
    return snapshots
