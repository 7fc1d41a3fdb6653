from datetime import datetime

import pytest

from bulk_seeder.data_generator import generate_document, generate_documents
from bulk_seeder.logging_setup import TRACE


@pytest.mark.parametrize("size", [0, 1, 3, 250])
def test_generates_exact_count_with_positional_fields(size):
    docs = generate_documents(size)

    assert len(docs) == size
    for i, doc in enumerate(docs):
        assert doc.min == i
        assert doc.max == i * 100


def test_empty_batch_is_not_an_error():
    assert generate_documents(0) == []


def test_names_are_unique_across_batches():
    names = set()
    for _ in range(20):
        batch = generate_documents(100)
        batch_names = {doc.name for doc in batch}
        assert len(batch_names) == 100
        assert names.isdisjoint(batch_names)
        names |= batch_names


def test_time_is_timezone_aware_and_non_decreasing():
    docs = generate_documents(50)
    times = [doc.time for doc in docs]

    assert times == sorted(times)
    for t in times:
        parsed = datetime.fromisoformat(t)
        assert parsed.tzinfo is not None
        assert parsed.utcoffset().total_seconds() == 0


def test_to_source_has_document_fields_only():
    doc = generate_document(7)

    assert doc.to_source() == {"name": doc.name, "max": 700, "min": 7, "time": doc.time}


@pytest.mark.parametrize("bad_size", [-1, -100])
def test_negative_size_rejected(bad_size):
    with pytest.raises(ValueError):
        generate_documents(bad_size)


@pytest.mark.parametrize("bad_size", [1.5, "3", None, True])
def test_non_integer_size_rejected(bad_size):
    with pytest.raises(TypeError):
        generate_documents(bad_size)


def test_each_document_is_logged_at_trace(caplog):
    caplog.set_level(TRACE, logger="bulk_seeder.data_generator")

    docs = generate_documents(3)

    trace_records = [r for r in caplog.records if r.levelno == TRACE]
    assert len(trace_records) == 3
    assert docs[0].name in trace_records[0].getMessage()
    assert trace_records[0].levelname == "TRACE"
