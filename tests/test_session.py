"""Tests for session.py - the current-dataset slot and the workflows."""

import threading

import pytest

from employee_stats import storage
from employee_stats.codec import decode, encode
from employee_stats.errors import (
    DecodeError,
    EmptyDatasetError,
    NoDatasetError,
    PersistenceError,
    ValidationError,
)
from employee_stats.generator import generate
from employee_stats.session import DatasetSession


@pytest.fixture
def session(tmp_path):
    s = DatasetSession(dataset_path=tmp_path / "dataset.json")
    yield s
    s.shutdown()


def test_starts_empty(session):
    assert session.current is None


def test_process_without_dataset(session):
    with pytest.raises(NoDatasetError, match="No dataset loaded"):
        session.process()
    # callers catching the broader error still see it
    assert issubclass(NoDatasetError, EmptyDatasetError)


def test_generate_replaces_current_and_persists(session):
    outcome = session.generate(50, seed=42)

    assert session.current is outcome.dataset
    assert len(outcome.dataset) == 50
    assert outcome.persisted
    text = outcome.path.read_text(encoding="utf-8")
    assert outcome.size == len(text)
    assert decode(text) == list(outcome.dataset)


def test_upload_persists_original_text(session, sample_json):
    outcome = session.upload(sample_json.encode("utf-8"), "team.json")

    assert [e.name for e in session.current] == ["Alice", "Bob", "Cara"]
    # verbatim copy, not a re-encoding
    assert outcome.path.read_text(encoding="utf-8") == sample_json
    assert outcome.path.read_text(encoding="utf-8") != encode(outcome.dataset)


def test_upload_accepts_text(session, sample_json):
    outcome = session.upload(sample_json)
    assert len(outcome.dataset) == 3


def test_rejected_upload_keeps_previous_dataset(session):
    previous = session.generate(10, seed=1).dataset
    bad = '[{"name": "Old", "age": 200, "department": "HR", "salary": 1}]'

    with pytest.raises(ValidationError):
        session.upload(bad)
    with pytest.raises(DecodeError):
        session.upload(b"not json")
    with pytest.raises(ValidationError):
        session.upload("[]")

    assert session.current is previous
    assert decode(session.dataset_path.read_text(encoding="utf-8")) == list(previous)


def test_persist_failure_does_not_roll_back(tmp_path, sample_json):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")
    with DatasetSession(dataset_path=blocker / "dataset.json") as session:
        outcome = session.upload(sample_json)

        assert not outcome.persisted
        assert isinstance(outcome.persist_error, PersistenceError)
        assert session.current == outcome.dataset


def test_process_uses_current_dataset(session, sample_json):
    session.upload(sample_json)
    report = session.process(department="HR", age_threshold=34)
    assert report.count == 3
    assert report.top_earner.name == "Cara"
    assert report.above_age_count == 2


def test_submit_returns_future(session):
    future = session.submit(session.generate, 20, seed=3)
    outcome = future.result(timeout=30)
    assert session.current == outcome.dataset
    report = session.submit(session.process).result(timeout=30)
    assert report.count == 20


def test_default_path_comes_from_storage(isolated_data_dir):
    with DatasetSession() as session:
        assert session.dataset_path == storage.default_dataset_path()
        outcome = session.generate(5, seed=2)
        assert outcome.path.parent == isolated_data_dir.resolve()


def test_upload_bytes_saved_byte_for_byte(session, sample_json):
    content = b"\xef\xbb\xbf" + sample_json.encode("utf-8")
    outcome = session.upload(content)
    assert outcome.path.read_bytes() == content
    assert len(session.current) == 3


def test_readers_never_see_a_partial_swap(session):
    first = generate(50, seed=1)
    second = generate(80, seed=2)
    session.replace(first)
    seen = []
    stop = threading.Event()

    def reader():
        while not stop.is_set():
            seen.append(session.current)

    thread = threading.Thread(target=reader)
    thread.start()
    try:
        for i in range(2000):
            session.replace(second if i % 2 else first)
    finally:
        stop.set()
        thread.join(timeout=10)

    assert seen
    assert all(ds is first or ds is second for ds in seen)
    assert {len(ds) for ds in seen} <= {50, 80}
