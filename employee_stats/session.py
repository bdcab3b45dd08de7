"""Calling-layer context: the current dataset and the user-facing workflows.

A :class:`DatasetSession` owns the "current dataset" slot that the UI and
CLI read from.  The slot is swapped atomically under a lock, so a reader
always sees either the whole old dataset or the whole new one.  Heavy work
can be pushed onto the session's single-worker executor, which also keeps
generate/upload/process requests in submission order.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Union

from . import codec, storage
from .aggregator import AggregationReport, aggregate
from .config import DEFAULT_AGE_THRESHOLD, DEFAULT_COUNT, DEFAULT_TOP_DEPARTMENT
from .errors import NoDatasetError, PersistenceError
from .generator import generate
from .models import Dataset
from .validator import validate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Outcome:
    """Result of a generate or upload that was accepted into the session.

    ``persist_error`` is set when the dataset became current but could not
    be written to disk.
    """

    dataset: Dataset
    path: Path
    size: int
    persist_error: Optional[PersistenceError] = None

    @property
    def persisted(self) -> bool:
        return self.persist_error is None


class DatasetSession:
    def __init__(self, dataset_path: Optional[Path] = None, max_workers: int = 1) -> None:
        self._dataset_path = Path(dataset_path) if dataset_path is not None else None
        self._lock = threading.Lock()
        self._current: Optional[Dataset] = None
        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="employee-stats"
        )

    # ------------------------------------------------------------------
    # Current dataset slot
    # ------------------------------------------------------------------

    @property
    def dataset_path(self) -> Path:
        if self._dataset_path is not None:
            return self._dataset_path
        return storage.default_dataset_path()

    @property
    def current(self) -> Optional[Dataset]:
        with self._lock:
            return self._current

    def replace(self, dataset: Dataset) -> None:
        with self._lock:
            self._current = dataset

    # ------------------------------------------------------------------
    # Workflows
    # ------------------------------------------------------------------

    def _commit(self, dataset: Dataset, text: str) -> Outcome:
        # The in-memory swap happens first and is kept even if the write fails.
        self.replace(dataset)
        path = self.dataset_path
        try:
            storage.persist_dataset(text, path)
        except PersistenceError as exc:
            logger.error("Dataset is current but was not saved: %s", exc)
            return Outcome(dataset, path, len(text), persist_error=exc)
        return Outcome(dataset, path, len(text))

    def generate(self, count: int = DEFAULT_COUNT, seed: Optional[int] = None) -> Outcome:
        """Generate a synthetic dataset, make it current and save it."""
        dataset = generate(count, seed=seed)
        return self._commit(dataset, codec.encode(dataset))

    def upload(
        self, content: Union[bytes, str], source_name: Optional[str] = None
    ) -> Outcome:
        """Decode and validate an uploaded buffer, then make it current.

        The saved file is the uploaded text itself, not a re-encoding; a
        leading byte order mark in a bytes upload is kept in the copy.
        ``DecodeError`` and ``ValidationError`` propagate to the caller and
        leave the current dataset untouched.
        """
        records = codec.decode(content)
        text = content.decode("utf-8") if isinstance(content, bytes) else content
        dataset = validate(records)
        logger.info(
            "Accepted %d records from %s", len(dataset), source_name or "upload"
        )
        return self._commit(dataset, text)

    def process(
        self,
        *,
        department: str = DEFAULT_TOP_DEPARTMENT,
        age_threshold: int = DEFAULT_AGE_THRESHOLD,
    ) -> AggregationReport:
        """Aggregate the current dataset.

        Raises ``NoDatasetError`` if nothing has been generated or uploaded.
        """
        dataset = self.current
        if dataset is None or len(dataset) == 0:
            raise NoDatasetError(
                "No dataset loaded. Please generate or upload a dataset first."
            )
        return aggregate(dataset, department=department, age_threshold=age_threshold)

    # ------------------------------------------------------------------
    # Background execution
    # ------------------------------------------------------------------

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        return self._executor.submit(fn, *args, **kwargs)

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def __enter__(self) -> "DatasetSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.shutdown()
