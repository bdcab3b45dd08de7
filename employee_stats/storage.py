"""Location and atomic persistence of the accepted dataset file.

The accepted dataset is written to a single well-known file that is
replaced wholesale on every successful generate or upload.  Writes go to
a temporary sibling first and are then renamed over the target, so a
reader never sees a partially written file.
"""

import os
import tempfile
import logging
from pathlib import Path
from typing import Optional

from .config import DATASET_DIR_ENV, DATASET_FILENAME
from .errors import PersistenceError

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Location
# ---------------------------------------------------------------------------


def _resolve_data_dir() -> Path:
    """Select a writable directory for the dataset file.

    The lookup order is:

    1. The ``DATASET_DIR`` environment variable, if set.
    2. A ``data`` folder at the repository root.
    3. A temporary directory in ``/tmp``.

    Each candidate is probed by creating and deleting a sentinel file; the
    first one that works is returned.
    """
    candidates: list[Path] = []
    env = os.getenv(DATASET_DIR_ENV)
    if env:
        candidates.append(Path(env).expanduser().resolve())

    candidates.append(Path(__file__).resolve().parent.parent / "data")
    candidates.append(Path(tempfile.gettempdir()) / "employee_stats")

    for path in candidates:
        try:
            path.mkdir(parents=True, exist_ok=True)
            probe = path / ".write_test"
            probe.write_text("ok", encoding="utf-8")
            probe.unlink()
            return path
        except OSError as exc:
            logger.debug("Data directory %s not writable: %s", path, exc)
            continue

    fallback = Path(tempfile.gettempdir()) / "employee_stats"
    fallback.mkdir(parents=True, exist_ok=True)
    return fallback


def default_dataset_path() -> Path:
    """Path of the persisted dataset, resolved on each call so the
    environment variable can change between runs (and between tests)."""
    return _resolve_data_dir() / DATASET_FILENAME


# ---------------------------------------------------------------------------
# Read / write
# ---------------------------------------------------------------------------


def _atomic_write_text(text: str, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        tmp_path.write_text(text, encoding="utf-8")
        tmp_path.replace(path)
    finally:
        if tmp_path.exists():
            tmp_path.unlink()


def persist_dataset(text: str, path: Optional[Path] = None) -> Path:
    """Replace the persisted dataset with ``text``.

    Parameters
    ----------
    text : str
        The exact dataset text to store.
    path : Path, optional
        Target file; defaults to :func:`default_dataset_path`.

    Returns
    -------
    Path
        The file that was written.

    Raises
    ------
    PersistenceError
        Wrapping the underlying ``OSError``.
    """
    target = Path(path) if path is not None else default_dataset_path()
    try:
        _atomic_write_text(text, target)
    except OSError as exc:
        logger.warning("Could not write dataset file %s: %s", target, exc)
        raise PersistenceError(target, exc) from exc
    logger.info("Dataset saved to %s (%s)", target, format_file_size(len(text)))
    return target


def load_dataset_text(path: Optional[Path] = None) -> str:
    target = Path(path) if path is not None else default_dataset_path()
    try:
        return target.read_text(encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(target, exc) from exc


def format_file_size(size: int) -> str:
    """Human readable size: ``512 B``, ``1.5 KB``, ``5.2 MB``."""
    if size < 1024:
        return f"{size} B"
    if size < 1024 * 1024:
        return f"{size / 1024:.1f} KB"
    return f"{size / (1024 * 1024):.1f} MB"
