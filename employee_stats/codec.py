"""JSON interchange format for employee datasets.

The file is an array of objects with exactly the fields ``name``, ``age``,
``department`` and ``salary``.  Encoding is pretty-printed with a stable
field order; decoding accepts any whitespace layout and checks shape and
types only.  Business rules are the validator's concern.
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, List, Optional, Union

import pydantic
from pydantic import BaseModel, ConfigDict, TypeAdapter

from .config import JSON_INDENT
from .errors import DecodeError
from .models import Employee

logger = logging.getLogger(__name__)


class EmployeeRecord(BaseModel):
    """Wire shape of one employee object.

    Strict mode keeps ``true`` out of ``age``/``salary`` and ``25.5`` out of
    ``age``; integers are still accepted for ``salary``.  Non-finite numbers
    (``NaN``, ``Infinity``, or literals such as ``1e400`` that overflow) are
    rejected.
    """

    model_config = ConfigDict(strict=True, extra="forbid", allow_inf_nan=False)

    name: Optional[str]
    age: int
    department: str
    salary: float


_RECORDS = TypeAdapter(List[EmployeeRecord])


def encode(records: Iterable[Employee]) -> str:
    """Serialize employees to pretty-printed JSON text."""
    payload = [emp.to_dict() for emp in records]
    return json.dumps(
        payload, indent=JSON_INDENT, ensure_ascii=False, allow_nan=False
    )


def encode_bytes(records: Iterable[Employee]) -> bytes:
    return encode(records).encode("utf-8")


def _describe(exc: pydantic.ValidationError) -> str:
    first = exc.errors()[0]
    loc = "".join(
        f"[{part}]" if isinstance(part, int) else f".{part}" for part in first["loc"]
    )
    where = f" at {loc.lstrip('.')}" if loc else ""
    extra = f" (and {exc.error_count() - 1} more problems)" if exc.error_count() > 1 else ""
    return f"Malformed dataset{where}: {first['msg']}{extra}"


def decode(text: Union[str, bytes]) -> List[Employee]:
    """Parse interchange text into a list of :class:`Employee`.

    Parameters
    ----------
    text : str or bytes
        JSON text, or its UTF-8 encoding (a leading BOM is ignored).

    Returns
    -------
    List[Employee]
        Records in file order, not yet validated.

    Raises
    ------
    DecodeError
        If the bytes are not UTF-8, the text is not JSON, the root is not an
        array of objects, or any object has missing, extra or mistyped
        fields.
    """
    if isinstance(text, bytes):
        try:
            text = text.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Dataset is not valid UTF-8: {exc}") from exc
    text = text.lstrip("\ufeff")

    try:
        parsed = _RECORDS.validate_json(text)
    except pydantic.ValidationError as exc:
        raise DecodeError(_describe(exc)) from exc

    logger.debug("Decoded %d employee records", len(parsed))
    return [
        Employee(
            name=rec.name, age=rec.age, department=rec.department, salary=float(rec.salary)
        )
        for rec in parsed
    ]
