import json
from pathlib import Path
from typing import Any


def _reject_constant(name: str) -> None:
    raise ValueError(f"Invalid JSON constant: {name}")


def read_json(path: Path) -> Any:
    """Read and parse a UTF-8 JSON file.

    ``NaN`` and ``Infinity`` are rejected; they are not JSON and cannot be
    rendered back into a response.
    """
    return json.loads(path.read_text(encoding="utf-8"), parse_constant=_reject_constant)


def json_text(value: Any) -> str:
    """Render a scalar JSON value the way it would be written as text.

    Keeps numeric and string identifiers comparable: ``1``, ``1.0`` and ``"1"``
    all render as ``"1"``. Floats from ``1e21`` upwards keep exponent form.
    """
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return str(value)
