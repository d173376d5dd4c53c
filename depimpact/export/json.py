"""JSON export for analysis results."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger("depimpact.export.json")


def to_jsonable(result: Any) -> Any:
    """Convert an analysis result into JSON-compatible values.

    Sets become lists sorted by their string form, enums become their values
    and mapping keys become strings.
    """
    if isinstance(result, Enum):
        return result.value
    if isinstance(result, dict):
        return {str(key): to_jsonable(value) for key, value in result.items()}
    if isinstance(result, (set, frozenset)):
        return [to_jsonable(item) for item in sorted(result, key=str)]
    if isinstance(result, (list, tuple)):
        return [to_jsonable(item) for item in result]
    return result


def dumps_result(result: Any, *, indent: int = 2, sort_keys: bool = True) -> str:
    """Serialize an analysis result; ``indent=0`` gives a single line."""
    return json.dumps(
        to_jsonable(result),
        indent=indent or None,
        sort_keys=sort_keys,
        ensure_ascii=False,
    )


def export_json(
    result: Any,
    output_path: Union[str, Path],
    *,
    indent: int = 2,
    sort_keys: bool = True,
) -> None:
    """Write an analysis result to a JSON file.

    Args:
        result: Set, mapping, path list or None.
        output_path: Output file path; parent directories are created.
        indent: JSON indentation.
        sort_keys: Whether mapping keys are sorted.
    """
    output_path = Path(output_path)
    logger.info("Exporting result to JSON: %s", output_path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w", encoding="utf-8") as f:
        f.write(dumps_result(result, indent=indent, sort_keys=sort_keys))
        f.write("\n")

    logger.info("JSON export completed: %s", output_path)
