# app/data/loader.py
"""
Load the cities dataset from its JSON file.

Every call reads and parses the file again; nothing is cached between
calls, so responses always reflect the current file contents.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Tuple, Union

from pydantic import ValidationError

from app.errors import DatasetParseError, DatasetReadError
from app.models.cities import CityRecord

logger = logging.getLogger(__name__)

MAX_EXAMPLES = 5


def _short_errors(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(p) for p in err['loc']) or 'record'}: {err['msg']}"
        for err in exc.errors()
    )


def parse_cities_json(raw: str) -> Tuple[List[CityRecord], Dict[str, Any]]:
    """
    Parse the text of a dataset file.

    Malformed rows are skipped and reported in the returned stats rather
    than failing the whole load. Raises DatasetParseError when the text is
    not JSON or not shaped as {"data": [...]}.
    """
    try:
        payload = json.loads(raw)
    # JSONDecodeError, oversized integer literals and runaway nesting
    except (ValueError, RecursionError) as e:
        raise DatasetParseError(f"Dataset is not valid JSON: {e}") from e

    if not isinstance(payload, dict) or not isinstance(payload.get("data"), list):
        raise DatasetParseError('Dataset must be an object with a "data" array')

    records: List[CityRecord] = []
    n_rows = 0
    error_examples = []

    seen_city_codes: set[str] = set()
    duplicate_city_examples: list[str] = []
    n_duplicate_cities = 0

    state_names: dict[str, str] = {}
    state_conflict_examples: list[str] = []
    n_state_name_conflicts = 0

    for row in payload["data"]:
        n_rows += 1

        try:
            record = CityRecord.model_validate(row)
        except ValidationError as e:
            message = _short_errors(e)
            logger.warning("Rejected dataset row %s: %s", n_rows, message)
            if len(error_examples) < MAX_EXAMPLES:
                error_examples.append(
                    {"row_number": n_rows, "row": row, "error": message}
                )
            continue

        records.append(record)

        if record.city_code in seen_city_codes:
            n_duplicate_cities += 1
            if len(duplicate_city_examples) < MAX_EXAMPLES:
                duplicate_city_examples.append(
                    f"Duplicate city code {record.city_code!r} at row {n_rows}"
                )
        else:
            seen_city_codes.add(record.city_code)

        first_name = state_names.setdefault(record.state_code, record.state_name)
        if first_name != record.state_name:
            n_state_name_conflicts += 1
            if len(state_conflict_examples) < MAX_EXAMPLES:
                state_conflict_examples.append(
                    f"State {record.state_code!r} named {record.state_name!r} "
                    f"at row {n_rows}, first seen as {first_name!r}"
                )

    stats = {
        "n_rows": n_rows,
        "n_records": len(records),
        "n_states": len(state_names),
        "n_rejected": n_rows - len(records),
        "error_examples": error_examples,
        "n_duplicate_cities": n_duplicate_cities,
        "duplicate_city_examples": duplicate_city_examples,
        "n_state_name_conflicts": n_state_name_conflicts,
        "state_conflict_examples": state_conflict_examples,
    }
    return records, stats


def load_dataset(path: Union[str, Path]) -> Tuple[List[CityRecord], Dict[str, Any]]:
    path = Path(path)

    try:
        raw = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DatasetParseError(f"Dataset is not valid UTF-8: {e}", path) from e
    except OSError as e:
        raise DatasetReadError(f"Cannot read dataset file {path}: {e}", path) from e

    try:
        records, stats = parse_cities_json(raw)
    except DatasetParseError as e:
        # Re-raise with the path attached
        raise DatasetParseError(str(e), path) from e

    logger.debug(
        "Loaded %s: %s rows, %s records, %s rejected",
        path,
        stats["n_rows"],
        stats["n_records"],
        stats["n_rejected"],
    )
    return records, stats


def load_records(path: Union[str, Path]) -> List[CityRecord]:
    """Load the dataset and return only the valid records."""
    records, _ = load_dataset(path)
    return records
