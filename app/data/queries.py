# app/data/queries.py

import logging
from typing import Dict, Iterable, List

from app.models.cities import CityRecord, CitySummary, StateSummary

logger = logging.getLogger(__name__)


def list_states(records: Iterable[CityRecord]) -> List[StateSummary]:
    """
    Distinct states in order of first appearance.

    The first record seen for a state code sets its name; later records
    with a different name are ignored.
    """
    names: Dict[str, str] = {}

    for record in records:
        if record.state_code not in names:
            names[record.state_code] = record.state_name
        elif names[record.state_code] != record.state_name:
            logger.debug(
                "Ignoring name %r for state %r (already %r)",
                record.state_name,
                record.state_code,
                names[record.state_code],
            )

    # dicts keep insertion order
    return [StateSummary(id=code, state=name) for code, name in names.items()]


def list_cities(records: Iterable[CityRecord], state_code: str) -> List[CitySummary]:
    """
    Cities whose state code is exactly ``state_code`` (case-sensitive, no
    normalization), in dataset order. Unknown codes give an empty list.
    """
    return [
        CitySummary(id=record.city_code, city=record.city_name)
        for record in records
        if record.state_code == state_code
    ]
