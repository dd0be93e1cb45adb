# parse_data.py
"""
Parse the cities dataset and print basic stats.

Usage:
    python parse_data.py [path/to/cities.json]
"""

import sys

from app.core.config import settings
from app.data.loader import load_dataset
from app.errors import DatasetError


def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    path = argv[0] if argv else settings.data_path()

    try:
        _, stats = load_dataset(path)
    except DatasetError as e:
        print(f"Failed to load {path}: {e}", file=sys.stderr)
        return 1

    print(f"Dataset file:          {path}")
    print(f"Total rows read:       {stats['n_rows']}")
    print(f"Valid records:         {stats['n_records']}")
    print(f"Distinct states:       {stats['n_states']}")
    print(f"Rejected rows:         {stats['n_rejected']}")
    print(f"Duplicate city codes:  {stats['n_duplicate_cities']}")
    print(f"State name conflicts:  {stats['n_state_name_conflicts']}")

    if stats["error_examples"]:
        print("\nExample errors:")
        for ex in stats["error_examples"]:
            print(f"- Row {ex['row_number']}: {ex['error']}")

    for example in stats["duplicate_city_examples"] + stats["state_conflict_examples"]:
        print(f"- {example}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
