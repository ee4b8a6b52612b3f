"""JSON output for scraped legislator records."""

import json
from dataclasses import asdict
from pathlib import Path

from ak_leg_scraper.models import Legislator


def save_json(records: list[Legislator], path: Path) -> Path:
    """Write records to a pretty-printed JSON array, overwriting any existing file.

    Every object carries all eight keys in field order; absent values are null.
    Raises OSError if the file cannot be written.
    """
    print("\n" + "=" * 60)
    print("Saving JSON file...")
    print("=" * 60)

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    payload = [asdict(record) for record in records]
    path.write_text(json.dumps(payload, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")

    print(f"  Saved to: {path}")
    print(f"  Total records: {len(records)}")
    if records:
        print("\n  Sample record:")
        print(f"    {records[0]}")
    return path
