#!/usr/bin/env python3
"""
Compare a saved localization snapshot with the currently published table.

Usage:
    python compare_localization.py snapshot.json [--language en] [--json]

The snapshot is the published wire format (a JSON array of single-entry
objects), e.g. a previous download saved with ``Localization.to_array()``.
"""
import asyncio
import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from config import settings  # noqa: E402
from localization import Localization  # noqa: E402


async def run(snapshot_path: Path, language: str, as_json: bool) -> int:
    with open(snapshot_path, 'r', encoding='utf-8') as f:
        old = Localization.from_array(language, json.load(f))

    new = await Localization.create(language)
    result = old.compare(new)

    if as_json:
        print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return 0

    print(f"Snapshot: {len(old)} entries, live: {len(new)} entries")
    print(f"Changes: {result.summary}")
    for entry in result.new_fields:
        print(f"  + {entry.key}: {entry.value}")
    for entry in result.edited_fields:
        print(f"  ~ {entry.key}: {entry.values.old!r} -> {entry.values.new!r}")
    for entry in result.deleted_fields:
        print(f"  - {entry.key}: {entry.value}")
    return 0


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(1)

    snapshot_path = Path(sys.argv[1])
    language = settings.DEFAULT_LANGUAGE
    if '--language' in sys.argv:
        idx = sys.argv.index('--language')
        language = sys.argv[idx + 1]

    sys.exit(asyncio.run(run(snapshot_path, language, '--json' in sys.argv)))


if __name__ == '__main__':
    main()
