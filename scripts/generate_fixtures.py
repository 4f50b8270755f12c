"""Write a CSV of sample ID numbers, valid and deliberately broken.

Usage:
    python scripts/generate_fixtures.py --out fixtures/ids.csv --per-case 20
"""

from __future__ import annotations

import argparse
import csv
import random
from datetime import date, timedelta
from pathlib import Path

from idverify.validator import build_sa_id, validate_sa_id

FIRST_DAY = date(1950, 1, 1)
LAST_DAY = date(2049, 12, 31)


def _random_date(rng: random.Random) -> date:
    return FIRST_DAY + timedelta(days=rng.randrange((LAST_DAY - FIRST_DAY).days + 1))


def _tamper_check_digit(id_number: str) -> str:
    return id_number[:12] + str((int(id_number[12]) + 1) % 10)


def generate_rows(per_case: int, seed: int | None = None) -> list[dict[str, str]]:
    """Valid IDs plus the same IDs with their check digit changed."""
    rng = random.Random(seed)
    rows: list[dict[str, str]] = []
    for _ in range(per_case):
        valid = build_sa_id(
            _random_date(rng),
            rng.randrange(10000),
            citizenship_digit=rng.choice((0, 1)),
        )
        for id_number in (valid, _tamper_check_digit(valid)):
            result = validate_sa_id(id_number)
            rows.append({
                "id_number": id_number,
                "is_valid": str(result.is_valid),
                "errors": "; ".join(result.errors),
            })
    return rows


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate sample ID number fixtures")
    parser.add_argument("--out", type=Path, required=True, help="Output CSV path")
    parser.add_argument("--per-case", type=int, default=10, help="Valid IDs to generate")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    args = parser.parse_args()

    rows = generate_rows(args.per_case, args.seed)
    args.out.parent.mkdir(parents=True, exist_ok=True)
    with args.out.open("w", newline="") as fh:
        writer = csv.DictWriter(fh, fieldnames=["id_number", "is_valid", "errors"])
        writer.writeheader()
        writer.writerows(rows)
    print(f"Wrote {len(rows)} rows to {args.out}")


if __name__ == "__main__":
    main()
