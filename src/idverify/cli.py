"""Command line interface: validate, format and generate ID numbers.

Usage:
    idverify validate 9001085012085 "800101 5009 087"
    idverify format 9001085012085
    idverify generate --dob 1990-01-08 --gender F --count 3
"""

from __future__ import annotations

import argparse
import json
import random
from datetime import date
from typing import Sequence

from idverify.core.config import AppSettings
from idverify.core.logging import configure_logging
from idverify.services import create_service
from idverify.validator import build_sa_id, format_sa_id, strip_id_formatting


def _validate(args: argparse.Namespace) -> int:
    service = create_service(args.settings)
    exit_code = 0
    for raw in args.id_numbers:
        id_number = strip_id_formatting(raw)
        result = service.validate_locally(id_number)
        if args.json:
            print(json.dumps({"id_number": id_number, **result.model_dump(mode="json")}))
        elif result.is_valid:
            print(
                f"{format_sa_id(id_number)}: valid, born {result.birth_date.isoformat()}, "
                f"{result.gender}, {result.citizenship_status}"
            )
        else:
            print(f"{format_sa_id(id_number)}: invalid")
            for error in result.errors:
                print(f"  - {error}")
        if not result.is_valid:
            exit_code = 1
    return exit_code


def _format(args: argparse.Namespace) -> int:
    print(format_sa_id(args.id_number))
    return 0


def _generate(args: argparse.Namespace) -> int:
    rng = random.Random(args.seed)
    low, high = (5000, 9999) if args.gender == "M" else (0, 4999)
    sequences = rng.sample(range(low, high + 1), args.count)
    for sequence in sorted(sequences):
        print(build_sa_id(args.dob, sequence, citizenship_digit=1 if args.resident else 0))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="idverify", description="South African ID number tools",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    validate = sub.add_parser("validate", help="Validate one or more ID numbers")
    validate.add_argument("id_numbers", nargs="+", metavar="ID")
    validate.add_argument("--json", action="store_true", help="One JSON result per line")
    validate.set_defaults(func=_validate)

    fmt = sub.add_parser("format", help="Group an ID number for display")
    fmt.add_argument("id_number", metavar="ID")
    fmt.set_defaults(func=_format)

    generate = sub.add_parser("generate", help="Generate sample ID numbers")
    generate.add_argument("--dob", type=date.fromisoformat, required=True, help="YYYY-MM-DD")
    generate.add_argument("--gender", choices=["M", "F"], required=True)
    generate.add_argument("--resident", action="store_true", help="Permanent resident")
    generate.add_argument("--count", type=int, default=1)
    generate.add_argument("--seed", type=int, default=None, help="Random seed")
    generate.set_defaults(func=_generate)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.settings = AppSettings()
    configure_logging(args.settings.log_level)
    if args.command == "generate":
        if not 1 <= args.count <= 5000:
            parser.error("--count must be between 1 and 5000")
        try:
            return args.func(args)
        except ValueError as exc:
            parser.error(str(exc))
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
