"""
1) Parse the individuals in a GEDCOM file into memory.
2) Turn them into person records (first name, last name, birth date).
3) Validate the records: non-blank names, no birth dates in the future.
4) Save every valid record.
5) Count the records per age category.
6) Plot the age category counts.
"""

from datetime import date
from pathlib import Path
import argparse

from parsing import load_records, parse_gedcom
from plotting import plot_age_categories
from validation import categorize_records, validate_records


MAX_WARNINGS_SHOWN = 10


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate and categorize the people in a GEDCOM file."
    )
    parser.add_argument(
        "gedcom",
        nargs="?",
        type=Path,
        default=Path("people.ged"),
        help="GEDCOM file to read (default: people.ged in the current directory)",
    )
    parser.add_argument(
        "--today",
        type=date.fromisoformat,
        default=None,
        help="reference date as YYYY-MM-DD (default: the current date)",
    )
    parser.add_argument(
        "--plot",
        type=Path,
        default=Path("age_categories.png"),
        help="where to write the age category chart (default: the current directory)",
    )
    parser.add_argument("--no-plot", action="store_true", help="skip the chart")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    today = args.today or date.today()

    print(f"Parsing GEDCOM file: {args.gedcom}")
    reader = parse_gedcom(args.gedcom)

    print("Building person records...")
    records = load_records(reader)
    print(f"  Found {len(records)} persons")

    print("Validating records...")
    warnings = validate_records(records, today)
    if warnings:
        print(f"  Found {len(warnings)} validation warnings:")
        for w in warnings[:MAX_WARNINGS_SHOWN]:
            print(f"    - {w}")
        if len(warnings) > MAX_WARNINGS_SHOWN:
            print(f"    ... and {len(warnings) - MAX_WARNINGS_SHOWN} more")
    else:
        print("  No validation issues found")

    print("Saving valid records...")
    saved = sum(1 for record in records if record.save(today=today))
    print(f"  Saved {saved} of {len(records)} records")

    print(f"Age categories as of {today.isoformat()}:")
    counts = categorize_records(records, today)
    for category, count in counts.items():
        print(f"  {category.value:<8} {count}")

    if not args.no_plot:
        print(f"Plotting age categories to: {args.plot}")
        plot_age_categories(counts, args.plot)

    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
