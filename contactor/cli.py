"""Command line entry point for listing, searching and exporting contacts."""
import argparse
import sys
from pathlib import Path

from contactor.core.errors import ContactSourceError
from contactor.core.logging import configure_logging
from contactor.core.rendering import csv_header
from contactor.core.utils import default_source_path
from contactor.pipeline import OUTPUT_FORMATS, run_export


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI entry point."""

    parser = argparse.ArgumentParser(description="Print or export contacts from an address book export")
    parser.add_argument(
        "--source",
        type=Path,
        default=None,
        help="JSON contacts export to read (defaults to $CONTACTOR_SOURCE or contacts.json)",
    )
    parser.add_argument(
        "--search",
        help="Only keep contacts with a field containing this text (case-insensitive)",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        default="text",
        help="Render contacts as text blocks or CSV rows",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Write the rendered contacts to this file instead of stdout",
    )
    parser.add_argument(
        "--excel-output",
        type=Path,
        help="Also write the selected contacts to an Excel workbook",
    )
    parser.add_argument(
        "--header-only",
        action="store_true",
        help="Print the CSV header row and exit",
    )
    return parser


def main() -> None:
    """Entrypoint for the ``contactor`` command."""

    configure_logging()
    args = build_parser().parse_args()

    if args.header_only:
        print(csv_header())
        return

    source = args.source or default_source_path()
    try:
        document = run_export(
            source,
            output_format=args.format,
            search=args.search,
            output_path=args.output,
            excel_path=args.excel_output,
        )
    except (ContactSourceError, ValueError) as exc:
        raise SystemExit(f"contactor: {exc}") from exc

    if args.output:
        print(f"Wrote {args.output}")
    else:
        sys.stdout.write(document)


if __name__ == "__main__":
    main()
