import argparse
import sys
from pathlib import Path

from json_renamer.anonymization.exceptions import AnonymizationError
from json_renamer.anonymization.factory import AnonymizerFactory
from json_renamer.config.settings import Settings
from json_renamer.logging.logger import Log


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="json-renamer",
        description="Replace words in a JSON document with synthetic stand-ins.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="JSON file to anonymize ('-' or omitted reads stdin)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="write the result to this file instead of stdout",
    )
    return parser


def read_input(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> read input -> anonymize -> write output.

    Failures are reported as one line on stderr with exit code 1.
    """
    args = build_parser().parse_args(argv)
    try:
        settings = Settings()
        Log.configure(settings.log_level)
        anonymizer = AnonymizerFactory.create(settings)
    except ValueError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 1

    try:
        text = read_input(args.input)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Cannot read input: {exc}", file=sys.stderr)
        return 1

    try:
        result = anonymizer.anonymize(text)
    except AnonymizationError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(result.anonymized_text + "\n")
    else:
        args.output.write_text(result.anonymized_text + "\n", encoding="utf-8")
        Log.info(f"Wrote anonymized JSON to {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
