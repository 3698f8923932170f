"""CLI entrypoint: brief a funding-call document from a file or a topic URL."""

from __future__ import annotations

import argparse
import json
import logging

from dotenv import load_dotenv

from brief import brief_from_file, brief_from_url
from sources import SourceError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line flags."""
    parser = argparse.ArgumentParser(description="Extract a structured brief from an EU funding call")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--file", help="Path to a PDF, HTML or text file describing the call")
    source.add_argument("--url", help="Topic page URL; a linked work programme PDF is merged in")
    parser.add_argument(
        "--no-polish",
        action="store_true",
        help="Skip the optional LLM polish and return the deterministic brief",
    )
    parser.add_argument(
        "--fields-only",
        action="store_true",
        help="Print only the extracted fields JSON",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load config, run one extraction and print the result as JSON."""
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
    args = parse_args(argv)
    polish = not args.no_polish and not args.fields_only

    try:
        if args.url:
            result = brief_from_url(args.url, polish=polish)
        else:
            result = brief_from_file(args.file, polish=polish)
    except SourceError as exc:
        logging.error("Could not acquire document text: %s", exc)
        return 1

    output = result["fields"] if args.fields_only else result
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
