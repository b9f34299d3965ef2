#!/usr/bin/env python3
"""
Command-line interface for the draft-4 schema validator.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Optional, Union

from .constraints import DEFAULT_MAX_REFERENCE_DEPTH
from .schema import Schema
from .version import __version__

logger = logging.getLogger("draft4_schema")


def load_json(filepath: Union[str, Path]) -> Any:
    """
    Load and parse a JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Parsed JSON data

    Raises:
        FileNotFoundError: If the file doesn't exist
        json.JSONDecodeError: If the file contains invalid JSON
    """
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"File not found: {filepath}")

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        # Enhance the error message with file information
        raise json.JSONDecodeError(
            f"Failed to parse JSON in {filepath}: {e.msg}",
            e.doc,
            e.pos
        ) from e


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Validate a JSON file against a draft-4 JSON schema."
    )
    parser.add_argument(
        "data_file",
        type=str,
        help="Path to the JSON data file to validate"
    )
    parser.add_argument(
        "schema_file",
        type=str,
        help="Path to the JSON schema file"
    )
    parser.add_argument(
        "--max-reference-depth",
        type=int,
        default=DEFAULT_MAX_REFERENCE_DEPTH,
        metavar="N",
        help="Maximum number of nested $ref evaluations (default: %(default)s)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose output"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    return parser.parse_args(args)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the script."""
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    try:
        data = load_json(args.data_file)
        document = load_json(args.schema_file)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.error(str(e))
        return 1

    try:
        schema = Schema(document,
                        verbose=args.verbose,
                        max_reference_depth=args.max_reference_depth)
    except (TypeError, ValueError) as e:
        logger.error(f"Invalid schema: {e}")
        return 1

    result = schema.validate(data)

    # Report results
    if not result.valid:
        logger.error("Validation failed:")
        for error in result.errors:
            logger.error(f"  - {error}")
        return 1

    logger.info("Validation successful!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
