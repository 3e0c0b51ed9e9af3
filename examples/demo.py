#!/usr/bin/env python3
"""
Example usage of the XML Property Store.

Loads a properties document, reads a property and an option list, then
removes entries again. Run from the repository root:

    python examples/demo.py
    python examples/demo.py --data-path config/ --file app_properties.xml -v
"""

import argparse
import enum
import logging
import sys
from pathlib import Path

from xml_property_store import InvalidXMLFileFormatError, PropertiesStore

DEFAULT_DATA_PATH = Path(__file__).resolve().parent.parent / "tests" / "fixtures" / "data"


class MyProps(enum.Enum):
    """Keys this demo reads from the store."""

    MY_STRING = "MY_STRING"
    MY_STRING_OPTIONS = "MY_STRING_OPTIONS"


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


def run(data_path: Path, file_name: str) -> int:
    store = PropertiesStore()
    store.set_data_path(data_path)

    try:
        store.load(file_name)
    except InvalidXMLFileFormatError as e:
        # The host decides what a failed load means; here we just report it
        print("AN ERROR OCCURRED!!!")
        print(f"  {e}")
        return 1

    my_string = store.get_property(MyProps.MY_STRING.name)
    print(f"myString was loaded as: {my_string}")

    options = store.get_option_list(MyProps.MY_STRING_OPTIONS.name) or []
    first = options[0] if options else None
    print(f"The first option loaded is {first}")

    store.remove_property(MyProps.MY_STRING.name)
    print(f"myString is now: {store.get_property(MyProps.MY_STRING.name)}")

    store.clear()
    print(f"Number of option lists left: {store.option_list_count()}")
    return 0


def main():
    """Demo entry point."""
    parser = argparse.ArgumentParser(description="XML Property Store demo")
    parser.add_argument(
        "--data-path",
        type=Path,
        default=DEFAULT_DATA_PATH,
        help="Directory holding the properties document"
    )
    parser.add_argument(
        "--file",
        default="valid_test_properties.xml",
        help="Properties document to load (default: valid_test_properties.xml)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )
    args = parser.parse_args()

    setup_logging(args.verbose)
    return run(args.data_path, args.file)


if __name__ == "__main__":
    sys.exit(main())
