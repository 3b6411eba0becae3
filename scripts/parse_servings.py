"""Script to parse serving-size strings from food labels.

Prints one JSON line per input with the quantities found, or the parse error.

Run with: uv run python scripts/parse_servings.py "1 cup (240 ml)" "2 tbsp"
Or pipe:  cat servings.txt | uv run python scripts/parse_servings.py
"""

import argparse
import json
import sys

from servinglabel.labels import parse_serving_text
from servinglabel.logging_config import configure_logging
from servinglabel.quantities import ParseError


def parse_line(text: str) -> dict:
    """Parse one serving string into a JSON-ready result."""
    try:
        found = parse_serving_text(text)
    except ParseError as e:
        return {
            "input": text,
            "error": {"kind": e.kind.value, "position": e.position, "message": str(e)},
        }
    return {"input": text, "quantities": [q.to_dict() for q in found]}


def main():
    parser = argparse.ArgumentParser(description="Parse food label serving-size strings")
    parser.add_argument("servings", nargs="*", help="Serving strings (default: read stdin)")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (e.g. DEBUG)")

    args = parser.parse_args()
    configure_logging(log_level=args.log_level)

    lines = args.servings or [line.rstrip("\n") for line in sys.stdin]
    failures = 0
    for line in lines:
        if not line.strip():
            continue
        result = parse_line(line)
        failures += "error" in result
        print(json.dumps(result))

    sys.exit(1 if failures else 0)


if __name__ == "__main__":
    main()
