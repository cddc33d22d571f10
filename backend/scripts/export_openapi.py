"""Write the generated OpenAPI document for the books API.

Usage:
    python -m scripts.export_openapi --out openapi.json

The app is built against a throwaway in-memory store so the real books
file is never read or touched.
"""
import argparse
import json
import sys
from typing import Optional

from api.main import create_app
from repositories import BooksRepository
from storage.json_storage import JsonFileStorage


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Export the books API OpenAPI document.")
    parser.add_argument("--out", default="-", help="Output filename, '-' for stdout.")
    parser.add_argument("--indent", type=int, default=2, help="JSON indentation.")
    return parser


def build_openapi() -> dict:
    store = BooksRepository(JsonFileStorage("openapi-export.json"))
    app = create_app(store=store)
    return app.openapi()


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    text = json.dumps(build_openapi(), indent=args.indent)
    if args.out == "-":
        sys.stdout.write(text + "\n")
    else:
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(text + "\n")
        print(f"Wrote {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
