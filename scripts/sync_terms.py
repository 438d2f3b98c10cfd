#!/usr/bin/env python3
"""Sync verbiage terms into a local JSON store and print what happened.

Usage
-----
Set environment variables and run::

    export VERBIAGE_BASE_URL="https://verbiage.example.org/api"
    export VERBIAGE_LOCALES="en,se"
    python scripts/sync_terms.py --store terms.json

Options::

    --store FILE         JSON store file (default: .verbiage-cache.json)
    --locales en,fr      Override VERBIAGE_LOCALES
    --tag TAG            Override VERBIAGE_TAG
    --clear              Clear the cache before syncing
    --json               Print the cached terms as JSON
    --verbose / -v       Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyverbiage import (  # noqa: E402
    JsonFileStore,
    SyncEvent,
    VerbiageClient,
    VerbiageConfig,
    VerbiageError,
)


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sync verbiage terms into a local JSON store.")
    parser.add_argument("--store", default=".verbiage-cache.json", help="JSON store file")
    parser.add_argument("--locales", help="Comma-separated locales (overrides VERBIAGE_LOCALES)")
    parser.add_argument("--tag", help="Tag passed to the generate endpoint")
    parser.add_argument("--clear", action="store_true", help="Clear the cache before syncing")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Print cached terms as JSON")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args()


def _on_event(event: SyncEvent) -> None:
    print(f"  event     : {event.value}")


async def run(args: argparse.Namespace) -> int:
    overrides: dict[str, Any] = {"sync_on_enter": False}
    if args.locales:
        overrides["locales"] = args.locales
    if args.tag:
        overrides["tag"] = args.tag
    config = VerbiageConfig.from_env(**overrides)

    store = JsonFileStore(args.store)
    async with VerbiageClient(config, store=store, on_event=_on_event) as client:
        if args.clear:
            client.clear_cache()
        print(f"  base_url  : {config.base_url}")
        print(f"  locales   : {','.join(config.locales)}")
        outcome = await client.sync()
        print(f"  branch    : {outcome.branch.value}")
        print(f"  fetched   : {outcome.fetched}")
        print(f"  written   : {','.join(outcome.written) or '-'}")

        terms = client.get_terms()
        if args.json_mode:
            print(json.dumps(terms, indent=2, ensure_ascii=False, sort_keys=True))
        else:
            for locale, term_map in terms.items():
                print(f"  {locale:<9} : {len(term_map)} terms")
    return 0


def main() -> None:
    args = _parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        sys.exit(asyncio.run(run(args)))
    except VerbiageError as exc:
        print(f"sync failed: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
