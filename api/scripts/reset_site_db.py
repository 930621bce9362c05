#!/usr/bin/env python3
"""Drop and recreate the site tables (projects, pages, navigation_items).

DESTRUCTIVE: all content is lost. Pass --seed to reload the default content.
"""

import argparse
import logging
import os
import sys

_api_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _api_dir)

from releasesite.services import site_store
from releasesite.services.site_content import seed_default_content


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Drop and recreate the site tables")
    ap.add_argument("--yes", action="store_true", help="Confirm the reset")
    ap.add_argument("--seed", action="store_true", help="Seed default content afterwards")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO)

    if not args.yes:
        print("ERROR: refusing to reset without --yes")
        return 1

    print("Dropping and recreating site tables...")
    site_store.drop_schema()
    if args.seed:
        summary = seed_default_content()
        print(f"Seeded {summary['projects']} projects, {summary['pages']} pages, "
              f"{summary['navigation_items']} navigation items")
    print("Site database reset complete")
    return 0


if __name__ == "__main__":
    sys.exit(main())
