#!/usr/bin/env python3
"""Seed the site store with the default projects, pages and navigation.

Usage:
  python scripts/seed_site_content.py            # uses SITE_DATABASE_URL / DATABASE_URL / api/logs/site.db
  python scripts/seed_site_content.py --database-url sqlite+pysqlite:////tmp/site.db -v
"""

import argparse
import json
import logging
import os
import sys

_api_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, _api_dir)

from releasesite.services import site_store
from releasesite.services.site_content import seed_default_content

log = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Seed default release tools site content")
    ap.add_argument(
        "--database-url",
        default=None,
        help="Override SITE_DATABASE_URL for this run",
    )
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.database_url:
        os.environ["SITE_DATABASE_URL"] = args.database_url
        site_store.reset_engine_cache()

    summary = seed_default_content()
    log.info("Seed complete against %s", site_store.engine().url.render_as_string(hide_password=True))
    print(json.dumps(summary, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
