#!/usr/bin/env python3
"""Seed the configured database with sample posts and users."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(PROJECT_ROOT))

from backend.app.core.config import settings  # noqa: E402
from backend.app.core.logging import configure_logging, logger  # noqa: E402
from backend.app.db import models  # noqa: E402
from backend.app.db.init_db import init_db  # noqa: E402
from backend.app.db.sample_data import seed_people, seed_posts  # noqa: E402
from backend.app.db.session import SessionLocal  # noqa: E402


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed sample blog data.")
    parser.add_argument("--posts", action="store_true", help="Insert the sample posts.")
    parser.add_argument("--users", action="store_true", help="Insert the sample people.")
    parser.add_argument(
        "--role",
        choices=[r.value for r in models.Role],
        default=models.Role.USER.value,
        help="Role given to the sample people.",
    )
    parser.add_argument("--create-tables", action="store_true", help="Create missing tables first.")
    return parser.parse_args()


def main() -> int:
    args = _parse_args()
    configure_logging(settings.log_level, sql_echo=settings.sql_echo)
    if not (args.posts or args.users):
        args.posts = args.users = True

    if args.create_tables:
        init_db()

    with SessionLocal() as session:
        if args.posts:
            posts = seed_posts(session)
            logger.info("Seeded %d posts", len(posts))
        if args.users:
            people = seed_people(session, models.Role(args.role))
            logger.info("Seeded %d people with role=%s", len(people), args.role)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
