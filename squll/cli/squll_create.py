# squll/cli/squll_create.py
"""
Command-line entry point: create the tables described in a declaration file.

    squll schema.json --db app.db
    squll schema.json --dry-run

The database path is taken from --db, then the declaration's "db_path",
then SQULL_DB_PATH / the configured default.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from squll.config import load_config
from squll.declarations import load_declaration
from squll.errors import SqullError
from squll.schema import Schema, build_statements


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="squll",
        description="Create SQLite tables from a JSON schema declaration",
    )
    ap.add_argument("declaration", help="path to the JSON declaration file")
    ap.add_argument("--db", default=None, help="database file (overrides the declaration)")
    ap.add_argument("--atomic", action="store_true", default=None,
                    help="run the whole batch in one transaction")
    ap.add_argument("--lenient-types", action="store_true",
                    help="render unmapped types as empty instead of failing")
    ap.add_argument("--dry-run", action="store_true",
                    help="print the DDL without opening the database")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    cfg = load_config()

    try:
        decl = load_declaration(args.declaration)
        tables = decl.to_tables()

        if args.dry_run:
            for stmt in build_statements(*tables):
                print(stmt)
            return 0

        db_path = args.db or decl.db_path or cfg.db_path
        atomic = cfg.atomic if args.atomic is None else args.atomic
        strict = cfg.strict_types and not args.lenient_types

        with Schema(db_path, *tables, strict_types=strict, atomic=atomic) as sch:
            print(f"[squll] {len(sch.table_names)} table(s) ensured in {sch.path}")
    except SqullError as e:
        print(f"[squll] error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
