#!/usr/bin/env python3
"""
Seed serial numbers into the assets table for local runs.

Existing serials are skipped, so the script can be safely re-run.

Usage:
    python scripts/seed_assets.py serial1 serial2 serial3
    python scripts/seed_assets.py --file serials.txt
    python scripts/seed_assets.py --create-tables serial1
"""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv
from sqlalchemy.orm import Session

sys.path.append(str(Path(__file__).resolve().parents[1]))

# Load environment variables
load_dotenv()

from serial_validator.db.base import Base
from serial_validator.db.session import SessionLocal, engine
from serial_validator.models.asset import Asset

DEFAULT_SERIALS = ["serial1", "serial2", "serial3"]


def seed_assets(db: Session, serials: list[str]) -> list[str]:
    """Insert missing serials. Returns the ones actually added."""
    existing = {
        s for (s,) in db.query(Asset.serial_number).filter(Asset.serial_number.in_(serials)).all()
    }
    to_add = [s for s in dict.fromkeys(serials) if s not in existing]
    if to_add:
        db.add_all([Asset(serial_number=s) for s in to_add])
        db.commit()
    return to_add


def read_serials(path: Path) -> list[str]:
    # one per line, blank lines ignored, no trimming
    return [line for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def main():
    parser = argparse.ArgumentParser(description="Seed serial numbers into the assets table")
    parser.add_argument("serials", nargs="*", help="Serial numbers to insert")
    parser.add_argument("--file", type=Path, help="File with one serial number per line")
    parser.add_argument("--create-tables", action="store_true", help="Create tables first (local SQLite)")
    args = parser.parse_args()

    serials = list(args.serials)
    if args.file:
        serials.extend(read_serials(args.file))
    if not serials:
        serials = DEFAULT_SERIALS

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        added = seed_assets(db, serials)
        print(f"Assets seeded: {len(added)} added, {len(set(serials)) - len(added)} already present")
    finally:
        db.close()

if __name__ == "__main__":
    main()
