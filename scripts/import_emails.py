"""Import emails from a JSON file into the email store."""
import sys
import json
from pathlib import Path
from typing import Any, Dict, List

# Add parent to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from mailstore.database import init_db, SessionLocal
from mailstore.core.sql_repository import SqlEmailRepository
from mailstore.schemas.email import EmailCreate, EmailReceivedCreate
from mailstore.services.email_store_service import EmailStoreService


def parse_record(record: Dict[str, Any]) -> EmailCreate:
    """
    Build an insert payload from one JSON record.

    Records with a ``date`` but no ``state`` are treated as received mail.
    """
    if "state" not in record and "date" in record:
        return EmailReceivedCreate(**record).to_create()
    return EmailCreate(**record)


def load_records(path: Path) -> List[Dict[str, Any]]:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, dict):
        data = [data]
    return data


def import_emails(path: Path, batch_size: int = 500) -> int:
    """Insert all emails from the file in batches. Returns the number stored."""
    records = load_records(path)
    print(f"Loaded {len(records)} records from {path}")

    init_db()
    db = SessionLocal()
    stored = 0
    errors = []
    try:
        service = EmailStoreService(SqlEmailRepository(db))
        batch = []
        for i, record in enumerate(records):
            try:
                batch.append(parse_record(record))
            except ValueError as e:
                errors.append(f"Record {i}: {e}")

            if len(batch) >= batch_size:
                stored += len(service.insert_emails(batch))
                batch = []
                print(f"  Stored {stored} emails...")

        if batch:
            stored += len(service.insert_emails(batch))
    finally:
        db.close()

    print(f"Stored {stored} emails, {len(errors)} records skipped")
    for error in errors[:10]:
        print(f"  {error}")
    return stored


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Import emails from JSON")
    parser.add_argument("input", help="JSON file with an array of emails")
    parser.add_argument(
        "--batch-size",
        type=int,
        default=500,
        help="Emails per database commit"
    )
    args = parser.parse_args()

    path = Path(args.input)
    if not path.exists():
        print(f"File not found: {path}")
        sys.exit(1)

    import_emails(path, batch_size=args.batch_size)


if __name__ == "__main__":
    main()
