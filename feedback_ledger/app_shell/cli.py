import argparse
import logging
import os
import sys
from pathlib import Path

from feedback_ledger.adapters.sqlite_journal import SQLiteJournal
from feedback_ledger.app_shell.config import configure_logging, validate_ops_rules
from feedback_ledger.components.notifications import ListNotificationsInput, run_list
from feedback_ledger.rules.loader import load_rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"
DATA_DIR = "data"


def handle_check_rules(args: argparse.Namespace) -> int:
    try:
        rules = load_rules(Path(args.rules))
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return 1

    validate_ops_rules(rules)
    print(f"Rules OK: {rules.project.slug} v{rules.project.rules_version}")
    print(f"Journal backend: {rules.journal.backend}")
    return 0


def handle_journal(args: argparse.Namespace) -> int:
    db_path = Path(args.db)
    if not db_path.exists():
        logger.error("Journal %s not found.", db_path)
        return 1

    result = run_list(
        ListNotificationsInput(kind=args.kind, since=args.since, limit=args.limit),
        journal=SQLiteJournal(db_path),
    )
    if not result.success:
        for err in result.errors:
            logger.error("%s: %s", err.code, err.message)
        return 1

    for record in result.records:
        print(
            f"{record.sequence:>6}  v{record.ledger_version:<6} "
            f"{record.recorded_at.isoformat()}  {record.notification.model_dump_json()}"
        )
    print(f"{len(result.records)} of {result.total} records")
    return 0


def handle_serve(args: argparse.Namespace) -> int:
    import uvicorn

    os.environ.setdefault("LEDGER_RULES_PATH", str(Path(args.rules).resolve()))
    uvicorn.run("feedback_ledger.api.main:app", host=args.host, port=args.port)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Feedback Ledger CLI")
    parser.add_argument("--rules", default=RULES_PATH, help="Path to rules.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check-rules
    subparsers.add_parser("check-rules", help="Load and validate the rules file")

    # journal
    journal_parser = subparsers.add_parser("journal", help="Print notification journal records")
    journal_parser.add_argument("--db", default=os.path.join(DATA_DIR, "journal.db"))
    journal_parser.add_argument("--kind", default=None)
    journal_parser.add_argument("--since", type=int, default=None)
    journal_parser.add_argument("--limit", type=int, default=100)

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)
    configure_logging()

    handlers = {
        "check-rules": handle_check_rules,
        "journal": handle_journal,
        "serve": handle_serve,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
