import logging
import os
import sys

from feedback_ledger.domain.entities import is_null_principal
from feedback_ledger.rules.models import Rules

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging for a process entry point."""
    level_name = (os.environ.get("LEDGER_LOG_LEVEL") or level or "INFO").upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)


def validate_ops_rules(rules: Rules) -> None:
    """
    Validate operational requirements before startup.
    """
    ops = rules.ops

    # 1. Check Required Env
    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        sys.exit(1)

    # 2. Bootstrap admin must resolve from rules or env to a real principal
    bootstrap_admin = os.environ.get(rules.bootstrap.admin_env) or rules.bootstrap.admin
    if is_null_principal(bootstrap_admin):
        logger.critical(
            "No bootstrap admin configured (bootstrap.admin or %s)", rules.bootstrap.admin_env
        )
        sys.exit(1)

    logger.info("Configuration validated.")
