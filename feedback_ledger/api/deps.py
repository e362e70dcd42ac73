import os
from functools import lru_cache
from pathlib import Path
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from feedback_ledger.core.services import FeedbackLedger
from feedback_ledger.domain.entities import NULL_PRINCIPAL, Principal
from feedback_ledger.rules.loader import load_rules
from feedback_ledger.rules.models import Rules


# --- Settings ---
class Settings:
    def __init__(self) -> None:
        self.base_dir = Path(os.getcwd())
        self.data_dir = Path(os.environ.get("LEDGER_DATA_DIR", "./data"))
        self.rules_path = Path(
            os.environ.get("LEDGER_RULES_PATH", str(self.base_dir / "rules.yaml"))
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()


# --- Rules ---
@lru_cache
def get_rules() -> Rules:
    return load_rules(get_settings().rules_path)


# --- Ledger ---
@lru_cache
def get_ledger() -> FeedbackLedger:
    """Process-wide ledger; one instance owns the state and its lock."""
    settings = get_settings()
    return FeedbackLedger.from_rules(get_rules(), settings.data_dir)


# --- Caller identity ---
# The authenticating proxy in front of the API sets X-Principal.


def get_caller(
    x_principal: Annotated[str | None, Header()] = None,
) -> Principal:
    """Caller for read endpoints; anonymous callers read as the null principal."""
    return x_principal or NULL_PRINCIPAL


def require_caller(
    x_principal: Annotated[str | None, Header()] = None,
) -> Principal:
    if not x_principal:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing X-Principal header",
        )
    return x_principal


LedgerDep = Annotated[FeedbackLedger, Depends(get_ledger)]
CallerDep = Annotated[Principal, Depends(get_caller)]
AuthenticatedCallerDep = Annotated[Principal, Depends(require_caller)]
