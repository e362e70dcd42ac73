from typing import Literal

from pydantic import BaseModel, Field

from feedback_ledger.domain.policy import DEFAULT_REDACTED_CONTENT


class ProjectRules(BaseModel):
    slug: str
    rules_version: str


class BootstrapRules(BaseModel):
    # Principal that initializes the ledger; seeded as the first admin
    admin: str | None = None
    admin_env: str = "LEDGER_BOOTSTRAP_ADMIN"


class PrivacyRules(BaseModel):
    redacted_content: str = DEFAULT_REDACTED_CONTENT.decode()
    gate_list_feedbacks: bool = False


class JournalRules(BaseModel):
    backend: Literal["memory", "sqlite"] = "memory"
    path: str = "journal.db"


class OpsRules(BaseModel):
    required_env: list[str] = Field(default_factory=list)
    log_level: str = "INFO"


class Rules(BaseModel):
    project: ProjectRules
    bootstrap: BootstrapRules = Field(default_factory=BootstrapRules)
    privacy: PrivacyRules = Field(default_factory=PrivacyRules)
    journal: JournalRules = Field(default_factory=JournalRules)
    ops: OpsRules = Field(default_factory=OpsRules)
