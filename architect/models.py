"""Core data models shared across architect components."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from .report import ReportSection

UNKNOWN = "Unknown"

# Values for these keys must never reach the report.
SENSITIVE_ENV_KEYS: tuple[str, ...] = (
    "APP_KEY",
    "DB_PASSWORD",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "MAIL_PASSWORD",
    "REDIS_PASSWORD",
    "GOOGLE_MAP_API_KEY",
    "SLACK_BOT_USER_OAUTH_TOKEN",
    "SLACK_VERIFICATION_TOKEN",
    "RESEND_KEY",
    "LOG_SLACK_WEBHOOK_URL",
    "SLACK_ALERT_WEBHOOK_URL",
    "CARD_API_KEY",
)

REDACTED = "[hidden]"


@dataclass(frozen=True)
class FileRecord:
    """Metadata for a single file below the project root."""

    path: str
    size: int
    mtime: float


@dataclass
class Manifest:
    """Parsed composer.json contents relevant to the report."""

    name: Optional[str] = None
    description: Optional[str] = None
    require: Dict[str, str] = field(default_factory=dict)
    require_dev: Dict[str, str] = field(default_factory=dict)


class EnvironmentMap(Dict[str, str]):
    """Mapping of .env keys to raw values that masks sensitive entries."""

    def filled(self, key: str) -> bool:
        """Return True when the key is present with a non-empty value."""
        return bool(self.get(key))

    def display(self, key: str, default: str) -> str:
        """Return a value that is safe to print for ``key``."""
        if key in SENSITIVE_ENV_KEYS:
            return REDACTED if self.filled(key) else default
        value = self.get(key)
        return default if value is None else value

    def __repr__(self) -> str:
        masked = {
            key: (REDACTED if key in SENSITIVE_ENV_KEYS else value)
            for key, value in self.items()
        }
        return f"EnvironmentMap({masked!r})"


@dataclass
class VcsSummary:
    """Git facts for the Overview chapter; ``None`` marks an unavailable field."""

    current_branch: str = UNKNOWN
    last_commit_message: str = UNKNOWN
    contributor_count: Optional[int] = None
    total_commit_count: Optional[int] = None
    is_clean: Optional[bool] = None


@dataclass
class AnalysisOptions:
    """Per-run switches passed in from the CLI."""

    deep: bool = False  # reserved
    skip_env: bool = False
    summary: bool = False


@dataclass
class AnalysisResult:
    """Outcome of a successful analysis run."""

    root: Path
    sections: List["ReportSection"] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

