"""Git integration: subprocess-backed queries and the summary built from them."""

from .provider import GitProvider
from .summary import VersionControlSummarizer

__all__ = ["GitProvider", "VersionControlSummarizer"]
