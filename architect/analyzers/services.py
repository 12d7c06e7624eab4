"""Third-party service detection from environment keys."""

from __future__ import annotations

from typing import List, Mapping

SERVICE_RULES: tuple[tuple[str, str], ...] = (
    ("AWS_ACCESS_KEY_ID", "AWS Integration"),
    ("REDIS_HOST", "Redis"),
    ("SLACK_BOT_USER_OAUTH_TOKEN", "Slack Integration"),
    ("GOOGLE_MAP_API_KEY", "Google Maps"),
)


class ServiceDetector:
    """Reports services whose trigger key is present and non-empty."""

    def detect(self, env: Mapping[str, str]) -> List[str]:
        return [label for key, label in SERVICE_RULES if env.get(key)]


__all__ = ["SERVICE_RULES", "ServiceDetector"]
