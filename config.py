# config.py
from enum import Enum

from pydantic_settings import BaseSettings

GITHUB_API_URL = "https://api.github.com"


class ForwardMode(str, Enum):
    PASSTHROUGH = "passthrough"
    ENVELOPE = "envelope"


class Settings(BaseSettings):
    """Environment-driven settings for the relay (set them in Vercel env)."""

    gh_pat: str = ""
    github_owner: str = "JulioQes"
    github_repo: str = "POC-LAUREATE-BOARD"
    github_workflow: str = "gateway.yml"
    forward_mode: ForwardMode = ForwardMode.PASSTHROUGH
    # unset: leave hangs to the platform's request timeout
    upstream_timeout: float | None = None

    model_config = {"extra": "ignore"}

    @property
    def dispatch_url(self) -> str:
        return (
            f"{GITHUB_API_URL}/repos/{self.github_owner}/{self.github_repo}"
            f"/actions/workflows/{self.github_workflow}/dispatches"
        )


def get_settings() -> Settings:
    # not cached: GH_PAT is read on every invocation
    return Settings()
