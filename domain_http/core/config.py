"""Adapter configuration helpers."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os

DEFAULT_PROBLEM_TYPE_BASE_URL = "https://httpstatuses.com"


@dataclass(frozen=True)
class ProblemDetailsSettings:
    """Runtime settings for default problem details."""

    problem_type_base_url: str

    def problem_type(self, status_code: int) -> str:
        """Return the problem type URI for an HTTP status code."""
        return f"{self.problem_type_base_url.rstrip('/')}/{status_code}"


@lru_cache(maxsize=1)
def get_problem_details_settings() -> ProblemDetailsSettings:
    """Load problem details settings from the environment."""
    return ProblemDetailsSettings(
        problem_type_base_url=os.getenv("DOMAIN_HTTP_PROBLEM_TYPE_BASE_URL", DEFAULT_PROBLEM_TYPE_BASE_URL),
    )
