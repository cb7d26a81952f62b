"""Shared pytest fixtures for domain-http test suites."""

from collections.abc import Generator
from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture(autouse=True)
def problem_details_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Run every test against default settings and a fresh settings cache."""
    from domain_http.core.config import get_problem_details_settings

    monkeypatch.delenv("DOMAIN_HTTP_PROBLEM_TYPE_BASE_URL", raising=False)
    get_problem_details_settings.cache_clear()
    yield
    get_problem_details_settings.cache_clear()
