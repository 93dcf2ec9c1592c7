"""Step execution engine public API."""

from resumerefresh.engine.conditions import PostConditionChecker, contains_all, wait_for_url
from resumerefresh.engine.diagnostics import capture_failure_screenshot
from resumerefresh.engine.executor import StepExecutor
from resumerefresh.engine.resolver import LocatorResolver, build_locator

__all__ = [
    "LocatorResolver",
    "PostConditionChecker",
    "StepExecutor",
    "build_locator",
    "capture_failure_screenshot",
    "contains_all",
    "wait_for_url",
]
