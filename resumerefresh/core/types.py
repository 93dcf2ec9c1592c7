"""Shared types and dataclasses for resumerefresh."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Union

from resumerefresh import config


class StrategyKind(str, Enum):
    CSS = "css"
    XPATH = "xpath"
    ROLE = "role"
    TEXT = "text"
    PLACEHOLDER = "placeholder"


@dataclass(frozen=True)
class LocatorStrategy:
    """One concrete way of finding a UI target."""

    kind: StrategyKind
    value: str  # selector, xpath, ARIA role, text or placeholder
    name: str | None = None  # accessible name (ROLE only)
    first_only: bool = False

    def describe(self) -> str:
        if self.kind == StrategyKind.ROLE and self.name:
            return f"{self.kind.value}={self.value}[name={self.name!r}]"
        return f"{self.kind.value}={self.value}"


@dataclass(frozen=True)
class LocatorSpec:
    """Ordered alternatives for locating one logical target."""

    target: str
    strategies: tuple[LocatorStrategy, ...]

    def __post_init__(self) -> None:
        if not self.strategies:
            raise ValueError(f"LocatorSpec {self.target!r} needs at least one strategy")


def css(selector: str, *, first_only: bool = False) -> LocatorStrategy:
    return LocatorStrategy(StrategyKind.CSS, selector, first_only=first_only)


def xpath(expression: str, *, first_only: bool = False) -> LocatorStrategy:
    return LocatorStrategy(StrategyKind.XPATH, expression, first_only=first_only)


def role(aria_role: str, name: str, *, first_only: bool = False) -> LocatorStrategy:
    return LocatorStrategy(StrategyKind.ROLE, aria_role, name=name, first_only=first_only)


def text(content: str, *, first_only: bool = False) -> LocatorStrategy:
    return LocatorStrategy(StrategyKind.TEXT, content, first_only=first_only)


def placeholder(content: str, *, first_only: bool = False) -> LocatorStrategy:
    return LocatorStrategy(StrategyKind.PLACEHOLDER, content, first_only=first_only)


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------


class ActionType(str, Enum):
    NAVIGATE = "navigate"
    FILL = "fill"
    CLICK = "click"
    SET_UPLOAD_FILE = "set_upload_file"


@dataclass(frozen=True)
class Navigate:
    url: str
    wait_until: str = "load"  # load | domcontentloaded | networkidle | commit

    action_type = ActionType.NAVIGATE


@dataclass(frozen=True)
class Fill:
    value: str | None = None
    secret: str | None = None  # credential field read from the RunContext

    action_type = ActionType.FILL

    def __post_init__(self) -> None:
        if (self.value is None) == (self.secret is None):
            raise ValueError("Fill takes exactly one of value= or secret=")


@dataclass(frozen=True)
class Click:
    action_type = ActionType.CLICK


@dataclass(frozen=True)
class SetUploadFile:
    """Click the target and answer the file chooser it raises."""

    path: str | None = None  # None: ask the RunContext's resume locator

    action_type = ActionType.SET_UPLOAD_FILE


Action = Union[Navigate, Fill, Click, SetUploadFile]


# ---------------------------------------------------------------------------
# Post-conditions
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class URLMatches:
    pattern: str  # regular expression searched in page.url
    timeout_ms: float | None = None


@dataclass(frozen=True)
class ElementVisible:
    spec: LocatorSpec
    timeout_ms: float | None = None


@dataclass(frozen=True)
class ElementContainsAllOf:
    spec: LocatorSpec
    texts: tuple[str, ...]
    timeout_ms: float | None = None

    def __post_init__(self) -> None:
        if not self.texts:
            raise ValueError("ElementContainsAllOf needs at least one text fragment")


PostCondition = Union[URLMatches, ElementVisible, ElementContainsAllOf]


@dataclass(frozen=True)
class WorkflowStep:
    name: str
    action: Action
    locator: LocatorSpec | None = None  # None only for Navigate
    postcondition: PostCondition | None = None
    timeout_ms: float = 10_000

    def __post_init__(self) -> None:
        navigating = isinstance(self.action, Navigate)
        if navigating and self.locator is not None:
            raise ValueError(f"step {self.name!r}: Navigate does not take a locator")
        if not navigating and self.locator is None:
            raise ValueError(f"step {self.name!r}: {self.action.action_type.value} needs a locator")


# ---------------------------------------------------------------------------
# Run inputs and results
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Credentials:
    username: str = field(default="")
    password: str = field(default="", repr=False)

    @property
    def complete(self) -> bool:
        return bool(self.username) and bool(self.password)


@dataclass(frozen=True)
class RunContext:
    """Per-run bundle of the live page and the run's inputs."""

    page: Any  # playwright.async_api.Page, owned by the caller for the whole run
    credentials: Credentials
    resume_locator: Callable[[], str | Path | None] | None = None
    diagnostics_path: str = config.DEFAULT_SCREENSHOT_PATH
    run_id: str = field(default_factory=lambda: uuid.uuid4().hex[:8])

    def secret(self, field_name: str) -> str:
        if field_name not in ("username", "password"):
            raise KeyError(f"Unknown credential field {field_name!r}")
        return getattr(self.credentials, field_name)


class FailureCause(str, Enum):
    PRECONDITION = "precondition"
    ELEMENT_NOT_FOUND = "element_not_found"
    POSTCONDITION_TIMEOUT = "postcondition_timeout"
    ACTION_FAILED = "action_failed"


@dataclass
class StepResult:
    name: str
    action: str
    success: bool
    error: str | None = None
    cause: FailureCause | None = None
    latency_ms: float = 0.0


@dataclass
class RunResult:
    succeeded: bool
    failed_step: str | None = None
    cause: FailureCause | None = None
    error: str | None = None
    diagnostic_path: str | None = None
    step_results: list[StepResult] = field(default_factory=list)
    total_latency_ms: float = 0.0

    @classmethod
    def success(cls, step_results: list[StepResult], total_latency_ms: float = 0.0) -> RunResult:
        return cls(succeeded=True, step_results=step_results, total_latency_ms=total_latency_ms)

    @classmethod
    def failure(
        cls,
        step_name: str,
        cause: FailureCause,
        error: str,
        *,
        step_results: list[StepResult] | None = None,
        diagnostic_path: str | None = None,
        total_latency_ms: float = 0.0,
    ) -> RunResult:
        return cls(
            succeeded=False,
            failed_step=step_name,
            cause=cause,
            error=error,
            diagnostic_path=diagnostic_path,
            step_results=step_results or [],
            total_latency_ms=total_latency_ms,
        )

    @property
    def steps_executed(self) -> int:
        return len(self.step_results)

    def summary(self) -> str:
        if self.succeeded:
            return f"Succeeded ({self.steps_executed} steps)"
        line = f"Failed at step {self.failed_step!r}: {self.cause.value if self.cause else 'unknown'}"
        if self.error:
            line += f" ({self.error})"
        if self.diagnostic_path:
            line += f"; screenshot saved to {self.diagnostic_path}"
        return line
