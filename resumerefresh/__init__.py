from resumerefresh.core.errors import (
    ActionFailedError,
    ElementNotFoundError,
    MissingCredentialsError,
    PostconditionTimeoutError,
    PreconditionError,
    ResumeNotFoundError,
    ResumeRefreshError,
    StepError,
)
from resumerefresh.core.types import (
    Click,
    Credentials,
    ElementContainsAllOf,
    ElementVisible,
    FailureCause,
    Fill,
    LocatorSpec,
    LocatorStrategy,
    Navigate,
    RunContext,
    RunResult,
    SetUploadFile,
    StepResult,
    StrategyKind,
    URLMatches,
    WorkflowStep,
)
from resumerefresh.engine.executor import StepExecutor
from resumerefresh.engine.resolver import LocatorResolver

__all__ = [
    "ActionFailedError",
    "Click",
    "Credentials",
    "ElementContainsAllOf",
    "ElementNotFoundError",
    "ElementVisible",
    "FailureCause",
    "Fill",
    "LocatorResolver",
    "LocatorSpec",
    "LocatorStrategy",
    "MissingCredentialsError",
    "Navigate",
    "PostconditionTimeoutError",
    "PreconditionError",
    "ResumeNotFoundError",
    "ResumeRefreshError",
    "RunContext",
    "RunResult",
    "SetUploadFile",
    "StepError",
    "StepExecutor",
    "StepResult",
    "StrategyKind",
    "URLMatches",
    "WorkflowStep",
]
