"""Exception hierarchy raised inside a run."""

from __future__ import annotations

from resumerefresh.core.types import FailureCause


class ResumeRefreshError(Exception):
    pass


class PreconditionError(ResumeRefreshError):
    """An input the run depends on is missing. Nothing on screen to capture."""

    cause = FailureCause.PRECONDITION


class MissingCredentialsError(PreconditionError):
    pass


class ResumeNotFoundError(PreconditionError):
    pass


class StepError(ResumeRefreshError):
    """A step could not complete. Always fatal for the run."""

    cause: FailureCause = FailureCause.ACTION_FAILED

    def __init__(self, step_name: str, message: str) -> None:
        super().__init__(message)
        self.step_name = step_name


class ElementNotFoundError(StepError):
    cause = FailureCause.ELEMENT_NOT_FOUND


class PostconditionTimeoutError(StepError):
    cause = FailureCause.POSTCONDITION_TIMEOUT


class ActionFailedError(StepError):
    cause = FailureCause.ACTION_FAILED
