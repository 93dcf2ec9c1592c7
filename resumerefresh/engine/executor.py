"""Step executor: runs an ordered workflow against a live Playwright page."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Awaitable, Callable, Sequence

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from resumerefresh.core.errors import (
    ActionFailedError,
    PostconditionTimeoutError,
    PreconditionError,
    ResumeNotFoundError,
    StepError,
)
from resumerefresh.core.types import (
    Click,
    FailureCause,
    Fill,
    Navigate,
    RunContext,
    RunResult,
    SetUploadFile,
    StepResult,
    WorkflowStep,
)
from resumerefresh.engine.conditions import PostConditionChecker
from resumerefresh.engine.diagnostics import capture_failure_screenshot
from resumerefresh.engine.resolver import LocatorResolver

logger = logging.getLogger(__name__)

PRECONDITIONS_STEP = "preconditions"

ScreenshotCapture = Callable[[Any, str], Awaitable["str | None"]]


class StepExecutor:
    """
    Executes WorkflowSteps strictly in order and stops at the first failure.

    Each step resolves its locator, performs its action, then waits for its
    post-condition. Every failure is terminal: the remaining steps are not
    run, a full-page screenshot is attempted (except for precondition
    failures) and a failed RunResult naming the step and cause is returned.
    Errors outside the step taxonomy are reported as ``action_failed``.
    """

    def __init__(
        self,
        resolver: LocatorResolver | None = None,
        capture: ScreenshotCapture = capture_failure_screenshot,
    ) -> None:
        self._resolver = resolver or LocatorResolver()
        self._checker = PostConditionChecker(self._resolver)
        self._capture = capture

    async def run(self, steps: Sequence[WorkflowStep], context: RunContext) -> RunResult:
        total_start = time.monotonic()
        step_results: list[StepResult] = []

        if not context.credentials.complete:
            message = "Both account identifier and secret must be provided"
            logger.error("Run %s aborted before any step: %s", context.run_id, message)
            return RunResult.failure(
                PRECONDITIONS_STEP,
                FailureCause.PRECONDITION,
                message,
                total_latency_ms=(time.monotonic() - total_start) * 1000,
            )

        total = len(steps)
        for position, step in enumerate(steps, start=1):
            logger.info("[%d/%d] %s", position, total, step.name)
            step_start = time.monotonic()
            try:
                await self._execute_step(step, context)
            except (StepError, PreconditionError) as exc:
                logger.error("Step %r failed (%s): %s", step.name, exc.cause.value, exc)
                return await self._fail(
                    step, exc.cause, str(exc), context, step_results, step_start, total_start
                )
            except Exception as exc:
                logger.exception("Step %r failed unexpectedly", step.name)
                return await self._fail(
                    step,
                    FailureCause.ACTION_FAILED,
                    f"{type(exc).__name__}: {exc}",
                    context,
                    step_results,
                    step_start,
                    total_start,
                )

            latency = (time.monotonic() - step_start) * 1000
            step_results.append(
                StepResult(
                    name=step.name,
                    action=step.action.action_type.value,
                    success=True,
                    latency_ms=latency,
                )
            )
            logger.info("[%d/%d] %s done (%.0f ms)", position, total, step.name, latency)

        return RunResult.success(step_results, (time.monotonic() - total_start) * 1000)

    async def _fail(
        self,
        step: WorkflowStep,
        cause: FailureCause,
        message: str,
        context: RunContext,
        step_results: list[StepResult],
        step_start: float,
        total_start: float,
    ) -> RunResult:
        step_results.append(
            StepResult(
                name=step.name,
                action=step.action.action_type.value,
                success=False,
                error=message,
                cause=cause,
                latency_ms=(time.monotonic() - step_start) * 1000,
            )
        )

        diagnostic_path = None
        if cause != FailureCause.PRECONDITION:
            diagnostic_path = await self._capture(context.page, context.diagnostics_path)

        return RunResult.failure(
            step.name,
            cause,
            message,
            step_results=step_results,
            diagnostic_path=diagnostic_path,
            total_latency_ms=(time.monotonic() - total_start) * 1000,
        )

    async def _execute_step(self, step: WorkflowStep, context: RunContext) -> None:
        action = step.action
        page = context.page

        upload_path: Path | None = None
        if isinstance(action, SetUploadFile):
            upload_path = self._upload_path(action, context)

        element = None
        if step.locator is not None:
            element = await self._resolver.resolve(
                step.locator, page, step.timeout_ms, step_name=step.name
            )

        try:
            if isinstance(action, Navigate):
                await self._navigate(step, action, page)
            elif isinstance(action, Fill):
                value = action.value if action.value is not None else context.secret(action.secret)
                await element.fill(value, timeout=step.timeout_ms)
            elif isinstance(action, Click):
                await element.click(timeout=step.timeout_ms)
            elif isinstance(action, SetUploadFile):
                await self._upload(step, page, element, upload_path)
            else:
                raise TypeError(f"Unsupported action {action!r}")
        except PlaywrightError as exc:
            raise ActionFailedError(
                step.name, f"{action.action_type.value} failed: {exc}"
            ) from exc

        if step.postcondition is not None:
            await self._checker.check(step.postcondition, page, step.name, step.timeout_ms)

    @staticmethod
    async def _navigate(step: WorkflowStep, action: Navigate, page: Any) -> None:
        try:
            await page.goto(action.url, wait_until=action.wait_until, timeout=step.timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise PostconditionTimeoutError(
                step.name,
                f"{action.url} did not reach {action.wait_until!r} within {step.timeout_ms:.0f} ms",
            ) from exc

    @staticmethod
    async def _upload(step: WorkflowStep, page: Any, trigger: Any, path: Path) -> None:
        # Subscribe before clicking so the chooser raised by the click is not missed
        try:
            async with page.expect_file_chooser(timeout=step.timeout_ms) as chooser_info:
                await trigger.click(timeout=step.timeout_ms)
            file_chooser = await chooser_info.value
        except PlaywrightTimeoutError as exc:
            raise PostconditionTimeoutError(
                step.name, f"no file chooser appeared within {step.timeout_ms:.0f} ms"
            ) from exc
        logger.info("Uploading %s", path.name)
        await file_chooser.set_files(str(path))

    @staticmethod
    def _upload_path(action: SetUploadFile, context: RunContext) -> Path:
        raw = action.path
        if raw is None and context.resume_locator is not None:
            try:
                raw = context.resume_locator()
            except OSError as exc:
                raise ResumeNotFoundError(f"Resume lookup failed: {exc}") from exc
        if raw is None:
            raise ResumeNotFoundError("No resume file available to upload")
        path = Path(raw)
        if not path.is_file():
            raise ResumeNotFoundError(f"Resume file {str(path)!r} does not exist")
        return path
