"""Browser lifecycle around the step executor, one isolated context per run."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Sequence

from playwright.async_api import async_playwright

from resumerefresh import config
from resumerefresh.core.types import Credentials, RunContext, RunResult, WorkflowStep
from resumerefresh.engine.executor import StepExecutor
from resumerefresh.inputs.resume import resume_locator
from resumerefresh.workflows.naukri import STEPS

logger = logging.getLogger(__name__)


def diagnostics_path_for(base: str, index: int, total: int) -> str:
    """Suffix the screenshot path with the run number when runs share a process."""
    if total <= 1:
        return base
    path = Path(base)
    return str(path.with_name(f"{path.stem}-{index + 1}{path.suffix}"))


async def run_account(
    browser: Any,
    credentials: Credentials,
    *,
    steps: Sequence[WorkflowStep] = STEPS,
    assets_dir: str = config.DEFAULT_ASSETS_DIR,
    screenshot_path: str = config.DEFAULT_SCREENSHOT_PATH,
    executor: StepExecutor | None = None,
) -> RunResult:
    """Run the workflow in a fresh browser context owned by this run alone."""
    browser_context = await browser.new_context()
    try:
        page = await browser_context.new_page()
        context = RunContext(
            page=page,
            credentials=credentials,
            resume_locator=resume_locator(assets_dir),
            diagnostics_path=screenshot_path,
        )
        logger.info("Run %s started", context.run_id)
        result = await (executor or StepExecutor()).run(steps, context)
        logger.info("Run %s: %s", context.run_id, result.summary())
        return result
    finally:
        await browser_context.close()


async def run_accounts(
    accounts: Sequence[Credentials],
    *,
    steps: Sequence[WorkflowStep] = STEPS,
    headless: bool = config.HEADLESS,
    assets_dir: str = config.DEFAULT_ASSETS_DIR,
    screenshot_path: str = config.DEFAULT_SCREENSHOT_PATH,
) -> list[RunResult]:
    """Run every account concurrently in one browser; results keep input order."""
    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(headless=headless)
        try:
            results = await asyncio.gather(
                *(
                    run_account(
                        browser,
                        credentials,
                        steps=steps,
                        assets_dir=assets_dir,
                        screenshot_path=diagnostics_path_for(screenshot_path, i, len(accounts)),
                    )
                    for i, credentials in enumerate(accounts)
                )
            )
        finally:
            await browser.close()
    return list(results)


async def run_workflow(credentials: Credentials, **kwargs: Any) -> RunResult:
    """Single-account convenience wrapper around run_accounts()."""
    results = await run_accounts([credentials], **kwargs)
    return results[0]
