"""Post-condition checks evaluated after a step's action."""

from __future__ import annotations

import asyncio
import logging
import re
import time
from typing import Any, Iterable

from resumerefresh import config
from resumerefresh.core.errors import ElementNotFoundError, PostconditionTimeoutError
from resumerefresh.core.types import (
    ElementContainsAllOf,
    ElementVisible,
    PostCondition,
    URLMatches,
)
from resumerefresh.engine.resolver import LocatorResolver

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def contains_all(content: str, fragments: Iterable[str]) -> bool:
    """True when every fragment occurs in content (whitespace-insensitive)."""
    haystack = _WHITESPACE_RE.sub(" ", content or "").strip()
    return all(_WHITESPACE_RE.sub(" ", f).strip() in haystack for f in fragments)


async def wait_for_url(
    page: Any,
    pattern: str,
    timeout_ms: float,
    step_name: str,
    poll_interval: float = config.POLL_INTERVAL_S,
) -> str:
    """Poll page.url until it matches pattern; return the matching URL."""
    regex = re.compile(pattern)
    deadline = time.monotonic() + timeout_ms / 1000
    while True:
        url = page.url or ""
        if regex.search(url):
            return url
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise PostconditionTimeoutError(
                step_name,
                f"URL {url!r} did not match /{pattern}/ within {timeout_ms:.0f} ms",
            )
        await asyncio.sleep(min(poll_interval, remaining))


class PostConditionChecker:
    """Waits for the observable effect a step declares."""

    def __init__(self, resolver: LocatorResolver) -> None:
        self._resolver = resolver

    async def check(
        self,
        condition: PostCondition,
        page: Any,
        step_name: str,
        default_timeout_ms: float,
    ) -> None:
        timeout_ms = condition.timeout_ms if condition.timeout_ms is not None else default_timeout_ms

        if isinstance(condition, URLMatches):
            url = await wait_for_url(
                page, condition.pattern, timeout_ms, step_name, self._resolver.poll_interval
            )
            logger.debug("%s: URL matched %s", step_name, url)
            return

        if isinstance(condition, ElementVisible):
            # A target that never shows up is reported as not found
            await self._resolver.resolve(condition.spec, page, timeout_ms, step_name=step_name)
            return

        if isinstance(condition, ElementContainsAllOf):
            texts = condition.texts

            async def has_texts(element: Any) -> bool:
                return contains_all(await element.inner_text(), texts)

            try:
                await self._resolver.resolve(condition.spec, page, timeout_ms, predicate=has_texts)
            except ElementNotFoundError as exc:
                raise PostconditionTimeoutError(
                    step_name,
                    f"no visible {condition.spec.target} containing {list(texts)!r}",
                ) from exc
            return

        raise TypeError(f"Unsupported post-condition {condition!r}")
