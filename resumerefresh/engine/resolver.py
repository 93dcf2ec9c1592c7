"""Locator strategy resolution against a live Playwright page."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Awaitable, Callable

from resumerefresh import config
from resumerefresh.core.errors import ElementNotFoundError
from resumerefresh.core.types import LocatorSpec, LocatorStrategy, StrategyKind

logger = logging.getLogger(__name__)

ElementPredicate = Callable[[Any], Awaitable[bool]]


class LocatorResolver:
    """
    Resolves a LocatorSpec to exactly one visible element.

    Strategies are queried in declared order on every polling pass and the
    first one producing a qualifying element wins; the remaining strategies
    are not queried. ``timeout_ms`` is a single budget shared by all passes,
    so an unresolvable spec costs at most ``timeout_ms`` plus one pass.

    A strategy qualifies as soon as it has one visible match (optionally
    filtered by an async ``predicate``); the first such match is returned.
    ``first_only`` stops the scan at that match, otherwise several matches are
    logged as ambiguous. A strategy whose query raises is a miss.
    """

    def __init__(self, poll_interval: float = config.POLL_INTERVAL_S) -> None:
        self.poll_interval = poll_interval

    async def resolve(
        self,
        spec: LocatorSpec,
        page: Any,
        timeout_ms: float,
        predicate: ElementPredicate | None = None,
        step_name: str = "",
    ) -> Any:
        deadline = time.monotonic() + max(timeout_ms, 0) / 1000
        passes = 0
        while True:
            passes += 1
            for strategy in spec.strategies:
                element = await self._try_strategy(page, strategy, predicate, spec.target)
                if element is not None:
                    logger.debug(
                        "Resolved %s via %s (pass %d)", spec.target, strategy.describe(), passes
                    )
                    return element

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                break
            await asyncio.sleep(min(self.poll_interval, remaining))

        tried = ", ".join(s.describe() for s in spec.strategies)
        raise ElementNotFoundError(
            step_name or spec.target,
            f"{spec.target} not found within {timeout_ms:.0f} ms (tried {tried})",
        )

    async def _try_strategy(
        self,
        page: Any,
        strategy: LocatorStrategy,
        predicate: ElementPredicate | None,
        target: str,
    ) -> Any | None:
        try:
            matches = await self._query(page, strategy, predicate)
        except Exception as exc:
            logger.debug("Strategy %s for %s failed: %s", strategy.describe(), target, exc)
            return None

        if not matches:
            return None
        if len(matches) > 1:
            logger.warning(
                "Strategy %s for %s is ambiguous (%d visible matches), using the first",
                strategy.describe(),
                target,
                len(matches),
            )
        return matches[0]

    @staticmethod
    async def _query(
        page: Any, strategy: LocatorStrategy, predicate: ElementPredicate | None
    ) -> list[Any]:
        locator = build_locator(page, strategy)
        count = await locator.count()
        matches: list[Any] = []
        for i in range(count):
            candidate = locator.nth(i)
            if not await candidate.is_visible():
                continue
            if predicate is not None and not await predicate(candidate):
                continue
            matches.append(candidate)
            if strategy.first_only:
                break
        return matches


def build_locator(page: Any, strategy: LocatorStrategy) -> Any:
    """Translate a strategy into a Playwright locator (no I/O)."""
    kind = strategy.kind
    if kind == StrategyKind.CSS:
        return page.locator(strategy.value)
    if kind == StrategyKind.XPATH:
        value = strategy.value
        if not value.startswith("xpath="):
            value = "xpath=" + value
        return page.locator(value)
    if kind == StrategyKind.ROLE:
        if strategy.name:
            return page.get_by_role(strategy.value, name=strategy.name)
        return page.get_by_role(strategy.value)
    if kind == StrategyKind.TEXT:
        return page.get_by_text(strategy.value)
    if kind == StrategyKind.PLACEHOLDER:
        return page.get_by_placeholder(strategy.value)
    raise ValueError(f"Unknown strategy kind {kind!r}")
