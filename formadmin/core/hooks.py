# -*- coding: utf-8 -*-
"""
hooks

Named hook spots that models and forms expose to their collaborators.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Awaitable, Callable

HookCallback = Callable[..., Awaitable[Any] | Any]

logger = logging.getLogger(__name__)


class HookRegistry:
    """Keep callbacks per hook spot and invoke them in registration order."""

    def __init__(self) -> None:
        """Start with no callbacks registered."""

        self._hooks: dict[str, list[HookCallback]] = {}

    def add_hook(self, spot: str, callback: HookCallback) -> None:
        """Register ``callback`` for ``spot``."""

        self._hooks.setdefault(spot, []).append(callback)
        logger.debug("Hook %r registered on spot %s", callback, spot)

    def remove_hook(self, spot: str, callback: HookCallback) -> None:
        """Remove ``callback`` from ``spot`` if it is registered."""

        callbacks = self._hooks.get(spot, [])
        if callback in callbacks:
            callbacks.remove(callback)

    def has_hook(self, spot: str) -> bool:
        """Return ``True`` when at least one callback listens on ``spot``."""

        return bool(self._hooks.get(spot))

    def count(self, spot: str) -> int:
        """Return the number of callbacks registered for ``spot``."""

        return len(self._hooks.get(spot, []))

    def fire(self, spot: str, *args: Any) -> list[Any]:
        """Invoke synchronous callbacks for ``spot`` and return their results.

        Coroutine callbacks cannot run here; use :meth:`fire_async` for spots
        that accept them.
        """

        results: list[Any] = []
        for callback in list(self._hooks.get(spot, [])):
            result = callback(*args)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise TypeError(
                    f"Hook spot '{spot}' is synchronous; {callback!r} returned an awaitable"
                )
            results.append(result)
        return results

    async def fire_async(self, spot: str, *args: Any) -> list[Any]:
        """Invoke callbacks for ``spot`` awaiting coroutine results in order."""

        results: list[Any] = []
        for callback in list(self._hooks.get(spot, [])):
            result = callback(*args)
            if inspect.isawaitable(result):
                result = await result
            results.append(result)
        return results


__all__ = ["HookCallback", "HookRegistry"]

# The End
