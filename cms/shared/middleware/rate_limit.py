# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Per-client sliding-window limiter for the credential endpoints."""

from __future__ import annotations

import threading
import time
from collections import deque
from collections.abc import Callable
from functools import wraps
from typing import Any

from flask import request

from cms.shared.errors import RateLimitedError
from cms.shared.logging import logger

from .client import client_address


class InMemoryRateLimiter:
    def __init__(
        self,
        limit: int,
        window_seconds: float,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._limit = max(1, int(limit))
        self._window = max(0.1, float(window_seconds))
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    @property
    def tracked_keys(self) -> int:
        return len(self._hits)

    def _sweep(self, cutoff: float) -> None:
        idle = [key for key, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for key in idle:
            del self._hits[key]

    def allow(self, key: str) -> bool:
        now = self._clock()
        cutoff = now - self._window
        with self._lock:
            # Keys with no hit inside the window are dropped once per window.
            if now - self._last_sweep >= self._window:
                self._sweep(cutoff)
                self._last_sweep = now

            hits = self._hits.setdefault(key, deque())
            while hits and hits[0] <= cutoff:
                hits.popleft()
            if len(hits) >= self._limit:
                return False
            hits.append(now)
            return True


def rate_limit(
    limit: int,
    window_seconds: float,
    *,
    enabled: bool = True,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    limiter = InMemoryRateLimiter(limit, window_seconds)

    def decorator(view: Callable[..., Any]) -> Callable[..., Any]:
        if not enabled:
            return view

        @wraps(view)
        def limited(*args: Any, **kwargs: Any) -> Any:
            if not limiter.allow(f"{request.path}|{client_address()}"):
                logger.warning(f"rate_limit: rejected {request.method} {request.path}")
                raise RateLimitedError()
            return view(*args, **kwargs)

        return limited

    return decorator


__all__ = ["InMemoryRateLimiter", "rate_limit"]
