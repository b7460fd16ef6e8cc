"""Invoke helpers — call sync or async host capabilities uniformly.

Navigators, caches, and data loaders are supplied by the host and can be
``def`` or ``async def``. Any code that calls one must handle both cases.
This module keeps the sync/async check in exactly one place.

Usage::

    from linkroute._internal.invoke import invoke

    await invoke(context.navigator.push, "/sessions")
"""

import inspect
from typing import Any


async def invoke(func: Any, *args: Any, **kwargs: Any) -> Any:
    """Call *func* and await the result if it's awaitable.

    Works with both sync and async callables::

        # sync navigator — returns immediately
        class Navigator:
            def push(self, path): ...

        # async cache — coroutine awaited automatically
        class Cache:
            async def prefetch(self, key, loader): ...
    """
    result = func(*args, **kwargs)
    if inspect.isawaitable(result):
        result = await result
    return result
