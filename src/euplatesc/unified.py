import asyncio
import functools
import inspect
from typing import Any, Callable

SYNC_SUFFIX = "_sync"


class AsyncSyncMixin:
    """
    Expose every public coroutine method `name` as a blocking `name_sync`.

    The coroutine runs to completion on a fresh event loop, so `*_sync` methods
    must not be called from inside a running loop.
    """

    def __getattr__(self, name: str) -> Callable[..., Any]:
        if not name.endswith(SYNC_SUFFIX) or name.startswith("_"):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        target = getattr(self, name[: -len(SYNC_SUFFIX)], None)
        if target is None or not inspect.iscoroutinefunction(target):
            raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

        @functools.wraps(target)
        def runner(*args, **kwargs):
            try:
                asyncio.get_running_loop()
            except RuntimeError:
                return asyncio.run(target(*args, **kwargs))
            raise RuntimeError(f"{name}() cannot be called from a running event loop; await {target.__name__}() instead")

        return runner
