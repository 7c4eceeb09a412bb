"""Wall-clock deadline for an arbitrary awaitable."""

import asyncio
import logging
from typing import Awaitable, Optional, Set, TypeVar

from app.services.errors import DeadlineExceeded

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Tasks abandoned at their deadline. Holding a reference keeps them alive
# until their own cleanup has finished.
_orphaned_tasks: Set["asyncio.Task"] = set()


def _reap_orphan(task: "asyncio.Task", log: logging.Logger) -> None:
    _orphaned_tasks.discard(task)
    if task.cancelled():
        log.debug("Abandoned operation finished cancelling")
        return
    exc = task.exception()
    if exc is not None:
        log.warning("Abandoned operation failed after its deadline: %s", exc)


async def race_with_deadline(
    operation: Awaitable[T],
    budget_ms: int,
    *,
    log: Optional[logging.Logger] = None,
) -> T:
    """Await *operation* for at most *budget_ms* milliseconds.

    If the operation settles first, its result is returned or its exception
    re-raised. If the budget runs out first, :class:`DeadlineExceeded` is
    raised straight away: the operation is asked to cancel but is not
    awaited, so its cleanup (e.g. closing a browser) runs in the background
    while the caller responds.

    Raises:
        ValueError: if *budget_ms* is not positive.
        DeadlineExceeded: if the budget elapsed first.
    """
    log = log or logger
    if budget_ms <= 0:
        if asyncio.iscoroutine(operation):
            operation.close()
        raise ValueError("budget_ms must be positive")

    task = asyncio.ensure_future(operation)
    try:
        done, _ = await asyncio.wait({task}, timeout=budget_ms / 1000)
    except asyncio.CancelledError:
        # The caller itself was cancelled; take the operation down with it.
        task.cancel()
        raise

    if task in done:
        return task.result()

    log.warning("Operation exceeded its %d ms budget; abandoning it", budget_ms)
    _orphaned_tasks.add(task)
    task.add_done_callback(lambda t: _reap_orphan(t, log))
    task.cancel()
    raise DeadlineExceeded(budget_ms)
