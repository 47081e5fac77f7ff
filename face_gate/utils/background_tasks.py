"""Detached (fire-and-forget) asyncio tasks.

Tasks spawned here are never awaited by the caller. Each one runs inside a
catch-and-log boundary so its failure cannot reach the code that spawned it.
"""
import asyncio
import logging
from typing import Awaitable, Optional, Set

logger = logging.getLogger(__name__)

# Strong references to running tasks; the event loop only keeps weak ones
_pending_tasks: Set["asyncio.Task[None]"] = set()


async def _run_guarded(awaitable: Awaitable, name: str) -> None:
    try:
        await awaitable
    except asyncio.CancelledError:
        logger.info(f"Background task '{name}' cancelled")
        raise
    except Exception as e:
        logger.error(f"Background task '{name}' failed: {e}", exc_info=True)


def spawn_detached(awaitable: Awaitable, name: Optional[str] = None) -> "asyncio.Task[None]":
    """
    Schedule an awaitable on the running loop without joining it.

    Args:
        awaitable: Coroutine to run in the background
        name: Label used in logs

    Returns:
        The created task (callers normally ignore it)
    """
    task_name = name or getattr(awaitable, "__qualname__", "detached")
    task = asyncio.create_task(_run_guarded(awaitable, task_name), name=task_name)
    _pending_tasks.add(task)
    task.add_done_callback(_pending_tasks.discard)
    return task


def pending_task_count() -> int:
    """Number of detached tasks still running."""
    return len(_pending_tasks)


async def wait_for_pending(timeout: Optional[float] = None) -> None:
    """Wait for currently running detached tasks (used at shutdown and in tests)."""
    loop = asyncio.get_running_loop()
    tasks = {task for task in _pending_tasks if task.get_loop() is loop}
    if not tasks:
        return
    await asyncio.wait(tasks, timeout=timeout)
