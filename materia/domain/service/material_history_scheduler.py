"""Background generation of material history snapshots.

Snapshots are a best-effort side effect of mutations: they run detached from
the triggering request, each in its own unit of work, and their failures
are logged and never reach the caller.
"""

import asyncio
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Optional

import logfire

from materia.domain.value import MaterialId

from .material_history_service import MaterialHistoryService

# Opens a unit of work and yields a history service bound to it
HistoryServiceFactory = Callable[[], AbstractAsyncContextManager[MaterialHistoryService]]


class MaterialHistoryScheduler:
    """Runs snapshot generation as detached asyncio tasks."""

    def __init__(self, service_factory: HistoryServiceFactory) -> None:
        """Initialize scheduler.

        Args:
            service_factory: Factory opening a unit of work per snapshot
        """
        self.service_factory = service_factory
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def pending(self) -> int:
        """Number of snapshot tasks still running."""
        return len(self._tasks)

    def schedule(self, material_id: MaterialId) -> None:
        """Start generating a snapshot without waiting for it.

        Must be called from a running event loop.

        Args:
            material_id: Material to snapshot
        """
        task = asyncio.get_running_loop().create_task(
            self._generate(material_id), name=f"material-history-{material_id}"
        )
        # Keep a strong reference until the task finishes
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logfire.info("Material history scheduled", material_id=str(material_id))

    async def _generate(self, material_id: MaterialId) -> None:
        try:
            async with self.service_factory() as service:
                await service.create_material_history(material_id)
        except Exception as e:
            logfire.exception(
                "Material history generation failed",
                material_id=str(material_id),
                error=str(e),
            )

    async def drain(self, timeout: Optional[float] = None) -> None:
        """Wait for running snapshot tasks.

        Tasks still running after the timeout are cancelled.

        Args:
            timeout: Seconds to wait, None to wait indefinitely
        """
        if not self._tasks:
            return

        with logfire.span("material_history_scheduler.drain", pending=len(self._tasks)):
            _, still_running = await asyncio.wait(set(self._tasks), timeout=timeout)
            for task in still_running:
                task.cancel()
            if still_running:
                logfire.warn(
                    "Material history tasks cancelled", count=len(still_running)
                )
                await asyncio.gather(*still_running, return_exceptions=True)


class MaterialHistoryQueue:
    """Snapshots requested during one unit of work.

    Snapshot tasks read committed state, so requests are held here and only
    submitted to the scheduler once the unit of work has committed. They
    are discarded on rollback.
    """

    def __init__(self, scheduler: MaterialHistoryScheduler) -> None:
        self.scheduler = scheduler
        self._material_ids: list[MaterialId] = []

    @property
    def material_ids(self) -> list[MaterialId]:
        """Materials awaiting a snapshot, in request order."""
        return list(self._material_ids)

    def add(self, material_id: MaterialId) -> None:
        if material_id not in self._material_ids:
            self._material_ids.append(material_id)

    def flush(self) -> None:
        """Submit every requested snapshot to the scheduler."""
        material_ids, self._material_ids = self._material_ids, []
        for material_id in material_ids:
            self.scheduler.schedule(material_id)

    def clear(self) -> None:
        if self._material_ids:
            logfire.info("Material history requests discarded", count=len(self._material_ids))
        self._material_ids = []
