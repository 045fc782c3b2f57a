"""Unit tests for MaterialHistoryScheduler and MaterialHistoryQueue."""

import asyncio
from contextlib import asynccontextmanager
from uuid import uuid4

import pytest

from materia.domain.model.material import MaterialData
from materia.domain.service import (
    MaterialHistoryQueue,
    MaterialHistoryScheduler,
    MaterialService,
)
from materia.domain.value import EntityId, MaterialId


class RecordingHistoryService:
    """Stands in for MaterialHistoryService, recording calls."""

    def __init__(self, delay: float = 0.0, fail_for: set[MaterialId] | None = None):
        self.delay = delay
        self.fail_for = fail_for or set()
        self.created: list[MaterialId] = []

    async def create_material_history(self, material_id: MaterialId) -> None:
        await asyncio.sleep(self.delay)
        if material_id in self.fail_for:
            raise RuntimeError("snapshot failed")
        self.created.append(material_id)


def factory_for(service: RecordingHistoryService):
    @asynccontextmanager
    async def open_service():
        yield service

    return open_service


class TestMaterialHistoryScheduler:
    """Tests for the detached snapshot scheduler."""

    @pytest.mark.asyncio
    async def test_schedule_does_not_wait(self):
        """Scheduling returns before the snapshot is generated."""
        service = RecordingHistoryService(delay=0.05)
        scheduler = MaterialHistoryScheduler(service_factory=factory_for(service))
        material_id = MaterialId(uuid4())

        scheduler.schedule(material_id)

        assert service.created == []
        assert scheduler.pending == 1

        await scheduler.drain()
        assert service.created == [material_id]
        assert scheduler.pending == 0

    @pytest.mark.asyncio
    async def test_failure_does_not_affect_other_snapshots(self):
        failing = MaterialId(uuid4())
        healthy = MaterialId(uuid4())
        service = RecordingHistoryService(fail_for={failing})
        scheduler = MaterialHistoryScheduler(service_factory=factory_for(service))

        scheduler.schedule(failing)
        scheduler.schedule(healthy)
        await scheduler.drain()

        assert service.created == [healthy]

    @pytest.mark.asyncio
    async def test_drain_cancels_tasks_after_timeout(self):
        service = RecordingHistoryService(delay=10)
        scheduler = MaterialHistoryScheduler(service_factory=factory_for(service))

        scheduler.schedule(MaterialId(uuid4()))
        await scheduler.drain(timeout=0.01)

        assert service.created == []
        assert scheduler.pending == 0


class TestMaterialHistoryQueue:
    """Tests for the per-unit-of-work queue."""

    @pytest.mark.asyncio
    async def test_flush_schedules_each_material_once(self):
        service = RecordingHistoryService()
        scheduler = MaterialHistoryScheduler(service_factory=factory_for(service))
        queue = MaterialHistoryQueue(scheduler=scheduler)
        material_id = MaterialId(uuid4())

        queue.add(material_id)
        queue.add(material_id)
        queue.flush()
        await scheduler.drain()

        assert service.created == [material_id]
        assert queue.material_ids == []

    @pytest.mark.asyncio
    async def test_clear_discards_requests(self):
        service = RecordingHistoryService()
        scheduler = MaterialHistoryScheduler(service_factory=factory_for(service))
        queue = MaterialHistoryQueue(scheduler=scheduler)

        queue.add(MaterialId(uuid4()))
        queue.clear()
        queue.flush()
        await scheduler.drain()

        assert service.created == []


class TestHistoryAfterUnitOfWork:
    """Snapshots run once the request's unit of work has ended."""

    @pytest.mark.asyncio
    async def test_created_material_gets_snapshot(self, container, store):
        entity_id = EntityId(uuid4())

        async with container() as request:
            service = await request.get(MaterialService)
            material = await service.create_material(
                entity_id, MaterialData.model_validate({"name": "Oak plank"})
            )
            assert store.history == []

        scheduler = await container.get(MaterialHistoryScheduler)
        await scheduler.drain()

        assert [h.material_id for h in store.history] == [material.id]
        assert store.history[0].name == "Oak plank"

    @pytest.mark.asyncio
    async def test_failed_unit_of_work_schedules_nothing(self, container, store):
        entity_id = EntityId(uuid4())

        with pytest.raises(RuntimeError):
            async with container() as request:
                service = await request.get(MaterialService)
                await service.create_material(
                    entity_id, MaterialData.model_validate({"name": "Oak plank"})
                )
                raise RuntimeError("request failed")

        scheduler = await container.get(MaterialHistoryScheduler)
        await scheduler.drain()

        assert store.history == []
