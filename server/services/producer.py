"""Simulated producer that replays the dataset into the store"""
import asyncio
from typing import Optional, Sequence

from config.logger import logger
from models.telemetry import Reading
from services.storage import TelemetryStore


class SimulatedProducer:
    """
    Plays back a preloaded dataset into a TelemetryStore at a fixed cadence,
    wrapping around at the end.

    Dataset entries are trusted and appended without validation; only
    external submissions go through the validator.
    """

    def __init__(self, store: TelemetryStore, dataset: Sequence[Reading], interval_seconds: float = 5.0):
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be > 0")
        self.store = store
        self.dataset = tuple(dataset)
        self.interval_seconds = interval_seconds
        self.ticks = 0
        self._cursor = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def seed(self):
        """Deliver the first record immediately so latest() works before the first tick"""
        if not self.dataset:
            logger.info("Dataset is empty, producer will stay idle")
            return
        self.store.append(self.dataset[0])
        self._cursor = 1 % len(self.dataset)
        logger.info("Seeded telemetry store with first dataset record")

    def tick(self):
        """Append the record under the cursor and advance it"""
        if not self.dataset:
            return
        self.store.append(self.dataset[self._cursor])
        logger.debug(f"Producer delivered dataset record {self._cursor}")
        self._cursor = (self._cursor + 1) % len(self.dataset)
        self.ticks += 1

    async def _run(self):
        try:
            while True:
                await asyncio.sleep(self.interval_seconds)
                self.tick()
        except asyncio.CancelledError:
            logger.info(f"Producer stopped after {self.ticks} ticks")
            raise

    def start(self):
        """Schedule the recurring playback task on the running event loop"""
        if self.running:
            return
        self._task = asyncio.create_task(self._run())
        logger.info(f"Producer started (interval {self.interval_seconds}s, {len(self.dataset)} records)")

    async def stop(self):
        """Cancel future ticks and wait for the task to finish"""
        task = self._task
        if task is None:
            return
        self._task = None
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass
