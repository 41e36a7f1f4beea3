"""Application lifespan management"""
from contextlib import asynccontextmanager

from config.logger import logger
from core.exceptions import DatasetLoadError
from services.dataset import load_dataset
from services.producer import SimulatedProducer
from services.storage import TelemetryStore


@asynccontextmanager
async def lifespan(app):
    """
    Manage application lifespan (startup and shutdown).

    Loads the dataset, creates the telemetry store, seeds it and starts the
    simulated producer. An unusable dataset aborts startup.
    """
    settings = app.state.settings

    # Startup
    logger.info("Starting application...")
    try:
        dataset = load_dataset(settings.dataset_path)
    except DatasetLoadError as e:
        logger.error(f"Failed to load dataset: {e}")
        raise

    store = TelemetryStore(capacity=settings.history_capacity)
    producer = SimulatedProducer(store, dataset, interval_seconds=settings.sim_interval_seconds)
    producer.seed()
    producer.start()

    app.state.store = store
    app.state.producer = producer
    logger.info("Application started successfully")

    yield  # Application is running

    # Shutdown
    logger.info("Shutting down application...")
    await producer.stop()
    logger.info("Application shut down successfully")
