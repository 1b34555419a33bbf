"""Celery application configuration."""

from celery import Celery

from config import settings

TIME_LIMIT_MARGIN = 30  # seconds

# Create Celery app
celery_app = Celery(
    settings.app_name.lower(),
    broker=settings.celery_broker_url,
    backend=settings.celery_result_backend,
)

# Configure Celery
celery_app.conf.update(
    # Results are handed to the persistence layer as plain JSON
    task_serializer="json",
    accept_content=["json"],
    result_serializer="json",
    timezone="UTC",
    enable_utc=True,

    # All analysis tasks go to the "scans" queue
    task_routes={
        "worker.tasks.*": {"queue": "scans"},
    },

    # Task execution settings
    task_acks_late=True,
    task_reject_on_worker_lost=True,
    worker_prefetch_multiplier=1,  # One analysis at a time per worker process

    # Hard kill well after the in-process analysis budget has expired
    task_time_limit=(
        settings.analysis_timeout + TIME_LIMIT_MARGIN
        if settings.analysis_timeout
        else None
    ),

    # Result expiration (24 hours)
    result_expires=86400,

    broker_connection_retry_on_startup=True,
)

celery_app.autodiscover_tasks(["worker"])
