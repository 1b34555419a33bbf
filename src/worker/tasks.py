"""Celery tasks for running page analyses."""

from celery.utils.log import get_task_logger

from core.errors import AnalysisError
from core.pipeline import run_analysis
from worker.celery_app import celery_app

logger = get_task_logger(__name__)


@celery_app.task(bind=True, name="worker.tasks.analyze_page")
def analyze_page(self, url: str) -> dict:
    """
    Analyze a single page and return the JSON-serialized result.

    Validation, fetch and timeout errors are reported in the payload rather
    than raised, so callers always receive a result to store. Failed fetches
    are not retried here; callers may queue the task again.
    """
    logger.info(f"Running page analysis for {url}")

    try:
        result = run_analysis(url)
    except AnalysisError as e:
        logger.error(f"Analysis of {url} failed: {e}")
        return {
            "url": url,
            "success": False,
            "error": str(e),
            "result": None,
        }

    logger.info(f"Analysis of {url} finished with score {result.scores.overall}")

    return {
        "url": url,
        "success": True,
        "error": None,
        "result": result.model_dump(mode="json"),
    }
