import logging

from hydrotrack.extensions import scheduler
from hydrotrack.services.streaks import sweep_lapsed_streaks
from hydrotrack.storage import get_storage
from hydrotrack.utils import timeutils

logger = logging.getLogger(__name__)

STREAK_SWEEP_JOB_ID = "streak_lapse_sweep"


def run_streak_sweep(app):
    """Zero the streaks that missed yesterday. Runs outside any request."""
    with app.app_context():
        logger.info("Running streak lapse sweep at %s", timeutils.local_now())
        try:
            reset = sweep_lapsed_streaks(get_storage(), timeutils.local_today())
        except Exception:
            logger.exception("Streak lapse sweep failed")
            return 0
        logger.info("Streak lapse sweep reset %s streak(s)", reset)
        return reset


def register_jobs(app):
    if not app.config.get("STREAK_SWEEP_ENABLED", True):
        return
    scheduler.add_job(
        id=STREAK_SWEEP_JOB_ID,
        func=run_streak_sweep,
        args=[app],
        trigger="cron",
        hour=app.config["STREAK_SWEEP_HOUR"],
        minute=app.config["STREAK_SWEEP_MINUTE"],
        replace_existing=True,
    )
