from __future__ import annotations

import logging

from apscheduler.schedulers.blocking import BlockingScheduler
from apscheduler.triggers.cron import CronTrigger

from pdf_indexer.orchestrator import IngestionOrchestrator

log = logging.getLogger("pdf_indexer.scheduler")

INGEST_JOB_ID = "ingest"


def build_scheduler(orchestrator: IngestionOrchestrator, cron: str = "0 */12 * * *") -> BlockingScheduler:
    """
    Scheduler firing orchestrator.run on a crontab expression.

    max_instances=1 keeps the scheduler from overlapping its own runs; the
    orchestrator still guards against manual triggers racing a scheduled one.
    """
    scheduler = BlockingScheduler()
    scheduler.add_job(
        orchestrator.run,
        trigger=CronTrigger.from_crontab(cron),
        id=INGEST_JOB_ID,
        name="pdf ingestion",
        max_instances=1,
        coalesce=True,
        replace_existing=True,
    )
    log.info("Scheduled ingestion with cron '%s'", cron)
    return scheduler
