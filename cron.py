"""
Reminder scheduler entry point.

Run hourly from the system crontab, e.g.

    0 * * * * cd /srv/blackbelt && python cron.py

`--now` evaluates the pass as of another instant (ISO 8601), which is
handy for replaying a missed run.
"""

import argparse
import asyncio
import logging
from datetime import datetime, timezone

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.use_cases.reminders import RunScheduledPassUseCase
from src.depends import AsyncSessionLocal, engine, init_db, notifier

logger = logging.getLogger("cron")


def parse_now(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


async def run_once(now: datetime = None):
    await init_db()
    try:
        async with AsyncSessionLocal() as session:
            use_case = RunScheduledPassUseCase(SqlAlchemyUnitOfWork(session), notifier)
            return await use_case.execute(now)
    finally:
        await engine.dispose()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Run one reminder scheduler pass")
    parser.add_argument("--now", type=parse_now, default=None, help="ISO 8601 instant")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=ApplicationConfig.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    summary = asyncio.run(run_once(args.now))
    logger.info(f"Pass summary: {summary.model_dump_json()}")
    return 1 if summary.errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
