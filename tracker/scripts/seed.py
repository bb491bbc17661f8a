"""
Seed lookup rows and default departments.

Usage:
    python -m tracker.scripts.seed

LogType / LogMethod rows are created with the ids of the LogType / LogMethod
enums so audit rows written by the API resolve to the right labels.
Re-running is safe: every row is upserted by its unique column.
"""

import asyncio
import logging

from prisma import Prisma

from tracker.config.logging_config import setup_logging
from tracker.config.settings import Config
from tracker.domain.enums import LogMethod, LogType

logger = logging.getLogger(__name__)

DEPARTMENTS = [
    {"description": "Human Resource", "code": "HR"},
    {"description": "Quality Management", "code": "QM"},
    {"description": "Information Technology", "code": "IT"},
    {"description": "Marketing", "code": "MRKT"},
    {"description": "Accounting", "code": "ACNT"},
    {"description": "Ancillary", "code": "ANC"},
    {"description": "Nursing Services Department", "code": "NSD"},
    {"description": "Supply Chain", "code": "SC"},
    {"description": "Support Services", "code": "SSD"},
    {"description": "Customer Experience", "code": "CED"},
    {"description": "Executive", "code": "EXEC"},
]


async def seed_log_types_and_methods(prisma: Prisma) -> None:
    for log_type in LogType:
        name = log_type.name.lower()
        await prisma.logtype.upsert(
            where={"type": name},
            data={"create": {"id": log_type.value, "type": name}, "update": {}},
        )
    logger.info("Log types seeded.")

    for log_method in LogMethod:
        name = log_method.name.lower()
        await prisma.logmethod.upsert(
            where={"method": name},
            data={"create": {"id": log_method.value, "method": name}, "update": {}},
        )
    logger.info("Log methods seeded.")


async def seed_departments(prisma: Prisma) -> None:
    for department in DEPARTMENTS:
        await prisma.department.upsert(
            where={"code": department["code"]},
            data={"create": department, "update": {}},
        )
    logger.info("Departments seeded.")


async def main() -> None:
    setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)
    prisma = Prisma()
    await prisma.connect()
    try:
        await seed_log_types_and_methods(prisma)
        await seed_departments(prisma)
    finally:
        await prisma.disconnect()


if __name__ == "__main__":
    asyncio.run(main())
