"""
Seed sample doctors for local development.

Usage:
    python -m vaidya.scripts.seed_doctors [--create-tables]
"""

import argparse
import asyncio
import logging
from datetime import time

from vaidya.database.async_db import dispose_engine, get_async_db_context, init_models
from vaidya.domains.scheduling.domain.entities.doctor import Doctor
from vaidya.domains.scheduling.infrastructure.repositories.doctor_repository import (
    SQLAlchemyDoctorRepository,
)

logger = logging.getLogger(__name__)

SAMPLE_DOCTORS = [
    Doctor(
        full_name="Dr. Asha Rao",
        email="asha.rao@vaidya.clinic",
        specialization="Cardiology",
        qualification="MBBS, MD",
        experience=12,
        phone_number="9845012345",
        gender="Female",
        clinic_name="Vaidya Heart Care",
        open_time=time(9, 0),
        close_time=time(17, 0),
    ),
    Doctor(
        full_name="Dr. Vikram Shetty",
        email="vikram.shetty@vaidya.clinic",
        specialization="Orthopedics",
        qualification="MBBS, MS (Ortho)",
        experience=8,
        phone_number="9880098765",
        gender="Male",
        clinic_name="Vaidya Bone & Joint",
        open_time=time(10, 0),
        close_time=time(18, 0),
    ),
    Doctor(
        full_name="Dr. Meera Iyer",
        email="meera.iyer@vaidya.clinic",
        specialization="Pediatrics",
        qualification="MBBS, DCH",
        experience=15,
        phone_number="9731122334",
        gender="Female",
        clinic_name="Vaidya Child Clinic",
        open_time=time(8, 30),
        close_time=time(14, 30),
    ),
]


async def seed(create_tables: bool = False) -> int:
    """Insert the sample doctors and return how many were written."""
    if create_tables:
        await init_models()

    count = 0
    async with get_async_db_context() as session:
        repository = SQLAlchemyDoctorRepository(session)
        for doctor in SAMPLE_DOCTORS:
            saved = await repository.save(doctor)
            logger.info(f"Seeded doctor {saved.id}: {saved.full_name}")
            count += 1

    await dispose_engine()
    return count


def main() -> None:
    parser = argparse.ArgumentParser(description="Seed sample doctors")
    parser.add_argument("--create-tables", action="store_true", help="Create tables before seeding")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    count = asyncio.run(seed(create_tables=args.create_tables))
    logger.info(f"Seeded {count} doctors")


if __name__ == "__main__":
    main()
