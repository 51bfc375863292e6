# /club_admin/services/seed_service.py

"""
Bootstrap data for a freshly started store: the admin account and,
optionally, a sample school year so the UI has something to show.
"""

import logging
from datetime import date

from ..core.config import Settings
from .database_service import DatabaseService

logger = logging.getLogger("club_admin.seed")


def seed_admin_user(db: DatabaseService, settings: Settings) -> None:
    if db.get_user_by_username(settings.seed_admin_username) is not None:
        return
    db.add_user({
        "username": settings.seed_admin_username,
        "password": settings.seed_admin_password,
        "name": settings.seed_admin_name,
        "isAdmin": True,
    })
    logger.info("Seeded admin user '%s'", settings.seed_admin_username)


def seed_sample_school_year(db: DatabaseService) -> None:
    if db.get_all_school_years():
        return
    db.add_school_year({
        "name": "2023-2024",
        "startDate": date(2023, 9, 1),
        "endDate": date(2024, 6, 30),
        "active": True,
    })
    logger.info("Seeded sample school year 2023-2024")


def run_seed(db: DatabaseService, settings: Settings) -> None:
    seed_admin_user(db, settings)
    if settings.seed_sample_data:
        seed_sample_school_year(db)
