# /club_admin/services/dashboard_service.py

# --- Core Imports ---
from ..models.dashboard_model import DashboardSummary
from .database_service import DatabaseService

# --- Core Public Function ---

def get_summary_data(db: DatabaseService) -> DashboardSummary:
    """
    Calculates the dashboard summary statistics from the facade.

    Several school years may be active at once; the first one in insertion
    order is reported, matching what the front-end shows.
    """
    active_years = db.get_active_school_years()
    active_year = active_years[0] if active_years else None

    active_course_count = 0
    if active_year is not None:
        active_course_count = sum(1 for course in db.get_courses(school_year_id=active_year.id) if course.active)

    return DashboardSummary(
        activeSchoolYear=active_year,
        activeCourseCount=active_course_count,
        classCount=len(db.get_classes()),
        studentCount=len(db.get_all_students()),
        activeEnrollmentCount=db.count_active_enrollments(),
    )
