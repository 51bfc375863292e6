# /club_admin/models/dashboard_model.py

# --- Core Imports ---
from typing import Optional

from pydantic import BaseModel, Field

from .school_year_model import SchoolYear

# --- Model Definition ---

class DashboardSummary(BaseModel):
    """
    Defines the data contract for the response of the dashboard summary endpoint.
    It feeds the stat cards on the front-end's home page.
    """

    activeSchoolYear: Optional[SchoolYear] = Field(
        default=None,
        description="The first school year flagged active, or null when none is.",
    )

    activeCourseCount: int = Field(
        ...,
        description="Active courses belonging to the active school year.",
        examples=[6],
    )

    classCount: int = Field(..., examples=[14])

    studentCount: int = Field(
        ...,
        description="Every student on record, enrolled or not.",
        examples=[112],
    )

    activeEnrollmentCount: int = Field(..., examples=[140])
