# /club_admin/models/student_model.py

# --- Core Imports ---
from datetime import datetime
from typing import ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .common import PartialModel

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains fields common to create and read operations.
    """
    firstName: str = Field(..., min_length=1)
    lastName: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1, description="Primary contact number.")
    email: Optional[str] = Field(default=None)
    guardianName: Optional[str] = Field(default=None, description="Parent or guardian, for minors.")

class StudentCreate(StudentBase):
    """The model used for creating a new student. Inherits all fields from the base."""
    pass

class StudentUpdate(PartialModel):
    """
    The model for updating a student. All fields are optional to allow for
    partial updates; only email and guardianName may be cleared.
    """
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"email", "guardianName"})

    firstName: Optional[str] = Field(default=None, min_length=1)
    lastName: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = Field(default=None)
    guardianName: Optional[str] = Field(default=None)

class Student(StudentBase):
    """
    The full representation of a Student resource, as it is stored and
    returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="The server-assigned identifier for the student.")
    createdAt: datetime

class StudentImportRowError(BaseModel):
    row: int = Field(..., description="1-based data row number in the uploaded file.")
    errors: List[dict]

class StudentImportResponse(BaseModel):
    message: str
    count: int
    students: List[Student]

class StudentImportErrorResponse(BaseModel):
    """Body of a rejected import. No student from the file was created."""
    message: str
    errors: List[StudentImportRowError]
    totalErrors: int
    totalRecords: int
