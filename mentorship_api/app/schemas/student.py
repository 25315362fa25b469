"""Pydantic schemas for students."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StudentCreate(BaseModel):
    """Schema for creating a new student.  Numeric names are stored as strings."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = Field(None, description="Display name of the student")


class StudentRead(BaseModel):
    """Schema for reading a student.

    ``mentor`` is ``None`` while the student is unassigned.
    ``previous_mentors`` is serialised as ``previousMentors`` and lists
    replaced mentors oldest first.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: Optional[str]
    mentor: Optional[int] = None
    previous_mentors: List[int] = Field(default_factory=list, alias="previousMentors")
    created_at: str


class AssignMentor(BaseModel):
    """Body of ``PUT /student/{student_id}/assign-mentor``."""

    model_config = ConfigDict(populate_by_name=True)

    mentor_id: int = Field(..., alias="mentorId")
