"""
Pydantic schemas for mentors.

A mentor has a name and an ordered list of the ids of the students
assigned to it through the bulk‑assign endpoint.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MentorCreate(BaseModel):
    """Schema for creating a new mentor.

    Numeric names are stored as their string form.
    """

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: Optional[str] = Field(None, description="Display name of the mentor")


class MentorRead(BaseModel):
    """Schema for reading a mentor."""

    id: int
    name: Optional[str]
    students: List[int] = Field(default_factory=list, description="Assigned student ids in assignment order")
    created_at: str


class AssignStudents(BaseModel):
    """Body of ``PUT /mentor/{mentor_id}/assign``."""

    model_config = ConfigDict(populate_by_name=True)

    student_ids: List[int] = Field(..., alias="studentIds", description="Ids of currently unassigned students")
