"""
Mentor endpoints.

Creating mentors, bulk‑assigning unassigned students to a mentor and
listing a mentor's current students.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from mentorship_api.app.schemas.mentor import AssignStudents, MentorCreate, MentorRead
from mentorship_api.app.schemas.student import StudentRead
from mentorship_api.app.services.mentor_service import MentorService
from mentorship_api.app.services.student_service import StudentService

router = APIRouter()


@router.post("/mentor", response_model=MentorRead)
async def create_mentor(mentor_in: MentorCreate) -> MentorRead:
    """Create a mentor with an empty student list."""
    return await MentorService.create_mentor(mentor_in)


@router.put("/mentor/{mentor_id}/assign", response_model=MentorRead)
async def assign_students(mentor_id: int, body: AssignStudents) -> MentorRead:
    """Assign a group of unassigned students to a mentor.

    Returns HTTP 404 if the mentor does not exist and HTTP 400 if any
    of the students already has a mentor or does not exist.  In both
    cases nothing is changed.
    """
    try:
        return await MentorService.assign_students(mentor_id, body.student_ids)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/mentor/{mentor_id}/students", response_model=List[StudentRead])
async def list_mentor_students(mentor_id: int) -> List[StudentRead]:
    # Unknown mentors yield an empty list rather than 404.
    return await StudentService.list_for_mentor(mentor_id)
