"""
Student endpoints.

Creating students, changing a single student's mentor and the
queries over unassigned students and mentor history.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from mentorship_api.app.schemas.mentor import MentorRead
from mentorship_api.app.schemas.student import AssignMentor, StudentCreate, StudentRead
from mentorship_api.app.services.student_service import StudentService

router = APIRouter()


@router.post("/student", response_model=StudentRead)
async def create_student(student_in: StudentCreate) -> StudentRead:
    """Create a student without a mentor."""
    return await StudentService.create_student(student_in)


@router.get("/students/unassigned", response_model=List[StudentRead])
async def list_unassigned_students() -> List[StudentRead]:
    """Return all students that have no mentor."""
    return await StudentService.list_unassigned()


@router.put("/student/{student_id}/assign-mentor", response_model=StudentRead)
async def assign_mentor(student_id: int, body: AssignMentor) -> StudentRead:
    """Assign or change the mentor of one student.

    The replaced mentor, if any, is appended to ``previousMentors``.
    Mentor ``students`` lists are not touched by this endpoint.
    Returns HTTP 404 if the student or the mentor does not exist.
    """
    try:
        return await StudentService.assign_mentor(student_id, body.mentor_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/student/{student_id}/previous-mentors", response_model=List[MentorRead])
async def list_previous_mentors(student_id: int) -> List[MentorRead]:
    """Return the mentors this student had before, oldest first."""
    try:
        return await StudentService.list_previous_mentors(student_id)
    except LookupError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
