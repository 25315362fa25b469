"""
Service layer for students.

Besides creation, this covers the single‑student mentor change and
the read‑only queries over assignment state.  Changing a student's
mentor records the replaced mentor in ``previous_mentors`` but leaves
the ``students`` lists of both mentors as they are; only the bulk
assignment in ``MentorService`` maintains those lists.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import List

from mentorship_api.app.core.db import get_connection, is_storable_id, transaction
from mentorship_api.app.schemas.mentor import MentorRead
from mentorship_api.app.schemas.student import StudentCreate, StudentRead
from mentorship_api.app.services.mentor_service import MentorService

logger = logging.getLogger(__name__)


class StudentService:
    """Service class for managing students."""

    @classmethod
    async def create_student(cls, data: StudentCreate) -> StudentRead:
        """Insert a new unassigned student and return it."""
        conn = get_connection()
        cursor = conn.execute(
            "INSERT INTO students (name, mentor_id, previous_mentors) VALUES (?, NULL, ?)",
            (data.name, json.dumps([])),
        )
        student_id = cursor.lastrowid
        logger.info("Created student %s", student_id)
        row = conn.execute("SELECT * FROM students WHERE id = ?", (student_id,)).fetchone()
        return cls._row_to_student_read(row)

    @classmethod
    async def list_unassigned(cls) -> List[StudentRead]:
        """Return every student without a mentor, oldest first."""
        conn = get_connection()
        rows = conn.execute(
            "SELECT * FROM students WHERE mentor_id IS NULL ORDER BY id"
        ).fetchall()
        return [cls._row_to_student_read(row) for row in rows]

    @classmethod
    async def list_for_mentor(cls, mentor_id: int) -> List[StudentRead]:
        """Return the students whose current mentor is ``mentor_id``.

        The mentor itself is not looked up; an unknown id simply has
        no students.
        """
        if not is_storable_id(mentor_id):
            return []
        conn = get_connection()
        rows = conn.execute(
            "SELECT * FROM students WHERE mentor_id = ? ORDER BY id",
            (mentor_id,),
        ).fetchall()
        return [cls._row_to_student_read(row) for row in rows]

    @classmethod
    async def assign_mentor(cls, student_id: int, mentor_id: int) -> StudentRead:
        """Assign a mentor to a student or replace the current one.

        Raises ``LookupError`` if either record is missing.  A replaced
        mentor is appended to ``previous_mentors``; a student without a
        mentor gets no history entry.
        """
        if not is_storable_id(student_id):
            raise LookupError("Student not found")
        with transaction() as cursor:
            row = cursor.execute("SELECT * FROM students WHERE id = ?", (student_id,)).fetchone()
            if not row:
                raise LookupError("Student not found")
            mentor = None
            if is_storable_id(mentor_id):
                mentor = cursor.execute("SELECT id FROM mentors WHERE id = ?", (mentor_id,)).fetchone()
            if not mentor:
                raise LookupError("Mentor not found")

            previous_mentors = json.loads(row["previous_mentors"] or "[]")
            old_mentor_id = row["mentor_id"]
            if old_mentor_id is not None:
                previous_mentors.append(old_mentor_id)
            cursor.execute(
                "UPDATE students SET mentor_id = ?, previous_mentors = ? WHERE id = ?",
                (mentor_id, json.dumps(previous_mentors), student_id),
            )
            row = cursor.execute("SELECT * FROM students WHERE id = ?", (student_id,)).fetchone()
        logger.info("Student %s mentor changed from %s to %s", student_id, old_mentor_id, mentor_id)
        return cls._row_to_student_read(row)

    @classmethod
    async def list_previous_mentors(cls, student_id: int) -> List[MentorRead]:
        """Return the full records of a student's previous mentors in recorded order.

        Raises ``LookupError`` if the student does not exist.
        """
        if not is_storable_id(student_id):
            raise LookupError("Student not found")
        conn = get_connection()
        row = conn.execute(
            "SELECT previous_mentors FROM students WHERE id = ?",
            (student_id,),
        ).fetchone()
        if not row:
            raise LookupError("Student not found")
        return await MentorService.get_mentors(json.loads(row["previous_mentors"] or "[]"))

    @staticmethod
    def _row_to_student_read(row: sqlite3.Row) -> StudentRead:
        """Convert a database row to a StudentRead schema instance."""
        return StudentRead(
            id=row["id"],
            name=row["name"],
            mentor=row["mentor_id"],
            previous_mentors=json.loads(row["previous_mentors"] or "[]"),
            created_at=row["created_at"],
        )
