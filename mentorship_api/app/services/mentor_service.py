"""
Service layer for mentors.

Creating mentors and attaching groups of unassigned students to them.
The bulk assignment updates the mentor's ``students`` list and every
student's ``mentor_id`` inside one transaction, so a failure part way
leaves both tables untouched.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import List

from mentorship_api.app.core.db import get_connection, is_storable_id, transaction
from mentorship_api.app.schemas.mentor import MentorCreate, MentorRead

logger = logging.getLogger(__name__)


class MentorService:
    """Service class for managing mentors."""

    @classmethod
    async def create_mentor(cls, data: MentorCreate) -> MentorRead:
        """Insert a new mentor with no students and return it."""
        conn = get_connection()
        cursor = conn.execute(
            "INSERT INTO mentors (name, students) VALUES (?, ?)",
            (data.name, json.dumps([])),
        )
        mentor_id = cursor.lastrowid
        logger.info("Created mentor %s", mentor_id)
        row = conn.execute("SELECT * FROM mentors WHERE id = ?", (mentor_id,)).fetchone()
        return cls._row_to_mentor_read(row)

    @classmethod
    async def assign_students(cls, mentor_id: int, student_ids: List[int]) -> MentorRead:
        """Assign a group of currently unassigned students to a mentor.

        Raises ``LookupError`` if the mentor does not exist and
        ``ValueError`` unless every requested id names a distinct,
        existing student without a mentor.  On success the ids are
        appended to the mentor's ``students`` list in request order
        and each student's ``mentor_id`` is set.
        """
        if not is_storable_id(mentor_id):
            raise LookupError("Mentor not found")
        with transaction() as cursor:
            row = cursor.execute("SELECT * FROM mentors WHERE id = ?", (mentor_id,)).fetchone()
            if not row:
                raise LookupError("Mentor not found")

            # Out-of-range ids match nothing and so fail the count check below.
            lookup_ids = [student_id for student_id in student_ids if is_storable_id(student_id)]
            matched = []
            if lookup_ids:
                lookup_placeholders = ", ".join("?" for _ in lookup_ids)
                matched = cursor.execute(
                    f"SELECT id FROM students WHERE id IN ({lookup_placeholders}) AND mentor_id IS NULL",
                    tuple(lookup_ids),
                ).fetchall()
            if len(matched) != len(student_ids):
                logger.warning(
                    "Rejected assignment of %s to mentor %s: %s of %s students available",
                    student_ids, mentor_id, len(matched), len(student_ids),
                )
                raise ValueError("Some students already have a mentor")

            if student_ids:
                placeholders = ", ".join("?" for _ in student_ids)
                students = json.loads(row["students"] or "[]")
                students.extend(student_ids)
                cursor.execute(
                    f"UPDATE students SET mentor_id = ? WHERE id IN ({placeholders})",
                    (mentor_id, *student_ids),
                )
                cursor.execute(
                    "UPDATE mentors SET students = ? WHERE id = ?",
                    (json.dumps(students), mentor_id),
                )
            row = cursor.execute("SELECT * FROM mentors WHERE id = ?", (mentor_id,)).fetchone()
        if student_ids:
            logger.info("Assigned students %s to mentor %s", student_ids, mentor_id)
        return cls._row_to_mentor_read(row)

    @classmethod
    async def get_mentors(cls, mentor_ids: List[int]) -> List[MentorRead]:
        """Resolve mentor ids to records, keeping the order (and repeats) of ``mentor_ids``.

        Ids with no matching mentor are skipped.
        """
        if not mentor_ids:
            return []
        conn = get_connection()
        unique_ids = list(dict.fromkeys(mentor_ids))
        placeholders = ", ".join("?" for _ in unique_ids)
        rows = conn.execute(
            f"SELECT * FROM mentors WHERE id IN ({placeholders})",
            tuple(unique_ids),
        ).fetchall()
        by_id = {row["id"]: cls._row_to_mentor_read(row) for row in rows}
        return [by_id[mentor_id] for mentor_id in mentor_ids if mentor_id in by_id]

    @staticmethod
    def _row_to_mentor_read(row: sqlite3.Row) -> MentorRead:
        """Convert a database row to a MentorRead schema instance."""
        return MentorRead(
            id=row["id"],
            name=row["name"],
            students=json.loads(row["students"] or "[]"),
            created_at=row["created_at"],
        )
