"""
Top‑level API router.

Collects the domain routers.  Paths are declared in full inside each
endpoint module (``/mentor/...``, ``/student/...``, ``/students/...``)
because the singular and plural prefixes do not map one‑to‑one onto
the two domains.
"""

from fastapi import APIRouter

from .endpoints import mentors, students

router = APIRouter()

router.include_router(mentors.router, tags=["mentors"])
router.include_router(students.router, tags=["students"])
