"""
Pydantic schema definitions for API payloads.

Mentors and students each define their own request and response
models.  Schemas are separated from the storage layout so that the
JSON representation (``previousMentors``, ``studentIds`` ...) does not
leak into SQL column names.
"""
