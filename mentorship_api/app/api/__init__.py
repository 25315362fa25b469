"""
API package.

``router`` aggregates the mentor and student endpoints; ``main``
mounts it under ``/api``.
"""
