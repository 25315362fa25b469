"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules.  Mentors and students each expose a router defined in
``api/endpoints``; the business logic behind them lives in
``services`` and the request/response models in ``schemas``.
"""

from .main import app  # noqa: F401
