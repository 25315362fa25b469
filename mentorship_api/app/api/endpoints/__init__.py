"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one record type.
The routers are aggregated in ``api/router.py``.
"""
