"""
Service layer.

Each service encapsulates the business logic for one record type.
Services raise ``LookupError`` when a referenced record does not exist
and ``ValueError`` when a request is rejected; the API layer turns
those into 404 and 400 responses.
"""
