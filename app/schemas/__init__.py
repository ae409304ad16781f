"""
Schemas module - Request/Response schemas for API endpoints.

Everything lives in app.schemas.schemas; the wire names are camelCase,
matching what is stored in MongoDB.
"""
