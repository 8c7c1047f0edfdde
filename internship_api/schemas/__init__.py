"""
Schemas module - Request/Response schemas for API endpoints.

Wire names follow the web client (RollNumber, StudentID, ...);
attributes are snake_case and match the database columns.
"""
