"""API Schemas: pydantic models for request bodies and responses."""
