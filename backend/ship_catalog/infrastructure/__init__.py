"""Infrastructure Layer: database sessions, SQL store and logging setup."""
