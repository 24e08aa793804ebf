"""Database Infrastructure: SQLAlchemy declarative Base for the catalog tables.

Invariants:
    - Single async engine per process (initialized via init_db)
    - All sessions are async (AsyncSession)
"""
