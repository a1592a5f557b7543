"""PostgreSQL persistence adapter (SQLAlchemy 2.0 asyncio)."""
