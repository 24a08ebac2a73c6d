"""PostgreSQL persistence via SQLAlchemy 2.0 async and asyncpg."""
