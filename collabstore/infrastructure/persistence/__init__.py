"""Record store: async SQLAlchemy engine, ORM models and repositories."""
