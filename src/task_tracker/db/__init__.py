"""Database engine, sessions and the metadata registry."""
