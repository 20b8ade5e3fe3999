"""Infrastructure layer: SQL generation, database lifecycle and repositories."""
