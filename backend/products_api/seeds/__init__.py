"""Sample data loaded into a fresh database."""
