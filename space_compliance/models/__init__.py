"""Profile, catalog and result models."""
