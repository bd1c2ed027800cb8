"""Climate data, demand profiles and demand scenarios read from a SQLite database."""

__version__ = "0.1.0"
__all__ = ["database", "weather", "profiles", "demand_store", "scenarios", "workspace"]