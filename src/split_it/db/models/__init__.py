"""ORM models for the split_it persistence layer."""

from split_it.db.models.state_snapshot import StateSnapshot

__all__ = ["StateSnapshot"]
