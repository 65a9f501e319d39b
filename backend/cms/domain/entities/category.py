"""Domain entity for article categories."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass
class Category:
    """A named category. Articles refer to it by name only."""

    name: str
    description: str | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def update(self, name: str | None = None, description: str | None = None) -> None:
        """Update category fields and refresh the updated_at timestamp."""
        if name is not None:
            self.name = name
        if description is not None:
            self.description = description
        self.updated_at = datetime.now(timezone.utc)
