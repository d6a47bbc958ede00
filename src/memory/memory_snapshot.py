"""Point-in-time copy of a memory document."""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List
import uuid


@dataclass(frozen=True)
class MemorySnapshot:
    """
    A user-authored memory as it existed at one moment.

    Snapshots are read-only inputs to comparisons; nothing here persists them.
    """
    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime | None = None
    tags: List[str] | None = None
    is_public: bool | None = None
    user_id: str | None = None
    summary: str | None = None

    @classmethod
    def create(
        cls,
        title: str,
        content: str,
        tags: List[str] | None = None,
        is_public: bool | None = None,
        user_id: str | None = None,
        created_at: datetime | None = None
    ) -> "MemorySnapshot":
        """Create a new memory with a generated ID and current timestamp."""
        if created_at is None:
            created_at = datetime.now(timezone.utc)

        return cls(
            id=str(uuid.uuid4()),
            title=title,
            content=content,
            created_at=created_at,
            tags=list(tags) if tags is not None else None,
            is_public=is_public,
            user_id=user_id
        )

    def revise(
        self,
        content: str | None = None,
        title: str | None = None,
        updated_at: datetime | None = None
    ) -> "MemorySnapshot":
        """
        Create the next snapshot of this memory with new content and/or title.

        Args:
            content: New content (unchanged if None)
            title: New title (unchanged if None)
            updated_at: Time of the revision (now if None)

        Returns:
            New snapshot with the same ID
        """
        if updated_at is None:
            updated_at = datetime.now(timezone.utc)

        return MemorySnapshot(
            id=self.id,
            title=self.title if title is None else title,
            content=self.content if content is None else content,
            created_at=self.created_at,
            updated_at=updated_at,
            tags=list(self.tags) if self.tags is not None else None,
            is_public=self.is_public,
            user_id=self.user_id,
            summary=self.summary
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert the snapshot to its JSON-ready dictionary form."""
        data: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "createdAt": self.created_at.isoformat()
        }

        if self.updated_at is not None:
            data["updatedAt"] = self.updated_at.isoformat()

        if self.tags is not None:
            data["tags"] = list(self.tags)

        if self.is_public is not None:
            data["isPublic"] = self.is_public

        if self.user_id is not None:
            data["userId"] = self.user_id

        if self.summary is not None:
            data["summary"] = self.summary

        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MemorySnapshot":
        """
        Create a snapshot from its dictionary form.

        Args:
            data: Dictionary containing memory data

        Returns:
            New MemorySnapshot instance

        Raises:
            ValueError: If required fields are missing or invalid
        """
        required_fields = ["id", "title", "content", "createdAt"]
        missing_fields = [f for f in required_fields if f not in data]
        if missing_fields:
            raise ValueError(f"Missing required fields: {', '.join(missing_fields)}")

        if not isinstance(data["content"], str):
            raise ValueError(f"Invalid content type: {type(data['content']).__name__}")

        created_at = cls._parse_timestamp(data["createdAt"])
        updated_at = cls._parse_timestamp(data["updatedAt"]) if data.get("updatedAt") else None

        tags = data.get("tags")
        if tags is not None and (
            not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags)
        ):
            raise ValueError(f"Invalid tags: {tags}")

        return cls(
            id=str(data["id"]),
            title=data["title"],
            content=data["content"],
            created_at=created_at,
            updated_at=updated_at,
            tags=list(tags) if tags is not None else None,
            is_public=data.get("isPublic"),
            user_id=data.get("userId"),
            summary=data.get("summary")
        )

    @staticmethod
    def _parse_timestamp(value: Any) -> datetime:
        """Parse an ISO-8601 timestamp, accepting a trailing 'Z'."""
        if not isinstance(value, str):
            raise ValueError(f"Invalid timestamp format: {value}")

        # JavaScript's toISOString() uses 'Z' for UTC
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        try:
            return datetime.fromisoformat(text)

        except ValueError as e:
            raise ValueError(f"Invalid timestamp format: {value}") from e
