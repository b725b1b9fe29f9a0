"""Post record built from a markdown file's front-matter."""

import uuid
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Optional

from .frontmatter import FrontMatterError

DEFAULT_REQUIRED_FIELDS = ("title", "slug")
KNOWN_FIELDS = ("title", "slug", "date")


def new_post_id() -> str:
    """Generate a random identifier for a post record."""
    return str(uuid.uuid4())


@dataclass
class PostRecord:
    """Metadata for a single blog post."""

    title: Optional[str] = None
    slug: Optional[str] = None
    date: Any = None  # As parsed by YAML: str, date or datetime
    extras: dict[str, Any] = field(default_factory=dict)
    front_matter: dict[str, Any] = field(default_factory=dict)  # As written, in file order
    source_path: Optional[Path] = None
    id: str = field(default_factory=new_post_id)

    @classmethod
    def from_front_matter(
        cls,
        data: dict[str, Any],
        source_path: Optional[Path] = None,
        required_fields: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
    ) -> "PostRecord":
        """
        Build a record from a parsed front-matter mapping.

        Raises:
            FrontMatterError: If a required field is missing or empty.
        """
        missing = [name for name in required_fields if _is_blank(data.get(name))]
        if missing:
            raise FrontMatterError(
                f"missing required front-matter field(s): {', '.join(missing)}",
                source_path,
            )

        extras = {k: v for k, v in data.items() if k not in KNOWN_FIELDS}
        return cls(
            title=data.get("title"),
            slug=data.get("slug"),
            date=data.get("date"),
            extras=extras,
            front_matter=dict(data),
            source_path=source_path,
        )

    def __post_init__(self):
        if not self.front_matter:
            # Built directly rather than from a file
            for name in KNOWN_FIELDS:
                value = getattr(self, name)
                if value is not None:
                    self.front_matter[name] = value
            self.front_matter.update(self.extras)

    def to_dict(self) -> dict[str, Any]:
        """Front-matter as written, plus the generated id."""
        return {**self.front_matter, "id": self.id}

    def get(self, key: str, default: Any = None) -> Any:
        return self.to_dict().get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.to_dict()[key]


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False
