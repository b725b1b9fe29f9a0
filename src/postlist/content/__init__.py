"""Content loading for postlist."""

from .frontmatter import FrontMatterError, parse_front_matter
from .loader import PostLoader, load_posts
from .post import PostRecord

__all__ = [
    "FrontMatterError",
    "parse_front_matter",
    "PostLoader",
    "load_posts",
    "PostRecord",
]
