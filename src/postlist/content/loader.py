"""Load post records from a directory of markdown files."""

import logging
from pathlib import Path
from typing import Iterable, Optional, Union

from .frontmatter import FrontMatterError, parse_front_matter
from .post import DEFAULT_REQUIRED_FIELDS, PostRecord

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSION = ".md"

# What to do with a file whose front-matter is malformed
ON_INVALID_FAIL = "fail"
ON_INVALID_SKIP = "skip"
ON_INVALID_POLICIES = {ON_INVALID_FAIL, ON_INVALID_SKIP}


class PostLoader:
    """Reads markdown files from one directory and builds post records."""

    def __init__(
        self,
        contents_dir: Path,
        extension: str = MARKDOWN_EXTENSION,
        on_invalid: str = ON_INVALID_FAIL,
        required_fields: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
        encoding: str = "utf-8",
    ):
        if on_invalid not in ON_INVALID_POLICIES:
            raise ValueError(
                f"on_invalid must be one of {sorted(ON_INVALID_POLICIES)}, got {on_invalid!r}"
            )
        self.contents_dir = Path(contents_dir)
        self.extension = extension
        self.on_invalid = on_invalid
        self.required_fields = tuple(required_fields)
        self.encoding = encoding

    def load(self) -> list[PostRecord]:
        """
        Load every post in the contents directory.

        Records come back in directory listing order, which is not sorted
        and may differ between platforms. Each call generates new ids.

        Raises:
            OSError: If the directory or a post file cannot be read.
            FrontMatterError: If a post is malformed and on_invalid is "fail".
        """
        posts: list[PostRecord] = []
        for entry in self.contents_dir.iterdir():
            if not entry.name.endswith(self.extension):
                logger.debug(f"Ignoring non-markdown entry: {entry.name}")
                continue
            if entry.is_dir():
                logger.debug(f"Ignoring directory entry: {entry.name}")
                continue

            post = self.load_file(entry)
            if post is not None:
                posts.append(post)

        logger.info(f"Loaded {len(posts)} posts from {self.contents_dir}")
        return posts

    def load_file(self, file_path: Path) -> Optional[PostRecord]:
        """Load a single post, or None if it is malformed and being skipped."""
        raw = file_path.read_text(encoding=self.encoding)
        try:
            data, _body = parse_front_matter(raw, file_path)
            post = PostRecord.from_front_matter(
                data,
                source_path=file_path,
                required_fields=self.required_fields,
            )
        except FrontMatterError as e:
            if self.on_invalid == ON_INVALID_SKIP:
                logger.warning(f"Skipping {file_path.name}: {e.reason}")
                return None
            raise

        logger.debug(f"Loaded post {post.slug!r} from {file_path.name}")
        return post


def load_posts(
    directory_path: Union[str, Path],
    on_invalid: str = ON_INVALID_FAIL,
    required_fields: Iterable[str] = DEFAULT_REQUIRED_FIELDS,
) -> list[PostRecord]:
    """Load all markdown posts in ``directory_path`` (non-recursive)."""
    loader = PostLoader(
        Path(directory_path),
        on_invalid=on_invalid,
        required_fields=required_fields,
    )
    return loader.load()
