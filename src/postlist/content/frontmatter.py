"""Front-matter extraction for markdown documents."""

from pathlib import Path
from typing import Any, Optional

import yaml
from frontmatter.default_handlers import YAMLHandler

_handler = YAMLHandler()


class FrontMatterError(ValueError):
    """Raised when a document's front-matter block is missing or malformed."""

    def __init__(self, reason: str, path: Optional[Path] = None):
        self.reason = reason
        self.path = path
        where = f"{path}: " if path is not None else ""
        super().__init__(f"{where}{reason}")


def parse_front_matter(text: str, path: Optional[Path] = None) -> tuple[dict[str, Any], str]:
    """
    Split a markdown document into its front-matter mapping and body.

    Unlike ``frontmatter.loads``, which falls back to empty metadata, every
    malformed block is reported.

    Args:
        text: Full document text.
        path: Source file, only used to annotate errors.

    Returns:
        Tuple of (front-matter mapping, body text with surrounding blank space removed)

    Raises:
        FrontMatterError: If there is no block, the block is not closed, the
            YAML is invalid, or it does not describe a string-keyed mapping.
    """
    text = text.lstrip("\ufeff")

    if not _handler.detect(text):
        raise FrontMatterError("no front-matter block found", path)

    try:
        block, body = _handler.split(text)
    except ValueError:
        raise FrontMatterError("front-matter block is not closed", path) from None

    try:
        data = _handler.load(block)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"invalid YAML in front-matter: {e}", path) from e

    if not isinstance(data, dict):
        kind = "empty" if data is None else type(data).__name__
        raise FrontMatterError(f"front-matter must be a mapping, got {kind}", path)

    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise FrontMatterError(f"front-matter keys must be strings: {bad_keys!r}", path)

    return data, body.strip()
