from typing import Any, Dict, Tuple

import frontmatter
from frontmatter.default_handlers import TOMLHandler, YAMLHandler
from pydantic import ValidationError

from mdblog.errors import FrontmatterError
from mdblog.schemas.blog import PostMetadata

# `+++` TOML blocks are what the write form produces; `---` YAML is accepted
# for hand-written posts.
HANDLERS = [TOMLHandler(), YAMLHandler()]


def has_frontmatter(text: str) -> bool:
    """True if text opens with a metadata block.

    A `---` fence whose contents do not load as a YAML mapping is a markdown
    thematic break, not metadata.
    """
    text = text.lstrip("\ufeff")
    handler = frontmatter.detect_format(text, HANDLERS)
    if not isinstance(handler, YAMLHandler):
        return handler is not None
    try:
        fm, _content = handler.split(text)
        fields = handler.load(fm)
    except Exception:
        return False
    return fields is None or isinstance(fields, dict)


def split_frontmatter(raw: str) -> Tuple[PostMetadata, str]:
    """Separate the leading metadata block of a post from its markdown body.

    A document without a recognised fence yields default metadata and the
    whole input as body. A fence that is opened but malformed raises
    FrontmatterError.
    """
    text = raw.lstrip("\ufeff")
    handler = frontmatter.detect_format(text, HANDLERS)
    if handler is None:
        return PostMetadata(), raw

    try:
        fm, content = handler.split(text)
    except ValueError as e:
        raise FrontmatterError("metadata block is not terminated") from e

    try:
        fields = handler.load(fm)
    except Exception as e:
        raise FrontmatterError(f"metadata block is not valid: {e}") from e

    if fields is None:
        fields = {}
    if not isinstance(fields, dict):
        raise FrontmatterError("metadata block must be a mapping")

    # the slug belongs to the filename, never to the metadata block
    fields.pop("slug", None)

    try:
        metadata = PostMetadata.model_validate(fields)
    except ValidationError as e:
        raise FrontmatterError(f"metadata has invalid fields: {e}") from e

    return metadata, content.strip()


def compose_document(metadata: Dict[str, Any], body: str) -> str:
    """Serialize metadata as a TOML block followed by the markdown body."""
    post = frontmatter.Post(body, **metadata)
    return frontmatter.dumps(post, handler=TOMLHandler()) + "\n"
