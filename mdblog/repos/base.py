from typing import List, Protocol, Tuple


class PostSource(Protocol):
    """Read side of post storage: fetch one document or all of them."""

    def read(self, slug: str) -> str: ...

    def list_posts(self) -> List[Tuple[str, str]]: ...


class PostSink(Protocol):
    """Write side of post storage."""

    def write(self, slug: str, text: str) -> None: ...

    def exists(self, slug: str) -> bool: ...


class PostStore(PostSource, PostSink, Protocol):
    pass
