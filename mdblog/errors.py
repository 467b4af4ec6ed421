class BlogError(Exception):
    """Base class for failures raised by the storage and rendering layers."""

    status_code = 500


class PostNotFoundError(BlogError):
    status_code = 404

    def __init__(self, slug: str):
        super().__init__(f"No post found for slug {slug!r}")
        self.slug = slug


class BadRequestError(BlogError):
    status_code = 400


class SlugConflictError(BlogError):
    status_code = 409

    def __init__(self, slug: str):
        super().__init__(f"A post already exists for slug {slug!r}")
        self.slug = slug


class FrontmatterError(BlogError):
    pass


class StorageError(BlogError):
    pass


class RenderError(BlogError):
    pass
