"""Custom exceptions for blogsite."""


class BlogsiteError(Exception):
    """Base exception for blogsite operations."""


class ContentError(BlogsiteError):
    """Error while loading blog content."""


class PostNotFoundError(ContentError):
    """No post file exists for the requested slug."""


class FrontMatterError(ContentError):
    """Post front matter could not be parsed."""
