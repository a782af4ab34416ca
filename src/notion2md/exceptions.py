"""Custom exceptions for notion2md."""


class Notion2mdError(Exception):
    """Base exception for notion2md operations."""


class ConfigurationError(Notion2mdError):
    """Client or credentials are missing."""


class InvalidNodeError(Notion2mdError):
    """A block passed to the renderer is absent."""


class FetchError(Notion2mdError):
    """Error while fetching blocks from the Notion API."""


class BlockNotFoundError(FetchError):
    """Block does not exist or is not shared with the integration."""


class AuthenticationError(FetchError):
    """Notion rejected the integration token."""


class RateLimitError(FetchError):
    """Rate limited by Notion."""
