"""Domain error types."""


class ChatPromptError(Exception):
    """Base class for chat prompt building failures."""


class ConfigError(ChatPromptError):
    """Raised at startup when the chat template cannot be compiled or located."""


class RenderError(ChatPromptError):
    """Raised when a compiled template fails to render for one request."""
