"""
Exception hierarchy for the status document engine.

Not-found and unsupported-state conditions are NOT exceptions: the
document generator reports them with a warning and returns ``None``.
The exceptions below cover setup errors and collaborator failures,
which propagate to the caller unchanged.
"""


class StatusDocError(RuntimeError):
    """Base class for all status document engine errors."""


class ConfigurationError(StatusDocError):
    """Raised when a required collaborator is missing at construction time."""


class TemplateNotFoundError(StatusDocError, KeyError):
    """Raised when a logical template name is not registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the plain message.
        return RuntimeError.__str__(self)


class TemplateRenderError(StatusDocError):
    """Raised when a markup template cannot be loaded or rendered."""


class LaTeXCompilationError(StatusDocError):
    """Raised when LaTeX rendering or compilation fails."""


class DuplicateApplicationError(StatusDocError):
    """Raised when the application store holds more than one match for an id."""
