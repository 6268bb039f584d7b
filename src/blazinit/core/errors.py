"""Error taxonomy for blazinit operations.

Every error raised by the stores and operations derives from BlazinitError and
carries a message that is safe to show to the user as-is. The CLI error
boundary catches these and prints them without a stack trace.
"""


class BlazinitError(Exception):
    """Base class for all well-known blazinit failures."""


class NotFoundError(BlazinitError):
    """A profile or package name is absent where it is required."""


class AlreadyExistsError(BlazinitError):
    """A profile with the requested name already exists."""


class MalformedError(BlazinitError):
    """Persisted TOML content is unparsable or has the wrong shape."""


class ProtectedResourceError(BlazinitError):
    """An operation targeted a resource that cannot be modified (the default profile)."""


class IOFailureError(BlazinitError):
    """An underlying filesystem read or write failed."""
