"""Domain-specific exceptions for the share intake pipeline."""


class ShareIntakeError(Exception):
    """Base exception for all share intake errors."""

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(ShareIntakeError):
    """Invalid configuration values."""

    pass


class PayloadDecodeError(ShareIntakeError):
    """A stored blob could not be decoded into shared items."""

    def __init__(self, message: str, lookup_key: str | None = None):
        super().__init__(message)
        self.lookup_key = lookup_key
        if lookup_key:
            self.details["lookup_key"] = lookup_key


class UnrecognizedChannelArgumentError(ShareIntakeError):
    """Raised when a subscriber names a feed other than media or text."""

    code = "NO_SUCH_ARGUMENT"

    def __init__(self, argument: object):
        super().__init__(
            f"No such argument {argument!r}",
            details={"code": self.code, "argument": repr(argument)},
        )
        self.argument = argument


class MethodNotImplementedError(ShareIntakeError):
    """Raised when the query surface receives an unknown method name."""

    def __init__(self, method: str):
        super().__init__(f"Method '{method}' is not implemented", details={"method": method})
        self.method = method


class HandoffStoreError(ShareIntakeError):
    """Base exception for handoff store adapter failures."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        operation: str | None = None,
    ):
        super().__init__(message)
        self.key = key
        self.operation = operation
        if key:
            self.details["key"] = key
        if operation:
            self.details["operation"] = operation


class HandoffStoreNotConnectedError(HandoffStoreError):
    """Raised when a store read is attempted before connecting."""

    def __init__(self, operation: str):
        super().__init__(
            f"Handoff store not connected. Cannot perform '{operation}' operation.",
            operation=operation,
        )
