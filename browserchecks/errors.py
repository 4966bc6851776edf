"""Exception classes raised by the browser checks."""


class CheckError(Exception):
    """Base error for a browser check."""

    def __init__(self, message):
        """Initialize the error."""
        super().__init__(message)
        self.message = message


class ConfigurationError(CheckError):
    """Raised when required configuration is missing or malformed."""

    def __init__(self, message="Browser checks are not configured."):
        """Initialize the error."""
        super().__init__(message)


class AuthenticationError(CheckError):
    """Raised when the login flow does not reach the signed-in state."""

    def __init__(self, message="authentication did not complete"):
        """Initialize the error."""
        super().__init__(message)


class AccessibilityViolationError(CheckError):
    """Raised when the accessibility scan reports violations."""

    def __init__(self, violations, message=None):
        """Initialize the error."""
        self.violations = list(violations)
        super().__init__(
            message or f"{len(self.violations)} accessibility violation(s) found."
        )
