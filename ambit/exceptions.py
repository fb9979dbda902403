"""
ambit Exception Hierarchy

Clean exception hierarchy for consistent error handling across the core.
"""

from typing import Optional

from ambit.error_detail import extract_error_detail


class AmbitError(Exception):
    """Base exception for all ambit errors."""

    def __init__(self, message: str, context: Optional[str] = None):
        self.message = message
        self.context = context
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format error message with optional context."""
        if self.context:
            return f"{self.message}\nContext: {self.context}"
        return self.message


class ConfigurationError(AmbitError):
    """Raised when configuration is invalid or missing."""

    pass


class ProviderError(AmbitError):
    """Raised when a provider CLI or API call fails."""

    pass


class RouterNameError(ConfigurationError):
    """Raised when an app name is not a router name for the given network."""

    def __init__(self, app_name: str, expected_prefix: str):
        self.app_name = app_name
        self.expected_prefix = expected_prefix
        message = f"App '{app_name}' is not an ambit router name"
        context = f"Expected prefix: {expected_prefix}<router-id>"
        super().__init__(message, context)


class FlyCommandError(ProviderError):
    """Raised when a flyctl invocation exits non-zero."""

    def __init__(self, action: str, stderr: str):
        self.action = action
        self.stderr = stderr
        # Last meaningful line from flyctl stderr
        self.detail = extract_error_detail(stderr)
        super().__init__(f"{action} Failed", context=self.detail)


class ProtectedAppError(ConfigurationError):
    """Raised when a workload operation targets an ambit router app."""

    def __init__(self, app_name: str):
        self.app_name = app_name
        message = f"Cannot operate on ambit infrastructure app '{app_name}'"
        context = "Use 'ambit create' to manage routers"
        super().__init__(message, context)
