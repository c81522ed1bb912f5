"""Custom exception hierarchy."""

from typing import Optional


class DmlkitError(Exception):
    """Base exception for dmlkit-specific failures."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize exception with message, optional suggestion, and context.

        Args:
            message: Error message
            suggestion: Optional suggestion for fixing the error
            context: Optional dictionary with additional context
        """
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion
        self.context = context or {}

    def __str__(self) -> str:
        """Return formatted error message with suggestion if available."""
        msg = self.message
        if self.suggestion:
            msg += f"\n\nSuggestion: {self.suggestion}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            msg += f"\n\nContext: {context_str}"
        return msg


class ValidationError(DmlkitError):
    """Raised when input validation fails."""


class EmptyStatementError(ValidationError):
    """Raised when a statement rendered empty and was about to be executed."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        if suggestion is None:
            if "where" in message.lower():
                suggestion = (
                    "UPDATE and DELETE render nothing without a WHERE clause. "
                    "Call where(...) first, or set allow_empty_where = True to "
                    "target every row of the table."
                )
            else:
                suggestion = "Use one of DMLType.INSERT, DMLType.UPDATE or DMLType.DELETE."
        super().__init__(message, suggestion, context)


class ExecutionError(DmlkitError):
    """Raised when SQL execution fails."""

    def __init__(
        self, message: str, suggestion: Optional[str] = None, context: Optional[dict] = None
    ):
        """Initialize execution error.

        Common suggestions:
        - Check SQL syntax and table/column names
        - Check that the processor matches the driver's paramstyle
        """
        if suggestion is None:
            if "no such table" in message.lower() or "relation" in message.lower():
                suggestion = (
                    "The table does not exist. Check the table name passed to the builder."
                )
            elif "no such column" in message.lower():
                suggestion = "The column does not exist. Check the field names added to the builder."
            elif "syntax error" in message.lower():
                suggestion = (
                    "There's a SQL syntax error. Check that the builder's processor "
                    "matches the placeholder style your driver expects."
                )
        super().__init__(message, suggestion, context)
