"""Base error classes with rich context for beanctx."""

from __future__ import annotations

import traceback
from datetime import datetime
from typing import Any, Dict, List, Optional, TypeVar

from loguru import logger
from pydantic import BaseModel, Field


class ErrorContext(BaseModel):
    """Rich context information for errors."""

    timestamp: datetime = Field(default_factory=datetime.now)
    user_message: Optional[str] = None
    technical_details: Dict[str, Any] = Field(default_factory=dict)
    suggestions: List[str] = Field(default_factory=list)
    related_errors: List[Dict[str, Any]] = Field(default_factory=list)

    def add_suggestion(self, suggestion: str) -> None:
        """Add a helpful suggestion for resolving the error."""
        self.suggestions.append(suggestion)

    def add_technical_detail(self, key: str, value: Any) -> None:
        """Add technical debugging information."""
        self.technical_details[key] = value

    def add_related_error(self, error: BaseException) -> None:
        """Add a related error for context."""
        self.related_errors.append({
            "type": type(error).__name__,
            "message": str(error),
            "traceback": traceback.format_exception_only(type(error), error),
        })


T = TypeVar("T", bound="BeanContextError")


class BeanContextError(Exception):
    """Base exception class for beanctx with rich context support.

    Every failure the container reports is terminal for the resolution
    attempt that raised it; nothing is retried internally.
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[ErrorContext] = None,
        cause: Optional[BaseException] = None,
        error_code: Optional[str] = None,
    ):
        """Initialize beanctx error with context.

        Args:
            message: Human-readable error message
            context: Rich error context
            cause: Original exception that caused this error
            error_code: Unique error code for programmatic handling
        """
        super().__init__(message)
        self.message = message
        self.context = context or ErrorContext()
        self.cause = cause
        self.error_code = error_code or self._generate_error_code()

        self.context.user_message = message
        if cause is not None:
            self.context.add_related_error(cause)

        self._log_error()

    def _generate_error_code(self) -> str:
        """Generate an error code from the class name (CamelCase -> UPPER_SNAKE)."""
        class_name = self.__class__.__name__
        code = ""
        for i, char in enumerate(class_name):
            if i > 0 and char.isupper() and class_name[i - 1].islower():
                code += "_"
            code += char.upper()
        return code.replace("_ERROR", "")

    def _log_error(self) -> None:
        log_data = {"error_code": self.error_code}
        if self.context.technical_details:
            log_data["details"] = self.context.technical_details
        logger.bind(**log_data).debug(self.message)

    def with_suggestion(self: T, suggestion: str) -> T:
        """Add a suggestion for resolving the error."""
        self.context.add_suggestion(suggestion)
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "context": self.context.model_dump(mode="json"),
            "cause": str(self.cause) if self.cause else None,
        }

    def format_for_cli(self, verbose: bool = False) -> str:
        """Format error for CLI output."""
        lines = [
            f"[red]Error[/red]: {self.message}",
            f"[dim]Code: {self.error_code}[/dim]",
        ]

        if self.context.suggestions:
            lines.append("\n[yellow]Suggestions:[/yellow]")
            for suggestion in self.context.suggestions:
                lines.append(f"  • {suggestion}")

        if verbose and self.context.technical_details:
            lines.append("\n[dim]Technical Details:[/dim]")
            for key, value in self.context.technical_details.items():
                lines.append(f"  {key}: {value}")

        return "\n".join(lines)
