"""
Error handling and tool validation for the ping sweep.

This module provides the exception hierarchy raised before a sweep starts,
centralized error reporting with troubleshooting suggestions, and validation
of the external ping binary. Individual probe and lookup failures are not
errors and never pass through here.
"""

import shutil
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .logger import Logger, get_logger


class ErrorType(Enum):
    """Enumeration for different types of errors."""
    CONFIGURATION_ERROR = "configuration_error"
    DETECTION_ERROR = "detection_error"
    TOOL_MISSING_ERROR = "tool_missing_error"


class ErrorSeverity(Enum):
    """Enumeration for error severity levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class ErrorContext:
    """
    Context information for error handling.

    Attributes:
        error_type: Type of error that occurred
        severity: Severity level of the error
        operation: Operation that was being performed when error occurred
        component: Component/module where error occurred
        additional_info: Additional context information
    """
    error_type: ErrorType
    severity: ErrorSeverity
    operation: str
    component: str
    additional_info: Dict[str, Any] = None

    def __post_init__(self):
        if self.additional_info is None:
            self.additional_info = {}


class PingSweepError(Exception):
    """Base exception class for the ping sweep."""
    pass


class ConfigurationError(PingSweepError):
    """Missing or malformed sweep parameters."""
    pass


class DetectionError(PingSweepError):
    """The local network prefix could not be determined."""
    pass


class ToolMissingError(PingSweepError):
    """A required external tool is not installed."""
    pass


class ErrorHandler:
    """
    Centralized error reporting.

    Logs each error according to its severity, keeps per-type counts and
    prints troubleshooting suggestions for the error type.
    """

    def __init__(self, logger: Optional[Logger] = None):
        """
        Initialize the ErrorHandler.

        Args:
            logger: Logger instance for error reporting
        """
        self.logger = logger or get_logger(__name__)
        self.error_statistics: Dict[ErrorType, int] = {
            error_type: 0 for error_type in ErrorType
        }

    def handle_error(self, error: Exception, context: ErrorContext) -> bool:
        """
        Handle an error based on its type and context.

        Args:
            error: The exception that occurred
            context: Error context information

        Returns:
            bool: always False, none of these errors are retryable
        """
        self.error_statistics[context.error_type] += 1
        self._log_error(error, context)

        if context.error_type == ErrorType.CONFIGURATION_ERROR:
            self._suggest_configuration_fixes(context)
        elif context.error_type == ErrorType.DETECTION_ERROR:
            self._suggest_detection_fixes(context)
        elif context.error_type == ErrorType.TOOL_MISSING_ERROR:
            self._suggest_tool_installation(context.additional_info.get("tool_name", "unknown"))
        return False

    def get_error_summary(self) -> Dict[str, int]:
        """
        Get the number of errors handled so far, per error type.

        Returns:
            Dict mapping error type value to count, omitting types never seen
        """
        return {
            error_type.value: count
            for error_type, count in self.error_statistics.items()
            if count
        }

    def _log_error(self, error: Exception, context: ErrorContext) -> None:
        """
        Log error information with appropriate detail level.

        Args:
            error: The exception that occurred
            context: Error context information
        """
        error_msg = f"Error in {context.component}.{context.operation}: {str(error)}"

        if context.severity == ErrorSeverity.CRITICAL:
            self.logger.error(error_msg, exception=error)
        elif context.severity == ErrorSeverity.HIGH:
            self.logger.error(error_msg)
        elif context.severity == ErrorSeverity.MEDIUM:
            self.logger.warning(error_msg)
        else:
            self.logger.debug(error_msg)

    def _suggest_configuration_fixes(self, context: ErrorContext) -> None:
        """Provide configuration error solutions."""
        self.logger.info("Configuration error solutions:")
        self.logger.info("  • Pass exactly one of -i, -d or -n")
        self.logger.info("  • Address prefixes are three octets, e.g. 192.168.1")
        self.logger.info("  • Hostname mode needs integer -r <start> and -e <end>")
        self.logger.info("  • Check YAML syntax in sweep_config.yml")

    def _suggest_detection_fixes(self, context: ErrorContext) -> None:
        """Provide auto-detection error solutions."""
        self.logger.info("Network detection solutions:")
        self.logger.info("  • Check that this machine has an IPv4 address and a default route")
        self.logger.info("  • Pass the prefix explicitly with -i <prefix>")

    def _suggest_tool_installation(self, tool_name: str) -> None:
        """Provide tool installation suggestions."""
        suggestions = {
            "ping": [
                "Ubuntu/Debian: sudo apt-get install iputils-ping",
                "CentOS/RHEL: sudo yum install iputils",
                "Alpine: apk add iputils",
                "macOS/Windows: ping ships with the operating system",
            ],
        }

        if tool_name in suggestions:
            self.logger.info(f"Installation suggestions for {tool_name}:")
            for suggestion in suggestions[tool_name]:
                self.logger.info(f"  • {suggestion}")
        else:
            self.logger.info(f"Please install {tool_name} using your system's package manager")


class ToolValidator:
    """
    Validator for external tool availability.
    """

    def __init__(self, error_handler: ErrorHandler, required_tools: Optional[List[str]] = None):
        """
        Initialize the ToolValidator.

        Args:
            error_handler: ErrorHandler instance for error management
            required_tools: Tools that must be on PATH (default: ping)
        """
        self.error_handler = error_handler
        self.logger = error_handler.logger
        self.required_tools = required_tools or ["ping"]

    def validate_all_tools(self) -> Tuple[bool, List[str]]:
        """
        Validate all required external tools.

        Returns:
            Tuple of (all_valid, missing_tools)
        """
        missing_tools = [tool for tool in self.required_tools if not self.validate_tool(tool)]
        return not missing_tools, missing_tools

    def validate_tool(self, tool_name: str) -> bool:
        """
        Check if a tool is available in the system PATH.

        Args:
            tool_name: Name of the tool to check

        Returns:
            bool: True if tool is available, False otherwise
        """
        tool_path = shutil.which(tool_name)
        if tool_path:
            self.logger.debug(f"Found {tool_name} at: {tool_path}")
            return True

        context = ErrorContext(
            error_type=ErrorType.TOOL_MISSING_ERROR,
            severity=ErrorSeverity.HIGH,
            operation="tool_availability_check",
            component="ToolValidator",
            additional_info={"tool_name": tool_name}
        )
        error = ToolMissingError(f"Tool {tool_name} not found in PATH")
        self.error_handler.handle_error(error, context)
        return False
