"""
Error Logging Service

Error logging system that:
- Writes to rotating log files when the log directory is writable
- Captures full context (user, request, operation, traceback)
- Sanitizes sensitive data
- Tags every logged error with an id that can be quoted back to clients

Usage:
    from app.services.error_logging import error_logger

    try:
        # some code
    except Exception as e:
        error_logger.log_error(e, request=request, user=current_user)
"""

import logging
import traceback
import json
import sys
import uuid
from datetime import datetime, timezone
from typing import Optional, Any, Dict
from pathlib import Path
from logging.handlers import RotatingFileHandler

from app.core.config import settings


# Specific error logger
logger = logging.getLogger("error_logging")
logger.setLevel(logging.DEBUG)

# Sensitive fields to sanitize
SENSITIVE_FIELDS = {'password', 'password_hash', 'token', 'access_token',
                    'authorization', 'api_key', 'secret', 'credential'}

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(message)s'
DETAILED_LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _log_dir_writable(log_dir: Path) -> bool:
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        test_file = log_dir / ".write_test"
        test_file.touch()
        test_file.unlink()
        return True
    except OSError as e:
        print(f"Warning: Cannot write to logs directory {log_dir}: {e}")
        print("File logging disabled, using console only.")
        return False


def sanitize_data(data: Any, depth: int = 0) -> Any:
    """
    Sanitize sensitive data from dictionaries and strings.
    Replaces sensitive field values with '[REDACTED]'.
    """
    if depth > 10:  # Prevent infinite recursion
        return "[MAX_DEPTH]"

    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            key_lower = str(key).lower()
            if any(sensitive in key_lower for sensitive in SENSITIVE_FIELDS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = sanitize_data(value, depth + 1)
        return sanitized
    elif isinstance(data, list):
        return [sanitize_data(item, depth + 1) for item in data]
    elif isinstance(data, str):
        if len(data) > 20 and data.startswith("eyJ"):  # JWT token pattern
            return "[REDACTED_TOKEN]"
        return data
    else:
        return data


def truncate_string(s: str, max_length: int = 10000) -> str:
    """Truncate string to max length."""
    if len(s) > max_length:
        return s[:max_length] + f"... [TRUNCATED, total {len(s)} chars]"
    return s


class ErrorLogger:
    """
    Error logging service that writes a summary line to the logging system
    and the full error buffer to errors_detailed.log.
    """

    def __init__(self):
        self.log_dir: Optional[Path] = None

    def set_log_dir(self, log_dir: Optional[Path]):
        """Enable detailed error files in log_dir (None disables them)."""
        self.log_dir = log_dir

    def log_error(
        self,
        error: Exception,
        request: Optional[Any] = None,
        user: Optional[Any] = None,
        severity: str = "error",
        context: Optional[Dict] = None,
    ) -> str:
        """
        Log an error with full context.

        Args:
            error: The exception that occurred
            request: FastAPI Request object (optional)
            user: Current user or requester (optional, needs an ``id``)
            severity: debug, info, warning, error, critical
            context: Additional context data

        Returns:
            Id of the logged error
        """
        error_id = uuid.uuid4().hex
        timestamp = datetime.now(timezone.utc)

        error_type = type(error).__name__
        error_message = str(error)

        exc_type, exc_value, exc_tb = sys.exc_info()
        if exc_tb:
            stack_trace = ''.join(traceback.format_exception(exc_type, exc_value, exc_tb))
        else:
            stack_trace = ''.join(traceback.format_exception(type(error), error, error.__traceback__))

        error_buffer_parts = [
            "=== ERROR LOG ===",
            f"Error ID: {error_id}",
            f"Timestamp: {timestamp.isoformat()}",
            f"Type: {error_type}",
            f"Message: {error_message}",
            f"Severity: {severity}",
        ]

        request_path = None
        if request is not None:
            try:
                request_path = str(request.url.path)
                client_ip = request.client.host if request.client else None
                error_buffer_parts.extend([
                    "\n=== REQUEST ===",
                    f"Method: {request.method}",
                    f"Path: {request_path}",
                    f"Query: {request.url.query or None}",
                    f"Client IP: {client_ip}",
                    f"User Agent: {request.headers.get('user-agent')}",
                ])
            except Exception as req_err:
                error_buffer_parts.append(f"\n[Failed to extract request info: {req_err}]")

        user_label = "anonymous"
        if user is not None:
            user_id = getattr(user, "id", None)
            user_name = getattr(user, "name", None)
            user_label = f"{user_name or ''}#{user_id}"
            error_buffer_parts.extend([
                "\n=== USER ===",
                f"ID: {user_id}",
                f"Name: {user_name}",
            ])

        if context:
            error_buffer_parts.extend([
                "\n=== CONTEXT ===",
                json.dumps(sanitize_data(context), indent=2, default=str),
            ])

        error_buffer_parts.extend([
            "\n=== STACK TRACE ===",
            stack_trace,
        ])
        error_buffer = truncate_string("\n".join(error_buffer_parts), 50000)  # Max 50KB

        log_message = (
            f"[{error_id}] {error_type}: {error_message} | "
            f"User: {user_label} | Path: {request_path or 'N/A'}"
        )
        level = logging.getLevelName(severity.upper())
        if not isinstance(level, int):
            level = logging.ERROR
        logger.log(level, log_message)

        if self.log_dir is not None:
            try:
                with open(self.log_dir / "errors_detailed.log", "a", encoding="utf-8") as f:
                    f.write(f"\n{'=' * 80}\n")
                    f.write(error_buffer)
                    f.write(f"\n{'=' * 80}\n")
            except OSError as file_err:
                logger.error(f"Failed to write to error file: {file_err}")
        else:
            logger.debug(error_buffer)

        return error_id

    def log_warning(self, message: str):
        """Log a warning message."""
        logger.warning(message)

    def log_info(self, message: str):
        """Log an info message."""
        logger.info(message)


# Singleton instance
error_logger = ErrorLogger()


def configure_logging(log_dir: Optional[str] = None) -> bool:
    """
    Configure logging handlers. Call this during app startup.

    Console logging is always on. Rotating file handlers (errors.log for
    ERROR and above, app_detailed.log for everything) are added when the
    log directory is writable.

    Returns:
        True if file logging is enabled
    """
    root_logger = logging.getLogger()
    if not any(getattr(h, "_joke_api", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        console_handler._joke_api = True
        root_logger.addHandler(console_handler)
        root_logger.setLevel(logging.DEBUG if settings.DEBUG else logging.INFO)

        path = Path(log_dir or settings.LOG_DIR)
        if _log_dir_writable(path):
            file_handler = RotatingFileHandler(
                path / "errors.log",
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=10,
                encoding='utf-8'
            )
            file_handler.setLevel(logging.ERROR)
            file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            file_handler._joke_api = True

            detailed_handler = RotatingFileHandler(
                path / "app_detailed.log",
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding='utf-8'
            )
            detailed_handler.setLevel(logging.DEBUG)
            detailed_handler.setFormatter(logging.Formatter(DETAILED_LOG_FORMAT, datefmt=DATE_FORMAT))
            detailed_handler._joke_api = True

            root_logger.addHandler(file_handler)
            root_logger.addHandler(detailed_handler)
            error_logger.set_log_dir(path)

    logger.info("Error logging system configured")
    return error_logger.log_dir is not None
