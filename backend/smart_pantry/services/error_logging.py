"""
Error Logging Service

Error logging system that:
- Writes to rotating log files (when the logs directory is writable)
- Stores errors in the database for querying
- Captures context (user, request, traceback)
- Sanitizes sensitive data

Usage:
    from smart_pantry.services.error_logging import error_logger

    try:
        ...
    except Exception as e:
        error_logger.log_error(e, request=request, user=current_user)
"""

import logging
import sys
import traceback
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Any, Dict
from uuid import UUID

from smart_pantry.core.config import settings
from smart_pantry.models.error_log import ErrorLog


logger = logging.getLogger("error_logging")

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DETAILED_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Sensitive fields to sanitize
SENSITIVE_FIELDS = {"password", "password_hash", "token", "access_token", "refresh_token",
                    "authorization", "api_key", "secret", "credential"}


def sanitize_data(data: Any, depth: int = 0) -> Any:
    """
    Sanitize sensitive data from dictionaries and lists.
    Replaces sensitive field values with '[REDACTED]'.
    """
    if depth > 10:
        return "[MAX_DEPTH]"

    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            if any(sensitive in str(key).lower() for sensitive in SENSITIVE_FIELDS):
                sanitized[key] = "[REDACTED]"
            else:
                sanitized[key] = sanitize_data(value, depth + 1)
        return sanitized
    elif isinstance(data, list):
        return [sanitize_data(item, depth + 1) for item in data]
    elif isinstance(data, str) and len(data) > 20 and data.startswith("eyJ"):
        # JWT pattern
        return "[REDACTED_TOKEN]"
    return data


def truncate_string(s: str, max_length: int = 10000) -> str:
    if len(s) > max_length:
        return s[:max_length] + f"... [TRUNCATED, total {len(s)} chars]"
    return s


def setup_file_logging(logs_dir: Optional[str] = None) -> bool:
    """
    Attach rotating file handlers to the root logger.

    Returns False (console only) when the directory cannot be written.
    """
    path = Path(logs_dir or settings.LOGS_DIR)
    try:
        path.mkdir(parents=True, exist_ok=True)
        marker = path / ".write_test"
        marker.touch()
        marker.unlink()
    except OSError as e:
        logger.warning(f"Cannot write to logs directory {path}: {e}; file logging disabled")
        return False

    error_handler = RotatingFileHandler(
        path / "errors.log",
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=10,
        encoding="utf-8"
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    detailed_handler = RotatingFileHandler(
        path / "app_detailed.log",
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8"
    )
    detailed_handler.setLevel(logging.DEBUG)
    detailed_handler.setFormatter(logging.Formatter(DETAILED_LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.addHandler(error_handler)
    root_logger.addHandler(detailed_handler)
    return True


class ErrorLogger:
    """
    Error logging service that writes to the log and, once configured,
    to the error_logs table.
    """

    def __init__(self):
        self.db_session_factory = None

    def set_db_session_factory(self, factory):
        self.db_session_factory = factory

    def log_error(
        self,
        error: Exception,
        request: Optional[Any] = None,
        user: Optional[Any] = None,
        severity: str = "error",
        context: Optional[Dict] = None,
        save_to_db: bool = True
    ) -> Optional[UUID]:
        """
        Log an error with full context.

        Args:
            error: The exception that occurred
            request: FastAPI Request object (optional)
            user: Current user object (optional)
            severity: warning, error, critical
            context: Additional context data
            save_to_db: Whether to save to database

        Returns:
            UUID of the error log entry if saved to DB, None otherwise
        """
        error_type = type(error).__name__
        error_message = str(error)

        module = function = line_number = None
        if error.__traceback__ is not None:
            stack_trace = "".join(traceback.format_exception(type(error), error, error.__traceback__))
            frames = traceback.extract_tb(error.__traceback__)
            if frames:
                last_frame = frames[-1]
                module = last_frame.filename
                function = last_frame.name
                line_number = str(last_frame.lineno)
        else:
            stack_trace = "".join(traceback.format_exception(*sys.exc_info())) if sys.exc_info()[0] else None

        request_method = request_path = request_query = client_ip = user_agent = None
        if request is not None:
            request_method = request.method
            request_path = str(request.url.path)
            request_query = str(request.url.query) or None
            client_ip = request.client.host if request.client else None
            user_agent = request.headers.get("user-agent")

        user_id = getattr(user, "id", None)
        user_email = getattr(user, "email", None)

        log_message = f"{error_type}: {error_message} | User: {user_email or 'anonymous'} | Path: {request_path or 'N/A'}"
        level = {
            "critical": logging.CRITICAL,
            "error": logging.ERROR,
            "warning": logging.WARNING,
        }.get(severity, logging.INFO)
        logger.log(level, log_message)

        if not (save_to_db and self.db_session_factory):
            return None

        try:
            db = self.db_session_factory()
            try:
                entry = ErrorLog(
                    timestamp=datetime.now(timezone.utc),
                    error_type=error_type,
                    error_code=str(getattr(error, "status_code", "")) or None,
                    severity=severity,
                    module=module,
                    function=function,
                    line_number=line_number,
                    user_id=user_id,
                    user_email=user_email,
                    request_method=request_method,
                    request_path=request_path,
                    request_query=request_query,
                    client_ip=client_ip,
                    user_agent=truncate_string(user_agent, 500) if user_agent else None,
                    message=truncate_string(error_message or error_type, 1000),
                    stack_trace=truncate_string(stack_trace, 20000) if stack_trace else None,
                    context_data=sanitize_data(context) if context else None,
                )
                db.add(entry)
                db.commit()
                db.refresh(entry)
                logger.debug(f"Error logged to DB with ID: {entry.id}")
                return entry.id
            finally:
                db.close()
        except Exception as db_err:
            logger.error(f"Failed to save error to database: {db_err}")
            return None


# Singleton instance
error_logger = ErrorLogger()


def configure_error_logging(db_session_factory, logs_dir: Optional[str] = None):
    """
    Configure the error logging system with file and database support.
    Call this during app startup.
    """
    setup_file_logging(logs_dir)
    error_logger.set_db_session_factory(db_session_factory)
    logger.info("Error logging system configured")
