"""
Error Log Model
Stores application errors for debugging and monitoring.

Captures:
- Timestamp and severity
- User context
- Request details
- Full traceback and additional context data
"""

from sqlalchemy import Column, String, Text, JSON, DateTime, Uuid
from datetime import datetime, timezone

from smart_pantry.models.base import BaseModel


class ErrorLog(BaseModel):
    """
    Error Log Model

    Each error is uniquely identified; the id is returned to API clients
    in 500 responses so that reports can be matched to a row.
    """
    __tablename__ = "error_logs"

    timestamp = Column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
        index=True
    )

    # Error classification
    error_type = Column(String(255), nullable=False, index=True)  # e.g. "ValueError"
    error_code = Column(String(50), nullable=True)  # HTTP status code when known
    severity = Column(String(20), default="error", nullable=False)  # warning, error, critical

    # Location info
    module = Column(String(255), nullable=True)
    function = Column(String(255), nullable=True)
    line_number = Column(String(20), nullable=True)

    # User context (nullable for unauthenticated requests)
    user_id = Column(Uuid(as_uuid=True), nullable=True, index=True)
    user_email = Column(String(255), nullable=True)

    # Request context
    request_method = Column(String(10), nullable=True)
    request_path = Column(String(500), nullable=True)
    request_query = Column(Text, nullable=True)
    client_ip = Column(String(50), nullable=True)
    user_agent = Column(String(500), nullable=True)

    # Error details
    message = Column(Text, nullable=False)
    stack_trace = Column(Text, nullable=True)
    context_data = Column(JSON, nullable=True)

    def __repr__(self):
        return f"<ErrorLog(id={self.id}, type={self.error_type}, message={self.message[:50]}...)>"
