"""
Utils Package - Centralized utility modules initialization
"""

from .errors import (
    PortfolioError,
    ValidationError,
    UnauthorizedError,
    NotFoundError,
    StorageError
)
from .validation import validate_project_payload, is_valid_url
from .security import (
    get_client_ip,
    log_audit_event,
    hash_password,
    verify_password,
    authenticate_admin,
    ensure_admin_user
)

__all__ = [
    # Errors
    'PortfolioError',
    'ValidationError',
    'UnauthorizedError',
    'NotFoundError',
    'StorageError',

    # Validation
    'validate_project_payload',
    'is_valid_url',

    # Security
    'get_client_ip',
    'log_audit_event',
    'hash_password',
    'verify_password',
    'authenticate_admin',
    'ensure_admin_user'
]
