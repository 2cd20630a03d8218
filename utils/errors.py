"""
Errors Module - Exception taxonomy shared by repositories and blueprints
Each error carries the HTTP status the error handlers answer with.
"""


class PortfolioError(Exception):
    """Base class for errors that map onto an HTTP response"""
    status_code = 500
    default_message = 'An unexpected error occurred'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(PortfolioError):
    """Malformed or missing input, raised before any write"""
    status_code = 400
    default_message = 'Invalid request data'

    def __init__(self, fields=None, message=None):
        self.fields = dict(fields or {})
        if message is None and self.fields:
            message = f"Invalid fields: {', '.join(self.fields)}"
        super().__init__(message)

    def to_dict(self):
        payload = super().to_dict()
        if self.fields:
            payload['fields'] = self.fields
        return payload


class UnauthorizedError(PortfolioError):
    status_code = 401
    default_message = 'Unauthorized'


class NotFoundError(PortfolioError):
    status_code = 404
    default_message = 'Not found'


class StorageError(PortfolioError):
    """Datastore unreachable or statement rejected"""
    status_code = 500
    default_message = 'Storage failure'


__all__ = [
    'PortfolioError',
    'ValidationError',
    'UnauthorizedError',
    'NotFoundError',
    'StorageError'
]
