"""
Validation Module - Boundary checks for project payloads
Turns a JSON body into model attributes or raises ValidationError.
"""

from urllib.parse import urlparse
from models import PROJECT_CATEGORIES
from .errors import ValidationError


TITLE_MIN_LENGTH = 2
DESCRIPTION_MIN_LENGTH = 10

# Column sizes in models.Project
TITLE_MAX_LENGTH = 255
URL_MAX_LENGTH = 500

# JSON key -> model attribute
PROJECT_FIELDS = {
    'title': 'title',
    'description': 'description',
    'imageUrl': 'image_url',
    'demoUrl': 'demo_url',
    'repoUrl': 'repo_url',
    'category': 'category',
    'tags': 'tags',
    'featured': 'featured',
}

REQUIRED_FIELDS = ('title', 'description', 'imageUrl', 'category', 'tags')
OPTIONAL_URL_FIELDS = ('demoUrl', 'repoUrl')


def is_valid_url(value):
    """Check that value is an absolute http(s) URL with a host"""
    if not isinstance(value, str) or not value.strip() or any(c.isspace() for c in value.strip()):
        return False
    try:
        parsed = urlparse(value.strip())
    except ValueError:
        return False
    return parsed.scheme in ('http', 'https') and bool(parsed.hostname)


def _check_min_length(value, minimum, label):
    if not isinstance(value, str) or len(value.strip()) < minimum:
        return f'{label} must be at least {minimum} characters.'
    return None


def _check_max_length(value, maximum, label):
    if len(value.strip()) > maximum:
        return f'{label} must be at most {maximum} characters.'
    return None


def _check_url(value, label):
    if not is_valid_url(value):
        return f'Please enter a valid URL for the {label}.'
    return _check_max_length(value, URL_MAX_LENGTH, f'The {label} URL')


def _check_field(key, value):
    """Return an error message for key/value, or None when it is acceptable"""
    if key == 'title':
        return (_check_min_length(value, TITLE_MIN_LENGTH, 'Title')
                or _check_max_length(value, TITLE_MAX_LENGTH, 'Title'))
    if key == 'description':
        return _check_min_length(value, DESCRIPTION_MIN_LENGTH, 'Description')
    if key == 'imageUrl':
        return _check_url(value, 'image')
    elif key in OPTIONAL_URL_FIELDS:
        if value not in (None, ''):
            return _check_url(value, 'demo' if key == 'demoUrl' else 'repository')
    elif key == 'category':
        if not isinstance(value, str) or not value.strip():
            return 'Please select a category.'
        if value.strip() not in PROJECT_CATEGORIES:
            return f"Category must be one of: {', '.join(PROJECT_CATEGORIES)}."
    elif key == 'tags':
        if not isinstance(value, str) or not value.strip():
            return 'Please enter at least one tag.'
    elif key == 'featured':
        if not isinstance(value, bool):
            return 'Featured must be true or false.'
    return None


def _normalize(key, value):
    if key in OPTIONAL_URL_FIELDS:
        return value.strip() if value else None
    if isinstance(value, str):
        return value.strip()
    return value


def validate_project_payload(payload, partial=False):
    """
    Validate a project payload and map it onto model attributes

    Args:
        payload (dict): Decoded JSON body
        partial (bool): Only check the keys present (updates)

    Returns:
        dict: Model attribute -> normalized value

    Raises:
        ValidationError: With every offending field and its message
    """
    if not isinstance(payload, dict):
        raise ValidationError(message='Request body must be a JSON object')

    errors = {}
    if not partial:
        for key in REQUIRED_FIELDS:
            if payload.get(key) in (None, ''):
                errors[key] = f'{key} is required.'

    cleaned = {}
    for key, attribute in PROJECT_FIELDS.items():
        if key not in payload or key in errors:
            continue
        value = payload[key]
        message = _check_field(key, value)
        if message:
            errors[key] = message
            continue
        cleaned[attribute] = _normalize(key, value)

    if errors:
        raise ValidationError(fields=errors)

    if not partial:
        cleaned.setdefault('featured', False)
    return cleaned


__all__ = [
    'PROJECT_FIELDS',
    'REQUIRED_FIELDS',
    'is_valid_url',
    'validate_project_payload'
]
