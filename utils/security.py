"""
Security Module - Admin credentials, client IP lookup and the audit trail
"""

import os
import json
from datetime import datetime
from flask import request, current_app
from werkzeug.security import generate_password_hash, check_password_hash
from extensions import db


AUDIT_LOG_MAX_ENTRIES = 1000


def get_client_ip():
    """Get real client IP address"""
    forwarded = request.environ.get('HTTP_X_FORWARDED_FOR')
    if forwarded:
        return forwarded.split(',')[0].strip()
    return request.environ.get('REMOTE_ADDR', 'unknown')


def log_audit_event(event_type, username=None):
    """
    Append a security event to the JSON audit log configured in AUDIT_LOG_FILE

    The file is read and rewritten per event without a lock; concurrent writers
    can drop an entry.
    """
    audit_log_file = current_app.config.get('AUDIT_LOG_FILE')
    if not audit_log_file:
        return
    try:
        log_data = {
            'event': event_type,
            'username': username,
            'ip': get_client_ip(),
            'user_agent': request.headers.get('User-Agent', 'Unknown')[:100],
            'timestamp': datetime.now().strftime('%Y-%m-%d %H:%M:%S')
        }

        try:
            with open(audit_log_file, 'r', encoding='utf-8') as f:
                logs = json.load(f)
        except (FileNotFoundError, json.JSONDecodeError):
            logs = []

        logs.append(log_data)
        logs = logs[-AUDIT_LOG_MAX_ENTRIES:]

        directory = os.path.dirname(audit_log_file)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(audit_log_file, 'w', encoding='utf-8') as f:
            json.dump(logs, f, ensure_ascii=False, indent=2)
    except OSError as e:
        current_app.logger.error(f"Error logging audit event: {str(e)}")


def hash_password(password):
    return generate_password_hash(password)


def verify_password(password, password_hash):
    """Verify password against hash"""
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, password)


def authenticate_admin(email, password):
    """Return the AdminUser matching email/password, or None"""
    from models import AdminUser

    if not email or not password:
        return None
    user = AdminUser.query.filter_by(email=email.strip().lower()).first()
    if user and verify_password(password, user.password_hash):
        return user
    return None


def ensure_admin_user(app=None):
    """
    Create the configured admin account if it does not exist yet

    Reads ADMIN_EMAIL / ADMIN_NAME / ADMIN_PASSWORD from the app config.
    Must run inside an application context.

    Returns:
        AdminUser or None: The admin account, or None when no password is configured
    """
    from models import AdminUser

    app = app or current_app
    email = (app.config.get('ADMIN_EMAIL') or '').strip().lower()
    password = app.config.get('ADMIN_PASSWORD')

    existing = AdminUser.query.filter_by(email=email).first() if email else None
    if existing or not email or not password:
        return existing

    admin = AdminUser(
        name=app.config.get('ADMIN_NAME') or 'Admin',
        email=email,
        password_hash=hash_password(password)
    )
    db.session.add(admin)
    db.session.commit()
    app.logger.info(f"✓ Created admin user {email}")
    return admin


__all__ = [
    'get_client_ip',
    'log_audit_event',
    'hash_password',
    'verify_password',
    'authenticate_admin',
    'ensure_admin_user'
]
