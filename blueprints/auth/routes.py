"""
Auth Routes - Admin login backed by a server-side Flask-Login session
"""

from flask import jsonify, request, current_app
from flask_login import login_user, logout_user, login_required, current_user
from utils.errors import ValidationError
from utils.security import authenticate_admin, log_audit_event
from . import auth_bp


@auth_bp.route('/login', methods=['POST'])
def login():
    """Exchange admin credentials for a session cookie"""
    body = request.get_json(silent=True)
    if not isinstance(body, dict):
        body = {}
    password = body.get('password')
    # The admin page only asks for a password; fall back to the configured admin
    email = body.get('email') or current_app.config.get('ADMIN_EMAIL')

    errors = {}
    if not isinstance(password, str) or not password:
        errors['password'] = 'Password is required.'
    if not isinstance(email, str) or not email.strip():
        errors['email'] = 'Email is required.'
    if errors:
        raise ValidationError(fields=errors)

    user = authenticate_admin(email, password)
    if user is None:
        current_app.logger.warning(f"Rejected admin login for {email}")
        log_audit_event('failed_login', username=email)
        return jsonify({'error': 'Invalid credentials'}), 401

    login_user(user, remember=bool(body.get('remember')))
    log_audit_event('admin_login', username=user.email)
    current_app.logger.info(f"Admin {user.email} logged in")
    return jsonify({'success': True, 'user': user.to_dict()})


@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    """Logout current admin"""
    email = current_user.email
    logout_user()
    log_audit_event('admin_logout', username=email)
    return jsonify({'success': True})


@auth_bp.route('/session', methods=['GET'])
def session_status():
    """Report whether the caller holds a valid admin session"""
    if current_user.is_authenticated:
        return jsonify({'authenticated': True, 'user': current_user.to_dict()})
    return jsonify({'authenticated': False, 'user': None})
