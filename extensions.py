"""
Extensions Module - Centralized initialization of Flask extensions
Decouples extensions from the application factory to avoid circular imports
and enable better testing.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Initialize extensions without binding to app
db = SQLAlchemy()
login_manager = LoginManager()
# API-only service: no login page to redirect to, unauthorized_handler answers 401
login_manager.login_view = None
login_manager.session_protection = 'strong'

__all__ = ['db', 'login_manager']
