"""
Projects Blueprint - JSON CRUD API for portfolio projects
Handles: Public listing and detail, admin-only create, update and delete
"""

from flask import Blueprint

projects_bp = Blueprint('projects', __name__, url_prefix='/api')

from . import routes
