"""
Projects Routes - CRUD endpoints over the projects repository
Errors raised by the repository are rendered by the app-level error handlers.
"""

from flask import jsonify, request
from flask_login import login_required
from extensions import db
from repositories import projects as project_repo
from . import projects_bp


def get_json_body():
    """Decoded JSON body, or None when it is missing or malformed"""
    return request.get_json(silent=True)


@projects_bp.route('/projects', methods=['GET'])
def list_projects():
    """All projects, newest first"""
    projects = project_repo.list_projects(db.session)
    return jsonify([project.to_dict() for project in projects])


@projects_bp.route('/projects/<project_id>', methods=['GET'])
def get_project(project_id):
    project = project_repo.get_project(db.session, project_id)
    return jsonify(project.to_dict())


@projects_bp.route('/projects', methods=['POST'])
@projects_bp.route('/projects/create', methods=['POST'])
@login_required
def create_project():
    """Create a project (admin only)"""
    project = project_repo.create_project(db.session, get_json_body())
    return jsonify(project.to_dict()), 201


@projects_bp.route('/projects/<project_id>', methods=['PUT'])
@login_required
def update_project(project_id):
    """Apply a partial update (admin only)"""
    project = project_repo.update_project(db.session, project_id, get_json_body())
    return jsonify(project.to_dict())


@projects_bp.route('/projects/<project_id>', methods=['DELETE'])
@login_required
def delete_project(project_id):
    """Permanently delete a project (admin only)"""
    project_repo.delete_project(db.session, project_id)
    return jsonify({'success': True})
