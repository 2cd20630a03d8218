"""
Project repository functions.

Implements create/read/update/delete for portfolio projects. Every write is a
single commit; datastore failures roll the session back and surface as
StorageError.
"""
from datetime import datetime

from flask import current_app
from sqlalchemy.exc import SQLAlchemyError

from models import Project
from utils.errors import NotFoundError, StorageError
from utils.validation import validate_project_payload


def _storage_failure(session, action, error):
    session.rollback()
    current_app.logger.error(f"Failed to {action}: {str(error)}")
    return StorageError(f"Failed to {action}")


def list_projects(session):
    """All projects, most recently created first."""
    try:
        return (
            session.query(Project)
            .order_by(Project.created_at.desc())
            .all()
        )
    except SQLAlchemyError as e:
        raise _storage_failure(session, 'fetch projects', e)


def count_projects(session):
    try:
        return session.query(Project).count()
    except SQLAlchemyError as e:
        raise _storage_failure(session, 'count projects', e)


def get_project(session, project_id):
    try:
        project = session.get(Project, project_id)
    except SQLAlchemyError as e:
        raise _storage_failure(session, 'fetch project', e)
    if project is None:
        raise NotFoundError('Project not found')
    return project


def create_project(session, data):
    fields = validate_project_payload(data)
    project = Project(**fields)
    session.add(project)
    try:
        session.commit()
        session.refresh(project)
    except SQLAlchemyError as e:
        raise _storage_failure(session, 'create project', e)
    current_app.logger.info(f"Created project {project.id} ({project.title})")
    return project


def update_project(session, project_id, data):
    """Apply the supplied fields; anything omitted is left as stored."""
    fields = validate_project_payload(data, partial=True)
    project = get_project(session, project_id)
    for attribute, value in fields.items():
        setattr(project, attribute, value)
    # Refresh even when nothing changed; never move backwards.
    project.updated_at = max(datetime.utcnow(), project.updated_at or project.created_at)
    try:
        session.commit()
        session.refresh(project)
    except SQLAlchemyError as e:
        raise _storage_failure(session, 'update project', e)
    current_app.logger.info(f"Updated project {project.id} ({', '.join(fields) or 'timestamp only'})")
    return project


def delete_project(session, project_id):
    project = get_project(session, project_id)
    session.delete(project)
    try:
        session.commit()
    except SQLAlchemyError as e:
        raise _storage_failure(session, 'delete project', e)
    current_app.logger.info(f"Deleted project {project_id}")
    return True
