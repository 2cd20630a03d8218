"""
Repositories Package - Data access functions
Each function takes the SQLAlchemy session as its first argument.
"""

from .projects import (
    list_projects,
    get_project,
    create_project,
    update_project,
    delete_project,
    count_projects
)

__all__ = [
    'list_projects',
    'get_project',
    'create_project',
    'update_project',
    'delete_project',
    'count_projects'
]
