"""
Seed Script: Admin account and sample projects
Creates the configured admin user and, on an empty database, the three
sample projects shown on a fresh portfolio. Safe to run repeatedly.

Usage:
    flask --app app seed-db
    python -m migrations.seed_db
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from extensions import db
from repositories import projects as project_repo
from utils.security import ensure_admin_user


SAMPLE_PROJECTS = [
    {
        'title': 'E-Commerce Dashboard',
        'description': 'A comprehensive dashboard for e-commerce businesses with real-time analytics, '
                       'inventory management, and customer insights.',
        'imageUrl': 'https://placehold.co/800x600?text=E-Commerce+Dashboard',
        'demoUrl': 'https://example.com/demo',
        'repoUrl': 'https://github.com/example/repo',
        'category': 'web',
        'tags': 'Next.js, TypeScript, Tailwind CSS, Prisma',
        'featured': True,
    },
    {
        'title': 'Finance Mobile App',
        'description': 'A mobile application for personal finance management with expense tracking, '
                       'budgeting, and investment monitoring.',
        'imageUrl': 'https://placehold.co/800x600?text=Finance+Mobile+App',
        'demoUrl': 'https://example.com/demo',
        'repoUrl': 'https://github.com/example/repo',
        'category': 'mobile',
        'tags': 'React Native, Redux, Firebase',
        'featured': False,
    },
    {
        'title': 'AI Content Generator',
        'description': 'A web application that leverages AI to generate marketing content, blog posts, '
                       'and social media captions.',
        'imageUrl': 'https://placehold.co/800x600?text=AI+Content+Generator',
        'demoUrl': 'https://example.com/demo',
        'repoUrl': 'https://github.com/example/repo',
        'category': 'web',
        'tags': 'React, Node.js, OpenAI API',
        'featured': True,
    },
]


def seed_projects(session):
    """Insert the sample projects when the table is empty. Returns how many were added."""
    if project_repo.count_projects(session) > 0:
        current_app.logger.info("Projects already present, skipping sample data")
        return 0
    for data in SAMPLE_PROJECTS:
        project_repo.create_project(session, data)
    return len(SAMPLE_PROJECTS)


def seed_database():
    """Seed admin user and sample projects. Returns a summary dict."""
    admin = ensure_admin_user()
    added = seed_projects(db.session)
    return {
        'admin': admin.email if admin else None,
        'projects_added': added,
    }


@click.command('seed-db')
@with_appcontext
def seed_db_command():
    """Seed the database with the admin account and sample projects."""
    summary = seed_database()
    if summary['admin']:
        click.echo(f"Admin user: {summary['admin']}")
    else:
        click.echo("No ADMIN_PASSWORD configured, admin user not created")
    click.echo(f"Sample projects added: {summary['projects_added']}")


if __name__ == '__main__':
    from app import create_app

    with create_app().app_context():
        print(seed_database())
