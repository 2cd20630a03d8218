from app import create_app
from config import DevelopmentConfig, ProductionConfig, TestingConfig, get_config
from extensions import db
from migrations.seed_db import SAMPLE_PROJECTS, seed_database, seed_db_command
from repositories import projects as project_repo
from tests.factories import ADMIN_EMAIL


def test_health_check(client):
    resp = client.get('/health')
    assert resp.status_code == 200
    assert resp.get_json()['status'] == 'ok'


def test_security_headers(client):
    resp = client.get('/api/projects')
    assert resp.headers['X-Content-Type-Options'] == 'nosniff'
    assert resp.headers['X-Frame-Options'] == 'DENY'
    assert 'Content-Security-Policy' in resp.headers


def test_unknown_route_is_json_404(client):
    resp = client.get('/api/nothing-here')
    assert resp.status_code == 404
    assert 'error' in resp.get_json()


def test_method_not_allowed_is_json(client):
    resp = client.patch('/api/projects')
    assert resp.status_code == 405
    assert 'error' in resp.get_json()


def test_get_config_by_name(monkeypatch):
    monkeypatch.delenv('FLASK_ENV', raising=False)
    assert get_config('testing') is TestingConfig
    assert get_config('production') is ProductionConfig
    assert get_config('unknown') is DevelopmentConfig
    assert get_config() is DevelopmentConfig
    monkeypatch.setenv('FLASK_ENV', 'production')
    assert get_config() is ProductionConfig


def test_config_overrides_are_applied():
    app = create_app('testing', {'ADMIN_NAME': 'Owner', 'ADMIN_PASSWORD': None})
    assert app.config['ADMIN_NAME'] == 'Owner'
    assert app.config['TESTING'] is True
    with app.app_context():
        db.drop_all()


def test_seed_database_is_idempotent(app, session):
    summary = seed_database()
    assert summary == {'admin': ADMIN_EMAIL, 'projects_added': len(SAMPLE_PROJECTS)}
    assert project_repo.count_projects(session) == len(SAMPLE_PROJECTS)

    assert seed_database()['projects_added'] == 0
    assert project_repo.count_projects(session) == len(SAMPLE_PROJECTS)

    categories = {p.category for p in project_repo.list_projects(session)}
    assert categories == {'web', 'mobile'}


def test_seed_cli_command(app):
    result = app.test_cli_runner().invoke(seed_db_command)
    assert result.exit_code == 0
    assert f'Admin user: {ADMIN_EMAIL}' in result.output
    assert f'Sample projects added: {len(SAMPLE_PROJECTS)}' in result.output
