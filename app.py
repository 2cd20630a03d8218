"""
Portfolio API - Main Application Entry Point
Application Factory Pattern for a modular architecture

This module initializes the Flask application with all necessary extensions,
configurations, and middleware. All actual route handling is delegated to blueprints.
"""

import os
from flask import Flask, jsonify
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException
from config import get_config
from extensions import db, login_manager
from utils.errors import PortfolioError, UnauthorizedError

# Import all blueprints
from blueprints.auth import auth_bp
from blueprints.projects import projects_bp


def create_app(config_name=None, config_overrides=None):
    """
    Application Factory Pattern
    Creates and configures Flask application instance

    Args:
        config_name (str): Configuration environment name (optional)
        config_overrides (dict): Settings applied on top of the selected config (optional)

    Returns:
        Flask: Configured Flask application instance
    """

    app = Flask(__name__)

    # Load configuration
    conf = get_config(config_name)
    app.config.from_object(conf)
    if config_overrides:
        app.config.update(config_overrides)

    # Fix PostgreSQL URL if needed
    db_url = app.config.get('SQLALCHEMY_DATABASE_URI')
    if db_url and db_url.startswith("postgres://"):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_url.replace(
            "postgres://", "postgresql://", 1)

    # Initialize extensions with app
    initialize_extensions(app)

    # Register blueprints
    register_blueprints(app)

    # Register error handlers
    register_error_handlers(app)

    # Register request/response hooks
    register_hooks(app)

    # Register CLI commands
    register_commands(app)

    # Health check route
    @app.route('/health')
    def health_check():
        return {'status': 'ok', 'message': 'Portfolio API is running'}, 200

    return app


def initialize_extensions(app):
    """Initialize Flask extensions with the app instance"""
    db.init_app(app)
    login_manager.init_app(app)

    @login_manager.unauthorized_handler
    def unauthorized():
        error = UnauthorizedError()
        return jsonify(error.to_dict()), error.status_code

    # Create tables if they don't exist
    with app.app_context():
        from utils.security import ensure_admin_user
        try:
            db.create_all()
            # Verify connection
            db.session.execute(text('SELECT 1'))
            app.logger.info("✓ Database initialized successfully")
            ensure_admin_user(app)
        except SQLAlchemyError as e:
            db.session.rollback()
            app.logger.error(f"✗ Database initialization failed: {str(e)}")


def register_blueprints(app):
    """Register all application blueprints"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(projects_bp)


def register_error_handlers(app):
    """Render every error as a JSON body of shape {error: ...}"""

    @app.errorhandler(PortfolioError)
    def portfolio_error(e):
        if e.status_code >= 500:
            app.logger.error(f"{type(e).__name__}: {e.message}")
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({'error': e.description or e.name}), e.code

    @app.errorhandler(SQLAlchemyError)
    def database_error(e):
        db.session.rollback()
        app.logger.error(f"Database Error: {str(e)}")
        return jsonify({'error': 'Storage failure'}), 500

    @app.errorhandler(500)
    def internal_server_error(e):
        original = getattr(e, 'original_exception', None) or e
        app.logger.error(f"Server Error: {str(original)}")
        return jsonify({'error': 'An unexpected error occurred'}), 500


def register_hooks(app):
    """Register request/response hooks"""

    @app.after_request
    def add_security_headers(response):
        """Add security headers to all responses"""
        response.headers['Content-Security-Policy'] = (
            "default-src 'none'; "
            "frame-ancestors 'none';"
        )
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'DENY'
        response.headers['Strict-Transport-Security'] = 'max-age=31536000; includeSubDomains'
        return response


def register_commands(app):
    """Register flask CLI commands"""
    from migrations.seed_db import seed_db_command
    app.cli.add_command(seed_db_command)


if __name__ == '__main__':
    # Get environment
    env = os.environ.get('FLASK_ENV', 'development')

    # Create app
    app = create_app(env)

    # Run development server
    app.run(
        host='0.0.0.0',
        port=int(os.environ.get('PORT', 5000)),
        debug=(env == 'development')
    )
