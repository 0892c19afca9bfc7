"""
Safari Admin - Safari Tourism Administration Console
Flask application factory and initialization
"""

import os
import click
import logging
from flask import Flask, render_template, redirect, url_for
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

from config import config  # noqa: E402
from extensions import login_manager, csrf  # noqa: E402
from database import close_db  # noqa: E402


def create_app(config_name=None):
    """
    Application factory for Flask app.

    Args:
        config_name: Configuration name ('development', 'production', 'test')

    Returns:
        Flask application instance
    """
    if config_name is None:
        config_name = os.environ.get('FLASK_ENV', 'development')

    config_class = config[config_name]
    if hasattr(config_class, 'validate'):
        config_class.validate()

    app = Flask(__name__)
    app.config.from_object(config_class)

    initialize_extensions(app)
    register_blueprints(app)
    register_error_handlers(app)
    register_cli_commands(app)
    register_context_processors(app)
    register_teardown_handlers(app)
    configure_logging(app)

    return app


def initialize_extensions(app):
    """Initialize Flask extensions."""
    login_manager.init_app(app)
    csrf.init_app(app)


def register_blueprints(app):
    """Register Flask blueprints."""
    from blueprints.auth.routes import auth_bp
    from blueprints.admin import admin_bp
    from blueprints.api.routes import api_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')
    app.register_blueprint(api_bp, url_prefix='/api')

    @app.route('/')
    def index():
        """Redirect to the dashboard or the login screen."""
        from flask_login import current_user

        if current_user.is_authenticated:
            return redirect(url_for('admin.dashboard'))
        return redirect(url_for('auth.login'))


def register_error_handlers(app):
    """Register error handlers."""

    @app.errorhandler(404)
    def not_found_error(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        app.logger.error(f'Unhandled error: {error}')
        return render_template('errors/500.html'), 500

    @app.errorhandler(403)
    def forbidden_error(error):
        return render_template('errors/403.html'), 403


def register_cli_commands(app):
    """Register Flask CLI commands."""

    @app.cli.command('create-admin')
    @click.argument('email')
    @click.password_option()
    def create_admin_command(email, password):
        """Create a confirmed auth user carrying the admin role."""
        from models.user import create_admin_user

        with app.app_context():
            try:
                user = create_admin_user(email, password, role=app.config['ADMIN_ROLE'])
                click.echo(f"Admin user created successfully! ID: {user['id']}")
            except Exception as e:
                click.echo(f'Error creating admin user: {str(e)}', err=True)

    @app.cli.command('grant-admin')
    @click.argument('email')
    def grant_admin_command(email):
        """Grant the admin role to an existing auth user."""
        from models.user import get_user_by_email, set_app_role

        with app.app_context():
            try:
                user = get_user_by_email(email)
                if user is None:
                    click.echo(f'No user with email {email}', err=True)
                    return
                set_app_role(user['id'], app.config['ADMIN_ROLE'])
                click.echo(f'Admin role granted to {email}')
            except Exception as e:
                click.echo(f'Error granting admin role: {str(e)}', err=True)


def register_context_processors(app):
    """Register template context processors."""

    @app.context_processor
    def utility_processor():
        """Inject utility functions into templates."""
        from utils.permissions import get_menu_items
        from datetime import datetime

        return {
            'get_menu_items': get_menu_items,
            'current_year': datetime.now().year,
            'app_name': app.config.get('APP_NAME', 'Safari Admin'),
            'app_version': app.config.get('APP_VERSION', '1.0.0')
        }

    @app.template_filter('format_date')
    def format_date_filter(value, format='%b %d, %Y'):
        """Format an ISO date/timestamp string."""
        from utils.helpers import format_date
        return format_date(value, format)

    @app.template_filter('truncate_text')
    def truncate_text_filter(text, max_length=80):
        from utils.helpers import truncate_text
        return truncate_text(text, max_length)

    @app.template_filter('status_badge')
    def status_badge_filter(status):
        """Map a status value to its badge CSS class."""
        return {
            'pending': 'badge-warning',
            'awaiting_payment': 'badge-info',
            'confirmed': 'badge-success',
            'responded': 'badge-success',
            'cancelled': 'badge-secondary',
            'archived': 'badge-secondary',
            'failed': 'badge-danger',
            'spam': 'badge-danger',
        }.get(status, 'badge-light')


def register_teardown_handlers(app):
    """Register teardown handlers."""

    @app.teardown_appcontext
    def teardown_db(error):
        """Drop the Supabase client at the end of the app context."""
        close_db(error)


def configure_logging(app):
    """Configure application logging."""
    if not app.debug and not app.testing:
        if not os.path.exists('logs'):
            os.mkdir('logs')

        file_handler = logging.FileHandler('logs/safari_admin.log')
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        file_handler.setLevel(logging.INFO)
        app.logger.addHandler(file_handler)

        app.logger.setLevel(logging.INFO)
        app.logger.info('Safari Admin startup')
    else:
        app.logger.setLevel(logging.DEBUG)


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', debug=True)
