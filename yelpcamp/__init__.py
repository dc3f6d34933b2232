"""
YelpCamp - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, render_template
from yelpcamp.extensions import db, login_manager
from yelpcamp.config import Config


def create_app(config_class=Config, store=None):
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (default: Config)
        store: Persistence object handed to every handler; defaults to a
            CampgroundStore over the application's database

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    app.logger.setLevel(getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO))

    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login_form'

    if store is None:
        from yelpcamp.store import CampgroundStore
        store = CampgroundStore(db)
    app.extensions['yelpcamp_store'] = store

    # Register blueprints
    from yelpcamp.auth import auth_bp
    from yelpcamp.campgrounds import campgrounds_bp
    from yelpcamp.comments import comments_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(campgrounds_bp)
    app.register_blueprint(comments_bp)

    # Request-scoped identity and store
    from yelpcamp.context import build_request_context, inject_current_user
    app.before_request(build_request_context)
    app.context_processor(inject_current_user)

    # User loader for Flask-Login: a failed lookup propagates as StoreError
    @login_manager.user_loader
    def load_user(user_id):
        from yelpcamp.context import get_store
        from yelpcamp.store import ErrorKind
        result = get_store().get_user(user_id)
        if result.error is ErrorKind.NOT_FOUND:
            return None
        return result.unwrap()

    @app.errorhandler(404)
    def not_found(error):
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def server_error(error):
        return render_template('errors/500.html'), 500

    from yelpcamp.seed import register_commands, seed_demo_data
    register_commands(app)

    # Create database tables
    with app.app_context():
        uri = app.config['SQLALCHEMY_DATABASE_URI']
        if uri.startswith('sqlite:///') and ':memory:' not in uri:
            os.makedirs(os.path.dirname(uri[len('sqlite:///'):]) or '.', exist_ok=True)
        db.create_all()
        if app.config.get('SEED_ON_STARTUP'):
            seed_demo_data(store)

    return app
