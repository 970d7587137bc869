"""
Flask application factory.
"""
import os
from flask import Flask
from utc_converter.config_loader import load_settings


def create_app(config_name='development'):
    """Create and configure the Flask application."""
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    if config_name == 'production':
        app.config.from_object('flask_app.config.ProductionConfig')
    elif config_name == 'testing':
        app.config.from_object('flask_app.config.TestingConfig')
    else:
        app.config.from_object('flask_app.config.DevelopmentConfig')

    # Converter settings come from config.ini or CONVERTER_* environment variables
    app.config['CONVERTER_SETTINGS'] = load_settings(app.config['CONVERTER_CONFIG_FILE'])

    # Ensure instance folder exists for the geocode cache database
    try:
        os.makedirs(app.instance_path, exist_ok=True)
    except OSError:
        pass

    # Initialize extensions
    from flask_app.models import db
    db.init_app(app)

    # Register blueprints
    from flask_app.routes.main import main_bp

    app.register_blueprint(main_bp)

    # Create database tables
    with app.app_context():
        db.create_all()

    return app
