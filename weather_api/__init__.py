import logging
from flask import Flask, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, NotFound

from config import Config

logger = logging.getLogger(__name__)


def create_app(config_class=None):
    app = Flask(__name__)
    app.config.from_object(config_class or Config)

    # Accept Heroku-style DATABASE_URL (postgres:// -> postgresql://)
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = db_uri.replace('postgres://', 'postgresql://', 1)

    # Logging
    logging.basicConfig(
        level=getattr(logging, app.config.get('LOG_LEVEL', 'INFO')),
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    )

    # Extensions
    from weather_api.extensions import db, migrate, cors
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(app, resources={
        r'/api/*': {'origins': app.config.get('CORS_ORIGINS', '*')},
        r'/health': {'origins': app.config.get('CORS_ORIGINS', '*')},
    })

    # Storage adapter, one per app
    from weather_api import models  # noqa: F401  (registers tables)
    from weather_api.services.weather_store import WeatherStore
    store = WeatherStore(db)
    app.extensions['weather_store'] = store
    with app.app_context():
        store.initialize(
            create_tables=app.config.get('CREATE_TABLES', True),
            seed=app.config.get('SEED_SAMPLE_DATA', True),
        )

    # Register blueprints
    from weather_api.routes import register_blueprints
    register_blueprints(app)

    register_error_handlers(app)
    return app


def register_error_handlers(app):
    from weather_api.errors import WeatherAPIError, InternalError
    from weather_api.extensions import db

    @app.errorhandler(WeatherAPIError)
    def handle_api_error(error):
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_storage_error(error):
        db.session.rollback()
        logger.error(f"Storage failure: {error}", exc_info=True)
        return handle_api_error(InternalError(str(error)))

    @app.errorhandler(NotFound)
    def handle_not_found(error):
        return jsonify({'success': False, 'message': 'API endpoint not found'}), 404

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        return jsonify({'success': False, 'message': error.description}), error.code

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        logger.error(f"Unhandled error: {error}", exc_info=True)
        return jsonify({
            'success': False,
            'message': 'Something went wrong!',
            'error': str(error),
        }), 500
