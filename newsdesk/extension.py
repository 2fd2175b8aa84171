"""
Newsdesk Flask extension and application factory.

Usage:
    from flask import Flask
    from newsdesk import Newsdesk

    app = Flask(__name__)
    Newsdesk(app)
"""

from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from .core.config import Config
from .core.exceptions import StoreError
from .core.logging_service import LoggingService
from .modules.news import news_bp, images_bp
from .modules.news.database import NewsStore


class Newsdesk:
    """Wires configuration, the news store and the API blueprints into an app"""

    def __init__(self, app=None, config=None):
        self._config = config or {}
        self._registered_modules = []
        self.store = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app):
        # Values already set on the app (or passed in) win over the defaults
        for key, value in Config.as_dict().items():
            app.config.setdefault(key, value)
        app.config.update(self._config)

        self._open_store(app)
        self._setup_cors(app)
        self._register_blueprints(app)
        self._register_error_handlers(app)

        app.extensions['newsdesk'] = self

    def _open_store(self, app):
        news_db = app.config['NEWS_DB']
        self.store = NewsStore(news_db, app.config['NEWS_TABLE'])
        with app.app_context():
            try:
                self.store.initialize()
            except StoreError as e:
                LoggingService.critical('system', 'Could not open the news database', {
                    'path': news_db,
                    'error': str(e),
                })
                raise
            LoggingService.info('system', f"Connected to the SQLite database at {news_db}")

    def _setup_cors(self, app):
        origins = app.config.get('CORS_ORIGINS') or '*'
        if origins != '*':
            origins = [origin.strip() for origin in origins.split(',') if origin.strip()]
        CORS(app, resources={r'/api/*': {'origins': origins}}, send_wildcard=origins == '*')

    def _register_blueprints(self, app):
        for name, blueprint in (('news', news_bp), ('images', images_bp)):
            app.register_blueprint(blueprint)
            self._registered_modules.append(name)

    def _register_error_handlers(self, app):
        def json_http_error(error):
            # Only API routes answer in JSON; anything else keeps Werkzeug's page
            if not request.path.startswith('/api'):
                return error
            return jsonify({'error': error.description}), error.code

        app.register_error_handler(404, json_http_error)
        app.register_error_handler(405, json_http_error)

    def get_registered_modules(self):
        return list(self._registered_modules)


def create_app(config=None):
    """Build a Flask app with Newsdesk registered"""
    app = Flask(__name__)
    Newsdesk(app, config)
    return app
