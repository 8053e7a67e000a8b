import logging

from flask import Flask, jsonify
from flask_cors import CORS
from flask_restx import Api
from werkzeug.exceptions import HTTPException

from .api.bookmarks import bookmarks_ns
from .config import Config
from .errors import NotFoundError, StorageError, ValidationError
from .services.bookmark_service import BookmarkService
from .utils.database import BookmarkDatabase


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Set up logging
    log_level = app.config['LOG_LEVEL'].upper()
    logging.basicConfig(level=log_level,
                        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    app.logger.setLevel(log_level)

    # Configure CORS
    CORS(app, resources={r"/*": {
        "origins": app.config['CORS_ORIGINS'],
        "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        "allow_headers": ["Content-Type", "Authorization"],
    }})

    api = Api(app, version='1.0', title='Bookmark API',
              description='A minimal CRUD API for bookmarks backed by SQLite')

    # One connection for the lifetime of the process
    app.database = BookmarkDatabase(app.config['DATABASE_PATH'])
    app.bookmark_service = BookmarkService(app.database)

    api.add_namespace(bookmarks_ns)

    # Handlers are matched in registration order, so Exception goes last.
    @api.errorhandler(ValidationError)
    def handle_validation_error(e):
        return {'message': 'Validation failed', 'errors': e.errors}, 400

    @api.errorhandler(NotFoundError)
    def handle_not_found(e):
        return {'message': str(e)}, 404

    @api.errorhandler(StorageError)
    def handle_storage_error(e):
        return {'message': 'Database error'}, 500

    @api.errorhandler(Exception)
    def handle_unexpected_error(e):
        if isinstance(e, HTTPException):
            return {'message': e.description}, e.code
        app.logger.error(f'An unhandled exception occurred: {str(e)}')
        return {'message': 'Internal Server Error'}, 500

    @app.errorhandler(500)
    def handle_500_error(e):
        app.logger.error(f'An unhandled exception occurred: {str(e)}')
        return jsonify(message='Internal Server Error'), 500

    return app
