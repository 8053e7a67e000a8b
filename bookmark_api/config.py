# config.py
import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    DATABASE_PATH = os.environ.get('DB_PATH') or 'bookmarks.db'
    PORT = int(os.environ.get('PORT') or 4000)
    CORS_ORIGINS = os.environ.get('CORS_ORIGINS') or '*'
    LOG_LEVEL = (os.environ.get('LOG_LEVEL') or 'INFO').upper()
    DEBUG = os.environ.get('FLASK_DEBUG', '').lower() in ('1', 'true', 'yes')
    TESTING = False
    RESTX_ERROR_404_HELP = False
    RESTX_MASK_SWAGGER = False


class TestingConfig(Config):
    TESTING = True
    DATABASE_PATH = ':memory:'
