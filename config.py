import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).lower() in ('true', '1', 'yes')


class Config:
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-change-me')
    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///weather.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {'pool_pre_ping': True}

    API_VERSION = '1.0.0'

    # Storage bootstrap. Turn CREATE_TABLES off when Alembic owns the schema.
    CREATE_TABLES = _env_flag('CREATE_TABLES', 'true')
    SEED_SAMPLE_DATA = _env_flag('SEED_SAMPLE_DATA', 'true')

    # Range checks and city sanitization on create/update
    STRICT_VALIDATION = _env_flag('STRICT_VALIDATION', 'false')

    # Dashboard / browser clients
    CORS_ORIGINS = os.getenv('CORS_ORIGINS', '*')

    # Server
    HOST = os.getenv('HOST', '0.0.0.0')
    PORT = int(os.getenv('PORT', '3000'))

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SEED_SAMPLE_DATA = False
    STRICT_VALIDATION = False
