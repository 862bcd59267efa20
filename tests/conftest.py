import pytest

from weather_api import create_app
from weather_api.extensions import db as _db
from weather_api.models.weather import WeatherRecord
from config import TestConfig


@pytest.fixture(scope='session')
def app():
    """Create app with test config."""
    app = create_app(TestConfig)
    return app


@pytest.fixture(autouse=True)
def setup_db(app):
    """Create tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture(autouse=True)
def default_validation(app):
    """Tests that flip STRICT_VALIDATION get it reset afterwards."""
    yield
    app.config['STRICT_VALIDATION'] = TestConfig.STRICT_VALIDATION


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield _db.session


@pytest.fixture
def store(app):
    return app.extensions['weather_store']


@pytest.fixture
def weather_payload():
    """A complete, valid create/update body."""
    return {
        'city': 'Test City',
        'temperature': 25.5,
        'humidity': 60,
        'pressure': 1013.25,
        'description': 'Sunny',
        'wind_speed': 10.5,
        'visibility': 15.0,
    }


@pytest.fixture
def sample_records(db_session):
    """Insert New York, London and Tokyo."""
    rows = [
        ('New York', 22.5, 65, 1013.25, 'Partly cloudy', 15.2, 10.0),
        ('London', 18.3, 72, 1008.5, 'Light rain', 12.8, 8.5),
        ('Tokyo', 28.7, 58, 1015.8, 'Sunny', 8.4, 15.0),
    ]
    records = []
    for city, temp, hum, pres, desc, wind, vis in rows:
        record = WeatherRecord(
            city=city,
            temperature=temp,
            humidity=hum,
            pressure=pres,
            description=desc,
            wind_speed=wind,
            visibility=vis,
        )
        db_session.add(record)
        records.append(record)
    db_session.commit()
    return records
