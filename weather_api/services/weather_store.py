import logging
from dataclasses import dataclass

from sqlalchemy import func, inspect, text
from sqlalchemy.exc import IntegrityError

from weather_api.models.weather import WeatherRecord, MUTABLE_FIELDS

logger = logging.getLogger(__name__)

SAMPLE_DATA = [
    ('New York', 22.5, 65, 1013.25, 'Partly cloudy', 15.2, 10.0),
    ('London', 18.3, 72, 1008.5, 'Light rain', 12.8, 8.5),
    ('Tokyo', 28.7, 58, 1015.8, 'Sunny', 8.4, 15.0),
    ('Sydney', 25.1, 70, 1012.3, 'Overcast', 18.6, 12.0),
    ('Paris', 19.8, 68, 1010.2, 'Foggy', 10.3, 6.0),
]


class DuplicateCityError(Exception):
    """A record with the same city (ignoring case) already exists."""

    def __init__(self, city):
        super().__init__(f"Duplicate city: {city}")
        self.city = city


@dataclass(frozen=True)
class InsertResult:
    id: int


@dataclass(frozen=True)
class WriteResult:
    affected: int


# Same lower(city) collation as the uniqueness index; raw city breaks ties.
_CITY_ORDER = (func.lower(WeatherRecord.city).asc(), WeatherRecord.city.asc())


def _is_unique_violation(exc):
    return 'unique' in str(exc.orig).lower()


def _like_pattern(fragment):
    escaped = fragment.replace('\\', '\\\\').replace('%', '\\%').replace('_', '\\_')
    return f'%{escaped}%'


class WeatherStore:
    """Persistence for WeatherRecord rows over a Flask-SQLAlchemy handle."""

    def __init__(self, db):
        self.db = db
        self._closed = False

    @property
    def session(self):
        return self.db.session

    def initialize(self, create_tables=True, seed=True):
        """
        Create the table if asked to, then seed sample cities into an empty one.
        With create_tables off the schema belongs to migrations, and seeding
        waits until the table exists.
        """
        if create_tables:
            self.db.create_all()
        elif not self.has_table():
            logger.info(f"Table {WeatherRecord.__tablename__} not created yet; skipping seed")
            return
        if seed and self.count() == 0:
            self.seed()

    def has_table(self):
        return inspect(self.db.engine).has_table(WeatherRecord.__tablename__)

    def seed(self, rows=SAMPLE_DATA):
        """Insert sample rows, skipping cities that already exist. Returns count added."""
        added = 0
        for row in rows:
            fields = dict(zip(MUTABLE_FIELDS, row))
            if self.find_by_city(fields['city']):
                continue
            self.session.add(WeatherRecord(**fields))
            added += 1
        self.session.commit()
        logger.info(f"Seeded {added} sample weather records")
        return added

    def count(self):
        return self.session.query(func.count(WeatherRecord.id)).scalar()

    def list_all(self):
        return WeatherRecord.query.order_by(*_CITY_ORDER).all()

    def get(self, record_id):
        return self.session.get(WeatherRecord, record_id)

    def find_by_city(self, name):
        return WeatherRecord.query.filter(
            func.lower(WeatherRecord.city) == func.lower(name)
        ).first()

    def search_by_city_substring(self, fragment):
        """Case-insensitive substring match; wildcards in the fragment are literal."""
        return WeatherRecord.query.filter(
            func.lower(WeatherRecord.city).like(func.lower(_like_pattern(fragment)), escape='\\')
        ).order_by(*_CITY_ORDER).all()

    def insert(self, fields):
        record = WeatherRecord(**{f: fields[f] for f in MUTABLE_FIELDS})
        self.session.add(record)
        try:
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if not _is_unique_violation(e):
                raise
            raise DuplicateCityError(fields['city']) from e
        return InsertResult(id=record.id)

    def update(self, record_id, fields):
        """Overwrite every mutable field and refresh updated_at."""
        values = {f: fields[f] for f in MUTABLE_FIELDS}
        values['updated_at'] = func.now()
        try:
            affected = WeatherRecord.query.filter_by(id=record_id).update(
                values, synchronize_session=False
            )
            self.session.commit()
        except IntegrityError as e:
            self.session.rollback()
            if not _is_unique_violation(e):
                raise
            raise DuplicateCityError(fields['city']) from e
        self.session.expire_all()
        return WriteResult(affected=affected)

    def delete(self, record_id):
        affected = WeatherRecord.query.filter_by(id=record_id).delete(synchronize_session=False)
        self.session.commit()
        self.session.expire_all()
        return WriteResult(affected=affected)

    def ping(self):
        try:
            self.session.execute(text('SELECT 1'))
            return True
        except Exception as e:
            self.session.rollback()
            logger.warning(f"Database ping failed: {e}")
            return False

    def close(self):
        """Release pooled connections. Safe to call more than once."""
        if self._closed:
            return
        self.session.remove()
        self.db.engine.dispose()
        self._closed = True
        logger.info("Database connection closed.")
