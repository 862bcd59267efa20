from weather_api.extensions import db
from sqlalchemy import func

MUTABLE_FIELDS = (
    'city', 'temperature', 'humidity', 'pressure',
    'description', 'wind_speed', 'visibility',
)


class WeatherRecord(db.Model):
    __tablename__ = 'weather_data'

    id = db.Column(db.Integer, primary_key=True)
    city = db.Column(db.String(128), nullable=False)
    temperature = db.Column(db.Float, nullable=False)
    humidity = db.Column(db.Float, nullable=False)
    pressure = db.Column(db.Float, nullable=False)
    description = db.Column(db.String(256), nullable=False)
    wind_speed = db.Column(db.Float, nullable=False)
    visibility = db.Column(db.Float, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), server_default=func.now())
    updated_at = db.Column(db.DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'city': self.city,
            'temperature': self.temperature,
            'humidity': self.humidity,
            'pressure': self.pressure,
            'description': self.description,
            'wind_speed': self.wind_speed,
            'visibility': self.visibility,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f'<WeatherRecord {self.id} {self.city!r}>'


db.Index('uq_weather_data_city_lower', func.lower(WeatherRecord.__table__.c.city), unique=True)
