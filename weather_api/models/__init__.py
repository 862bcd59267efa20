from weather_api.models.weather import WeatherRecord

__all__ = ['WeatherRecord']
