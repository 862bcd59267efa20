"""Exception taxonomy for the weather API and its JSON rendering."""


class WeatherAPIError(Exception):
    """Base class: carries the HTTP status a handler should answer with."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'success': False, 'message': self.message}


class ValidationError(WeatherAPIError):
    status_code = 400


class NotFoundError(WeatherAPIError):
    status_code = 404


class ConflictError(WeatherAPIError):
    status_code = 409


class InternalError(WeatherAPIError):
    """Storage failure; surfaced with the underlying message."""

    status_code = 500

    def to_dict(self):
        return {'error': self.message}
