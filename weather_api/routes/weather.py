import logging
import re
from flask import Blueprint, jsonify, request, current_app

from weather_api.errors import ValidationError, NotFoundError, ConflictError
from weather_api.services.weather_store import DuplicateCityError
from weather_api.validation import (
    INT64_MAX, INT64_MIN, validate_weather_payload, sanitize_city_name,
)

logger = logging.getLogger(__name__)

weather_bp = Blueprint('weather', __name__)

_RECORD_ID_RE = re.compile(r'[+-]?[0-9]+')


def _store():
    return current_app.extensions['weather_store']


def _parse_record_id(raw_id):
    """Plain decimal ids within the 64-bit range; anything else can never match a row."""
    if _RECORD_ID_RE.fullmatch(raw_id):
        record_id = int(raw_id)
        if INT64_MIN <= record_id <= INT64_MAX:
            return record_id
    raise NotFoundError(f'Weather data with ID {raw_id} not found')


def _validated_body():
    """Parse the JSON body and run the write-path validation chain."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be a JSON object')

    strict = current_app.config.get('STRICT_VALIDATION', False)
    fields = validate_weather_payload(data, enforce_ranges=strict)
    if strict:
        fields['city'] = sanitize_city_name(fields['city'])
        if not fields['city']:
            raise ValidationError('City name is empty after sanitization')
    return fields


@weather_bp.route('', methods=['GET'])
def list_weather():
    """All records, city ascending."""
    records = _store().list_all()
    return jsonify({
        'success': True,
        'data': [r.to_dict() for r in records],
        'count': len(records),
    })


@weather_bp.route('/search/', defaults={'query': ''})
@weather_bp.route('/search/<query>')
def search_weather(query):
    """Case-insensitive substring search on city name."""
    records = _store().search_by_city_substring(query)
    return jsonify({
        'success': True,
        'data': [r.to_dict() for r in records],
        'count': len(records),
        'query': query,
    })


@weather_bp.route('/<city>', methods=['GET'])
def get_weather_by_city(city):
    record = _store().find_by_city(city)
    if not record:
        raise NotFoundError(f'Weather data not found for city: {city}')
    return jsonify({'success': True, 'data': record.to_dict()})


@weather_bp.route('', methods=['POST'])
def create_weather():
    fields = _validated_body()
    try:
        result = _store().insert(fields)
    except DuplicateCityError:
        logger.warning(f"Rejected duplicate city on create: {fields['city']}")
        raise ConflictError(f"Weather data for {fields['city']} already exists. Use PUT to update.")

    record = _store().get(result.id)
    if record is None:
        raise NotFoundError(f'Weather data with ID {result.id} not found')
    logger.info(f"Created weather record {result.id} for {fields['city']}")
    return jsonify({
        'success': True,
        'message': 'Weather data added successfully',
        'data': record.to_dict(),
    }), 201


@weather_bp.route('/<record_id>', methods=['PUT'])
def update_weather(record_id):
    """Full replacement of every mutable field."""
    fields = _validated_body()
    parsed_id = _parse_record_id(record_id)
    try:
        result = _store().update(parsed_id, fields)
    except DuplicateCityError:
        logger.warning(f"Rejected update of {parsed_id}: city {fields['city']} taken")
        raise ConflictError(f"Weather data for {fields['city']} already exists.")

    if result.affected == 0:
        raise NotFoundError(f'Weather data with ID {record_id} not found')

    record = _store().get(parsed_id)
    if record is None:
        raise NotFoundError(f'Weather data with ID {record_id} not found')
    logger.info(f"Updated weather record {parsed_id}")
    return jsonify({
        'success': True,
        'message': 'Weather data updated successfully',
        'data': record.to_dict(),
    })


@weather_bp.route('/<record_id>', methods=['DELETE'])
def delete_weather(record_id):
    parsed_id = _parse_record_id(record_id)
    result = _store().delete(parsed_id)
    if result.affected == 0:
        raise NotFoundError(f'Weather data with ID {record_id} not found')

    logger.info(f"Deleted weather record {parsed_id}")
    return jsonify({
        'success': True,
        'message': f'Weather data with ID {record_id} deleted successfully',
    })
