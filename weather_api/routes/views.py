"""
Views blueprint: serves the weather dashboard via Jinja2.
Reads through the same storage adapter as the JSON API; all writes from
the page go through the API endpoints.
"""
import logging
from flask import Blueprint, render_template, request, current_app

from weather_api.validation import round_to_one_decimal, sanitize_city_name

logger = logging.getLogger(__name__)

views_bp = Blueprint('views', __name__)


# ── Jinja filters ──────────────────────────────────────

@views_bp.app_template_filter('one_decimal')
def one_decimal_filter(value):
    """Format a measurement with one decimal place."""
    if value is None:
        return '–'
    return f'{round_to_one_decimal(value):.1f}'


@views_bp.app_template_filter('temperature_class')
def temperature_class_filter(temp):
    """Return cold/mild/hot for card colouring."""
    if temp is None:
        return 'mild'
    if temp < 10:
        return 'cold'
    if temp >= 25:
        return 'hot'
    return 'mild'


# ── Pages ──────────────────────────────────────────────

@views_bp.route('/dashboard')
def dashboard():
    store = current_app.extensions['weather_store']
    query = sanitize_city_name(request.args.get('q', ''))
    if query:
        records = store.search_by_city_substring(query)
    else:
        records = store.list_all()
    logger.debug(f"Rendering dashboard with {len(records)} records (query={query!r})")

    return render_template(
        'dashboard.html',
        records=records,
        query=query,
        total=store.count(),
    )
