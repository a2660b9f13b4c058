#!/usr/bin/env python3
"""
Web interface for the temperature converter
Simple Flask-based form for converting between Celsius and Fahrenheit
"""

import os
import sys
import math
import uuid
import logging
from typing import Dict, Optional
from flask import Flask, render_template, jsonify, request
from dotenv import load_dotenv

from temperature_converter.temperature_utils import (
    TemperatureConversion,
    TemperatureUnit,
    convert,
    format_field_value,
    format_temperature,
    parse_field_value,
)

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.config['SHOW_REQUEST_ID'] = True

NO_STORE_HEADERS = {
    'Cache-Control': 'no-store, no-cache, max-age=0',
    'Pragma': 'no-cache',
}


@app.template_filter('field_value')
def field_value_filter(value: float) -> str:
    return format_field_value(value)


@app.template_filter('temperature')
def temperature_filter(value: float, unit: str) -> str:
    return format_temperature(value, unit)


def _parse_field(name: str, raw: Optional[str]) -> float:
    """Parse a form field, malformed numbers become an empty field"""
    try:
        return parse_field_value(raw)
    except ValueError:
        logger.warning(f"Ignoring malformed {name} value: {raw!r}")
        return math.nan


def conversion_from_form(form) -> TemperatureConversion:
    """Build a TemperatureConversion from submitted form fields"""
    return TemperatureConversion(
        celsius=_parse_field('celsius', form.get('celsius')),
        fahrenheit=_parse_field('fahrenheit', form.get('fahrenheit')),
        last_edited_unit=TemperatureUnit.parse(form.get('last_edited_unit')),
    )


def conversion_from_json(data: Dict) -> TemperatureConversion:
    """Build a TemperatureConversion from a JSON body, null means empty"""
    def number(key):
        value = data.get(key)
        if value is None:
            return math.nan
        try:
            result = float(value)
        except OverflowError:
            raise ValueError(f"{key} is out of range")
        if not math.isfinite(result):
            raise ValueError(f"{key} must be a finite number")
        return result

    return TemperatureConversion(
        celsius=number('celsius'),
        fahrenheit=number('fahrenheit'),
        last_edited_unit=TemperatureUnit.parse(data.get('last_edited_unit')),
    )


def get_request_id() -> str:
    """Request id shown on the error page"""
    return request.headers.get('X-Request-ID') or uuid.uuid4().hex


def render_error_page(status: int = 500, request_id: Optional[str] = None):
    if request_id is None:
        request_id = get_request_id()
    body = render_template(
        'error.html',
        request_id=request_id,
        show_request_id=app.config.get('SHOW_REQUEST_ID', True),
    )
    return body, status, NO_STORE_HEADERS


@app.route('/', methods=['GET'])
def index():
    """Converter form seeded with 100°C / 212°F"""
    return render_template('index.html', conversion=TemperatureConversion.default())


@app.route('/', methods=['POST'])
def index_submit():
    """Recompute the field the user did not edit and redisplay both"""
    submitted = conversion_from_form(request.form)
    result = convert(submitted)
    logger.debug(f"Converted {submitted!r} -> {result!r}")
    return render_template('index.html', conversion=result)


@app.route('/privacy')
def privacy():
    """Privacy policy page"""
    return render_template('privacy.html')


@app.route('/error')
def error_page():
    """Error page, never cached"""
    return render_error_page(200)


@app.errorhandler(500)
def handle_server_error(error):
    request_id = get_request_id()
    original = getattr(error, 'original_exception', None) or error
    logger.error(f"Unhandled error while serving {request.path} (request {request_id}): {original}",
                 exc_info=original)
    return render_error_page(500, request_id)


@app.route('/api/convert', methods=['POST'])
def api_convert():
    """API endpoint to convert a temperature pair"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({'error': 'Expected a JSON object'}), 400

    try:
        submitted = conversion_from_json(data)
    except (TypeError, ValueError) as e:
        return jsonify({'error': f"Invalid temperature value: {e}"}), 400

    result = convert(submitted)
    logger.debug(f"API converted {submitted!r} -> {result!r}")
    return jsonify(result.to_dict())


def configure_logging() -> None:
    """Configure root logging from LOG_LEVEL / LOG_FILE"""
    log_level = os.getenv('LOG_LEVEL', 'INFO').upper()
    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = os.getenv('LOG_FILE')
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def run_web_server(host='0.0.0.0', port=5000, debug=False):
    """Run Flask web server"""
    app.run(host=host, port=port, debug=debug, use_reloader=False)


def main():
    """Main entry point"""
    load_dotenv(os.getenv('CONFIG_FILE', 'config.env'))
    configure_logging()

    host = os.getenv('WEB_HOST', '0.0.0.0')
    port = int(os.getenv('WEB_PORT', 5000))
    debug = os.getenv('WEB_DEBUG', 'false').lower() in ('1', 'true', 'yes')
    app.config['SHOW_REQUEST_ID'] = os.getenv('SHOW_REQUEST_ID', 'true').lower() in ('1', 'true', 'yes')

    logger.info("=" * 60)
    logger.info(f"Temperature converter starting on http://{host}:{port}")
    logger.info("=" * 60)
    run_web_server(host=host, port=port, debug=debug)


if __name__ == '__main__':
    main()
