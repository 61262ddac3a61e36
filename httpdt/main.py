"""Flask host that stamps the HTTP Date header on every response."""

import logging
from flask import Flask, current_app, jsonify

from .cache import DateHeaderCache
from .clock import Clock
from .config import settings
from .exceptions import ClockUnavailable, HttpdtError, InvalidInstant

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def get_cache() -> DateHeaderCache:
    """Return the DateHeaderCache registered on the current app."""
    return current_app.extensions["httpdt"]


def stamp_date_header(response):
    """
    Set the Date header on an outgoing response.

    Registered with Flask's after_request. A server without a usable clock
    must not send Date (RFC 7231, section 7.1.1.2), so ClockUnavailable
    leaves the header off instead of failing the response.
    """
    if not settings.stamp_responses:
        return response

    name = settings.header_name
    if name in response.headers and not settings.overwrite_existing:
        return response

    try:
        response.headers[name] = get_cache().header()
    except ClockUnavailable as e:
        logger.warning(f"Omitting {name} header: {e.message}")

    return response


# Error handlers
def handle_clock_unavailable(error):
    """Handle ClockUnavailable exceptions."""
    response = {
        "error": {
            "type": "ClockUnavailable",
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), 503


def handle_invalid_instant(error):
    """Handle InvalidInstant exceptions."""
    response = {
        "error": {
            "type": "InvalidInstant",
            "message": error.message,
            "details": {"secs": error.details.get("secs")}
        }
    }
    return jsonify(response), 400


def handle_httpdt_error(error):
    """Handle generic HttpdtError exceptions."""
    response = {
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    if error.details:
        response["error"]["details"] = error.details
    return jsonify(response), 500


def handle_internal_error(error):
    """Handle internal server errors."""
    logger.error(f"Internal error: {error}")
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


def init_app(app: Flask, cache: DateHeaderCache | None = None) -> Flask:
    """
    Register Date header stamping and error handlers on a Flask app.

    Args:
        app: Application to configure
        cache: Shared snapshot cell (default: one reading the wall clock)

    Returns:
        The same app, for chaining
    """
    if cache is None:
        cache = DateHeaderCache()

    app.extensions["httpdt"] = cache
    app.after_request(stamp_date_header)

    app.register_error_handler(ClockUnavailable, handle_clock_unavailable)
    app.register_error_handler(InvalidInstant, handle_invalid_instant)
    app.register_error_handler(HttpdtError, handle_httpdt_error)
    app.register_error_handler(500, handle_internal_error)

    logger.info(f"Stamping {settings.header_name} header on responses")
    return app


def create_app(clock: Clock | None = None) -> Flask:
    """Create the demo application.

    Args:
        clock: Clock to read (default: the host wall clock)
    """
    app = Flask(__name__)
    init_app(app, DateHeaderCache(clock))

    # Health check endpoint
    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok"})

    @app.route("/now")
    def now():
        """Current snapshot as header value and raw seconds."""
        snapshot = get_cache().refresh()
        return jsonify({
            "date": snapshot.for_header(),
            "raw": snapshot.raw()
        })

    @app.route("/at/<int:secs>")
    def at(secs: int):
        """Header value for an explicit number of seconds since the epoch."""
        snapshot = get_cache().snapshot.set(secs)
        return jsonify({
            "date": snapshot.for_header(),
            "raw": snapshot.raw()
        })

    return app


app = create_app()


if __name__ == "__main__":
    app.run(debug=True)
