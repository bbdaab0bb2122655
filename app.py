"""Flask web app for UNO (Unified Narrative Operator)."""

# Load environment variables from .env file before other imports
from dotenv import load_dotenv  # type: ignore[import-untyped]

load_dotenv()  # noqa: E402

import os  # noqa: E402
import logging  # noqa: E402
from typing import Any, Dict, Optional  # noqa: E402
from flask import Flask  # noqa: E402
from flask_cors import CORS  # type: ignore[import-untyped]  # noqa: E402
from flask_limiter import Limiter  # type: ignore[import-untyped]  # noqa: E402
from flask_limiter.util import get_remote_address  # type: ignore[import-untyped]  # noqa: E402
from src.uno.api.routes import register_routes  # noqa: E402
from src.uno.services.text_service import DEFAULT_MAX_TEXT_LENGTH  # noqa: E402
from src.uno.utils.errors import register_error_handlers  # noqa: E402

# Configure logging
logging.basicConfig(
    level=logging.INFO if os.getenv('FLASK_ENV') != 'development' else logging.DEBUG,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def load_config() -> Dict[str, Any]:
    """
    Read application settings from the environment.

    Returns:
        Flask config mapping, including the flask-limiter RATELIMIT_* keys
    """
    return {
        "DEBUG_ERRORS": os.getenv('FLASK_ENV') == 'development',
        "RATELIMIT_STORAGE_URI": os.getenv('RATELIMIT_STORAGE_URI', 'memory://'),
        "RATELIMIT_DEFAULT": os.getenv('DEFAULT_RATE_LIMITS', '1000 per day;200 per hour'),
        "RATELIMIT_HEADERS_ENABLED": True,
        "ANALYZE_RATE_LIMIT": os.getenv('ANALYZE_RATE_LIMIT', '60 per minute'),
        "ENHANCE_RATE_LIMIT": os.getenv('ENHANCE_RATE_LIMIT', '30 per minute'),
        "MAX_TEXT_LENGTH": int(os.getenv('MAX_TEXT_LENGTH', str(DEFAULT_MAX_TEXT_LENGTH))),
    }


def create_app(config_overrides: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Build the Flask application.

    Args:
        config_overrides: Settings applied after the environment, e.g.
            {"RATELIMIT_ENABLED": False} in tests

    Returns:
        Configured Flask app with CORS, rate limiting, error handlers and routes
    """
    flask_app = Flask(__name__)
    flask_app.config.update(load_config())
    if config_overrides:
        flask_app.config.update(config_overrides)

    CORS(flask_app)

    # Storage, default limits and enablement come from the RATELIMIT_* config keys.
    # Route decorators keep only a weak proxy, so the app holds the limiter.
    limiter = Limiter(get_remote_address, app=flask_app)
    flask_app.extensions["uno_limiter"] = limiter

    register_error_handlers(flask_app, debug=flask_app.config["DEBUG_ERRORS"])
    register_routes(flask_app, limiter)

    logger.info(
        f"UNO app created (analyze limit: {flask_app.config['ANALYZE_RATE_LIMIT']}, "
        f"enhance limit: {flask_app.config['ENHANCE_RATE_LIMIT']})"
    )
    return flask_app


app = create_app()


if __name__ == '__main__':
    port = int(os.getenv('PORT', 5000))
    debug = os.getenv('FLASK_ENV') == 'development'
    app.run(host='0.0.0.0', port=port, debug=debug)
