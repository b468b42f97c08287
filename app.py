"""HTTP API: a root health check and a stub data-creation endpoint."""
from flask import Flask
from dotenv import load_dotenv

from config import settings
from core.logger import logger, setup_logger
from routes import register_all_routes

# Load environment variables
load_dotenv()

# Setup logging
setup_logger(log_level=settings.log_level, log_file=settings.log_file)

app = Flask(__name__)

register_all_routes(app)

if settings.auth_required and not settings.is_auth_configured:
    logger.warning(
        "AUTH_REQUIRED is set but API_SECRET_KEY is empty. "
        "Every request to protected routes will be rejected with 401."
    )


if __name__ == '__main__':
    logger.info("Starting API server")
    app.run(host=settings.api_host, port=settings.api_port)
