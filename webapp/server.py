"""Frontend server: one fresh view per page load."""
from flask import Flask, render_template
from dotenv import load_dotenv

from config import settings
from constants import Messages
from core.logger import logger, setup_logger
from models.view_models import ViewStatus
from services.api_client import ApiClient
from webapp.view import MessageView

load_dotenv()

setup_logger(log_level=settings.log_level, log_file=settings.log_file)

app = Flask(__name__)


def create_view() -> MessageView:
    """Create an unmounted view bound to the configured API address."""
    client = ApiClient(settings.webapp_api_url)
    return MessageView(client.get_root_message)


@app.route('/')
def index():
    """Mount a new view and render the page."""
    view = create_view()
    view.mount()

    error_notice = None
    if settings.webapp_show_errors and view.status == ViewStatus.FAILED:
        error_notice = Messages.FETCH_FAILED.format(error=view.error)

    return render_template('index.html', view=view, error_notice=error_notice)


if __name__ == '__main__':
    logger.info(f"Starting webapp server, API at {settings.webapp_api_url}")
    app.run(host=settings.webapp_host, port=settings.webapp_port)
