import logging
from rich.logging import RichHandler
from flask import Flask
from asgiref.wsgi import WsgiToAsgi

from routes.visualize_routes import visualize_bp
import config

logger = logging.getLogger("feedback_dashboard")


def configure_logging(level=config.LOG_LEVEL):
    """Route all logging through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
    )
    logging.root.setLevel(level)
    logging.root.handlers = [
        RichHandler(rich_tracebacks=True, show_path=True, tracebacks_show_locals=False,
                    log_time_format="[%b %d, %Y, %I:%M:%S %p]",
                    )
    ]


def create_app(overrides=None):
    """Application factory for the feedback analytics dashboard API."""
    app = Flask(__name__)
    app.config['MAX_CONTENT_LENGTH'] = config.MAX_PAYLOAD_SIZE
    app.config['ANALYTICS_API_TOKEN'] = config.ANALYTICS_API_TOKEN
    app.json.ensure_ascii = False
    if overrides:
        app.config.update(overrides)

    app.register_blueprint(visualize_bp)
    return app


# keep handlers a host (e.g. the test runner) already installed
if not logging.root.handlers:
    configure_logging()

app = create_app()
asgi_app = WsgiToAsgi(app)


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting server on {config.HOST}:{config.PORT}")
    uvicorn.run(asgi_app, host=config.HOST, port=config.PORT, log_config=None)
