# bulletin_board/__init__.py
from typing import Optional

from flask import Flask
from flask_cors import CORS

from .configs import Settings, get_settings
from .routes import pages_bp
from .services import MessageStore, PageRenderer


def create_app(settings: Optional[Settings] = None) -> Flask:
    """Build the board app. Templates and stored messages are loaded before
    the app is returned, so no request can see a half-loaded store.

    Raises:
        TemplateNotFoundError: If a page template is missing
    """
    settings = settings or get_settings()

    app = Flask(__name__, template_folder=str(settings.template_dir), static_folder=None)
    app.config["UNKNOWN_PATH_STATUS"] = settings.unknown_path_status
    CORS(app)

    renderer = PageRenderer(
        app.jinja_env,
        settings.template_dir,
        title=settings.title,
        prompt=settings.prompt,
    )
    store = MessageStore(settings.data_filename, max_messages=settings.max_messages)
    store.load()

    app.extensions["page_renderer"] = renderer
    app.extensions["message_store"] = store

    app.register_blueprint(pages_bp)

    return app
