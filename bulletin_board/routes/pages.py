"""Page routes for the message board."""

from __future__ import annotations

from flask import Blueprint, Response, current_app, request

from ..errors import MessageStoreError
from ..services.messages import Message, MessageStore
from ..services.renderer import PageRenderer

# Create pages blueprint
pages_bp = Blueprint("pages", __name__)

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE"]
NO_PAGE_BODY = "no page..."


def _get_message_store() -> MessageStore:
    """Get the message store from Flask app extensions.

    Raises:
        RuntimeError: If the store is not configured
    """
    store = current_app.extensions.get("message_store")
    if store is None:
        current_app.logger.error("Message store not found in app extensions")
        raise RuntimeError("Message store not configured")
    return store


def _get_renderer() -> PageRenderer:
    renderer = current_app.extensions.get("page_renderer")
    if renderer is None:
        current_app.logger.error("Page renderer not found in app extensions")
        raise RuntimeError("Page renderer not configured")
    return renderer


def _html(content: str) -> Response:
    return Response(content, status=200, mimetype="text/html")


def _write_index_page() -> Response:
    store = _get_message_store()
    return _html(_get_renderer().render_index(store.records))


@pages_bp.route("/", methods=["GET"])
def index() -> Response:
    """Render the message list."""
    return _write_index_page()


@pages_bp.route("/", methods=["POST"])
def post_message() -> Response:
    """Store the submitted message, then render the message list.

    Request Body:
        url-encoded ``id``, ``msg`` and ``datetime``; missing fields are
        stored as empty strings
    """
    # The whole body is buffered before it is decoded
    body = request.get_data(cache=True, as_text=True)
    message = Message.from_form(body)

    try:
        _get_message_store().append(message.id, message.msg, message.datetime)
    except MessageStoreError as e:
        # The new message is already in memory; only the file is stale
        current_app.logger.error(f"Could not persist message: {e}")

    return _write_index_page()


@pages_bp.route("/login", methods=ALL_METHODS)
def login() -> Response:
    """Render the login page. The form is not wired to any session."""
    return _html(_get_renderer().render_login())


@pages_bp.route(
    "/<path:unknown_path>",
    methods=ALL_METHODS + ["OPTIONS"],
    provide_automatic_options=False,
)
def no_page(unknown_path: str) -> Response:
    """Answer every other path with a plain-text notice."""
    status = current_app.config.get("UNKNOWN_PATH_STATUS", 200)
    current_app.logger.debug(f"No page for /{unknown_path}")
    return Response(NO_PAGE_BODY, status=status, mimetype="text/plain")
