"""HTML rendering for the index and login pages."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence, Union

from jinja2 import Environment, Template

from ..configs.settings import DEFAULT_PROMPT, DEFAULT_TITLE
from ..errors import TemplateNotFoundError
from .messages import Message

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index.html"
LOGIN_TEMPLATE = "login.html"
# Partial included once per record by the index template
DATA_ITEM_PARTIAL = "data_item"


def _read_template(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise TemplateNotFoundError(f"Template not readable: {path} ({e})") from e


def record_to_message(record: str) -> Optional[Message]:
    """Jinja filter: decode a stored record, or None when it is not JSON."""
    try:
        return Message.from_record(record)
    except ValueError:
        return None


class PageRenderer:
    """Render board pages from template text read once at startup.

    Args:
        env: Jinja environment to compile with (normally ``app.jinja_env``)
        template_dir: Directory holding ``index.html`` and ``login.html``
        title: Page title passed to the index template
        prompt: Static prompt text passed to the index template
    """

    def __init__(
        self,
        env: Environment,
        template_dir: Union[str, Path],
        title: str = DEFAULT_TITLE,
        prompt: str = DEFAULT_PROMPT,
    ) -> None:
        template_dir = Path(template_dir)
        env.filters.setdefault("from_record", record_to_message)
        self.title = title
        self.prompt = prompt
        self._index: Template = env.from_string(_read_template(template_dir / INDEX_TEMPLATE))
        self._login: Template = env.from_string(_read_template(template_dir / LOGIN_TEMPLATE))
        # The partial is loaded by the index template at render time; check it exists now
        env.from_string(_read_template(template_dir / f"{DATA_ITEM_PARTIAL}.html"))
        logger.info(f"Loaded page templates from {template_dir}")

    def render_index(self, messages: Sequence[str]) -> str:
        return self._index.render(
            title=self.title,
            content=self.prompt,
            data=list(messages or []),
            filename=DATA_ITEM_PARTIAL,
        )

    def render_login(self) -> str:
        return self._login.render()
