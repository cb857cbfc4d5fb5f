"""Services package for the message board.

- MessageStore: bounded, file-backed message list
- PageRenderer: HTML for the index and login pages
"""

from .messages import Message, MessageStore
from .renderer import PageRenderer

__all__ = [
    "Message",
    "MessageStore",
    "PageRenderer",
]
