"""File-backed MessageStore holding the most recent board messages."""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import parse_qs

from ..configs.settings import MAX_MSG
from ..errors import MessageStoreError

logger = logging.getLogger(__name__)

LINE_SEPARATOR = "\r\n"
FIELDS = ("id", "msg", "datetime")


@dataclass(frozen=True)
class Message:
    """A single board message. ``datetime`` is whatever the client sent."""

    id: str = ""
    msg: str = ""
    datetime: str = ""

    def to_record(self) -> str:
        """Serialize to a one-line JSON object keyed id, msg, datetime."""
        payload = {"id": self.id, "msg": self.msg, "datetime": self.datetime}
        return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_record(cls, record: str) -> "Message":
        """Decode a stored record.

        Raises:
            ValueError: If the record is not a JSON object
        """
        data = json.loads(record)
        if not isinstance(data, dict):
            raise ValueError(f"Record is not an object: {record!r}")
        return cls(**{key: _as_text(data.get(key)) for key in FIELDS})

    @classmethod
    def from_form(cls, body: Union[str, bytes]) -> "Message":
        """Decode a url-encoded form body into a Message.

        Only ``id``, ``msg`` and ``datetime`` are read; anything else in the
        body is ignored. Missing fields default to an empty string and for
        repeated keys the first value wins.
        """
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        parsed = parse_qs(body, keep_blank_values=True)
        return cls(**{key: parsed.get(key, [""])[0] for key in FIELDS})


def _as_text(value: object) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class MessageStore:
    """Ordered, bounded list of serialized messages, newest first.

    Every append rewrites the backing file in full. The in-memory update is
    serialized with a lock but the file write is not. Each rewrite lands as a
    whole file swap, so overlapping writers race on ordering and the last
    rewrite wins, but the file never mixes two payloads.
    """

    def __init__(self, path: Union[str, Path], max_messages: int = MAX_MSG) -> None:
        if max_messages < 1:
            raise ValueError("max_messages must be at least 1")
        self._path = Path(path)
        self._max_messages = max_messages
        self._records: List[str] = []
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    @property
    def max_messages(self) -> int:
        return self._max_messages

    @property
    def records(self) -> List[str]:
        """Copy of the serialized records, newest first."""
        with self._lock:
            return list(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def load(self, path: Optional[Union[str, Path]] = None) -> List[str]:
        """Replace the in-memory records with the contents of ``path``.

        A missing or unreadable file leaves the store empty.

        Returns:
            The loaded records, newest first
        """
        source = Path(path) if path is not None else self._path
        try:
            with source.open(encoding="utf-8", newline="") as handle:
                text = handle.read()
        except FileNotFoundError:
            logger.info(f"No message file at {source}, starting empty")
            text = ""
        except OSError as e:
            logger.warning(f"Could not read message file {source}: {e}")
            text = ""

        records = [line for line in text.split(LINE_SEPARATOR) if line.strip()]
        records = records[: self._max_messages]
        with self._lock:
            self._records = records
        logger.info(f"Loaded {len(records)} message(s) from {source}")
        return list(records)

    def append(self, id: str, msg: str, datetime: str) -> Message:
        """Store a new message at the front and persist the whole list.

        Raises:
            MessageStoreError: If the file rewrite fails; the in-memory
                list keeps the new message regardless
        """
        message = Message(id=_as_text(id), msg=_as_text(msg), datetime=_as_text(datetime))
        record = message.to_record()
        logger.info("add Message:" + record)

        with self._lock:
            self._records.insert(0, record)
            del self._records[self._max_messages:]

        self.persist()
        return message

    def persist(self, path: Optional[Union[str, Path]] = None) -> None:
        """Overwrite ``path`` with every record joined by CRLF."""
        target = Path(path) if path is not None else self._path
        payload = LINE_SEPARATOR.join(self.records)
        tmp_name = None
        try:
            # newline="" keeps the CRLF separators byte-exact on every platform
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                newline="",
                dir=target.parent,
                prefix=f".{target.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                tmp_name = handle.name
                handle.write(payload)
            os.replace(tmp_name, target)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(f"Failed to write message file {target}: {e}")
            raise MessageStoreError(f"Could not write {target}: {e}") from e

    def messages(self) -> List[Message]:
        """Decoded messages, newest first. Undecodable lines are skipped."""
        decoded = []
        for record in self.records:
            try:
                decoded.append(Message.from_record(record))
            except (ValueError, TypeError):
                logger.debug(f"Skipping undecodable record: {record!r}")
        return decoded

