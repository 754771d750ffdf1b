"""Presentation state for the reader UI.

`ReaderViewModel` owns the one Document instance of a UI session. It is
created on the event loop the UI observes from, starts a single
background load and publishes the result back on that same loop.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable

from ramayana.core.models import Document
from ramayana.services.color_service import AccentColor, resolve_accent_color
from ramayana.services.loader_service import DocumentLoader

logger = logging.getLogger(__name__)

Subscriber = Callable[[Document | None], None]


class ReaderViewModel:
    def __init__(self, loader: DocumentLoader):
        self._loader = loader
        self._document: Document | None = None
        self._subscribers: list[Subscriber] = []
        self._lock = threading.Lock()
        # Bound to the search field; nothing filters on it.
        self.search_text = ""
        # Raises RuntimeError when no loop is running: the publish step needs one.
        self._loop = asyncio.get_running_loop()
        self._task = self._loop.create_task(self._load())

    async def _load(self) -> None:
        try:
            document = await self._loader.load_async()
        except Exception:
            logger.exception("document load failed")
            document = None
        # Continuation runs on self._loop, so readers never see a half-set slot.
        self._publish(document)

    def _publish(self, document: Document | None) -> None:
        with self._lock:
            self._document = document
            subscribers = list(self._subscribers)
        for callback in subscribers:
            try:
                callback(document)
            except Exception:
                logger.exception("subscriber %r failed", callback)

    @property
    def document(self) -> Document | None:
        return self._document

    @property
    def is_loaded(self) -> bool:
        return self._task.done()

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """Register `callback` for the load result. Returns an unsubscribe function."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    async def wait(self) -> Document | None:
        await asyncio.shield(self._task)
        return self._document

    @staticmethod
    def resolve_accent_color(hex_string: str) -> AccentColor:
        return resolve_accent_color(hex_string)
