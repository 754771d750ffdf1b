from __future__ import annotations

import asyncio
import logging

from ramayana.core.config import settings
from ramayana.core.errors import ReaderError
from ramayana.core.models import Document
from ramayana.core.sample import SAMPLE_JSON
from ramayana.adapters.bundle.base import ResourceBundle
from ramayana.services.decode_service import decode_document

logger = logging.getLogger(__name__)


class DocumentLoader:
    """Resolve the Document from the bundle, falling back to the embedded sample.

    Order is fixed and the first success wins:
      1) the bundled resource `resource_name`
      2) the embedded JSON string
    If both fail, `load` returns None. Errors are logged, never raised.
    """

    def __init__(
        self,
        bundle: ResourceBundle,
        resource_name: str | None = None,
        fallback: str = SAMPLE_JSON,
    ):
        self.bundle = bundle
        self.resource_name = resource_name or settings.BUNDLE_RESOURCE
        self.fallback = fallback
        self.load_source: str | None = None

    def _load_bundle(self) -> Document | None:
        try:
            data = self.bundle.read(self.resource_name)
            return decode_document(data, source=self.resource_name)
        except (ReaderError, OSError) as e:
            logger.warning("bundled document unavailable from %s: %s", self.bundle.describe(), e)
            return None

    def _load_embedded(self) -> Document | None:
        try:
            return decode_document(self.fallback, source="embedded")
        except ReaderError as e:
            logger.error("embedded document failed to decode: %s", e)
            return None

    def load(self) -> Document | None:
        doc = self._load_bundle()
        if doc is not None:
            self.load_source = "bundle"
            logger.info("loaded %d kanda(s) from %s", len(doc.kandas), self.resource_name)
            return doc

        doc = self._load_embedded()
        if doc is not None:
            self.load_source = "embedded"
            logger.info("loaded embedded sample document")
            return doc

        self.load_source = None
        return None

    async def load_async(self) -> Document | None:
        # File I/O and decoding stay off the event loop thread.
        return await asyncio.to_thread(self.load)
