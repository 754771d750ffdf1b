import logging

from ramayana.core.config import settings
from ramayana.core.logging import setup_logging
from ramayana.services.bundle_factory import get_bundle
from ramayana.services.loader_service import DocumentLoader
from ramayana.services.state_service import ReaderViewModel

logger = logging.getLogger(__name__)


def create_loader() -> DocumentLoader:
    bundle = get_bundle()
    logger.debug("%s using bundle %s", settings.APP_NAME, bundle.describe())
    return DocumentLoader(bundle, settings.BUNDLE_RESOURCE)


async def create_reader(loader: DocumentLoader | None = None) -> ReaderViewModel:
    """Build the reader state and wait for its one load to finish."""
    setup_logging()
    reader = ReaderViewModel(loader or create_loader())
    await reader.wait()
    return reader
