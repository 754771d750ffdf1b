from ramayana.core.config import settings
from ramayana.adapters.bundle.base import ResourceBundle
from ramayana.adapters.bundle.directory import DirectoryBundle
from ramayana.adapters.bundle.memory import MemoryBundle
from ramayana.adapters.bundle.package import PackageBundle

def get_bundle() -> ResourceBundle:
    backend = (settings.BUNDLE_BACKEND or "dir").lower()
    if backend == "package":
        return PackageBundle(settings.BUNDLE_PACKAGE)
    if backend == "memory":
        return MemoryBundle()
    # default
    return DirectoryBundle(settings.DATA_DIR)
