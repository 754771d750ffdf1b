from importlib import resources

from ramayana.adapters.bundle.base import ResourceBundle
from ramayana.core.errors import ResourceNotFound


class PackageBundle(ResourceBundle):
    """Resources shipped inside an importable package."""

    def __init__(self, package: str):
        self.package = package

    def read(self, name: str) -> bytes:
        try:
            resource = resources.files(self.package).joinpath(name)
        # Unknown package, a plain module, or an invalid name all mean "not bundled".
        except (ImportError, TypeError, ValueError) as e:
            raise ResourceNotFound(name, self.package) from e
        if not resource.is_file():
            raise ResourceNotFound(name, self.package)
        return resource.read_bytes()

    def describe(self) -> str:
        return f"package:{self.package}"
