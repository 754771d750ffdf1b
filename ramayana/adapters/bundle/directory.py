from pathlib import Path

from ramayana.adapters.bundle.base import ResourceBundle
from ramayana.core.errors import ResourceNotFound


class DirectoryBundle(ResourceBundle):
    def __init__(self, root: str | Path):
        self.root = Path(root)

    def read(self, name: str) -> bytes:
        path = self.root / name
        # Logical names are flat; don't let them escape the bundle root.
        if path.resolve().parent != self.root.resolve() or not path.is_file():
            raise ResourceNotFound(name, str(self.root))
        return path.read_bytes()

    def describe(self) -> str:
        return f"dir:{self.root}"
