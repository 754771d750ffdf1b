from typing import Mapping

from ramayana.adapters.bundle.base import ResourceBundle
from ramayana.core.errors import ResourceNotFound


class MemoryBundle(ResourceBundle):
    def __init__(self, resources: Mapping[str, bytes | str] | None = None):
        self._resources = dict(resources or {})

    def read(self, name: str) -> bytes:
        if name not in self._resources:
            raise ResourceNotFound(name, "memory")
        data = self._resources[name]
        return data.encode("utf-8") if isinstance(data, str) else data

    def describe(self) -> str:
        return "memory"
