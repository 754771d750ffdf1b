from abc import ABC, abstractmethod

class ResourceBundle(ABC):
    """Read-only lookup of bundled resources by logical name.

    `read` raises ResourceNotFound when the name is not bundled; any other
    I/O problem surfaces as OSError.
    """

    @abstractmethod
    def read(self, name: str) -> bytes: ...

    def describe(self) -> str:
        return type(self).__name__
