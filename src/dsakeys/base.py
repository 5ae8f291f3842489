from abc import ABC, abstractmethod
from typing import Dict, Any

from .record import PortableKeyRecord


class AsymmetricKey(ABC):
    """Base interface for key wrappers around a native library key."""

    name = None

    def __init__(self, has_private: bool):
        self._has_private = has_private

    @property
    def has_private(self) -> bool:
        return self._has_private

    @property
    @abstractmethod
    def key_size(self) -> int:
        """Modulus size in bits."""
        pass

    @abstractmethod
    def get_public_attributes(self) -> PortableKeyRecord:
        """Export the public fields as a portable record."""
        pass

    @abstractmethod
    def get_attributes(self) -> PortableKeyRecord:
        """Export every field, private exponent included."""
        pass

    @abstractmethod
    def sign(self, digest: bytes) -> bytes:
        """Sign a precomputed digest and return the signature."""
        pass

    @abstractmethod
    def verify(self, digest: bytes, signature: bytes) -> bool:
        """Check a signature over a precomputed digest."""
        pass

    @abstractmethod
    def to_pem(self) -> bytes:
        """Serialize to the private or public PEM container."""
        pass

    @abstractmethod
    def write_key_to_file(self, path) -> None:
        """Write the PEM container to path."""
        pass

    def get_info(self) -> Dict[str, Any]:
        """Return key metadata."""
        return {
            'name': self.name,
            'key_size': self.key_size,
            'has_private': self.has_private,
            'type': self.__class__.__name__
        }
