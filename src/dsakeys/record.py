import base64
import binascii
from dataclasses import dataclass, replace
from typing import Dict, Optional

from .errors import InvalidKeyMaterial

_PUBLIC_FIELDS = ('p', 'q', 'g', 'y')


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b'=').decode('ascii')


def _b64decode(text: str) -> bytes:
    padded = text + '=' * (-len(text) % 4)
    return base64.urlsafe_b64decode(padded.encode('ascii'))


@dataclass(frozen=True)
class PortableKeyRecord:
    """
    DSA numeric fields as big-endian unsigned byte strings.

    A record with ``x`` set to None describes a public key. No arithmetic
    validation happens here; the record only carries key material between
    storage and DsaKey.
    """

    p: bytes
    q: bytes
    g: bytes
    y: bytes
    x: Optional[bytes] = None

    @property
    def has_private(self) -> bool:
        return self.x is not None

    def public_record(self) -> 'PortableKeyRecord':
        """Return a copy without the private exponent."""
        return replace(self, x=None)

    def to_dict(self) -> Dict[str, str]:
        """Serialize to unpadded base64url strings, omitting x for public records."""
        fields = {name: _b64encode(getattr(self, name)) for name in _PUBLIC_FIELDS}
        if self.x is not None:
            fields['x'] = _b64encode(self.x)
        return fields

    @classmethod
    def from_dict(cls, data: Dict[str, str]) -> 'PortableKeyRecord':
        try:
            fields = {name: _b64decode(data[name]) for name in _PUBLIC_FIELDS}
            x = data.get('x')
            if x is not None:
                x = _b64decode(x)
        except KeyError as e:
            raise InvalidKeyMaterial(f"Missing field {e.args[0]!r}", 'from_dict') from e
        except (binascii.Error, ValueError, TypeError, AttributeError) as e:
            raise InvalidKeyMaterial(f"Malformed field encoding: {e}", 'from_dict') from e
        return cls(x=x, **fields)
