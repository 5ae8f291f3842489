"""
DSA key wrapper over the ``cryptography`` DSA primitives.

A DsaKey owns exactly one native key object: a DSAPrivateKey when the
private exponent is present, a DSAPublicKey otherwise. Instances are never
mutated after construction and may be shared between threads for reading.
"""

import logging
from typing import Tuple

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import dsa
from cryptography.hazmat.primitives.asymmetric.utils import Prehashed, decode_dss_signature

from . import bigint
from .base import AsymmetricKey
from .errors import (
    EncodingFailed,
    GenerationFailed,
    IncompleteKey,
    InvalidKeyMaterial,
    IoError,
    MissingPrivateKey,
    SignatureFailed,
    VerificationFailed,
)
from .record import PortableKeyRecord

logger = logging.getLogger(__name__)

# The primitive needs a hash identity for a prehashed digest; it must match
# the byte length of q, which is what the digest is truncated or padded to.
_DIGEST_ALGORITHMS = {
    20: hashes.SHA1,
    28: hashes.SHA224,
    32: hashes.SHA256,
}


def _prehashed(digest, q: int, operation: str, error) -> Tuple[bytes, Prehashed]:
    """Fit digest to the size of q the way OpenSSL's DSA_sign does."""
    if not isinstance(digest, (bytes, bytearray)):
        raise error(f"Digest must be bytes, got {type(digest).__name__}", operation)
    q_bytes = (q.bit_length() + 7) // 8
    algorithm = _DIGEST_ALGORITHMS.get(q_bytes)
    if algorithm is None:
        raise error(f"Unsupported subgroup order size: {q.bit_length()} bits", operation)
    # Left padding keeps the integer value of a short digest unchanged.
    return bytes(digest[:q_bytes]).rjust(q_bytes, b'\x00'), Prehashed(algorithm())


def _decode_field(record, name: str) -> int:
    try:
        value = bigint.decode(getattr(record, name, None))
    except (TypeError, ValueError) as e:
        raise InvalidKeyMaterial(f"Cannot decode field {name!r}: {e}", 'create') from e
    if value <= 0:
        raise InvalidKeyMaterial(f"Field {name!r} must be a positive integer", 'create')
    return value


class DsaKey(AsymmetricKey):
    """DSA public or private key."""

    name = 'DSA'

    def __init__(self, key, has_private: bool):
        if key is not None and not isinstance(key, (dsa.DSAPrivateKey, dsa.DSAPublicKey)):
            raise TypeError(f"Expected a DSA key, got {type(key).__name__}")
        if has_private and not isinstance(key, dsa.DSAPrivateKey):
            raise MissingPrivateKey("A private DsaKey needs a native private key", 'init')
        super().__init__(has_private)
        self._key = key

    @classmethod
    def create(cls, record: PortableKeyRecord, private_key: bool) -> 'DsaKey':
        """
        Build a key from a portable record.

        Args:
            record: Numeric fields as big-endian byte strings.
            private_key: If True, the record's ``x`` is imported as well.

        Raises:
            InvalidKeyMaterial: A field does not decode to a positive integer,
                or the native key constructor rejects the numbers.
            MissingPrivateKey: private_key is True but the record has no ``x``.
        """
        p, q, g, y = (_decode_field(record, name) for name in ('p', 'q', 'g', 'y'))
        public_numbers = dsa.DSAPublicNumbers(y, dsa.DSAParameterNumbers(p, q, g))

        if not private_key:
            try:
                key = public_numbers.public_key()
            except (ValueError, TypeError, UnsupportedAlgorithm) as e:
                raise InvalidKeyMaterial(f"Rejected public key: {e}", 'create') from e
            return cls(key, False)

        if getattr(record, 'x', None) is None:
            raise MissingPrivateKey("Record has no private exponent", 'create')
        x = _decode_field(record, 'x')
        try:
            key = dsa.DSAPrivateNumbers(x, public_numbers).private_key()
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise InvalidKeyMaterial(f"Rejected private key: {e}", 'create') from e
        return cls(key, True)

    @classmethod
    def generate_key(cls, size: int) -> 'DsaKey':
        """Generate fresh domain parameters and a key pair with a size-bit modulus."""
        if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
            raise GenerationFailed(f"Invalid key size: {size!r}", 'generate_key')
        try:
            parameters = dsa.generate_parameters(key_size=size)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise GenerationFailed(f"Parameter generation failed: {e}", 'generate_key') from e
        try:
            key = parameters.generate_private_key()
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise GenerationFailed(f"Key pair generation failed: {e}", 'generate_key') from e
        logger.debug("Generated %d-bit DSA key", size)
        return cls(key, True)

    @classmethod
    def from_pem(cls, data) -> 'DsaKey':
        """Load an unencrypted private or public PEM container."""
        try:
            if isinstance(data, str):
                data = data.encode('ascii')
            if b'PRIVATE KEY' in data:
                key = serialization.load_pem_private_key(data, password=None)
            else:
                key = serialization.load_pem_public_key(data)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise InvalidKeyMaterial(f"Cannot parse PEM key: {e}", 'from_pem') from e

        if isinstance(key, dsa.DSAPrivateKey):
            return cls(key, True)
        if isinstance(key, dsa.DSAPublicKey):
            return cls(key, False)
        raise InvalidKeyMaterial(f"Not a DSA key: {type(key).__name__}", 'from_pem')

    @classmethod
    def read_key_from_file(cls, path) -> 'DsaKey':
        try:
            with open(path, 'rb') as f:
                data = f.read()
        except OSError as e:
            raise IoError(f"Cannot read key from {path}: {e}", 'read_key_from_file') from e
        logger.debug("Read PEM key from %s", path)
        return cls.from_pem(data)

    @property
    def key_size(self) -> int:
        return self._key.key_size if self._key is not None else 0

    def _public_key(self, operation: str = 'get_public_attributes'):
        if self._key is None:
            raise IncompleteKey("No key material loaded", operation)
        if self._has_private:
            return self._key.public_key()
        return self._key

    def _public_values(self) -> Tuple[int, int, int, int]:
        numbers = self._public_key().public_numbers()
        params = numbers.parameter_numbers
        return params.p, params.q, params.g, numbers.y

    def get_public_attributes(self) -> PortableKeyRecord:
        values = dict(zip(('p', 'q', 'g', 'y'), self._public_values()))
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise IncompleteKey(f"Missing fields: {', '.join(missing)}", 'get_public_attributes')
        return PortableKeyRecord(**{name: bigint.encode(value) for name, value in values.items()})

    def get_attributes(self) -> PortableKeyRecord:
        if not self._has_private:
            raise MissingPrivateKey("Key has no private exponent", 'get_attributes')
        public = self.get_public_attributes()
        x = self._key.private_numbers().x
        return PortableKeyRecord(p=public.p, q=public.q, g=public.g, y=public.y,
                                 x=bigint.encode(x))

    def to_pem(self) -> bytes:
        if self._key is None:
            raise IncompleteKey("No key material loaded", 'to_pem')
        try:
            if self._has_private:
                return self._key.private_bytes(
                    encoding=serialization.Encoding.PEM,
                    format=serialization.PrivateFormat.TraditionalOpenSSL,
                    encryption_algorithm=serialization.NoEncryption()
                )
            return self._key.public_bytes(
                encoding=serialization.Encoding.PEM,
                format=serialization.PublicFormat.SubjectPublicKeyInfo
            )
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise EncodingFailed(f"PEM serialization failed: {e}", 'to_pem') from e

    def write_key_to_file(self, path) -> None:
        """Write the private container for private keys, the public one otherwise."""
        pem = self.to_pem()
        try:
            with open(path, 'wb') as f:
                f.write(pem)
        except OSError as e:
            raise IoError(f"Cannot write key to {path}: {e}", 'write_key_to_file') from e
        logger.debug("Wrote %s DSA key to %s",
                     'private' if self._has_private else 'public', path)

    def _subgroup_order(self, operation: str) -> int:
        return self._public_key(operation).parameters().parameter_numbers().q

    def sign(self, digest: bytes) -> bytes:
        """
        Sign a digest without hashing it again; returns the DER-encoded (r, s) pair.

        Digests longer than q are truncated to its byte length and shorter
        ones are left-padded with zeros, so any length is accepted.
        """
        if not self._has_private:
            raise MissingPrivateKey("Signing requires a private key", 'sign')
        digest, algorithm = _prehashed(digest, self._subgroup_order('sign'), 'sign', SignatureFailed)
        try:
            return self._key.sign(digest, algorithm)
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise SignatureFailed(str(e), 'sign') from e

    def verify(self, digest: bytes, signature: bytes) -> bool:
        """
        Return True for a valid signature and False for one that does not verify.

        Raises VerificationFailed when the signature is not a DER pair of
        integers, an argument is not bytes, or the primitive errors.
        """
        digest, algorithm = _prehashed(digest, self._subgroup_order('verify'),
                                       'verify', VerificationFailed)
        if not isinstance(signature, (bytes, bytearray)):
            raise VerificationFailed(
                f"Signature must be bytes, got {type(signature).__name__}", 'verify')
        signature = bytes(signature)
        try:
            decode_dss_signature(signature)
        except (ValueError, TypeError) as e:
            raise VerificationFailed(f"Malformed signature: {e}", 'verify') from e

        public_key = self._public_key('verify')
        try:
            public_key.verify(signature, digest, algorithm)
        except InvalidSignature:
            return False
        except (ValueError, TypeError, UnsupportedAlgorithm) as e:
            raise VerificationFailed(str(e), 'verify') from e
        return True

    def equals(self, other: 'DsaKey') -> bool:
        """Compare numeric fields; a wrapper without key material equals only itself."""
        if self._key is None or other._key is None:
            return self is other
        if self._has_private != other.has_private:
            return False
        if self._public_values() != other._public_values():
            return False
        if not self._has_private:
            return True
        return self._key.private_numbers().x == other._key.private_numbers().x

    def __eq__(self, other):
        if not isinstance(other, DsaKey):
            return NotImplemented
        return self.equals(other)

    def __hash__(self):
        if self._key is None:
            return hash((self._has_private, None))
        return hash((self._has_private,) + self._public_values())

    def __repr__(self):
        kind = 'private' if self._has_private else 'public'
        return f"<DsaKey {self.key_size}-bit {kind}>"
