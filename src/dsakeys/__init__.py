import logging

from .bigint import decode, encode
from .dsa import DsaKey
from .errors import (
    DSAKeyError,
    EncodingFailed,
    GenerationFailed,
    IncompleteKey,
    InvalidKeyMaterial,
    IoError,
    MissingPrivateKey,
    SignatureFailed,
    VerificationFailed,
)
from .factory import KeyFactory
from .record import PortableKeyRecord

__all__ = [
    'DsaKey',
    'KeyFactory',
    'PortableKeyRecord',
    'encode',
    'decode',
    'DSAKeyError',
    'EncodingFailed',
    'GenerationFailed',
    'IncompleteKey',
    'InvalidKeyMaterial',
    'IoError',
    'MissingPrivateKey',
    'SignatureFailed',
    'VerificationFailed',
]

__version__ = '0.1.0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
