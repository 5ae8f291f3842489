"""
Smoke check for configured DSA variants.

For each variant: generate, sign, verify, reject a tampered digest,
round-trip the attributes and the PEM export. Results are plain dicts so the
caller decides how to report them.
"""

import logging
import os
import tempfile
import time
from typing import Dict, List

from cryptography.hazmat.primitives import hashes

from .dsa import DsaKey
from .errors import DSAKeyError
from .factory import KeyFactory

logger = logging.getLogger(__name__)


def message_digest(message: bytes) -> bytes:
    """SHA-256 digest of message."""
    h = hashes.Hash(hashes.SHA256())
    h.update(message)
    return h.finalize()


def _timed(operation):
    start_time = time.perf_counter()
    value = operation()
    return value, (time.perf_counter() - start_time) * 1000


def check_variant(factory: KeyFactory, variant_name: str,
                  digest: bytes = None) -> Dict:
    """Exercise one variant and return results with timing information."""
    if digest is None:
        digest = message_digest(b"test_message" * 4)

    result = {
        'name': variant_name,
        'status': 'unknown',
        'error': None,
        'sizes': {},
        'operations': {},
        'timings': {}
    }

    try:
        key, result['timings']['keygen_ms'] = _timed(lambda: factory.create_key(variant_name))
        result['operations']['keygen'] = 'OK'

        signature, result['timings']['sign_ms'] = _timed(lambda: key.sign(digest))
        result['operations']['sign'] = 'OK'

        is_valid, result['timings']['verify_ms'] = _timed(lambda: key.verify(digest, signature))
        if not is_valid:
            result['operations']['verify'] = 'FAILED (invalid signature)'
            result['status'] = 'failed'
            return result
        result['operations']['verify'] = 'OK'

        tampered = bytes([digest[0] ^ 0x01]) + digest[1:]
        if key.verify(tampered, signature):
            result['operations']['verify_tampered'] = 'FAILED (accepted tampered digest)'
            result['status'] = 'failed'
            return result
        result['operations']['verify_tampered'] = 'OK'

        if factory.load_key(key.get_attributes()) != key:
            result['operations']['attributes'] = 'FAILED (round trip mismatch)'
            result['status'] = 'failed'
            return result
        result['operations']['attributes'] = 'OK'

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'key.pem')
            key.write_key_to_file(path)
            if DsaKey.read_key_from_file(path) != key:
                result['operations']['export'] = 'FAILED (re-imported key differs)'
                result['status'] = 'failed'
                return result
        result['operations']['export'] = 'OK'

        public_key = DsaKey.create(key.get_public_attributes(), private_key=False)
        result['sizes'] = {
            'key_size': key.key_size,
            'pem_private': len(key.to_pem()),
            'pem_public': len(public_key.to_pem()),
            'signature': len(signature)
        }
        result['status'] = 'success'

    except (DSAKeyError, ValueError) as e:
        logger.debug("Self-check of %s failed", variant_name, exc_info=True)
        result['status'] = 'error'
        result['error'] = str(e)

    return result


def run_all(factory: KeyFactory = None, variants: List[str] = None) -> List[Dict]:
    """Check every configured variant, or only the named ones."""
    if factory is None:
        factory = KeyFactory()
    if variants is None:
        variants = [v['name'] for v in factory.get_all_variants()]
    return [check_variant(factory, name) for name in variants]
