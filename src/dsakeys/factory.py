import json
import logging
import os
from typing import List, Dict, Any

from .dsa import DsaKey
from .record import PortableKeyRecord

logger = logging.getLogger(__name__)


class KeyFactory:
    """Factory for creating DSA keys from named configuration variants."""

    def __init__(self, config_path: str = None):
        """
        Initialize factory.

        Args:
            config_path: Path to an algorithms.json config file. Defaults to
                         the file shipped with the package.
        """
        if config_path is None:
            config_path = os.path.join(
                os.path.dirname(__file__), 'config', 'algorithms.json'
            )

        with open(config_path, 'r') as f:
            self.config = json.load(f)
        logger.debug("Loaded key configuration from %s", config_path)

    def create_key(self, variant_name: str) -> DsaKey:
        """Generate a fresh key for a configured variant."""
        variant = self._find_variant(variant_name)
        return DsaKey.generate_key(variant['key_size'])

    def load_key(self, record: PortableKeyRecord) -> DsaKey:
        """Build a key from a record, private when the record carries x."""
        return DsaKey.create(record, private_key=record.has_private)

    def _find_variant(self, variant_name: str) -> Dict:
        """Find variant configuration by name."""
        for variant in self.config['DSA']['variants']:
            if variant['name'] == variant_name:
                return variant
        raise ValueError(f"Variant {variant_name} not found for DSA")

    def get_all_variants(self) -> List[Dict[str, Any]]:
        """Get list of all configured variants with metadata."""
        return [
            {
                'type': 'DSA',
                'name': variant['name'],
                'security_level': variant['security_level'],
                'key_size': variant['key_size']
            }
            for variant in self.config['DSA']['variants']
        ]

    def get_variants_by_level(self, level: str) -> List[Dict[str, Any]]:
        """Get all variants at a specific security level."""
        return [v for v in self.get_all_variants() if v['security_level'] == level]
