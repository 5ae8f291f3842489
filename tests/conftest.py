import json

import pytest

from dsakeys import DsaKey
from dsakeys.selftest import message_digest


@pytest.fixture(scope="session")
def private_key():
    return DsaKey.generate_key(1024)


@pytest.fixture(scope="session")
def public_key(private_key):
    return DsaKey.create(private_key.get_public_attributes(), private_key=False)


@pytest.fixture
def digest():
    return message_digest(b"attack at dawn")


@pytest.fixture
def small_config(tmp_path):
    path = tmp_path / "algorithms.json"
    path.write_text(json.dumps({
        "DSA": {
            "variants": [
                {"name": "DSA-1024", "security_level": "legacy", "key_size": 1024},
                {"name": "DSA-512", "security_level": "broken", "key_size": 512},
            ]
        }
    }))
    return str(path)
