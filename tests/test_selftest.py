import runpy
import sys
from pathlib import Path

from dsakeys.factory import KeyFactory
from dsakeys.selftest import check_variant, message_digest, run_all

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "run_selftest.py"


def test_message_digest_is_sha256():
    assert message_digest(b"abc").hex() == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_check_variant_success(small_config):
    result = check_variant(KeyFactory(small_config), "DSA-1024")
    assert result['status'] == 'success'
    assert result['error'] is None
    assert set(result['operations'].values()) == {'OK'}
    assert set(result['operations']) == {
        'keygen', 'sign', 'verify', 'verify_tampered', 'attributes', 'export'
    }
    assert result['sizes']['key_size'] == 1024
    assert result['sizes']['signature'] > 40
    assert result['sizes']['pem_private'] > result['sizes']['pem_public']
    assert result['timings']['keygen_ms'] > 0


def test_check_variant_unsupported_size(small_config):
    result = check_variant(KeyFactory(small_config), "DSA-512")
    assert result['status'] == 'error'
    assert result['error'].startswith("generate_key: ")


def test_check_variant_unknown(small_config):
    result = check_variant(KeyFactory(small_config), "DSA-1")
    assert result['status'] == 'error'
    assert "not found" in result['error']


def test_run_all_selected_variants(small_config):
    results = run_all(KeyFactory(small_config), ["DSA-1024"])
    assert [r['name'] for r in results] == ["DSA-1024"]


def test_script_exit_codes(small_config, monkeypatch, capsys):
    main = runpy.run_path(str(SCRIPT))['main']

    monkeypatch.setattr(sys, "argv", ["run_selftest.py", "--config", small_config, "--variant", "DSA-1024"])
    assert main() == 0
    assert "All variants passed" in capsys.readouterr().out

    monkeypatch.setattr(sys, "argv", ["run_selftest.py", "--config", small_config])
    assert main() == 1
    assert "DSA-512" in capsys.readouterr().out
