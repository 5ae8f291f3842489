import dataclasses

import pytest

from dsakeys import InvalidKeyMaterial, PortableKeyRecord


def _record(x=b"\x05"):
    return PortableKeyRecord(p=b"\x17", q=b"\x0b", g=b"\x04", y=b"\x09", x=x)


def test_has_private_follows_x():
    assert _record().has_private
    assert not _record(x=None).has_private


def test_public_record_drops_x():
    public = _record().public_record()
    assert public.x is None
    assert (public.p, public.q, public.g, public.y) == (b"\x17", b"\x0b", b"\x04", b"\x09")


def test_record_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        _record().p = b"\x01"


def test_dict_form_omits_x_for_public_records():
    assert "x" not in _record(x=None).to_dict()
    assert _record().to_dict()["x"] == "BQ"


def test_dict_form_round_trip():
    record = PortableKeyRecord(p=b"\xff" * 128, q=b"\x80" * 20, g=b"\x02", y=b"\x01\x00", x=b"\x3e" * 20)
    assert PortableKeyRecord.from_dict(record.to_dict()) == record
    assert PortableKeyRecord.from_dict(record.public_record().to_dict()) == record.public_record()


def test_from_dict_missing_field():
    data = _record().to_dict()
    del data["g"]
    with pytest.raises(InvalidKeyMaterial) as excinfo:
        PortableKeyRecord.from_dict(data)
    assert excinfo.value.operation == "from_dict"
    assert "'g'" in str(excinfo.value)


def test_from_dict_bad_encoding():
    data = _record().to_dict()
    data["p"] = "abcde"
    with pytest.raises(InvalidKeyMaterial):
        PortableKeyRecord.from_dict(data)
