import pytest

from fontmatch.utils import clamp, div_round_up, has_sfnt_version, lerp, slurp_file


@pytest.mark.parametrize("x", [-5.0, 0.5, 2.0, 7.5])
def test_clamp_stays_in_range(x):
    result = clamp(x, 0.5, 2.0)
    assert 0.5 <= result <= 2.0


def test_clamp_bounds_and_passthrough():
    assert clamp(-1.0, 0.5, 2.0) == 0.5
    assert clamp(3.0, 0.5, 2.0) == 2.0
    assert clamp(1.25, 0.5, 2.0) == 1.25


def test_lerp_endpoints():
    assert lerp(100.0, 900.0, 0.0) == 100.0
    assert lerp(100.0, 900.0, 1.0) == 900.0


def test_lerp_midpoint():
    assert lerp(2.0, 4.0, 0.5) == 3.0


@pytest.mark.parametrize("a,b", [(0, 1), (1, 4), (7, 2), (8, 4), (100, 7)])
def test_div_round_up_is_smallest_cover(a, b):
    q = div_round_up(a, b)
    assert q * b >= a
    assert (q - 1) * b < a


def test_div_round_up_by_zero():
    with pytest.raises(ZeroDivisionError):
        div_round_up(3, 0)


def test_slurp_file_reads_everything(tmp_path):
    payload = b"OTTO" + bytes(range(256))
    path = tmp_path / "font.otf"
    path.write_bytes(payload)
    with path.open("rb") as fh:
        assert slurp_file(fh) == payload


@pytest.mark.parametrize("tag", [b"\x00\x01\x00\x00", b"OTTO", b"true", b"typ1"])
def test_has_sfnt_version_known(tag):
    assert has_sfnt_version(tag + b"\x00\x0c") is True


@pytest.mark.parametrize("data", [b"wOFF1234", b"ttcf", b"OT", b""])
def test_has_sfnt_version_unknown(data):
    assert has_sfnt_version(data) is False