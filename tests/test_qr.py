import pytest

from zebrazpl.qr import QR_CAPACITIES, QR_SIZES_BY_VERSION, data_input_mode, qr_version


def test_sizes_by_version():
    assert len(QR_SIZES_BY_VERSION) == 41
    assert QR_SIZES_BY_VERSION[1] == 21
    assert QR_SIZES_BY_VERSION[40] == 177


def test_capacity_tables_are_complete_and_increasing():
    for mode in "NABK":
        for level in "LMQH":
            capacities = QR_CAPACITIES[mode][level]
            assert len(capacities) == 40
            assert capacities == sorted(capacities)


def test_data_input_mode():
    assert data_input_mode("123456") == ("N", 6)
    assert data_input_mode("HELLO $%*+-./:") == ("A", 14)
    assert data_input_mode("hello") == ("B", 5)
    assert data_input_mode("héllo") == ("B", 6)


def test_numeric_text_fits_smallest_version():
    mode, size = data_input_mode("123456")
    version = qr_version(mode, "Q", size)
    assert version == 1
    assert QR_CAPACITIES["N"]["Q"][version - 1] >= 6


def test_version_boundaries():
    assert qr_version("B", "H", 7) == 1
    assert qr_version("B", "H", 8) == 2
    assert qr_version("B", "H", 10 ** 6) == 40


def test_unknown_mode():
    with pytest.raises(ValueError):
        qr_version("X", "Q", 1)
