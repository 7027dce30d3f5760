import pytest

from zebrazpl.config import DEFAULT_DPI, DEFAULT_HOST, PrinterSettings


def test_defaults():
    settings = PrinterSettings.from_env({})
    assert settings == PrinterSettings()
    assert settings.host == DEFAULT_HOST
    assert settings.dpi == DEFAULT_DPI
    assert settings.username is None


def test_from_env():
    settings = PrinterSettings.from_env(
        {
            "ZEBRA_HOST": "192.168.1.40",
            "ZEBRA_PORT": "2121",
            "ZEBRA_USER": "admin",
            "ZEBRA_DPI": " 300 ",
            "ZEBRA_LABEL_WIDTH": "4",
            "ZEBRA_LABEL_HEIGHT": "",
        }
    )
    assert settings.host == "192.168.1.40"
    assert settings.port == 2121
    assert settings.username == "admin"
    assert settings.dpi == 300
    assert settings.label_width_in == 4.0
    assert settings.label_height_in == PrinterSettings().label_height_in


def test_invalid_value():
    with pytest.raises(ValueError, match="ZEBRA_DPI"):
        PrinterSettings.from_env({"ZEBRA_DPI": "high"})
