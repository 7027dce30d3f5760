import pytest
from PIL import Image

from zebrazpl.app import cli
from zebrazpl.config import PrinterSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("ZEBRA_HOST", "ZEBRA_PORT", "ZEBRA_USER", "ZEBRA_DPI", "ZEBRA_LABEL_WIDTH", "ZEBRA_LABEL_HEIGHT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sent(monkeypatch):
    calls = []

    async def fake_send_jobs(settings, jobs):
        calls.append((settings, jobs))

    monkeypatch.setattr(cli, "send_jobs", fake_send_jobs)
    return calls


def test_build_text_job():
    settings = PrinterSettings(dpi=200, label_width_in=2.0)
    assert cli.build_text_job(settings, "Hi") == b"^XA^PW400^FO20,20,0^A0N,50,50^FDHi^FS^XZ"


def test_build_image_jobs(tmp_path):
    path = tmp_path / "my logo.png"
    Image.new("RGB", (100, 50), "black").save(str(path))
    jobs = cli.build_image_jobs(PrinterSettings(dpi=200, label_width_in=2.0, label_height_in=1.0), str(path))
    assert len(jobs) == 4
    assert jobs[0] == b"^XA^PW400^XZ"
    assert jobs[1].startswith(b"^XA~DYR:MYLOGO,P,P,")
    assert jobs[1].endswith(b"^XZ")
    assert jobs[2] == b"^XA^ILR:MYLOGO.PNG^XZ"
    assert jobs[3] == b"^IDR:MYLOGO.PNG"


def test_build_image_jobs_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        cli.build_image_jobs(PrinterSettings(), str(tmp_path / "missing.png"))


def test_resolve_settings_overrides_base():
    args = cli.parse_args(["--text", "Hi", "--host", "10.0.0.5", "--dpi", "300"])
    settings = cli.resolve_settings(args, PrinterSettings(port=2121))
    assert settings.host == "10.0.0.5"
    assert settings.dpi == 300
    assert settings.port == 2121


def test_source_is_required(capsys):
    with pytest.raises(SystemExit):
        cli.parse_args(["--host", "10.0.0.5"])


def test_main_sends_text(sent):
    assert cli.main(["--text", "Hi", "--dpi", "200", "--width", "2"]) == 0
    settings, jobs = sent[0]
    assert settings.dpi == 200
    assert jobs == [b"^XA^PW400^FO20,20,0^A0N,50,50^FDHi^FS^XZ"]


def test_main_missing_image(sent, tmp_path, capsys):
    assert cli.main(["--image", str(tmp_path / "missing.png")]) == 2
    assert "File not found" in capsys.readouterr().err
    assert sent == []


def test_main_invalid_env(monkeypatch, capsys):
    monkeypatch.setenv("ZEBRA_PORT", "ftp")
    assert cli.main(["--text", "Hi"]) == 2
    assert "ZEBRA_PORT" in capsys.readouterr().err
