import logging

import pytest
import uvicorn

from src.app import main
from src.settings.logger import LOGGER_NAME, setup_logger


@pytest.fixture
def restore_logger():
    yield
    setup_logger()


def _config(tmp_path) -> str:
    path = tmp_path / "app.yaml"
    path.write_text(
        f"server:\n  port: 9100\nlogging:\n  log_dir: {tmp_path / 'logs'}\n",
        encoding="utf-8",
    )
    return str(path)


def test_debug_prints_config(tmp_path, capsys):
    main(["debug", "--config", _config(tmp_path)])

    out = capsys.readouterr().out
    assert "DEBUG MODE" in out
    assert "9100" in out


def test_serve_overrides_host_and_port(tmp_path, monkeypatch, restore_logger):
    calls = {}

    def fake_run(app, host, port):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr(uvicorn, "run", fake_run)

    main(["serve", "--config", _config(tmp_path), "--host", "127.0.0.1", "--port", "9200"])

    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9200
    assert any(r.path == "/post_event" for r in calls["app"].routes)


def test_missing_config_propagates(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["debug", "--config", str(tmp_path / "missing.yaml")])


def test_serve_logs_to_configured_dir(tmp_path, monkeypatch, restore_logger):
    monkeypatch.setattr(uvicorn, "run", lambda app, host, port: None)

    main(["serve", "--config", _config(tmp_path)])

    log_file = tmp_path / "logs" / "app.log"
    handler_files = [
        h.baseFilename for h in logging.getLogger(LOGGER_NAME).handlers if hasattr(h, "baseFilename")
    ]
    assert handler_files == [str(log_file)]
    assert "Serving events API" in log_file.read_text(encoding="utf-8")
