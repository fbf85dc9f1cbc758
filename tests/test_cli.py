import pytest
from inventory_service import cli


def test_flags_override_settings(tmp_path):
    args = cli.build_parser().parse_args(
        ["--host", "0.0.0.0", "--port", "8080", "--cache", str(tmp_path / "c")]
    )
    settings = cli.settings_from_args(args)
    assert settings.HOST == "0.0.0.0"
    assert settings.PORT == 8080
    assert settings.inventory_path == tmp_path / "c" / "inventory.json"


def test_short_flags(tmp_path):
    args = cli.build_parser().parse_args(["-H", "localhost", "-p", "3000", "-c", str(tmp_path)])
    assert (args.host, args.port, args.cache) == ("localhost", 3000, str(tmp_path))


def test_flags_are_required():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args(["--host", "localhost"])


def test_main_creates_cache_and_runs(tmp_path, monkeypatch):
    calls = {}

    def fake_run(app, host, port, **kwargs):
        calls.update(app=app, host=host, port=port)

    monkeypatch.setattr(cli.uvicorn, "run", fake_run)
    cache = tmp_path / "nested" / "cache"

    assert cli.main(["-H", "127.0.0.1", "-p", "3001", "-c", str(cache)]) == 0
    assert cache.is_dir()
    assert calls["port"] == 3001
    assert calls["app"].state.settings.CACHE_DIR == str(cache)


def test_main_fails_on_unusable_cache(tmp_path, monkeypatch):
    monkeypatch.setattr(cli.uvicorn, "run", lambda *a, **k: pytest.fail("server started"))
    blocker = tmp_path / "file"
    blocker.write_text("not a directory")

    assert cli.main(["-H", "127.0.0.1", "-p", "3001", "-c", str(blocker / "cache")]) == 1
