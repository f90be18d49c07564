from __future__ import annotations

import importlib.util
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _load_script(name: str):
    spec = importlib.util.spec_from_file_location(f"script_{name}", ROOT / "scripts" / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_debug_routes_lists_suppressed_and_active(monkeypatch, capsys) -> None:
    monkeypatch.delenv("NOCO_ALLOW_ZONES", raising=False)
    debug_routes = _load_script("debug_routes")

    assert debug_routes.main(["--only-suppressed"]) == 0
    out = capsys.readouterr().out
    assert "sylius_admin_zone_index" in out
    assert "noco_shop_page_show" not in out

    assert debug_routes.main(["--only-active"]) == 0
    out = capsys.readouterr().out
    assert "noco_shop_page_show" in out
    assert "SUPPRESSED" not in out


def test_disabled_contexts_set_and_clear(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv("NOCO_DB_PATH", str(tmp_path / "cli.sqlite3"))
    cli = _load_script("disabled_contexts")

    assert cli.main(["--channel", "default"]) == 1
    assert "unknown channel" in capsys.readouterr().err

    assert cli.main(["--channel", "default", "--register-host", "shop.test", "--set", "shop", "shop", "admin"]) == 0
    assert capsys.readouterr().out.strip() == "default: ['shop', 'admin']"

    assert cli.main(["--channel", "default", "--clear"]) == 0
    assert capsys.readouterr().out.strip() == "default: []"
