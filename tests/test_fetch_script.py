import runpy
from pathlib import Path

import pytest

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "fetch_term_config.py"


def test_refuses_to_run_without_export_url(monkeypatch, capsys):
    monkeypatch.delenv("REGISTRAR_EXPORT_URL", raising=False)
    with pytest.raises(SystemExit) as excinfo:
        runpy.run_path(str(SCRIPT), run_name="__main__")
    assert excinfo.value.code == 2
    assert "REGISTRAR_EXPORT_URL" in capsys.readouterr().out
