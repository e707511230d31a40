"""Pytest configuration to make the local package importable without installation."""
import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path for module resolution
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from contactor.cli import main as cli_main
from contactor.core.models import ContactRecord


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep ambient configuration from leaking into tests."""

    monkeypatch.delenv("CONTACTOR_SOURCE", raising=False)
    monkeypatch.delenv("CONTACTOR_ENV_FILE", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def sample_source() -> Path:
    """Return the bundled sample contacts export."""

    return ROOT / "sample_data" / "contacts.json"


@pytest.fixture
def jane_doe() -> ContactRecord:
    """A record with only a given and family name set."""

    return ContactRecord(given_name="Jane", family_name="Doe")


@pytest.fixture
def run_cli(monkeypatch: pytest.MonkeyPatch):
    """Helper to invoke the CLI with custom arguments inside tests."""

    def _run(args: list[str]) -> None:
        monkeypatch.setattr(sys, "argv", ["contactor", *args])
        cli_main()

    return _run

