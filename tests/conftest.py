"""
Pytest configuration file for the psoid project.
This file sets up the Python path so tests can import modules from the project root.
"""
import logging
import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(autouse=True)
def reset_global_state():
    """Undo process-wide state the CLI and settings loader leave behind."""
    yield
    import settings_service
    from services.section_id_service import get_section_id_service

    logging.disable(logging.NOTSET)
    settings_service.clear_settings_cache()
    get_section_id_service.cache_clear()


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    """
    Point the settings loader and CLI at a throwaway settings.toml.

    Returns a function that writes the file and returns its path.
    """
    import cli
    import settings_service

    path = tmp_path / "settings.toml"

    def _write(log_level="INFO", default_version="legacy", require_class=False):
        path.write_text(
            "[env]\n"
            'env = "test"\n'
            f'log_level = "{log_level}"\n'
            "\n"
            "[calculator]\n"
            f'default_version = "{default_version}"\n'
            f"require_class = {'true' if require_class else 'false'}\n"
        )
        return path

    monkeypatch.setattr(settings_service, "SETTINGS_PATH", path)
    monkeypatch.setattr(cli, "SETTINGS_PATH", path)
    settings_service.clear_settings_cache()
    return _write
