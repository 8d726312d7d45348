import pytest

import devos.services.cache_cleaner as cache_cleaner_module
from devos.models import ProjectConfig
from devos.services.cache_cleaner import CacheCleaner, find_database_name


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None


class RecordingConsole:
    def __init__(self):
        self.lines = []

    def print(self, message, *_args, **_kwargs):
        self.lines.append(message)


@pytest.mark.parametrize(
    "args, expected",
    [
        (["-d", "mydb"], "mydb"),
        (["--dev=all", "-d", "mydb", "-d", "other"], "mydb"),
        ([], "UNKNOWN"),
        (["--db-filter=mydb"], "UNKNOWN"),
        (["--dev=all", "-d"], "UNKNOWN"),
    ],
)
def test_find_database_name(args, expected):
    assert find_database_name(args) == expected


def test_clean_reports_database_and_waits(monkeypatch):
    delays = []
    monkeypatch.setattr(cache_cleaner_module.time, "sleep", lambda seconds: delays.append(seconds))
    console = RecordingConsole()
    project = ProjectConfig(
        name="mesa",
        python="python3",
        odoo_bin="odoo-bin",
        config_file="odoo.conf",
        args=("-d", "mesa_db"),
        work_dir="/srv/mesa",
    )

    db_name = CacheCleaner(logger=DummyLogger(), console=console).clean(project)

    assert db_name == "mesa_db"
    assert delays == [0.5]
    assert any("mesa_db" in line for line in console.lines)
    assert "CACHE NUKED" in console.lines[-1]
