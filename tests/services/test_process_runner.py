import sys

import pytest

from devos.errors import SpawnError
from devos.services.process_runner import ProcessRunner


class DummyLogger:
    def debug(self, *_args, **_kwargs):
        return None

    def warning(self, *_args, **_kwargs):
        return None


def test_process_runner_returns_child_exit_code(tmp_path):
    runner = ProcessRunner(logger=DummyLogger())

    returncode = runner.run(sys.executable, ["-c", "import sys; sys.exit(3)"], str(tmp_path))

    assert returncode == 3


def test_process_runner_uses_work_dir(tmp_path):
    runner = ProcessRunner(logger=DummyLogger())

    runner.run(
        sys.executable,
        ["-c", "from pathlib import Path; Path('marker.txt').write_text('ok')"],
        str(tmp_path),
    )

    assert (tmp_path / "marker.txt").read_text() == "ok"


def test_process_runner_inherits_stdout(tmp_path, capfd):
    runner = ProcessRunner(logger=DummyLogger())

    runner.run(sys.executable, ["-c", "print('odoo says hi')"], str(tmp_path))

    assert "odoo says hi" in capfd.readouterr().out


def test_process_runner_raises_when_interpreter_missing(tmp_path):
    runner = ProcessRunner(logger=DummyLogger())
    missing = str(tmp_path / "missing-python")

    with pytest.raises(SpawnError, match="Failed to start python: .*missing-python"):
        runner.run(missing, ["odoo-bin"], str(tmp_path))


def test_process_runner_waits_for_child_after_interrupt():
    class FakeProcess:
        def __init__(self):
            self.calls = 0

        def wait(self):
            self.calls += 1
            if self.calls == 1:
                raise KeyboardInterrupt
            return 130

    process = FakeProcess()

    class FakeSubprocess:
        def Popen(self, cmd, cwd=None):
            return process

    runner = ProcessRunner(logger=DummyLogger(), subprocess_module=FakeSubprocess())

    assert runner.run("python3", ["odoo-bin"], "/srv/mesa") == 130
    assert process.calls == 2


def test_process_runner_passes_command_and_cwd():
    captured = {}

    class FakeProcess:
        def wait(self):
            return 0

    class FakeSubprocess:
        def Popen(self, cmd, cwd=None):
            captured["cmd"] = cmd
            captured["cwd"] = cwd
            return FakeProcess()

    runner = ProcessRunner(logger=DummyLogger(), subprocess_module=FakeSubprocess())
    runner.run("python3", ["odoo-bin", "-c", "odoo.conf"], "/srv/mesa")

    assert captured == {"cmd": ["python3", "odoo-bin", "-c", "odoo.conf"], "cwd": "/srv/mesa"}


def test_process_runner_reports_missing_work_dir(tmp_path):
    runner = ProcessRunner(logger=DummyLogger())
    missing_dir = str(tmp_path / "nope")

    with pytest.raises(SpawnError, match="Working directory not found: .*nope") as exc_info:
        runner.run(sys.executable, ["-c", "pass"], missing_dir)

    assert "Failed to start python" in str(exc_info.value)
