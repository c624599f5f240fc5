"""
Tests for the workbench entry point.
"""

import json
import os
from unittest.mock import patch

import pytest
from loguru import logger

from workbench import __version__, cli
from workbench.models import ForwardTo, Standalone
from workbench.router import InstanceRouter


@pytest.fixture
def messages():
    """Capture loguru records; configure_logging is patched out so the sink survives."""
    records = []
    logger.add(lambda message: records.append(message.record), level="TRACE")
    with patch("workbench.cli.configure_logging"):
        yield records


@pytest.fixture
def handoff(tmp_path, monkeypatch):
    path = tmp_path / "vscode-ipc"
    monkeypatch.setattr("workbench.router.handoff_path", lambda: path)
    return path


def test_parse_error_exits_with_1(messages, data_dir):
    assert cli.main(["--auth"]) == 1
    errors = [r["message"] for r in messages if r["level"].name == "ERROR"]
    assert errors == ["--auth requires a value"]


def test_help(capsys, messages, data_dir):
    assert cli.main(["-h"]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"workbench {__version__}")
    assert "--reuse-window" in out


def test_version(capsys, messages, data_dir):
    assert cli.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == f"workbench {__version__}"

    assert cli.main(["--version", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == {"workbench": __version__}


def test_forward_decision(capsys, messages, data_dir, handoff):
    handoff.write_text("/run/instance.sock")
    assert cli.main(["-r", "--json", "src/"]) == 0
    assert json.loads(capsys.readouterr().out) == {
        "route": "forward",
        "endpoint": "/run/instance.sock",
    }
    infos = [r["message"] for r in messages if r["level"].name == "INFO"]
    assert "Forwarding to running instance at /run/instance.sock" in infos


def test_standalone_decision(capsys, messages, data_dir, handoff):
    assert cli.main(["--json"]) == 0
    decision = json.loads(capsys.readouterr().out)
    assert decision["route"] == "standalone"
    assert decision["reason"]


def test_verbose_flag_reaches_environment(messages, data_dir, handoff):
    assert cli.main(["-vvv"]) == 0
    assert os.environ["LOG_LEVEL"] == "trace"


@pytest.mark.asyncio
async def test_run(data_dir, tmp_path):
    handoff = tmp_path / "vscode-ipc"
    handoff.write_text("/run/instance.sock")

    config, decision = await cli.run(["--new-window", "x"], InstanceRouter(handoff))
    assert config.positional == ["x"]
    assert config.user_data_dir == str(data_dir.resolve())
    assert decision == ForwardTo("/run/instance.sock")

    config, decision = await cli.run(["x"], InstanceRouter(tmp_path / "missing"))
    assert decision == Standalone()


def test_entrypoint_exits_with_main_status():
    with patch("workbench.cli.main", return_value=3), pytest.raises(SystemExit) as excinfo:
        cli.cli_entrypoint()
    assert excinfo.value.code == 3
