"""
Command Line and Logging Tests
==============================

Run: python -m pytest tests/core/test_cli.py -v
"""

import importlib
import importlib.util
import io
import logging
import pytest
import sys
import os
from pathlib import Path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

import disk_region
from disk_region.contract import write_vertex_set
from disk_region.logging_config import setup_logging


SCRIPT = Path(__file__).parent.parent.parent / "scripts" / "01_reconstruct_disk.py"


def load_script():
    # Numeric prefix requires importlib
    spec = importlib.util.spec_from_file_location("reconstruct_disk_script", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("disk_region")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_setup_logging_single_handler():
    setup_logging(logging.DEBUG)
    setup_logging(logging.INFO)
    logger = logging.getLogger("disk_region")
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_package_logger_silent_by_default():
    importlib.reload(disk_region)
    handlers = logging.getLogger("disk_region").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_setup_logging_replaces_null_handler():
    stream = io.StringIO()
    logger = setup_logging(logging.INFO, stream=stream)
    assert logger is logging.getLogger("disk_region")
    assert not any(isinstance(h, logging.NullHandler) for h in logger.handlers)

    logging.getLogger("disk_region.analysis.reconstruction").info("phase done")
    assert " - disk_region.analysis.reconstruction - INFO - phase done" in stream.getvalue()


def test_setup_logging_file(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(logging.INFO, log_file=str(log_file))
    logging.getLogger("disk_region.analysis.reconstruction").info("hello")
    for handler in logging.getLogger("disk_region").handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_script_triangle(capsys):
    script = load_script()
    assert script.main(["--mesh", "triangle", "--seeds", "0", "1", "2"]) == 0
    out = capsys.readouterr().out
    assert "χ = 1" in out
    assert "Boundary (3): [0, 1, 2]" in out


def test_script_seed_file(tmp_path, capsys):
    seeds = tmp_path / "seeds.txt"
    write_vertex_set(seeds, {24, 25})
    script = load_script()
    assert script.main(["--mesh", "grid", "--rows", "7", "--cols", "7",
                        "--seed-file", str(seeds)]) == 0
    assert "Seeds (2): [24, 25]" in capsys.readouterr().out


def test_script_torus_not_reachable(capsys):
    script = load_script()
    argv = ["--mesh", "torus", "--rows", "6", "--cols", "8",
            "--seeds"] + [str(c) for c in range(8)]
    assert script.main(argv) == 1
    assert "FAILED" in capsys.readouterr().out


def test_script_pinched_region(capsys):
    """Bowtie result: printed with its pinched vertex, exit status 0."""
    script = load_script()
    argv = ["--mesh", "grid", "--rows", "8", "--cols", "9", "--seeds", "14", "25"]
    assert script.main(argv) == 0
    out = capsys.readouterr().out
    assert "χ = 1, components = 1" in out
    assert "not a single loop" in out
    assert "pinched at [24]" in out
