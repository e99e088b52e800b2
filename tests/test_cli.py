import logging

import pytest

import client_demo
from star_pattern_renderer.catalog import INVALID_INPUT_MESSAGE


@pytest.fixture(autouse=True)
def reset_package_logger(monkeypatch):
    monkeypatch.delenv('STAR_PATTERN_LOG_LEVEL', raising=False)
    yield
    logger = logging.getLogger("star_pattern_renderer")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


def test_list():
    out = []
    assert client_demo.main(["list"], emit=out.append) == 0
    assert len(out) == 100 and out[0] == "triangle"


def test_shape_with_params_and_mode():
    out = []
    assert client_demo.main(["shape", "triangle", "4", "--mode", "hollow"],
                            emit=out.append) == 0
    assert out == ["* ", "* * ", "*   * ", "* * * * "]


def test_shape_invalid_mode():
    out = []
    assert client_demo.main(["shape", "plus", "5", "--mode", "Solid"],
                            emit=out.append) == 1
    assert out == [INVALID_INPUT_MESSAGE]


def test_unknown_shape(capsys):
    assert client_demo.main(["shape", "nope"], emit=lambda line: None) == 2
    assert "Unknown preset" in capsys.readouterr().err


def test_name():
    out = []
    assert client_demo.main(["name", "AT", "--size", "5", "--gap", "1"],
                            emit=out.append) == 0
    assert len(out) == 5 and all(len(line) == 11 for line in out)


def test_bad_log_level(capsys):
    assert client_demo.main(["--log-level", "chatty", "list"],
                            emit=lambda line: None) == 2
    assert "Unknown log level" in capsys.readouterr().err
