import logging

import pytest

from schotter.__main__ import main
from schotter.logging_config import setup_logging


@pytest.mark.parametrize("tier", ["1", "2", "3"])
def test_runs_each_tier(tier):
    assert main(["--ticks", "20", "--seed", "42", "--tier", tier]) == 0


@pytest.mark.parametrize("args", [["--rows", "0"], ["--motion", "2"], ["--displacement", "-1"]])
def test_config_errors_exit_with_2(args):
    assert main(args + ["--seed", "1"]) == 2


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "schotter.log"
    setup_logging(logging.INFO, str(log_file))
    logging.getLogger("schotter.test").info("hello stones")
    logger = logging.getLogger("schotter")
    for handler in list(logger.handlers):
        handler.flush()
        handler.close()
    logger.handlers.clear()
    assert "hello stones" in log_file.read_text(encoding="utf-8")
