"""
statsdparser: fixtures for tests

See LICENSE for details
"""
import json
from typing import Any, Callable, Dict

import pytest

from statsdparser import logutil
from statsdparser.cli import StatsdParserTool

logutil.configure_logging()


@pytest.fixture(name="write_config")
def fixture_write_config(tmpdir) -> Callable[[Dict[str, Any]], str]:
    def write_config(config: Dict[str, Any]) -> str:
        config_path = tmpdir.join("statsdparser.json")
        config_path.write(json.dumps(config))
        return str(config_path)

    return write_config


@pytest.fixture(name="tool")
def fixture_tool() -> StatsdParserTool:
    tool = StatsdParserTool()
    tool.set_config(None)
    return tool
