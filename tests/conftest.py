"""Common test fixtures."""

from __future__ import annotations

from dataclasses import dataclass, field
from io import StringIO
from typing import TYPE_CHECKING
from unittest.mock import patch

import pytest
from rich.console import Console

import mint.console

if TYPE_CHECKING:
    from collections.abc import Iterator


@dataclass
class ConsoleFixture:
    """Captured diagnostics, which must be empty unless a test reads them."""

    _output: StringIO
    _checked: bool = field(default=False, init=False)

    def getvalue(self) -> str:
        """Get the diagnostics, exempting them from the emptiness check."""
        self._checked = True
        return self._output.getvalue()

    def assert_no_unexpected_output(self) -> None:
        """Fail on diagnostics the test never read."""
        if not self._checked:
            output = self._output.getvalue()
            assert output == "", "Unexpected console output"


@pytest.fixture
def console_out() -> Iterator[ConsoleFixture]:
    """Capture the diagnostics console, with verbose mode off."""
    mint.console._verbose = False
    output = StringIO()
    test_console = Console(file=output, force_terminal=False)
    fixture = ConsoleFixture(output)

    with patch("mint.console._console", test_console):
        yield fixture

    mint.console._verbose = False
    fixture.assert_no_unexpected_output()
