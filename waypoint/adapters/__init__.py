"""Adapters for the external collaborators: process runner, zoxide, WezTerm."""

from waypoint.adapters.multiplexer import Multiplexer
from waypoint.adapters.oracle import DirectoryOracle, ZoxideOracle
from waypoint.adapters.process import ProcessRunner, SubprocessRunner
from waypoint.adapters.wezterm import WeztermCli

__all__ = [
    "DirectoryOracle",
    "Multiplexer",
    "ProcessRunner",
    "SubprocessRunner",
    "WeztermCli",
    "ZoxideOracle",
]
