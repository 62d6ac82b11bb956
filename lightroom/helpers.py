'''
Helper functions for the package
'''
import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

from . import config
from .types import Arguments, Brightness

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    '''The captured outcome of a command that was run to completion'''
    stdout: str
    stderr: str
    returncode: int


class CommandExecutor(ABC):
    '''
    The boundary between this package and the processes it runs.
    Swap in a different implementation to run the brightness logic without
    a real display tool present.
    '''
    @abstractmethod
    def execute(self, name: str, args: Arguments = ()) -> CommandResult:
        '''
        Run a command and wait for it to exit.

        Args:
            name: the executable to run
            args: the arguments to pass to it

        Returns:
            The decoded stdout and stderr, along with the exit status

        Raises:
            OSError: if the command cannot be launched
        '''
        ...

    @abstractmethod
    def spawn(self, name: str, args: Arguments = ()) -> None:
        '''
        Start a command and return immediately. The outcome of the command
        is never inspected.

        Raises:
            OSError: if the command cannot be launched
        '''
        ...


class SubprocessExecutor(CommandExecutor):
    '''Runs commands on the local machine using `subprocess`'''
    _logger = _logger.getChild('SubprocessExecutor')

    def execute(self, name: str, args: Arguments = ()) -> CommandResult:
        command = as_command(name, args)
        self._logger.debug(f'run {command}')
        process = subprocess.run(command, capture_output=True)
        return CommandResult(
            stdout=process.stdout.decode(errors='replace'),
            stderr=process.stderr.decode(errors='replace'),
            returncode=process.returncode
        )

    def spawn(self, name: str, args: Arguments = ()) -> None:
        command = as_command(name, args)
        self._logger.debug(f'spawn {command}')
        subprocess.Popen(command, stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)


def as_command(name: str, args: Arguments = ()) -> List[str]:
    '''@private'''
    return [name, *args]


def clamp_brightness(value: Brightness) -> Brightness:
    '''
    Limit a brightness value to the range that is safe to send to the display.

    Values inside `(config.MIN_BRIGHTNESS, config.MAX_BRIGHTNESS]` are returned unchanged.
    Anything else, including `MIN_BRIGHTNESS` itself and `nan`, is replaced with
    `config.MIN_BRIGHTNESS` rather than the nearest bound, so an out of range value
    never makes the screen brighter than expected.

    Args:
        value: the requested brightness

    Returns:
        The brightness that should actually be applied

    Example:
        ```python
        from lightroom.helpers import clamp_brightness

        clamp_brightness(0.75)  # 0.75
        clamp_brightness(1.5)   # 0.4
        clamp_brightness(0)     # 0.4
        ```
    '''
    value = float(value)
    if config.MIN_BRIGHTNESS < value <= config.MAX_BRIGHTNESS:
        return value
    return config.MIN_BRIGHTNESS
