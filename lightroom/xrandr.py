import logging
import re
from typing import List, Optional

from . import config
from .exceptions import (BrightnessUnparseableError, CommandLaunchError,
                         OutputNotFoundError, format_exc)
from .helpers import (CommandExecutor, SubprocessExecutor, as_command,
                      clamp_brightness)
from .types import Arguments, Brightness, OutputName

_logger = logging.getLogger(__name__)

PRIMARY_OUTPUT_PATTERN = re.compile(r'(?P<output>[0-9A-Z-]+) connected primary')
'''Matches the line `xrandr` prints for the primary connected output, eg: `HDMI-0 connected primary 1920x1080+0+0`'''

BRIGHTNESS_LABEL = 'Brightness:'
'''The label preceding the brightness of an output in `xrandr --verbose`'''


def parse_primary_output(stdout: str) -> OutputName:
    '''
    Find the name of the primary connected output in the output of `xrandr`.

    If more than one output claims to be primary, the first one wins.

    Args:
        stdout: the standard output of `xrandr` (no arguments)

    Returns:
        The name of the output, eg: `'HDMI-0'`

    Raises:
        OutputNotFoundError: if no line marks a connected output as primary

    Example:
        ```python
        from lightroom.xrandr import parse_primary_output

        parse_primary_output('HDMI-0 connected primary 1920x1080+0+0\\nVGA-1 disconnected\\n')
        # 'HDMI-0'
        ```
    '''
    matches: List[str] = [m.group('output') for m in PRIMARY_OUTPUT_PATTERN.finditer(stdout)]
    if not matches:
        raise OutputNotFoundError('failed to find the primary connected output')
    if len(matches) > 1:
        _logger.warning(f'multiple primary outputs found {matches}, using {matches[0]!r}')
    return matches[0]


def parse_brightness(stdout: str) -> Brightness:
    '''
    Extract the brightness from the output of `xrandr --verbose`.

    Only the first line containing `BRIGHTNESS_LABEL` is considered.
    The label and every whitespace character are stripped from that line
    and whatever remains is parsed as a float.

    Args:
        stdout: the standard output of `xrandr --verbose`

    Returns:
        The parsed brightness, or `config.DEFAULT_BRIGHTNESS` if no line
        contains the label

    Raises:
        BrightnessUnparseableError: if the remainder of the line is not a number
    '''
    for line in stdout.split('\n'):
        if BRIGHTNESS_LABEL not in line:
            continue
        value = ''.join(line.replace(BRIGHTNESS_LABEL, '').split())
        try:
            return float(value)
        except ValueError as e:
            raise BrightnessUnparseableError(line) from e
    return config.DEFAULT_BRIGHTNESS


class XRandr:
    '''
    Reads and sets the brightness of the primary display using the xrandr executable.

    Args:
        executor: runs the commands. Defaults to `lightroom.helpers.SubprocessExecutor`
        executable: the xrandr executable to be called. Defaults to `config.EXECUTABLE`

    Example:
        ```python
        from lightroom.xrandr import XRandr

        xrandr = XRandr()
        output = xrandr.resolve_output()
        xrandr.write_brightness(0.8, output)
        ```
    '''
    _logger = _logger.getChild('XRandr')

    @config.default_params
    def __init__(self, executor: Optional[CommandExecutor] = None, *, executable: Optional[str] = None):
        self.executor: CommandExecutor = executor if executor is not None else SubprocessExecutor()
        self.executable: str = executable  # type: ignore[assignment]

    def __repr__(self):
        return f'{type(self).__name__}(executor={self.executor!r}, executable={self.executable!r})'

    def _launch_error(self, args: Arguments, exc: OSError) -> CommandLaunchError:
        return CommandLaunchError(as_command(self.executable, args), exc)

    def resolve_output(self) -> OutputName:
        '''
        Find the name of the primary connected output.

        Raises:
            CommandLaunchError: if xrandr cannot be run
            OutputNotFoundError: if xrandr does not report a primary connected output
        '''
        try:
            result = self.executor.execute(self.executable)
        except OSError as e:
            raise self._launch_error((), e) from e

        output = parse_primary_output(result.stdout)
        self._logger.debug(f'primary output is {output!r}')
        return output

    def read_brightness(self) -> Brightness:
        '''
        Query the current brightness with `xrandr --verbose`.

        Failing to run the command, or the command writing anything to stderr,
        is logged and `config.DEFAULT_BRIGHTNESS` is returned instead.

        Raises:
            BrightnessUnparseableError: if the brightness line holds something other than a number
        '''
        try:
            result = self.executor.execute(self.executable, ['--verbose'])
        except OSError as e:
            self._logger.error(format_exc(self._launch_error(['--verbose'], e)))
            return config.DEFAULT_BRIGHTNESS

        if result.stderr != '':
            self._logger.error(result.stderr.rstrip('\n'))
            return config.DEFAULT_BRIGHTNESS

        brightness = parse_brightness(result.stdout)
        self._logger.debug(f'current brightness is {brightness}')
        return brightness

    def write_brightness(self, value: Brightness, output: OutputName):
        '''
        Set the brightness of an output without waiting for xrandr to finish.

        Args:
            value: the requested brightness, clamped with `lightroom.helpers.clamp_brightness`
            output: the output to adjust

        Raises:
            CommandLaunchError: if xrandr cannot be started
        '''
        args = ['--output', output, '--brightness', str(clamp_brightness(value))]
        try:
            self.executor.spawn(self.executable, args)
        except OSError as e:
            raise self._launch_error(args, e) from e
