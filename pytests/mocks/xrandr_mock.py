import textwrap
from typing import Dict, List, Optional, Tuple

from lightroom.helpers import CommandExecutor, CommandResult, as_command
from lightroom.types import Arguments

XRANDR_OUTPUT = textwrap.dedent('''
    Screen 0: minimum 8 x 8, current 1920 x 1080, maximum 16384 x 16384
    DVI-D-0 disconnected (normal left inverted right x axis y axis)
    HDMI-0 connected primary 1920x1080+0+0 (normal left inverted right x axis y axis) 531mm x 299mm
       1920x1080     60.00*+  59.94    50.00
       1280x720      60.00    59.94    50.00
    VGA-1 disconnected (normal left inverted right x axis y axis)
''')
'''Mocks the output of `xrandr` (no arguments) with `HDMI-0` as the primary output'''


def mock_xrandr_verbose_output(brightness: str = '0.73') -> str:
    '''
    Mocks the output of `xrandr --verbose` for a single connected display
    '''
    return textwrap.dedent(f'''
        Screen 0: minimum 8 x 8, current 1920 x 1080, maximum 16384 x 16384
        HDMI-0 connected primary 1920x1080+0+0 (0x1bb) normal (normal left inverted right x axis y axis) 531mm x 299mm
                Identifier: 0x1ba
                Timestamp:  2054
                Subpixel:   unknown
                Gamma:      1.0:1.0:1.0
                Brightness: {brightness}
                Clones:
                CRTC:       0
                CRTCs:      0 1 2 3
                Transform:  1.000000 0.000000 0.000000
                            0.000000 1.000000 0.000000
                            0.000000 0.000000 1.000000
                           filter:
          1920x1080 (0x1bc) 148.500MHz +HSync +VSync *current +preferred
                h: width  1920 start 2008 end 2052 total 2200 skew    0 clock  67.50KHz
                v: height 1080 start 1084 end 1089 total 1125           clock  60.00Hz
        VGA-1 disconnected (normal left inverted right x axis y axis)
    ''')


class MockExecutor(CommandExecutor):
    '''
    Returns canned results for commands and records everything it is asked to run.

    Args:
        results: maps a full command (as a tuple) to the result it should produce.
            Commands not in here return the default xrandr output
        error: if set, raised by every call instead of running anything
    '''
    def __init__(
        self,
        results: Optional[Dict[Tuple[str, ...], CommandResult]] = None,
        error: Optional[OSError] = None
    ):
        self.results = {
            ('xrandr',): CommandResult(XRANDR_OUTPUT, '', 0),
            ('xrandr', '--verbose'): CommandResult(mock_xrandr_verbose_output(), '', 0),
            **(results or {})
        }
        self.error = error
        self.executed: List[List[str]] = []
        self.spawned: List[List[str]] = []

    def execute(self, name: str, args: Arguments = ()) -> CommandResult:
        command = as_command(name, args)
        self.executed.append(command)
        if self.error is not None:
            raise self.error
        try:
            return self.results[tuple(command)]
        except KeyError:
            raise NotImplementedError(f'mock for command not implemented: {command}')

    def spawn(self, name: str, args: Arguments = ()) -> None:
        command = as_command(name, args)
        self.spawned.append(command)
        if self.error is not None:
            raise self.error
