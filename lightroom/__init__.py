import logging
from dataclasses import dataclass, field
from typing import Optional

from ._version import __author__, __version__  # noqa: F401
from . import config
from .exceptions import (BrightnessUnparseableError, CommandLaunchError,  # noqa: F401
                         LightroomError, OutputNotFoundError)
from .helpers import clamp_brightness
from .types import Brightness, OutputName
from .xrandr import XRandr

_logger = logging.getLogger(__name__)
_logger.addHandler(logging.NullHandler())


def get_primary_output(xrandr: Optional[XRandr] = None) -> OutputName:
    '''
    Returns the name of the primary connected output

    Args:
        xrandr: the `XRandr` instance to use. A default one is created if not given

    Raises:
        OutputNotFoundError: if no primary connected output is reported
        CommandLaunchError: if xrandr cannot be run

    Example:
        ```python
        import lightroom

        print(lightroom.get_primary_output())  # 'HDMI-0'
        ```
    '''
    return (xrandr or XRandr()).resolve_output()


def get_brightness(xrandr: Optional[XRandr] = None) -> Brightness:
    '''
    Returns the current brightness as reported by `xrandr --verbose`,
    or `config.DEFAULT_BRIGHTNESS` if it could not be queried.

    Args:
        xrandr: the `XRandr` instance to use. A default one is created if not given

    Example:
        ```python
        import lightroom

        brightness = lightroom.get_brightness()
        ```
    '''
    return (xrandr or XRandr()).read_brightness()


def set_brightness(
    value: Brightness,
    output: Optional[OutputName] = None,
    xrandr: Optional[XRandr] = None
) -> Brightness:
    '''
    Sets the brightness of an output. The new value is applied in the background,
    this function does not wait for it to take effect.

    Args:
        value: the new brightness. Clamped with `lightroom.helpers.clamp_brightness`
        output: the output to adjust. Defaults to the primary connected output
        xrandr: the `XRandr` instance to use. A default one is created if not given

    Returns:
        The brightness that was actually sent to the display

    Example:
        ```python
        import lightroom

        # dim the primary display
        lightroom.set_brightness(0.6)

        # values outside of the accepted range fall back to the minimum
        lightroom.set_brightness(2)  # returns 0.4
        ```
    '''
    xrandr = xrandr or XRandr()
    if output is None:
        output = xrandr.resolve_output()
    xrandr.write_brightness(value, output)
    return clamp_brightness(value)


@dataclass
class BrightnessState:
    '''
    The state behind the brightness slider.

    `level` holds whatever the slider was last set to. Only the clamped
    value is ever sent to the display.
    '''
    output: OutputName
    '''The output being controlled. Resolved once and never changed'''
    level: Brightness = field(default_factory=lambda: config.DEFAULT_BRIGHTNESS)
    '''The current slider value'''
    label: str = field(default_factory=lambda: config.LABEL)
    '''Static name shown next to the level'''
    xrandr: XRandr = field(default_factory=XRandr, compare=False, repr=False)

    @classmethod
    def from_display(cls, xrandr: Optional[XRandr] = None, label: Optional[str] = None) -> 'BrightnessState':
        '''
        Create the state from the current display configuration.
        The brightness is read first and then the primary output is resolved.

        Args:
            xrandr: the `XRandr` instance to use. A default one is created if not given
            label: defaults to `config.LABEL`

        Raises:
            OutputNotFoundError: if no primary connected output is reported
            CommandLaunchError: if xrandr cannot be run to find the output
            BrightnessUnparseableError: if the reported brightness is not a number
        '''
        xrandr = xrandr or XRandr()
        level = xrandr.read_brightness()
        output = xrandr.resolve_output()
        _logger.info(f'controlling output {output!r}, initial brightness {level}')
        return cls(
            output=output,
            level=level,
            label=config.LABEL if label is None else label,
            xrandr=xrandr
        )

    @property
    def text(self) -> str:
        return f'{self.label}: {self.level:.2f}'

    def update(self, level: Brightness) -> str:
        '''
        Handle a new slider value: store it, send it to the display and
        return the new label text.

        Raises:
            CommandLaunchError: if xrandr cannot be started
        '''
        self.level = float(level)
        self.xrandr.write_brightness(self.level, self.output)
        return self.text
