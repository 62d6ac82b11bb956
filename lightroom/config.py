'''
Contains globally applicable configuration variables.
'''
from functools import wraps
from typing import Callable, Tuple


def default_params(func: Callable):
    '''
    This decorator sets default kwarg values using global configuration variables.
    '''
    @wraps(func)
    def wrapper(*args, **kwargs):
        if kwargs.get('executable') is None:
            kwargs['executable'] = EXECUTABLE
        return func(*args, **kwargs)
    return wrapper


EXECUTABLE: str = 'xrandr'
'''
The display configuration executable to call. Used as the default value
for the `executable` parameter of `lightroom.xrandr.XRandr`.
'''

DEFAULT_BRIGHTNESS: float = 0.5
'''
Brightness reported when the current brightness cannot be queried.
'''

MIN_BRIGHTNESS: float = 0.4
'''
Exclusive lower bound of the brightness that will be sent to the display.
Anything at or below this (or above `MAX_BRIGHTNESS`) is replaced with this value.
'''

MAX_BRIGHTNESS: float = 1.0
'''
Inclusive upper bound of the brightness that will be sent to the display.
'''

LABEL: str = 'Brightness'
'''
Static name shown next to the brightness value in the window.
'''

TITLE: str = 'Lightroom'
'''Window title'''

WINDOW_SIZE: Tuple[int, int] = (240, 80)
'''
Initial and minimum window size as `(width, height)`.
'''
