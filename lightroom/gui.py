'''
The brightness window. Everything here is tkinter wiring around
`lightroom.BrightnessState`, which does the actual work.
'''
import logging
import tkinter as tk
from typing import Optional

from . import BrightnessState, config
from .exceptions import LightroomError, format_exc

_logger = logging.getLogger(__name__)


class LightroomWindow(tk.Tk):
    '''A window with a label and a single slider controlling the brightness'''

    def __init__(self, state: BrightnessState):
        super().__init__()
        self.brightness = state
        self.error: Optional[BaseException] = None

        width, height = config.WINDOW_SIZE
        self.title(config.TITLE)
        self.geometry(f'{width}x{height}')
        self.minsize(width, height)

        self.text = tk.StringVar(self, value=state.text)
        tk.Label(self, textvariable=self.text).pack(pady=(8, 0))

        # the scale takes its starting value from the variable without invoking its command
        self.level = tk.DoubleVar(self, value=state.level)
        self.slider = tk.Scale(
            self, variable=self.level, from_=0.0, to=1.0, resolution=0.01,
            orient='horizontal', showvalue=False, command=self.on_change
        )
        self.slider.pack(fill='x', padx=8, pady=8)

        self.on_change(state.level)

    def on_change(self, value):
        self.text.set(self.brightness.update(float(value)))

    def report_callback_exception(self, exc, val, tb):
        # errors raised by callbacks are not recoverable
        _logger.critical(format_exc(val), exc_info=(exc, val, tb))
        self.error = val
        self.quit()


def run(state: BrightnessState):
    '''
    Open the brightness window and block until it is closed.

    Raises:
        LightroomError: if the window cannot be opened or a callback failed,
            eg: xrandr could not be started
    '''
    try:
        window = LightroomWindow(state)
    except tk.TclError as e:
        raise LightroomError(f'failed to open the window: {e}') from e

    window.mainloop()
    # closing the window destroys it, quitting after an error does not
    if window.error is not None:
        window.destroy()
        raise window.error
