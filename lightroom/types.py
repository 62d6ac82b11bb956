'''
Submodule containing type aliases used throughout the package.

Splitting these definitions into a seperate submodule allows for detailed
explanations without cluttering up the rest of the package.
'''
from typing import Sequence

Brightness = float
'''
A brightness multiplier as understood by `xrandr --brightness`.
`1.0` is the normal brightness of the output, lower values dim it.

Values held by `lightroom.BrightnessState` may be anything the slider allows.
Values sent to `xrandr` are always clamped, see `lightroom.helpers.clamp_brightness`.
'''

OutputName = str
'''
The name `xrandr` gives to a physical display output, for example `'HDMI-0'`
or `'DP-1'`.
'''

Arguments = Sequence[str]
'''Command line arguments passed to an executable, excluding the executable itself'''
