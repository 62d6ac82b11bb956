'''
A small helper module to assist with debugging the lightroom package
'''
import logging
import platform
import shutil
import traceback
from typing import Optional

from .xrandr import XRandr


def info(xrandr: Optional[XRandr] = None) -> dict:
    '''
    Gather and return information that may (or may not) be useful for debugging
    issues with the package.

    Failures are recorded as formatted tracebacks rather than raised, so this
    always returns something that can be attached to a bug report.
    '''
    import lightroom

    # configure logging
    logger = logging.getLogger(__name__).getChild('info')

    xrandr = xrandr or XRandr()
    debug_info = {
        'version': lightroom.__version__,
        'platform': platform.system(),
        'file': lightroom.__file__,
        'executable': xrandr.executable,
        'executable_path': shutil.which(xrandr.executable)
    }

    logger.debug('resolving the primary output')

    try:
        output = xrandr.resolve_output()
    except Exception:
        output = traceback.format_exc()
    finally:
        debug_info['primary_output'] = output

    logger.debug('querying the current brightness')

    try:
        brightness = xrandr.read_brightness()
    except Exception:
        brightness = traceback.format_exc()
    finally:
        debug_info['brightness'] = brightness

    return debug_info
