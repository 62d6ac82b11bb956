from typing import List, Optional


def format_exc(e: Exception) -> str:
    '''@private'''
    return f'{type(e).__name__}: {e}'


class LightroomError(Exception):
    '''
    Generic error class designed to make catching errors under one umbrella easy.
    '''
    ...


class OutputNotFoundError(LightroomError, LookupError):
    '''Could not find the primary connected output'''
    ...


class BrightnessUnparseableError(LightroomError, ValueError):
    '''
    A line containing the brightness label did not hold a valid number.

    Example:
        ```python
        try:
            float('abc')
        except ValueError as e:
            raise BrightnessUnparseableError('Brightness: abc') from e
        ```
    '''
    def __init__(self, line: str, message: Optional[str] = None):
        self.line: str = line
        super().__init__(message or f'cannot parse brightness from {line!r}')


class CommandLaunchError(LightroomError, OSError):
    '''
    A command could not be started at all (missing executable, permissions, etc).
    The original `OSError` is kept as `__cause__`.

    Example:
        ```python
        try:
            subprocess.Popen(['xrandr'])
        except OSError as e:
            raise CommandLaunchError(['xrandr'], e) from e
        ```
    '''
    def __init__(self, command: List[str], exc: OSError):
        self.command: List[str] = list(command)
        super().__init__(exc.errno, exc.strerror or str(exc), ' '.join(self.command))
