import errno

import pytest

from lightroom.xrandr import XRandr

from .mocks.xrandr_mock import MockExecutor


@pytest.fixture
def executor() -> MockExecutor:
    return MockExecutor()


@pytest.fixture
def xrandr(executor: MockExecutor) -> XRandr:
    return XRandr(executor)


@pytest.fixture
def missing_executable() -> FileNotFoundError:
    '''The error raised when trying to run an executable that is not installed'''
    return FileNotFoundError(errno.ENOENT, 'No such file or directory', 'xrandr')
