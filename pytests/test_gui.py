import errno
import logging
import sys
from unittest.mock import Mock

import pytest
from pytest_mock import MockerFixture

import lightroom as LR
from lightroom.xrandr import XRandr

from .mocks.xrandr_mock import MockExecutor

tk = pytest.importorskip('tkinter')
from lightroom import gui  # noqa: E402


@pytest.fixture(autouse=True)
def patch_tk(mocker: MockerFixture):
    '''Stub out everything that needs a display so `LightroomWindow` can be built headless'''
    mocker.patch.object(tk.Tk, '__init__', Mock(return_value=None))
    for name in ('title', 'geometry', 'minsize', 'mainloop', 'quit', 'destroy'):
        mocker.patch.object(gui.LightroomWindow, name)
    for name in ('StringVar', 'DoubleVar', 'Label', 'Scale'):
        mocker.patch.object(gui.tk, name)


@pytest.fixture
def state(xrandr: XRandr) -> LR.BrightnessState:
    return LR.BrightnessState.from_display(xrandr)


@pytest.fixture
def window(state: LR.BrightnessState) -> gui.LightroomWindow:
    return gui.LightroomWindow(state)


class TestLightroomWindow:
    def test_title_and_size(self, window: gui.LightroomWindow):
        window.title.assert_called_once_with('Lightroom')
        window.geometry.assert_called_once_with('240x80')
        window.minsize.assert_called_once_with(240, 80)

    def test_slider_wiring(self, window: gui.LightroomWindow):
        gui.tk.DoubleVar.assert_called_once_with(window, value=0.73)
        kwargs = gui.tk.Scale.call_args[1]
        assert kwargs['variable'] is window.level
        assert kwargs['command'] == window.on_change
        assert (kwargs['from_'], kwargs['to']) == (0.0, 1.0)

    def test_slider_is_not_set_after_creation(self, window: gui.LightroomWindow):
        # setting the scale directly makes tk invoke the command a second time
        window.slider.set.assert_not_called()

    def test_initial_level_applied_once(self, window: gui.LightroomWindow, executor: MockExecutor):
        assert executor.spawned == [['xrandr', '--output', 'HDMI-0', '--brightness', '0.73']]
        window.text.set.assert_called_once_with('Brightness: 0.73')

    def test_on_change(self, window: gui.LightroomWindow, executor: MockExecutor, state: LR.BrightnessState):
        window.on_change('0.9')
        assert state.level == 0.9
        assert executor.spawned[-1] == ['xrandr', '--output', 'HDMI-0', '--brightness', '0.9']
        assert len(executor.spawned) == 2
        window.text.set.assert_called_with('Brightness: 0.90')

    def test_on_change_out_of_range(self, window: gui.LightroomWindow, executor: MockExecutor):
        window.on_change(0.2)
        assert executor.spawned[-1] == ['xrandr', '--output', 'HDMI-0', '--brightness', '0.4']
        window.text.set.assert_called_with('Brightness: 0.20')

    def test_callback_exception_stops_mainloop(
        self, window: gui.LightroomWindow, executor: MockExecutor, caplog: pytest.LogCaptureFixture
    ):
        executor.error = FileNotFoundError(errno.ENOENT, 'No such file or directory', 'xrandr')
        try:
            window.on_change(0.8)
        except LR.CommandLaunchError:
            exc_info = sys.exc_info()

        with caplog.at_level(logging.CRITICAL):
            window.report_callback_exception(*exc_info)

        assert window.error is exc_info[1]
        window.quit.assert_called_once_with()
        assert 'CommandLaunchError' in caplog.text


class TestRun:
    @pytest.fixture
    def window_cls(self, mocker: MockerFixture) -> Mock:
        return mocker.patch.object(gui, 'LightroomWindow', Mock(return_value=Mock(error=None)))

    def test_closing_the_window(self, window_cls: Mock, state: LR.BrightnessState):
        assert gui.run(state) is None
        window_cls.assert_called_once_with(state)
        window = window_cls.return_value
        window.mainloop.assert_called_once_with()
        # closing the window already destroyed it
        window.destroy.assert_not_called()

    def test_callback_error_is_raised(self, window_cls: Mock, state: LR.BrightnessState):
        error = LR.CommandLaunchError(['xrandr'], FileNotFoundError(errno.ENOENT, 'No such file or directory'))
        window_cls.return_value.error = error
        with pytest.raises(LR.CommandLaunchError) as exc_info:
            gui.run(state)
        assert exc_info.value is error
        window_cls.return_value.destroy.assert_called_once_with()

    def test_window_cannot_be_opened(self, window_cls: Mock, state: LR.BrightnessState):
        window_cls.side_effect = tk.TclError('no display name and no $DISPLAY environment variable')
        with pytest.raises(LR.LightroomError) as exc_info:
            gui.run(state)
        assert isinstance(exc_info.value.__cause__, tk.TclError)
        window_cls.return_value.mainloop.assert_not_called()
