import argparse
import json
import logging
import sys
from typing import List, Optional

import lightroom as LR
from lightroom.exceptions import LightroomError, format_exc

_logger = logging.getLogger('lightroom')


def launch_gui() -> None:
    from lightroom import gui

    state = LR.BrightnessState.from_display()
    gui.run(state)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='lightroom', description='adjust the brightness of the primary display')
    parser.add_argument('-g', '--get', action='store_true', help='get the current screen brightness')
    parser.add_argument('-s', '--set', type=float, help='set the brightness to this value', metavar='VALUE')
    parser.add_argument('-o', '--output', action='store_true', help='print the name of the primary output')
    parser.add_argument('--debug', action='store_true', help='print debugging information')
    parser.add_argument('-v', '--verbose', action='store_true', help='log more detailed messages')
    parser.add_argument('-V', '--version', action='store_true', help='print the current version')

    args = parser.parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s:%(name)s: %(message)s'
    )

    try:
        if args.version:
            print(LR.__version__)
        elif args.debug:
            from lightroom import _debug
            print(json.dumps(_debug.info(), indent=4))
        elif args.get:
            print(LR.get_brightness())
        elif args.set is not None:
            xrandr = LR.XRandr()
            output = xrandr.resolve_output()
            print(f'{output} -> {LR.set_brightness(args.set, output=output, xrandr=xrandr)}')
        elif args.output:
            print(LR.get_primary_output())
        else:
            launch_gui()
    except LightroomError as e:
        _logger.error(format_exc(e), exc_info=args.verbose)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
