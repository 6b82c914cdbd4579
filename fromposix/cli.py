"""
A commandline script to convert POSIX export statements into Nushell environment assignments.
"""
from __future__ import annotations

import argparse
import re
import sys

import fromposix

from fromposix.lib.environment import LogLevel, environment, logger, set_log_level
from fromposix.lib.nushell import exports_to_nushell, render_json
from fromposix.lib.tools import normalize_input

_NAME = re.compile(r'(?m)^(\$env\.)(\S+)')


def highlight(text: str, color: str):
    """
    Uses ANSI color codes to highlight the variable names in rendered Nushell output.
    """
    return _NAME.sub(lambda m: F'{m[1]}\033[{color}m{m[2]}\033[0m', text)


def argparser() -> argparse.ArgumentParser:
    argp = argparse.ArgumentParser(
        prog='from-posix',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description=(
            'Read POSIX shell export statements and print the equivalent Nushell environment\n'
            'assignments. Statements can be separated by line breaks or by &&.'
        ))
    argp.add_argument(
        'files',
        metavar='file',
        nargs='*',
        help='Read input from these files; standard input is read when no file is given.'
    )
    argp.add_argument(
        '-j', '--json',
        action='store_true',
        help='Output a JSON list of name and value pairs instead of Nushell code.'
    )
    argp.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Increase the log level; specify twice for debug output.'
    )
    argp.add_argument(
        '-V', '--version',
        action='store_true',
        help='Only show the currently installed version and exit.'
    )
    return argp


def main(argv: list[str] | None = None, name_color: str = '93') -> int:
    """
    Main routine of the command line interface.
    """
    args = argparser().parse_args(argv)

    if args.version:
        print(fromposix.__version__)
        return 0

    level = LogLevel.FromVerbosity(args.verbose)
    if not args.verbose and (configured := environment.verbosity.value) is not None:
        level = configured
    set_log_level(level)

    log = logger(__name__)
    inputs: list[str] = []

    if not args.files:
        inputs.append(normalize_input(sys.stdin.buffer.read()))
    for path in args.files:
        try:
            with open(path, 'rb') as stream:
                inputs.append(normalize_input(stream.read()))
        except OSError as error:
            log.error(F'could not read {path}: {error!s}')
            return 1

    assignments = fromposix.parse_posix_exports(inputs)
    log.info(F'parsed {len(assignments)} assignments')

    if args.json:
        print(render_json(assignments, indent=2))
        return 0

    output = exports_to_nushell(assignments)

    if output and sys.stdout.isatty() and not environment.colorless.value:
        import colorama
        colorama.init()
        output = highlight(output, name_color)

    if output:
        print(output)
    return 0


def run():
    sys.exit(main())


if __name__ == '__main__':
    run()
