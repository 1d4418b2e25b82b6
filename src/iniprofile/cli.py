# -*- encoding: utf-8 -*-
# @File   : cli.py
# @Time   : 2026/10/19 12:26:50
# @Author : iniprofile contributors

"""Command line driver for a profile file."""

import argparse
import logging
import sys

from .editor import iter_fields
from .errors import ProfileIOError
from .ini.interchange import ProfileJsonHandler, ProfileYamlHandler
from .ini.parser import ProfileParser
from .store import StrictProfileStore

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_NOT_FOUND = 2
EXIT_BAD_INPUT = 3


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog='iniprofile', description='Inspect and edit an INI profile.')
    ap.add_argument('-f', '--file', default=None,
                    help='Profile path (default: <program>.ini next to it)')
    ap.add_argument('--encoding', default='utf-8')
    ap.add_argument('-v', '--verbose', action='store_true')

    sub = ap.add_subparsers(dest='command', required=True)
    sub.add_parser('sections', help='List section names')

    p = sub.add_parser('entries', help='List raw entries of a section')
    p.add_argument('section')

    p = sub.add_parser('get', help='Print one value')
    p.add_argument('section')
    p.add_argument('key')
    p.add_argument('--default', default=None,
                   help='Write and print this value when the entry is missing')

    p = sub.add_parser('set', help='Add or overwrite one value')
    p.add_argument('section')
    p.add_argument('key')
    p.add_argument('value')

    p = sub.add_parser('remove', help='Remove a section, or one of its keys')
    p.add_argument('section')
    p.add_argument('key', nargs='?', default=None)

    p = sub.add_parser('dump', help='Print the whole profile')
    p.add_argument('--format', choices=['ini', 'json', 'yaml'], default='ini')

    sub.add_parser('fields', help='List entries the way an editor shows them')
    return ap


def _dump(store: StrictProfileStore, fmt: str, encoding: str) -> str:
    doc = store.load()
    if fmt == 'json':
        return ProfileJsonHandler(store.path, encoding).dumps(doc) + '\n'
    if fmt == 'yaml':
        return ProfileYamlHandler.dumps(doc)
    return ProfileParser.dumps(doc)


def _run(args: argparse.Namespace, store: StrictProfileStore) -> int:
    out = sys.stdout
    match args.command:
        case 'sections':
            for i in store.enumerate_sections():
                out.write(i + '\n')
        case 'entries':
            for i in store.enumerate_entries(args.section):
                out.write(i + '\n')
        case 'get':
            if args.default is not None:
                value = store.get_or_default(
                    args.section, args.key, args.default)
            else:
                value = store.get(args.section, args.key)
            if value is None:
                return EXIT_NOT_FOUND
            out.write(value + '\n')
        case 'set':
            store.set(args.section, args.key, args.value)
        case 'remove':
            store.remove(args.section, args.key)
        case 'dump':
            out.write(_dump(store, args.format, args.encoding))
        case 'fields':
            for field in iter_fields(store):
                mark = ' ' if field.enabled else '-'
                out.write(f'{mark} [{field.section}] {field.key} = '
                          f'{field.value}\n')
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='[%(asctime)s] %(levelname)s: %(message)s')

    store = StrictProfileStore(args.file, args.encoding)
    logger.debug('Using profile %s', store.path)
    try:
        return _run(args, store)
    except ProfileIOError as e:
        sys.stderr.write(f'iniprofile: {e}\n')
        return EXIT_IO_ERROR
    except ValueError as e:
        sys.stderr.write(f'iniprofile: {e}\n')
        return EXIT_BAD_INPUT


if __name__ == '__main__':
    sys.exit(main())
