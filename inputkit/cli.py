#!/usr/bin/env python3
"""
inputkit CLI entry point
"""

from __future__ import annotations
import sys
import argparse
import json
import logging

from inputkit.__version__ import __version__
from inputkit.log import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='inputkit',
        description='Keyboard input sets and emoji Unicode names',
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug mode with verbose logging'
    )
    parser.add_argument(
        '--config',
        type=str,
        default=None,
        help='Path to config file'
    )
    parser.add_argument(
        '--logfile',
        type=str,
        default=None,
        help='Path to log file (default: ~/.inputkit.log)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version='%(prog)s ' + __version__
    )

    sub = parser.add_subparsers(dest='command', required=True)

    rows = sub.add_parser('rows', help='Print the rows of an input set')
    rows.add_argument('kind', choices=['alphabetic', 'numeric', 'symbolic'])
    rows.add_argument('--device', choices=['phone', 'pad', 'tablet'], default=None,
                      help='Device class (default: from config)')
    rows.add_argument('--currency', default=None,
                      help='Currency symbol for numeric/symbolic sets (default: from config)')
    rows.add_argument('--uppercase', action='store_true', help='Print uppercased characters')
    rows.add_argument('--json', action='store_true', help='Print JSON')

    emo = sub.add_parser('emoji', help='Print Unicode identifier and name of emoji')
    emo.add_argument('emojis', nargs='+')
    emo.add_argument('--json', action='store_true', help='Print JSON')

    search = sub.add_parser('search', help='Find emoji by Unicode name')
    search.add_argument('query')
    search.add_argument('--limit', type=int, default=20)

    cfg = sub.add_parser('config', help='Show or change the saved configuration')
    cfg.add_argument('key', nargs='?', help='Config key to set')
    cfg.add_argument('value', nargs='?', help='New value (true/false for debug)')

    return parser.parse_args(argv)


def _print_json(data) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


def _cmd_rows(args: argparse.Namespace, config: dict) -> int:
    from inputkit.layout import DeviceClass, KeyboardCase, input_set

    device = DeviceClass.parse(args.device or config['device'])
    currency = args.currency
    if currency is None and args.kind == 'numeric':
        currency = config['numeric_currency']
    elif currency is None and args.kind == 'symbolic':
        currency = config['symbolic_currency']

    case = KeyboardCase.UPPERCASED if args.uppercase else KeyboardCase.LOWERCASED
    rows = input_set(args.kind, currency=currency).characters(device, case)
    logger.info("rows: kind=%s device=%s currency=%r", args.kind, device.value, currency)

    if args.json:
        _print_json(rows)
    else:
        for row in rows:
            print(' '.join(row))
    return 0


def _cmd_emoji(args: argparse.Namespace) -> int:
    from inputkit.emojis import Emoji

    result = []
    exit_code = 0
    for char in args.emojis:
        item = Emoji(char)
        if not item.is_valid:
            logger.warning("Not an emoji: %r", char)
            exit_code = 1
        result.append({
            'emoji': char,
            'identifier': item.unicode_identifier,
            'name': item.unicode_name,
        })

    if args.json:
        _print_json(result)
    else:
        for entry in result:
            print(f"{entry['emoji']}\t{entry['identifier']}\t{entry['name']}")
    return exit_code


def _cmd_search(args: argparse.Namespace) -> int:
    from inputkit.emojis import search

    for item in search(args.query, limit=args.limit):
        print(f"{item.char}\t{item.unicode_name}")
    return 0


def _cmd_config(args: argparse.Namespace) -> int:
    from inputkit.config import ConfigManager, validate_config

    mgr = ConfigManager(args.config, debug=args.debug)
    if args.key is None:
        _print_json(mgr.get_all())
        return 0
    if args.value is None:
        print(f"Missing value for '{args.key}'", file=sys.stderr)
        return 2

    value = args.value
    if args.key == 'debug':
        flag = value.strip().lower()
        if flag in ('true', '1', 'yes', 'on'):
            value = True
        elif flag in ('false', '0', 'no', 'off'):
            value = False

    updated = dict(mgr.get_all(), **{args.key: value})
    try:
        normalized = validate_config(updated)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    if args.key not in normalized:
        print(f"Unknown config key: '{args.key}'", file=sys.stderr)
        return 1

    mgr.set(args.key, normalized[args.key])
    if not mgr.save():
        return 1
    logger.info("config: %s=%r saved to %s", args.key, normalized[args.key], mgr.config_path)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for inputkit"""
    args = parse_args(argv)

    # Import after args parsing to avoid import-time side effects
    from inputkit.config import load_config

    config = load_config(args.config, debug=args.debug)

    # Setup logging (config may turn on debug too)
    debug = args.debug or config['debug']
    log = setup_logging(debug=debug, log_file=args.logfile)
    log.debug("inputkit %s: command=%s config=%s", __version__, args.command, config)

    if args.command == 'rows':
        return _cmd_rows(args, config)
    if args.command == 'emoji':
        return _cmd_emoji(args)
    if args.command == 'config':
        return _cmd_config(args)
    return _cmd_search(args)


if __name__ == '__main__':
    sys.exit(main())
