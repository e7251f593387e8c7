"""ramp-palette — Create, inspect and render addressable color palettes.

Usage: uv run ramp-palette <command> [options]

Formats are auto-discovered from ramp_palette/formats/.
Each format module's docstring is its documentation.
Run `ramp-palette help <format>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, ramp-palette looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from ramp_palette import registry
from ramp_palette.core.color import Color
from ramp_palette.core.env import load_env, settings
from ramp_palette.core.errors import PaletteError
from ramp_palette.core.format import FormatError, PaletteFormat
from ramp_palette.core.report import format_json, format_text
from ramp_palette.core.swatch import render_swatch


def _load_format_module(name: str) -> object:
    """Load the raw module for a format (for docstring access)."""
    fmt = registry.get(name)
    return importlib.import_module(fmt.__module__)


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        "  ramp-palette new dungeon.zpl --name Dungeon --color '#ff0000' --color '#00ff00'\n"
        '  ramp-palette new sky.json --format default --name Sky --color 7dc7ff\n'
        '  ramp-palette show sky.json --json\n'
        '  ramp-palette swatch sky.json sky.png --cell 24\n'
        '  ramp-palette formats\n'
        '  ramp-palette help zpl\n'
        '\n'
        'Env vars (set in .env or environment):\n'
        '  RAMP_PALETTE_FORMAT     default format (zpl)\n'
        '  RAMP_PALETTE_LOG_LEVEL  DEBUG, INFO, WARNING (default), ERROR\n'
    )
    parser = argparse.ArgumentParser(
        prog='ramp-palette',
        description='Create, inspect and render addressable color palettes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    # Global --env-file option before subcommand
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='command', help='Command to run')

    p = sub.add_parser('new', help='Create a palette and write it to a file')
    p.add_argument('output', help='Output palette file')
    p.add_argument('-n', '--name', required=True, help='Palette name')
    p.add_argument('-f', '--format', default=None, help='Format name (default: from extension or env)')
    p.add_argument(
        '-c',
        '--color',
        action='append',
        default=[],
        metavar='HEX',
        help='Color to add, in allocation order (repeatable)',
    )

    p = sub.add_parser('show', help='Print the contents of a palette file')
    p.add_argument('input', help='Palette file')
    p.add_argument('-f', '--format', default=None, help='Format name (default: from extension or env)')
    p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    p = sub.add_parser('swatch', help='Render one page of a palette file as PNG')
    p.add_argument('input', help='Palette file')
    p.add_argument('image', help='Output PNG path')
    p.add_argument('-f', '--format', default=None, help='Format name (default: from extension or env)')
    p.add_argument('-p', '--page', type=int, default=0, help='Page to render (default: 0)')
    p.add_argument('--cell', type=int, default=16, metavar='PX', help='Cell size in pixels (default: 16)')

    sub.add_parser('formats', help='List available formats')

    # `help` subcommand prints the full module docstring for a format
    help_parser = sub.add_parser('help', help='Print full docs for a format')
    help_parser.add_argument('format_name', nargs='?', help='Format name')

    return parser


def _resolve_format(name: str | None, path: str) -> type[PaletteFormat]:
    """Explicit --format, then the file extension, then RAMP_PALETTE_FORMAT."""
    if name:
        return registry.get(name)
    guessed = registry.for_path(path)
    if guessed is not None:
        return guessed
    return registry.get(settings()['format'])


def _print_formats() -> None:
    print('Available formats:\n')
    for name, fmt in sorted(registry.all_formats().items()):
        print(f'  {name:<10} {fmt.extension:<6} {fmt.help}')
    print('\nRun: ramp-palette help <format> for full docs.')


def _print_help(name: str | None) -> None:
    """Print full module docstring for a format."""
    if name is None:
        _print_formats()
        return

    formats = registry.all_formats()
    if name not in formats:
        print(f'Unknown format: {name}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(formats))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_format_module(name).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {name!r})')
        return
    print(doc)


def _cmd_new(args: argparse.Namespace) -> None:
    fmt = _resolve_format(args.format, args.output)
    pal = fmt(args.name)
    for hex_color in args.color:
        pal.core.add_color(Color.from_hex(hex_color))
    with open(args.output, 'wb') as f:
        pal.write_palette(f)
    print(f'ramp-palette: wrote {len(pal.core)} colors to {args.output} ({fmt.name})', file=sys.stderr)


def _read(args: argparse.Namespace) -> PaletteFormat:
    fmt = _resolve_format(args.format, args.input)
    with open(args.input, 'rb') as f:
        return fmt.read_palette(f)


def _cmd_show(args: argparse.Namespace) -> None:
    pal = _read(args)
    print(format_json(pal.core) if args.json else format_text(pal.core))


def _cmd_swatch(args: argparse.Namespace) -> None:
    pal = _read(args)
    image = render_swatch(pal.core, page=args.page, cell=args.cell)
    image.save(args.image)
    print(f'ramp-palette: wrote {image.width}×{image.height} swatch to {args.image}', file=sys.stderr)


COMMANDS = {
    'new': _cmd_new,
    'show': _cmd_show,
    'swatch': _cmd_swatch,
}


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    level = getattr(logging, settings()['log_level'], logging.WARNING)
    logging.basicConfig(level=level, format='%(levelname)s %(name)s: %(message)s')
    if env_path:
        print(f'ramp-palette: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'help':
        _print_help(getattr(args, 'format_name', None))
        return

    if args.command == 'formats':
        _print_formats()
        return

    try:
        COMMANDS[args.command](args)
    except (PaletteError, FormatError, NotImplementedError, KeyError, ValueError, OSError) as e:
        message = e.args[0] if isinstance(e, KeyError) and e.args else e
        print(f'Error: {message}', file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
