# cli.py

import os
import sys
import argparse
from typing import List, Optional, TextIO

from rich import box
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.console import Console

from . import __version__, config, state
from .logger import logger
from .style import (
    Foreground, Background, BUILTIN_THEMES, describe_theme, list_themes, paint, styles,
)

FORCE_ENV_KEY = 'KOLOR_FORCE'
SAMPLE = 'Sample text'
DEMO_TEXT = 'The quick brown fox'

EPILOG = """
Examples:
  kolor --red 'Hello World'
  kolor --green --bold 'Success!'
  echo 'Hello' | kolor --red
  kolor --success 'Done!'
  kolor --gradient red,blue 'Fade away'
"""

THEME_HELP = {
    'success': 'Apply success theme (green + bold)',
    'error': 'Apply error theme (white on red + bold)',
    'warning': 'Apply warning theme (yellow + bold)',
    'info': 'Apply info theme (cyan)',
    'debug': 'Apply debug theme (magenta)',
}


def _int_triple(value: str) -> List[int]:
    parts = value.split(',')
    try:
        return [int(p) for p in parts]
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid RGB value: {value!r}")


def _name_pair(value: str) -> List[str]:
    parts = [p.strip() for p in value.split(',')]
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected START,END, got {value!r}")
    return parts


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='kolor',
        usage='kolor [options] TEXT',
        description='Style terminal text with ANSI colors, styles and themes.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=EPILOG,
    )
    parser.add_argument('text', nargs='*', help='Text to style (read from stdin when omitted)')

    colors = parser.add_argument_group('colors')
    for color in Foreground.keys():
        colors.add_argument(f'--{color}', dest='foreground', action='store_const',
                            const=color, help=f'Apply {color} foreground')
    for color in Background.keys():
        colors.add_argument(f'--on-{color}', dest='background', action='store_const',
                            const=color, help=f'Apply {color} background')

    style_group = parser.add_argument_group('styles')
    for name in styles():
        style_group.add_argument(f'--{name}', dest='styles', action='append_const',
                                 const=name, help=f'Apply {name} style')

    themes = parser.add_argument_group('themes')
    for name in BUILTIN_THEMES:
        themes.add_argument(f'--{name}', dest='theme', action='store_const',
                            const=name, help=THEME_HELP[name])

    extra = parser.add_argument_group('extra')
    extra.add_argument('--rgb', metavar='R,G,B', type=_int_triple,
                       help='Apply RGB color (e.g., 255,0,0)')
    extra.add_argument('--hex', '--with-hex', dest='with_hex', metavar='COLOR',
                       help='Apply hex color (e.g., FF0000)')
    extra.add_argument('--gradient', metavar='START,END', type=_name_pair,
                       help='Apply gradient (e.g., red,blue)')
    extra.add_argument('--rainbow', action='store_true', help='Apply rainbow effect')

    utility = parser.add_argument_group('utility')
    utility.add_argument('--list-colors', action='store_true', help='List available colors')
    utility.add_argument('--list-styles', action='store_true', help='List available styles')
    utility.add_argument('--list-themes', action='store_true', help='List available themes')
    utility.add_argument('--demo', action='store_true', help='Show color demonstration')
    utility.add_argument('--no-color', action='store_true', help='Disable colors')
    utility.add_argument('-v', '--version', action='store_true', help='Show version')
    return parser


class KolorCLI:
    """
    Command-line front end: parses flags, then hands the text to the styling
    operations and prints the result.
    """
    def __init__(self, args: Optional[List[str]] = None,
                 stdin: Optional[TextIO] = None,
                 stdout: Optional[TextIO] = None,
                 load_config: bool = True):
        self.args = list(sys.argv[1:] if args is None else args)
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.load_config = load_config
        self.parser = build_parser()
        self.options = None

    @property
    def console(self) -> Console:
        enabled = state.is_enabled()
        return Console(file=self.stdout, force_terminal=enabled,
                       no_color=not enabled, highlight=False)

    def run(self) -> int:
        """Parse arguments and dispatch; returns the process exit code."""
        if self.load_config:
            config.init()
        self.options = self.parser.parse_args(self.args)

        if self.options.no_color:
            state.disable()

        if self.options.list_colors:
            self.list_colors()
        elif self.options.list_styles:
            self.list_styles()
        elif self.options.list_themes:
            self.list_themes()
        elif self.options.demo:
            self.show_demo()
        elif self.options.version:
            self.stdout.write(f"Kolor {__version__}\n")
        else:
            return self.colorize_text()
        return 0

    def read_text(self) -> Optional[str]:
        if self.options.text:
            return ' '.join(self.options.text)
        if self.stdin.isatty():
            return None
        text = self.stdin.read()
        if text.endswith('\r\n'):
            return text[:-2]
        return text[:-1] if text.endswith('\n') else text

    def colorize_text(self) -> int:
        """Style the input text according to the parsed options and print it."""
        text = self.read_text()
        if text is None:
            self.stdout.write("Error: No text provided\n")
            self.stdout.write(self.parser.format_usage())
            return 1

        if not self.stdout.isatty() and state.is_enabled() and not os.environ.get(FORCE_ENV_KEY):
            logger.debug('stdout is not a terminal; disabling colors')
            state.disable()

        opts = self.options
        styled = paint(text)
        if opts.gradient:
            styled = styled.gradient(*opts.gradient)
        elif opts.rainbow:
            styled = styled.rainbow()
        elif opts.theme:
            styled = styled.apply_named(opts.theme)
        else:
            if opts.rgb and len(opts.rgb) == 3:
                styled = styled.rgb(*opts.rgb)
            if opts.with_hex:
                styled = styled.with_hex(opts.with_hex)
            if opts.foreground:
                styled = styled.apply_named(opts.foreground)
            if opts.background:
                styled = styled.apply_named(f"on_{opts.background}")
            for name in opts.styles or []:
                styled = styled.apply_named(name)

        self.stdout.write(f"{styled}\n")
        return 0

    def list_colors(self) -> None:
        table = self._listing('Available colors')
        for color in Foreground.keys():
            table.add_row(color, Text.from_ansi(str(paint(SAMPLE).apply_named(color))))
        self.console.print(table)

    def list_styles(self) -> None:
        table = self._listing('Available styles')
        for name in styles():
            table.add_row(name, Text.from_ansi(str(paint(SAMPLE).apply_named(name))))
        self.console.print(table)

    def list_themes(self) -> None:
        table = self._listing('Available themes')
        table.add_column('Definition', style='dim')
        for name in list_themes():
            sample = Text.from_ansi(str(paint(SAMPLE).apply_named(name)))
            table.add_row(name, sample, ', '.join(describe_theme(name) or []))
        self.console.print(table)

    def _listing(self, title: str) -> Table:
        table = Table(title=title, box=box.SIMPLE, show_header=False, title_justify='left')
        table.add_column('Name', min_width=10)
        table.add_column('Sample')
        return table

    def show_demo(self) -> None:
        """Print every color, background, style and theme side by side."""
        console = self.console
        console.print(Panel('Kolor Demo', box=box.ROUNDED, expand=False))

        def section(title: str, rows) -> None:
            console.print(f"\n{title}:")
            for label, styled in rows:
                console.print(Text(f"{label}: ".ljust(12)) + Text.from_ansi(str(styled)))

        section('Basic colors', [(c, paint(DEMO_TEXT).apply_named(c)) for c in Foreground.keys()])
        section('Background colors', [
            (f"on_{c}", paint(DEMO_TEXT).apply_named(f"on_{c}")) for c in Background.keys()
        ])
        section('Styles', [(s, paint(DEMO_TEXT).apply_named(s)) for s in styles()])
        section('Combinations', [
            ('Red on white', paint(DEMO_TEXT).red.on_white),
            ('Bold green', paint(DEMO_TEXT).green.bold),
            ('Complex', paint(DEMO_TEXT).red.on_blue.bold.underline),
        ])
        section('Themes', [(t, paint(DEMO_TEXT).apply_named(t)) for t in list_themes()])
        section('Rainbow', [('rainbow', paint(f"{DEMO_TEXT} jumps over the lazy dog").rainbow())])


def main(args: Optional[List[str]] = None) -> None:
    try:
        sys.exit(KolorCLI(args).run())
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
