# test_cli.py

import io
import pytest

from kolor import __version__, state
from kolor.cli import KolorCLI, main
from kolor.style.engine import strip
from kolor.style.themes import define_theme

ESC = '\x1b'


class FakeTTY(io.StringIO):
    def isatty(self):
        return True


def run(args, stdin=None, stdout=None):
    out = stdout or io.StringIO()
    cli = KolorCLI(args, stdin=stdin or FakeTTY(), stdout=out, load_config=False)
    code = cli.run()
    return code, out.getvalue()


@pytest.fixture(autouse=True)
def force_color(monkeypatch):
    monkeypatch.setenv('KOLOR_FORCE', '1')


class TestColorOptions:
    """Flags map onto styling operations."""

    def test_foreground(self):
        assert run(['--red', 'Hello']) == (0, f'{ESC}[31mHello{ESC}[0m\n')

    def test_background(self):
        assert run(['--on-blue', 'Hello'])[1] == f'{ESC}[44mHello{ESC}[0m\n'

    def test_words_are_joined(self):
        assert strip(run(['--green', 'Hello', 'World'])[1]) == 'Hello World\n'

    def test_styles_in_order(self):
        assert run(['--bold', '--underline', 'T'])[1] == f'{ESC}[1m{ESC}[4mT{ESC}[0m\n'

    def test_color_then_background_then_styles(self):
        _, out = run(['--bold', '--on-white', '--red', 'Alert'])
        assert out == f'{ESC}[31m{ESC}[47m{ESC}[1mAlert{ESC}[0m\n'

    def test_theme(self):
        assert run(['--success', 'Done'])[1] == f'{ESC}[32m{ESC}[1mDone{ESC}[0m\n'

    def test_rgb(self):
        assert run(['--rgb', '255,0,0', 'x'])[1] == f'{ESC}[38;2;255;0;0mx{ESC}[0m\n'

    def test_hex(self):
        assert run(['--hex', '#00FF00', 'x'])[1] == f'{ESC}[38;2;0;255;0mx{ESC}[0m\n'
        assert run(['--with-hex', '00FF00', 'x'])[1] == f'{ESC}[38;2;0;255;0mx{ESC}[0m\n'

    def test_gradient_wins_over_colors(self):
        _, out = run(['--gradient', 'red,blue', '--green', 'ab'])
        assert out == f'{ESC}[31ma{ESC}[34mb{ESC}[0m\n'

    def test_rainbow(self):
        assert strip(run(['--rainbow', 'abc'])[1]) == 'abc\n'
        assert f'{ESC}[33mb' in run(['--rainbow', 'abc'])[1]

    def test_no_color(self):
        assert run(['--no-color', '--red', 'Plain'])[1] == 'Plain\n'

    def test_bad_rgb_exits(self):
        with pytest.raises(SystemExit):
            run(['--rgb', 'a,b,c', 'x'])


class TestInput:
    """Arguments, stdin and redirection."""

    def test_reads_piped_stdin(self):
        code, out = run(['--red'], stdin=io.StringIO('piped text\n'))
        assert (code, out) == (0, f'{ESC}[31mpiped text{ESC}[0m\n')

    def test_no_text_is_an_error(self):
        code, out = run(['--red'])
        assert code == 1
        assert 'Error: No text provided' in out
        assert 'usage: kolor' in out

    def test_redirected_output_disables_colors(self, monkeypatch):
        monkeypatch.delenv('KOLOR_FORCE')
        assert run(['--red', 'x']) == (0, 'x\n')
        assert state.is_enabled() is False

    def test_tty_output_keeps_colors(self, monkeypatch):
        monkeypatch.delenv('KOLOR_FORCE')
        _, out = run(['--red', 'x'], stdout=FakeTTY())
        assert out == f'{ESC}[31mx{ESC}[0m\n'


class TestUtilityCommands:
    """Listings, demo and version."""

    def test_version(self):
        assert run(['--version']) == (0, f'Kolor {__version__}\n')

    def test_list_colors(self):
        out = strip(run(['--list-colors'])[1])
        assert 'Available colors' in out
        for color in ('black', 'red', 'white'):
            assert color in out

    def test_list_styles(self):
        out = strip(run(['--list-styles'])[1])
        assert 'bold' in out and 'reversed' in out
        assert 'clear' not in out

    def test_list_themes_includes_custom(self):
        define_theme('cli_theme', 'blue', 'on_white', 'underline')
        out = strip(run(['--list-themes'])[1])
        assert 'success' in out
        assert 'cli_theme' in out
        assert 'blue, on_white, underline' in out

    def test_demo(self):
        out = strip(run(['--demo'])[1])
        for heading in ('Kolor Demo', 'Basic colors', 'Background colors', 'Styles',
                        'Combinations', 'Themes', 'Rainbow'):
            assert heading in out

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            run(['--help'])
        assert exc.value.code == 0
        assert '--on-magenta' in capsys.readouterr().out


class TestMain:
    """Entry point wiring."""

    def test_main_exits_with_code(self, home, monkeypatch, capsys):
        monkeypatch.setattr('sys.stdin', FakeTTY())
        with pytest.raises(SystemExit) as exc:
            main(['--red'])
        assert exc.value.code == 1
        assert (home / '.kolorrc.py').exists()
