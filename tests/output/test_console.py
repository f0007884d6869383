"""Tests for Rich Console factory and theme."""

from io import StringIO

from charwin.output.console import CHARWIN_THEME, create_console, get_output, style_for_shape


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        assert isinstance(create_console().file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[bold red]hello[/bold red]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "hello" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestStyleForShape:
    def test_known_kinds(self) -> None:
        assert style_for_shape("circle") == "charwin.shape.circle"
        assert style_for_shape("square") == "charwin.shape.square"

    def test_unknown_kind(self) -> None:
        assert style_for_shape("hexagon") == ""


class TestTheme:
    def test_theme_has_expected_styles(self) -> None:
        for name in ("charwin.ok", "charwin.error", "charwin.warning", "charwin.op"):
            assert name in CHARWIN_THEME.styles, f"Missing theme style: {name}"
