"""Tests for Rich Console factory and theme."""

from io import StringIO

from personcheck.output.console import PC_THEME, create_console, get_output


class TestCreateConsole:
    def test_returns_console_with_stringio(self) -> None:
        console = create_console()
        assert isinstance(console.file, StringIO)

    def test_no_color_disables_ansi(self) -> None:
        console = create_console(no_color=True)
        console.print("[pc.error]invalid[/pc.error]")
        output = get_output(console)
        assert "\x1b" not in output
        assert "invalid" in output

    def test_custom_width(self) -> None:
        assert create_console(width=80).width == 80

    def test_default_width(self) -> None:
        assert create_console().width == 120


class TestTheme:
    def test_styles_present(self) -> None:
        for name in ("pc.ok", "pc.error", "pc.label", "pc.key", "pc.tag"):
            assert name in PC_THEME.styles
