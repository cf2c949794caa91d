# display/style.py

from io import StringIO
from typing import Iterable

from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from ..session.state import COLORS

CHROME_COLORS = {
    'TITLE': 'grey85',
    'BAR': 'on grey23',
    'BUTTON': 'grey62',
    'CLOSE': 'red3',
}
MATRIX_COLOR = '#00ff00'


class DisplayStyle:
    """
    Turns session content into styled ANSI text.

    Rendering goes through a rich Console writing into a StringIO, so the
    terminal layer only ever deals with finished strings.
    """

    def __init__(self, terminal=None):
        self.terminal = terminal
        self.rich_styles = {token: Style(color=hex_value) for token, hex_value in COLORS.items()}
        self.matrix_style = Style(color=MATRIX_COLOR, dim=True)

    def _console(self, width=None) -> Console:
        width = width or (self.terminal.width if self.terminal else 80)
        return Console(
            force_terminal=True,
            color_system="truecolor",
            file=StringIO(),
            highlight=False,
            width=width
        )

    def _capture(self, renderable, width=None) -> str:
        console = self._console(width)
        with console.capture() as c:
            console.print(renderable)
        return c.get()

    def get_rich_style(self, token): return self.rich_styles.get(token, Style())
    def get_prompt_style(self, token): return COLORS.get(token, COLORS['green'])

    def render_scrollback(self, lines: Iterable[str], color: str, width=None) -> str:
        """Render scrollback lines, one terminal line each, in the session color."""
        lines = list(lines)
        if not lines:
            return ''
        style = self.get_rich_style(color)
        text = Text()
        for i, line in enumerate(lines):
            if i:
                text.append('\n')
            text.append(line, style=style)
        return self._capture(text, width)

    def render_backdrop(self, rows: Iterable[str], width=None) -> str:
        """Render the matrix backdrop, cropped to the terminal width."""
        text = Text('\n'.join(rows), style=self.matrix_style, no_wrap=True, overflow='crop')
        return self._capture(text, width)

    def render_title_bar(self, title: str, minimized: bool = False, fullscreen: bool = False,
                         width=None) -> str:
        """Render the window title bar with its minimize/fullscreen/close buttons."""
        bar = Table.grid(expand=True)
        bar.style = CHROME_COLORS['BAR']
        bar.add_column(justify="left")
        bar.add_column(justify="right")
        label = Text.assemble(("▣ ", CHROME_COLORS['BUTTON']), (title, CHROME_COLORS['TITLE']))
        if minimized:
            buttons = Text("[^W restore]", style=CHROME_COLORS['BUTTON'])
        else:
            buttons = Text.assemble(
                ("[^W _] ", CHROME_COLORS['BUTTON']),
                ("[F11 ▢] " if not fullscreen else "[F11 ◱] ", CHROME_COLORS['BUTTON']),
                ("[^X ✕]", CHROME_COLORS['CLOSE']),
            )
        bar.add_row(label, buttons)
        return self._capture(bar, width)
