# display/animations/__init__.py

from .matrix import MatrixBackdrop

class DisplayAnimations:
    """Coordinates terminal animation components."""
    def __init__(self, terminal, style, rng=None):
        """Initialize with DisplayTerminal and DisplayStyle instances."""
        self.terminal = terminal
        self.style = style
        self.rng = rng

    def create_matrix_backdrop(self, rows=None, columns=None):
        """Create a matrix backdrop sized to the terminal unless told otherwise."""
        return MatrixBackdrop(
            rng=self.rng,
            rows=rows or min(self.terminal.height, 20),
            columns=columns or min(self.terminal.width, 80)
        )

    def render_matrix_frame(self, rows=None, columns=None) -> str:
        """Generate one backdrop frame and return it styled."""
        frame = self.create_matrix_backdrop(rows, columns).generate()
        return self.style.render_backdrop(frame)

__all__ = ['DisplayAnimations', 'MatrixBackdrop']
