# session/buffer.py

class LineBuffer:
    """Holds the line being typed. There is no cursor: the prompt hands over
    its whole text, and history navigation replaces it wholesale."""

    def __init__(self, text: str = ""):
        self.text = text

    def __str__(self) -> str:
        return self.text

    def set(self, text: str) -> None:
        self.text = text

    def clear(self) -> None:
        self.text = ""
