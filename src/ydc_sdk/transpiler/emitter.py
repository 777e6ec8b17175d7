"""
Output Emitter
==============

Append-only accumulator for generated C text. Fragments are kept in
emission order and joined once, when the translation has succeeded.
"""


class OutputEmitter:
    """
    Collects generated text fragments.

    Attributes:
        indent_unit: Text repeated once per block depth
        depth: Current block depth (0 at top level)
    """

    def __init__(self, indent_unit: str = "    "):
        self.indent_unit = indent_unit
        self.depth = 0
        self._fragments: list[str] = []

    def emit(self, fragment: str) -> None:
        """Append raw text."""
        self._fragments.append(fragment)

    def emit_line(self, text: str) -> None:
        """Append one line indented to the current depth."""
        self._fragments.append(f"{self.indent_unit * self.depth}{text}\n")

    def indent(self) -> None:
        """Enter a block."""
        self.depth += 1

    def dedent(self) -> None:
        """Leave a block."""
        if self.depth > 0:
            self.depth -= 1

    def text(self) -> str:
        """Return everything emitted so far."""
        return "".join(self._fragments)

    def __len__(self) -> int:
        return len(self._fragments)
