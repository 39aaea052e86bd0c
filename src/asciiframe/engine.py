from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CharacterGrid:
    """Rows of ramp characters sampled from one frame; no other characters appear."""

    lines: tuple[str, ...]  # one string per sampled row

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def line_length(self) -> int:
        return max((len(line) for line in self.lines), default=0)

    @property
    def is_empty(self) -> bool:
        return self.line_count == 0 or self.line_length == 0

    @property
    def text(self) -> str:
        """The grid as text, each row terminated by a newline."""
        return "".join(f"{line}\n" for line in self.lines)
