"""StringBuilder for O(n) HTML accumulation.

Renderers append fragments to a list and join once at the end instead of
concatenating strings repeatedly.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> _ = sb.append("<h1>").append("Hello").append_line("</h1>")
            >>> sb.build()
            '<h1>Hello</h1>\\n'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a string to the builder.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_line(self, s: str = "") -> StringBuilder:
        """Append a string followed by newline.

        Args:
            s: String to append (empty = just newline)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        self._parts.append("\n")
        return self

    def extend(self, strings: list[str]) -> StringBuilder:
        """Append multiple strings at once, skipping empty ones."""
        self._parts.extend(s for s in strings if s)
        return self

    def build(self) -> str:
        """Join all parts into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of parts (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
