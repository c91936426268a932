"""The default render sink.

Rendering produces many small chunks (``<li``, ``>``, escaped text,
``</li>``). StringBuilder collects them in a list and joins once, which
keeps a render linear in output size.

Thread Safety:
Each render() call creates its own StringBuilder.

"""


class StringBuilder:
    """Chunk accumulator implementing the Sink protocol.

    Usage:
        >>> sb = StringBuilder()
        >>> sb.write("<h1>")
        4
        >>> _ = sb.write("Hello")
        >>> sb.build()
        '<h1>Hello'

    """

    __slots__ = ("_chunks",)

    def __init__(self) -> None:
        self._chunks: list[str] = []

    def write(self, s: str) -> int:
        """Add a chunk and return its length. Empty chunks are skipped."""
        if s:
            self._chunks.append(s)
        return len(s)

    def build(self) -> str:
        """Return everything written so far as one string."""
        return "".join(self._chunks)
