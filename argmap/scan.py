from typing import Iterable

# --- Scan ------------------------------------------------------------------- #


class Scan:
    """
    A simple scanner over the characters of a single command-line token.
    """

    _src: str
    _off: int

    def __init__(self, src: str, off: int = 0):
        """
        Initializes a new `Scan` object.

        Args:
            src: The string to scan.
            off: The starting offset within the string.
        """
        self._src = src
        self._off = off

    def curr(self) -> str:
        """
        Returns the current character being scanned.

        Returns:
            The current character, or '\0' if at the end of the string.
        """
        if self.eof():
            return "\0"
        return self._src[self._off]

    def next(self) -> str:
        """
        Advances the scanner to the next character.

        Returns:
            The new current character, or '\0' if at the end of the string.
        """
        if self.eof():
            return "\0"

        self._off += 1
        return self.curr()

    def eof(self) -> bool:
        return self._off >= len(self._src)

    def skipStr(self, s: str) -> bool:
        """
        Attempts to skip over the given string.

        Returns:
            True if the string was skipped, False otherwise.
        """
        if self._src[self._off :].startswith(s):
            self._off += len(s)
            return True

        return False

    def rest(self) -> str:
        """Returns everything from the current position to the end of the string."""
        return self._src[self._off :]


# --- Cursor ----------------------------------------------------------------- #


class Cursor:
    """
    A forward-only cursor over a sequence of tokens, with one token of
    lookahead. A peeked token is only consumed when `next()` is called,
    so leaving it alone pushes it back for the next round.
    """

    _toks: list[str]
    _off: int

    def __init__(self, toks: Iterable[str]):
        self._toks = [str(t) for t in toks]
        self._off = 0

    def eof(self) -> bool:
        return self._off >= len(self._toks)

    def peek(self) -> str | None:
        """Returns the current token without consuming it, or None past the end."""
        if self.eof():
            return None
        return self._toks[self._off]

    def next(self) -> str | None:
        """Consumes the current token and returns it."""
        tok = self.peek()
        if tok is not None:
            self._off += 1
        return tok

    def drain(self) -> list[str]:
        """Consumes and returns every remaining token."""
        rest = self._toks[self._off :]
        self._off = len(self._toks)
        return rest

    def __len__(self) -> int:
        return len(self._toks)
