import logging
import typing as tp
import dataclasses as dt

from typing import Iterable
from .scan import Cursor, Scan

_logger = logging.getLogger(__name__)

List = list[str]
Map = dict[str, list[str]]

SEPARATOR = "--"


# --- Helpers ---------------------------------------------------------------- #


def _isDigit(c: str) -> bool:
    return "0" <= c <= "9"


def _isNumber(s: str) -> bool:
    return len(s) > 0 and all(_isDigit(c) for c in s)


def _isValue(tok: str | None) -> bool:
    """Checks if a peeked token can be taken as the value of a pending option."""
    if tok is None or tok == SEPARATOR:
        return False
    if tok == "-" or not tok.startswith("-"):
        return True
    # negative numbers are values, everything else dash-prefixed is an option
    return _isDigit(tok[1])


def _put(opts: Map, key: str, value: str):
    opts.setdefault(key, []).append(value)


def _flag(opts: Map, key: str):
    opts.setdefault(key, [])


def _lookahead(c: Cursor, opts: Map, key: str, booleans: frozenset[str]):
    """Gives `key` the next token as its value if it can take one, otherwise registers it as a flag."""
    if key not in booleans and _isValue(c.peek()):
        _put(opts, key, tp.cast(str, c.next()))
    else:
        _flag(opts, key)


# --- Classifier ------------------------------------------------------------- #


def _parseLong(s: Scan, c: Cursor, opts: Map, booleans: frozenset[str]):
    body = s.rest()
    if "=" in body:
        key, value = body.split("=", 1)
        _put(opts, key, value)
    else:
        _lookahead(c, opts, body, booleans)


def _parseShort(s: Scan, c: Cursor, opts: Map, booleans: frozenset[str]):
    body = s.rest()
    if "=" in body:
        key, value = body.split("=", 1)
        _put(opts, key, value)
        return

    if _isNumber(body):
        # -7, -555: numeric flags are never split into a cluster
        _flag(opts, body)
        return

    while not s.eof():
        key = s.curr()
        s.next()
        if s.eof():
            _lookahead(c, opts, key, booleans)
        elif key not in booleans and not s.curr().isalpha():
            # -n3, -abc+5: the rest of the token belongs to the last key
            _put(opts, key, s.rest())
            return
        else:
            _flag(opts, key)
            if _isNumber(s.rest()):
                # -n5 with n boolean: the digits are a numeric flag
                _flag(opts, s.rest())
                return


def _classify(toks: Iterable[str], booleans: frozenset[str]) -> tuple[List, Map]:
    args: List = []
    opts: Map = {}
    c = Cursor(toks)

    while (tok := c.next()) is not None:
        if tok == SEPARATOR:
            args.extend(c.drain())
            break

        s = Scan(tok)
        if len(tok) > 2 and s.skipStr("--"):
            _parseLong(s, c, opts, booleans)
        elif len(tok) > 1 and s.skipStr("-"):
            _parseShort(s, c, opts, booleans)
        else:
            args.append(tok)

    _logger.debug(
        f"Parsed {len(c)} tokens into {len(args)} operands and {len(opts)} options"
    )
    return args, opts


# --- Public API ------------------------------------------------------------- #


@dt.dataclass
class ArgMap:
    """
    Parser configuration.

    Attributes:
        booleans: Keys that never take the token following them as their
            value. The token is classified on its own instead.
    """

    booleans: set[str] = dt.field(default_factory=set)

    def boolean(self, *keys: str) -> "ArgMap":
        """Marks the given keys as boolean and returns the same instance for chaining."""
        self.booleans.update(keys)
        return self

    def parse(self, toks: Iterable[str]) -> tuple[List, Map]:
        """
        Parses a sequence of tokens.

        Args:
            toks: The raw arguments, usually `sys.argv`. Items are passed
                through `str()`.

        Returns:
            A tuple of the positional arguments and a mapping from option key
            to every value given for it, in order.
        """
        return _classify(toks, frozenset(self.booleans))


def new() -> ArgMap:
    """Returns a fresh parser configuration with no boolean keys."""
    return ArgMap()


def parse(toks: Iterable[str]) -> tuple[List, Map]:
    """Parses a sequence of tokens with no boolean keys."""
    return ArgMap().parse(toks)


def parseWithConfig(toks: Iterable[str], booleans: Iterable[str]) -> tuple[List, Map]:
    """Parses a sequence of tokens, treating `booleans` as boolean keys."""
    return ArgMap(set(booleans)).parse(toks)
