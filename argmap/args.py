from typing import Iterable, Optional

from . import parser


class Args:
    """
    A parse result with accessors for the usual lookups.

    Values stay strings: nothing here converts types or fills in defaults.
    Every accessor taking several keys treats them as aliases, tried in order
    (e.g. `args.first("infile", "i")`).
    """

    args: parser.List
    opts: parser.Map

    def __init__(
        self,
        args: Optional[parser.List] = None,
        opts: Optional[parser.Map] = None,
    ):
        self.args = args if args is not None else []
        self.opts = opts if opts is not None else {}

    @staticmethod
    def parse(toks: Iterable[str], booleans: Iterable[str] = ()) -> "Args":
        return Args(*parser.parseWithConfig(toks, booleans))

    def has(self, *keys: str) -> bool:
        return any(key in self.opts for key in keys)

    def get(self, *keys: str) -> list[str]:
        result: list[str] = []
        for key in keys:
            result.extend(self.opts.get(key, []))
        return result

    def first(self, *keys: str) -> Optional[str]:
        for key in keys:
            values = self.opts.get(key)
            if values:
                return values[0]
        return None

    def last(self, *keys: str) -> Optional[str]:
        for key in keys:
            values = self.opts.get(key)
            if values:
                return values[-1]
        return None

    def consumePrefix(self, prefix: str) -> parser.Map:
        result: parser.Map = {}
        for key in list(self.opts.keys()):
            if key.startswith(prefix):
                result[key[len(prefix) :]] = self.opts.pop(key)
        return result

    def consumeOpt(self, key: str) -> list[str]:
        return self.opts.pop(key, [])

    def tryConsumeOpt(self, key: str) -> Optional[list[str]]:
        if key in self.opts:
            return self.opts.pop(key)
        return None

    def consumeArg(self) -> Optional[str]:
        if len(self.args) == 0:
            return None

        first = self.args[0]
        del self.args[0]
        return first

    def __repr__(self) -> str:
        return f"args={self.args!r}\nargv={self.opts!r}"
