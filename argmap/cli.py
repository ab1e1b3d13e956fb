import os
import sys
import inspect
import textwrap
import logging
import dataclasses as dt

from typing import Callable, Optional
from . import const, vt100
from .args import Args

_logger = logging.getLogger(__name__)

HELP_KEYS = ("h", "help")
USAGE_KEYS = ("u", "usage")


class HelpRequested(Exception):
    pass


class UsageRequested(Exception):
    pass


# --- Options ---------------------------------------------------------------- #


@dt.dataclass
class Option:
    """
    Describes an option a command understands.

    Attributes:
        shortName: The short name of the option (e.g., "f" for "-f").
        longName: The long name of the option (e.g., "file" for "--file").
        description: A description of the option.
        boolean: True if the option never takes the following token as its value.
    """

    shortName: Optional[str]
    longName: str
    description: str = ""
    boolean: bool = False

    def keys(self) -> list[str]:
        return [k for k in (self.shortName, self.longName) if k]

    def flag(self) -> str:
        flag = ""
        if self.shortName:
            flag += f"-{self.shortName}"

        if self.longName:
            if flag:
                flag += ", "
            flag += f"--{self.longName}"
        return flag


def arg(
    shortName: Optional[str] = None,
    longName: str = "",
    description: str = "",
    boolean: bool = False,
) -> Option:
    return Option(shortName, longName, description, boolean)


# --- Command ---------------------------------------------------------------- #


@dt.dataclass
class Command:
    """
    Represents a command in the command-line interface.
    """

    shortName: Optional[str]
    path: list[str] = dt.field(default_factory=list)
    description: str = ""
    options: list[Option] = dt.field(default_factory=list)
    raw: bool = False
    manual: Optional[str] = None

    callable: Optional[Callable] = None
    subcommands: dict[str, "Command"] = dt.field(default_factory=dict)
    populated: bool = False

    @property
    def longName(self) -> str:
        return self.path[-1]

    def booleans(self) -> set[str]:
        """Returns every key that must not take a value, help and usage included."""
        res = set(HELP_KEYS + USAGE_KEYS)
        for opt in self.options:
            if opt.boolean:
                res.update(opt.keys())
        return res

    def _spliceArgs(self, args: list[str]) -> tuple[list[str], list[str]]:
        """Splices the argument list into arguments for the current command and arguments for subcommands."""
        rest = args[:]
        curr = []
        if len(self.subcommands) > 0:
            while len(rest) > 0 and rest[0].startswith("-") and rest[0] != "--":
                curr.append(rest.pop(0))
        else:
            curr = rest
            rest = []
        return curr, rest

    def parseArgs(self, argv: list[str]) -> Args:
        if self.raw:
            return Args(argv[:])

        args = Args.parse(argv, self.booleans())
        if args.has(*HELP_KEYS):
            raise HelpRequested()

        if args.has(*USAGE_KEYS):
            raise UsageRequested()

        return args

    def help(self):
        """Prints the help message for the command."""
        if self.manual:
            print(textwrap.dedent(self.manual).format(argv0=" ".join(self.path)))
            return

        vt100.title(f"{self.longName}")
        print()

        vt100.subtitle("Usage")
        print(vt100.indent(f"{' '.join(self.path)}{self.usage()}"))
        print()

        vt100.subtitle("Description")
        print(vt100.indent(self.description))
        print()

        if any(self.options):
            vt100.subtitle("Options")
            for opt in self.options:
                flag = opt.flag()
                if opt.description:
                    flag += f"  {opt.description}"
                print(vt100.indent(flag))
            print()

        if any(self.subcommands):
            vt100.subtitle("Subcommands")
            for name, sub in self.subcommands.items():
                print(
                    vt100.indent(
                        f"{vt100.GREEN}{sub.shortName or ' '}{vt100.RESET}  {name} - {sub.description}"
                    )
                )
            print()

    def usage(self) -> str:
        """Returns a usage string for the command."""
        res = " "
        for opt in self.options:
            res += f"[{opt.flag()}] "

        if self.raw:
            res += "[args...]"

        if len(self.subcommands) > 0:
            res += "{" + "|".join(self.subcommands.keys()) + "}"
            res += " [args...]"

        return res

    def lookupSubcommand(self, name: str) -> "Command":
        if name in self.subcommands:
            return self.subcommands[name]
        for sub in self.subcommands.values():
            if sub.shortName == name:
                return sub
        raise RuntimeError(f"Unknown subcommand '{name}'")

    def invoke(self, argv: list[str]):
        if self.callable is None:
            return

        if len(inspect.signature(self.callable).parameters) > 0:
            self.callable(self.parseArgs(argv))
        else:
            self.parseArgs(argv)
            self.callable()

    def eval(self, args: list[str]):
        """Evaluates the command and its subcommands based on the given arguments."""
        cmd = args.pop(0)
        curr, rest = self._spliceArgs(args)

        try:
            self.invoke(curr)

            if self.subcommands:
                if len(rest) > 0:
                    self.lookupSubcommand(rest[0]).eval(rest)
                else:
                    print("Usage: " + cmd + self.usage(), end="\n\n")

        except HelpRequested:
            self.help()

        except UsageRequested:
            print("Usage: " + cmd + self.usage(), end="\n\n")


_root = Command(None, [const.ARGV0])


def _splitPath(path: str) -> list[str]:
    if path == "/":
        return []
    return path.split("/")


def _resolvePath(path: list[str]) -> Command:
    cmd = _root
    visited = []
    for name in path:
        visited.append(name)
        if name not in cmd.subcommands:
            cmd.subcommands[name] = Command(None, visited[:])
        cmd = cmd.subcommands[name]
    return cmd


def command(
    shortName: Optional[str],
    longName: str,
    description: str = "",
    options: list[Option] = [],
    raw: bool = False,
    manual: Optional[str] = None,
) -> Callable:
    """
    Decorator for defining a command.

    Args:
        shortName: The short name of the command (e.g., "d" for "dump").
        longName: The path of the command, "/" for the root command.
        description: A description of the command.
        options: The options the command understands, shown in its help.
        raw: Pass every token after the command name through unparsed.
        manual: A hand-written help message replacing the generated one,
            `{argv0}` is replaced by the command path.
    """

    def wrap(fn: Callable):
        path = _splitPath(longName)
        cmd = _resolvePath(path)

        _logger.info(f"Registering command '{'.'.join(path)}'")
        if cmd.populated:
            raise ValueError(f"Command '{longName}' is already defined")

        cmd.shortName = shortName
        cmd.description = description
        cmd.options = list(options)
        cmd.raw = raw
        cmd.manual = manual
        cmd.callable = fn
        cmd.populated = True
        cmd.path = [const.ARGV0] + path
        return fn

    return wrap


def usage():
    """Prints the usage message for the root command."""
    print(f"Usage: {const.ARGV0}{_root.usage()}")


def exec(argv: Optional[list[str]] = None):
    """Executes the command-line interface."""
    extra = os.environ.get(const.EXTRA_ARGS_ENV, None)
    if argv is None:
        argv = sys.argv[1:]
    args = [const.ARGV0] + (extra.split() if extra else []) + argv
    _root.eval(args)
