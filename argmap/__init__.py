import logging

from typing import Optional
from . import (
    cli,
    cmds,  # noqa: F401 this is imported for side effects
    const,
    vt100,
)
from .args import Args
from .parser import ArgMap, List, Map, new, parse, parseWithConfig

_logger = logging.getLogger(__name__)

__all__ = [
    "Args",
    "ArgMap",
    "List",
    "Map",
    "new",
    "parse",
    "parseWithConfig",
    "main",
]


class logger:
    @staticmethod
    def setup(args: Args):
        if args.has("verbose"):
            logging.basicConfig(
                level=logging.DEBUG,
                format=f"{vt100.CYAN}%(asctime)s{vt100.RESET} {vt100.YELLOW}%(levelname)s{vt100.RESET} %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        else:
            logging.basicConfig(
                level=logging.WARNING,
                format="%(asctime)s %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )


@cli.command(
    None,
    "/",
    const.DESCRIPTION,
    options=[cli.arg(None, "verbose", "Enable verbose logging", boolean=True)],
)
def _(args: Args):
    logger.setup(args)


@cli.command("u", "usage", "Show usage information")
def _():
    cli.usage()


@cli.command("v", "version", "Show current version")
def _():
    print(f"argmap v{const.VERSION_STR}")


def main(argv: Optional[list[str]] = None) -> int:
    try:
        cli.exec(argv)
        return 0

    except RuntimeError as e:
        _logger.debug("Command failed", exc_info=True)
        vt100.error(str(e))
        cli.usage()
        return 1

    except KeyboardInterrupt:
        print()
        return 1
