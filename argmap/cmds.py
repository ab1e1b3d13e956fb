import os
import sys
import logging

from typing import BinaryIO
from . import cli, const
from .args import Args

_logger = logging.getLogger(__name__)


# --- Dump ------------------------------------------------------------------- #


def booleansFromEnv() -> list[str]:
    """Reads boolean keys from the environment, as a comma separated list."""
    raw = os.environ.get(const.BOOLEANS_ENV, "")
    return [key.strip() for key in raw.split(",") if key.strip()]


@cli.command(
    "d",
    "dump",
    f"Show how arguments are classified. Everything after the command name is parsed as-is, set {const.BOOLEANS_ENV} to a comma separated list of boolean keys.",
    raw=True,
)
def _(args: Args):
    booleans = booleansFromEnv()
    _logger.info(f"Dumping {len(args.args)} arguments with booleans {booleans}")
    print(Args.parse(args.args, booleans))


# --- Word Count ------------------------------------------------------------- #


def count(stream: BinaryIO) -> tuple[int, int, int]:
    """Returns the number of lines, words and bytes in a stream."""
    data = stream.read()
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise RuntimeError(f"Input is not valid UTF-8: {e}") from e
    return len(text.splitlines()), len(text.split()), len(data)


def _open(path: str) -> BinaryIO:
    if path == "-":
        return sys.stdin.buffer
    try:
        return open(path, "rb")
    except OSError as e:
        raise RuntimeError(f"Could not open '{path}': {e.strerror}") from e


WC_MANUAL = """\
    usage: {argv0} {{OPTIONS}} [FILE]

      Count the number of bytes, words, or lines in a file or stdin.

        -i, --infile  Count words from FILE or '-' for stdin (default).
        -c, --bytes   Show number of bytes.
        -w, --words   Show number of words.
        -l, --lines   Show number of lines.
        -h, --help    Show this message.
    """


@cli.command(
    "w",
    "wc",
    "Count the number of bytes, words, or lines in a file or stdin.",
    options=[
        cli.arg("i", "infile", "Count words from FILE or '-' for stdin (default)."),
        cli.arg("c", "bytes", "Show number of bytes.", boolean=True),
        cli.arg("w", "words", "Show number of words.", boolean=True),
        cli.arg("l", "lines", "Show number of lines.", boolean=True),
        cli.arg("h", "help", "Show this message.", boolean=True),
    ],
    manual=WC_MANUAL,
)
def _(args: Args):
    showBytes = args.has("c", "bytes")
    showWords = args.has("w", "words")
    showLines = args.has("l", "lines")
    if not showBytes and not showWords and not showLines:
        showBytes = showWords = showLines = True

    infile = args.first("infile", "i") or args.consumeArg() or "-"
    _logger.info(f"Counting '{infile}'")

    stream = _open(infile)
    try:
        lines, words, nbytes = count(stream)
    finally:
        if stream is not sys.stdin.buffer:
            stream.close()

    outline = ""
    if showLines:
        outline += f"{lines:>4} "
    if showWords:
        outline += f"{words:>4} "
    if showBytes:
        outline += f"{nbytes:>4} "
    print(outline.rstrip())
