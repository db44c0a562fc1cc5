"""Command-line front end: compress, encrypt and their inverses on files."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from enum import Enum

from . import cipher, file_io, huffman_codec, lz77


class Command(str, Enum):
    COMPRESS = "compress"
    COMPRESS_ENCRYPT = "compress_encrypt"
    ENCRYPT = "encrypt"
    DECOMPRESS = "decompress"
    DECRYPT_DECOMPRESS = "decrypt_decompress"
    DECRYPT = "decrypt"


class UnknownCommandError(ValueError):
    """Raised for a command name that is not recognised."""


def _compress(content: bytes, key: int, encrypted: bool) -> list[bytes]:
    keys, packed = huffman_codec.compress(lz77.compress(content))
    if encrypted:
        packed = cipher.encrypt(key, packed)
    return [keys, packed]


def _decompress(content: bytes, key: int, encrypted: bool) -> list[bytes]:
    keys, separator, packed = content.partition(b"\n")
    if not separator:
        packed = content
    if encrypted:
        packed = cipher.decrypt(key, packed)
    return [lz77.decompress(huffman_codec.decompress(keys, packed))]


def execute(
    input_path: str | os.PathLike[str],
    output_path: str | os.PathLike[str],
    command: str,
    key: int = 0,
) -> None:
    """Run ``command`` on the input file and write the result to the output file."""
    try:
        cmd = Command(command)
    except ValueError:
        raise UnknownCommandError(f"unknown command: {command!r}") from None

    content = file_io.read(input_path)
    if cmd in (Command.COMPRESS, Command.COMPRESS_ENCRYPT):
        parts = _compress(content, key, cmd is Command.COMPRESS_ENCRYPT)
    elif cmd in (Command.DECOMPRESS, Command.DECRYPT_DECOMPRESS):
        parts = _decompress(content, key, cmd is Command.DECRYPT_DECOMPRESS)
    elif cmd is Command.ENCRYPT:
        parts = [cipher.encrypt(key, content)]
    else:
        parts = [cipher.decrypt(key, content)]
    file_io.write(output_path, parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: ``<command> <input> <output> [key]``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (3, 4):
        print("Wrong number of arguments")
        return 0

    command, input_path, output_path = args[:3]
    try:
        key = int(args[3]) % 256 if len(args) == 4 else 0
        execute(input_path, output_path, command, key)
    except UnknownCommandError:
        print("Wrong Command")
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())