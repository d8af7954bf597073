from typing import IO

from nuru.errors import BadSignature, UnsupportedVersion
from nuru.kernel.stream import read_available
from nuru.settings import FORMAT_VERSION, DecodeSettings


def read_signature(stream: IO[bytes], expected: bytes) -> bytes:
    # a truncated signature is a mismatch as well
    signature = read_available(stream, len(expected))
    if signature != expected:
        raise BadSignature(expected, signature)
    return signature


def decode_name(name: bytes) -> str:
    """Fixed-size name field as text, dropping NUL padding."""
    return name.rstrip(b'\0').decode('ascii', errors='replace')


def check_version(cfg: DecodeSettings, kind: str, version: int) -> None:
    if version == FORMAT_VERSION:
        return
    if cfg.strict:
        raise UnsupportedVersion(FORMAT_VERSION, version)
    cfg.logger.warning(
        f'{kind} format version {version} differs from {FORMAT_VERSION}, decoding anyway'
    )
