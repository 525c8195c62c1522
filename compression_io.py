# compression_io.py
import bz2
import gzip
import io
from typing import Callable, Dict, TextIO, Tuple

# magic prefix -> compression name, checked in order
MAGIC = (
    (b"\x1f\x8b", "gzip"),
    (b"BZh", "bzip2"),
)

_OPENERS: Dict[str, Callable[[io.BytesIO], io.BufferedIOBase]] = {
    "gzip": lambda raw: gzip.GzipFile(fileobj=raw, mode="rb"),
    "bzip2": lambda raw: bz2.BZ2File(raw, mode="rb"),
    "none": lambda raw: raw,
}


def detect_compression_from_bytes(data: bytes) -> str:
    """Name of the compression in _OPENERS, 'none' for plain uploads."""
    return next((name for magic, name in MAGIC if data.startswith(magic)), "none")


def open_text_handle(data: bytes, encoding: str = "utf-8-sig") -> Tuple[str, TextIO]:
    """
    Returns (compression, text_handle) for an uploaded sequence file.
    A leading BOM is dropped; undecodable bytes are replaced so they surface later as invalid residues.
    Corrupt archives only fail once the handle is read.
    """
    comp = detect_compression_from_bytes(data)
    binary = _OPENERS[comp](io.BytesIO(data))
    return comp, io.TextIOWrapper(binary, encoding=encoding, errors="replace")
