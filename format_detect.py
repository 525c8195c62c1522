# format_detect.py
from typing import Optional

COMPRESSED_EXT = (".gz", ".bz2")

FASTA_EXT = {".fa", ".fasta", ".faa", ".pep"}
GENBANK_EXT = {".gb", ".gbk", ".gp", ".gpt"}
TEXT_EXT = {".txt", ".seq"}


def strip_compression_ext(filename: str) -> str:
    name = filename.lower()
    for ext in COMPRESSED_EXT:
        if name.endswith(ext):
            return name[: -len(ext)]
    return name


def detect_file_format(filename: str) -> Optional[str]:
    """Return 'fasta'/'genbank'/'text' or None, looking through .gz/.bz2."""
    name = strip_compression_ext(filename)
    for ext in FASTA_EXT:
        if name.endswith(ext):
            return "fasta"
    for ext in GENBANK_EXT:
        if name.endswith(ext):
            return "genbank"
    for ext in TEXT_EXT:
        if name.endswith(ext):
            return "text"
    return None


def sniff_format(prefix: str) -> str:
    """Sniff from content prefix; anything that isn't FASTA/GenPept is read as bare sequence text."""
    s = prefix.lstrip("\ufeff").lstrip()  # BOM survives when the caller decoded as plain utf-8
    if s.startswith(">"):
        return "fasta"
    if s.startswith("LOCUS"):
        return "genbank"
    return "text"
