import bz2
import gzip

from compression_io import detect_compression_from_bytes, open_text_handle


def test_detect_compression():
    assert detect_compression_from_bytes(gzip.compress(b"abc")) == "gzip"
    assert detect_compression_from_bytes(bz2.compress(b"abc")) == "bzip2"
    assert detect_compression_from_bytes(b">seq\nMKT") == "none"


def test_open_text_handle_decompresses():
    for blob in (b">s\nMKT\n", gzip.compress(b">s\nMKT\n"), bz2.compress(b">s\nMKT\n")):
        _, handle = open_text_handle(blob)
        assert handle.read() == ">s\nMKT\n"


def test_open_text_handle_replaces_bad_bytes():
    comp, handle = open_text_handle(b"MK\xffT")
    assert comp == "none"
    assert handle.read() == "MK�T"


def test_handle_can_rewind_after_sniffing():
    _, handle = open_text_handle(gzip.compress(b">s\nMKT\n"))
    assert handle.read(2) == ">s"
    handle.seek(0)
    assert handle.read() == ">s\nMKT\n"


def test_open_text_handle_drops_bom():
    for blob in ("\ufeffMKT\n".encode("utf-8"), gzip.compress("\ufeff>s\nMKT\n".encode("utf-8"))):
        _, handle = open_text_handle(blob)
        assert not handle.read().startswith("\ufeff")


def test_bom_stays_dropped_after_rewind():
    _, handle = open_text_handle("\ufeff>s\nMKT\n".encode("utf-8"))
    handle.read(2)
    handle.seek(0)
    assert handle.read() == ">s\nMKT\n"
