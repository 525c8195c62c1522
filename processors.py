# processors.py
from __future__ import annotations

from typing import Dict, Iterator, List, TextIO, Tuple

from Bio import SeqIO

from app_logging import get_logger
from compression_io import open_text_handle
from format_detect import detect_file_format, sniff_format
from composition import (
    AMINO_ACID_NAMES,
    AnalysisResult,
    analyze_sequence,
    normalize_sequence,
)

log = get_logger("processors")

DETAIL_COLUMNS = ["Code", "Amino Acid", "Count", "Percentage", "Classification"]


def result_rows(result: AnalysisResult) -> List[Dict]:
    """Detail-table rows for one analysis, percentages rounded for display."""
    return [
        {
            "Code": aa.code,
            "Amino Acid": aa.name,
            "Count": aa.count,
            "Percentage": round(aa.percentage, 1),
            "Classification": aa.classification,
        }
        for aa in result.amino_acids
    ]


def iter_protein_records(handle: TextIO, file_format: str) -> Iterator[Tuple[str, str, str]]:
    """Yield (id, description, sequence) for every record in the handle."""
    if file_format == "text":
        # bare sequence, possibly wrapped over several lines
        seq = "".join(handle.read().split())
        if seq:
            yield "sequence", "", seq
        return

    for record in SeqIO.parse(handle, file_format):
        yield record.id, getattr(record, "description", ""), str(record.seq)


def record_row(record_id: str, description: str, sequence: str) -> Dict:
    seq = normalize_sequence(sequence)
    result = analyze_sequence(seq)
    per_code = {code: 0 for code in AMINO_ACID_NAMES}
    for aa in result.amino_acids:
        per_code[aa.code] = aa.count

    groups = result.group_counts
    return {
        "ID": record_id,
        "Description": description,
        "Sequence": seq,
        "Length": len(seq),
        "Valid": result.is_valid,
        "Error": result.error or "",
        "Glucogenic": groups.glucogenic,
        "Amphibolic": groups.amphibolic,
        "Ketogenic": groups.ketogenic,
        "Dominant_group": result.dominant_group if result.is_valid else "",
        **per_code,
    }


def _read_rows(handle: TextIO, filename: str, max_records: int) -> Tuple[str, List[Dict]]:
    file_format = detect_file_format(filename)
    if file_format is None:
        prefix = handle.read(2048)
        file_format = sniff_format(prefix)
        handle.seek(0)

    rows: List[Dict] = []
    for i, (record_id, description, seq) in enumerate(iter_protein_records(handle, file_format), start=1):
        if i > max_records:
            log.info("Stopped after %d records", max_records)
            break
        rows.append(record_row(record_id, description, seq))
    return file_format, rows


def process_protein_file(content: bytes, filename: str, max_records: int = 200) -> Dict:
    """
    Analyze every record of an uploaded protein file (FASTA/GenPept/plain text, + gz/bz2)
    and pool the valid ones into a single composition.

    Raises ValueError for empty, malformed or corrupt-archive uploads.
    """
    compression, handle = open_text_handle(content)

    # truncated/corrupt gz and bz2 streams fail lazily, while reading
    try:
        file_format, rows = _read_rows(handle, filename, max_records)
    except (OSError, EOFError) as exc:
        raise ValueError(f"Could not read {filename}: {exc}") from exc

    log.info("Read %s as %s (compression: %s)", filename, file_format, compression)

    if not rows:
        raise ValueError("No sequences found in the uploaded file.")

    valid_sequences = [r["Sequence"] for r in rows if r["Valid"]]
    pooled = analyze_sequence("".join(valid_sequences))
    valid = len(valid_sequences)
    log.info("Analyzed %d records from %s (%d valid)", len(rows), filename, valid)

    return {
        "filename": filename,
        "format": file_format,
        "compression": compression,
        "total_sequences": len(rows),
        "valid_sequences": valid,
        "invalid_sequences": len(rows) - valid,
        "total_residues": sum(r["Length"] for r in rows),
        "records": rows,
        "pooled": pooled,
    }
