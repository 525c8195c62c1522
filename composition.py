# composition.py
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

GLUCOGENIC = "Glucogenic"
AMPHIBOLIC = "Amphibolic"
KETOGENIC = "Ketogenic"
GROUPS = (GLUCOGENIC, AMPHIBOLIC, KETOGENIC)

AMINO_ACID_NAMES: Dict[str, str] = {
    "A": "Alanine",
    "R": "Arginine",
    "N": "Asparagine",
    "D": "Aspartic acid",
    "C": "Cysteine",
    "E": "Glutamic acid",
    "Q": "Glutamine",
    "G": "Glycine",
    "H": "Histidine",
    "I": "Isoleucine",
    "L": "Leucine",
    "K": "Lysine",
    "M": "Methionine",
    "F": "Phenylalanine",
    "P": "Proline",
    "S": "Serine",
    "T": "Threonine",
    "W": "Tryptophan",
    "Y": "Tyrosine",
    "V": "Valine",
}

AMPHIBOLIC_CODES = frozenset("FITWY")  # both glucose and ketone bodies
KETOGENIC_CODES = frozenset("LK")      # ketone bodies only
GLUCOGENIC_CODES = frozenset(AMINO_ACID_NAMES) - AMPHIBOLIC_CODES - KETOGENIC_CODES

GROUP_DESCRIPTIONS = {
    GLUCOGENIC: "Can be converted to glucose through gluconeogenesis",
    AMPHIBOLIC: "Can be converted to both glucose and ketone bodies",
    KETOGENIC: "Can only be converted to ketone bodies",
}

EMPTY_SEQUENCE_ERROR = "Please enter a valid amino acid sequence"

BOM = "\ufeff"  # str.split() does not treat it as whitespace


@dataclass(frozen=True)
class AminoAcidResult:
    code: str
    name: str
    count: int
    percentage: float      # unrounded, rounding belongs to the display
    classification: str


@dataclass(frozen=True)
class GroupCounts:
    glucogenic: int = 0
    amphibolic: int = 0
    ketogenic: int = 0

    @property
    def total(self) -> int:
        return self.glucogenic + self.amphibolic + self.ketogenic

    def as_dict(self) -> Dict[str, int]:
        return {GLUCOGENIC: self.glucogenic, AMPHIBOLIC: self.amphibolic, KETOGENIC: self.ketogenic}


@dataclass(frozen=True)
class AnalysisResult:
    """Invalid results carry zero counts and an error; valid ones never carry an error."""
    total_count: int
    amino_acids: Tuple[AminoAcidResult, ...]
    group_counts: GroupCounts
    dominant_group: str
    is_valid: bool
    error: Optional[str] = None


def normalize_sequence(sequence: Optional[str]) -> str:
    s = (sequence or "").replace(BOM, "").strip().upper()
    return "".join(s.split())


def classify(code: str) -> str:
    if code not in AMINO_ACID_NAMES:
        raise KeyError(code)
    if code in AMPHIBOLIC_CODES:
        return AMPHIBOLIC
    if code in KETOGENIC_CODES:
        return KETOGENIC
    return GLUCOGENIC


def members(group: str) -> List[str]:
    """Codes of a group in alphabet order."""
    return [code for code in AMINO_ACID_NAMES if classify(code) == group]


def dominant_group(counts: GroupCounts) -> str:
    # Glucogenic wins every tie, including amphibolic == ketogenic > glucogenic
    if counts.amphibolic > counts.glucogenic and counts.amphibolic > counts.ketogenic:
        return AMPHIBOLIC
    if counts.ketogenic > counts.glucogenic and counts.ketogenic > counts.amphibolic:
        return KETOGENIC
    return GLUCOGENIC


def _invalid(error: str) -> AnalysisResult:
    return AnalysisResult(
        total_count=0,
        amino_acids=(),
        group_counts=GroupCounts(),
        dominant_group=GLUCOGENIC,
        is_valid=False,
        error=error,
    )


def analyze_sequence(sequence: Optional[str]) -> AnalysisResult:
    """
    Tally and classify a one-letter amino acid sequence.

    Case and whitespace are ignored. Problems with the input are reported on the
    returned result (is_valid / error), nothing is raised.
    """
    s = normalize_sequence(sequence)
    if not s:
        return _invalid(EMPTY_SEQUENCE_ERROR)

    invalid = list(dict.fromkeys(ch for ch in s if ch not in AMINO_ACID_NAMES))
    if invalid:
        return _invalid(f"Invalid amino acid codes found: {', '.join(invalid)}")

    counts = Counter(s)  # insertion order == first-seen order
    total = len(s)

    amino_acids = [
        AminoAcidResult(
            code=code,
            name=AMINO_ACID_NAMES[code],
            count=n,
            percentage=n / total * 100,
            classification=classify(code),
        )
        for code, n in counts.items()
    ]
    amino_acids.sort(key=lambda aa: aa.count, reverse=True)  # stable, ties keep first-seen order

    per_group = {g: 0 for g in GROUPS}
    for code, n in counts.items():
        per_group[classify(code)] += n
    group_counts = GroupCounts(
        glucogenic=per_group[GLUCOGENIC],
        amphibolic=per_group[AMPHIBOLIC],
        ketogenic=per_group[KETOGENIC],
    )

    return AnalysisResult(
        total_count=total,
        amino_acids=tuple(amino_acids),
        group_counts=group_counts,
        dominant_group=dominant_group(group_counts),
        is_valid=True,
    )
