import pytest

import composition as comp
from composition import analyze_sequence


ALL_CODES = "ARNDCEQGHILKMFPSTWYV"


def test_empty_sequence_is_invalid():
    result = analyze_sequence("")
    assert result.is_valid is False
    assert result.error == "Please enter a valid amino acid sequence"
    assert result.total_count == 0
    assert result.amino_acids == ()
    assert result.group_counts == comp.GroupCounts(0, 0, 0)
    assert result.dominant_group == "Glucogenic"


def test_whitespace_only_and_none_are_empty():
    # only spaces/newlines/tabs normalize to nothing
    for raw in ("   ", "\n\t ", None):
        result = analyze_sequence(raw)
        assert result.is_valid is False
        assert result.error == comp.EMPTY_SEQUENCE_ERROR


def test_full_alphabet():
    result = analyze_sequence(ALL_CODES)
    assert result.is_valid is True
    assert result.error is None
    assert result.total_count == 20
    assert all(aa.count == 1 for aa in result.amino_acids)
    assert result.group_counts.as_dict() == {"Glucogenic": 13, "Amphibolic": 5, "Ketogenic": 2}
    assert result.dominant_group == "Glucogenic"


def test_invalid_codes_are_uppercased_and_listed():
    # Y is Tyrosine, so only X and Z are reported
    result = analyze_sequence("xyz")
    assert result.is_valid is False
    assert result.error == "Invalid amino acid codes found: X, Z"
    assert result.total_count == 0
    assert result.amino_acids == ()


def test_every_character_invalid():
    result = analyze_sequence("xbz")
    assert result.is_valid is False
    assert result.error == "Invalid amino acid codes found: X, B, Z"


def test_invalid_codes_deduplicated_in_first_seen_order():
    # B and Z repeat; 1 and * are not letters at all
    result = analyze_sequence("AB ZB1*Z")
    assert result.error == "Invalid amino acid codes found: B, Z, 1, *"


def test_single_code_repeated():
    result = analyze_sequence("aaa")
    assert result.is_valid is True
    assert result.total_count == 3
    assert len(result.amino_acids) == 1
    aa = result.amino_acids[0]
    assert (aa.code, aa.name, aa.count, aa.classification) == ("A", "Alanine", 3, "Glucogenic")
    assert aa.percentage == 100
    assert result.dominant_group == "Glucogenic"


def test_lowercase_and_whitespace_are_normalized():
    result = analyze_sequence("ll kk")
    assert result.total_count == 4
    assert result.group_counts.as_dict() == {"Glucogenic": 0, "Amphibolic": 0, "Ketogenic": 4}
    assert result.dominant_group == "Ketogenic"


def test_multiline_input():
    assert comp.normalize_sequence("  MKT\nAYI\tAK  ") == "MKTAYIAK"
    result = analyze_sequence("  MKT\nAYI\tAK  ")
    assert result.is_valid
    assert result.total_count == 8


def test_byte_order_mark_is_ignored():
    assert comp.normalize_sequence("\ufeffmkt") == "MKT"
    result = analyze_sequence("\ufeffMKT")
    assert result.is_valid
    assert result.total_count == 3


def test_sorted_by_count_with_first_seen_ties():
    # G and A tie on 2, first seen G; W and K tie on 1, first seen W
    result = analyze_sequence("GWAGAKLLL")
    assert [aa.code for aa in result.amino_acids] == ["L", "G", "A", "W", "K"]
    assert [aa.count for aa in result.amino_acids] == [3, 2, 2, 1, 1]


def test_percentages_are_not_rounded():
    result = analyze_sequence("AAG")
    by_code = {aa.code: aa.percentage for aa in result.amino_acids}
    assert by_code["A"] == pytest.approx(200 / 3)
    assert by_code["G"] == pytest.approx(100 / 3)


@pytest.mark.parametrize("seq", [
    ALL_CODES,
    "MKTAYIAKQRQISFVKSHFSRQLEERLGLIEVQAPILSRVGDGTQDNLSGAEKAVQVKVKALPDAQFEVVHSLAKWKRQTLGQHDFSAGEGLYTHMKALRPDEDRLSPLHSVYVDQWDWERVMGDGERQFSTLKSTVEAIWAGIKATEAAVSEEFGLAPFLPDQIHFVHSQELLSRYPDLDAKGRERAIAKDLGAVFLVGIGGKLSDGHRHDVRAPDYDDWUAVGLTP".replace("U", ""),
    "WWWWYYLK",
    "ffff iiii",
])
def test_count_and_group_totals_add_up(seq):
    result = analyze_sequence(seq)
    assert result.is_valid
    assert sum(aa.count for aa in result.amino_acids) == result.total_count
    assert sum(aa.percentage for aa in result.amino_acids) == pytest.approx(100.0)
    assert result.group_counts.total == result.total_count


def test_classification_matches_tables():
    result = analyze_sequence(ALL_CODES * 2)
    for aa in result.amino_acids:
        if aa.code in "FITWY":
            assert aa.classification == "Amphibolic"
        elif aa.code in "LK":
            assert aa.classification == "Ketogenic"
        else:
            assert aa.classification == "Glucogenic"


def test_groups_partition_alphabet():
    groups = [comp.GLUCOGENIC_CODES, comp.AMPHIBOLIC_CODES, comp.KETOGENIC_CODES]
    assert set().union(*groups) == set(comp.AMINO_ACID_NAMES)
    assert sum(len(g) for g in groups) == 20
    assert comp.members("Ketogenic") == ["L", "K"]
    assert comp.members("Amphibolic") == ["I", "F", "T", "W", "Y"]


def test_classify_rejects_unknown_code():
    with pytest.raises(KeyError):
        comp.classify("X")


def test_amphibolic_dominant():
    result = analyze_sequence("FFFWAL")
    assert result.dominant_group == "Amphibolic"


def test_dominant_defaults_to_glucogenic_on_ties():
    assert comp.dominant_group(comp.GroupCounts(glucogenic=2, amphibolic=2, ketogenic=0)) == "Glucogenic"
    assert comp.dominant_group(comp.GroupCounts(glucogenic=0, amphibolic=3, ketogenic=3)) == "Glucogenic"
    # amphibolic and ketogenic tie above glucogenic: still Glucogenic
    result = analyze_sequence("FFLLA")
    assert result.group_counts.as_dict() == {"Glucogenic": 1, "Amphibolic": 2, "Ketogenic": 2}
    assert result.dominant_group == "Glucogenic"


def test_results_are_immutable():
    result = analyze_sequence("AAA")
    with pytest.raises(AttributeError):
        result.total_count = 5
    with pytest.raises(AttributeError):
        result.amino_acids[0].count = 1
