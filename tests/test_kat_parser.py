import pytest

from ascon_rom.model.kat_parser import KatFormatError, TestVector, parse_kat_file, parse_lines


KAT = """\
Count = 1
Key = 000102030405060708090A0B0C0D0E0F
Nonce = 000102030405060708090A0B0C0D0E0F
PT =
AD =
CT = e355159f292911f794cb1432a0103a8a

Count = 2
Key = 000102030405060708090A0B0C0D0E0F
Nonce = 000102030405060708090A0B0C0D0E0F
PT = 00
AD = 0001
CT = BC18C3F4E39ECA7222490D967C79BFFC92
"""


def test_parse_groups_by_count():
    vs = parse_lines(KAT.splitlines())
    assert [v.count for v in vs] == [1, 2]
    assert vs[0].pt == ""
    assert vs[0].ct == "E355159F292911F794CB1432A0103A8A"
    assert vs[1].pt == "00"
    assert vs[1].ad == "0001"
    assert vs[1].key == "000102030405060708090A0B0C0D0E0F"


def test_empty_vector_is_dropped():
    lines = ["Count = 1", "Key =", "Nonce =", "PT =", "AD =", "CT =", "Count = 2", "PT = AA"]
    vs = parse_lines(lines)
    assert len(vs) == 1
    assert vs[0].count == 2


def test_count_only_file_yields_nothing():
    assert parse_lines(["Count = 0", "", "Count = 1"]) == []


def test_non_numeric_count_defaults_to_zero():
    vs = parse_lines(["Count = abc", "PT = 01"])
    assert vs == [TestVector(count=0, pt="01")]


def test_unknown_tags_ignored_and_last_write_wins():
    vs = parse_lines(["Count = 3", "Tag = FFFF", "PT = 01", "PT = 0203"])
    assert vs[0].pt == "0203"
    assert vs[0].ct == ""


def test_value_may_contain_equals_sign():
    vs = parse_lines(["Count = 0", "AD = 01=02"])
    assert vs[0].ad == "01=02"


def test_bad_line_reports_zero_based_line_number():
    lines = ["Count = 0", "", "PT = 00", "garbage line"]
    with pytest.raises(KatFormatError) as exc:
        parse_lines(lines, source="kat.txt")
    assert exc.value.line_no == 3
    assert exc.value.line == "garbage line"
    assert "kat.txt:3" in str(exc.value)


def test_parse_kat_file(tmp_path):
    p = tmp_path / "kat.txt"
    p.write_text(KAT)
    vs = parse_kat_file(p)
    assert len(vs) == 2


def test_parse_kat_file_missing(tmp_path):
    with pytest.raises(OSError):
        parse_kat_file(tmp_path / "nope.txt")


def test_long_lines_are_accepted():
    pt = "AB" * 100_000
    vs = parse_lines(["Count = 9", f"PT = {pt}"])
    assert vs[0].pt == pt
