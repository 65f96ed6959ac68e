import pytest
from engine.models import ParseConfig, CellResult
from engine.parser import parse_cell, parse_token, entry_values, is_overnight

def test_empty_and_blank_cells_are_zero():
    """Empty or whitespace-only input yields the zero result"""
    for raw in ("", "   ", "\t\n", None):
        assert parse_cell(raw) == CellResult(0, False, 0)

def test_single_entry_is_scaled_by_thousand():
    res = parse_cell("50")
    assert res == CellResult(total=50_000, has_overnight=False, overnight_count=0)

def test_threshold_is_exclusive():
    """150 -> 150,000 is not above the 150,000 threshold"""
    res = parse_cell("150")
    assert res.total == 150_000
    assert res.has_overnight is False
    assert res.overnight_count == 0

def test_entry_above_threshold_is_overnight():
    assert parse_cell("200") == CellResult(200_000, True, 1)
    assert parse_cell("151") == CellResult(151_000, True, 1)

def test_mixed_entries_sum_and_count_only_qualifying():
    res = parse_cell("50 200 30")
    assert res.total == 280_000
    assert res.has_overnight is True
    assert res.overnight_count == 1

def test_every_overnight_entry_is_counted():
    res = parse_cell("200 300 100 500")
    assert res.overnight_count == 3
    assert res.total == 1_100_000

def test_separators_are_stripped():
    """'.' and ',' are thousands separators and are ignored"""
    assert parse_cell("1.000,50").total == 100_050 * 1000
    assert parse_cell("1,000").total == parse_cell("1.000").total == parse_cell("1000").total

def test_invalid_token_contributes_zero():
    res = parse_cell("abc 50")
    assert res.total == 50_000
    assert res.overnight_count == 0

def test_leading_digits_are_read_like_parseint():
    assert parse_token("12abc") == 12_000
    assert parse_token("abc12") == 0
    assert parse_token("...") == 0

def test_negative_tokens_never_reduce_total():
    assert parse_token("-50") == 0
    assert parse_cell("100 -50").total == 100_000

def test_whitespace_runs_and_tabs():
    assert entry_values("  50\t\t20 \n 10 ") == [50_000, 20_000, 10_000]

def test_custom_threshold_and_scale():
    cfg = ParseConfig(scale=1, overnight_threshold=100)
    res = parse_cell("50 101 100", cfg)
    assert res.total == 251
    assert res.overnight_count == 1
    assert is_overnight(101, cfg) and not is_overnight(100, cfg)

@pytest.mark.parametrize("raw", ["", "50 200 30", "abc 1.000,50 999"])
def test_parse_is_deterministic(raw):
    assert parse_cell(raw) == parse_cell(raw)

def test_has_overnight_matches_count():
    for raw in ["", "10", "160", "10 160 170", "x y z"]:
        res = parse_cell(raw)
        assert res.has_overnight == (res.overnight_count > 0)
        assert res.total >= 0

def test_overlong_digit_run_degrades_to_zero():
    """A digit run past the int conversion limit is worth 0 instead of raising"""
    assert parse_token("9" * 5000) == 0
    assert parse_cell("9" * 5000) == CellResult(0, False, 0)
    res = parse_cell("50 " + "1" * 5000 + " 200")
    assert res.total == 250_000
    assert res.overnight_count == 1

def test_long_but_convertible_number_is_exact():
    res = parse_cell("1" * 400)
    assert res.total == int("1" * 400) * 1000
    assert res.overnight_count == 1

@pytest.mark.parametrize("raw", [
    "\u0665\u0660",   # Arabic-Indic digits
    "\uff15\uff10",   # fullwidth digits
    "\u096b\u0966",   # Devanagari digits
    "\u00b2\u00b3",   # superscripts
])
def test_non_ascii_digits_are_not_numbers(raw):
    assert parse_cell(raw) == CellResult(0, False, 0)

def test_non_ascii_digits_after_ascii_are_ignored():
    assert parse_token("5\u0660") == 5_000

@pytest.mark.parametrize("raw, total", [
    ("50\u00a0200", 250_000),   # no-break space
    ("50\u3000200", 250_000),   # ideographic space
    ("50\x0b200\x0c30", 280_000),    # vertical tab, form feed
    ("\x00 50 \x1b", 50_000),        # control characters as tokens
    ("\U0001f319 50 \u20ab", 50_000),
    ("++50 --50 +-50", 0),
    ("+50", 50_000),
    (".,.,", 0),
    ("\u200b", 0),              # zero-width space is not whitespace
])
def test_noise_never_raises(raw, total):
    res = parse_cell(raw)
    assert res.total == total
    assert res.total >= 0
    assert res.has_overnight == (res.overnight_count > 0)
