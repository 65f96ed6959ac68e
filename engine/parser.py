"""Revenue cell parsing: raw user-typed text -> total, overnight count"""
import re
from typing import List, Optional

from .models import ParseConfig, CellResult

_SEPARATORS = re.compile(r"[.,]")
# ASCII digits only, like parseInt; other Unicode digits are noise
_LEADING_INT = re.compile(r"([+-]?)([0-9]+)")

DEFAULT_PARSE = ParseConfig()

def parse_token(token: str, cfg: Optional[ParseConfig] = None) -> int:
    """
    Resolve one token to its scaled value.

    Thousands separators ('.' and ',') are stripped first, then the leading
    digits are read as a base-10 integer. Tokens without leading digits, and
    negative numbers, are worth 0.
    """
    cfg = cfg or DEFAULT_PARSE
    cleaned = _SEPARATORS.sub("", token)
    m = _LEADING_INT.match(cleaned)
    if not m or m.group(1) == "-":
        return 0
    try:
        value = int(m.group(2))
    except ValueError:
        # digit run longer than the interpreter will convert
        return 0
    return value * cfg.scale

def entry_values(raw: Optional[str], cfg: Optional[ParseConfig] = None) -> List[int]:
    """Scaled value of every token in a cell, in input order"""
    if not raw or not raw.strip():
        return []
    return [parse_token(tok, cfg) for tok in raw.split()]

def is_overnight(value: int, cfg: Optional[ParseConfig] = None) -> bool:
    cfg = cfg or DEFAULT_PARSE
    return value > cfg.overnight_threshold

def parse_cell(raw: Optional[str], cfg: Optional[ParseConfig] = None) -> CellResult:
    """
    Parse one revenue cell such as "50 200 30".

    Never raises: empty or malformed input degrades to zero.
    Every token above the overnight threshold is counted, not just the first.
    """
    cfg = cfg or DEFAULT_PARSE
    values = entry_values(raw, cfg)
    if not values:
        return CellResult()

    overnight = sum(1 for v in values if is_overnight(v, cfg))
    return CellResult(
        total=sum(values),
        has_overnight=overnight > 0,
        overnight_count=overnight,
    )
