from __future__ import annotations
import re
from typing import Optional, Tuple

REG_NOTATION_RE = re.compile(r"^([A-Za-z]+)\(\s*([+-]?(?:0[xX][0-9a-fA-F]+|\d+))\s*\)$")

def split_register_notation(token: str) -> Optional[Tuple[str, int]]:
    """Split 'R(10)' or 'SPR(0x8)' into (prefix, number); None if not that form."""
    m = REG_NOTATION_RE.match(token.strip())
    if not m:
        return None
    num = m.group(2)
    base = 16 if "x" in num.lower() else 10
    return m.group(1), int(num, base)
