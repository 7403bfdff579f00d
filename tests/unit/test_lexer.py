import pytest
from asmarch.lexer import split_register_notation

# --- split_register_notation ---
@pytest.mark.parametrize("src, expected", [
    ("R(10)", ("R", 10)),
    ("SPR( 268 )", ("SPR", 268)),
    ("SPR(0x10c)", ("SPR", 268)),
    ("SPR(0X10C)", ("SPR", 268)),
    ("R(-0x2)", ("R", -2)),
    ("F(07)", ("F", 7)),
    ("R(-1)", ("R", -1)),
    ("R10", None),
    ("(10)", None),
    ("R(x)", None),
    ("", None),
])
def test_split_register_notation(src, expected):
    assert split_register_notation(src) == expected
