import pytest
from asmarch.arch import set_arch
from asmarch.regs import (
    add_pseudos, add_range, reserve, nil_register_number,
    arm_register_number, ppc64_register_number, RSP,
)
from asmarch.targets import arm, ppc64

def test_reserve_renames():
    register = {"R10": 7, "R11": 8}
    reserve(register, "R10")
    assert register == {"g": 7, "R11": 8}

def test_reserve_missing_raw():
    with pytest.raises(ValueError):
        reserve({"R1": 1}, "R10")

def test_add_range_rejects_non_int16():
    with pytest.raises(ValueError):
        add_range({}, 40000, 40001, lambda r: f"Z{r}")

def test_add_pseudos_sp_only_when_asked():
    register = {}
    add_pseudos(register)
    assert "SP" not in register
    add_pseudos(register, with_sp=True)
    assert register["SP"] == RSP

@pytest.mark.parametrize("prefix, n", [
    ("R", 0), ("R", 10), ("F", -1), ("", 0), ("X", 3), ("SPR", 1), ("R", 1 << 20),
])
def test_nil_always_fails(prefix, n):
    assert nil_register_number(prefix, n) == (0, False)

# --- arm ---

@pytest.mark.parametrize("n", range(16))
def test_arm_numeric_matches_named(n):
    a = set_arch("arm")
    assert a.register_number("F", n) == (a.reg(f"F{n}"), True)
    name = "g" if n == 10 else f"R{n}"
    assert a.register_number("R", n) == (a.reg(name), True)

@pytest.mark.parametrize("prefix, n", [
    ("R", 16), ("R", -1), ("F", 16), ("C", 0), ("CR", 0), ("SPR", 0), ("r", 0),
])
def test_arm_numeric_misses(prefix, n):
    assert arm_register_number(prefix, n) == (0, False)

# --- ppc64 ---

@pytest.mark.parametrize("prefix, n, name", [
    ("R", 0, "R0"), ("R", 31, "R31"), ("R", 30, "g"),
    ("F", 0, "F0"), ("F", 31, "F31"),
    ("CR", 0, "CR0"), ("CR", 7, "CR7"),
    ("SPR", 1, "XER"), ("SPR", 8, "LR"), ("SPR", 9, "CTR"),
])
def test_ppc64_numeric_matches_named(prefix, n, name):
    a = set_arch("ppc64")
    assert a.register_number(prefix, n) == (a.reg(name), True)

def test_ppc64_spr_range():
    assert ppc64_register_number("SPR", 0) == (ppc64.REG_SPR0, True)
    assert ppc64_register_number("SPR", 1023) == (ppc64.REG_SPR0 + 1023, True)
    assert ppc64_register_number("SPR", 1024) == (0, False)

@pytest.mark.parametrize("prefix, n", [
    ("R", 32), ("R", -1), ("F", 32), ("CR", 8), ("SPR", -1), ("DCR", 0), ("", 1),
])
def test_ppc64_numeric_misses(prefix, n):
    assert ppc64_register_number(prefix, n) == (0, False)

def test_prefix_sets():
    assert set_arch("ppc64").has_prefix("SPR")
    assert not set_arch("ppc64").has_prefix("C")
    assert set_arch("arm").has_prefix("R")
    assert not set_arch("386").has_prefix("R")

def test_arm_named_register_names():
    assert arm.rconv(arm.REG_R0 + 3) == "R3"
    assert arm.rconv(arm.REG_FPCR) == "FPCR"
    assert arm.rconv(0).startswith("R???")
