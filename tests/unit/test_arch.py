import dataclasses
import pytest
from asmarch.arch import GOARCHES, set_arch
from asmarch import regs
from asmarch.targets import arm, i386, ppc64, x86

# alias -> mnemónico canónico al que debe codificarse
X86_ALIAS_TARGETS = {
    "JA": "JHI", "JAE": "JCC", "JB": "JCS", "JBE": "JLS",
    "JC": "JCS", "JE": "JEQ", "JG": "JGT", "JHS": "JCC",
    "JL": "JLT", "JLO": "JCS", "JNA": "JLS", "JNAE": "JCS",
    "JNB": "JCC", "JNBE": "JHI", "JNC": "JCC", "JNG": "JLE",
    "JNGE": "JLT", "JNL": "JGE", "JNLE": "JGT", "JNO": "JOC",
    "JNP": "JPC", "JNS": "JPL", "JNZ": "JNE", "JO": "JOS",
    "JP": "JPS", "JPE": "JPS", "JPO": "JPC", "JS": "JMI",
    "JZ": "JEQ",
    "MASKMOVDQU": "MASKMOVOU", "MOVOA": "MOVO", "MOVNTDQ": "MOVNTO",
}

AMD64_ALIAS_TARGETS = {
    **X86_ALIAS_TARGETS,
    "MOVD": "MOVQ", "MOVDQ2Q": "MOVQ", "MOVOA": "MOVO",
    "PF2ID": "PF2IL", "PI2FD": "PI2FL", "PSLLDQ": "PSLLO", "PSRLDQ": "PSRLO",
}

PPC64_ALIAS_TARGETS = {"BR": "JMP", "BL": "CALL", "RETURN": "RET"}

ALIASES = {
    "386":      (i386.ANAMES, X86_ALIAS_TARGETS),
    "amd64":    (x86.ANAMES, AMD64_ALIAS_TARGETS),
    "amd64p32": (x86.ANAMES, AMD64_ALIAS_TARGETS),
    "arm":      (arm.ANAMES, {"B": "JMP", "BL": "CALL"}),
    "ppc64":    (ppc64.ANAMES, PPC64_ALIAS_TARGETS),
    "ppc64le":  (ppc64.ANAMES, PPC64_ALIAS_TARGETS),
}

def test_every_goarch_is_covered():
    assert set(GOARCHES) == set(ALIASES)

def test_x86_alias_table_sizes():
    assert len(X86_ALIAS_TARGETS) == 32
    assert len(AMD64_ALIAS_TARGETS) - len(X86_ALIAS_TARGETS) == 6

@pytest.mark.parametrize("goarch", GOARCHES)
def test_tables_not_empty_and_no_empty_keys(goarch):
    a = set_arch(goarch)
    assert a is not None
    assert a.name == goarch
    assert len(a.instructions) > 0 and len(a.register) > 0
    assert "" not in a.instructions
    assert "" not in a.register

@pytest.mark.parametrize("goarch", GOARCHES)
def test_aliases_resolve_to_target_opcode(goarch):
    a = set_arch(goarch)
    anames, targets = ALIASES[goarch]
    for alias, target in targets.items():
        assert target in anames, target
        assert a.opcode(alias) == anames.index(target), alias
        assert a.opcode(alias) == a.opcode(target), alias

@pytest.mark.parametrize("goarch", GOARCHES)
def test_canonical_round_trip(goarch):
    a = set_arch(goarch)
    anames, targets = ALIASES[goarch]
    for m in anames:
        if m in targets:
            continue
        assert a.aconv(a.opcode(m)) == m

@pytest.mark.parametrize("goarch", GOARCHES)
def test_pseudo_registers_shared(goarch):
    a = set_arch(goarch)
    assert a.reg("SB") == regs.RSB == -2
    assert a.reg("FP") == regs.RFP == -1
    assert a.reg("PC") == regs.RPC == -4
    real = [v for k, v in a.register.items() if k not in ("SB", "FP", "PC", "SP")]
    assert all(v >= 0 for v in real)

@pytest.mark.parametrize("goarch", GOARCHES)
def test_descriptor_is_read_only(goarch):
    a = set_arch(goarch)
    with pytest.raises(TypeError):
        a.instructions["NUEVO"] = 1
    with pytest.raises(TypeError):
        a.register["NUEVO"] = 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        a.is_jump = None

@pytest.mark.parametrize("goarch", GOARCHES)
def test_jump_classifier(goarch):
    a = set_arch(goarch)
    assert a.is_jump("JMP") and a.is_jump("CALL")
    assert not a.is_jump("MOVW")
    assert not a.is_jump("")

@pytest.mark.parametrize("goarch", ["bogus", "", "AMD64", "mips", "arm64"])
def test_unsupported_returns_none(goarch):
    assert set_arch(goarch) is None

# ---- escenarios por arquitectura ----

def test_arm_g_replaces_r10():
    a = set_arch("arm")
    assert "R10" not in a.register
    assert a.reg("g") == arm.REG_R10 == arm.REG_R0 + 10
    assert a.reg("R9") == arm.REG_R0 + 9
    assert a.reg("R11") == arm.REG_R0 + 11

def test_arm_registers():
    a = set_arch("arm")
    assert a.reg("F15") == arm.REG_F15
    assert a.reg("CPSR") == arm.REG_CPSR
    assert "SPSR" not in a.register
    assert a.reg("C0") == 0 and a.reg("C15") == 15
    assert a.reg("SP") == regs.RSP
    assert a.register_prefix == frozenset({"F", "R"})
    assert a.opcode("B") == a.opcode("JMP")
    assert a.opcode("BL") == a.opcode("CALL")
    assert a.aconv(a.opcode("BL")) == "CALL"

def test_amd64_jae_jnb_same_opcode():
    a = set_arch("amd64")
    assert a.opcode("JAE") == a.opcode("JNB") == a.opcode("JCC") == x86.AJCC
    assert a.opcode("MOVD") == a.opcode("MOVDQ2Q") == a.opcode("MOVQ")
    assert a.opcode("MOVOA") == a.opcode("MOVO")

def test_amd64_sp_is_hardware_register():
    a = set_arch("amd64")
    assert a.reg("SP") == x86.REG_AL + x86.REGISTER.index("SP")
    assert a.reg("R15") is not None
    assert not a.register_prefix
    assert a.register_number("R", 1) == (0, False)

def test_386_has_no_64bit_aliases():
    a = set_arch("386")
    assert a.opcode("JAE") == i386.AJCC
    assert a.opcode("MOVD") is None
    assert a.opcode("MOVQ") is None
    assert a.reg("R8") is None
    assert a.ptr_size == 4

def test_ppc64_g_replaces_r30():
    a = set_arch("ppc64")
    assert "R30" not in a.register
    assert a.reg("g") == ppc64.REG_R30
    assert a.reg("LR") == ppc64.REG_LR
    assert a.reg("CTR") == ppc64.REG_CTR
    assert a.reg("XER") == ppc64.REG_XER
    assert a.reg("CR") == ppc64.REG_CR
    assert a.reg("CR7") == ppc64.REG_CR7
    assert "SP" not in a.register
    assert a.opcode("BR") == a.opcode("JMP")
    assert a.opcode("RETURN") == a.opcode("RET")

def test_variants_share_tables():
    amd64 = set_arch("amd64")
    p32 = set_arch("amd64p32")
    assert p32.ptr_size == 4 and p32.reg_size == 8
    assert amd64.ptr_size == 8
    assert dict(p32.instructions) == dict(amd64.instructions)
    assert dict(p32.register) == dict(amd64.register)

    be = set_arch("ppc64")
    le = set_arch("ppc64le")
    assert be.byte_order == "big" and le.byte_order == "little"
    assert dict(be.instructions) == dict(le.instructions)
    assert le.register_number is be.register_number

def test_variant_reuses_base_tables_object():
    base = set_arch("ppc64")
    le = dataclasses.replace(base, link_arch=ppc64.LINKPPC64LE)
    assert le.instructions is base.instructions
    assert le.register is base.register
