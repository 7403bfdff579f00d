'''
tabla generada de ppc64/ppc64le: registros, nombres de opcodes y LinkArch
'''

from __future__ import annotations
from typing import Tuple

from .link import GENERIC_ANAMES, LinkArch, RBASE_PPC64, ACALL, AJMP, ARET, aconv as _aconv

REG_R0    = RBASE_PPC64
REG_R30   = REG_R0 + 30
REG_R31   = REG_R0 + 31
REG_F0    = REG_R0 + 32
REG_F31   = REG_F0 + 31
REG_CR0   = REG_F0 + 32
REG_CR7   = REG_CR0 + 7
REG_MSR   = REG_CR0 + 8
REG_FPSCR = REG_MSR + 1
REG_CR    = REG_MSR + 2

# Registros especiales (SPR) y de dispositivo (DCR), 10 bits cada uno
REG_SPR0  = RBASE_PPC64 + 1024
REG_DCR0  = RBASE_PPC64 + 2048
REG_XER   = REG_SPR0 + 1
REG_LR    = REG_SPR0 + 8
REG_CTR   = REG_SPR0 + 9

def rconv(reg: int) -> str:
    """Nombre textual del registro 'reg'."""
    if REG_R0 <= reg <= REG_R31:
        return f"R{reg - REG_R0}"
    if REG_F0 <= reg <= REG_F31:
        return f"F{reg - REG_F0}"
    if REG_CR0 <= reg <= REG_CR7:
        return f"CR{reg - REG_CR0}"
    special = {
        REG_MSR: "MSR", REG_FPSCR: "FPSCR", REG_CR: "CR",
        REG_XER: "XER", REG_LR: "LR", REG_CTR: "CTR",
    }
    if reg in special:
        return special[reg]
    if REG_SPR0 <= reg < REG_DCR0:
        return f"SPR({reg - REG_SPR0})"
    if REG_DCR0 <= reg < REG_DCR0 + 1024:
        return f"DCR({reg - REG_DCR0})"
    return f"R???{reg}"

PPC64_ANAMES: Tuple[str, ...] = (
    "ADD", "ADDCC", "ADDV", "ADDVCC", "ADDC", "ADDCCC", "ADDCV", "ADDCVCC",
    "ADDME", "ADDMECC", "ADDMEVCC", "ADDMEV", "ADDE", "ADDECC", "ADDEVCC", "ADDEV",
    "ADDZE", "ADDZECC", "ADDZEVCC", "ADDZEV",
    "AND", "ANDCC", "ANDN", "ANDNCC",
    "BC", "BCL", "BEQ", "BGE", "BGT", "BLE", "BLT", "BNE", "BVC", "BVS",
    "CMP", "CMPU", "CNTLZW", "CNTLZWCC",
    "CRAND", "CRANDN", "CREQV", "CRNAND", "CRNOR", "CROR", "CRORN", "CRXOR",
    "DIVW", "DIVWCC", "DIVWVCC", "DIVWV", "DIVWU", "DIVWUCC", "DIVWUVCC", "DIVWUV",
    "EQV", "EQVCC", "EXTSB", "EXTSBCC", "EXTSH", "EXTSHCC",
    "FABS", "FABSCC", "FADD", "FADDCC", "FADDS", "FADDSCC", "FCMPO", "FCMPU",
    "FCTIW", "FCTIWCC", "FCTIWZ", "FCTIWZCC", "FDIV", "FDIVCC", "FDIVS", "FDIVSCC",
    "FMADD", "FMADDCC", "FMADDS", "FMADDSCC", "FMOVD", "FMOVDCC", "FMOVDU",
    "FMOVS", "FMOVSU", "FMSUB", "FMSUBCC", "FMSUBS", "FMSUBSCC",
    "FMUL", "FMULCC", "FMULS", "FMULSCC", "FNABS", "FNABSCC", "FNEG", "FNEGCC",
    "FNMADD", "FNMADDCC", "FNMADDS", "FNMADDSCC", "FNMSUB", "FNMSUBCC",
    "FNMSUBS", "FNMSUBSCC", "FRSP", "FRSPCC",
    "FSUB", "FSUBCC", "FSUBS", "FSUBSCC",
    "MOVMW", "LSW", "LWAR", "MOVWBR", "MOVB", "MOVBU", "MOVBZ", "MOVBZU",
    "MOVH", "MOVHBR", "MOVHU", "MOVHZ", "MOVHZU", "MOVW", "MOVWU",
    "MOVFL", "MOVCRFS", "MTFSB0", "MTFSB0CC", "MTFSB1", "MTFSB1CC",
    "MULHW", "MULHWCC", "MULHWU", "MULHWUCC", "MULLW", "MULLWCC", "MULLWVCC", "MULLWV",
    "NAND", "NANDCC", "NEG", "NEGCC", "NEGVCC", "NEGV", "NOR", "NORCC",
    "OR", "ORCC", "ORN", "ORNCC",
    "REM", "REMCC", "REMV", "REMVCC", "REMU", "REMUCC", "REMUV", "REMUVCC",
    "RFI", "RLWMI", "RLWMICC", "RLWNM", "RLWNMCC",
    "SLW", "SLWCC", "SRW", "SRAW", "SRAWCC", "SRWCC", "STSW", "STWCCC",
    "SUB", "SUBCC", "SUBVCC", "SUBC", "SUBCCC", "SUBCV", "SUBCVCC",
    "SUBME", "SUBMECC", "SUBMEVCC", "SUBMEV", "SUBV",
    "SUBE", "SUBECC", "SUBEV", "SUBEVCC", "SUBZE", "SUBZECC", "SUBZEVCC", "SUBZEV",
    "SYNC", "XOR", "XORCC",
    "DCBF", "DCBI", "DCBST", "DCBT", "DCBTST", "DCBZ",
    "ECIWX", "ECOWX", "EIEIO", "ICBI", "ISYNC", "PTESYNC",
    "TLBIE", "TLBIEL", "TLBSYNC", "TW", "SYSCALL", "WORD",
    "RFCI",
    # 64 bits
    "CNTLZD", "CNTLZDCC", "CMPW", "CMPWU",
    "DIVD", "DIVDCC", "DIVDVCC", "DIVDV", "DIVDU", "DIVDUCC", "DIVDUVCC", "DIVDUV",
    "EXTSW", "EXTSWCC", "FCFID", "FCFIDCC", "FCTID", "FCTIDCC", "FCTIDZ", "FCTIDZCC",
    "LDAR", "MOVD", "MOVDU", "MOVWZ", "MOVWZU",
    "MULHD", "MULHDCC", "MULHDU", "MULHDUCC", "MULLD", "MULLDCC", "MULLDVCC", "MULLDV",
    "RFID", "RLDMI", "RLDMICC", "RLDC", "RLDCCC", "RLDCR", "RLDCRCC", "RLDCL", "RLDCLCC",
    "SLBIA", "SLBIE", "SLBMFEE", "SLBMFEV", "SLBMTE",
    "SLD", "SLDCC", "SRD", "SRAD", "SRADCC", "SRDCC", "STDCCC", "TD",
    "DWORD", "REMD", "REMDCC", "REMDV", "REMDVCC", "REMDU", "REMDUCC", "REMDUV", "REMDUVCC",
    "HRFID",
)

ANAMES: Tuple[str, ...] = GENERIC_ANAMES + PPC64_ANAMES

def _a(name: str) -> int:
    return ANAMES.index(name)

# Alias a nivel de opcode: no tienen nombre propio en ANAMES
ABR     = AJMP
ABL     = ACALL
ARETURN = ARET

ACMP = _a("CMP"); ACMPU = _a("CMPU"); ACMPW = _a("CMPW"); ACMPWU = _a("CMPWU")

# Formas de un solo operando fuente (NEG y compañía)
NEG_FORM_NAMES: Tuple[str, ...] = (
    "ADDMECC", "ADDMEVCC", "ADDMEV", "ADDME",
    "ADDZECC", "ADDZEVCC", "ADDZEV", "ADDZE",
    "CNTLZDCC", "CNTLZD", "CNTLZWCC", "CNTLZW",
    "EXTSBCC", "EXTSB", "EXTSHCC", "EXTSH", "EXTSWCC", "EXTSW",
    "NEGCC", "NEGVCC", "NEGV", "NEG",
    "SLBMFEE", "SLBMFEV", "SLBMTE",
    "SUBMECC", "SUBMEVCC", "SUBMEV", "SUBME",
    "SUBZECC", "SUBZEVCC", "SUBZEV", "SUBZE",
)

LINKPPC64   = LinkArch(name="ppc64",   byte_order="big",    ptr_size=8, reg_size=8)
LINKPPC64LE = LinkArch(name="ppc64le", byte_order="little", ptr_size=8, reg_size=8)

def aconv(op: int) -> str:
    return _aconv(ANAMES, op)
