'''
tabla generada de amd64 (y amd64p32): registros, nombres de opcodes y LinkArch
'''

from __future__ import annotations
from typing import Tuple

from .link import GENERIC_ANAMES, LinkArch, RBASE_AMD64, aconv as _aconv
from .i386 import X86_ANAMES

def _seq(prefix: str, n: int, suffix: str = "", start: int = 0) -> Tuple[str, ...]:
    return tuple(f"{prefix}{i}{suffix}" for i in range(start, n))

REGISTER: Tuple[str, ...] = (
    ("AL", "CL", "DL", "BL", "SPB", "BPB", "SIB", "DIB")
    + _seq("R", 16, "B", start=8)
    + ("AX", "CX", "DX", "BX", "SP", "BP", "SI", "DI")
    + _seq("R", 16, start=8)
    + ("AH", "CH", "DH", "BH")
    + _seq("F", 8)
    + _seq("M", 8)
    + _seq("X", 16)
    + ("CS", "SS", "DS", "ES", "FS", "GS")
    + ("GDTR", "IDTR", "LDTR", "MSW", "TASK")
    + _seq("CR", 16)
    + _seq("DR", 8)
    + _seq("TR", 8)
    + ("TLS",)
)

REG_AL = RBASE_AMD64

# Solo existen en modo de 64 bits (o en las extensiones MMX/3DNow! que usa amd64)
AMD64_ANAMES: Tuple[str, ...] = (
    "ADCQ", "ADDQ", "ANDQ", "BSFQ", "BSRQ", "BSWAPQ", "BTCQ", "BTQ", "BTRQ", "BTSQ",
    "CMPQ", "CMPSQ", "CMPXCHGQ", "CQO", "DECQ", "DIVQ", "IDIVQ", "IMULQ",
    "INCQ", "IRETQ", "JCXZQ", "LEAQ", "LEAVEQ", "LODSQ",
    "MOVQ", "MOVBQSX", "MOVBQZX", "MOVLQSX", "MOVLQZX", "MOVWQSX", "MOVWQZX",
    "MOVNTIL", "MOVNTIQ", "MOVQOZX", "MOVSQ", "MULQ", "NEGQ", "NOTQ", "ORQ",
    "POPFQ", "POPQ", "PUSHFQ", "PUSHQ", "QUAD",
    "RCLQ", "RCRQ", "ROLQ", "RORQ", "SALQ", "SARQ", "SBBQ", "SCASQ",
    "SHLQ", "SHRQ", "STOSQ", "SUBQ", "SWAPGS", "SYSRET", "TESTQ",
    "XADDQ", "XCHGQ", "XORQ",
    "CMOVQCC", "CMOVQCS", "CMOVQEQ", "CMOVQGE", "CMOVQGT", "CMOVQHI",
    "CMOVQLE", "CMOVQLS", "CMOVQLT", "CMOVQMI", "CMOVQNE", "CMOVQOC",
    "CMOVQOS", "CMOVQPC", "CMOVQPL", "CMOVQPS",
    "CVTSQ2SD", "CVTSQ2SS", "CVTSD2SQ", "CVTSS2SQ", "CVTTSD2SQ", "CVTTSS2SQ",
    "MASKMOVQ", "PEXTRW", "PINSRQ", "PINSRW", "PMULHRW", "PSWAPL",
    "PSLLO", "PSRLO",
    # 3DNow!
    "PF2IL", "PF2IW", "PFACC", "PFADD", "PFCMPEQ", "PFCMPGE", "PFCMPGT",
    "PFMAX", "PFMIN", "PFMUL", "PFNACC", "PFPNACC", "PFRCP", "PFRCPIT1",
    "PFRCPI2T", "PFRSQIT1", "PFRSQRT", "PFSUB", "PFSUBR", "PI2FL", "PI2FW",
)

ANAMES: Tuple[str, ...] = GENERIC_ANAMES + X86_ANAMES + AMD64_ANAMES

def _a(name: str) -> int:
    return ANAMES.index(name)

AJCC = _a("JCC"); AJCS = _a("JCS"); AJEQ = _a("JEQ"); AJGE = _a("JGE")
AJGT = _a("JGT"); AJHI = _a("JHI"); AJLE = _a("JLE"); AJLS = _a("JLS")
AJLT = _a("JLT"); AJMI = _a("JMI"); AJNE = _a("JNE"); AJOC = _a("JOC")
AJOS = _a("JOS"); AJPC = _a("JPC"); AJPL = _a("JPL"); AJPS = _a("JPS")
AMASKMOVOU = _a("MASKMOVOU")
AMOVO      = _a("MOVO")
AMOVNTO    = _a("MOVNTO")
AMOVQ      = _a("MOVQ")
APF2IL     = _a("PF2IL")
API2FL     = _a("PI2FL")
APSLLO     = _a("PSLLO")
APSRLO     = _a("PSRLO")

LINKAMD64    = LinkArch(name="amd64",    byte_order="little", ptr_size=8, reg_size=8)
LINKAMD64P32 = LinkArch(name="amd64p32", byte_order="little", ptr_size=4, reg_size=8)

def aconv(op: int) -> str:
    return _aconv(ANAMES, op)
