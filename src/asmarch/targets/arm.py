'''
tabla generada de arm: registros, nombres de opcodes y LinkArch
'''

from __future__ import annotations
from typing import Tuple

from .link import GENERIC_ANAMES, LinkArch, RBASE_ARM, aconv as _aconv

# Registros: R0..R15, F0..F15 y los de estado
REG_R0   = RBASE_ARM
REG_R10  = REG_R0 + 10
REG_R15  = REG_R0 + 15
REG_F0   = REG_R0 + 16
REG_F15  = REG_F0 + 15
REG_FPSR = REG_F0 + 16
REG_FPCR = REG_FPSR + 1
REG_CPSR = REG_FPSR + 2
REG_SPSR = REG_FPSR + 3

def rconv(reg: int) -> str:
    """Nombre textual del registro 'reg'."""
    if REG_R0 <= reg <= REG_R15:
        return f"R{reg - REG_R0}"
    if REG_F0 <= reg <= REG_F15:
        return f"F{reg - REG_F0}"
    special = {REG_FPSR: "FPSR", REG_FPCR: "FPCR", REG_CPSR: "CPSR", REG_SPSR: "SPSR"}
    return special.get(reg, f"R???{reg}")

# 'B' y 'BL' no aparecen: son JMP y CALL genéricos
ARM_ANAMES: Tuple[str, ...] = (
    "AND", "EOR", "SUB", "RSB", "ADD", "ADC", "SBC", "RSC",
    "TST", "TEQ", "CMP", "CMN", "ORR", "BIC", "MVN",
    "BEQ", "BNE", "BCS", "BHS", "BCC", "BLO", "BMI", "BPL",
    "BVS", "BVC", "BHI", "BLS", "BGE", "BLT", "BGT", "BLE",
    "MOVWD", "MOVWF", "MOVDW", "MOVFW", "MOVFD", "MOVDF", "MOVF", "MOVD",
    "CMPF", "CMPD", "ADDF", "ADDD", "SUBF", "SUBD", "MULF", "MULD",
    "DIVF", "DIVD", "SQRTF", "SQRTD", "ABSF", "ABSD",
    "SRL", "SRA", "SLL", "MULU", "DIVU", "MUL", "DIV", "MOD", "MODU",
    "MOVB", "MOVBS", "MOVBU", "MOVH", "MOVHS", "MOVHU", "MOVW", "MOVM",
    "SWPBU", "SWPW", "RFE", "SWI", "MULA", "WORD", "BCASE", "CASE",
    "MULL", "MULAL", "MULLU", "MULALU", "BX", "BXRET", "DWORD",
    "LDREX", "STREX", "LDREXD", "STREXD", "PLD", "CLZ",
    "MULWT", "MULWB", "MULAWT", "MULAWB",
    "DATABUNDLE", "DATABUNDLEEND", "MRC",
)

ANAMES: Tuple[str, ...] = GENERIC_ANAMES + ARM_ANAMES

def _a(name: str) -> int:
    return ANAMES.index(name)

ACMP = _a("CMP"); ACMN = _a("CMN"); ATEQ = _a("TEQ"); ATST = _a("TST")
ACMPF = _a("CMPF"); ACMPD = _a("CMPD")
ASTREX = _a("STREX"); ASTREXD = _a("STREXD")
ASWPW = _a("SWPW"); ASWPBU = _a("SWPBU")
AMRC = _a("MRC")

# Bits de condición y sufijos (.S, .P, .W, .U) del campo scond
C_SCOND_EQ = 0
C_SCOND_NE = 1
C_SCOND_HS = 2
C_SCOND_LO = 3
C_SCOND_MI = 4
C_SCOND_PL = 5
C_SCOND_VS = 6
C_SCOND_VC = 7
C_SCOND_HI = 8
C_SCOND_LS = 9
C_SCOND_GE = 10
C_SCOND_LT = 11
C_SCOND_GT = 12
C_SCOND_LE = 13
C_SCOND_NONE = 14
C_SCOND_NV = 15
C_SBIT = 1 << 4
C_PBIT = 1 << 5
C_WBIT = 1 << 6
C_UBIT = 1 << 7

LINKARM = LinkArch(name="arm", byte_order="little", ptr_size=4, reg_size=4)

def aconv(op: int) -> str:
    return _aconv(ANAMES, op)
