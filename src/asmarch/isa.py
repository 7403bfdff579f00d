'''
tablas de instrucciones: alias por familia, pseudo-ops y clasificadores de saltos
'''

from __future__ import annotations
from typing import Dict, Iterable, Sequence, Tuple

from .targets import arm, i386, ppc64, x86
from .targets.link import ADATA, AFUNCDATA, AGLOBL, APCDATA, ATEXT, ACALL, AJMP

Alias = Tuple[str, int]

# Pseudo-operaciones del ensamblador, comunes a todas las arquitecturas
PSEUDOS: Dict[str, int] = {
    "DATA":     ADATA,
    "FUNCDATA": AFUNCDATA,
    "GLOBL":    AGLOBL,
    "PCDATA":   APCDATA,
    "TEXT":     ATEXT,
}

def _x86_aliases(t) -> Tuple[Alias, ...]:
    # Grafías históricas de los saltos condicionales, más los plegados SSE.
    # 't' es el módulo de la familia (i386 o x86): los valores dependen de su ANAMES.
    return (
        ("JA",   t.AJHI),
        ("JAE",  t.AJCC),
        ("JB",   t.AJCS),
        ("JBE",  t.AJLS),
        ("JC",   t.AJCS),
        ("JE",   t.AJEQ),
        ("JG",   t.AJGT),
        ("JHS",  t.AJCC),
        ("JL",   t.AJLT),
        ("JLO",  t.AJCS),
        ("JNA",  t.AJLS),
        ("JNAE", t.AJCS),
        ("JNB",  t.AJCC),
        ("JNBE", t.AJHI),
        ("JNC",  t.AJCC),
        ("JNG",  t.AJLE),
        ("JNGE", t.AJLT),
        ("JNL",  t.AJGE),
        ("JNLE", t.AJGT),
        ("JNO",  t.AJOC),
        ("JNP",  t.AJPC),
        ("JNS",  t.AJPL),
        ("JNZ",  t.AJNE),
        ("JO",   t.AJOS),
        ("JP",   t.AJPS),
        ("JPE",  t.AJPS),
        ("JPO",  t.AJPC),
        ("JS",   t.AJMI),
        ("JZ",   t.AJEQ),
        ("MASKMOVDQU", t.AMASKMOVOU),
        ("MOVOA",      t.AMOVO),
        ("MOVNTDQ",    t.AMOVNTO),
    )

I386_ALIASES: Tuple[Alias, ...] = _x86_aliases(i386)
X86_ALIASES:  Tuple[Alias, ...] = _x86_aliases(x86)

# Mnemónicos distintos que amd64 codifica igual
AMD64_ALIASES: Tuple[Alias, ...] = (
    ("MOVD",    x86.AMOVQ),
    ("MOVDQ2Q", x86.AMOVQ),
    ("MOVOA",   x86.AMOVO),
    ("PF2ID",   x86.APF2IL),
    ("PI2FD",   x86.API2FL),
    ("PSLLDQ",  x86.APSLLO),
    ("PSRLDQ",  x86.APSRLO),
)

ARM_ALIASES: Tuple[Alias, ...] = (
    ("B",  AJMP),
    ("BL", ACALL),
)

PPC64_ALIASES: Tuple[Alias, ...] = (
    ("BR",     ppc64.ABR),
    ("BL",     ppc64.ABL),
    ("RETURN", ppc64.ARETURN),
)

def build_instructions(anames: Sequence[str], *alias_tables: Iterable[Alias]) -> Dict[str, int]:
    """Tabla mnemónico -> opcode.

    Primero la tabla generada (índice = opcode), después los alias encima: un alias
    pisa una entrada generada con el mismo nombre, nunca al revés. Repetir un alias
    con el mismo valor es inofensivo; repetirlo con otro valor es un error de datos.
    """
    instructions: Dict[str, int] = {}
    for op, name in enumerate(anames):
        if not name:
            raise ValueError(f"Nombre de opcode vacío en la posición {op}")
        if name in instructions:
            raise ValueError(f"Opcode duplicado en la tabla generada: {name}")
        instructions[name] = op
    seen: Dict[str, int] = {}
    for table in alias_tables:
        for name, op in table:
            if name in seen and seen[name] != op:
                raise ValueError(f"Alias {name} definido con valores distintos: {seen[name]} y {op}")
            seen[name] = op
            instructions[name] = op
    return instructions

# ---- Clasificadores de saltos ----

def jump_386(word: str) -> bool:
    """386 y amd64: todo lo que empieza por J, más CALL."""
    return word[:1] == "J" or word == "CALL"

ARM_JUMPS = frozenset({
    "B", "BCC", "BCS", "BEQ", "BGE", "BGT", "BHI", "BHS", "BL", "BLE",
    "BLO", "BLS", "BLT", "BMI", "BNE", "BPL", "BVC", "BVS", "CALL", "JMP",
})

def jump_arm(word: str) -> bool:
    return word in ARM_JUMPS

PPC64_JUMPS = frozenset({
    "BC", "BCL", "BEQ", "BGE", "BGT", "BL", "BLE", "BLT", "BNE",
    "BR", "BVC", "BVS", "CALL", "JMP",
})

def jump_ppc64(word: str) -> bool:
    return word in PPC64_JUMPS

# ---- Predicados de opcode que usa el parser ----

def arm_is_cmp(op: int) -> bool:
    """CMP y compañía no llevan registro destino."""
    return op in (arm.ACMN, arm.ACMP, arm.ATEQ, arm.ATST)

def arm_is_strex(op: int) -> bool:
    """STREX y similares llevan tres operandos, uno de ellos de salida."""
    return op in (arm.ASTREX, arm.ASTREXD, arm.ASWPW, arm.ASWPBU)

def arm_is_mrc(op: int) -> bool:
    return op == arm.AMRC

def arm_is_float_cmp(op: int) -> bool:
    return op in (arm.ACMPF, arm.ACMPD)

_PPC64_CMP = frozenset({ppc64.ACMP, ppc64.ACMPU, ppc64.ACMPW, ppc64.ACMPWU})
_PPC64_NEG = frozenset(ppc64.ANAMES.index(n) for n in ppc64.NEG_FORM_NAMES)

def ppc64_is_cmp(op: int) -> bool:
    return op in _PPC64_CMP

def ppc64_is_neg(op: int) -> bool:
    """Instrucciones con un único operando fuente (NEG, EXTSB, CNTLZW...)."""
    return op in _PPC64_NEG

# ---- Sufijos de condición de arm ----

_ARM_SCOND: Dict[str, int] = {
    "EQ": arm.C_SCOND_EQ,
    "NE": arm.C_SCOND_NE,
    "CS": arm.C_SCOND_HS,
    "HS": arm.C_SCOND_HS,
    "CC": arm.C_SCOND_LO,
    "LO": arm.C_SCOND_LO,
    "MI": arm.C_SCOND_MI,
    "PL": arm.C_SCOND_PL,
    "VS": arm.C_SCOND_VS,
    "VC": arm.C_SCOND_VC,
    "HI": arm.C_SCOND_HI,
    "LS": arm.C_SCOND_LS,
    "GE": arm.C_SCOND_GE,
    "LT": arm.C_SCOND_LT,
    "GT": arm.C_SCOND_GT,
    "LE": arm.C_SCOND_LE,
    "AL": arm.C_SCOND_NONE,
}

_ARM_LS: Dict[str, int] = {
    "U":  arm.C_UBIT,
    "S":  arm.C_SBIT,
    "W":  arm.C_WBIT,
    "P":  arm.C_PBIT,
    "PW": arm.C_WBIT | arm.C_PBIT,
    "WP": arm.C_WBIT | arm.C_PBIT,
}

def parse_arm_condition(cond: str) -> Tuple[int, bool]:
    """Traduce sufijos como '.EQ.S' a bits de scond.

    Devuelve (bits, ok). Como mucho un código de condición; los modificadores
    (U, S, W, P) se acumulan. Sin condición explícita vale AL.
    """
    if cond.startswith("."):
        cond = cond[1:]
    if cond == "":
        return arm.C_SCOND_NONE, True
    bits = 0
    cc = None
    for name in cond.split("."):
        if name in _ARM_LS:
            bits |= _ARM_LS[name]
            continue
        if name in _ARM_SCOND and cc is None:
            cc = _ARM_SCOND[name]
            continue
        return 0, False
    if cc is None:
        cc = arm.C_SCOND_NONE
    return bits | cc, True
