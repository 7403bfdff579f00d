'''
descripción de la arquitectura de enlace (LinkArch) y opcodes genéricos
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Sequence

ByteOrder = Literal["little", "big"]

@dataclass(frozen=True)
class LinkArch:
    """Datos de la arquitectura de enlace que el ensamblador solo lee.

    - name: identificador de la arquitectura ('amd64', 'arm', ...)
    - byte_order: 'little' o 'big'
    - ptr_size: tamaño de un puntero en bytes
    - reg_size: tamaño de un registro de propósito general en bytes
    """
    name: str
    byte_order: ByteOrder
    ptr_size: int
    reg_size: int

# Cada familia numera sus registros a partir de su propia base,
# así ninguna codificación real coincide con otra familia ni con los pseudo-registros.
RBASE_386   = 1 * 1024
RBASE_AMD64 = 2 * 1024
RBASE_ARM   = 3 * 1024
RBASE_PPC64 = 4 * 1024

# Opcodes genéricos: ocupan 0..A_ARCHSPECIFIC-1 en todas las familias
GENERIC_ANAMES = (
    "XXX",
    "CALL",
    "CHECKNIL",
    "DATA",
    "DUFFCOPY",
    "DUFFZERO",
    "END",
    "FUNCDATA",
    "GLOBL",
    "JMP",
    "NOP",
    "PCDATA",
    "RET",
    "TEXT",
    "TYPE",
    "UNDEF",
    "USEFIELD",
    "VARDEF",
    "VARKILL",
)

AXXX      = 0
ACALL     = GENERIC_ANAMES.index("CALL")
ADATA     = GENERIC_ANAMES.index("DATA")
AFUNCDATA = GENERIC_ANAMES.index("FUNCDATA")
AGLOBL    = GENERIC_ANAMES.index("GLOBL")
AJMP      = GENERIC_ANAMES.index("JMP")
ANOP      = GENERIC_ANAMES.index("NOP")
APCDATA   = GENERIC_ANAMES.index("PCDATA")
ARET      = GENERIC_ANAMES.index("RET")
ATEXT     = GENERIC_ANAMES.index("TEXT")
A_ARCHSPECIFIC = len(GENERIC_ANAMES)

def aconv(anames: Sequence[str], op: int) -> str:
    """Nombre del opcode 'op' en la tabla 'anames'; 'A???<op>' si no existe."""
    if isinstance(op, int) and 0 <= op < len(anames):
        return anames[op]
    return f"A???{op}"
