'''
tablas de registros por arquitectura, pseudo-registros y notación PREFIJO(n)
'''

from __future__ import annotations
from typing import Callable, Dict, Iterable, Tuple

from .utils import fits_int16, is_unsigned_nbit
from .targets import arm, ppc64

# Pseudo-registros: mismo valor en todas las arquitecturas, siempre negativos
RFP = -1
RSB = -2
RSP = -3
RPC = -4

# Nombre con el que el runtime reserva su registro de estado por hilo
G_REGISTER = "g"

RegisterNumber = Callable[[str, int], Tuple[int, bool]]

def _put(register: Dict[str, int], name: str, value: int) -> None:
    if not name:
        raise ValueError("nombre de registro vacío")
    if not fits_int16(value):
        raise ValueError(f"Codificación fuera de int16 para {name}: {value}")
    register[name] = value

def add_names(register: Dict[str, int], names: Iterable[str], base: int) -> None:
    """Añade una lista de nombres consecutivos a partir de 'base' (familias x86)."""
    for i, name in enumerate(names):
        _put(register, name, base + i)

def add_range(register: Dict[str, int], lo: int, hi: int, rconv: Callable[[int], str]) -> None:
    """Añade la clase de registros [lo, hi] usando 'rconv' para nombrarlos."""
    for reg in range(lo, hi + 1):
        _put(register, rconv(reg), reg)

def add_pseudos(register: Dict[str, int], *, with_sp: bool = False) -> None:
    """SB, FP y PC siempre; SP solo donde no es un registro real (arm)."""
    register["SB"] = RSB
    register["FP"] = RFP
    register["PC"] = RPC
    if with_sp:
        register["SP"] = RSP

def reserve(register: Dict[str, int], raw: str, name: str = G_REGISTER) -> None:
    """Quita 'raw' de la tabla y publica su codificación bajo 'name'.

    Evita que el código de usuario pise por accidente el registro que el runtime
    dedica al puntero por hilo.
    """
    if raw not in register:
        raise ValueError(f"Registro reservado inexistente: {raw}")
    register[name] = register.pop(raw)

# ---- Notación PREFIJO(n) ----

def nil_register_number(prefix: str, n: int) -> Tuple[int, bool]:
    """Para arquitecturas sin notación R(n): siempre falla."""
    return 0, False

def arm_register_number(prefix: str, n: int) -> Tuple[int, bool]:
    """R(n) y F(n) con n en 0..15."""
    if not is_unsigned_nbit(n, 4):
        return 0, False
    if prefix == "R":
        return arm.REG_R0 + n, True
    if prefix == "F":
        return arm.REG_F0 + n, True
    return 0, False

# prefijo -> (base, ancho del índice en bits)
_PPC64_CLASSES: Dict[str, Tuple[int, int]] = {
    "CR":  (ppc64.REG_CR0, 3),
    "F":   (ppc64.REG_F0, 5),
    "R":   (ppc64.REG_R0, 5),
    "SPR": (ppc64.REG_SPR0, 10),
}

def ppc64_register_number(prefix: str, n: int) -> Tuple[int, bool]:
    """CR(0..7), F(0..31), R(0..31) y SPR(0..1023)."""
    cls = _PPC64_CLASSES.get(prefix)
    if cls is None:
        return 0, False
    base, width = cls
    if not is_unsigned_nbit(n, width):
        return 0, False
    return base + n, True
