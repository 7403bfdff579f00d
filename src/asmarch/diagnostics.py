'''
clase Diagnostic y helpers para los fallos de consulta del descriptor
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional, Literal

# Severidad de los diagnósticos (en español)
Severity = Literal["error", "advertencia", "nota"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
    "nota": "NOTA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Problema reportado al usuario, con ubicación opcional y una pista.

    'where' es el contexto del fallo: un archivo de fuente, o la arquitectura
    cuando la consulta no viene de ninguna línea concreta.
    """
    severity: Severity
    message: str
    where: Optional[str] = None
    line: Optional[int] = None
    hint: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.where is not None:
            loc = self.where
            if self.line is not None:
                loc += f":{self.line}"
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, where: str | None = None, line: int | None = None,
          hint: str | None = None) -> Diagnostic:
    return Diagnostic("error", message, where, line, hint)

def warning(message: str, *, where: str | None = None, line: int | None = None,
            hint: str | None = None) -> Diagnostic:
    return Diagnostic("advertencia", message, where, line, hint)

def note(message: str, *, where: str | None = None, line: int | None = None,
         hint: str | None = None) -> Diagnostic:
    return Diagnostic("nota", message, where, line, hint)

def unsupported_arch(goarch: str, supported: Iterable[str]) -> Diagnostic:
    """La arquitectura pedida no existe: no se puede seguir ensamblando."""
    return error(f"arquitectura no soportada: {goarch!r}",
                 hint="use una de " + ", ".join(supported))

def bad_register(token: str, arch_name: str) -> Diagnostic:
    return error(f"registro inválido: {token}", where=arch_name)

def unknown_instruction(mnemonic: str, arch_name: str) -> Diagnostic:
    return error(f"instrucción desconocida: {mnemonic}", where=arch_name)

def unknown_opcode(op: int, arch_name: str) -> Diagnostic:
    # aconv ya devuelve A???N; esto solo avisa, no hace fallar la consulta
    return warning(f"opcode fuera de la tabla: {op}", where=arch_name)

def arch_from_env(goarch: str) -> Diagnostic:
    return note(f"arquitectura tomada de $GOARCH: {goarch}")
