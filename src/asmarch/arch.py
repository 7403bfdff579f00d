'''
descriptor de arquitectura (Arch) y fábrica set_arch por GOARCH
'''

from __future__ import annotations
import dataclasses
import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Literal, Mapping, Optional, Tuple, get_args

from . import isa, regs
from .targets import arm, i386, ppc64, x86
from .targets.link import LinkArch

log = logging.getLogger(__name__)

GoArch = Literal["386", "amd64", "amd64p32", "arm", "ppc64", "ppc64le"]
GOARCHES: Tuple[str, ...] = get_args(GoArch)

@dataclass(frozen=True, eq=False)
class Arch:
    """Todo lo que el lexer, el parser y el codificador necesitan saber de la CPU.

    - link_arch: datos de enlace (tamaño de puntero, orden de bytes); prestado, no propio
    - instructions: mnemónico -> opcode (tabla generada + alias)
    - register: nombre -> codificación, incluidos los pseudo-registros negativos
    - register_prefix: prefijos válidos en la notación PREFIJO(n); vacío si no aplica
    - register_number: (prefijo, n) -> (codificación, ok)
    - is_jump: ¿el operando del mnemónico es un destino de salto?
    - aconv: opcode -> mnemónico, solo para diagnósticos

    Las tablas son de solo lectura: un mismo Arch puede compartirse entre hilos.
    """
    link_arch: LinkArch
    instructions: Mapping[str, int]
    register: Mapping[str, int]
    register_prefix: FrozenSet[str]
    register_number: regs.RegisterNumber
    is_jump: Callable[[str], bool]
    aconv: Callable[[int], str]

    @property
    def name(self) -> str:
        return self.link_arch.name

    @property
    def ptr_size(self) -> int:
        return self.link_arch.ptr_size

    @property
    def reg_size(self) -> int:
        return self.link_arch.reg_size

    @property
    def byte_order(self) -> str:
        return self.link_arch.byte_order

    def opcode(self, mnemonic: str) -> Optional[int]:
        return self.instructions.get(mnemonic)

    def reg(self, name: str) -> Optional[int]:
        return self.register.get(name)

    def has_prefix(self, prefix: str) -> bool:
        return prefix in self.register_prefix

def _freeze(link_arch: LinkArch, instructions: Dict[str, int], register: Dict[str, int],
            prefixes: FrozenSet[str], register_number, is_jump, aconv) -> Arch:
    return Arch(
        link_arch=link_arch,
        instructions=MappingProxyType(instructions),
        register=MappingProxyType(register),
        register_prefix=prefixes,
        register_number=register_number,
        is_jump=is_jump,
        aconv=aconv,
    )

# ---- Constructores por familia ----

def arch_386() -> Arch:
    register: Dict[str, int] = {}
    regs.add_names(register, i386.REGISTER, i386.REG_AL)
    regs.add_pseudos(register)
    instructions = isa.build_instructions(i386.ANAMES, isa.I386_ALIASES)
    return _freeze(i386.LINK386, instructions, register, frozenset(),
                   regs.nil_register_number, isa.jump_386, i386.aconv)

def arch_amd64() -> Arch:
    # SP es el registro hardware; no hay pseudo SP
    register: Dict[str, int] = {}
    regs.add_names(register, x86.REGISTER, x86.REG_AL)
    regs.add_pseudos(register)
    instructions = isa.build_instructions(x86.ANAMES, isa.X86_ALIASES, isa.AMD64_ALIASES)
    return _freeze(x86.LINKAMD64, instructions, register, frozenset(),
                   regs.nil_register_number, isa.jump_386, x86.aconv)

def arch_arm() -> Arch:
    register: Dict[str, int] = {}
    # R0..R15, F0..F15, FPSR, FPCR, CPSR; SPSR queda fuera
    regs.add_range(register, arm.REG_R0, arm.REG_SPSR - 1, arm.rconv)
    regs.reserve(register, "R10")
    # Coprocesador: C0..C15 se codifican tal cual
    for i in range(16):
        register[f"C{i}"] = i
    regs.add_pseudos(register, with_sp=True)
    instructions = isa.build_instructions(arm.ANAMES, isa.ARM_ALIASES)
    return _freeze(arm.LINKARM, instructions, register, frozenset({"F", "R"}),
                   regs.arm_register_number, isa.jump_arm, arm.aconv)

def arch_ppc64() -> Arch:
    register: Dict[str, int] = {}
    regs.add_range(register, ppc64.REG_R0, ppc64.REG_R31, ppc64.rconv)
    regs.add_range(register, ppc64.REG_F0, ppc64.REG_F31, ppc64.rconv)
    regs.add_range(register, ppc64.REG_CR0, ppc64.REG_CR7, ppc64.rconv)
    regs.add_range(register, ppc64.REG_MSR, ppc64.REG_CR, ppc64.rconv)
    for reg in (ppc64.REG_XER, ppc64.REG_LR, ppc64.REG_CTR):
        register[ppc64.rconv(reg)] = reg
    regs.add_pseudos(register)
    regs.reserve(register, "R30")
    instructions = isa.build_instructions(ppc64.ANAMES, isa.PPC64_ALIASES)
    return _freeze(ppc64.LINKPPC64, instructions, register, frozenset({"CR", "F", "R", "SPR"}),
                   regs.ppc64_register_number, isa.jump_ppc64, ppc64.aconv)

def _with_link(a: Arch, link_arch: LinkArch) -> Arch:
    # Variantes de ancho de puntero u orden de bytes: mismas tablas, otro LinkArch
    return dataclasses.replace(a, link_arch=link_arch)

def set_arch(goarch: str) -> Optional[Arch]:
    """Construye el descriptor para 'goarch'; None si la arquitectura no está soportada."""
    if goarch == "386":
        a = arch_386()
    elif goarch == "amd64":
        a = arch_amd64()
    elif goarch == "amd64p32":
        a = _with_link(arch_amd64(), x86.LINKAMD64P32)
    elif goarch == "arm":
        a = arch_arm()
    elif goarch == "ppc64":
        a = _with_link(arch_ppc64(), ppc64.LINKPPC64)
    elif goarch == "ppc64le":
        a = _with_link(arch_ppc64(), ppc64.LINKPPC64LE)
    else:
        log.warning("arquitectura no soportada: %r", goarch)
        return None
    log.debug("arquitectura %s: %d instrucciones, %d registros",
              a.name, len(a.instructions), len(a.register))
    return a
