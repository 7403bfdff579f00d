from __future__ import annotations
import argparse, logging, os, sys
from typing import List, Optional

from .arch import Arch, GOARCHES, set_arch
from .diagnostics import (Diagnostic, arch_from_env, bad_register, error, unknown_instruction,
                          unknown_opcode, unsupported_arch)
from .lexer import split_register_notation
from .writers import write_tables

log = logging.getLogger(__name__)

def lookup_register(a: Arch, token: str) -> Optional[int]:
    """Nombre de registro o notación PREFIJO(n); None si no resuelve."""
    notation = split_register_notation(token)
    if notation is not None:
        prefix, n = notation
        if not a.has_prefix(prefix):
            return None
        value, ok = a.register_number(prefix, n)
        return value if ok else None
    return a.reg(token)

def run_queries(a: Arch, *, ops: List[str], regs: List[str], opcodes: List[int],
                jumps: List[str]) -> tuple[List[str], List[Diagnostic]]:
    """Resuelve cada consulta; devuelve (líneas de salida, diagnósticos)."""
    out: List[str] = []
    diags: List[Diagnostic] = []
    for m in ops:
        op = a.opcode(m)
        if op is None:
            diags.append(unknown_instruction(m, a.name))
        else:
            out.append(f"{m}\t{op}")
    for r in regs:
        value = lookup_register(a, r)
        if value is None:
            diags.append(bad_register(r, a.name))
        else:
            out.append(f"{r}\t{value}")
    for op in opcodes:
        # aconv nunca falla; A???N se imprime igual y solo se avisa
        name = a.aconv(op)
        out.append(f"{op}\t{name}")
        if name.startswith("A???"):
            diags.append(unknown_opcode(op, a.name))
    for w in jumps:
        out.append(f"{w}\t{'salto' if a.is_jump(w) else 'no-salto'}")
    return out, diags

def _setup_logging(verbose: int, quiet: bool) -> None:
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s: %(name)s: %(message)s", stream=sys.stderr)

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Consulta el descriptor de arquitectura del ensamblador")
    ap.add_argument("arch", nargs="?",
                    help="arquitectura destino (por defecto $GOARCH): " + ", ".join(GOARCHES))
    ap.add_argument("--op", action="append", default=[], metavar="MNEMONICO",
                    help="opcode de un mnemónico")
    ap.add_argument("--reg", action="append", default=[], metavar="REGISTRO",
                    help="codificación de un registro; acepta PREFIJO(n)")
    ap.add_argument("--aconv", action="append", default=[], type=int, metavar="OPCODE",
                    help="mnemónico de un opcode")
    ap.add_argument("--jump", action="append", default=[], metavar="MNEMONICO",
                    help="indica si el mnemónico es un salto")
    ap.add_argument("--dump", metavar="RUTA", help="escribe las tablas completas en RUTA")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    ap.add_argument("-q", "--quiet", action="store_true")
    args = ap.parse_args(argv)
    _setup_logging(args.verbose, args.quiet)

    goarch = args.arch
    if not goarch:
        goarch = os.environ.get("GOARCH")
        if goarch and args.verbose:
            print(arch_from_env(goarch), file=sys.stderr)
    if not goarch:
        print(error("falta la arquitectura", hint="pásela como argumento o en $GOARCH"), file=sys.stderr)
        return 1

    a = set_arch(goarch)
    if a is None:
        # sin descriptor no hay nada más que hacer
        print(unsupported_arch(goarch, GOARCHES), file=sys.stderr)
        return 1

    out, diags = run_queries(a, ops=args.op, regs=args.reg, opcodes=args.aconv, jumps=args.jump)
    for line in out:
        print(line)
    for d in diags:
        print(d, file=sys.stderr)

    if args.dump:
        try:
            write_tables(a, args.dump)
        except OSError as ex:
            print(f"ERROR al escribir {args.dump}: {ex}", file=sys.stderr)
            return 3
        log.info("tablas de %s escritas en %s", a.name, args.dump)

    return 1 if any(d.severity == "error" for d in diags) else 0

if __name__ == "__main__":
    raise SystemExit(main())
