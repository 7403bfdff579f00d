from __future__ import annotations
from typing import List, Mapping
from .arch import Arch

def to_table_lines(table: Mapping[str, int]) -> List[str]:
    return [f"{name}\t{value}" for name, value in sorted(table.items())]

def to_arch_lines(a: Arch) -> List[str]:
    lines = [f"# {a.name} ptr={a.ptr_size} reg={a.reg_size} {a.byte_order}-endian"]
    lines.append("# instrucciones")
    lines.extend(to_table_lines(a.instructions))
    lines.append("# registros")
    lines.extend(to_table_lines(a.register))
    if a.register_prefix:
        lines.append("# prefijos")
        lines.extend(sorted(a.register_prefix))
    return lines

def write_tables(a: Arch, path: str) -> None:
    lines = to_arch_lines(a)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
