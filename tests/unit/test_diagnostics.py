from asmarch.diagnostics import error, warning, note, bad_register, unsupported_arch, unknown_opcode

def test_error_str():
    d = error("registro inválido: R(99)", where="prog.s", line=12, hint="use R(0)..R(15)")
    s = str(d)
    assert "prog.s:12:" in s
    assert "ERROR: registro inválido: R(99)" in s
    assert "(pista: use R(0)..R(15))" in s

def test_unsupported_arch_names_identifier():
    d = unsupported_arch("mips", ["386", "amd64"])
    assert d.severity == "error"
    assert "'mips'" in str(d)
    assert "386, amd64" in str(d)

def test_bad_register_mentions_arch():
    assert str(bad_register("R10", "arm")) == "arm: ERROR: registro inválido: R10"

def test_warning_str():
    d = warning("opcode fuera de la tabla: 9999", where="arm", line=3)
    assert d.severity == "advertencia"
    assert str(d) == "arm:3: ADVERTENCIA: opcode fuera de la tabla: 9999"

def test_note_str():
    d = note("arquitectura tomada de $GOARCH: arm", hint="pásela como argumento")
    assert d.severity == "nota"
    assert str(d) == "NOTA: arquitectura tomada de $GOARCH: arm  (pista: pásela como argumento)"

def test_unknown_opcode_is_a_warning():
    d = unknown_opcode(-1, "386")
    assert d.severity == "advertencia"
    assert str(d) == "386: ADVERTENCIA: opcode fuera de la tabla: -1"
