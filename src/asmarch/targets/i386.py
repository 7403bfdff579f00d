'''
tabla generada de 386: registros, nombres de opcodes y LinkArch
'''

from __future__ import annotations
from typing import Tuple

from .link import GENERIC_ANAMES, LinkArch, RBASE_386, aconv as _aconv

def _seq(prefix: str, n: int) -> Tuple[str, ...]:
    return tuple(f"{prefix}{i}" for i in range(n))

REGISTER: Tuple[str, ...] = (
    ("AL", "CL", "DL", "BL", "AH", "CH", "DH", "BH")
    + ("AX", "CX", "DX", "BX", "SP", "BP", "SI", "DI")
    + _seq("F", 8)
    + ("CS", "SS", "DS", "ES", "FS", "GS")
    + ("GDTR", "IDTR", "LDTR", "MSW", "TASK")
    + _seq("CR", 8)
    + _seq("DR", 8)
    + _seq("TR", 8)
    + _seq("X", 8)
    + ("TLS",)
)

REG_AL = RBASE_386

# Opcodes propios de la familia x86 compartidos por 386 y amd64
X86_ANAMES: Tuple[str, ...] = (
    # enteros
    "AAA", "AAD", "AAM", "AAS",
    "ADCB", "ADCL", "ADCW", "ADDB", "ADDL", "ADDW", "ADJSP",
    "ANDB", "ANDL", "ANDW", "ARPL", "BOUNDL", "BOUNDW",
    "BSFL", "BSFW", "BSRL", "BSRW", "BSWAPL",
    "BTL", "BTW", "BTCL", "BTCW", "BTRL", "BTRW", "BTSL", "BTSW",
    "BYTE", "CDQ", "CLC", "CLD", "CLI", "CLTS", "CMC",
    "CMPB", "CMPL", "CMPW", "CMPSB", "CMPSL", "CMPSW",
    "CMPXCHGB", "CMPXCHGL", "CMPXCHGW", "CMPXCHG8B", "CPUID", "CWD",
    "DAA", "DAS", "DECB", "DECL", "DECW", "DIVB", "DIVL", "DIVW",
    "EMMS", "ENTER", "HLT", "IDIVB", "IDIVL", "IDIVW", "IMULB", "IMULL", "IMULW",
    "INB", "INL", "INW", "INCB", "INCL", "INCW", "INSB", "INSL", "INSW",
    "INT", "INTO", "IRETL", "IRETW",
    # saltos condicionales
    "JCC", "JCS", "JCXZL", "JEQ", "JGE", "JGT", "JHI", "JLE",
    "JLS", "JLT", "JMI", "JNE", "JOC", "JOS", "JPC", "JPL", "JPS",
    "LAHF", "LARL", "LARW", "LEAL", "LEAW", "LEAVEL", "LEAVEW",
    "LFENCE", "LOCK", "LODSB", "LODSL", "LODSW", "LONG",
    "LOOP", "LOOPEQ", "LOOPNE", "LSLL", "LSLW", "MFENCE",
    "MOVB", "MOVL", "MOVW", "MOVBLSX", "MOVBLZX", "MOVBWSX", "MOVBWZX",
    "MOVWLSX", "MOVWLZX", "MOVSB", "MOVSL", "MOVSW",
    "MULB", "MULL", "MULW", "NEGB", "NEGL", "NEGW", "NOTB", "NOTL", "NOTW",
    "ORB", "ORL", "ORW", "OUTB", "OUTL", "OUTW", "OUTSB", "OUTSL", "OUTSW",
    "PAUSE", "POPAL", "POPAW", "POPFL", "POPFW", "POPL", "POPW",
    "PREFETCHT0", "PREFETCHT1", "PREFETCHT2", "PREFETCHNTA",
    "PUSHAL", "PUSHAW", "PUSHFL", "PUSHFW", "PUSHL", "PUSHW",
    "RCLB", "RCLL", "RCLW", "RCRB", "RCRL", "RCRW", "RDTSC", "REP", "REPN",
    "ROLB", "ROLL", "ROLW", "RORB", "RORL", "RORW",
    "SAHF", "SALB", "SALL", "SALW", "SARB", "SARL", "SARW",
    "SBBB", "SBBL", "SBBW", "SCASB", "SCASL", "SCASW",
    "SETCC", "SETCS", "SETEQ", "SETGE", "SETGT", "SETHI", "SETLE", "SETLS",
    "SETLT", "SETMI", "SETNE", "SETOC", "SETOS", "SETPC", "SETPL", "SETPS",
    "SFENCE", "SHLB", "SHLL", "SHLW", "SHRB", "SHRL", "SHRW",
    "STC", "STD", "STI", "STOSB", "STOSL", "STOSW",
    "SUBB", "SUBL", "SUBW", "SYSCALL", "TESTB", "TESTL", "TESTW",
    "VERR", "VERW", "WAIT", "WORD",
    "XADDB", "XADDL", "XADDW", "XCHGB", "XCHGL", "XCHGW", "XLAT",
    "XORB", "XORL", "XORW",
    "CMOVLCC", "CMOVLCS", "CMOVLEQ", "CMOVLGE", "CMOVLGT", "CMOVLHI",
    "CMOVLLE", "CMOVLLS", "CMOVLLT", "CMOVLMI", "CMOVLNE", "CMOVLOC",
    "CMOVLOS", "CMOVLPC", "CMOVLPL", "CMOVLPS",
    # x87
    "FMOVB", "FMOVBP", "FMOVD", "FMOVDP", "FMOVF", "FMOVFP", "FMOVL", "FMOVLP",
    "FMOVV", "FMOVVP", "FMOVW", "FMOVWP", "FMOVX", "FMOVXP",
    "FCOMB", "FCOMBP", "FCOMD", "FCOMDP", "FCOMDPP", "FCOMF", "FCOMFP",
    "FCOML", "FCOMLP", "FCOMW", "FCOMWP", "FUCOM", "FUCOMP", "FUCOMPP",
    "FADDDP", "FADDW", "FADDL", "FADDF", "FADDD",
    "FMULDP", "FMULW", "FMULL", "FMULF", "FMULD",
    "FSUBDP", "FSUBW", "FSUBL", "FSUBF", "FSUBD",
    "FSUBRDP", "FSUBRW", "FSUBRL", "FSUBRF", "FSUBRD",
    "FDIVDP", "FDIVW", "FDIVL", "FDIVF", "FDIVD",
    "FDIVRDP", "FDIVRW", "FDIVRL", "FDIVRF", "FDIVRD",
    "FXCHD", "FFREE", "FLDCW", "FLDENV", "FRSTOR", "FSAVE", "FSTCW", "FSTENV", "FSTSW",
    "F2XM1", "FABS", "FCHS", "FCLEX", "FCOS", "FDECSTP", "FINCSTP", "FINIT",
    "FLD1", "FLDL2E", "FLDL2T", "FLDLG2", "FLDLN2", "FLDPI", "FLDZ", "FNOP",
    "FPATAN", "FPREM", "FPREM1", "FPTAN", "FRNDINT", "FSCALE", "FSIN",
    "FSINCOS", "FSQRT", "FTST", "FXAM", "FXTRACT", "FYL2X", "FYL2XP1",
    # SSE/SSE2
    "ADDPD", "ADDPS", "ADDSD", "ADDSS", "ANDNPD", "ANDNPS", "ANDPD", "ANDPS",
    "CMPPD", "CMPPS", "CMPSD", "CMPSS", "COMISD", "COMISS",
    "CVTPL2PD", "CVTPL2PS", "CVTPD2PL", "CVTPD2PS", "CVTPS2PL", "CVTPS2PD",
    "CVTSD2SL", "CVTSD2SS", "CVTSL2SD", "CVTSL2SS", "CVTSS2SD", "CVTSS2SL",
    "CVTTPD2PL", "CVTTPS2PL", "CVTTSD2SL", "CVTTSS2SL",
    "DIVPD", "DIVPS", "DIVSD", "DIVSS", "LDMXCSR", "MASKMOVOU",
    "MAXPD", "MAXPS", "MAXSD", "MAXSS", "MINPD", "MINPS", "MINSD", "MINSS",
    "MOVAPD", "MOVAPS", "MOVO", "MOVOU", "MOVHLPS", "MOVHPD", "MOVHPS",
    "MOVLHPS", "MOVLPD", "MOVLPS", "MOVMSKPD", "MOVMSKPS",
    "MOVNTO", "MOVNTPD", "MOVNTPS", "MOVSD", "MOVSS", "MOVUPD", "MOVUPS",
    "MULPD", "MULPS", "MULSD", "MULSS", "ORPD", "ORPS",
    "PADDB", "PADDL", "PADDQ", "PADDW", "PAND", "PANDN", "PAVGB", "PAVGW",
    "PCMPEQB", "PCMPEQL", "PCMPEQW", "PCMPGTB", "PCMPGTL", "PCMPGTW",
    "PINSRD", "PMAXSW", "PMAXUB", "PMINSW", "PMINUB", "PMOVMSKB",
    "PMULHUW", "PMULHW", "PMULLW", "PMULULQ", "POR", "PSADBW",
    "PSHUFB", "PSHUFHW", "PSHUFL", "PSHUFLW",
    "PSLLL", "PSLLQ", "PSLLW", "PSRAL", "PSRAW", "PSRLL", "PSRLQ", "PSRLW",
    "PSUBB", "PSUBL", "PSUBQ", "PSUBW",
    "PUNPCKHBW", "PUNPCKHLQ", "PUNPCKHQDQ", "PUNPCKHWL",
    "PUNPCKLBW", "PUNPCKLLQ", "PUNPCKLQDQ", "PUNPCKLWL", "PXOR",
    "RCPPS", "RCPSS", "RSQRTPS", "RSQRTSS", "SHUFPD", "SHUFPS",
    "SQRTPD", "SQRTPS", "SQRTSD", "SQRTSS", "STMXCSR",
    "SUBPD", "SUBPS", "SUBSD", "SUBSS", "UCOMISD", "UCOMISS",
    "UNPCKHPD", "UNPCKHPS", "UNPCKLPD", "UNPCKLPS", "XORPD", "XORPS",
    # AES
    "AESENC", "AESENCLAST", "AESDEC", "AESDECLAST", "AESIMC", "AESKEYGENASSIST",
)

ANAMES: Tuple[str, ...] = GENERIC_ANAMES + X86_ANAMES

def _a(name: str) -> int:
    return ANAMES.index(name)

AJCC = _a("JCC"); AJCS = _a("JCS"); AJEQ = _a("JEQ"); AJGE = _a("JGE")
AJGT = _a("JGT"); AJHI = _a("JHI"); AJLE = _a("JLE"); AJLS = _a("JLS")
AJLT = _a("JLT"); AJMI = _a("JMI"); AJNE = _a("JNE"); AJOC = _a("JOC")
AJOS = _a("JOS"); AJPC = _a("JPC"); AJPL = _a("JPL"); AJPS = _a("JPS")
AMASKMOVOU = _a("MASKMOVOU")
AMOVO      = _a("MOVO")
AMOVNTO    = _a("MOVNTO")

LINK386 = LinkArch(name="386", byte_order="little", ptr_size=4, reg_size=4)

def aconv(op: int) -> str:
    return _aconv(ANAMES, op)
