from asmarch.utils import is_unsigned_nbit, is_signed_nbit, fits_int16

def test_nbit_checks():
    assert is_unsigned_nbit(15, 4)
    assert not is_unsigned_nbit(16, 4)
    assert not is_unsigned_nbit(-1, 4)
    assert is_unsigned_nbit(1023, 10)
    assert not is_unsigned_nbit(1024, 10)
    assert is_signed_nbit(-4, 16)

def test_fits_int16():
    assert fits_int16(32767)
    assert fits_int16(-32768)
    assert not fits_int16(32768)
