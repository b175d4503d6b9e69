import numpy as np
import pytest

from game.secret_code import Code, all_codes
from solver.interop import (
    BEST_DTYPE,
    code_ordinals,
    decode_best,
    decode_code,
    encode_code,
    encode_codes,
    encode_ordinals,
)


@pytest.mark.parametrize("text,encoded", [
    ("RRRR", 0x0000),
    ("RRGG", 0x1100),
    ("RGBY", 0x3210),
    ("wRRR", 0x0005),
    ("wwww", 0x5555),
])
def test_encode_decode_golden(text, encoded):
    code = Code.parse(text)
    assert encode_code(code) == encoded
    assert decode_code(encoded) == code


@pytest.mark.parametrize("encoded", [0x0006, 0x00F0, 0x0700, 0xF000, 0x10000, -1])
def test_decode_rejects_malformed_values(encoded):
    with pytest.raises(ValueError):
        decode_code(encoded)


def test_vectorized_encoding_matches_scalar():
    codes = all_codes()
    encoded = encode_codes(codes)
    assert encoded.dtype == np.uint16
    assert encoded.tolist() == [encode_code(c) for c in codes]

    ordinals = code_ordinals(encoded)
    assert ordinals.shape == (1296, 4)
    assert ordinals[7].tolist() == [0, 0, 1, 1]
    assert np.array_equal(encode_ordinals(ordinals), encoded)


def test_code_ordinals_rejects_malformed_nibble():
    with pytest.raises(ValueError):
        code_ordinals(np.array([0x1100, 0x0060], dtype=np.uint16))


def test_best_record_layout():
    assert BEST_DTYPE.itemsize == 4
    rec = np.zeros(1, dtype=BEST_DTYPE)
    rec[0] = (256, 0x1100)
    assert rec.tobytes() == bytes([0x00, 0x01, 0x00, 0x11])
    assert decode_best(rec[0]) == (256, Code.parse("RRGG"))
