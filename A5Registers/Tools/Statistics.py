import numpy as np

from A5Registers.Variants import A51
from A5Registers.CipherSession import CipherSession
from A5Registers.KeySetup import normalize_key
from A5Registers.Keystream import BURST_BITS

def to_bits(packed, count = None):
    #MSB-first unpacking, the inverse of Keystream.pack_bits
    bits = np.unpackbits(np.frombuffer(bytes(packed), dtype = np.uint8))
    if count is not None:
        bits = bits[:count]
    return bits

def hamming_distance(a, b):
    a = np.asarray(a, dtype = np.uint8)
    b = np.asarray(b, dtype = np.uint8)
    if a.shape != b.shape:
        raise ValueError(f"cannot compare sequences of shape {a.shape} and {b.shape}")
    return int(np.count_nonzero(a != b))

def balance(bits):
    #fraction of ones
    bits = np.asarray(bits, dtype = np.uint8)
    return float(bits.mean()) if bits.size else 0.0

def dual_bits(key, frame, variant = A51):
    a_to_b, b_to_a = CipherSession(key, frame, variant).generate_dual()
    return np.concatenate([to_bits(a_to_b, BURST_BITS), to_bits(b_to_a, BURST_BITS)])

def avalanche(key, frame, key_bit, variant = A51, verbose = False):
    """
    Fraction of the 228 dual-direction keystream bits that change when bit
    key_bit (0 = LSB of byte 0) of the key is flipped.
    """
    key = bytearray(normalize_key(key))
    base = dual_bits(bytes(key), frame, variant)

    key[key_bit // 8] ^= 1 << (key_bit % 8)
    flipped = dual_bits(bytes(key), frame, variant)

    distance = hamming_distance(base, flipped)
    if verbose: print(f"key bit {key_bit}: {distance}/{base.size} output bits changed")
    return distance / base.size
