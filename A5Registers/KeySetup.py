import operator
import numpy as np
from BitVector import BitVector

from A5Registers.ClockControl import clock
from A5Registers.Keystream import emit_bit
from A5Registers.RegisterBank import SetupPhase
from A5Registers.Errors import InvalidKeyLength, MalformedKey, InvalidFrameNumber

KEY_BYTES = 8
FRAME_BITS = 22
MIX_CYCLES = 100

#INPUT CHECKS:
def normalize_key(key):
    """
    Return the key as 8 bytes.

    Accepts bytes/bytearray, a sequence of byte values, a hex string or a
    64-bit BitVector (most significant bit = top bit of byte 0).
    """
    if isinstance(key, BitVector):
        if len(key) != 8 * KEY_BYTES:
            raise InvalidKeyLength(len(key), "bits")
        key = int(key).to_bytes(KEY_BYTES, 'big')
    elif isinstance(key, str):
        try:
            key = bytes.fromhex(key)
        except ValueError as e:
            raise MalformedKey(f"key '{key}' is not a hex string of whole bytes") from e
    elif isinstance(key, int):
        #bytes(8) would silently build an all-zero key
        raise TypeError("key must be bytes, a byte sequence, a hex string or a BitVector")
    else:
        key = bytes(key)

    if len(key) != KEY_BYTES:
        raise InvalidKeyLength(len(key))
    return key

# Frame numbers outside 22 bits are rejected rather than truncated.
def check_frame(frame):
    if isinstance(frame, (bool, np.bool_)):
        raise InvalidFrameNumber(frame)
    #any integer type, numpy scalars included
    try:
        frame = operator.index(frame)
    except TypeError as e:
        raise InvalidFrameNumber(frame) from e
    if frame < 0 or frame >= 1 << FRAME_BITS:
        raise InvalidFrameNumber(frame)
    return frame

#LOAD ORDER:
def key_bits(key, reverse_key = False):
    #byte 0 is loaded first (byte 7 if reverse_key), each byte LSB first
    key = normalize_key(key)
    if reverse_key:
        key = key[::-1]
    for i in range(8 * KEY_BYTES):
        yield (key[i // 8] >> (i & 7)) & 1

def frame_bits(frame):
    frame = check_frame(frame)
    for i in range(FRAME_BITS):
        yield (frame >> i) & 1


#PHASES:
def load_key(bank, key, reverse_key = False):
    for keybit in key_bits(key, reverse_key):
        clock(bank, force_all = True)
        bank.xor_all(keybit)
    bank.phase = SetupPhase.KEY_LOADED

def load_frame(bank, frame):
    for i, framebit in enumerate(frame_bits(frame)):
        #the last frame bit triggers the forced bits (A5/2 only)
        clock(bank, force_all = True, loaded = (i == FRAME_BITS - 1))
        bank.xor_all(framebit)
    bank.phase = SetupPhase.FRAME_LOADED

def mix(bank, cycles = MIX_CYCLES):
    for _ in range(cycles):
        clock(bank)
    bank.phase = SetupPhase.MIXED

def prime(bank):
    #fill the delay bit without clocking; no-op for undelayed variants
    if bank.variant.delayed_output:
        emit_bit(bank)
    bank.phase = SetupPhase.READY

def key_setup(bank, key, frame, reverse_key = False, verbose = False):
    """
    Load key and frame number into a bank, always starting from zero:
    64 forced clocks with key bits, 22 forced clocks with frame bits,
    100 mixing clocks, then priming of the delayed output.

    Key bytes are loaded in the order given, which reproduces the published
    test vectors. reverse_key=True loads byte 7 first, for drivers that hold
    Kc byte-reversed.
    """
    # validate before touching the bank, so a failed setup leaves it as it was
    key = normalize_key(key)
    frame = check_frame(frame)

    bank.zero()

    load_key(bank, key, reverse_key)
    if verbose: print(f"key loaded:\n{bank}\n")

    load_frame(bank, frame)
    if verbose: print(f"frame {frame:#08x} loaded:\n{bank}\n")

    mix(bank)
    if verbose: print(f"after {MIX_CYCLES} mixing cycles:\n{bank}\n")

    prime(bank)
    if verbose: print(f"{bank.variant.name} ready")
    return bank
