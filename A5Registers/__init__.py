from A5Registers.Errors import (
    A5Error, InvalidKeyLength, MalformedKey, InvalidFrameNumber,
    UnknownVariant, InvalidVariant, UnsupportedVariant, SetupIncomplete
)
from A5Registers.BitOps import parity, majority
from A5Registers.Variants import CipherVariant, A51, A52, LINEAR, NONLINEAR
from A5Registers.RegisterBank import RegisterBank, SetupPhase, clock_one
from A5Registers.ClockControl import clock, clock_decision
from A5Registers.Keystream import (
    emit_bit, step, generate, pack_bits,
    generate_dual, generate_single, BURST_BITS, BURST_BYTES
)
from A5Registers.KeySetup import key_setup, normalize_key, check_frame
from A5Registers.CipherSession import CipherSession, initialize
