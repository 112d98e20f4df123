import numpy as np

from A5Registers.BitOps import majority
from A5Registers.ClockControl import clock
from A5Registers.RegisterBank import SetupPhase
from A5Registers.Errors import SetupIncomplete, UnsupportedVariant

# one GSM burst carries 114 bits of payload per direction
BURST_BITS = 114
BURST_BYTES = (BURST_BITS + 7) // 8

def _nonlinear_term(reg, terms):
    args = [((~reg) & mask) if complemented else (reg & mask) for mask, complemented in terms]
    return majority(args[0], args[1], args[2])

def emit_bit(bank):
    """
    Output bit for the current state. Does not clock the bank.

    The linear output is the XOR of one output tap per register. Delayed
    variants also XOR a majority term per register, store the result in
    bank.delay_bit and return the value stored on the previous call.
    """
    variant = bank.variant
    topbits = 0
    for idx, bit in enumerate(variant.output_bits):
        topbits ^= int((bank[idx] & bit) != 0)

    if not variant.delayed_output:
        return topbits

    newbit = topbits
    for idx, terms in enumerate(variant.majority_terms):
        newbit ^= _nonlinear_term(bank[idx], terms)

    out, bank.delay_bit = bank.delay_bit, newbit
    return out

def step(bank):
    clock(bank)
    return emit_bit(bank)

def _check_ready(bank):
    if bank.phase is not SetupPhase.READY:
        raise SetupIncomplete(f"register bank is in phase {bank.phase.name}, run key_setup first")

def generate(bank, n):
    _check_ready(bank)
    # checked once up front, bits are produced lazily afterwards
    def bit_stream():
        for _ in range(n):
            yield step(bank)
    return bit_stream()

#MSB first; the unused low bits of the last byte stay zero
def pack_bits(bits):
    return np.packbits(np.fromiter(bits, dtype = np.uint8)).tobytes()

def generate_dual(bank):
    """
    Fill one 15-byte buffer per direction: A->B first, then B->A from the
    state the first burst left behind.
    """
    a_to_b = pack_bits(generate(bank, BURST_BITS))
    b_to_a = pack_bits(generate(bank, BURST_BITS))
    return a_to_b, b_to_a

def generate_single(bank):
    #114 bits, one per byte, A5/1 only
    if not bank.variant.is_linear:
        raise UnsupportedVariant(
            f"single-direction keystream is only defined for linear variants, not {bank.variant.name}"
        )
    return bytes(generate(bank, BURST_BITS))
