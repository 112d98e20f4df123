import numpy as np

from A5Registers.Variants import A51, CipherVariant
from A5Registers.RegisterBank import RegisterBank
from A5Registers.KeySetup import key_setup, normalize_key, check_frame
from A5Registers import Keystream

class CipherSession:
    """
    One (key, frame) context with its own register bank.

    Every generating call advances the bank, so two calls return consecutive
    keystream, not the same keystream twice. Use reset() to start over, and
    one session per thread.
    """

    #INITIALIZATION/DATA:
    def __init__(self, key, frame, variant = A51, reverse_key = False, verbose = False):
        self.key = normalize_key(key)
        self.frame = check_frame(frame)
        self.variant = CipherVariant.resolve(variant)
        self.reverse_key = reverse_key
        self.verbose = verbose

        self.bank = RegisterBank(self.variant)
        self.reset()

    def reset(self):
        key_setup(self.bank, self.key, self.frame, self.reverse_key, self.verbose)

    def __str__(self):
        return (
            f"{self.variant.name} key=0x{self.key.hex().upper()} frame={self.frame:#08x}\n"
            f"{self.bank}"
        )

    #KEYSTREAM:
    def generate_dual(self): return Keystream.generate_dual(self.bank)

    def generate_single(self): return Keystream.generate_single(self.bank)

    #generate keystream bits, in order
    def run(self, n = None):
        #number of bits to produce
        if n is not None:
            yield from Keystream.generate(self.bank, n)

        #no limit
        else:
            while True:
                yield from Keystream.generate(self.bank, Keystream.BURST_BITS)

    def keystream(self, n):
        return np.fromiter(self.run(n), dtype = np.uint8, count = n)


def initialize(key, frame, variant = A51, reverse_key = False, verbose = False):
    return CipherSession(key, frame, variant, reverse_key, verbose)
