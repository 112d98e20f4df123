from BitVector import BitVector
from numba import njit
from enum import Enum

from A5Registers.BitOps import parity
from A5Registers.Variants import CipherVariant

# The single clocking rule used by every register in every phase:
# shift left inside the mask, feed the parity of the taps into bit 0,
# and OR in the forced bit (zero except on the last frame cycle of A5/2).
@njit
def clock_one(reg, mask, taps, forced_bit=0):
    feedback = parity(reg & taps)
    reg = (reg << 1) & mask
    reg |= feedback
    reg |= forced_bit
    return reg


class SetupPhase(Enum):
    ZEROED = 0
    KEY_LOADED = 1
    FRAME_LOADED = 2
    MIXED = 3
    READY = 4


class RegisterBank:
    #INITIALIZATION/DATA:
    def __init__(self, variant):
        self.variant = CipherVariant.resolve(variant)
        self.size = self.variant.size
        self.zero()

    def zero(self):
        self._state = [0 for _ in range(self.size)]
        self.delay_bit = 0
        self.phase = SetupPhase.ZEROED

    def __len__(self): return self.size

    #STATE ACCESS (every write keeps the register masked to its width):
    def __getitem__(self, idx): return self._state[idx]
    def __setitem__(self, idx, val): self._state[idx] = val & self.variant.masks[idx]
    def __iter__(self): return iter(self._state)

    @property
    def r1(self): return self._state[0]
    @property
    def r2(self): return self._state[1]
    @property
    def r3(self): return self._state[2]
    @property
    def r4(self):
        if self.size < 4:
            raise AttributeError(f"{self.variant.name} has no fourth register")
        return self._state[3]

    #TYPE CONVERSIONS:
    def bits(self, idx):
        return BitVector(intVal = self._state[idx], size = self.variant.widths[idx])

    def __str__(self):
        lines = [f"R{idx+1}: {self.bits(idx)}" for idx in range(self.size)]
        if self.variant.delayed_output:
            lines.append(f"delay: {self.delay_bit}")
        return "\n".join(lines)

    def __eq__(self, other):
        if not isinstance(other, RegisterBank):
            return NotImplemented
        return (
            self.variant == other.variant and
            self._state == other._state and
            self.delay_bit == other.delay_bit and
            self.phase == other.phase
        )

    #CLOCKING:
    def clock_register(self, idx, forced_bit = 0):
        self._state[idx] = clock_one(
            self._state[idx],
            self.variant.masks[idx],
            self.variant.taps[idx],
            forced_bit
        )

    #XOR one bit of key/frame material into every register
    def xor_all(self, bit):
        for idx in range(self.size):
            self[idx] ^= bit

    #snapshots share the variant but never the state
    def __copy__(self):
        new_obj = object.__new__(type(self))
        new_obj.__dict__ = self.__dict__.copy()
        new_obj._state = self._state[:]
        return new_obj

    def copy(self): return self.__copy__()
