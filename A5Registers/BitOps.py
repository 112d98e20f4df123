from numba import njit

# Words are plain ints of at most 64 bits; registers use at most 23.

@njit
def parity(x):
    #fold the word in halves until one bit is left
    x ^= x >> 32
    x ^= x >> 16
    x ^= x >> 8
    x ^= x >> 4
    x ^= x >> 2
    x ^= x >> 1
    return x & 1

@njit
def majority(w1, w2, w3):
    #each argument counts as set iff it is nonzero (not its low bit)
    total = int(w1 != 0) + int(w2 != 0) + int(w3 != 0)
    if total >= 2:
        return 1
    return 0
