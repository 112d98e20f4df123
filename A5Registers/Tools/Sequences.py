from A5Registers.RegisterBank import clock_one

# A single register running freely (no clock control, no key material),
# used to check the feedback constants of a variant in isolation.

def register_states(mask, taps, seed):
    state = seed & mask
    while True:
        yield state
        state = clock_one(state, mask, taps)

def register_sequence(mask, taps, seed, n):
    #top bit of the register (the output tap) for n cycles
    top = (mask + 1) >> 1
    out = []
    for idx, state in enumerate(register_states(mask, taps, seed)):
        if idx == n: break
        out.append(int((state & top) != 0))
    return out

def period(mask, taps, seed, lim = 2**24):
    #number of clocks until the seed state returns, or None past lim
    states = register_states(mask, taps, seed)
    first_state = next(states)
    for count, state in enumerate(states, start = 1):
        if state == first_state:
            return count
        if count >= lim:
            return None
