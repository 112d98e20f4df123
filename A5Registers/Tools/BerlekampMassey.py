def _bm(seq):
    #N = total number of bits to process
    N = len(seq)

    # current and previous connection polynomial guesses
    curr_guess = [1] + [0 for i in range(N)]
    prev_guess = [1] + [0 for i in range(N)]

    # L = current linear complexity, m = index of last length change
    L = 0
    m = -1

    for n in range(N):
        # discrepancy between seq[n] and the current LFSR's prediction
        d = seq[n]
        for i in range(1, L+1):
            d ^= (curr_guess[i] & seq[n-i])

        if d != 0:
            temp = curr_guess[:]

            #curr_guess = curr_guess - (x**(n-m) * prev_guess)
            shift = n-m
            for i in range(shift, N+1):
                curr_guess[i] ^= prev_guess[i - shift]

            #if 2L <= n, the length has to grow
            if 2*L <= n:
                L = n + 1 - L
                prev_guess = temp
                m = n
                yield n, L, curr_guess

    yield N, L, curr_guess

def berlekamp_massey(seq):
    """
    Shortest LFSR generating a bit sequence.

    Returns (L, poly): the linear complexity and the connection polynomial
    coefficients c_0..c_L (c_0 = 1), so that for n >= L
    seq[n] = c_1*seq[n-1] ^ ... ^ c_L*seq[n-L].
    """
    seq = [int(b) for b in seq]
    for _, L, poly in _bm(seq):
        pass
    return (L, poly[:L+1])

def linear_complexity_profile(seq):
    #(index, new linear complexity) at every point where it grows
    seq = [int(b) for b in seq]
    return [(n, L) for n, L, _ in _bm(seq)][:-1]
