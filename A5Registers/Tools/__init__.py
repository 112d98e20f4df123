from A5Registers.Tools.BerlekampMassey import berlekamp_massey, linear_complexity_profile
from A5Registers.Tools.Sequences import register_sequence, register_states, period
from A5Registers.Tools.Statistics import to_bits, hamming_distance, balance, avalanche
