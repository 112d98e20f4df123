import random
from copy import copy

import pytest

from A5Registers import RegisterBank, SetupPhase, A51, A52, clock_one
from A5Registers.BitOps import parity


def test_clock_one_shifts_and_feeds_back_parity():
    mask, taps = A51.masks[0], A51.taps[0]
    reg = 0x072000
    assert clock_one(reg, mask, taps) == ((reg << 1) & mask) | parity(reg & taps)
    assert clock_one(0, mask, taps) == 0
    assert clock_one(1, mask, taps) == 2


def test_clock_one_keeps_register_masked():
    rng = random.Random(1)
    for variant in (A51, A52):
        for mask, taps in zip(variant.masks, variant.taps):
            for _ in range(200):
                reg = rng.getrandbits(mask.bit_length())
                assert clock_one(reg, mask, taps) <= mask
            assert clock_one(mask, mask, taps) <= mask


def test_clock_one_ors_forced_bit_without_replacing_feedback():
    mask, taps = A52.masks[0], A52.taps[0]
    reg = 0x040000     # top bit is a tap, so feedback is 1
    out = clock_one(reg, mask, taps, 1 << 15)
    assert out & 1 == 1
    assert out & (1 << 15)


def test_new_bank_is_zeroed():
    bank = RegisterBank(A52)
    assert list(bank) == [0, 0, 0, 0]
    assert bank.delay_bit == 0
    assert bank.phase is SetupPhase.ZEROED
    assert len(bank) == 4


def test_linear_bank_has_no_r4():
    bank = RegisterBank("A5/1")
    assert len(bank) == 3
    with pytest.raises(AttributeError):
        bank.r4


def test_assignment_is_masked():
    bank = RegisterBank(A51)
    bank[0] = 0xFFFFFFFF
    assert bank.r1 == A51.masks[0]
    bank[1] = 1 << 22
    assert bank.r2 == 0


def test_xor_all_touches_every_register():
    bank = RegisterBank(A52)
    bank.xor_all(1)
    assert list(bank) == [1, 1, 1, 1]


def test_xor_all_keeps_registers_masked():
    bank = RegisterBank(A52)
    bank.xor_all(0xFFFFFFFF)
    assert list(bank) == A52.masks


def test_copy_is_independent():
    bank = RegisterBank(A51)
    bank[2] = 0x1234
    snapshot = copy(bank)
    assert snapshot == bank
    bank.clock_register(2)
    assert snapshot.r3 == 0x1234
    assert snapshot != bank


def test_bits_and_str_use_register_widths():
    bank = RegisterBank(A52)
    bank[3] = 1
    assert len(bank.bits(0)) == 19
    assert len(bank.bits(3)) == 17
    assert str(bank.bits(3)) == "0" * 16 + "1"
    text = str(bank)
    assert text.startswith("R1: " + "0" * 19)
    assert "delay: 0" in text
