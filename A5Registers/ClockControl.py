from A5Registers.BitOps import majority

def _control_values(bank):
    variant = bank.variant
    if variant.control_register is None:
        #A5/1: each register's own middle bit
        return [bank[idx] & bit for idx, bit in enumerate(variant.control_bits)]
    else:
        #A5/2: three bits of the control register
        ctrl = bank[variant.control_register]
        return [ctrl & bit for bit in variant.control_bits]

def clock_decision(bank, force_all = False):
    """
    Return which of r1, r2, r3 advance on the next cycle.

    A register advances when its control bit agrees with the majority of the
    three control bits, so at least two advance whenever force_all is False.
    The bank is not modified.
    """
    controls = _control_values(bank)
    if force_all:
        return [True, True, True]
    maj = majority(controls[0], controls[1], controls[2])
    return [int(c != 0) == maj for c in controls]

def clock(bank, force_all = False, loaded = False):
    """
    Run one cycle of majority clock control on the bank.

    force_all clocks every register regardless of the control bits (key and
    frame loading). loaded marks the last frame cycle: for variants with
    forced bits, each clocked register gets its forced bit ORed in.
    """
    variant = bank.variant
    forced = variant.forced_bits if (loaded and variant.forced_bits) else [0] * bank.size

    for idx, advance in enumerate(clock_decision(bank, force_all)):
        if advance:
            bank.clock_register(idx, forced[idx])

    #the control register itself always advances
    if variant.control_register is not None:
        bank.clock_register(variant.control_register, forced[variant.control_register])
