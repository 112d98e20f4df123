from A5Registers.Errors import UnknownVariant, InvalidVariant

# For Storing and loading as JSON files.
import json

class CipherVariant:
    """
    Fixed constants of one A5 register profile.

    Every field is a literal bit mask (never derived from a width):
      masks            -- one width mask per register (r1, r2, r3[, r4])
      taps             -- feedback taps per register
      control_bits     -- the three clock-control bits; each lives in its own
                          register when control_register is None, otherwise
                          all three live in bank[control_register]
      output_bits      -- the bit of r1, r2, r3 XORed into every output bit
      forced_bits      -- bit ORed into each register on the last frame cycle
      majority_terms   -- per r1..r3, three (mask, complemented) pairs whose
                          majority is XORed into the output
      delayed_output   -- output lags the register state by one cycle
    """

    def __init__(self, name, masks, taps, control_bits, output_bits,
                 control_register = None, forced_bits = None,
                 majority_terms = None, delayed_output = False):
        self.name = name
        self.masks = list(masks)
        self.taps = list(taps)
        self.control_bits = list(control_bits)
        self.output_bits = list(output_bits)
        self.control_register = control_register
        self.forced_bits = list(forced_bits) if forced_bits else None
        self.majority_terms = None
        if majority_terms:
            self.majority_terms = [
                [(mask, bool(complemented)) for mask, complemented in terms]
                for terms in majority_terms
            ]
        self.delayed_output = delayed_output

        self._validate()

    def _validate(self):
        size = len(self.masks)

        if len(self.taps) != size:
            raise InvalidVariant(f"{self.name}: {size} masks but {len(self.taps)} tap sets")
        if len(self.control_bits) != 3 or len(self.output_bits) != 3:
            raise InvalidVariant(f"{self.name}: need exactly 3 control bits and 3 output bits")

        #linear profiles clock on r1..r3 only, non-linear ones add a control register
        if self.control_register is None:
            if size != 3:
                raise InvalidVariant(f"{self.name}: self-controlled profiles have 3 registers")
            control_masks = self.masks[:3]
        else:
            if size != 4 or self.control_register != 3:
                raise InvalidVariant(f"{self.name}: the control register must be r4 of 4")
            control_masks = [self.masks[3]] * 3

        for idx, mask in enumerate(self.masks):
            if mask <= 0 or mask & (mask + 1):
                raise InvalidVariant(f"{self.name}: mask of r{idx+1} is not of the form 2**n-1")
            if self.taps[idx] & ~mask:
                raise InvalidVariant(f"{self.name}: taps of r{idx+1} fall outside its mask")

        for bit, mask in zip(self.control_bits, control_masks):
            if not _single_bit_in(bit, mask):
                raise InvalidVariant(f"{self.name}: control bit {bit:#x} is not a bit of its register")
        for bit, mask in zip(self.output_bits, self.masks):
            if not _single_bit_in(bit, mask):
                raise InvalidVariant(f"{self.name}: output bit {bit:#x} is not a bit of its register")

        if self.forced_bits is not None:
            if len(self.forced_bits) != size:
                raise InvalidVariant(f"{self.name}: need one forced bit per register")
            for bit, mask in zip(self.forced_bits, self.masks):
                if not _single_bit_in(bit, mask):
                    raise InvalidVariant(f"{self.name}: forced bit {bit:#x} is not a bit of its register")

        #the delayed output is built from the majority terms
        if self.delayed_output and self.majority_terms is None:
            raise InvalidVariant(f"{self.name}: delayed output needs majority terms for r1..r3")

        if self.majority_terms is not None:
            if len(self.majority_terms) != 3 or any(len(t) != 3 for t in self.majority_terms):
                raise InvalidVariant(f"{self.name}: need three majority terms for each of r1..r3")
            for terms, mask in zip(self.majority_terms, self.masks):
                for bit, _ in terms:
                    if not _single_bit_in(bit, mask):
                        raise InvalidVariant(f"{self.name}: majority bit {bit:#x} is not a bit of its register")

    def __str__(self): return self.name
    def __repr__(self): return f"CipherVariant({self.name!r})"

    def __eq__(self, other):
        if not isinstance(other, CipherVariant):
            return NotImplemented
        return self.to_JSON()['data'] == other.to_JSON()['data']

    def __hash__(self): return hash(self.name)

    @property
    def size(self): return len(self.masks)

    @property
    def widths(self): return [mask.bit_length() for mask in self.masks]

    @property
    def is_linear(self): return self.control_register is None

    @classmethod
    def resolve(self, variant):
        if isinstance(variant, CipherVariant):
            return variant
        if isinstance(variant, str):
            key = variant.strip().lower()
            if key in _ALIASES:
                return _ALIASES[key]
        raise UnknownVariant(variant)



    def to_JSON(self):
        return {
            'class': type(self).__name__,
            'data': {
                'name': self.name,
                'masks': self.masks,
                'taps': self.taps,
                'control_bits': self.control_bits,
                'output_bits': self.output_bits,
                'control_register': self.control_register,
                'forced_bits': self.forced_bits,
                'majority_terms': (
                    [[list(term) for term in terms] for terms in self.majority_terms]
                    if self.majority_terms else None
                ),
                'delayed_output': self.delayed_output,
            }
        }

    @classmethod
    def from_JSON(self, JSON_object):
        # throw a better error if the object is not a variant
        if JSON_object.get('class') != self.__name__:
            raise InvalidVariant(f"Type \'{JSON_object.get('class')}\' is not a valid CipherVariant")

        try:
            return CipherVariant(**JSON_object['data'])
        except (KeyError, TypeError) as e:
            raise InvalidVariant(f"malformed CipherVariant data: {e}") from e

    # json files only:
    def to_file(self, filename):
        with open(filename, 'w') as f:
            f.write(json.dumps(self.to_JSON(), indent = 2))

    # json files only:
    @classmethod
    def from_file(self, filename):
        with open(filename, 'r') as f:
            return CipherVariant.from_JSON(json.loads(f.read()))


def _single_bit_in(bit, mask):
    return bit > 0 and (bit & (bit - 1)) == 0 and (bit & mask) == bit



# A5/1: each register is clocked by its own middle bit, output is linear.
A51 = CipherVariant(
    name = "A5/1",
    masks = [0x07FFFF, 0x3FFFFF, 0x7FFFFF],     # 19, 22, 23 bits
    taps = [0x072000, 0x300000, 0x700080],      # bits 18,17,16,13 / 21,20 / 22,21,20,7
    control_bits = [0x000100, 0x000400, 0x000400],
    output_bits = [0x040000, 0x200000, 0x400000],
)

# A5/2: r4 drives the clocking, output is non-linear and delayed a cycle.
A52 = CipherVariant(
    name = "A5/2",
    masks = [0x07FFFF, 0x3FFFFF, 0x7FFFFF, 0x01FFFF],
    taps = [0x072000, 0x300000, 0x700080, 0x010800],
    control_bits = [0x000400, 0x000008, 0x000080],  # r4 bits 10, 3, 7
    output_bits = [0x040000, 0x200000, 0x400000],
    control_register = 3,
    forced_bits = [1 << 15, 1 << 16, 1 << 18, 1 << 10],
    majority_terms = [
        [(0x8000, False), (0x4000, True), (0x1000, False)],
        [(0x10000, True), (0x2000, False), (0x200, False)],
        [(0x40000, False), (0x10000, False), (0x2000, True)],
    ],
    delayed_output = True,
)

LINEAR = A51
NONLINEAR = A52

_ALIASES = {
    'a5/1': A51, 'a51': A51, 'linear': A51,
    'a5/2': A52, 'a52': A52, 'nonlinear': A52,
}
