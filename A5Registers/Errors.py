# Every error raised by the package is a ValueError, so callers that only
# care about bad input can catch that.

class A5Error(ValueError):
    pass

class InvalidKeyLength(A5Error):
    def __init__(self, length, unit = "bytes"):
        self.length = length
        self.unit = unit
        super().__init__(f"key must be exactly 8 bytes (64 bits), got {length} {unit}")

class MalformedKey(A5Error):
    pass

class InvalidFrameNumber(A5Error):
    def __init__(self, frame):
        self.frame = frame
        super().__init__(f"frame number must be an integer in [0, 2**22), got {frame!r}")

class UnknownVariant(A5Error):
    def __init__(self, name):
        self.name = name
        super().__init__(f"\'{name}\' is not a known cipher variant")

class InvalidVariant(A5Error):
    pass

class UnsupportedVariant(A5Error):
    pass

class SetupIncomplete(A5Error):
    pass
