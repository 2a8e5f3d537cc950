class DecodeError(Exception):
    """Base class for everything that can go wrong while decoding a display"""


class MalformedPatternError(DecodeError):
    pass


class MalformedLineError(DecodeError):
    pass


class InvalidCipherError(DecodeError):
    pass


class UnknownPatternError(DecodeError):
    pass
