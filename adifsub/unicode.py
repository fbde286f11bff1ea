"""Unicode utilities"""

from collections.abc import Iterator

ASCII_LIMIT = 0x80  # first code point that is not US-ASCII
MAX_CODE_POINT = 0x10FFFF

HIGH_SURROGATE_START = 0xD800
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
LOW_SURROGATE_END = 0xDFFF


def is_high_surrogate(cp: int) -> bool:
    """Check if a code point is the leading half of a UTF-16 surrogate pair"""
    return HIGH_SURROGATE_START <= cp <= HIGH_SURROGATE_END


def is_low_surrogate(cp: int) -> bool:
    """Check if a code point is the trailing half of a UTF-16 surrogate pair"""
    return LOW_SURROGATE_START <= cp <= LOW_SURROGATE_END


def combine_surrogates(high: int, low: int) -> int:
    """Combine a UTF-16 surrogate pair into a single code point"""
    return 0x10000 + ((high - HIGH_SURROGATE_START) << 10) + (low - LOW_SURROGATE_START)


def iter_code_points(text: str) -> Iterator[int]:
    """
    Yield the code points of a string.

    Python strings are already sequences of code points, but text that went
    through ``surrogatepass`` decoding (or came from a UTF-16 host) can still
    hold surrogate pairs. A pair is yielded as the single code point it
    stands for; a lone surrogate is yielded as is.
    """
    i = 0
    length = len(text)

    while i < length:
        cp = ord(text[i])

        if is_high_surrogate(cp) and i + 1 < length:
            low = ord(text[i + 1])
            if is_low_surrogate(low):
                yield combine_surrogates(cp, low)
                i += 2
                continue

        yield cp
        i += 1


def is_ascii(text: str) -> bool:
    """Check if every code point of a string is US-ASCII"""
    return all(cp < ASCII_LIMIT for cp in iter_code_points(text))
