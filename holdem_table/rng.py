"""Small, fast pseudo random generators and integer distributions."""

from __future__ import annotations

from collections.abc import Callable, Iterator

_MASK64 = (1 << 64) - 1


def _rotl(x: int, k: int) -> int:
    return ((x << k) | (x >> (64 - k))) & _MASK64


class XoroShiro128Plus:
    """64-bit generator with a period of 2**128 - 1."""

    MIN = 0
    MAX = _MASK64

    def __init__(self, seed: int) -> None:
        seed &= _MASK64
        self._state = (~seed & _MASK64, seed)

    def __call__(self) -> int:
        s0, s1 = self._state
        result = (s0 + s1) & _MASK64
        s1 ^= s0
        self._state = (
            _rotl(s0, 55) ^ s1 ^ ((s1 << 14) & _MASK64),
            _rotl(s1, 36),
        )
        return result

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self()


class UniqueRng64:
    """Maps an index to the next one of a non-repeating cycle over range(range_)."""

    _A = (4 * 0xBCE1FB1361E7685 + 1) & _MASK64
    _C = 0x170A96C613336ED9

    def __init__(self, range_: int) -> None:
        if not 0 < range_ <= 1 << 64:
            raise ValueError("range must be between 1 and 2**64")
        self._range = range_
        self._mask = (1 << (range_ - 1).bit_length()) - 1

    def __call__(self, idx: int) -> int:
        while True:
            idx = (self._A * idx + self._C) & self._mask
            if idx < self._range:
                return idx


class FastUniformIntDistribution:
    """Uniform integers in [low, high] cut from chunks of one 64-bit draw; slightly biased."""

    def __init__(self, low: int = 0, high: int = 1, bits: int = 21) -> None:
        if high < low:
            raise ValueError("high must not be below low")
        if not 1 <= bits <= 32:
            raise ValueError("bits must be between 1 and 32")
        self.low = low
        self.high = high
        self._diff = high - low + 1
        self._bits = bits
        self._chunk_mask = (1 << bits) - 1
        self._buffer = 0
        self._uses_left = 0

    def __call__(self, rng: Callable[[], int]) -> int:
        if self._uses_left == 0:
            self._buffer = rng() & _MASK64
            self._uses_left = 64 // self._bits
        res = ((self._buffer & self._chunk_mask) * self._diff) >> self._bits
        self._buffer >>= self._bits
        self._uses_left -= 1
        return self.low + res


class FastUniformIntDistribution2:
    """Unbiased uniform integers in [low, high], several per 64-bit draw."""

    def __init__(self, low: int = 0, high: int = 1) -> None:
        if high < low:
            raise ValueError("high must not be below low")
        self.low = low
        self.high = high
        self._diff = high - low + 1
        self._buffer = 0
        self._uses_left = 0
        self._init_constants()

    def _init_constants(self) -> None:
        diff = self._diff
        if diff <= 1:
            self._mask = self._max_buffer_val = _MASK64
            self._max_uses = (1 << 32) - 1
            return
        self._max_uses = 1
        self._mask = _MASK64
        diff_pow = diff
        while self._mask // diff_pow >= diff:
            self._max_uses += 1
            diff_pow *= diff
        # One more power may land exactly on 2**64.
        if diff_pow & 0xFFFFFFFF == 0 and ((diff_pow >> 32) * diff) & _MASK64 == 1 << 32:
            self._max_uses += 1
            diff_pow = (diff_pow * diff) & _MASK64
        self._max_buffer_val = (diff_pow - 1) & _MASK64
        while ((self._mask >> 1) & self._max_buffer_val) == self._max_buffer_val:
            self._mask >>= 1

    def _refill(self, rng: Callable[[], int]) -> None:
        while True:
            self._buffer = rng() & self._mask
            if self._buffer < self._max_buffer_val:
                break
        self._uses_left = self._max_uses

    def __call__(self, rng: Callable[[], int]) -> int:
        if self._uses_left == 0:
            self._refill(rng)
        self._buffer, remainder = divmod(self._buffer, self._diff)
        self._uses_left -= 1
        return self.low + remainder