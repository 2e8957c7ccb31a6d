import array
from typing import Iterator, Tuple


class BitmapIndex:
    """Bitmap over the integer range [0, capacity), packed into 64-bit words."""
    WORD_BITS = 64

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError(f"Bitmap capacity must be non-negative, got {capacity}")
        self.capacity = capacity
        self.word_count = -(-capacity // self.WORD_BITS)
        self.bitmap = array.array("Q", bytes(8 * self.word_count))

    def _locate(self, index: int) -> Tuple[int, int]:
        word_idx, bit_idx = divmod(index, self.WORD_BITS)
        return word_idx, 1 << bit_idx

    def set(self, index: int):
        """Mark `index`; positions outside the capacity are ignored."""
        if not 0 <= index < self.capacity:
            return
        word_idx, mask = self._locate(index)
        self.bitmap[word_idx] |= mask

    def get(self, index: int) -> bool:
        if not 0 <= index < self.capacity:
            return False
        word_idx, mask = self._locate(index)
        return bool(self.bitmap[word_idx] & mask)

    def count(self) -> int:
        return sum(bin(word).count("1") for word in self.bitmap)

    def indices(self) -> Iterator[int]:
        """Yield set positions in ascending order."""
        for word_idx, word in enumerate(self.bitmap):
            while word:
                low = word & -word
                yield word_idx * self.WORD_BITS + low.bit_length() - 1
                word ^= low

    def to_flags(self, set_flag: str, unset_flag: str) -> str:
        return "".join(set_flag if self.get(i) else unset_flag for i in range(self.capacity))
