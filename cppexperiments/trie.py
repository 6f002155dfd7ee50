"""Bitwise tries used as a radix sort, a set and a string-keyed map."""

from __future__ import annotations

import argparse
import random
import string
import time
from collections.abc import Iterable, Iterator, Sequence
from typing import Any

SUPPORTED_RADIX_BITS = (1, 2, 4, 8)

SORT_WORDS = 1_000_000
SORT_SMALLEST = 3
SORT_LARGEST = 4

MAP_WORDS = 100_000
MAP_SMALLEST = 2
MAP_LARGEST = 8
MAP_REPEAT = 100


class _Node:
    __slots__ = ("children", "count", "value")

    def __init__(self, fanout: int) -> None:
        self.children: list[_Node | None] = [None] * fanout
        self.count = 0
        self.value: Any = None


class _Radix:
    """Split the bytes of a key into groups of ``radix_bits`` bits, high bits first."""

    def __init__(self, radix_bits: int) -> None:
        if radix_bits not in SUPPORTED_RADIX_BITS:
            raise ValueError(
                f"radix sizes supported: {', '.join(map(str, SUPPORTED_RADIX_BITS))}")
        self.bits = radix_bits
        self.mask = (1 << radix_bits) - 1
        self.steps_in_byte = 8 // radix_bits
        self.fanout = 1 << radix_bits

    def digits(self, key: str) -> Iterator[int]:
        for byte in key.encode("utf-8"):
            for j in range(self.steps_in_byte):
                yield (byte >> (8 - (j + 1) * self.bits)) & self.mask

    def walk(self, root: _Node, key: str, create: bool) -> _Node | None:
        node = root
        for digit in self.digits(key):
            child = node.children[digit]
            if child is None:
                if not create:
                    return None
                child = _Node(self.fanout)
                node.children[digit] = child
            node = child
        return node


def _count_nodes(root: _Node) -> int:
    total = 0
    stack = [root]
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(child for child in node.children if child is not None)
    return total


class TrieSet:
    """A multiset of strings whose traversal yields the keys in sorted order."""

    def __init__(self, radix_bits: int = 4) -> None:
        self._radix = _Radix(radix_bits)
        self._root = _Node(self._radix.fanout)

    @property
    def radix_bits(self) -> int:
        return self._radix.bits

    def store(self, key: str) -> None:
        """Add one occurrence of ``key``."""
        node = self._radix.walk(self._root, key, create=True)
        node.count += 1

    def __contains__(self, key: object) -> bool:
        """Tell whether the path of ``key`` exists; prefixes of stored keys count too."""
        if not isinstance(key, str):
            return False
        return self._radix.walk(self._root, key, create=False) is not None

    def sorted_keys(self) -> Iterator[str]:
        """Yield every stored key, once per occurrence, in byte order."""
        radix = self._radix
        stack: list[tuple[_Node, bytes, int, int]] = [(self._root, b"", 0, 0)]
        while stack:
            node, prefix, partial, step = stack.pop()
            if node.count:
                word = prefix.decode("utf-8")
                for _ in range(node.count):
                    yield word
            for digit in range(radix.fanout - 1, -1, -1):
                child = node.children[digit]
                if child is None:
                    continue
                value = (partial << radix.bits) | digit
                if step + 1 == radix.steps_in_byte:
                    stack.append((child, prefix + bytes((value,)), 0, 0))
                else:
                    stack.append((child, prefix, value, step + 1))


class TrieMap:
    """A mapping from strings to values stored along the bit paths of the keys."""

    def __init__(self, radix_bits: int = 4) -> None:
        self._radix = _Radix(radix_bits)
        self._root = _Node(self._radix.fanout)

    @property
    def radix_bits(self) -> int:
        return self._radix.bits

    def store(self, key: str, value: Any) -> None:
        """Set the value for ``key``, replacing any earlier one."""
        node = self._radix.walk(self._root, key, create=True)
        node.value = value

    def retrieve(self, key: str) -> tuple[bool, Any]:
        """Return ``(found, value)``; ``(False, None)`` when the path is missing.

        A prefix of a stored key is found, with ``None`` as its value unless
        it was stored itself.
        """
        node = self._radix.walk(self._root, key, create=False)
        if node is None:
            return False, None
        return True, node.value

    def node_count(self) -> int:
        """Number of nodes in the trie, the root included."""
        return _count_nodes(self._root)


def radix_sort(words: Iterable[str], radix_bits: int = 4) -> list[str]:
    """Sort ``words`` by storing them in a :class:`TrieSet` and reading them back."""
    trie = TrieSet(radix_bits)
    for word in words:
        trie.store(word)
    return list(trie.sorted_keys())


def made_up_words(count: int, smallest: int, largest: int, seed: int = 0) -> list[str]:
    """Return ``count`` random lower-case words of ``smallest`` to ``largest`` letters."""
    if count < 0:
        raise ValueError("count must not be negative")
    if smallest < 0 or largest < smallest:
        raise ValueError("word sizes must satisfy 0 <= smallest <= largest")
    rng = random.Random(seed)
    letters = string.ascii_lowercase
    words = []
    for _ in range(count):
        size = rng.randint(smallest, largest)
        words.append("".join(rng.choice(letters) for _ in range(size)))
    return words


def _millis(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)


def _sort_performance(words: Sequence[str]) -> None:
    print("Sorting performance")
    start = time.perf_counter()
    sorted(words)
    print(f"   sorted - {_millis(start)}")
    for bits in SUPPORTED_RADIX_BITS:
        start = time.perf_counter()
        radix_sort(words, bits)
        print(f"   radix {bits} sort - {_millis(start)}")
    print()


def _map_performance(words: Sequence[str], repeat: int) -> None:
    for bits in SUPPORTED_RADIX_BITS:
        print(f"TrieMap with {bits}-bits radix")
        trie = TrieMap(bits)
        start = time.perf_counter()
        for _ in range(repeat):
            for index, word in enumerate(words):
                trie.store(word, index)
        print(f"   Writing: {_millis(start)}")
        start = time.perf_counter()
        for _ in range(repeat):
            for index, word in enumerate(words):
                if trie.retrieve(word)[1] != index:
                    print(f"error with {word}")
        print(f"   Reading: {_millis(start)}")
        print(f"   Nodes: {trie.node_count()}\n")

    print("dict")
    table: dict[str, int] = {}
    start = time.perf_counter()
    for _ in range(repeat):
        for index, word in enumerate(words):
            table[word] = index
    print(f"   Writing: {_millis(start)}")
    start = time.perf_counter()
    for _ in range(repeat):
        for index, word in enumerate(words):
            if table[word] != index:
                print(f"error with {word}")
    print(f"   Reading: {_millis(start)}\n")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Time radix tries against built-ins.")
    parser.add_argument("--sort-words", type=int, default=SORT_WORDS)
    parser.add_argument("--map-words", type=int, default=MAP_WORDS)
    parser.add_argument("--repeat", type=int, default=MAP_REPEAT)
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args(argv)

    _sort_performance(made_up_words(args.sort_words, SORT_SMALLEST, SORT_LARGEST, args.seed))
    words = sorted(set(made_up_words(args.map_words, MAP_SMALLEST, MAP_LARGEST, args.seed)))
    _map_performance(words, args.repeat)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())