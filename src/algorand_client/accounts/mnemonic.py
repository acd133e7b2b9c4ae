"""
Mnemonic phrase <-> seed conversion.

A 32-byte seed is written as 25 words from the BIP-39 English list:

- the seed bits are split into 11-bit groups, least significant bits
  first, giving 24 data words (264 bits; the last 8 are always zero)
- word 25 is a checksum: the first 11-bit group of the first 2 bytes
  of SHA-512/256(seed)

Only the word list is shared with BIP-39. The checksum and the
seed derivation are Algorand specific; no PBKDF2 stretching is applied.
"""

from bisect import bisect_left
from typing import Iterable, List, Sequence

from mnemonic import Mnemonic

from ..crypto.checksum import digest_prefix
from ..runtime.errors import (
    InvalidChecksumError,
    InvalidPhraseError,
    InvalidPhraseWordError,
    InvalidSeedError,
    MnemonicDecodeError,
)

MNEMONIC_WORD_COUNT = 25
MNEMONIC_DATA_WORD_COUNT = MNEMONIC_WORD_COUNT - 1
SEED_BYTES_LENGTH = 32
BITS_PER_WORD = 11

# Sorted, process-wide and never mutated
WORDLIST: Sequence[str] = tuple(Mnemonic("english").wordlist)

if len(WORDLIST) != 2 ** BITS_PER_WORD:
    raise RuntimeError(f"Expected a {2 ** BITS_PER_WORD} word dictionary, got {len(WORDLIST)}")


def seed_from_mnemonic(phrase: str) -> bytes:
    """
    Recover the 32-byte seed encoded by a 25-word phrase.

    Args:
        phrase: 24 data words followed by the checksum word

    Returns:
        32-byte seed

    Raises:
        InvalidPhraseError: If the phrase does not have 25 words
        InvalidPhraseWordError: If a data word is not in the dictionary
        InvalidChecksumError: If the checksum word does not match
        MnemonicDecodeError: If the data words do not unpack to 33 bytes ending in zero
    """
    words = phrase.split()
    if len(words) - 1 != MNEMONIC_DATA_WORD_COUNT:
        raise InvalidPhraseError(phrase, len(words))

    checksum_word = words[-1]
    u11_seed = [word_index(word) for word in words[:MNEMONIC_DATA_WORD_COUNT]]

    entropy = to_byte_array(u11_seed)

    # 24 words * 11 bits = 264 bits = 33 bytes
    if len(entropy) != SEED_BYTES_LENGTH + 1:
        raise MnemonicDecodeError("Failed to decode mnemonic")
    if entropy[-1] != 0x00:
        raise MnemonicDecodeError("Failed to decode mnemonic bytes")

    seed = entropy[:SEED_BYTES_LENGTH]
    if checksum_word_for(seed) != checksum_word:
        raise InvalidChecksumError()

    return seed


def mnemonic_from_seed(seed: bytes) -> str:
    """
    Encode a 32-byte seed as a 25-word phrase.

    Raises:
        InvalidSeedError: If seed is not 32 bytes long
    """
    if not isinstance(seed, (bytes, bytearray)) or len(seed) != SEED_BYTES_LENGTH:
        raise InvalidSeedError(len(seed) if isinstance(seed, (bytes, bytearray)) else 0)

    words = apply_words(to_u11_array(seed))
    words.append(checksum_word_for(seed))
    return " ".join(words)


def checksum_word_for(seed: bytes) -> str:
    """Return the checksum word for a seed."""
    u11_array = to_u11_array(digest_prefix(seed, 2))
    return apply_words(u11_array)[0]


def word_index(word: str) -> int:
    """
    Binary-search the dictionary for word.

    Raises:
        InvalidPhraseWordError: If word is not in the dictionary
    """
    idx = bisect_left(WORDLIST, word)
    if idx == len(WORDLIST) or WORDLIST[idx] != word:
        raise InvalidPhraseWordError(word)
    return idx


def apply_words(indices: Iterable[int]) -> List[str]:
    """Map 11-bit values to dictionary words."""
    return [WORDLIST[idx] for idx in indices]


def to_u11_array(data: bytes) -> List[int]:
    """
    Split bytes into 11-bit values, least significant bits first.

    A trailing partial group is zero-padded and still emitted.
    """
    buffer = 0
    number_of_bits = 0
    output: List[int] = []

    for value in data:
        buffer |= value << number_of_bits
        number_of_bits += 8

        if number_of_bits >= BITS_PER_WORD:
            output.append(buffer & 0x7FF)
            buffer >>= BITS_PER_WORD
            number_of_bits -= BITS_PER_WORD

    if number_of_bits != 0:
        output.append(buffer & 0x7FF)

    return output


def to_byte_array(values: Iterable[int]) -> bytes:
    """
    Join 11-bit values back into bytes, least significant bits first.

    A trailing partial byte is emitted as is.
    """
    buffer = 0
    number_of_bits = 0
    output = bytearray()

    for value in values:
        buffer |= (value & 0x7FF) << number_of_bits
        number_of_bits += BITS_PER_WORD

        while number_of_bits >= 8:
            output.append(buffer & 0xFF)
            buffer >>= 8
            number_of_bits -= 8

    if number_of_bits != 0:
        output.append(buffer & 0xFF)

    return bytes(output)


__all__ = [
    "MNEMONIC_WORD_COUNT",
    "SEED_BYTES_LENGTH",
    "WORDLIST",
    "seed_from_mnemonic",
    "mnemonic_from_seed",
    "checksum_word_for",
    "to_u11_array",
    "to_byte_array",
]
