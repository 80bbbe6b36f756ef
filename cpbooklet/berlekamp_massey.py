"""Recovery of linear recurrences over a prime field (Berlekamp-Massey)."""

from cpbooklet.modular import MOD


def mod_pow(base, exponent, modulus=MOD):
    """``base ** exponent`` modulo ``modulus`` for a non-negative exponent."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base % modulus, exponent, modulus)


def berlekamp_massey(sequence, modulus=MOD):
    """Shortest recurrence ``s[i] = sum(c[j] * s[i-1-j])`` matching ``sequence``.

    An order-n recurrence is recovered from its first 2n terms.
    """
    s = [value % modulus for value in sequence]
    n = len(s)
    if n == 0:
        return []
    current = [0] * n
    previous = [0] * n
    current[0] = previous[0] = 1
    length, shift, last = 0, 0, 1
    for i, value in enumerate(s):
        shift += 1
        window = reversed(s[i - length:i])
        d = (value + sum(c * v for c, v in zip(current[1:length + 1], window))) % modulus
        if d == 0:
            continue
        saved = current[:]
        coef = d * mod_pow(last, modulus - 2, modulus) % modulus
        current[shift:] = [
            (c - coef * p) % modulus for c, p in zip(current[shift:], previous)
        ]
        if 2 * length > i:
            continue
        length = i + 1 - length
        previous = saved
        last = d
        shift = 0
    return [(-c) % modulus for c in current[1:length + 1]]