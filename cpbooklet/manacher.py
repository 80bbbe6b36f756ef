"""Manacher's algorithm counting palindromes around every centre in linear time."""


def manacher(text):
    """Return ``(even, odd)``.

    ``even[i]`` counts the even palindromes centred between ``i - 1`` and ``i``;
    ``odd[i]`` counts the odd palindromes centred at ``i``.
    """
    n = len(text)
    even = [0] * n
    odd = [0] * n
    left, right = 0, -1
    for i in range(n):
        k = 0 if i > right else min(even[left + right - i + 1], right - i + 1)
        while 0 <= i - k - 1 and i + k < n and text[i - k - 1] == text[i + k]:
            k += 1
        even[i] = k
        k -= 1
        if i + k > right:
            left, right = i - k - 1, i + k
    left, right = 0, -1
    for i in range(n):
        k = 1 if i > right else min(odd[left + right - i], right - i + 1)
        while 0 <= i - k and i + k < n and text[i - k] == text[i + k]:
            k += 1
        odd[i] = k
        k -= 1
        if i + k > right:
            left, right = i - k, i + k
    return even, odd