"""Prefix function and Knuth-Morris-Pratt pattern matching."""

_SEPARATOR = object()


def prefix_function(text):
    """``p[i]`` is the length of the longest proper prefix of ``text`` ending at ``i``."""
    p = [0] * len(text)
    for i in range(1, len(text)):
        g = p[i - 1]
        while g and text[i] != text[g]:
            g = p[g - 1]
        p[i] = g + (text[i] == text[g])
    return p


def match(text, pattern):
    """Start positions of every occurrence of ``pattern`` in ``text``, overlaps included."""
    combined = [*pattern, _SEPARATOR, *text]
    p = prefix_function(combined)
    m = len(pattern)
    return [i - 2 * m for i in range(len(combined) - len(text), len(combined)) if p[i] == m]