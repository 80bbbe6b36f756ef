"""Number-theoretic transform and convolution modulo an NTT-friendly prime."""

MOD1 = 104857601
MOD2 = 469762049
MOD3 = 998244353


class NTT:
    """Transform and convolution modulo a prime ``p`` with ``p - 1`` divisible by a power of two."""

    def __init__(self, modulus=MOD3):
        if modulus < 3 or modulus % 2 == 0:
            raise ValueError("modulus must be an odd prime")
        self.modulus = modulus
        odd, max_base = modulus - 1, 0
        while odd % 2 == 0:
            odd //= 2
            max_base += 1
        self.max_base = max_base
        g = 2
        while pow(g, (modulus - 1) >> 1, modulus) == 1:
            g += 1
        self.root = pow(g, (modulus - 1) >> max_base, modulus)
        self._roots = [0, 1]

    def _ensure_roots(self, n):
        p = self.modulus
        while len(self._roots) < n:
            k = len(self._roots)
            w = pow(self.root, (1 << self.max_base) // (2 * k), p)
            cur = 1
            for _ in range(k):
                self._roots.append(cur)
                cur = cur * w % p

    def _check_size(self, n):
        if n < 1 or n & (n - 1):
            raise ValueError("length must be a positive power of two")
        if n.bit_length() - 1 > self.max_base:
            raise ValueError(f"length {n} exceeds 2**{self.max_base} for modulus {self.modulus}")

    def transform(self, values):
        """Forward transform with the principal root of unity; returns a new list."""
        p = self.modulus
        a = [v % p for v in values]
        n = len(a)
        self._check_size(n)
        self._ensure_roots(n)
        j = 0
        for i in range(1, n):
            bit = n >> 1
            while j & bit:
                j ^= bit
                bit >>= 1
            j ^= bit
            if i < j:
                a[i], a[j] = a[j], a[i]
        roots = self._roots
        k = 1
        while k < n:
            for start in range(0, n, 2 * k):
                for j in range(k):
                    x = a[start + j]
                    y = a[start + j + k] * roots[j + k] % p
                    a[start + j] = (x + y) % p
                    a[start + j + k] = (x - y) % p
            k <<= 1
        return a

    def multiply(self, a, b):
        """Convolution of ``a`` and ``b`` modulo the prime."""
        if not a or not b:
            return []
        p = self.modulus
        need = len(a) + len(b) - 1
        size = 1 << (need - 1).bit_length()
        fa = self.transform(list(a) + [0] * (size - len(a)))
        fb = self.transform(list(b) + [0] * (size - len(b)))
        inv_size = pow(size, p - 2, p)
        c = [x * y % p * inv_size % p for x, y in zip(fa, fb)]
        c = [c[0]] + c[:0:-1]
        return self.transform(c)[:need]