"""Competitive-programming algorithms: number theory, polynomials, strings, geometry, SAT and optimisation."""

__version__ = "0.1.0"