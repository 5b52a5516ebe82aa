"""Polynomials as ordered lists of (coefficient, exponent) terms."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Term:
    """A single term ``coeff * x ** exponent``."""

    coeff: int
    exponent: int

    def __str__(self) -> str:
        return f"{self.coeff}x^{self.exponent}"


class Polynomial:
    """A polynomial whose terms are kept in the order given.

    Addition expects both operands to list their terms in descending
    order of exponent and merges them in that order.
    """

    def __init__(self, terms):
        self._terms = tuple(
            term if isinstance(term, Term) else Term(*term) for term in terms
        )

    def __add__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        left, right = self._terms, other._terms
        i = j = 0
        merged: list[Term] = []
        while i < len(left) and j < len(right):
            a, b = left[i], right[j]
            if a.exponent > b.exponent:
                merged.append(a)
                i += 1
            elif a.exponent < b.exponent:
                merged.append(b)
                j += 1
            else:
                merged.append(Term(a.coeff + b.coeff, a.exponent))
                i += 1
                j += 1
        merged.extend(left[i:])
        merged.extend(right[j:])
        return Polynomial(merged)

    def __iter__(self):
        return iter(self._terms)

    def __len__(self):
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self._terms == other._terms

    def __hash__(self) -> int:
        return hash(self._terms)

    def evaluate(self, x):
        """Value of the polynomial at ``x``."""
        return sum(term.coeff * x**term.exponent for term in self._terms)

    def __str__(self):
        return "+".join(str(term) for term in self._terms)

    def __repr__(self) -> str:
        pairs = [(t.coeff, t.exponent) for t in self._terms]
        return f"Polynomial({pairs!r})"