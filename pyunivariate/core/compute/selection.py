"""
Randomized selection and sorting kernels.

Randomized quicksort and quickselect over a mutable sequence (a Python
list or a 1D numpy array), both built on the same Lomuto partition step:

    1. Draw a uniformly random index in [lo, hi] and swap it to lo.
    2. Scan lo+1..hi, growing a prefix of elements strictly less than
       the pivot. Elements equal to or greater than the pivot stay right.
    3. Move the pivot to the end of that prefix; its index is final.
    4. Scan the right side once more and gather the elements equal to
       the pivot directly after it. That block is final too and is never
       revisited, so samples with few distinct values still sort in
       expected O(n log n).

Recursion is replaced by an explicit work stack. The smaller side of each
partition is processed first so the stack holds O(log n) ranges.

Randomness is owned per call: pass a seed or a numpy Generator for
reproducible pivots, otherwise a fresh generator is created for each call.
No module-level generator exists.

Reference:
    Cormen, Leiserson, Rivest, Stein. Introduction to Algorithms,
    3rd ed., sections 7.3 and 9.2.
"""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence

import numpy as np

from pyunivariate.core.exceptions import ValidationError

RandomState = int | np.random.Generator | None


def resolve_rng(rng: RandomState) -> np.random.Generator:
    """
    Turn an rng argument into a Generator owned by the current call.

    None creates a fresh, OS-seeded generator. An int seeds a new one.
    A Generator is used as given.
    """
    if isinstance(rng, bool):
        raise ValidationError(f"rng: expected None, int seed or Generator, got {rng!r}")
    try:
        return np.random.default_rng(rng)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"rng: expected None, int seed or Generator, got {rng!r}"
        ) from e


def _partition(
    v: MutableSequence[Any], lo: int, hi: int, gen: np.random.Generator
) -> tuple[int, int]:
    """
    Lomuto partition of v[lo..hi] (inclusive) around a random pivot.

    Returns (j, k) with v[lo..j-1] < pivot, v[j..k] == pivot and
    v[k+1..hi] > pivot.
    """
    idx = int(gen.integers(lo, hi + 1))
    v[lo], v[idx] = v[idx], v[lo]
    pivot = v[lo]

    j = lo
    for i in range(lo + 1, hi + 1):
        if v[i] < pivot:
            j += 1
            v[j], v[i] = v[i], v[j]

    v[lo], v[j] = v[j], v[lo]

    # Right of j everything is >= pivot, so "not greater" means equal
    k = j
    for i in range(j + 1, hi + 1):
        if not pivot < v[i]:
            k += 1
            v[k], v[i] = v[i], v[k]
    return j, k


def quicksort(v: MutableSequence[Any], *, rng: RandomState = None) -> None:
    """
    Sort v in place into non-decreasing order.

    Expected O(n log n) comparisons; the quadratic worst case has vanishing
    probability for any fixed input. Not stable.

    Args:
        v: Mutable sequence whose elements support ``<``
        rng: None, int seed, or numpy Generator used for pivot selection
    """
    n = len(v)
    if n <= 1:
        return

    gen = resolve_rng(rng)
    stack = [(0, n - 1)]
    while stack:
        lo, hi = stack.pop()
        while lo < hi:
            j, k = _partition(v, lo, hi, gen)
            # Defer the larger side, keep working on the smaller one
            if j - lo < hi - k:
                stack.append((k + 1, hi))
                hi = j - 1
            else:
                stack.append((lo, j - 1))
                lo = k + 1


def quickselect(v: MutableSequence[Any], k: int, *, rng: RandomState = None) -> Any:
    """
    Return the k-th smallest element (0-based) of v.

    v is partially reordered in place: on return v[k] holds the result,
    everything before it is <= v[k] and everything after is >= v[k].

    Args:
        v: Mutable sequence whose elements support ``<``
        k: Rank of the requested order statistic
        rng: None, int seed, or numpy Generator used for pivot selection

    Raises:
        ValidationError: If k is outside [0, len(v))
    """
    n = len(v)
    if not 0 <= k < n:
        raise ValidationError(f"k: must be in [0, {n}), got {k}")

    gen = resolve_rng(rng)
    lo, hi = 0, n - 1
    while lo < hi:
        j, m = _partition(v, lo, hi, gen)
        if j <= k <= m:
            return v[k]
        if k < j:
            hi = j - 1
        else:
            lo = m + 1
    return v[k]


def sorted_copy(x: Sequence[Any], *, rng: RandomState = None) -> MutableSequence[Any]:
    """
    Return a sorted working copy of x, leaving x untouched.

    numpy arrays are copied as arrays (preserving dtype); any other
    sequence is copied into a new list.
    """
    if isinstance(x, np.ndarray):
        working = x.copy()
    else:
        working = list(x)
    quicksort(working, rng=rng)
    return working
