"""
Sequential subsequence distance between aliased patterns.
"""


def distance_to_pattern(reference: str, candidate: str) -> int:
    """
    Count how many characters of reference occur in candidate, in order.

    Matching is greedy: each reference character takes the first equal
    candidate character after the previous hit, and the scan stops at the
    first reference character with no such hit.
    """
    distance = 0
    cursor = 0
    for char in reference:
        hit = candidate.find(char, cursor)
        if hit == -1:
            break
        cursor = hit + 1
        distance += 1
    return distance


def matches_pattern(reference: str, candidate: str) -> bool:
    """True when reference is an ordered subsequence of candidate."""
    return distance_to_pattern(reference, candidate) == len(reference)
