"""
Detect which supported license a block of text contains.

Texts are compared by the Sorenson-Dice coefficient of their character
bigram sets, which tolerates small drift such as a substituted copyright
line or changed whitespace while still requiring the bulk of the text to
overlap.
"""
from collections import namedtuple
from typing import FrozenSet, List

from ligen.catalog import LicenseType, all_license_types
from ligen.errors import DetectionFailedError

Score = namedtuple('Score', ['license_type', 'coefficient'])


def bigrams(text: str) -> FrozenSet[str]:
    """
    The set of all overlapping two character substrings of ``text``.
    """
    return frozenset(text[i:i + 2] for i in range(len(text) - 1))


def sorenson_dice_coefficient(left: str, right: str) -> float:
    """
    Similarity of two strings, from 0.0 (no shared bigram) to 1.0.

    Computed as ``2 * |A & B| / (|A| + |B|)`` over the bigram sets ``A``
    and ``B``. Two strings without any bigram (shorter than two chars)
    score 0.0.
    """
    bigrams_left = bigrams(left)
    bigrams_right = bigrams(right)

    denominator = len(bigrams_left) + len(bigrams_right)
    if denominator == 0:
        return 0.0

    intersection = len(bigrams_left & bigrams_right)

    return 2 * intersection / denominator


def score(content: str, license_type: LicenseType) -> Score:
    try:
        coefficient = license_type.compare(content, sorenson_dice_coefficient)
    except Exception as e:
        raise DetectionFailedError(reason=f"comparison with {license_type} failed: {e}") from e

    return Score(license_type=license_type, coefficient=coefficient)


def score_all(content: str) -> List[Score]:
    """
    Score ``content`` against every catalog entry, in catalog order.

    Raises:
        DetectionFailedError: If any comparison fails.
    """
    return [score(content, license_type) for license_type in all_license_types()]


def match(content: str, threshold: float) -> LicenseType:
    """
    Find the supported license most similar to ``content``.

    Candidates are compared in catalog order and the first exact match
    (coefficient 1.0) is returned right away. Otherwise the best scoring
    candidate is returned if it reaches ``threshold``. Equal scores keep
    catalog order, so the later catalog entry wins a tie.

    Args:
        content (str): The text to classify.
        threshold (float): Minimum coefficient of the best candidate.

    Returns:
        LicenseType: The detected license type.

    Raises:
        DetectionFailedError: If no candidate reaches the threshold or a
            comparison fails.
    """
    scores = []

    for license_type in all_license_types():
        candidate = score(content, license_type)

        # An exact match, so don't bother scoring the rest
        if candidate.coefficient == 1.0:
            return license_type

        scores.append(candidate)

    # The last item has the highest coefficient, thus is the most similar
    best_match = sorted(scores, key=lambda candidate: candidate.coefficient)[-1]

    if best_match.coefficient < threshold:
        raise DetectionFailedError(
            reason=f"best candidate {best_match.license_type} scored "
                   f"{best_match.coefficient:.2f}, below the {threshold:.2f} threshold"
        )

    return best_match.license_type
