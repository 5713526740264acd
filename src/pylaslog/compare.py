"""LAS document comparison utilities."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

import numpy as np

from .models import LASDocument

logger = logging.getLogger(__name__)


def compare_documents(
    doc1: LASDocument,
    doc2: LASDocument,
    rtol: float = 1e-7,
    atol: float = 0.0,
    keys: Iterable[str] | None = None,
) -> bool:
    """Compare two LAS documents for equality.

    Args:
        doc1: First document.
        doc2: Second document.
        rtol: Relative tolerance for numpy array comparison.
        atol: Absolute tolerance for numpy array comparison.
        keys: Optional top-level keys of LASDocument.to_dict() to compare,
            e.g. ("logs", "curves_order"). All keys if None.

    Returns:
        True if the documents are equivalent, False otherwise.
    """
    dict1, dict2 = doc1.to_dict(), doc2.to_dict()
    if keys is not None:
        wanted = set(keys)
        dict1 = {k: v for k, v in dict1.items() if k in wanted}
        dict2 = {k: v for k, v in dict2.items() if k in wanted}
    return _compare_dicts(dict1, dict2, rtol, atol)


def _compare_dicts(
    dict1: dict[str, Any],
    dict2: dict[str, Any],
    rtol: float,
    atol: float,
) -> bool:
    for key in dict1:
        if key not in dict2:
            logger.warning("Key '%s' not found in second document", key)
            return False

    for key in dict2:
        if key not in dict1:
            logger.warning("Key '%s' not found in first document", key)
            return False

        val1, val2 = dict1[key], dict2[key]

        if isinstance(val2, dict):
            if set(val1) != set(val2):
                logger.warning(
                    "Key mismatch at '%s': %r vs %r", key, sorted(val1), sorted(val2)
                )
                return False

            for in_key in val2:
                if isinstance(val2[in_key], np.ndarray):
                    if not _compare_arrays(val1[in_key], val2[in_key], key, in_key, rtol, atol):
                        return False
                elif val1[in_key] != val2[in_key]:
                    logger.warning(
                        "Mismatch at '%s.%s': %r vs %r", key, in_key, val1[in_key], val2[in_key]
                    )
                    return False

        elif val1 != val2:
            logger.warning("Mismatch at '%s': %r vs %r", key, val1, val2)
            return False

    return True


def _compare_arrays(
    arr1: np.ndarray,
    arr2: np.ndarray,
    key: str,
    in_key: str,
    rtol: float,
    atol: float,
) -> bool:
    """Compare two numpy arrays with tolerance."""
    label = f"{key}.{in_key}"

    if arr1.size != arr2.size:
        logger.warning("Array size mismatch at '%s': %d vs %d", label, arr1.size, arr2.size)
        return False

    if not np.allclose(arr1, arr2, rtol=rtol, atol=atol, equal_nan=True):
        logger.warning("Array values mismatch at '%s'", label)
        return False

    return True
