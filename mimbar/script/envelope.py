"""
Envelope unwrapping for raw producer output.

The producer is asked for a bare JSON array, but it sometimes wraps the
array in an object.  Recognised shapes::

    [ {...}, {...} ]
    {"script": [ {...}, ... ]}
    {"data":   [ {...}, ... ]}

Anything else is treated as an empty script rather than an error.
"""

import logging
from typing import Any, List

logger = logging.getLogger(__name__)

# Probed in order; the first key holding an array wins
ENVELOPE_KEYS = ("script", "data")


def unwrap_envelope(parsed: Any) -> List[Any]:
    """
    Extract the ordered list of raw blocks from a parsed producer value.

    An array input is returned unchanged.  For an object, the
    :data:`ENVELOPE_KEYS` are probed in order and the first one holding
    an array is returned.  Every other shape yields ``[]``.
    """
    if isinstance(parsed, list):
        return parsed

    if isinstance(parsed, dict):
        for key in ENVELOPE_KEYS:
            value = parsed.get(key)
            if isinstance(value, list):
                logger.debug("Unwrapped %d blocks from '%s' envelope", len(value), key)
                return value
        logger.debug("Unrecognised envelope keys: %s", sorted(parsed.keys())[:10])
        return []

    logger.debug("Unrecognised envelope type: %s", type(parsed).__name__)
    return []
