"""
ParallelDispatcher
==================
Split sanitized text into contiguous segments, transform each on its
own thread, and join the results back in segment order.

Only ciphers whose transform is context-free per character belong on
this path (Caesar). Vigenère keyword positions and Playfair digraph
pairing both depend on where a letter sits in the whole text, so a
plain split would change their output.

Segments:  n segments; all but the last hold len(text) // n characters,
           the last takes the remainder. Short text gives empty leading
           segments, which transform to empty strings.
Ordering:  results are collected by segment index, never by completion.
Waiting:   the executor joins its threads on exit; Future.result()
           blocks until the segment is done and re-raises any worker
           exception in the caller.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List

from .ciphers.base import Cipher
from .modes        import CipherMode

logger = logging.getLogger(__name__)

DEFAULT_WORKERS = 10


def partition(text: str, n: int) -> List[str]:
    """Cut text into n contiguous, non-overlapping segments covering all of it."""
    if n < 1:
        raise ValueError(f"Segment count must be at least 1, got {n}.")
    size = len(text) // n
    segments = [text[i * size:(i + 1) * size] for i in range(n - 1)]
    segments.append(text[(n - 1) * size:])
    return segments


def run_parallel(cipher: Cipher, text: str, mode: CipherMode,
                 workers: int = DEFAULT_WORKERS) -> str:
    """
    Apply cipher.transform to `text` across `workers` threads.

    The output is identical to cipher.transform(text, mode).
    """
    segments = partition(text, workers)
    logger.debug("Dispatching %d characters over %d segments (%s)",
                 len(text), len(segments), mode.value)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(cipher.transform, seg, mode) for seg in segments]
        results = [f.result() for f in futures]
    return "".join(results)
