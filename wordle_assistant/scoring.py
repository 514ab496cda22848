"""
Guess Scoring
=============

Ranks guesses by how well they split the remaining possible answers.

For a guess, every possible answer falls into the bucket of the hint it would
produce. With c(h) answers in bucket h out of N:

- Expected score = (1 - exp(-H)) * 100, where H = -sum (c/N) ln(c/N) is the
  Shannon entropy of the bucket sizes. Bounded to [0, 100).
- Worst-case score = 100 * (1 - max c(h) / N), the reduction guaranteed even
  if the answer lands in the largest bucket.

The two are complementary and neither bounds the other.

Guesses are scored in fixed-size chunks on a thread pool. The numba kernel
releases the GIL, so chunks run in parallel. Results are ordered by expected
score descending, ties alphabetical, regardless of chunking.
"""

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Collection, List, NamedTuple, Optional
import os
import time

import numpy as np
from numba import jit
from tqdm import tqdm

from .config import DEFAULT_CHUNK_SIZE
from .feedback import fill_feedback
from .words import Word, words_to_chars


class ScoreEntry(NamedTuple):
    word: Word
    expected: float
    worst_case: float


# ============================================================================
# NUMBA KERNEL
# ============================================================================

@jit(nopython=True, nogil=True, cache=True)
def score_chunk(guess_chars: np.ndarray, answer_chars: np.ndarray):
    """
    Score each guess row against all answer rows.

    Args:
        guess_chars: shape (n_guesses, width) letter codes
        answer_chars: shape (n_answers, width) letter codes

    Returns:
        (expected, worst_case) float64 arrays of length n_guesses
    """
    n_guesses = guess_chars.shape[0]
    n_answers = answer_chars.shape[0]
    width = guess_chars.shape[1]

    expected = np.zeros(n_guesses, dtype=np.float64)
    worst_case = np.full(n_guesses, 100.0)
    if n_answers == 0:
        return expected, worst_case

    scratch = np.empty(width, dtype=np.int32)
    feedback = np.empty(width, dtype=np.int64)
    codes = np.empty(n_answers, dtype=np.int64)

    for i in range(n_guesses):
        for j in range(n_answers):
            codes[j] = fill_feedback(guess_chars[i], answer_chars[j], scratch, feedback)
        codes.sort()

        # Bucket sizes are the run lengths of the sorted codes
        entropy = 0.0
        largest = 0
        run = 1
        for j in range(1, n_answers + 1):
            if j < n_answers and codes[j] == codes[j - 1]:
                run += 1
            else:
                p = run / n_answers
                entropy -= p * np.log(p)
                if run > largest:
                    largest = run
                run = 1

        expected[i] = (1.0 - np.exp(-entropy)) * 100.0
        worst_case[i] = 100.0 * (1.0 - largest / n_answers)

    return expected, worst_case


# ============================================================================
# PUBLIC API
# ============================================================================

def score_guesses(guesses: Collection[Word], answers: Collection[Word], width: int,
                  chunk_size: int = DEFAULT_CHUNK_SIZE,
                  max_workers: Optional[int] = None,
                  progress: bool = False) -> List[ScoreEntry]:
    """
    Score every guess against the possible answers.

    Args:
        guesses: candidate guesses
        answers: possible answers
        width: word length
        chunk_size: guesses per pool task
        max_workers: pool size (None uses every CPU)
        progress: print status and a progress bar

    Returns:
        ScoreEntry list, expected score descending, ties alphabetical
    """
    ordered = sorted(guesses)
    guess_chars = words_to_chars(ordered, width)
    answer_chars = words_to_chars(answers, width)

    chunks = [(start, min(start + chunk_size, len(ordered)))
              for start in range(0, len(ordered), chunk_size)]
    results = [None] * len(chunks)

    if progress:
        print("Calculating new word scores...")
    t0 = time.time()

    pb = tqdm(total=len(ordered), desc="Scoring guesses", unit="word", disable=not progress)
    with ThreadPoolExecutor(max_workers=max_workers or os.cpu_count()) as executor:
        futures = {
            executor.submit(score_chunk, guess_chars[start:end], answer_chars): k
            for k, (start, end) in enumerate(chunks)
        }
        for future in as_completed(futures):
            k = futures[future]
            results[k] = future.result()
            start, end = chunks[k]
            pb.update(end - start)
    pb.close()

    scores = []
    for (start, end), (expected, worst_case) in zip(chunks, results):
        for offset in range(end - start):
            scores.append(ScoreEntry(ordered[start + offset],
                                     float(expected[offset]),
                                     float(worst_case[offset])))

    # Stable: equal expected scores keep alphabetical order
    scores.sort(key=lambda entry: -entry.expected)

    if progress:
        print(f"Scored {len(ordered)} guesses against {len(answers)} answers "
              f"in {time.time() - t0:.1f}s")
    return scores


def strict_filter(scores: List[ScoreEntry], answers: Collection[Word]) -> List[ScoreEntry]:
    """Keep only entries whose word is still a possible answer."""
    return [entry for entry in scores if entry.word in answers]
