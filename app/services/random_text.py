"""
Random Japanese text generator.

Builds strings out of hiragana, katakana and a small set of kanji.
Every function takes the random source as a parameter so that callers
(and tests) can pass a seeded random.Random for repeatable output.
"""

import random
from typing import Optional

HIRAGANA = "あいうえおかきくけこさしすせそたちつてとなにぬねのはひふへほまみむめもやゆよらりるれろわをん"
KATAKANA = "アイウエオカキクケコサシスセソタチツテトナニヌネノハヒフヘホマミムメモヤユヨラリルレロワヲン"
KANJI = "一二三四五六七八九十日月火水木金土山川天空人"

ALPHABETS = (HIRAGANA, KATAKANA, KANJI)

MIN_LENGTH = 1
MAX_LENGTH = 30


def generate_character(rng: Optional[random.Random] = None) -> str:
    """
    Pick one random character.

    The alphabet is chosen first (each with probability 1/3), then a
    symbol is chosen uniformly from it.

    Args:
        rng: Random source. A fresh OS-seeded generator is used if omitted.

    Returns:
        A single character from HIRAGANA, KATAKANA or KANJI
    """
    rng = rng or random.Random()
    alphabet = rng.choice(ALPHABETS)
    return rng.choice(alphabet)


def generate_string(rng: Optional[random.Random] = None) -> str:
    """
    Generate a random string of MIN_LENGTH to MAX_LENGTH characters.

    The alphabet is re-chosen for every character, so a single string
    usually mixes all three scripts.
    """
    rng = rng or random.Random()
    length = rng.randint(MIN_LENGTH, MAX_LENGTH)
    return "".join(generate_character(rng) for _ in range(length))
