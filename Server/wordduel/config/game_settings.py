"""
Game Configuration Constants Module

Game constants and the word list loader. The word list is read once at
startup and handed to the dictionary service; nothing mutates it afterwards.
"""

import json
import os
from typing import Final, Iterable, List, Optional

WORD_LENGTH: Final[int] = 5
"""
Length of every secret word and guess.
Type: Final[int] - the evaluator is written for this fixed length
"""

DEFAULT_WORD_LIST_PATH: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'words.json'
)


def normalize_words(raw_words: Iterable[str]) -> List[str]:
    """
    Trim, lowercase and keep only alphabetic words of WORD_LENGTH letters.

    Order is preserved and duplicates are dropped.
    """
    seen = set()
    words = []
    for raw in raw_words:
        if not isinstance(raw, str):
            continue
        word = raw.strip().lower()
        if len(word) != WORD_LENGTH or not word.isalpha():
            continue
        if word in seen:
            continue
        seen.add(word)
        words.append(word)
    return words


def load_word_list(path: Optional[str] = None) -> List[str]:
    """
    Load the word list from a JSON array file or a plain text file.

    Args:
        path: File to read. Defaults to the bundled words.json.

    Returns:
        List[str]: Normalized lowercase 5-letter words

    Raises:
        FileNotFoundError: If the word list file is not found
        ValueError: If the file is malformed or yields no usable words
    """
    path = path or DEFAULT_WORD_LIST_PATH

    try:
        with open(path, 'r', encoding='utf-8') as f:
            if path.endswith('.json'):
                raw_words = json.load(f)
                if not isinstance(raw_words, list):
                    raise ValueError("JSON file must contain an array of words")
            else:
                raw_words = f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {path}: {e}")

    words = normalize_words(raw_words)
    if not words:
        raise ValueError("Word list cannot be empty")
    return words


def validate_word_list_integrity(words: List[str]) -> bool:
    """
    Validates that a word list is ready to back the dictionary.

    Checks length, alphabetic characters, lowercase formatting and uniqueness.

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not words:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return True


def get_word_statistics(words: List[str]) -> dict:
    """
    Returns statistical information about a word list.

    Returns:
        dict: total_words, avg_vowel_count, letter_frequency, most_common_letters
    """
    if not words:
        return {"error": "Word list is empty"}

    vowels = set('aeiou')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in words)

    letter_frequency = {}
    for word in words:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(words),
        "avg_vowel_count": round(total_vowels / len(words), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


if __name__ == "__main__":

    try:
        word_list = load_word_list()
        validate_word_list_integrity(word_list)
        print(" Word list validation passed")

        stats = get_word_statistics(word_list)
        print(f" Word statistics: total={stats['total_words']}, "
              f"most common={stats['most_common_letters']}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
