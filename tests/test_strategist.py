import random

import pytest

from wordduel.models.game import LetterStatus
from wordduel.services.evaluator import evaluate
from wordduel.services.strategist import ComputerStrategist

from conftest import WORDS


def test_first_guess_comes_from_dictionary(strategist, dictionary):
    assert strategist.next_guess([]) in dictionary


def test_filter_keeps_only_consistent_words(strategist):
    history = [evaluate("raise", "crane")]
    candidates = strategist.candidates(history)
    assert "crane" in candidates
    assert "stare" not in candidates and "scoop" not in candidates
    assert all(evaluate("raise", w).verdicts == history[0].verdicts for w in candidates)


def test_history_accepts_string_verdicts(strategist):
    feedback = evaluate("raise", "crane")
    as_strings = [("raise", feedback.result)]
    assert strategist.candidates(as_strings) == strategist.candidates([feedback])


@pytest.mark.parametrize("secret", WORDS)
def test_secret_always_survives_and_is_found(dictionary, secret):
    strategist = ComputerStrategist(dictionary, random.Random(secret))
    history = []
    for _ in range(len(dictionary)):
        guess = strategist.next_guess(history)
        feedback = evaluate(guess, secret)
        history.append(feedback)
        assert secret in strategist.candidates(history)
        if feedback.is_win:
            break
    assert history[-1].is_win


def test_contradictory_history_falls_back_to_random_word(strategist, dictionary):
    all_correct = tuple([LetterStatus.CORRECT] * 5)
    history = [("crane", all_correct), ("tower", all_correct)]
    assert strategist.candidates(history) == []
    assert strategist.next_guess(history) in dictionary


def test_seeded_strategist_is_deterministic(dictionary):
    history = [evaluate("stare", "tower")]
    first = ComputerStrategist(dictionary, random.Random(7))
    second = ComputerStrategist(dictionary, random.Random(7))
    assert [first.next_guess(history) for _ in range(5)] == [second.next_guess(history) for _ in range(5)]
