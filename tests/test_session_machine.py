import pytest

from wordduel.models.errors import (
    AlreadyStarted, GameFull, InvalidWord, NotYourTurn, PlayerNotFound, WrongPhase
)
from wordduel.models.game import SessionPhase
from wordduel.services.session_machine import GameSession


@pytest.fixture
def session(dictionary):
    return GameSession("ABC123", "a", dictionary)


@pytest.fixture
def playing(session):
    session.join("b")
    session.submit_word("a", "crane")
    session.submit_word("b", "tower")
    return session


def test_new_session_waits_for_opponent(session):
    assert session.phase == SessionPhase.WAITING_FOR_OPPONENT
    assert session.participants == {"a": 1}


def test_join_seats_second_player(session):
    assert session.join("b") == 2
    assert session.phase == SessionPhase.AWAITING_WORDS


def test_rejoin_is_idempotent(session):
    session.join("b")
    assert session.join("b") == 2
    assert session.join("a") == 1
    assert len(session.participants) == 2


def test_third_player_is_rejected(session):
    session.join("b")
    with pytest.raises(GameFull):
        session.join("c")


def test_join_after_start_is_rejected(session):
    session.join("b")
    session.remove_participant("b")
    with pytest.raises(AlreadyStarted):
        session.join("c")
    assert "c" not in session.participants


def test_word_submission_before_opponent_is_rejected(session):
    with pytest.raises(WrongPhase):
        session.submit_word("a", "crane")


def test_invalid_secret_word_is_rejected(session):
    session.join("b")
    with pytest.raises(InvalidWord):
        session.submit_word("a", "zzzzz")
    with pytest.raises(InvalidWord):
        session.submit_word("a", "cranes")
    assert session.secret_words == {}


def test_unknown_connection_cannot_submit(session):
    session.join("b")
    with pytest.raises(PlayerNotFound):
        session.submit_word("stranger", "crane")


def test_game_starts_when_both_words_are_in(session):
    session.join("b")
    assert session.submit_word("a", "crane") is False
    assert session.phase == SessionPhase.AWAITING_WORDS
    assert session.submit_word("b", "Tower") is True
    assert session.phase == SessionPhase.PLAYING
    assert session.turn == 1
    assert session.secret_words == {1: "CRANE", 2: "TOWER"}


def test_guess_out_of_turn_changes_nothing(playing):
    with pytest.raises(NotYourTurn):
        playing.make_guess("b", "crane")
    assert playing.guess_log == []
    assert playing.turn == 1


def test_guess_not_in_dictionary(playing):
    with pytest.raises(InvalidWord):
        playing.make_guess("a", "zzzzz")
    assert playing.guess_log == [] and playing.turn == 1


def test_guess_before_playing_is_rejected(session):
    session.join("b")
    with pytest.raises(WrongPhase):
        session.make_guess("a", "tower")


def test_missed_guess_passes_the_turn(playing):
    feedback = playing.make_guess("a", "stone")
    assert not feedback.is_win
    assert feedback.seat == 1 and feedback.word == "STONE"
    assert playing.turn == 2
    assert playing.guess_log == [feedback]


def test_winning_guess_ends_the_game(playing):
    playing.make_guess("a", "stone")
    feedback = playing.make_guess("b", "crane")
    assert feedback.is_win
    assert playing.phase == SessionPhase.GAME_OVER
    assert playing.winner == 2
    assert playing.winning_word == "CRANE"
    assert len(playing.guess_log) == 2


def test_rematch_needs_two_distinct_votes(playing):
    playing.make_guess("a", "tower")
    assert playing.vote_rematch("a") is False
    assert playing.vote_rematch("a") is False
    assert len(playing.rematch_votes) == 1

    assert playing.vote_rematch("b") is True
    assert playing.phase == SessionPhase.AWAITING_WORDS
    assert playing.secret_words == {}
    assert playing.guess_log == []
    assert playing.winner is None and playing.winning_word is None
    assert playing.rematch_votes == set()
    assert playing.turn == 1


def test_rematch_outside_game_over_is_rejected(playing):
    with pytest.raises(WrongPhase):
        playing.vote_rematch("a")
    assert playing.rematch_votes == set()


def test_disconnect_keeps_phase_and_drops_vote(playing):
    playing.make_guess("a", "tower")
    playing.vote_rematch("b")
    assert playing.remove_participant("b") == 2
    assert playing.phase == SessionPhase.GAME_OVER
    assert playing.rematch_votes == set()
    assert not playing.is_empty()
    playing.remove_participant("a")
    assert playing.is_empty()
