import pytest

from wordduel.models.events import Outgoing, RoomChange
from wordduel.models.game import SessionPhase


def messages(actions):
    return [a for a in actions if isinstance(a, Outgoing)]


def events(actions):
    return [a.event for a in messages(actions)]


@pytest.fixture
def started(protocol):
    protocol.handle("create-game", "a")
    protocol.handle("join-game", "b", {"code": "ABC123"})
    protocol.handle("submit-word", "a", {"word": "crane"})
    protocol.handle("submit-word", "b", {"word": "tower"})
    return protocol


def test_full_game_scenario(protocol, registry):
    actions = protocol.handle("create-game", "a")
    assert actions == [
        RoomChange("join", "ABC123", "a"),
        Outgoing("game-created", {"code": "ABC123", "seat": 1}, to="a"),
    ]

    actions = protocol.handle("join-game", "b", {"code": "abc123"})
    assert RoomChange("join", "ABC123", "b") in actions
    assert messages(actions) == [
        Outgoing("join-success", {"code": "ABC123", "seat": 2}, to="b"),
        Outgoing("game-ready", room="ABC123"),
    ]

    assert messages(protocol.handle("submit-word", "a", {"word": "CRANE"})) == [
        Outgoing("word-accepted", to="a")
    ]
    assert messages(protocol.handle("submit-word", "b", {"word": "TOWER"})) == [
        Outgoing("word-accepted", to="b"),
        Outgoing("game-started", {"turn": 1}, room="ABC123"),
    ]

    actions = protocol.handle("make-guess", "a", {"code": "ABC123", "guess": "tower"})
    assert events(actions) == ["guess-result", "game-over"]
    guess_result, game_over = actions
    assert guess_result.room == game_over.room == "ABC123"
    assert guess_result.data["guessLog"][0]["result"] == ["correct"] * 5
    assert game_over.data["winner"] == 1
    assert game_over.data["winningWord"] == "TOWER"
    assert game_over.data["guessLog"] == guess_result.data["guessLog"]
    assert len(game_over.data["guessLog"]) == 1
    assert registry.get("ABC123").phase == SessionPhase.GAME_OVER


def test_missed_guess_broadcasts_log_and_next_turn(started):
    actions = started.handle("make-guess", "a", {"code": "ABC123", "guess": "stone"})
    assert actions == [Outgoing("guess-result", {
        "guessLog": [{
            "seat": 1,
            "word": "STONE",
            "result": ["absent", "present", "present", "absent", "present"],
            "correctPositions": [False, False, False, False, False],
        }],
        "turn": 2,
    }, room="ABC123")]


def test_out_of_turn_guess_errors_to_sender_only(started, registry):
    actions = started.handle("make-guess", "b", {"code": "ABC123", "guess": "crane"})
    assert actions == [Outgoing("error", {"message": "Not your turn"}, to="b")]
    session = registry.get("ABC123")
    assert session.guess_log == [] and session.turn == 1


@pytest.mark.parametrize("event,sender,payload,message", [
    ("join-game", "c", {"code": "NOPE00"}, "Game not found"),
    ("join-game", "c", {"code": "ABC123"}, "Game is full"),
    ("join-game", "c", {}, "'code' is required"),
    ("make-guess", "a", {"code": "ABC123", "guess": "zzzzz"}, "Invalid word"),
    ("make-guess", "c", {"code": "ABC123", "guess": "crane"}, "Player not found in game"),
    ("make-guess", "a", "not a dict", "Request body is required"),
    ("submit-word", "c", {"word": "crane"}, "Game not found"),
    ("play-again", "a", {"code": "ABC123"}, "Play again is only available after the game is over"),
    ("launch-missiles", "a", {}, "Unknown event 'launch-missiles'"),
])
def test_errors_are_reported_to_sender(started, event, sender, payload, message):
    assert started.handle(event, sender, payload) == [
        Outgoing("error", {"message": message}, to=sender)
    ]


def test_unexpected_exception_becomes_internal_error(started, registry, monkeypatch):
    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(registry.get("ABC123"), "make_guess", explode)
    actions = started.handle("make-guess", "a", {"code": "ABC123", "guess": "tower"})
    assert actions == [Outgoing("error", {"message": "Internal server error"}, to="a")]


def test_play_again_handshake(started, registry):
    started.handle("make-guess", "a", {"code": "ABC123", "guess": "tower"})

    assert started.handle("play-again", "a", {"code": "ABC123"}) == [
        Outgoing("play-again-vote", {"count": 1}, room="ABC123")
    ]
    # Repeat vote, code taken from the sender's session
    assert started.handle("play-again", "a", {}) == [
        Outgoing("play-again-vote", {"count": 1}, room="ABC123")
    ]
    assert started.handle("play-again", "b", {"code": "ABC123"}) == [
        Outgoing("game-restart", room="ABC123")
    ]
    assert registry.get("ABC123").phase == SessionPhase.AWAITING_WORDS

    # The rematch plays like a fresh game
    started.handle("submit-word", "a", {"word": "stone"})
    actions = started.handle("submit-word", "b", {"word": "alloy"})
    assert Outgoing("game-started", {"turn": 1}, room="ABC123") in actions


def test_rejoin_is_idempotent(started, registry):
    actions = started.handle("join-game", "b", {"code": "ABC123"})
    assert messages(actions) == [Outgoing("join-success", {"code": "ABC123", "seat": 2}, to="b")]
    assert registry.get("ABC123").phase == SessionPhase.PLAYING


def test_disconnect_notifies_remaining_player_without_forfeit(started, registry):
    actions = started.disconnect("b")
    assert actions == [Outgoing(
        "player-disconnected", {"message": "Your opponent has disconnected"},
        room="ABC123", skip="b"
    )]
    session = registry.get("ABC123")
    assert session.phase == SessionPhase.PLAYING
    assert session.winner is None

    assert started.disconnect("a") == [RoomChange("close", "ABC123")]
    assert "ABC123" not in registry


def test_disconnect_of_unknown_connection_is_noop(protocol):
    assert protocol.disconnect("ghost") == []


def test_creating_a_new_game_leaves_the_old_one(started, registry):
    actions = started.handle("create-game", "a")
    assert actions[0] == RoomChange("leave", "ABC123", "a")
    assert Outgoing(
        "player-disconnected", {"message": "Your opponent has disconnected"},
        room="ABC123", skip="a"
    ) in actions
    assert actions[-1] == Outgoing("game-created", {"code": "XYZ789", "seat": 1}, to="a")
    assert registry.get("ABC123").participants == {"b": 2}
    assert registry.find_by_participant("a") == "XYZ789"


def test_idle_sessions_are_reaped(started, registry, clock):
    clock.advance(30)
    assert started.reap_idle_sessions(60) == []

    clock.advance(60)
    actions = started.reap_idle_sessions(60)
    assert actions == [
        Outgoing("session-expired", {"message": "Game closed after a period of inactivity"}, room="ABC123"),
        RoomChange("close", "ABC123"),
    ]
    assert len(registry) == 0
    assert registry.find_by_participant("a") is None
