import pytest

from wordle_assistant.config import SolverConfig
from wordle_assistant.errors import (EmptyHistory, InvalidHintSyntax, LengthMismatch, SessionClosed,
                                     WordNotFound)
from wordle_assistant.feedback import Hint, hint_from_guess_and_answer, hint_from_string
from wordle_assistant.session import SolverSession
from wordle_assistant.words import Word


def snapshot(session):
    return (set(session.remaining_guesses), set(session.remaining_answers),
            list(session.history), [list(table) for table in session.score_cache])


def played(guess, answer):
    return Word(guess), hint_from_guess_and_answer(Word(guess), Word(answer))


def test_initial_state(session, words):
    assert session.remaining_guesses == words
    assert session.remaining_answers == words
    assert session.history == []
    assert len(session.score_cache) == 1
    assert len(session.score_cache[0]) == len(words)
    assert session.active


def test_rejects_words_of_other_widths(config):
    with pytest.raises(LengthMismatch):
        SolverSession({Word("CRANE"), Word("CAT")}, config)


def test_hint_keeps_only_consistent_answers(session, words):
    guess, hint = played("CRANE", "SLATE")
    entry = session.hint(guess, hint)

    assert session.remaining_answers == {Word("SLATE")}
    assert entry.removed_answers == words - {Word("SLATE")}
    assert Word("CRANE") not in session.remaining_guesses
    assert len(session.history) == 1
    assert len(session.score_cache) == 2
    for w in session.remaining_answers:
        assert hint_from_guess_and_answer(guess, w) == hint


def test_hint_narrows_monotonically(session):
    guess, hint = played("HELLO", "LEMON")
    session.hint(guess, hint)
    before = set(session.remaining_answers)
    assert Word("LEMON") in before

    guess, hint = played("TRACE", "LEMON")
    session.hint(guess, hint)
    assert session.remaining_answers <= before
    assert Word("LEMON") in session.remaining_answers
    assert len(session.score_cache) == len(session.history) + 1


def test_new_table_scores_new_state(session):
    guess, hint = played("CRANE", "SLATE")
    session.hint(guess, hint)
    table = session.score_cache[-1]
    assert {e.word for e in table} == session.remaining_guesses
    # a single possible answer cannot be split
    assert all(e.expected == pytest.approx(0.0) for e in table)


def test_undo_restores_exact_state(session):
    before = snapshot(session)
    guess, hint = played("CRANE", "SLATE")
    session.hint(guess, hint)
    entry = session.undo()
    assert entry.guess == guess
    assert snapshot(session) == before


def test_undo_twice_after_two_hints(session):
    states = [snapshot(session)]
    for guess, answer in [("HELLO", "LEMON"), ("TRACE", "LEMON")]:
        session.hint(*played(guess, answer))
        states.append(snapshot(session))
    session.undo()
    assert snapshot(session) == states[1]
    session.undo()
    assert snapshot(session) == states[0]


def test_undo_with_empty_history_is_noop(session):
    before = snapshot(session)
    with pytest.raises(EmptyHistory):
        session.undo()
    assert snapshot(session) == before


def test_undo_does_not_add_unknown_guess(session, words):
    guess, hint = played("ZZZZZ", "SLATE")
    session.hint(guess, hint)
    session.undo()
    assert session.remaining_guesses == words


def test_same_hint_twice(session):
    guess, hint = played("HELLO", "LEMON")
    session.hint(guess, hint)
    first = set(session.remaining_answers)
    session.hint(guess, hint)
    assert session.remaining_answers <= first
    assert len(session.history) == 2
    session.undo()
    assert session.remaining_answers == first
    assert guess not in session.remaining_guesses


def test_inconsistent_hint_leaves_empty_state(session):
    session.hint(Word("CRANE"), hint_from_string("crane", Word("CRANE")))
    session.hint(Word("SLATE"), hint_from_string("slate", Word("SLATE")))
    assert session.remaining_answers == set()
    entries = session.top(3)
    assert len(entries) == 3
    assert all(e.expected == 0.0 and e.worst_case == 100.0 for e in entries)
    assert session.top(3, strict=True) == []


def test_eager_hint_strings(session):
    before = snapshot(session)
    with pytest.raises(InvalidHintSyntax):
        session.hint(Word("EAGER"), hint_from_string("g_*__", Word("EAGER")))
    assert snapshot(session) == before

    hint = hint_from_string("e_*__", Word("EAGER"))
    assert hint != hint_from_guess_and_answer(Word("EAGER"), Word("EAGER"))
    entry = session.hint(Word("EAGER"), hint)
    assert Word("EAGER") in entry.removed_answers
    assert Word("EAGER") not in session.remaining_answers


def test_hint_length_mismatch(session):
    before = snapshot(session)
    with pytest.raises(LengthMismatch):
        session.hint(Word("CAT"), Hint.all_correct(3))
    with pytest.raises(LengthMismatch):
        session.hint(Word("CRANE"), Hint.all_correct(4))
    assert snapshot(session) == before


def test_top(session):
    top = session.top(3)
    assert top == session.score_cache[0][:3]
    assert session.top(0) == []
    assert len(session.top(100)) == 10


def test_top_strict(session):
    session.hint(*played("HELLO", "LEMON"))
    strict = session.top(100, strict=True)
    assert strict
    assert {e.word for e in strict} <= session.remaining_answers
    assert len(session.top(100)) == len(session.remaining_guesses)


def test_hard_mode_always_strict(words):
    session = SolverSession(words, SolverConfig(show_progress=False, hard_mode=True))
    session.hint(*played("HELLO", "LEMON"))
    assert {e.word for e in session.top(100)} <= session.remaining_answers


def test_score(session):
    table = session.score_cache[0]
    rank, entry = session.score(table[4].word)
    assert rank == 5
    assert entry == table[4]


def test_score_includes_excluded_answers(session):
    session.hint(*played("CRANE", "SLATE"))
    rank, entry = session.score(Word("TRACE"))
    assert Word("TRACE") not in session.remaining_answers
    assert entry.word == Word("TRACE")


def test_score_word_not_found(session):
    with pytest.raises(WordNotFound):
        session.score(Word("ZZZZZ"))
    session.hint(*played("CRANE", "SLATE"))
    with pytest.raises(WordNotFound):
        session.score(Word("CRANE"))


def test_history_report(session):
    assert session.history_report() == []
    session.hint(*played("CRANE", "SLATE"))
    [report] = session.history_report()
    assert report.guess == Word("CRANE")
    assert (report.removed, report.total, report.remaining) == (9, 10, 1)
    assert report.percent_removed == pytest.approx(90.0)
    assert session.starting_size() == 10


def test_history_report_chains_totals(session):
    session.hint(*played("HELLO", "LEMON"))
    session.hint(*played("TRACE", "LEMON"))
    first, second = session.history_report()
    assert first.total == 10
    assert second.total == first.remaining
    assert second.remaining == len(session.remaining_answers)


def test_exit(session):
    session.exit()
    assert not session.active
    with pytest.raises(SessionClosed):
        session.top(1)
    with pytest.raises(SessionClosed):
        session.undo()
    with pytest.raises(SessionClosed):
        session.exit()


def test_invariant_violation_is_fatal(session):
    session.score_cache.append([])
    with pytest.raises(RuntimeError):
        session.top(1)
