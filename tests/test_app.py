import pytest
from unittest.mock import patch

from mindquiz.app import (
    SessionExitRequested, ask_answer, cmd_history, cmd_import, cmd_quiz, session_prompt,
)
from mindquiz.db import init_db
from mindquiz.models import Question
from mindquiz.seed import seed_topics
from mindquiz.storage import list_topics, load_quiz_history, load_user_model


def test_session_exit_requested_is_exception():
    with pytest.raises(SessionExitRequested):
        raise SessionExitRequested()


def test_session_prompt_raises_on_q():
    with patch("mindquiz.app.Prompt.ask", return_value="q"):
        with pytest.raises(SessionExitRequested):
            session_prompt("test prompt")


def test_session_prompt_raises_on_menu():
    with patch("mindquiz.app.Prompt.ask", return_value=" MENU "):
        with pytest.raises(SessionExitRequested):
            session_prompt("test prompt")


def test_session_prompt_returns_normal_input():
    with patch("mindquiz.app.Prompt.ask", return_value="hello"):
        assert session_prompt("test prompt") == "hello"


def test_ask_answer_maps_option_number():
    q = Question(type="mcq", question="?", answer="B", options=["A", "B", "C"])
    with patch("mindquiz.app.Prompt.ask", return_value="2"):
        assert ask_answer(q) == "B"
    with patch("mindquiz.app.Prompt.ask", return_value="9"):
        assert ask_answer(q) == "9"


def test_ask_answer_free_text():
    q = Question(type="shortanswer", question="?", answer="x", guidance="Be thorough.")
    with patch("mindquiz.app.Prompt.ask", return_value="my answer"):
        assert ask_answer(q) == "my answer"


def test_ask_answer_true_false_offers_choices():
    q = Question(type="truefalse", question="?", answer=True)
    with patch("mindquiz.app.Prompt.ask", return_value="false") as ask:
        assert ask_answer(q) == "false"
    choices = ask.call_args.kwargs["choices"]
    assert choices[:2] == ["true", "false"]
    assert "q" in choices


def test_cmd_quiz_asks_again_for_invalid_count(tmp_db):
    init_db(tmp_db)
    seed_topics(tmp_db)
    with patch("mindquiz.app.Prompt.ask", side_effect=["1", "1", "true"]), \
            patch("mindquiz.app.IntPrompt.get_input", side_effect=["ten", "2"]) as get_input:
        cmd_quiz(tmp_db, "ada")
    assert get_input.call_count == 2
    assert load_quiz_history(tmp_db)[0].total == 2


def test_cmd_quiz_records_attempt(tmp_db):
    init_db(tmp_db)
    seed_topics(tmp_db)
    # topic 1 (Cell Biology), mcq option 1, then true/false
    with patch("mindquiz.app.Prompt.ask", side_effect=["1", "1", "true"]), \
            patch("mindquiz.app.IntPrompt.ask", return_value=2):
        cmd_quiz(tmp_db, "ada")
    attempts = load_quiz_history(tmp_db)
    assert len(attempts) == 1
    assert attempts[0].topic == "Cell Biology"
    assert attempts[0].total == 2
    assert len(load_user_model(tmp_db, "ada").learning_history) == 2


def test_cmd_quiz_quit_records_nothing(tmp_db):
    init_db(tmp_db)
    seed_topics(tmp_db)
    with patch("mindquiz.app.Prompt.ask", side_effect=["1", "q"]), \
            patch("mindquiz.app.IntPrompt.ask", return_value=2):
        cmd_quiz(tmp_db, "ada")
    assert load_quiz_history(tmp_db) == []
    assert load_user_model(tmp_db, "ada").learning_history == []


def test_cmd_quiz_adaptive_blank_answer(tmp_db):
    init_db(tmp_db)
    seed_topics(tmp_db)
    with patch("mindquiz.app.Prompt.ask", side_effect=["1", ""]), \
            patch("mindquiz.app.IntPrompt.ask", return_value=1):
        cmd_quiz(tmp_db, "ada", adaptive=True)
    attempts = load_quiz_history(tmp_db)
    assert [a.score for a in attempts] == [0]
    assert attempts[0].results[0]["user_answer"] == "(No answer provided)"


def test_cmd_quiz_without_topics(tmp_db, capsys):
    init_db(tmp_db)
    cmd_quiz(tmp_db, "ada")
    assert "No topics yet" in capsys.readouterr().out


def test_cmd_history_empty(tmp_db, capsys):
    init_db(tmp_db)
    cmd_history(tmp_db)
    assert "No quiz attempts yet" in capsys.readouterr().out


def test_cmd_import(tmp_db, tmp_path):
    init_db(tmp_db)
    path = tmp_path / "optics.yaml"
    path.write_text("name: Optics\nconcepts:\n  - concept: Lens\n    definition: A curved piece of glass\n")
    with patch("mindquiz.app.Prompt.ask", return_value=str(path)):
        cmd_import(tmp_db)
    assert list_topics(tmp_db) == ["Optics"]


def test_cmd_import_bad_file(tmp_db, tmp_path):
    init_db(tmp_db)
    path = tmp_path / "notes.txt"
    path.write_text("plain notes")
    with patch("mindquiz.app.Prompt.ask", return_value=str(path)):
        cmd_import(tmp_db)
    assert list_topics(tmp_db) == []
