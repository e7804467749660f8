"""Tests for markdown prompt logging."""

import pytest

from chefly.llm import prompt_logger


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(prompt_logger, "LOG_DIR", tmp_path / "prompt_logs")
    prompt_logger.reset_session()
    yield tmp_path / "prompt_logs"
    prompt_logger.enable_prompt_logging(False)
    prompt_logger.reset_session()


def test_disabled_writes_nothing(log_dir):
    prompt_logger.enable_prompt_logging(False)
    assert prompt_logger.log_prompt(node="meal_plan", model="m", prompt="p") is None
    assert not log_dir.exists()


def test_enabled_writes_numbered_files(log_dir):
    prompt_logger.enable_prompt_logging(True)

    first = prompt_logger.log_prompt(node="meal_plan", model="m", prompt="plan please", response='{"meals": []}')
    second = prompt_logger.log_prompt(node="meal_image", model="img", prompt="a salad", error="boom")

    assert first.name == "01_meal_plan.md"
    assert second.name == "02_meal_image.md"
    assert first.parent == prompt_logger.get_session_log_dir()
    assert "plan please" in first.read_text(encoding="utf-8")
    assert "**ERROR:** boom" in second.read_text(encoding="utf-8")
