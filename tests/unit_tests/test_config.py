"""Tests for run configuration and interactive method selection."""

import pytest

from sightingsearch.config import SearchConfig, prompt_search_method, resolve_search_method
from sightingsearch.constants import ENV_METHOD, ENV_WARMUP, ENV_LOG_LEVEL, METHOD_PROMPT
from sightingsearch.errors import InvalidSelectionError, UsageError
from sightingsearch.search.matching import SearchMethod


def scripted_input(answers):
    """Input function returning the given answers, then raising EOFError."""
    answers = list(answers)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        if not answers:
            raise EOFError
        return answers.pop(0)

    _input.prompts = prompts
    return _input


class TestSearchConfig:
    """Test configuration from the environment."""

    def test_defaults(self):
        config = SearchConfig.from_env({})

        assert config.method is None
        assert config.warmup is True
        assert config.log_level == "WARNING"

    def test_method_from_env(self):
        assert SearchConfig.from_env({ENV_METHOD: "binary"}).method is SearchMethod.BINARY
        assert SearchConfig.from_env({ENV_METHOD: "l"}).method is SearchMethod.LINEAR

    def test_blank_method_means_prompt(self):
        assert SearchConfig.from_env({ENV_METHOD: "  "}).method is None

    def test_invalid_method_is_fatal(self):
        with pytest.raises(InvalidSelectionError):
            SearchConfig.from_env({ENV_METHOD: "quantum"})

    @pytest.mark.parametrize("value", ["0", "false", "No", "off"])
    def test_disable_warmup(self, value):
        assert SearchConfig.from_env({ENV_WARMUP: value}).warmup is False

    def test_log_level(self):
        assert SearchConfig.from_env({ENV_LOG_LEVEL: "debug"}).log_level == "DEBUG"

    def test_unknown_log_level(self):
        with pytest.raises(UsageError):
            SearchConfig.from_env({ENV_LOG_LEVEL: "chatty"})

    def test_reads_os_environ_by_default(self, monkeypatch):
        monkeypatch.setenv(ENV_METHOD, "b")
        assert SearchConfig.from_env().method is SearchMethod.BINARY


class TestPromptSearchMethod:
    """Test the interactive re-prompt loop."""

    def test_valid_first_answer(self):
        input_fn = scripted_input(["l"])

        assert prompt_search_method(input_fn) is SearchMethod.LINEAR
        assert input_fn.prompts == [METHOD_PROMPT]

    def test_reprompts_until_valid(self, capsys):
        input_fn = scripted_input(["x", "", "binary"])

        assert prompt_search_method(input_fn) is SearchMethod.BINARY
        assert len(input_fn.prompts) == 3
        assert capsys.readouterr().err.count("Incorrect choice") == 2

    def test_end_of_input_is_usage_error(self, capsys):
        input_fn = scripted_input(["z"])

        with pytest.raises(UsageError):
            prompt_search_method(input_fn)

        assert "Incorrect choice" in capsys.readouterr().err


class TestResolveSearchMethod:
    """Test configured method vs prompt."""

    def test_configured_method_skips_prompt(self):
        input_fn = scripted_input([])
        config = SearchConfig(method=SearchMethod.BINARY)

        assert resolve_search_method(config, input_fn) is SearchMethod.BINARY
        assert input_fn.prompts == []

    def test_prompts_without_configuration(self):
        input_fn = scripted_input(["b"])
        assert resolve_search_method(SearchConfig(), input_fn) is SearchMethod.BINARY
