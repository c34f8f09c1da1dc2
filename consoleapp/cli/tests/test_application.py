"""Unit tests for the ConsoleApplication base class."""

import logging
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from consoleapp.cli.application import ConsoleApplication
from consoleapp.cli.constants import (
    ERROR_EXIT_CODE,
    INTERRUPT_EXIT_CODE,
    SUCCESS_EXIT_CODE,
)
from consoleapp.cli.errors import ArgumentIndexError
from consoleapp.configs.config import AppConfig, LoggingConfig

AppClass = type[ConsoleApplication]


class TestConstruction:
    """Tests for ConsoleApplication construction and init."""

    def test_abstract_base_cannot_be_instantiated(self) -> None:
        """Test run() must be provided by the implementation."""
        with pytest.raises(TypeError):
            ConsoleApplication()  # type: ignore[abstract]

    def test_new_application_is_empty(self, app: ConsoleApplication) -> None:
        """Test collections start empty and no args are set."""
        assert app.args is None
        assert app.state.to_dict() == {"switches": [], "params": {}, "values": []}
        assert isinstance(app.config, AppConfig)

    def test_constructor_args_are_stored_not_parsed(self, app_class: AppClass) -> None:
        """Test args given at construction wait for process_args."""
        application = app_class(args=["-v"])

        assert application.args == ("-v",)
        assert not application.get_switch("v")

    def test_init_discards_args_and_state(self, app: ConsoleApplication) -> None:
        """Test init() returns the application to its initial state."""
        app.process_args(["-v", "value"])

        app.init()

        assert app.args is None
        assert app.state.params == {}
        assert app.state.values == []


class TestArgs:
    """Tests for raw argument handling."""

    def test_set_args_clears_previous_classification(
        self, app: ConsoleApplication
    ) -> None:
        """Test a new token sequence resets switches, params and values."""
        app.process_args(["-abc", "val", "--x=1", "naked"])

        app.set_args(["other"])

        assert app.state.switches == set()
        assert app.state.params == {}
        assert app.state.values == []
        assert app.args == ("other",)

    def test_set_args_discards_manually_set_state(
        self, app: ConsoleApplication
    ) -> None:
        """Test explicit setters do not survive a new token sequence."""
        app.switch_on("manual")
        app.set_param("p", "1")
        app.push_value("v")

        app.process_args([])

        assert not app.get_switch("manual")
        assert app.get_param("p") is None
        assert app.state.values == []

    def test_args_are_stored_as_tuple(self, app: ConsoleApplication) -> None:
        """Test later changes to the caller's list do not leak in."""
        tokens = ["a", "b"]
        app.set_args(tokens)

        tokens.append("c")

        assert app.args == ("a", "b")

    def test_get_arg_without_args_returns_none(self, app: ConsoleApplication) -> None:
        """Test get_arg before any args are set."""
        assert app.get_arg(0) is None

    def test_get_arg_in_range(self, app: ConsoleApplication) -> None:
        app.set_args(["-v", "file"])

        assert app.get_arg(0) == "-v"
        assert app.get_arg(1) == "file"

    @pytest.mark.parametrize("index", [-1, 2])
    def test_get_arg_out_of_range_raises(
        self, app: ConsoleApplication, index: int
    ) -> None:
        """Test an index equal to the length is rejected too."""
        app.set_args(["-v", "file"])

        with pytest.raises(ArgumentIndexError):
            app.get_arg(index)


class TestProcessArgs:
    """Tests for process_args."""

    def test_process_args_classifies_tokens(self, app: ConsoleApplication) -> None:
        """Test switches, parameters and values are all populated."""
        result = app.process_args(["-vf", "out.txt", "--mode=fast", "--dry", "in"])

        assert result is app
        assert app.get_switch("v")
        assert app.get_switch("dry")
        assert app.get_param("f") == "out.txt"
        assert app.get_param("mode") == "fast"
        assert app.get_value(0) == "in"

    def test_process_args_uses_stored_args(self, app: ConsoleApplication) -> None:
        """Test calling without arguments parses what set_args stored."""
        app.set_args(["-q"])

        app.process_args()

        assert app.get_switch("q")

    def test_process_args_without_any_args_is_no_op(
        self, app: ConsoleApplication
    ) -> None:
        app.process_args()

        assert app.state.to_dict() == {"switches": [], "params": {}, "values": []}

    def test_parse_failure_is_logged_as_warning(
        self, app: ConsoleApplication, mock_logger: MagicMock
    ) -> None:
        """Test malformed long-form parameters reach the application logger."""
        app.process_args(["--name=a=b", "next"])

        mock_logger.warning.assert_called_once_with("Invalid parameter [--name=a=b]")
        assert app.get_param("name") is None
        assert app.state.values == ["next"]

    def test_parse_failure_reaches_default_logger(
        self, app_class: AppClass, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test the lazily created logger receives parse warnings."""
        application = app_class()

        with caplog.at_level(logging.WARNING):
            application.process_args(["--x=1=2"])

        assert "Invalid parameter [--x=1=2]" in caplog.text


class TestDirectSetters:
    """Tests for setters that bypass the classifier."""

    def test_setters_delegate_to_state(self, app: ConsoleApplication) -> None:
        app.switch_on("a")
        app.switch_on("b")
        app.switch_off("b")
        app.set_param("p", "1")
        app.set_param("q", "2")
        app.clear_param("q")

        assert app.state.switches == {"a"}
        assert app.state.params == {"p": "1"}

    def test_push_and_set_values(self, app: ConsoleApplication) -> None:
        assert app.push_value("x") == 0
        assert app.push_value("x") == 1

        app.set_values(["y"])

        assert app.get_value(0) == "y"
        with pytest.raises(ArgumentIndexError):
            app.get_value(1)


class TestLogger:
    """Tests for the logger property."""

    def test_default_logger_named_after_class(self, app_class: AppClass) -> None:
        """Test the logger name is the qualified class name."""
        application = app_class()

        expected = f"{app_class.__module__}.{app_class.__qualname__}"
        assert application.logger.name == expected

    def test_default_logger_is_created_once(self, app_class: AppClass) -> None:
        application = app_class()

        assert application.logger is application.logger

    def test_default_logger_uses_config_level(self, app_class: AppClass) -> None:
        """Test the logging section of the config is applied."""
        config = AppConfig(logging=LoggingConfig(level="ERROR", console=False))

        # A fresh subclass gets a logger name no earlier test has configured.
        class QuietApplication(app_class):  # type: ignore[valid-type,misc]
            pass

        application = QuietApplication(config=config)

        assert application.logger.level == logging.ERROR

    def test_instances_of_same_class_share_first_logger(
        self, app_class: AppClass
    ) -> None:
        """Test a later instance keeps the logger configured by the first."""

        class SharedLoggerApplication(app_class):  # type: ignore[valid-type,misc]
            pass

        first = SharedLoggerApplication(
            config=AppConfig(logging=LoggingConfig(level="ERROR", console=False))
        )
        first_logger = first.logger
        first_logger.addHandler(logging.NullHandler())
        second = SharedLoggerApplication(
            config=AppConfig(logging=LoggingConfig(level="DEBUG", console=False))
        )

        assert second.logger is first_logger
        assert second.logger.level == logging.ERROR

    def test_injected_logger_overrides_shared_logger(
        self, app_class: AppClass
    ) -> None:
        """Test injecting a logger gives an instance its own settings."""
        own_logger = logging.getLogger("consoleapp.test.own_logger")

        application = app_class(logger=own_logger)

        assert application.logger is own_logger

    def test_logger_can_be_replaced(self, app: ConsoleApplication) -> None:
        replacement = logging.getLogger("replacement")

        app.logger = replacement

        assert app.logger is replacement


class TestMain:
    """Tests for the ConsoleApplication.main entry point."""

    def test_main_parses_argv_and_runs(self, app_class: AppClass) -> None:
        """Test main classifies argv and returns success for a None result."""
        with patch.object(app_class, "run", autospec=True) as mock_run:
            mock_run.return_value = None

            exit_code = app_class.main(["-v", "--n=1", "x"])

        assert exit_code == SUCCESS_EXIT_CODE
        application = mock_run.call_args[0][0]
        assert application.get_switch("v")
        assert application.get_param("n") == "1"
        assert application.get_value(0) == "x"

    def test_main_returns_run_exit_code(self, app_class: AppClass) -> None:
        with patch.object(app_class, "exit_code", 3):
            assert app_class.main([]) == 3

    def test_main_defaults_to_sys_argv(self, app_class: AppClass) -> None:
        """Test sys.argv[1:] is used when argv is omitted."""
        with patch("sys.argv", ["prog", "-q"]), patch.object(
            app_class, "run", autospec=True, return_value=None
        ) as mock_run:
            app_class.main()

        assert mock_run.call_args[0][0].get_switch("q")

    def test_main_loads_config_file(
        self, app_class: AppClass, tmp_path: Path
    ) -> None:
        """Test the config file is loaded before the application is built."""
        config_file = tmp_path / "app.yaml"
        config_file.write_text(
            "logging_settings:\n  level: WARNING\n  console: false\n"
        )

        with patch.object(
            app_class, "run", autospec=True, return_value=None
        ) as mock_run:
            exit_code = app_class.main([], config_path=str(config_file))

        assert exit_code == SUCCESS_EXIT_CODE
        assert mock_run.call_args[0][0].config.logging.level == "WARNING"

    def test_main_missing_config_returns_error(
        self, app_class: AppClass, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        exit_code = app_class.main([], config_path=str(tmp_path / "none.ini"))

        assert exit_code == ERROR_EXIT_CODE
        assert "Configuration error" in capsys.readouterr().out

    def test_main_handles_keyboard_interrupt(self, app_class: AppClass) -> None:
        with patch.object(app_class, "run", side_effect=KeyboardInterrupt):
            assert app_class.main([]) == INTERRUPT_EXIT_CODE

    @pytest.mark.parametrize(
        "error",
        [ValueError("bad"), TypeError("bad"), RuntimeError("bad"), OSError("bad")],
    )
    def test_main_maps_errors_to_error_exit_code(
        self,
        app_class: AppClass,
        error: Exception,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with patch.object(app_class, "run", side_effect=error):
            exit_code = app_class.main([])

        assert exit_code == ERROR_EXIT_CODE
        assert "bad" in capsys.readouterr().out

    def test_main_does_not_swallow_index_faults(self, app_class: AppClass) -> None:
        """Test out-of-bounds access propagates as a programmer error."""
        with patch.object(
            app_class,
            "run",
            autospec=True,
            side_effect=lambda self: self.get_value(5),
        ):
            with pytest.raises(ArgumentIndexError):
                app_class.main([])
