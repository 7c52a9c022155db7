import logging
from unittest.mock import Mock

from fastpicker.errors import AlbumLoadError, ConfigurationError, FastPickerError, InvalidMaxSelectionError
from fastpicker.errors.handler import ErrorHandler, ErrorOccurredEvent, ErrorSeverity
from fastpicker.events.bus import EventBus


def test_handle_error_logs_and_publishes():
    logger = Mock(spec=logging.Logger)
    event_bus = Mock(spec=EventBus)
    handler = ErrorHandler(logger, event_bus)

    error = AlbumLoadError("listing failed")
    returned = handler.handle(error, ErrorSeverity.ERROR, context={"generation": 2})

    logger.error.assert_called()
    event = event_bus.publish.call_args[0][0]
    assert isinstance(event, ErrorOccurredEvent)
    assert event is returned
    assert event.error is error
    assert event.severity == ErrorSeverity.ERROR
    assert event.context == {"generation": 2}


def test_warning_uses_warning_log_level():
    logger = Mock(spec=logging.Logger)
    handler = ErrorHandler(logger, Mock(spec=EventBus))

    handler.handle(ValueError("odd"), ErrorSeverity.WARNING)

    logger.warning.assert_called()
    logger.error.assert_not_called()


def test_surfaces_only_receive_errors_at_threshold():
    handler = ErrorHandler(Mock(spec=logging.Logger), Mock(spec=EventBus))
    first, second = Mock(), Mock()
    handler.register_ui_callback(first)
    handler.register_ui_callback(second)

    handler.handle(Exception("info"), ErrorSeverity.INFO)
    handler.handle(Exception("careful"), ErrorSeverity.WARNING)
    first.assert_not_called()

    handler.handle(RuntimeError("ui error"), ErrorSeverity.CRITICAL)
    first.assert_called_once_with("ui error", ErrorSeverity.CRITICAL)
    second.assert_called_once_with("ui error", ErrorSeverity.CRITICAL)


def test_lower_threshold_surfaces_warnings():
    handler = ErrorHandler(
        Mock(spec=logging.Logger), Mock(spec=EventBus), surface_threshold=ErrorSeverity.WARNING
    )
    surface = Mock()
    handler.register_ui_callback(surface)

    handler.handle(ValueError(), ErrorSeverity.WARNING)

    surface.assert_called_once_with("ValueError", ErrorSeverity.WARNING)


def test_released_surface_is_not_called():
    handler = ErrorHandler(Mock(spec=logging.Logger), Mock(spec=EventBus))
    surface = Mock()
    release = handler.register_ui_callback(surface)

    release()
    release()
    handler.handle(AlbumLoadError("gone"))

    surface.assert_not_called()
    assert handler.surface_count == 0


def test_failing_surface_is_logged_and_others_still_run():
    logger = Mock(spec=logging.Logger)
    handler = ErrorHandler(logger, Mock(spec=EventBus))
    broken = Mock(side_effect=RuntimeError("widget gone"))
    working = Mock()
    handler.register_ui_callback(broken)
    handler.register_ui_callback(working)

    handler.handle(AlbumLoadError("offline"))

    working.assert_called_once()
    logger.exception.assert_called_once()


def test_error_hierarchy():
    assert issubclass(InvalidMaxSelectionError, ConfigurationError)
    assert issubclass(ConfigurationError, FastPickerError)
    assert issubclass(AlbumLoadError, FastPickerError)
