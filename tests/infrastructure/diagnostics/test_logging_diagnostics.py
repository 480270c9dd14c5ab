import logging
import unittest
from unittest import mock

from src.ntensor.domain._diagnostics import IDiagnostics, Level
from src.ntensor.domain._errors import ShapeMismatchError
from src.ntensor.infrastructure.diagnostics import (
    LOGGER_NAME,
    LoggingDiagnostics,
    default_diagnostics,
    fatal_on_error,
)
from src.ntensor.infrastructure.tensor._tensor import Tensor


class TestLoggingDiagnostics(unittest.TestCase):
    def test_satisfies_protocol(self):
        self.assertIsInstance(LoggingDiagnostics(), IDiagnostics)

    def test_default_logger_name(self):
        self.assertEqual(LoggingDiagnostics().logger.name, LOGGER_NAME)
        self.assertEqual(LOGGER_NAME, "ntensor")

    def test_default_diagnostics_is_shared(self):
        self.assertIs(default_diagnostics(), default_diagnostics())

    def test_levels_map_to_logging_levels(self):
        diag = LoggingDiagnostics(logging.getLogger("ntensor.test.levels"))
        expected = {
            Level.DEBUG: "DEBUG",
            Level.INFO: "INFO",
            Level.WARN: "WARNING",
            Level.ERROR: "ERROR",
        }
        for level, name in expected.items():
            with self.assertLogs("ntensor.test.levels", level="DEBUG") as logs:
                diag.log(level, "value=%d", 3)
            self.assertEqual(logs.records[0].levelname, name)
            self.assertEqual(logs.records[0].getMessage(), "value=3")

    def test_fatal_logs_critical_then_terminates(self):
        terminate = mock.Mock()
        diag = LoggingDiagnostics(logging.getLogger("ntensor.test.fatal"), terminate)
        with self.assertLogs("ntensor.test.fatal", level="CRITICAL") as logs:
            diag.fatal("boom %s", "now")
        terminate.assert_called_once_with(1)
        self.assertEqual(logs.records[0].getMessage(), "boom now")

    def test_fatal_defaults_to_sys_exit(self):
        diag = LoggingDiagnostics(logging.getLogger("ntensor.test.exit"))
        with self.assertLogs("ntensor.test.exit", level="CRITICAL"):
            with self.assertRaises(SystemExit) as ctx:
                diag.fatal("bye")
        self.assertEqual(ctx.exception.code, 1)


class TestTensorReporting(unittest.TestCase):
    def test_rejected_operation_is_logged_at_warning(self):
        with self.assertLogs("ntensor", level="WARNING") as logs:
            with self.assertRaises(ShapeMismatchError):
                Tensor((2, 2)).add(Tensor((3, 3)))
        self.assertIn("ShapeMismatchError", logs.output[0])

    def test_injected_sink_receives_events(self):
        sink = mock.Mock(spec=["log", "fatal"])
        t = Tensor((2, 2), diagnostics=sink)
        t.flatten()
        sink.log.assert_called_once()
        self.assertEqual(sink.log.call_args.args[0], Level.DEBUG)

        with self.assertRaises(IndexError):
            t.get((0, 9))
        self.assertEqual(sink.log.call_args.args[0], Level.WARN)
        sink.fatal.assert_not_called()

    def test_spawned_tensors_share_the_sink(self):
        sink = mock.Mock(spec=["log", "fatal"])
        a = Tensor((2, 2), 1.0, diagnostics=sink)
        self.assertIs(a.add(a).diagnostics, sink)


class TestFatalOnError(unittest.TestCase):
    def test_passes_through_without_error(self):
        sink = mock.Mock(spec=["log", "fatal"])
        with fatal_on_error(sink):
            Tensor((2, 2)).sum()
        sink.fatal.assert_not_called()

    def test_escalates_tensor_errors(self):
        sink = mock.Mock(spec=["log", "fatal"])
        with self.assertRaises(ShapeMismatchError):
            with fatal_on_error(sink):
                Tensor((2, 2), diagnostics=sink).add(Tensor((3, 3)))
        sink.fatal.assert_called_once()
        self.assertEqual(sink.fatal.call_args.args[1], "ShapeMismatchError")

    def test_terminates_with_default_exit(self):
        diag = LoggingDiagnostics(logging.getLogger("ntensor.test.escalate"))
        with self.assertLogs("ntensor.test.escalate", level="CRITICAL"):
            with self.assertRaises(SystemExit):
                with fatal_on_error(diag):
                    Tensor((2,), diagnostics=diag).get((5,))

    def test_other_exceptions_are_not_escalated(self):
        sink = mock.Mock(spec=["log", "fatal"])
        with self.assertRaises(KeyError):
            with fatal_on_error(sink):
                raise KeyError("x")
        sink.fatal.assert_not_called()


if __name__ == "__main__":
    unittest.main()
