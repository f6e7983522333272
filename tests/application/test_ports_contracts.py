from __future__ import annotations

import pytest

from numflow.adapters import ConsoleSink, CountObserver, FileNumberReader, FileSink, NullSink, PrintObserver
from numflow.application.ports import LogSinkPort, NumberObserverPort, NumberReaderPort


def test_file_reader_satisfies_reader_port() -> None:
    assert isinstance(FileNumberReader(), NumberReaderPort)


@pytest.mark.parametrize("observer_type", [PrintObserver, CountObserver])
def test_observers_satisfy_observer_port(observer_type: type, record_console) -> None:
    assert isinstance(observer_type(console=record_console), NumberObserverPort)


def test_sinks_satisfy_sink_port(tmp_path, record_console) -> None:
    file_sink = FileSink(tmp_path / "port.log", report=lambda _: None)
    try:
        for sink in (ConsoleSink(console=record_console), NullSink(), file_sink):
            assert isinstance(sink, LogSinkPort)
    finally:
        file_sink.close()
