import json
import logging
from pathlib import Path

from numstrkit.parsing import extract_numeric_rune_sequence
from numstrkit.utils.logging import configure_json_logger, flush_handlers, generate_trace_id, log_event


def _read_events(path: Path) -> list:
    return [json.loads(line) for line in path.read_text(encoding="utf-8").splitlines() if line.strip()]


def test_structured_logger_emits_jsonl(tmp_path: Path) -> None:
    log_file = tmp_path / "events.jsonl"
    logger = configure_json_logger(log_file)

    trace_id = log_event(logger, "test.start", input="ledger.csv")
    log_event(logger, "test.completed", trace_id=trace_id, values=2)
    flush_handlers(logger)

    lines = _read_events(log_file)

    assert len(lines) == 2
    assert all(line["trace_id"] == trace_id for line in lines)
    assert {line["event"] for line in lines} == {"test.start", "test.completed"}
    assert lines[0]["input"] == "ledger.csv"
    assert lines[1]["values"] == 2
    assert lines[0]["logger"] == "numstrkit"

    configure_json_logger(None)


def test_engine_emits_debug_event(tmp_path: Path) -> None:
    log_file = tmp_path / "parse.jsonl"
    logger = configure_json_logger(log_file, level=logging.DEBUG)

    extract_numeric_rune_sequence("x 42;", start_index=1)
    flush_handlers(logger)

    events = [line for line in _read_events(log_file) if line["event"] == "parse.completed"]

    assert len(events) == 1
    assert events[0]["level"] == "debug"
    assert events[0]["logger"] == "numstrkit.parsing.engine"
    assert events[0]["start_index"] == 1
    assert events[0]["termination"] == "end_of_target"
    assert events[0]["found_numeric_digits"] is True

    configure_json_logger(None)


def test_engine_is_silent_above_debug(tmp_path: Path) -> None:
    log_file = tmp_path / "quiet.jsonl"
    logger = configure_json_logger(log_file, level=logging.INFO)

    extract_numeric_rune_sequence("42")
    flush_handlers(logger)

    assert _read_events(log_file) == []

    configure_json_logger(None)


def test_flush_reaches_project_handlers(tmp_path: Path) -> None:
    log_file = tmp_path / "child.jsonl"
    configure_json_logger(log_file)
    child = logging.getLogger("numstrkit.parsing.engine")

    log_event(child, "child.event", value=1)
    flush_handlers(child)

    assert [line["event"] for line in _read_events(log_file)] == ["child.event"]

    configure_json_logger(None)


def test_trace_id_scope_prefix() -> None:
    scoped = generate_trace_id("cli")

    assert scoped.startswith("cli-")
    assert len(scoped) == len("cli-") + 32
    assert generate_trace_id() != generate_trace_id()
