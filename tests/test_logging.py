import json
import logging
from pathlib import Path

from textscan.utils.logging import configure_json_logger, flush_handlers, log_event


def test_structured_logger_emits_jsonl(tmp_path: Path) -> None:
    log_file = tmp_path / "events.jsonl"
    logger = configure_json_logger(log_file)

    trace_id = log_event(logger, "scan.start", input="in.txt")
    log_event(logger, "scan.completed", trace_id=trace_id, tokens=2)
    flush_handlers(logger)

    lines = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines() if line.strip()]

    assert len(lines) == 2
    assert all(line["trace_id"] == trace_id for line in lines)
    assert {line["event"] for line in lines} == {"scan.start", "scan.completed"}
    assert lines[0]["input"] == "in.txt"
    assert lines[1]["tokens"] == 2


def test_parser_rejections_reach_project_log(tmp_path: Path) -> None:
    log_file = tmp_path / "debug.jsonl"
    logger = configure_json_logger(log_file, level=logging.DEBUG)

    logging.getLogger("textscan.parsers.numbers").debug(
        "number_parse_failed", extra={"reason": "overflow", "target": "int8", "base": 10}
    )
    flush_handlers(logger)

    (entry,) = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert entry["event"] == "number_parse_failed"
    assert entry["reason"] == "overflow"
    assert entry["logger"] == "textscan.parsers.numbers"


def test_null_handler_without_path() -> None:
    logger = configure_json_logger(None)
    assert isinstance(logger.handlers[0], logging.NullHandler)
