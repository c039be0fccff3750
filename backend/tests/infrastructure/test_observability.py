"""JSON log formatter — structured fields pass through as JSON keys."""

import json
import logging
from uuid import uuid4

from blindbeer.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra):
    record = logging.LogRecord(
        "blindbeer.test", logging.INFO, __file__, 1, "Rating saved", None, None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_formats_message_and_level():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["message"] == "Rating saved"
    assert payload["level"] == "INFO"


def test_includes_domain_extras():
    player_id = uuid4()
    payload = json.loads(JSONFormatter().format(
        _record(session_code="ABC234", player_id=player_id, beer_number=3),
    ))
    assert payload["session_code"] == "ABC234"
    assert payload["player_id"] == str(player_id)
    assert payload["beer_number"] == 3


def test_setup_logging_does_not_stack_handlers():
    setup_logging("DEBUG", "json")
    setup_logging("INFO", "text")
    root = logging.getLogger()
    ours = [h for h in root.handlers if h.get_name() == "blindbeer"]
    assert len(ours) == 1
    assert root.level == logging.INFO
    assert not isinstance(ours[0].formatter, JSONFormatter)
