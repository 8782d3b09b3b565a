import json
from uuid import uuid4

import pytest

from dnscontroller.application.dto.answer import parse_answers
from dnscontroller.domain.exceptions import (InvalidAnswers, NoAnswerTarget,
                                             NoAnswerType, UnsupportedRecordType)
from dnscontroller.domain.identifiers import NIL_UUID


def _body(answers) -> bytes:
    return json.dumps(answers).encode()


def test_parse_answers():
    owner_id = uuid4()
    body = _body([
        {"target": "1.1.2.1", "type": "a", "owner_id": str(owner_id), "ttl": 300},
        {"target": "sip.example.com", "type": "SRV", "owner_id": str(owner_id),
         "details": [{"port": 5060, "protocol": "udp"}]},
    ])

    answers = parse_answers(body)

    assert len(answers) == 2
    assert answers[0].target == "1.1.2.1"
    assert answers[0].type == "a"
    assert answers[0].ttl == 300
    assert answers[0].owner_id == owner_id
    assert answers[0].details is None
    assert answers[1].details[0].port == 5060
    assert answers[1].details[0].answer_id == NIL_UUID


def test_parse_empty_list():
    assert parse_answers(b"[]") == []


def test_unknown_fields_are_ignored():
    answers = parse_answers(_body([{"target": "1.1.1.1", "type": "A", "color": "blue"}]))

    assert answers[0].target == "1.1.1.1"


@pytest.mark.parametrize("body", [
    b"not json",
    b"",
    b'{"target": "1.1.1.1", "type": "A"}',
    b'[{"target": "1.1.1.1", "type": "A", "ttl": -1}]',
    b'[{"target": "1.1.1.1", "type": "A", "owner_id": "nope"}]',
    b'[{"target": "1.1.1.1", "type": "A", "ttl": 9223372036854775808}]',
    b'[{"target": "sip.example.com", "type": "SRV", "details": [{"port": 2147483648}]}]',
    b'[{"target": "sip.example.com", "type": "SRV", "details": [{"port": 1}, {"port": 2}]}]',
])
def test_bad_body(body):
    with pytest.raises(InvalidAnswers) as exc_info:
        parse_answers(body)

    assert exc_info.value.code == "INVALID_ANSWERS"


def test_missing_type():
    with pytest.raises(NoAnswerType):
        parse_answers(_body([{"target": "1.1.1.1"}]))


def test_missing_target():
    with pytest.raises(NoAnswerTarget):
        parse_answers(_body([{"type": "A"}]))


def test_unsupported_type():
    with pytest.raises(UnsupportedRecordType):
        parse_answers(_body([{"target": "mail.example.com", "type": "MX"}]))


def test_one_bad_answer_rejects_batch():
    body = _body([
        {"target": "1.1.1.1", "type": "A"},
        {"target": "mail.example.com", "type": "MX"},
    ])

    with pytest.raises(UnsupportedRecordType):
        parse_answers(body)
