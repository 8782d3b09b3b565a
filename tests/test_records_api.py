from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from dnscontroller.config import Settings
from dnscontroller.presentation.rest.app import create_app
from dnscontroller.presentation.rest.routes import get_record_path

RECORD_URI = "/api/v1/records/example.com/A"
ANSWERS_URI = RECORD_URI + "/answers"


@pytest.fixture
def client(database_url):
    app = create_app(Settings(DATABASE_URL=database_url))
    with TestClient(app) as client:
        yield client


@pytest.fixture
def created(client):
    response = client.post(RECORD_URI)
    assert response.status_code == 201
    return response.json()


def test_record_path_template():
    assert get_record_path() == "/api/v1/records/{name}/{record_type}"


def test_create_record(client):
    response = client.post("/api/v1/records/Example.COM/a")

    assert response.status_code == 201
    data = response.json()
    assert data["record"] == "example.com"
    assert data["record_type"] == "A"
    assert data["answers"] == []
    assert data["uuid"]
    assert data["created_at"]


def test_get_record(client, created):
    response = client.get(RECORD_URI)

    assert response.status_code == 200
    assert response.json()["uuid"] == created["uuid"]


def test_get_missing_record(client):
    response = client.get("/api/v1/records/missing.example.com/A")

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


def test_unsupported_record_type(client):
    response = client.post("/api/v1/records/example.com/TEAPOT")

    assert response.status_code == 400
    assert response.json()["code"] == "UNSUPPORTED_RECORD_TYPE"


def test_duplicate_record(client, created):
    response = client.post(RECORD_URI)

    assert response.status_code == 409
    assert response.json()["code"] == "ALREADY_EXISTS"


def test_delete_record(client, created):
    response = client.delete(RECORD_URI)
    assert response.status_code == 204

    assert client.get(RECORD_URI).status_code == 404


def test_delete_missing_record(client):
    response = client.delete(RECORD_URI)

    assert response.status_code == 404


def test_create_answers(client, created):
    owner_id = str(uuid4())
    payload = [{"target": "1.1.2.1", "type": "a", "owner_id": owner_id, "record_id": created["uuid"]}]

    response = client.post(ANSWERS_URI, json=payload)
    assert response.status_code == 201

    response = client.get(RECORD_URI)
    answers = response.json()["answers"]
    assert len(answers) == 1
    assert answers[0]["target"] == "1.1.2.1"
    assert answers[0]["type"] == "A"
    assert answers[0]["owner_id"] == owner_id
    assert answers[0]["record_id"] == created["uuid"]
    assert answers[0]["has_details"] is False
    assert "details" not in answers[0]


def test_create_answers_with_details(client):
    record = client.post("/api/v1/records/_sip._udp.example.com/SRV").json()
    payload = [{
        "target": "sip.example.com",
        "type": "SRV",
        "owner_id": str(uuid4()),
        "details": [{"port": 5060, "priority": 10, "weight": 5, "protocol": "udp"}],
    }]

    response = client.post("/api/v1/records/_sip._udp.example.com/SRV/answers", json=payload)

    assert response.status_code == 201
    answer = response.json()["answers"][0]
    assert answer["record_id"] == record["uuid"]
    assert answer["has_details"] is True
    assert answer["details"][0]["answer_id"] == answer["uuid"]
    assert answer["details"][0]["port"] == 5060


def test_answer_missing_target(client, created):
    response = client.post(ANSWERS_URI, json=[{"type": "A", "owner_id": str(uuid4())}])

    assert response.status_code == 400
    assert response.json()["code"] == "NO_ANSWER_TARGET"


def test_answer_unsupported_type(client, created):
    response = client.post(ANSWERS_URI, json=[{"target": "mail.example.com", "type": "MX"}])

    assert response.status_code == 400
    assert response.json()["code"] == "UNSUPPORTED_RECORD_TYPE"


def test_answers_bad_body(client, created):
    response = client.post(ANSWERS_URI, content=b"{not json")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_ANSWERS"


def test_answers_for_missing_record(client):
    response = client.post(ANSWERS_URI, json=[{"target": "1.1.1.1", "type": "A"}])

    assert response.status_code == 404


def test_duplicate_answers_roll_back(client, created):
    owner_id = str(uuid4())
    payload = [
        {"target": "1.1.1.1", "type": "A", "owner_id": owner_id},
        {"target": "1.1.1.1", "type": "A", "owner_id": owner_id},
    ]

    response = client.post(ANSWERS_URI, json=payload)

    assert response.status_code == 409
    assert client.get(RECORD_URI).json()["answers"] == []


def test_ttl_out_of_range(client, created):
    payload = [{"target": "1.1.1.1", "type": "A", "ttl": 2**63, "owner_id": str(uuid4())}]

    response = client.post(ANSWERS_URI, json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_ANSWERS"
    assert client.get(RECORD_URI).json()["answers"] == []


def test_largest_ttl_is_stored(client, created):
    payload = [{"target": "1.1.1.1", "type": "A", "ttl": 2**63 - 1, "owner_id": str(uuid4())}]

    response = client.post(ANSWERS_URI, json=payload)

    assert response.status_code == 201
    assert response.json()["answers"][0]["ttl"] == 2**63 - 1


def test_answer_with_two_details(client):
    client.post("/api/v1/records/_sip._udp.example.com/SRV")
    payload = [{
        "target": "sip.example.com",
        "type": "SRV",
        "owner_id": str(uuid4()),
        "details": [{"port": 1}, {"port": 2}],
    }]

    response = client.post("/api/v1/records/_sip._udp.example.com/SRV/answers", json=payload)

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_ANSWERS"
    assert client.get("/api/v1/records/_sip._udp.example.com/SRV").json()["answers"] == []
