from __future__ import annotations

from app.core.envelope import Envelope, decode_envelope, encode_body
from app.core.results import ErrorKind, Failure, Ok, classify_status
from app.models.employee import CreateEmployeeRequest, Employee
from tests.conftest import upstream_employee


def test_decode_list_envelope():
    raw = {"data": [upstream_employee("1", "Amy", 90000)], "status": "Successfully processed request."}

    result = decode_envelope(raw, list[Employee])

    assert isinstance(result, Ok)
    assert result.value.status == "Successfully processed request."
    assert result.value.data[0].name == "Amy"
    assert result.value.data[0].salary == 90000
    assert result.value.data[0].email == "amy@company.com"


def test_decode_missing_data_with_error_keeps_data_absent():
    result = decode_envelope({"status": "Failed", "error": "boom"}, list[Employee])

    assert isinstance(result, Ok)
    assert result.value.data is None
    assert result.value.error == "boom"


def test_decode_empty_list_is_not_absent():
    result = decode_envelope({"data": []}, list[Employee])

    assert isinstance(result, Ok)
    assert result.value.data == []


def test_decode_boolean_payload():
    result = decode_envelope({"data": True}, bool)

    assert isinstance(result, Ok)
    assert result.value.data is True


def test_decode_non_object_is_decode_error():
    result = decode_envelope(["not", "an", "envelope"], Employee)

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.DECODE_ERROR


def test_decode_malformed_payload_is_decode_error():
    result = decode_envelope({"data": {"employee_name": "No Id"}}, Employee)

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.DECODE_ERROR


def test_decode_negative_salary_is_decode_error():
    result = decode_envelope({"data": upstream_employee("1", "Amy", -5)}, Employee)

    assert isinstance(result, Failure)
    assert result.kind is ErrorKind.DECODE_ERROR


def test_encode_body_is_plain_payload():
    body = encode_body(CreateEmployeeRequest(name="Amy", salary=90000, age=30, title="Engineer"))

    assert body == {"name": "Amy", "salary": 90000, "age": 30, "title": "Engineer"}
    assert "data" not in body


def test_envelope_defaults():
    envelope = Envelope[bool]()
    assert envelope.data is None
    assert envelope.status is None
    assert envelope.error is None


def test_classify_status():
    assert classify_status(200) is None
    assert classify_status(201) is None
    assert classify_status(429) is ErrorKind.RATE_LIMITED
    assert classify_status(404) is ErrorKind.NOT_FOUND
    assert classify_status(400) is ErrorKind.VALIDATION_FAILED
    assert classify_status(500) is ErrorKind.UPSTREAM_UNAVAILABLE
    assert classify_status(503) is ErrorKind.UPSTREAM_UNAVAILABLE
