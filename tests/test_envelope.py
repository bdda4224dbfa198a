"""Tests for decoding complete responses."""

import json
import math

import pytest

from prom_reader_core.exceptions import (
    FieldDecodeError,
    MissingFieldError,
    PromApiError,
    PromDecodeError,
)
from prom_reader_core.models import (
    ActiveTarget,
    Envelope,
    FlagMap,
    Instant,
    InstantVector,
    LabelOrValueList,
    Sample,
    ScalarResult,
    Snapshot,
    Status,
    TargetHealth,
    Targets,
    decode_envelope,
)


VECTOR_RESPONSE = {
    "status": "success",
    "data": {
        "resultType": "vector",
        "result": [{"metric": {"job": "p"}, "value": [1.0, "1"]}]
    }
}


class TestDecodeEnvelope:
    """Test decode_envelope entry point."""

    def test_error_envelope(self) -> None:
        envelope = decode_envelope(
            b'{"status":"error","error":"Major","errorType":"Seriously Bad"}'
        )
        assert envelope == Envelope(
            status=Status.ERROR,
            data=None,
            warnings=[],
            error_type="Seriously Bad",
            error_message="Major",
        )

    def test_vector_with_infinite_sample(self) -> None:
        envelope = decode_envelope(
            b'{"status":"success","data":{"resultType":"vector",'
            b'"result":[{"metric":{"le":"+Inf"},"value":[1.0,"+Inf"]}]}}'
        )
        assert envelope.data == InstantVector(result=[
            Instant(metric={"le": "+Inf"}, sample=Sample(epoch=1.0, value=math.inf))
        ])

    def test_success_vector(self) -> None:
        envelope = decode_envelope(json.dumps(VECTOR_RESPONSE).encode())
        assert envelope.status is Status.SUCCESS
        assert envelope.warnings == []
        assert envelope.data == InstantVector(result=[
            Instant(metric={"job": "p"}, sample=Sample(epoch=1.0, value=1.0))
        ])

    def test_accepts_text(self) -> None:
        envelope = decode_envelope(json.dumps(VECTOR_RESPONSE))
        assert isinstance(envelope.data, InstantVector)

    def test_accepts_parsed_dict(self) -> None:
        envelope = decode_envelope(VECTOR_RESPONSE)
        assert isinstance(envelope.data, InstantVector)

    def test_error_with_partial_data_and_warnings(self) -> None:
        envelope = decode_envelope({
            "status": "error",
            "error": "This is a strange error",
            "errorType": "Weird",
            "warnings": ["You timed out, foo"],
            "data": VECTOR_RESPONSE["data"]
        })
        assert envelope.status is Status.ERROR
        assert envelope.error_type == "Weird"
        assert envelope.warnings == ["You timed out, foo"]
        assert isinstance(envelope.data, InstantVector)

    def test_success_with_warnings(self) -> None:
        envelope = decode_envelope({
            "warnings": ["You timed out, foo"],
            "status": "success",
            "data": {"resultType": "scalar", "result": [1435781451.781, "1"]}
        })
        assert envelope.warnings == ["You timed out, foo"]
        assert envelope.data == ScalarResult(result=Sample(epoch=1435781451.781, value=1.0))

    def test_success_without_data(self) -> None:
        envelope = decode_envelope({"status": "success"})
        assert envelope.data is None

    def test_null_data(self) -> None:
        envelope = decode_envelope({"status": "success", "data": None})
        assert envelope.data is None

    def test_targets_response(self) -> None:
        envelope = decode_envelope({
            "status": "success",
            "data": {
                "activeTargets": [{
                    "discoveredLabels": {"job": "prometheus"},
                    "labels": {"job": "prometheus"},
                    "scrapeUrl": "http://127.0.0.1:9090/metrics",
                    "lastError": "",
                    "lastScrape": "2017-01-17T15:07:44.723715405+01:00",
                    "health": "up"
                }],
                "droppedTargets": []
            }
        })
        assert isinstance(envelope.data, Targets)
        target = envelope.data.active[0]
        assert isinstance(target, ActiveTarget)
        assert target.last_error is None
        assert target.health is TargetHealth.UP

    def test_snapshot_response(self) -> None:
        envelope = decode_envelope({
            "status": "success",
            "data": {"name": "20171210T211224Z-2be650b6d019eb54"}
        })
        assert envelope.data == Snapshot(name="20171210T211224Z-2be650b6d019eb54")

    def test_flags_response(self) -> None:
        envelope = decode_envelope({"status": "success", "data": {"alertmanager.timeout": "10s"}})
        assert envelope.data == FlagMap(flags={"alertmanager.timeout": "10s"})

    def test_hint_forwarded(self) -> None:
        envelope = decode_envelope({"status": "success", "data": []}, hint=LabelOrValueList)
        assert envelope.data == LabelOrValueList(values=[])

    def test_duplicate_alertmanager_url_in_body(self) -> None:
        body = (
            '{"status":"success","data":{"activeAlertmanagers":'
            '[{"url":"http://a:9093","url":"http://b:9093"}]}}'
        )
        with pytest.raises(PromDecodeError):
            decode_envelope(body)

    def test_invalid_json(self) -> None:
        with pytest.raises(PromDecodeError, match="Invalid JSON"):
            decode_envelope(b"<html>bad gateway</html>")

    def test_missing_status(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            decode_envelope({"data": []})
        assert exc_info.value.field == "status"

    def test_unknown_status(self) -> None:
        with pytest.raises(FieldDecodeError) as exc_info:
            decode_envelope({"status": "partial"})
        assert exc_info.value.value == "partial"

    def test_error_without_error_type(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            decode_envelope({"status": "error", "error": "Major"})
        assert exc_info.value.field == "errorType"

    def test_warnings_must_be_strings(self) -> None:
        with pytest.raises(FieldDecodeError):
            decode_envelope({"status": "success", "warnings": [1]})

    def test_response_must_be_object(self) -> None:
        with pytest.raises(FieldDecodeError):
            decode_envelope("[]")


class TestEnvelope:
    """Test Envelope helpers."""

    def test_unwrap_success(self) -> None:
        envelope = decode_envelope(VECTOR_RESPONSE)
        assert isinstance(envelope.unwrap(), InstantVector)

    def test_unwrap_error(self) -> None:
        envelope = Envelope(
            status=Status.ERROR,
            error_type="bad_data",
            error_message="parse error at char 3"
        )
        with pytest.raises(PromApiError) as exc_info:
            envelope.unwrap()
        assert exc_info.value.error_type == "bad_data"
        assert exc_info.value.error_message == "parse error at char 3"

    def test_is_success(self) -> None:
        assert Envelope(status=Status.SUCCESS).is_success is True
        assert Envelope(status=Status.ERROR, error_type="t", error_message="m").is_success is False

    def test_to_prom_response_success(self) -> None:
        expected = {**VECTOR_RESPONSE, "warnings": []}
        assert decode_envelope(VECTOR_RESPONSE).to_prom_response() == expected

    def test_to_prom_response_error(self) -> None:
        response = {"status": "error", "errorType": "Seriously Bad", "error": "Major"}
        expected = {**response, "warnings": []}
        assert decode_envelope(response).to_prom_response() == expected

    def test_to_prom_response_always_has_warnings(self) -> None:
        assert Envelope(status=Status.SUCCESS).to_prom_response() == {
            "status": "success",
            "warnings": []
        }
        assert Envelope(
            status=Status.ERROR, error_type="t", error_message="m", warnings=["w"]
        ).to_prom_response() == {"status": "error", "errorType": "t", "error": "m", "warnings": ["w"]}

    def test_roundtrip_with_warnings(self) -> None:
        response = {
            "status": "success",
            "data": {"yaml": "CONTENT"},
            "warnings": ["slow"]
        }
        assert decode_envelope(decode_envelope(response).to_prom_response()) == decode_envelope(response)
