# tests/test_tracing.py
from contextlib import contextmanager

import pytest
from opentelemetry.trace import SpanKind

from genai_wire import FormatError, Schema, decode, encode
from genai_wire import tracing


class RecordingSpan:
    def __init__(self, name, options):
        self.name = name
        self.options = options
        self.attributes = {}
        self.exceptions = []
        self.status = None

    def set_attribute(self, key, value):
        self.attributes[key] = value

    def record_exception(self, err):
        self.exceptions.append(err)

    def set_status(self, status):
        self.status = status


class RecordingTracer:
    def __init__(self):
        self.spans = []

    @contextmanager
    def start_as_current_span(self, name, **kwargs):
        span = RecordingSpan(name, kwargs)
        self.spans.append(span)
        yield span


@pytest.fixture
def tracer(monkeypatch):
    recorder = RecordingTracer()
    monkeypatch.setattr(tracing, "get_tracer", lambda name=None: recorder)
    return recorder


def test_encode_span(tracer):
    encode(Schema(title="t"))
    (span,) = tracer.spans
    assert span.name == "genai_wire.codec.encode"
    assert span.options == {"kind": SpanKind.INTERNAL}
    assert span.attributes["genai_wire.record"] == "Schema"
    assert span.attributes["ok"] is True


def test_decode_failure_is_recorded_and_reraised(tracer):
    with pytest.raises(FormatError):
        decode(Schema, b'{"maxLength": "x"}')
    (span,) = tracer.spans
    assert span.name == "genai_wire.codec.decode"
    assert span.attributes["ok"] is False
    assert span.attributes["exception.type"] == "FormatError"
    assert isinstance(span.exceptions[0], FormatError)


def test_attributes_drop_unsupported_values(tracer):
    with tracing.codec_span("encode", attributes={"a": None, "b": [1, object(), "x"], "c": {"k": 1}}) as span:
        pass
    assert span.attributes == {"b": [1, "x"], "ok": True}
