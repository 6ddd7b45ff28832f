# tests/records/test_live.py
import pytest

from genai_wire import ContextWindowCompressionConfig, FormatError, SlidingWindow, decode, encode


def test_sliding_window():
    assert encode(SlidingWindow()) == b"{}"
    assert encode(SlidingWindow(target_tokens=1024)) == b'{"targetTokens":"1024"}'


def test_compression_config_empty():
    assert encode(ContextWindowCompressionConfig()) == b"{}"


def test_compression_config_all_fields():
    config = ContextWindowCompressionConfig(
        trigger_tokens=1024,
        sliding_window=SlidingWindow(target_tokens=1024),
    )
    wire = encode(config)
    assert wire == b'{"triggerTokens":"1024","slidingWindow":{"targetTokens":"1024"}}'
    assert decode(ContextWindowCompressionConfig, wire) == config


def test_present_but_empty_window_is_kept():
    config = decode(ContextWindowCompressionConfig, b'{"slidingWindow": {}}')
    assert config.sliding_window == SlidingWindow()


def test_nested_invalid_target_tokens():
    with pytest.raises(FormatError) as exc:
        decode(ContextWindowCompressionConfig, b'{"slidingWindow": {"targetTokens": "lots"}}')
    assert exc.value.field == "slidingWindow.targetTokens"
