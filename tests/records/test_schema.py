# tests/records/test_schema.py
import pytest

from genai_wire import FormatError, JSONSyntaxError, Schema, decode, encode


def test_decode_empty():
    assert decode(Schema, b"{}") == Schema()


def test_decode_all_bounds():
    payload = (
        b'{"maxLength": "10", "minLength": "5", "minProperties": "2", "maxProperties": "4",'
        b' "maxItems": "8", "minItems": "1", "maximum": 10.0, "minimum": 2.0}'
    )
    assert decode(Schema, payload) == Schema(
        max_length=10,
        min_length=5,
        min_properties=2,
        max_properties=4,
        max_items=8,
        min_items=1,
        maximum=10.0,
        minimum=2.0,
    )


def test_absent_bound_is_none_not_zero():
    schema = decode(Schema, b'{"maxLength": "0"}')
    assert schema.max_length == 0
    assert schema.min_length is None


@pytest.mark.parametrize(
    "key",
    ["maxLength", "minLength", "minProperties", "maxProperties", "maxItems", "minItems", "maximum", "minimum"],
)
def test_decode_invalid_bound(key):
    with pytest.raises(FormatError) as exc:
        decode(Schema, f'{{"{key}": "abc"}}')
    assert exc.value.field == key


def test_decode_bare_number_for_int64_is_rejected():
    with pytest.raises(FormatError) as exc:
        decode(Schema, b'{"maxLength": 10}')
    assert exc.value.field == "maxLength"


def test_decode_invalid_json():
    with pytest.raises(JSONSyntaxError):
        decode(Schema, b'{"minimum": "abc"')


def test_encode_empty():
    assert encode(Schema()) == b"{}"


def test_encode_all_bounds_in_wire_order():
    schema = Schema(
        max_length=10,
        min_length=5,
        min_properties=2,
        max_properties=4,
        max_items=8,
        min_items=1,
        maximum=10.0,
        minimum=2.0,
    )
    assert encode(schema) == (
        b'{"maxItems":"8","maxLength":"10","maxProperties":"4","maximum":10,'
        b'"minItems":"1","minLength":"5","minProperties":"2","minimum":2}'
    )


def test_encode_fractional_float_bound():
    assert encode(Schema(maximum=2.5)) == b'{"maximum":2.5}'


def test_nested_schema_round_trip():
    schema = Schema(
        type="OBJECT",
        properties={
            "name": Schema(type="STRING", max_length=64),
            "tags": Schema(type="ARRAY", items=Schema(type="STRING"), max_items=3),
        },
        required=["name"],
        property_ordering=["name", "tags"],
        nullable=False,
    )
    wire = encode(schema)
    assert wire == (
        b'{"nullable":false,'
        b'"properties":{"name":{"maxLength":"64","type":"STRING"},'
        b'"tags":{"items":{"type":"STRING"},"maxItems":"3","type":"ARRAY"}},'
        b'"propertyOrdering":["name","tags"],"required":["name"],"type":"OBJECT"}'
    )
    assert decode(Schema, wire) == schema


def test_nested_invalid_bound_is_attributed():
    with pytest.raises(FormatError) as exc:
        decode(Schema, b'{"properties": {"age": {"minimum": "x"}}}')
    assert exc.value.field == "properties.age.minimum"


def test_any_of_error_path_includes_index():
    with pytest.raises(FormatError) as exc:
        decode(Schema, b'{"anyOf": [{"type": "STRING"}, {"maxItems": "many"}]}')
    assert exc.value.field == "anyOf[1].maxItems"


def test_nullable_must_be_boolean():
    with pytest.raises(FormatError) as exc:
        decode(Schema, b'{"nullable": "yes"}')
    assert exc.value.field == "nullable"
