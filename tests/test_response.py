import pytest

from minirpc import (
    DecodeError,
    Error,
    ErrorCode,
    Failure,
    ResponsePayload,
    ServerError,
    Success,
    decode,
    decode_response,
    encode,
    encode_response,
)

FAILURE = '{"error":{"code":-32700,"message":"Parse error"},"id":1}'
SUCCESS = '{"id":1,"result":true}'


def test_success_deserialization():

    assert decode(Success, SUCCESS) == Success(id=1, result=True)


def test_success_serialization():

    assert encode(Success, Success(id=1, result=True)) == SUCCESS


def test_success_null_result():

    # A null result is still a result: the key is kept on the wire.
    text = '{"id":1,"result":null}'
    success = decode(Success, text)

    assert success == Success(id=1, result=None)
    assert encode(Success, success) == text


def test_success_structured_result():

    text = '{"id":3,"result":{"items":[1,"two",3.5,false],"next":null}}'

    assert encode(Success, decode(Success, text)) == text


def test_failure_deserialization():

    expected = Failure(error=Error.new_parse_error(), id=1)

    assert decode(Failure, FAILURE) == expected


def test_failure_serialization():

    failure = Failure(error=Error.new_parse_error(), id=1)

    assert encode(Failure, failure) == FAILURE


def test_failure_without_id():

    failure = Failure(error=Error.new_parse_error())
    text = encode(Failure, failure)

    assert text == '{"error":{"code":-32700,"message":"Parse error"}}'
    assert '"id"' not in text
    assert decode(Failure, text) == failure


def test_failure_null_id():

    failure = decode(Failure, '{"error":{"code":-32700,"message":"Parse error"},"id":null}')

    assert failure.id is None
    assert encode(Failure, failure) == '{"error":{"code":-32700,"message":"Parse error"}}'


def test_failure_server_error():

    text = '{"error":{"code":-32000,"message":"Test error"},"id":9}'
    failure = decode(Failure, text)

    assert failure.error.code == ServerError(-32000)
    assert failure.error.message == 'Test error'
    assert encode(Failure, failure) == text


def test_payload_discrimination():

    payload = decode(ResponsePayload, FAILURE)
    assert isinstance(payload, Failure)

    payload = decode(ResponsePayload, SUCCESS)
    assert isinstance(payload, Success)

    payload = decode(ResponsePayload, '{"error":{"code":-32603,"message":"Internal error"}}')
    assert isinstance(payload, Failure)
    assert payload.error.code is ErrorCode.INTERNAL_ERROR


def test_error_and_result_is_ambiguous():

    text = '{"error":{"code":-32700,"message":"Parse error"},"id":1,"result":true}'

    with pytest.raises(DecodeError):
        decode(ResponsePayload, text)

    with pytest.raises(DecodeError):
        decode_response(text)


@pytest.mark.parametrize('text', (
    '{"id":1}',
    '{"result":true}',
    '{"id":1,"result":true,"extra":1}',
    '{"error":{"code":-32700},"id":1}',
    '{"error":{"code":"x","message":"Parse error"}}',
    '{"error":{"code":-32700,"message":"Parse error"},"id":"1"}',
    '{}',
    'true',
))
def test_response_rejects(text):

    with pytest.raises(DecodeError):
        decode_response(text)


def test_response_single():

    assert decode_response(FAILURE) == Failure(error=Error.new_parse_error(), id=1)
    assert decode_response(SUCCESS) == Success(id=1, result=True)

    assert encode_response(Failure(error=Error.new_parse_error(), id=1)) == FAILURE
    assert encode_response(Success(id=1, result=True)) == SUCCESS


def test_response_batch():

    text = '[' + FAILURE + ',' + SUCCESS + ']'
    expected = (
        Failure(error=Error.new_parse_error(), id=1),
        Success(id=1, result=True),
    )

    result = decode_response(text)

    assert result == expected
    assert encode_response(result) == text


def test_response_batch_order():

    text = '[' + SUCCESS + ',' + FAILURE + ']'

    result = decode_response(text)

    assert isinstance(result[0], Success)
    assert isinstance(result[1], Failure)
    assert encode_response(result) == text


def test_response_batch_without_id():

    batch = (
        Success(id=1, result=[1, 2]),
        Failure(error=Error.new_invalid_request()),
    )
    text = encode_response(batch)

    assert text == '[{"id":1,"result":[1,2]},{"error":{"code":-32600,"message":"Invalid request"}}]'
    assert decode_response(text) == batch


def test_response_batch_no_partial():

    text = '[' + SUCCESS + ',{"id":2}]'

    with pytest.raises(DecodeError) as excinfo:
        decode_response(text)

    assert 'Element 1' in str(excinfo.value)
