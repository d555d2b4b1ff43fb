import pytest

import minirpc
from minirpc import DecodeError, IdAdapter, MethodAdapter, ParamsAdapter, decode, encode


def test_id():

    assert decode(IdAdapter, '1') == 1
    assert encode(IdAdapter, 1) == '1'

    assert decode(IdAdapter, '0') == 0
    assert decode(IdAdapter, str(minirpc.values.ID_MAX)) == 2**64 - 1


@pytest.mark.parametrize('text', ('"1"', '1.0', '1.5', 'true', 'null', '-1', '{}', '[1]', str(2**64)))
def test_id_rejects(text):

    with pytest.raises(DecodeError):
        decode(IdAdapter, text)


def test_method():

    assert decode(MethodAdapter, '"text_method"') == 'text_method'
    assert encode(MethodAdapter, 'text_method') == '"text_method"'

    # No normalization of any kind.
    assert decode(MethodAdapter, '""') == ''
    assert decode(MethodAdapter, '" Text_Method "') == ' Text_Method '
    assert encode(MethodAdapter, '') == '""'


@pytest.mark.parametrize('text', ('1', 'null', 'true', '[]', '{}'))
def test_method_rejects(text):

    with pytest.raises(DecodeError):
        decode(MethodAdapter, text)


def test_params():

    positional = decode(ParamsAdapter, '[1,true]')
    assert positional == [1, True]
    assert isinstance(positional, list)
    assert positional[1] is True

    named = decode(ParamsAdapter, '{"foo":"bar"}')
    assert named == {'foo': 'bar'}
    assert isinstance(named, dict)

    assert encode(ParamsAdapter, [1, True]) == '[1,true]'
    assert encode(ParamsAdapter, {'foo': 'bar'}) == '{"foo":"bar"}'


def test_params_empty_forms_are_distinct():

    assert decode(ParamsAdapter, '[]') == []
    assert decode(ParamsAdapter, '{}') == {}
    assert encode(ParamsAdapter, []) == '[]'
    assert encode(ParamsAdapter, {}) == '{}'


def test_params_nested():

    text = '{"a":[1,{"b":null}],"c":1.5}'
    params = decode(ParamsAdapter, text)

    assert params == {'a': [1, {'b': None}], 'c': 1.5}
    assert encode(ParamsAdapter, params) == text


@pytest.mark.parametrize('text', ('1', '"x"', 'null', 'true'))
def test_params_rejects(text):

    with pytest.raises(DecodeError):
        decode(ParamsAdapter, text)
