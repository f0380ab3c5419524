import dataclasses
import json
from http import HTTPStatus

import pytest
from pydantic import BaseModel

from problem_details import errors, schema, serializer
from problem_details.model import Problem, ProblemBuilder

BASE_URL = 'https://api.example.org/problem'
INSTANCE = 'https://api.example.org/widget/example-instance'

FULL_JSON = (
    '{"type":"https://api.example.org/problem/test.html","status":400,"title":"Bad Request",'
    '"detail":"error occurred","instance":"https://api.example.org/widget/example-instance"'
)


@dataclasses.dataclass
class ValidationError:
    message: str
    path: str


class ValidationErrorModel(BaseModel):
    message: str
    path: str


class PlainError:
    def __init__(self, message, path):
        self.message = message
        self.path = path


def full_builder() -> ProblemBuilder:
    builder = ProblemBuilder()
    builder.status = HTTPStatus.BAD_REQUEST.value
    builder.title = HTTPStatus.BAD_REQUEST.phrase
    builder.detail = 'error occurred'
    builder.instance = INSTANCE
    return builder.type('test.html', BASE_URL)


class TestProblemSerializer:

    def test_init(self):
        s = serializer.ProblemSerializer()
        assert s.debug is False

    def test_serialize_status_only(self):
        p = Problem.of(HTTPStatus.BAD_REQUEST)
        assert serializer.ProblemSerializer().serialize(p) == '{"type":"about:blank","status":400,"title":"Bad Request"}'  # noqa

    def test_serialize_default(self):
        assert serializer.ProblemSerializer().serialize(Problem()) == '{"type":"about:blank"}'

    def test_serialize_all_values(self):
        p = full_builder().build()
        assert serializer.ProblemSerializer().serialize(p) == FULL_JSON + '}'

    def test_serialize_list_extension(self):
        p = full_builder().extension('errors', ['error1', 'error2']).build()
        assert serializer.ProblemSerializer().serialize(p) == FULL_JSON + ',"errors":["error1","error2"]}'

    @pytest.mark.parametrize('error', [
        ValidationError('error', 'class/name'),
        ValidationErrorModel(message='error', path='class/name'),
        PlainError('error', 'class/name'),
        {'message': 'error', 'path': 'class/name'},
    ])
    def test_serialize_object_extension(self, error):
        p = full_builder().extension('error', error).build()
        assert serializer.ProblemSerializer().serialize(p) == (
            FULL_JSON + ',"error":{"message":"error","path":"class/name"}}'
        )

    def test_serialize_list_of_object_extension(self):
        p = full_builder().extension('errors', [
            ValidationError('error1', 'class/name'),
            ValidationError('error2', 'class/lastName'),
        ]).build()

        assert serializer.ProblemSerializer().serialize(p) == (
            FULL_JSON + ',"errors":[{"message":"error1","path":"class/name"},'
            '{"message":"error2","path":"class/lastName"}]}'
        )

    def test_serialize_primitive_extensions(self):
        p = Problem(extensions={
            'count': 3,
            'ratio': 0.5,
            'ok': False,
            'name': 'widget',
            'nested': [[1, 2], (3, 4)],
        })

        assert serializer.ProblemSerializer().serialize(p) == (
            '{"type":"about:blank","count":3,"ratio":0.5,"ok":false,"name":"widget",'
            '"nested":[[1,2],[3,4]]}'
        )

    def test_serialize_extension_order(self):
        p = ProblemBuilder(status=500).extension('z', 1).extension('a', 2).extension('m', 3).build()
        assert serializer.ProblemSerializer().serialize(p) == '{"type":"about:blank","status":500,"z":1,"a":2,"m":3}'  # noqa

    @pytest.mark.parametrize('blank', ['', ' ', '\t\n  '])
    def test_serialize_blank_omitted(self, blank):
        p = Problem(status=400, title=blank, detail=blank, instance=blank)
        assert serializer.ProblemSerializer().serialize(p) == '{"type":"about:blank","status":400}'

    def test_serialize_status_zero(self):
        assert serializer.ProblemSerializer().serialize(Problem(status=0)) == '{"type":"about:blank","status":0}'

    def test_serialize_unicode(self):
        p = Problem(title='Ungültige Eingabe')
        assert serializer.ProblemSerializer().serialize(p) == '{"type":"about:blank","title":"Ungültige Eingabe"}'
        assert serializer.ProblemSerializer().serialize_bytes(p) == '{"type":"about:blank","title":"Ungültige Eingabe"}'.encode('utf-8')  # noqa

    def test_serialize_deterministic(self):
        p = full_builder().extension('errors', [ValidationError('error1', 'class/name')]).build()
        s = serializer.ProblemSerializer()
        assert s.serialize(p) == s.serialize(p)

    def test_serialize_debug(self):
        p = full_builder().extension('errors', ['error1']).build()
        out = serializer.ProblemSerializer(debug=True).serialize(p)

        assert out.startswith('{\n  "type": ')
        assert json.loads(out) == json.loads(serializer.ProblemSerializer().serialize(p))

    def test_serialize_null_in_sequence(self):
        p = Problem(extensions={'errors': ['error1', None]})
        with pytest.raises(errors.InvalidExtensionValue):
            serializer.ProblemSerializer().serialize(p)

    def test_serialize_nan(self):
        p = Problem(extensions={'ratio': float('nan')})
        with pytest.raises(ValueError):
            serializer.ProblemSerializer().serialize(p)

    def test_to_dict(self):
        p = full_builder().extension('errors', ('error1', 'error2')).build()
        assert serializer.ProblemSerializer().to_dict(p) == {
            'type': 'https://api.example.org/problem/test.html',
            'status': 400,
            'title': 'Bad Request',
            'detail': 'error occurred',
            'instance': INSTANCE,
            'errors': ['error1', 'error2'],
        }

    def test_deserialize(self):
        with pytest.raises(errors.UnsupportedOperation):
            serializer.ProblemSerializer().deserialize('{"type":"about:blank"}')

    def test_deserialize_not_implemented(self):
        with pytest.raises(NotImplementedError):
            serializer.ProblemSerializer().deserialize(b'{}')

    def test_output_matches_schema(self):
        p = full_builder().extension('errors', ['error1', 'error2']).build()
        model = schema.Problem.model_validate_json(serializer.ProblemSerializer().serialize(p))

        assert model.type == p.type
        assert model.status == 400
        assert model.title == 'Bad Request'
        assert model.detail == 'error occurred'
        assert model.instance == INSTANCE
        assert model.model_extra == {'errors': ['error1', 'error2']}


class TestEncodeExtension:

    @pytest.mark.parametrize('value,expected', [
        ('text', 'text'),
        (1, 1),
        (1.5, 1.5),
        (True, True),
        (None, None),
        (['a', 'b'], ['a', 'b']),
        (('a', 'b'), ['a', 'b']),
        ([], []),
        ({'a': [1, 2]}, {'a': [1, 2]}),
        ([{'a': 1}, {'b': 2}], [{'a': 1}, {'b': 2}]),
        (ValidationError('m', 'p'), {'message': 'm', 'path': 'p'}),
    ])
    def test_encode(self, value, expected):
        assert serializer.encode_extension(value) == expected

    def test_encode_nested_null(self):
        with pytest.raises(errors.InvalidExtensionValue):
            serializer.encode_extension([['a'], [None]])

    @pytest.mark.parametrize('value', [
        {'a': [None]},
        {'s': {'a': ['x', None]}},
        [{'a': [None]}],
        ValidationError('m', [None]),
    ])
    def test_encode_null_in_nested_sequence(self, value):
        with pytest.raises(errors.InvalidExtensionValue):
            serializer.encode_extension(value)

    def test_encode_null_mapping_value(self):
        assert serializer.encode_extension({'b': None, 'a': [1]}) == {'b': None, 'a': [1]}


def test_media_type():
    assert serializer.MEDIA_TYPE == 'application/problem+json'
