"""
A basic example application showcasing problem_details

Run from the `examples` directory with:
    $ uvicorn basic:app
"""

from http import HTTPStatus

from fastapi import FastAPI, Response

from problem_details import MEDIA_TYPE, Problem, ProblemBuilder
from problem_details.schema import Problem as ProblemSchema


app = FastAPI()


def problem_response(problem: Problem) -> Response:
    """Map a Problem to an HTTP response. The response status is set
    separately, the Problem status member is only a copy of it.
    """
    return Response(
        content=problem.to_bytes(debug=app.debug),
        status_code=problem.status or 500,
        media_type=MEDIA_TYPE,
    )


@app.get('/')
async def root():
    return {'message': 'Hello World'}


@app.get('/missing')
async def missing():
    return problem_response(Problem.of(HTTPStatus.NOT_FOUND))


@app.get(
    path='/widget/{name}',
    responses={
        400: {
            'content': {MEDIA_TYPE: {'schema': ProblemSchema.model_json_schema()}},
        },
    },
)
async def widget(name: str):
    builder = ProblemBuilder(
        status=HTTPStatus.BAD_REQUEST.value,
        title=HTTPStatus.BAD_REQUEST.phrase,
        detail='widget name is invalid',
        instance=f'https://api.example.org/widget/{name}',
    )
    builder.type('invalid-widget', 'https://api.example.org/problem')
    builder.extension('errors', [{'message': 'too short', 'path': 'name'}])
    return problem_response(builder.build())


# Response:
#
# $ curl localhost:8000/missing
# {"type":"about:blank","status":404,"title":"Not Found"}
#
# $ curl localhost:8000/widget/x
# {"type":"https://api.example.org/problem/invalid-widget","status":400,"title":"Bad Request","detail":"widget name is invalid","instance":"https://api.example.org/widget/x","errors":[{"message":"too short","path":"name"}]}
