"""
A basic example application showcasing problem_details with
debug enabled.

Run from the `examples` directory with:
    $ uvicorn debug:app
"""

from fastapi import FastAPI, Request, Response

from problem_details import MEDIA_TYPE, Problem, problem


app = FastAPI(debug=True)


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError) -> Response:
    p: Problem = problem(
        status=500,
        title='Unexpected Server Error',
        detail=str(exc),
        exc_type=exc.__class__.__name__,
    )
    return Response(
        content=p.to_bytes(debug=app.debug),
        status_code=500,
        media_type=MEDIA_TYPE,
    )


@app.get('/error')
async def error():
    raise ValueError('something went wrong')


# Response:
#
# $ curl localhost:8000/error
# {
#   "type": "about:blank",
#   "status": 500,
#   "title": "Unexpected Server Error",
#   "detail": "something went wrong",
#   "exc_type": "ValueError"
# }
