"""RFC 9457 Problem Details for HTTP APIs."""

__title__ = 'problem-details'
__version__ = '1.0.0'
__description__ = 'Builder and JSON serializer for RFC 9457 Problem Details for HTTP APIs.'
__author__ = 'Vapor IO'
__author_email__ = 'vapor@vapor.io'
__url__ = 'https://github.com/vapor-ware/problem-details'
__license__ = 'GNU General Public License v3.0'

from .errors import (InvalidExtensionKey, InvalidExtensionValue,
                     ProblemDetailsError, UnsupportedOperation)
from .model import (RESERVED_KEYS, TYPE_DEFAULT, Problem, ProblemBuilder,
                      problem)
from .serializer import MEDIA_TYPE, ProblemSerializer, encode_extension

__all__ = [
    'InvalidExtensionKey',
    'InvalidExtensionValue',
    'MEDIA_TYPE',
    'Problem',
    'ProblemBuilder',
    'ProblemDetailsError',
    'ProblemSerializer',
    'RESERVED_KEYS',
    'TYPE_DEFAULT',
    'UnsupportedOperation',
    'encode_extension',
    'problem',
]
