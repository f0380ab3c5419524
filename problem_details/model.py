"""Problem value object and builder for RFC 9457 Problem Details.

For details on the Problem format, see: https://www.rfc-editor.org/rfc/rfc9457.html
"""

import http
import logging
from collections.abc import Iterator
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .errors import InvalidExtensionKey

logger = logging.getLogger(__name__)

# RFC 9457 section 4.2.1: when no type is given, it is assumed to be "about:blank".
TYPE_DEFAULT = 'about:blank'

RESERVED_KEYS = ('type', 'status', 'title', 'detail', 'instance')

HTTPStatusLike = Union[http.HTTPStatus, int]


def _check_extension_key(key: str) -> None:
    if key in RESERVED_KEYS:
        logger.debug('rejecting reserved extension key: %s', key)
        raise InvalidExtensionKey(key)


def _materialize(value: Any) -> Any:
    # One-shot iterators are read once so the Problem can be serialized repeatedly.
    if isinstance(value, Iterator):
        return tuple(value)
    return value


class Problem:
    """An RFC 9457 Problem.

    This models a "problem" as defined in RFC 9457 (https://www.rfc-editor.org/rfc/rfc9457.html).
    A Problem is immutable once created: all members are read-only, and the
    extensions are stored as a read-only copy of the mapping they were created
    from. Use a ProblemBuilder (or the `problem` and `Problem.of` shortcuts) to
    assemble one piece by piece.

    Extension members are serialized as top-level members alongside the
    standard ones, so their keys may not collide with the standard member
    names. This is checked here, when the Problem is created, rather than when
    it is serialized.

    Args:
        type: A URI reference identifying the problem type. Defaults to "about:blank".
        status: The HTTP status code generated by the origin server.
        title: A short, human-readable summary of the problem type.
        detail: A human-readable explanation specific to this occurrence.
        instance: A URI reference identifying this specific occurrence.
        extensions: Additional members of the problem, in output order.

    Raises:
        InvalidExtensionKey: An extension key is one of the standard member names.
    """

    __slots__ = ('_type', '_status', '_title', '_detail', '_instance', '_extensions')

    def __init__(
            self,
            type: Optional[str] = None,
            status: Optional[int] = None,
            title: Optional[str] = None,
            detail: Optional[str] = None,
            instance: Optional[str] = None,
            extensions: Optional[Mapping[str, Any]] = None,
    ) -> None:
        ext = {}
        for key, value in (extensions or {}).items():
            _check_extension_key(key)
            ext[key] = _materialize(value)

        set_ = super(Problem, self).__setattr__
        set_('_type', TYPE_DEFAULT if type is None else type)
        set_('_status', status)
        set_('_title', title)
        set_('_detail', detail)
        set_('_instance', instance)
        set_('_extensions', MappingProxyType(ext))

    @property
    def type(self) -> str:
        return self._type

    @property
    def status(self) -> Optional[int]:
        return self._status

    @property
    def title(self) -> Optional[str]:
        return self._title

    @property
    def detail(self) -> Optional[str]:
        return self._detail

    @property
    def instance(self) -> Optional[str]:
        return self._instance

    @property
    def extensions(self) -> Mapping[str, Any]:
        return self._extensions

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f'Problem is immutable, cannot set {name!r}')

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f'Problem is immutable, cannot delete {name!r}')

    @classmethod
    def of(
            cls,
            http_status: HTTPStatusLike,
            problem_type: Optional[str] = None,
            problem_detail: Optional[str] = None,
            base_url: Optional[str] = '',
    ) -> 'Problem':
        """Create a new Problem from an HTTP status code.

        With only a status code, the Problem is not a full problem detail: its
        type stays "about:blank" and its title is the standard reason phrase
        of the status. If a problem type is given, it is joined onto the base
        URL (see ProblemBuilder.type). The detail is set whenever it is given.

        Args:
            http_status: The HTTP status of the problem, as an HTTPStatus or int.
            problem_type: The path of the problem type, relative to base_url.
            problem_detail: An explanation specific to this occurrence.
            base_url: The URL to make the problem type path absolute.

        Returns:
            A new Problem populated from the HTTP status.
        """
        code = http.HTTPStatus(http_status)
        builder = ProblemBuilder(status=code.value, title=code.phrase)
        if problem_type is not None:
            builder.type(problem_type, base_url)
        builder.detail = problem_detail
        return builder.build()

    def to_dict(self) -> Dict[str, Any]:
        """Get the ordered dictionary representation of the Problem document."""
        from .serializer import ProblemSerializer
        return ProblemSerializer().to_dict(self)

    def to_json(self, debug: bool = False) -> str:
        """Render the Problem as a JSON string.

        Args:
            debug: Pretty-print the JSON, making it easier for humans to read.
        """
        from .serializer import ProblemSerializer
        return ProblemSerializer(debug=debug).serialize(self)

    def to_bytes(self, debug: bool = False) -> bytes:
        """Render the Problem as UTF-8 encoded JSON bytes.

        Args:
            debug: Pretty-print the JSON, making it easier for humans to read.
        """
        from .serializer import ProblemSerializer
        return ProblemSerializer(debug=debug).serialize_bytes(self)

    def __str__(self) -> str:
        d: Dict[str, Any] = {'type': self.type}
        for name in RESERVED_KEYS[1:]:
            value = getattr(self, name)
            if value is not None:
                d[name] = value
        d.update(self.extensions)
        return str(f'Problem:<{d}>')

    def __repr__(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Problem):
            return NotImplemented
        return (
            self.type == other.type
            and self.status == other.status
            and self.title == other.title
            and self.detail == other.detail
            and self.instance == other.instance
            and dict(self.extensions) == dict(other.extensions)
        )

    __hash__ = None  # type: ignore


class ProblemBuilder:
    """Builder which accumulates the members of a Problem.

    The status, title, detail and instance members are plain attributes which
    can be set directly. The type is set with `type()`, which joins a problem
    type path onto a base URL, and extension members are added with
    `extension()`. Both return the builder, so calls can be chained.

    A builder is not safe to share between threads without external locking.
    The Problems it builds are.
    """

    def __init__(
            self,
            type: str = TYPE_DEFAULT,
            status: Optional[int] = None,
            title: Optional[str] = None,
            detail: Optional[str] = None,
            instance: Optional[str] = None,
            extensions: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self._type: str = type
        self.status: Optional[int] = status
        self.title: Optional[str] = title
        self.detail: Optional[str] = detail
        self.instance: Optional[str] = instance
        self._extensions: Dict[str, Any] = {}

        if extensions:
            for key, value in extensions.items():
                self.extension(key, value)

    def type(self, path: str, base_url: Optional[str] = '') -> 'ProblemBuilder':
        """Set the type of the problem.

        The type is the literal concatenation `base_url + '/' + path`; it is
        not validated or normalized.

        Args:
            path: The path of the problem type, relative to base_url.
            base_url: The URL making the type absolute (recommended, not mandatory).

        Returns:
            The builder.
        """
        self._type = f'{base_url or ""}/{path}'
        return self

    def extension(self, key: str, value: Any) -> 'ProblemBuilder':
        """Add an extension member to the problem.

        Adding a key which was already added replaces its value. The value
        can be anything the serializer can encode: primitives, sequences,
        mappings, dataclasses, pydantic models or plain objects.

        Args:
            key: The name of the member in the serialized problem.
            value: The value of the member.

        Returns:
            The builder.

        Raises:
            InvalidExtensionKey: The key is one of the standard member names.
        """
        _check_extension_key(key)
        self._extensions[key] = _materialize(value)
        return self

    def build(self) -> Problem:
        """Build a Problem from the current state of the builder."""
        return Problem(
            type=self._type,
            status=self.status,
            title=self.title,
            detail=self.detail,
            instance=self.instance,
            extensions=self._extensions,
        )


def problem(
        type: str = TYPE_DEFAULT,
        status: Optional[int] = None,
        title: Optional[str] = None,
        detail: Optional[str] = None,
        instance: Optional[str] = None,
        **extensions: Any,
) -> Problem:
    """Construct a Problem in a single call.

    Any keyword arguments beyond the standard members are added as
    extension members, in the order they are given.

    Raises:
        InvalidExtensionKey: An extension key is one of the standard member names.
    """
    return ProblemBuilder(
        type=type,
        status=status,
        title=title,
        detail=detail,
        instance=instance,
        extensions=extensions,
    ).build()
