from loguru import logger
from pydantic import BaseModel
from requests import Response
from typing import TYPE_CHECKING, List, TypeVar, Type, NoReturn

from .utils import DecodeError

if TYPE_CHECKING:
    # only used for type hinting, but avoids circular imports
    from .client import APIClient


class APIResourse(object):
    """
    APIResource is a base class for all api implementations. It is registered
    with the APIClient object and provides a set of utility functions to
    interact with the API. For example, all secret related operations are
    implemented by the SecretAPI class, which is a subclass of APIResource.

    Implementation note: if you are implementing a new set of API, you should subclass
    APIResource and implement the required methods. And then, in
    onetimesecret/api/v1/client.py, you should add a new line in the __init__ function
    to register the new APIResource, for example:
        self.magic = MagicAPI(self)

    The http helpers of the client already raise TransportError and ReadError, so
    a response handed to the ensure_* functions has its body fully read. The
    ensure_* functions only decode, and raise DecodeError if that fails.
    """

    _client: "APIClient"

    def __init__(self, _client: "APIClient"):
        """
        Initializes the APIResource with the APIClient object. You should not
        need to explicitly call this method. All APIResource classes should
        be initialized by the APIClient object in its __init__ function.
        """
        self._client = _client
        self._get = _client._get
        self._post = _client._post

    def _raise_decode_error(self, response: Response, e: Exception) -> NoReturn:
        method = response.request.method if response.request is not None else None
        logger.warning(f"{method}: unable to decode the json response.")
        raise DecodeError(
            f"response (status {response.status_code}) cannot be decoded: {e}",
            method=method,
            url=response.url,
            body=response.text,
        ) from e

    # A type variable to represent a subclass of BaseModel
    T = TypeVar("T", bound=BaseModel)

    def ensure_type(self, response: Response, EnsuredType: Type[T]) -> T:
        """
        Utility function to ensure that the response is a json object of the given type.
        """
        try:
            content = response.json()
            if not isinstance(content, dict):
                raise TypeError(
                    f"expected a json object, got {type(content).__name__}"
                )
            return EnsuredType(**content)
        except (ValueError, TypeError) as e:
            self._raise_decode_error(response, e)

    def ensure_list(self, response: Response, EnsuredType: Type[T]) -> List[T]:
        """
        Utility function to ensure that the response is a json list of the given type.
        """
        try:
            content = response.json()
            if not isinstance(content, list):
                raise TypeError(f"expected a json array, got {type(content).__name__}")
            return [EnsuredType(**item) for item in content]
        except (ValueError, TypeError) as e:
            self._raise_decode_error(response, e)
