"""
The api/v1/client module serves as the single entry point of all apis, holding
information such as the url and the account credentials, as well as the http
session that is reused across calls.
"""

import requests
from loguru import logger
from requests import Response
from requests.exceptions import RequestException
from typing import List, Optional, Tuple, Union

from onetimesecret.config import ONETIMESECRET_API_URL
import onetimesecret._internal.logging as internal_logging

# import the related API resources. Note that in all these files, they should
# not import the client to avoid circular imports.
from .api_resource import APIResourse
from .secret import SecretAPI
from .types.secret import SecretRecord
from .types.status import HealthStatus
from .utils import (
    ReadError,
    ServiceUnavailable,
    TransportError,
    create_uri,
)


class APIClient(object):
    """
    A OneTimeSecret API client that is associated with an account. This class holds
    all the apis callable by the user.

    Every call is a single blocking round trip. Nothing is retried or cached: the
    create, generate, retrieve and burn calls change the state of the secret on the
    server, and whether to repeat them is up to the caller.
    """

    def __init__(
        self,
        username: str,
        token: str,
        url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[Union[float, Tuple[float, float]]] = None,
    ):
        """
        Creates an api client. No request is sent until one of the apis is called.

        :param str username: the email address of the account
        :param str token: the api token of the account
        :param str url: the api url. Defaults to ONETIMESECRET_API_URL in
            onetimesecret.config.
        :param requests.Session session: the session to send the requests with. A new
            session is created if not given.
        :param timeout: passed to requests as is. The client does not set a timeout
            of its own.
        """
        self._username = username
        self._token = token
        self.url: str = (url or ONETIMESECRET_API_URL).rstrip("/")
        self._timeout = timeout
        self._session = session or requests.Session()
        # Only takes effect when ONETIMESECRET_ENABLE_INTERNAL_LOG is set.
        internal_logging.enable()

        # Add individual APIs
        self.secret = SecretAPI(self)

    @property
    def username(self) -> str:
        return self._username

    @property
    def token(self) -> str:
        return self._token

    def _request(self, method: str, route: str, **kwargs) -> Response:
        """
        Sends a request to the given route, and reads the whole response body. Basic
        auth with the account credentials is attached to every request.

        :raises TransportError: if the request cannot be built or sent
        :raises ReadError: if the response body cannot be read
        """
        url = create_uri(self.url, route)
        kwargs["auth"] = (self._username, self._token)
        kwargs["stream"] = True
        kwargs.setdefault("timeout", self._timeout)
        internal_logging.trace_request(method, route)

        try:
            response = self._session.request(method, url, **kwargs)
        except RequestException as e:
            logger.warning(f"{method}: unable to send request.")
            raise TransportError(f"unable to send request: {e}", method, url) from e

        try:
            # Accessing content reads the body in full, and caches it for json().
            _ = response.content
        except RequestException as e:
            logger.warning(f"{method}: unable to read response.")
            raise ReadError(f"unable to read response: {e}", method, url) from e
        finally:
            response.close()

        internal_logging.trace_request(method, route, response.status_code)
        return response

    def _get(self, route: str, **kwargs) -> Response:
        return self._request("GET", route, **kwargs)

    def _post(self, route: str, **kwargs) -> Response:
        return self._request("POST", route, **kwargs)

    def status(self) -> HealthStatus:
        """
        Checks the current status of the OneTimeSecret servers. This request is sent
        via GET https://onetimesecret.com/api/v1/status

        :raises ServiceUnavailable: if the servers report that they are offline. A
            failure to get the status raises TransportError, ReadError or
            DecodeError instead.
        """
        status_api = APIResourse(self)
        response = self._get("status")
        health = status_api.ensure_type(response, HealthStatus)
        if health.is_offline:
            raise ServiceUnavailable(method="GET", url=response.url)
        return health

    def create(
        self, secret: str, passphrase: str, recipient: str, ttl: int
    ) -> SecretRecord:
        """
        Stores a secret and shares it with the recipient. See SecretAPI.create.
        """
        return self.secret.create(secret, passphrase, recipient, ttl)

    def generate(self, passphrase: str, recipient: str, ttl: int) -> SecretRecord:
        """
        Generates a secret on the server side. See SecretAPI.generate.
        """
        return self.secret.generate(passphrase, recipient, ttl)

    def retrieve(self, secret_key: str, passphrase: str) -> SecretRecord:
        """
        Gets the value of a secret, consuming it. See SecretAPI.retrieve.
        """
        return self.secret.retrieve(secret_key, passphrase)

    def retrieve_metadata(self, metadata_key: str) -> SecretRecord:
        """
        Gets the metadata of a secret. See SecretAPI.retrieve_metadata.
        """
        return self.secret.retrieve_metadata(metadata_key)

    def burn(self, metadata_key: str) -> SecretRecord:
        """
        Burns a secret. The result is advisory, see SecretAPI.burn.
        """
        return self.secret.burn(metadata_key)

    def retrieve_recent_metadata(self) -> List[SecretRecord]:
        """
        Lists the metadata of recent secrets. See SecretAPI.list_recent.
        """
        return self.secret.list_recent()
