import io
import json
from typing import List, Optional, Union

import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict

from onetimesecret import APIClient

TEST_URL = "https://ots.test/api/v1"


class _BrokenBody(io.RawIOBase):
    """
    A response body whose read fails halfway.
    """

    def read(self, *args, **kwargs):
        raise requests.exceptions.ChunkedEncodingError("connection broken")


class RecordingAdapter(BaseAdapter):
    """
    A requests transport adapter that records the prepared requests and answers
    them with canned bodies instead of going to the network.

    body can be a json serializable object, raw bytes, or an exception to raise
    instead of sending the request.
    """

    def __init__(self, body=None, status_code: int = 200, broken_body: bool = False):
        super().__init__()
        self.body = body
        self.status_code = status_code
        self.broken_body = broken_body
        self.requests: List[requests.PreparedRequest] = []

    def send(self, request, **kwargs):
        self.requests.append(request)
        if isinstance(self.body, Exception):
            raise self.body
        response = requests.Response()
        response.status_code = self.status_code
        response.headers = CaseInsensitiveDict({"Content-Type": "application/json"})
        response.encoding = "utf-8"
        response.url = request.url
        response.request = request
        if self.broken_body:
            response.raw = _BrokenBody()
        elif isinstance(self.body, bytes):
            response.raw = io.BytesIO(self.body)
        else:
            response.raw = io.BytesIO(json.dumps(self.body).encode("utf-8"))
        return response

    def close(self):
        pass

    @property
    def last(self) -> Optional[requests.PreparedRequest]:
        return self.requests[-1] if self.requests else None


def make_client(
    body: Union[dict, list, bytes, Exception, None] = None,
    status_code: int = 200,
    broken_body: bool = False,
):
    """
    Returns a client talking to a RecordingAdapter, and the adapter itself.
    """
    adapter = RecordingAdapter(body, status_code=status_code, broken_body=broken_body)
    session = requests.Session()
    session.mount("https://", adapter)
    client = APIClient("a@b.com", "t0ken", url=TEST_URL, session=session)
    return client, adapter
