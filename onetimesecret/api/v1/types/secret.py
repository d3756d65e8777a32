import json
from typing import List, Optional

from loguru import logger
from pydantic import BaseModel, StrictBool, StrictInt, StrictStr

from onetimesecret.config import PYDANTIC_MAJOR_VERSION


class SecretRecord(BaseModel):
    """
    The record returned by the share, generate, secret and private endpoints.

    Different endpoints populate different subsets of the fields, so every field
    is optional. A field that is missing from the response is None, which keeps it
    distinguishable from a real zero ttl or a real empty string. Fields are strict:
    a value of the wrong json type, such as "60" for a ttl, fails validation instead
    of being converted.
    """

    # This is your ID for your account.
    custid: Optional[StrictStr] = None
    # This should NOT be shared, it is the unique key to retrieve metadata about the secret.
    metadata_key: Optional[StrictStr] = None
    # The key for the secret you create, you can share this value.
    secret_key: Optional[StrictStr] = None
    # Only populated when retrieving or generating a secret.
    value: Optional[StrictStr] = None
    # new, viewed, received or burned.
    state: Optional[StrictStr] = None
    # Obfuscated email addresses of those who received the secret.
    recipient: Optional[List[StrictStr]] = None
    # The ttl specified on creation, in seconds. This is not the remaining time.
    ttl: Optional[StrictInt] = None
    # Remaining time in seconds before the metadata is destroyed.
    metadata_ttl: Optional[StrictInt] = None
    # Remaining time in seconds before the secret is destroyed.
    secret_ttl: Optional[StrictInt] = None
    # Unix timestamps.
    created: Optional[StrictInt] = None
    updated: Optional[StrictInt] = None
    passphrase_required: Optional[StrictBool] = None

    def to_dict(self) -> dict:
        """
        Returns the fields that are present, keyed by their wire names.
        """
        if PYDANTIC_MAJOR_VERSION == 1:
            return self.dict(exclude_none=True, by_alias=True)
        return self.model_dump(exclude_none=True, by_alias=True)

    def to_json(self, indent: Optional[StrictInt] = None) -> str:
        """
        Serializes the record in the same format as the api responses. Absent fields
        are omitted, so decoding the result gives back an equal record.
        """
        return json.dumps(self.to_dict(), indent=indent)

    def pretty_print(self) -> str:
        """
        Logs the record as indented json, and returns the rendered text.
        """
        rendered = self.to_json(indent=4)
        logger.info(rendered)
        return rendered


# The private/recent endpoint returns the records in server order.
SecretRecordList = List[SecretRecord]
