from typing import List

from .api_resource import APIResourse
from .utils import quote_key

from .types.secret import SecretRecord


class SecretAPI(APIResourse):
    """
    The secret related endpoints. None of these calls is retried: except for the
    metadata reads, each of them changes the state of the secret on the server.
    """

    def create(
        self, secret: str, passphrase: str, recipient: str, ttl: int
    ) -> SecretRecord:
        """
        Stores a secret, and shares it with the recipient via email. This request is
        sent via POST https://onetimesecret.com/api/v1/share

        :param str secret: the value to store
        :param str passphrase: the passphrase the recipient needs to view the secret.
            An empty string means no passphrase.
        :param str recipient: email address of the recipient
        :param int ttl: time to live of the secret in seconds. The server decides
            which values are valid.
        :return: the stored secret. The value is not sent back by the server.
        """
        data = {
            "secret": secret,
            "passphrase": passphrase,
            "ttl": str(ttl),
            "recipient": recipient,
        }
        response = self._post("share", data=data)
        return self.ensure_type(response, SecretRecord)

    def generate(self, passphrase: str, recipient: str, ttl: int) -> SecretRecord:
        """
        Generates a short, unique secret which is useful for temporary passwords,
        one-time pads, salts etc. The result is the same as create(), except that the
        generated value is populated. This request is sent via
        POST https://onetimesecret.com/api/v1/generate
        """
        data = {
            "passphrase": passphrase,
            "ttl": str(ttl),
            "recipient": recipient,
        }
        response = self._post("generate", data=data)
        return self.ensure_type(response, SecretRecord)

    def retrieve(self, secret_key: str, passphrase: str) -> SecretRecord:
        """
        Gets the value of a secret. Once retrieved, the secret is no longer available
        on the server. A wrong passphrase is reported by the server in the returned
        record, not as an exception. This request is sent via
        POST https://onetimesecret.com/api/v1/secret/SECRET_KEY

        :param str secret_key: the key returned when the secret was created
        :param str passphrase: the passphrase specified on creation
        """
        data = {
            "secret_key": secret_key,
            "passphrase": passphrase,
        }
        response = self._post(f"secret/{quote_key(secret_key)}", data=data)
        return self.ensure_type(response, SecretRecord)

    def retrieve_metadata(self, metadata_key: str) -> SecretRecord:
        """
        Gets the metadata of a secret, such as when or if it has been viewed, without
        consuming the secret. The metadata key is intended for the owner of the
        secret and should be kept private. This request is sent via
        POST https://onetimesecret.com/api/v1/private/METADATA_KEY
        """
        response = self._post(f"private/{quote_key(metadata_key)}")
        return self.ensure_type(response, SecretRecord)

    def burn(self, metadata_key: str) -> SecretRecord:
        """
        Burns a secret, stopping it from being read by the recipient. This request is
        sent via POST https://onetimesecret.com/api/v1/private/METADATA_KEY/burn

        Note: the server has been observed not to burn the secret as documented, so
        treat the returned record as advisory. Use retrieve_metadata() to check the
        state of the secret afterwards.
        """
        response = self._post(f"private/{quote_key(metadata_key)}/burn")
        return self.ensure_type(response, SecretRecord)

    def list_recent(self) -> List[SecretRecord]:
        """
        Gets the metadata of the secrets that have not been viewed by their
        recipients yet. This request is sent via
        GET https://onetimesecret.com/api/v1/private/recent
        """
        response = self._get("private/recent")
        return self.ensure_list(response, SecretRecord)
