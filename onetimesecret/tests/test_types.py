import json
import unittest

from loguru import logger

from onetimesecret import HealthStatus, SecretRecord, ServiceState


class TestSecretRecord(unittest.TestCase):
    def test_all_fields_absent_by_default(self):
        record = SecretRecord()
        for name in (
            "custid",
            "metadata_key",
            "secret_key",
            "value",
            "state",
            "recipient",
            "ttl",
            "metadata_ttl",
            "secret_ttl",
            "created",
            "updated",
            "passphrase_required",
        ):
            self.assertIsNone(getattr(record, name), name)
        self.assertEqual(record.to_json(), "{}")

    def test_round_trip(self):
        record = SecretRecord(
            custid="a@b.com",
            metadata_key="m1",
            secret_key="s1",
            value="",
            state="new",
            recipient=["c*****@d.com", "a*****@b.com"],
            ttl=0,
            metadata_ttl=1209600,
            secret_ttl=604800,
            created=1700000000,
            updated=1700000001,
            passphrase_required=False,
        )
        decoded = SecretRecord(**json.loads(record.to_json()))
        self.assertEqual(decoded, record)
        self.assertEqual(decoded.recipient, ["c*****@d.com", "a*****@b.com"])
        self.assertEqual(decoded.ttl, 0)
        self.assertEqual(decoded.value, "")
        self.assertIs(decoded.passphrase_required, False)

    def test_partial_round_trip(self):
        record = SecretRecord(secret_key="abc123", ttl=60)
        content = json.loads(record.to_json())
        self.assertEqual(content, {"secret_key": "abc123", "ttl": 60})
        self.assertEqual(SecretRecord(**content), record)

    def test_unknown_fields_ignored(self):
        record = SecretRecord(**{"secret_key": "s1", "share_domain": "", "message": "x"})
        self.assertEqual(record.to_dict(), {"secret_key": "s1"})

    def test_pretty_print(self):
        messages = []
        handler_id = logger.add(messages.append, level="INFO", format="{message}")
        try:
            rendered = SecretRecord(secret_key="s1", state="new").pretty_print()
        finally:
            logger.remove(handler_id)
        self.assertEqual(json.loads(rendered), {"secret_key": "s1", "state": "new"})
        self.assertIn("\n", rendered)
        self.assertTrue(any("s1" in m for m in messages))


class TestHealthStatus(unittest.TestCase):
    def test_is_offline(self):
        self.assertTrue(HealthStatus(status="offline").is_offline)
        self.assertFalse(HealthStatus(status="nominal").is_offline)
        self.assertFalse(HealthStatus(status="OFFLINE").is_offline)
        self.assertFalse(HealthStatus().is_offline)

    def test_service_state(self):
        self.assertEqual(ServiceState.NOMINAL, "nominal")
        self.assertEqual(ServiceState("offline"), ServiceState.OFFLINE)


if __name__ == "__main__":
    unittest.main()
