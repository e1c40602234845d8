"""Session lifecycle of CloudIIWirelessClient."""
from unittest.mock import patch

import pytest

from cloudbattery.client import CloudIIWirelessClient
from cloudbattery.errors import HeadSetOff, NoDeviceFound, TransportError
from cloudbattery.models import BatteryReading

from .conftest import makeResponse


class TestLifecycle:

    def test_construction_locates_device(self, fakeHid, fakeHandle):
        client = CloudIIWirelessClient()
        assert client.deviceHandle is fakeHandle
        fakeHandle.open_path.assert_called_once()

    def test_construction_without_device(self, fakeHid):
        fakeHid.enumerate.return_value = []
        with pytest.raises(NoDeviceFound):
            CloudIIWirelessClient()

    def test_context_exit_closes(self, fakeHid, fakeHandle):
        with CloudIIWirelessClient() as client:
            client.getBatteryLevel()
        fakeHandle.close.assert_called_once_with()
        assert client.deviceHandle is None

    def test_context_exit_closes_on_error(self, fakeHid, fakeHandle):
        fakeHandle.read.return_value = []
        with pytest.raises(HeadSetOff):
            with CloudIIWirelessClient() as client:
                client.getBatteryLevel()
        fakeHandle.close.assert_called_once_with()

    def test_close_is_idempotent(self, fakeHid, fakeHandle):
        client = CloudIIWirelessClient()
        client.close()
        client.close()
        fakeHandle.close.assert_called_once_with()

    def test_query_after_close(self, fakeHid, fakeHandle):
        client = CloudIIWirelessClient()
        client.close()
        with pytest.raises(TransportError, match="closed"):
            client.getBatteryLevel()
        fakeHandle.write.assert_not_called()


class TestQueries:

    def test_battery_level(self, fakeHid, fakeHandle):
        fakeHandle.read.return_value = makeResponse(0x0F, 42)
        with CloudIIWirelessClient() as client:
            assert client.getBatteryLevel() == BatteryReading(level=42, isCharging=False)

    def test_timeout_forwarded(self, fakeHid, fakeHandle):
        with CloudIIWirelessClient(readTimeoutMs=300) as client:
            client.getBatteryLevel()
        fakeHandle.read.assert_called_once_with(8, timeout_ms=300)

    def test_snapshot(self, fakeHid, fakeHandle):
        with patch("cloudbattery.client.time.time", return_value=1700000000.0):
            with CloudIIWirelessClient() as client:
                snapshot = client.getSnapshot()

        assert snapshot == {
            "timestamp": 1700000000.0,
            "battery": {"chargePercent": 73, "isCharging": True},
        }

    def test_snapshot_without_timestamp(self, fakeHid, fakeHandle):
        with CloudIIWirelessClient() as client:
            snapshot = client.getSnapshot(includeTimestamp=False)
        assert snapshot == {"battery": {"chargePercent": 73, "isCharging": True}}
