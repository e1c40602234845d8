import argparse
import csv
import json
import logging
import sys
import time
from importlib.metadata import version as packageVersion
from typing import Any, Dict, Optional, Sequence

from .client import CloudIIWirelessClient
from .errors import DeviceError, HeadSetOff, UnknownResponse
from .locator import findRecognizedDevices, identityOf
from .protocol import READ_TIMEOUT_MS

CSV_FIELDNAMES = ["timestamp", "batteryChargePercent", "batteryIsCharging"]


#*Helpers
def _stableSignatureForChangeDetection(snapshot: Dict[str, Any]) -> str:
    comparable = dict(snapshot)
    comparable.pop("timestamp", None)
    return json.dumps(comparable, sort_keys=True, separators=(",", ":"))


def _printSnapshot(snapshot: Dict[str, Any], asJson: bool, prettyJson: bool, csvWriter: Optional[csv.DictWriter]) -> None:
    battery = snapshot.get("battery") or {}

    if csvWriter is not None:
        row: Dict[str, Any] = {"batteryChargePercent": battery.get("chargePercent"), "batteryIsCharging": battery.get("isCharging")}
        if "timestamp" in snapshot:
            row["timestamp"] = snapshot["timestamp"]

        csvWriter.writerow(row)
        sys.stdout.flush()
        return

    if asJson:
        if prettyJson:
            print(json.dumps(snapshot, indent=2, sort_keys=True))
        else:
            print(json.dumps(snapshot, separators=(",", ":"), sort_keys=True))
        return

    #*Human Readable
    print(f"Battery: {battery.get('chargePercent')}% charging={battery.get('isCharging')}")


def _printDeviceList() -> int:
    devices = findRecognizedDevices()

    if not devices:
        print("No Cloud II Wireless HID devices found")
        return 1

    for i, device in enumerate(devices, start=1):
        identity = identityOf(device)
        print(
            f"[{i}] "
            f"vendor=0x{identity.vendorId:04X} "
            f"product=0x{identity.productId:04X} "
            f"mfg={device.get('manufacturer_string')!r} "
            f"product={device.get('product_string')!r} "
            f"path={device.get('path')!r}"
        )

    return 0


def _buildParser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cloudbattery", description="Battery level of a HyperX / HP Cloud II Wireless headset via HID")

    #?Meta
    parser.add_argument("--version", action="store_true")
    parser.add_argument("--device-list", action="store_true")
    parser.add_argument("--verbose", action="store_true", help="Debug logging on stderr")
    parser.add_argument("--timeout-ms", type=int, default=READ_TIMEOUT_MS)

    #?Output
    parser.add_argument("--json", action="store_true")
    parser.add_argument("--p", action="store_true", help="Pretty JSON")
    parser.add_argument("--csv", action="store_true")
    parser.add_argument("--no-timestamp", action="store_true")

    #?Watch
    parser.add_argument("--watch", action="store_true")
    parser.add_argument("--changes-only", action="store_true")
    parser.add_argument("--interval", type=float, default=2.0)
    parser.add_argument("--count", type=int, default=0)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _buildParser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)

    #?version
    if args.version:
        print(packageVersion("cloudbattery"))
        return 0

    if args.interval <= 0:
        raise SystemExit("--interval must be > 0")

    if args.timeout_ms <= 0:
        raise SystemExit("--timeout-ms must be > 0")

    try:
        if args.device_list:
            return _printDeviceList()
        return _run(args)
    except DeviceError as error:
        print(error, file=sys.stderr)
        return 1


def _run(args: argparse.Namespace) -> int:
    intervalSeconds = max(args.interval, 0.25)

    asCsv = bool(args.csv)
    asJson = bool(args.json) and not asCsv
    prettyJson = bool(args.p)
    includeTimestamp = not args.no_timestamp

    csvWriter: Optional[csv.DictWriter] = None
    if asCsv:
        csvWriter = csv.DictWriter(sys.stdout, fieldnames=CSV_FIELDNAMES)
        csvWriter.writeheader()

    lastSignature: Optional[str] = None

    with CloudIIWirelessClient(readTimeoutMs=args.timeout_ms) as client:

        def emitOnce() -> bool:
            nonlocal lastSignature

            snapshot = client.getSnapshot(includeTimestamp=includeTimestamp)

            if args.watch and args.changes_only:
                sig = _stableSignatureForChangeDetection(snapshot)
                if sig == lastSignature:
                    return False
                lastSignature = sig

            _printSnapshot(snapshot, asJson, prettyJson, csvWriter)
            return True

        if args.watch:
            emitted = 0
            try:
                while True:
                    try:
                        if emitOnce():
                            emitted += 1
                            if args.count and emitted >= args.count:
                                return 0
                    except (HeadSetOff, UnknownResponse) as error:
                        #?Headset asleep or mid-reconnect, keep polling
                        print(error, file=sys.stderr)
                    time.sleep(intervalSeconds)
            except KeyboardInterrupt:
                if not asCsv:
                    print("\nStopped.")
                return 0

        emitOnce()
        return 0
