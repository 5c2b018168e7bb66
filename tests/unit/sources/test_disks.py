"""Tests for external-media discovery via psutil partitions."""

from __future__ import annotations

import unittest
from collections import namedtuple
from unittest import mock

from lazydirs.sources.disks import external_media_directories, is_external_mountpoint
from lazydirs.sources.types import DirectoryRecord

_Partition = namedtuple("_Partition", "device mountpoint fstype opts")


def _partitions(*mountpoints: str) -> list[_Partition]:
    return [_Partition(f"/dev/sd{idx}", mountpoint, "ext4", "rw") for idx, mountpoint in enumerate(mountpoints)]


class DiskSourceTests(unittest.TestCase):
    def test_external_mountpoint_must_be_below_prefix(self) -> None:
        self.assertTrue(is_external_mountpoint("/media/me/USB"))
        self.assertTrue(is_external_mountpoint("/Volumes/Backup"))
        self.assertFalse(is_external_mountpoint("/media"))
        self.assertFalse(is_external_mountpoint("/mntx/data"))
        self.assertFalse(is_external_mountpoint("/"))

    def test_lists_only_external_mounts_once(self) -> None:
        partitions = _partitions("/", "/boot", "/media/me/USB", "/run/media/me/Cam", "/media/me/USB")
        with mock.patch("lazydirs.sources.disks.psutil.disk_partitions", return_value=partitions):
            records = external_media_directories()

        self.assertEqual(
            records,
            [
                DirectoryRecord(location="/media/me/USB", name="USB"),
                DirectoryRecord(location="/run/media/me/Cam", name="Cam"),
            ],
        )

    def test_extra_prefixes_extend_defaults(self) -> None:
        partitions = _partitions("/data/disk1", "/srv/x")
        with mock.patch("lazydirs.sources.disks.psutil.disk_partitions", return_value=partitions):
            records = external_media_directories(["/data"])

        self.assertEqual([record.location for record in records], ["/data/disk1"])

    def test_partition_query_failure_is_empty(self) -> None:
        with mock.patch("lazydirs.sources.disks.psutil.disk_partitions", side_effect=OSError("boom")):
            with self.assertLogs("lazydirs.sources.disks", level="WARNING"):
                self.assertEqual(external_media_directories(), [])


if __name__ == "__main__":
    unittest.main()
