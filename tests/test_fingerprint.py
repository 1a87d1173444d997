"""Tests for fingerprint computation and the gate decision."""

import re

import pytest

from bowergate.config import InstallConfig
from bowergate.fingerprint import (
    FingerprintStore,
    check_fingerprint,
    compute_fingerprint,
    should_install,
)


class TestComputeFingerprint:
    def test_is_hex_md5(self):
        fp = compute_fingerprint(InstallConfig(dependencies={"jquery": "1.9.0"}))
        assert re.fullmatch(r"[0-9a-f]{32}", fp)

    def test_order_independent(self):
        a = InstallConfig(dependencies={"jquery": "1.9.0", "bootstrap": "~3.0", "d3": "*"})
        b = InstallConfig(dependencies={"d3": "*", "jquery": "1.9.0", "bootstrap": "~3.0"})
        assert compute_fingerprint(a) == compute_fingerprint(b)

    def test_version_change_changes_fingerprint(self):
        a = InstallConfig(dependencies={"jquery": "1.9.0"})
        b = InstallConfig(dependencies={"jquery": "1.9.1"})
        assert compute_fingerprint(a) != compute_fingerprint(b)

    def test_trailing_zero_in_version_matters(self):
        a = InstallConfig(dependencies={"jquery": "1.10"})
        b = InstallConfig(dependencies={"jquery": "1.1"})
        assert compute_fingerprint(a) != compute_fingerprint(b)

    def test_name_change_changes_fingerprint(self):
        a = InstallConfig(dependencies={"jquery": "1.9.0"})
        b = InstallConfig(dependencies={"zepto": "1.9.0"})
        assert compute_fingerprint(a) != compute_fingerprint(b)

    def test_added_dependency_changes_fingerprint(self):
        a = InstallConfig(dependencies={"jquery": "1.9.0"})
        b = InstallConfig(dependencies={"jquery": "1.9.0", "lodash": "2.4.1"})
        assert compute_fingerprint(a) != compute_fingerprint(b)

    def test_directory_change_changes_fingerprint(self):
        a = InstallConfig(dependencies={"jquery": "1.9.0"}, directory="lib")
        b = InstallConfig(dependencies={"jquery": "1.9.0"}, directory="vendor")
        c = InstallConfig(dependencies={"jquery": "1.9.0"})
        assert len({compute_fingerprint(a), compute_fingerprint(b), compute_fingerprint(c)}) == 3

    def test_empty_dependencies_stable(self):
        assert compute_fingerprint(InstallConfig()) == compute_fingerprint(InstallConfig())

    def test_settings_outside_deps_and_directory_ignored(self):
        a = InstallConfig(dependencies={"jquery": "1.9.0"})
        b = InstallConfig(dependencies={"jquery": "1.9.0"}, allow_root=True, timeout=30)
        assert compute_fingerprint(a) == compute_fingerprint(b)

    def test_distinct_samples_do_not_collide(self):
        configs = [
            InstallConfig(dependencies={f"pkg{i}": f"1.{j}.0"})
            for i in range(10)
            for j in range(10)
        ]
        assert len({compute_fingerprint(c) for c in configs}) == len(configs)


class TestShouldInstall:
    def test_missing_store_installs(self):
        assert should_install(None, "abc") is True

    def test_same_fingerprint_skips(self):
        assert should_install("abc", "abc") is False

    def test_different_fingerprint_installs(self):
        assert should_install("abc", "def") is True


class TestFingerprintStore:
    def test_read_missing_returns_none(self, temp_dir):
        assert FingerprintStore(temp_dir / ".bower-checksum").read() is None

    def test_write_then_read(self, temp_dir):
        store = FingerprintStore(temp_dir / ".bower-checksum")
        store.write("abc123")
        assert store.read() == "abc123"
        assert (temp_dir / ".bower-checksum").read_text() == "abc123"

    def test_write_creates_cache_dir(self, temp_dir):
        store = FingerprintStore(temp_dir / "nested" / "cache" / ".bower-checksum")
        store.write("abc123")
        assert store.read() == "abc123"

    def test_clear(self, temp_dir):
        store = FingerprintStore(temp_dir / ".bower-checksum")
        assert store.clear() is False
        store.write("abc123")
        assert store.clear() is True
        assert store.read() is None


class TestCheckFingerprint:
    def test_first_run_records_and_installs(self, temp_dir):
        store = FingerprintStore(temp_dir / ".bower-checksum")
        config = InstallConfig(dependencies={"jquery": "1.9.0"}, directory="lib")

        decision = check_fingerprint(store, config)

        assert decision.install is True
        assert decision.stored is None
        assert store.read() == decision.computed

    def test_unchanged_skips_without_rewriting(self, temp_dir):
        store = FingerprintStore(temp_dir / ".bower-checksum")
        config = InstallConfig(dependencies={"jquery": "1.9.0"})
        store.write(compute_fingerprint(config))
        mtime = store.path.stat().st_mtime_ns

        decision = check_fingerprint(store, config)

        assert decision.install is False
        assert store.path.stat().st_mtime_ns == mtime

    def test_changed_overwrites_store(self, temp_dir):
        store = FingerprintStore(temp_dir / ".bower-checksum")
        store.write("stale")
        config = InstallConfig(dependencies={"jquery": "1.9.1"})

        decision = check_fingerprint(store, config)

        assert decision.install is True
        assert decision.stored == "stale"
        assert store.read() == compute_fingerprint(config)
