#!/usr/bin/env python3
"""
Example usage of the change detection building blocks without docker or kubectl:
fingerprint each configured directory and compare it with the stored checksums.
"""

import logging
from pathlib import Path

from deploytool.build.change_detector import ChangeDetector
from deploytool.build.hasher import DirectoryHasher
from deploytool.build.ignore import IgnoreMatcher
from deploytool.build.store import FingerprintStore
from deploytool.config.global_config_loader import load_global_config


def show_directory_files(directory: Path, ignore_file: str):
    """List the files that contribute to a directory's fingerprint"""
    print(f"\n=== Files hashed in {directory} ===")

    hasher = DirectoryHasher(ignore_file)
    matcher = IgnoreMatcher.for_directory(directory, ignore_file)
    print(f"Ignore rules: {[rule.pattern for rule in matcher.rule_set.rules]}")

    for relative_path, _ in hasher.list_files(directory, matcher):
        print(f"  - {relative_path}")

    print(f"Fingerprint: {hasher.compute_directory_fingerprint(directory, matcher)}")


def show_changes():
    """Compare every configured directory with the checksum file"""
    print("\n=== Change detection ===")

    config = load_global_config("./examples/deploytool.yaml")
    build_config = config.build_system
    projects = build_config.projects()

    store = FingerprintStore(build_config.resolve_path(build_config.checksum_file))
    detector = ChangeDetector(DirectoryHasher(build_config.ignore_file), build_config.resolve_path)

    existing = [p for p in projects if build_config.resolve_path(p.directory).is_dir()]
    if not existing:
        print("None of the configured directories exist here, skipping")
        return

    changes = detector.detect_changes(existing, store.load())
    for check in changes.checks:
        print(f"  {check.directory}: {check.change_type.value}")

    for project in existing:
        show_directory_files(build_config.resolve_path(project.directory), build_config.ignore_file)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    show_changes()
