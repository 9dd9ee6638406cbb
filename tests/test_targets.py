from __future__ import annotations

import pytest

from gdscaffold.targets import (
    DEFAULT_TARGETS,
    LibraryTarget,
    Platform,
    Profile,
    TargetResolver,
    resolve_library_path,
)


@pytest.mark.parametrize(
    "target_id, expected",
    [
        ("linux.debug.x86_64", "res://rust/target/debug/libFoo.so"),
        ("linux.release.x86_64", "res://rust/target/release/libFoo.so"),
        ("windows.debug.x86_64", "res://rust/target/debug/Foo.dll"),
        ("windows.release.x86_64", "res://rust/target/release/Foo.dll"),
        ("macos.debug", "res://rust/target/debug/libFoo.dylib"),
        ("macos.release", "res://rust/target/release/libFoo.dylib"),
    ],
)
def test_resolve_known_targets(target_id, expected):
    assert resolve_library_path(target_id, "Foo") == expected


@pytest.mark.parametrize("target_id", ["unknown.target", "", "linux.debug", "macos.debug.arm64"])
def test_resolve_unknown_target_returns_none(target_id):
    assert resolve_library_path(target_id, "Foo") is None


def test_target_table_is_complete():
    assert LibraryTarget.MACOS_RELEASE.platform is Platform.MACOS
    assert LibraryTarget.WINDOWS_DEBUG.profile is Profile.DEBUG
    assert DEFAULT_TARGETS == (
        "linux.debug.x86_64",
        "linux.release.x86_64",
        "windows.debug.x86_64",
        "windows.release.x86_64",
        "macos.debug",
        "macos.release",
    )


def test_resolve_many_keeps_order_and_duplicates_and_skips_unknown():
    resolver = TargetResolver()
    pairs = resolver.resolve_many(
        ["macos.debug", "bogus", "linux.debug.x86_64", "macos.debug"], "demo"
    )
    assert pairs == [
        ("macos.debug", "res://rust/target/debug/libdemo.dylib"),
        ("linux.debug.x86_64", "res://rust/target/debug/libdemo.so"),
        ("macos.debug", "res://rust/target/debug/libdemo.dylib"),
    ]


def test_custom_root():
    resolver = TargetResolver(root="res://native/target")
    assert resolver.resolve("windows.release.x86_64", "demo") == "res://native/target/release/demo.dll"
