"""Shared fixtures for pigsfly test suite."""

import pytest

from pigsfly import Relation


@pytest.fixture
def winged_pigs():
    """PIGS have WINGS; things with WINGS can FLY."""
    return [
        Relation({"PIGS"}, {"WINGS"}),
        Relation({"WINGS"}, {"FLY"}),
    ]


@pytest.fixture
def clawed_cats():
    """CATS have CLAWS — nothing about pigs at all."""
    return [Relation({"CATS"}, {"CLAWS"})]


@pytest.fixture
def hooved_pigs():
    """things with HOOVES are PIGS with FLY."""
    return [Relation({"HOOVES"}, {"PIGS", "FLY"})]


@pytest.fixture
def statement_file(tmp_path):
    """Write statement lines to a file and return its path."""

    def _write(*lines):
        path = tmp_path / "statements.txt"
        path.write_text("\n".join(lines) + "\n")
        return str(path)

    return _write
