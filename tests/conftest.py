"""
Module: conftest.py

Author: Michael Economou
Date: 2026-02-14

Global pytest configuration and fixtures for the tableselect test suite.
Includes CI-friendly handling of Qt-dependent tests and common fixtures.
"""

import os
from dataclasses import dataclass

import pytest

from tableselect.core.selection_model import SelectionModel
from tableselect.domain.column import Column, ColumnAlignment
from tableselect.domain.selection import SelectionType
from tableselect.domain.sort_descriptor import SortDescriptor


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "gui: mark test as requiring PyQt5")


def pytest_collection_modifyitems(session, config, items):
    """Skip Qt-dependent tests when PyQt5 is missing."""
    _ = session
    _ = config

    try:
        import PyQt5  # noqa: F401
    except ImportError:
        skip_gui = pytest.mark.skip(reason="PyQt5 not installed")
        for item in items:
            if "gui" in item.keywords:
                item.add_marker(skip_gui)


@dataclass(frozen=True)
class Car:
    """Row value used across the tests."""

    id: int
    year: int
    make: str
    model: str


@pytest.fixture(scope="session")
def ci_environment():
    """Fixture to detect CI environment."""
    return "CI" in os.environ or "GITHUB_ACTIONS" in os.environ


@pytest.fixture
def rows():
    """Row ids r0..r9 in rendered order."""
    return [f"r{i}" for i in range(10)]


@pytest.fixture
def multiple_model():
    return SelectionModel(SelectionType.MULTIPLE)


@pytest.fixture
def single_model():
    return SelectionModel(SelectionType.SINGLE)


@pytest.fixture
def cars():
    return [
        Car(id=1, year=2019, make="Volvo", model="XC40"),
        Car(id=2, year=2004, make="Audi", model="A4"),
        Car(id=3, year=2021, make="Toyota", model="Yaris"),
        Car(id=4, year=2012, make="Honda", model="Civic"),
    ]


@pytest.fixture
def car_columns():
    """Year | Make | divider | Model, all descending by default."""
    return [
        Column(
            index=0,
            title="Year",
            ideal_width=130,
            alignment=ColumnAlignment.TRAILING,
            sort_descriptor=SortDescriptor.for_key(lambda car: car.year),
        ),
        Column(
            index=1,
            title="Make",
            ideal_width=80,
            alignment=ColumnAlignment.TRAILING,
            sort_descriptor=SortDescriptor.for_key(lambda car: car.make),
        ),
        Column.divider(2),
        Column(
            index=3,
            title="Model",
            min_width=120,
            max_width=float("inf"),
            alignment=ColumnAlignment.LEADING,
            sort_descriptor=SortDescriptor.for_key(lambda car: car.model),
        ),
    ]
