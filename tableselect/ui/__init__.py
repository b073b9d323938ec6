"""Toolkit adapters. Only this package knows about PyQt5."""
