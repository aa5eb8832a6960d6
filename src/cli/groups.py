"""Shared help-panel groups for the nrinstrumentation CLI."""

from __future__ import annotations

from cyclopts import Group

session_group = Group(
    "Session",
    help="Session and run context options.",
    sort_key=0,
)

output_group = Group(
    "Output",
    help="Configure the scanned directory and descriptor location.",
    sort_key=1,
)

descriptor_group = Group(
    "Descriptor",
    help="Attributes written on the extension root element.",
    sort_key=2,
)

scan_group = Group(
    "Scanning",
    help="Control class file parsing and manual definitions.",
    sort_key=3,
)

admin_group = Group(
    "Admin",
    help="Administrative commands and help.",
    sort_key=99,
)

__all__ = [
    "admin_group",
    "descriptor_group",
    "output_group",
    "scan_group",
    "session_group",
]
