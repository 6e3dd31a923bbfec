"""Worked solutions to small Rust exercises, a rust-analyzer project writer and status-line helpers."""

__version__ = "5.5.1"