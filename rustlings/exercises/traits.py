"""Trait exercises: appending "Bar", shared licensing info and combined behaviours."""

from __future__ import annotations

from dataclasses import dataclass
from functools import singledispatch


@singledispatch
def append_bar(value):
    """Append "Bar" to a string, or a "Bar" element to a list of strings."""
    raise TypeError(f"cannot append Bar to {type(value).__name__}")


@append_bar.register
def _(value: str) -> str:
    return f"{value}Bar"


@append_bar.register
def _(value: list) -> list:
    return [*value, "Bar"]


class Licensed:
    """Provides licensing information shared by every implementor."""

    def licensing_info(self) -> str:
        return "Some information"


@dataclass
class SomeSoftware(Licensed):
    version_number: int | None = None


@dataclass
class OtherSoftware(Licensed):
    version_number: str | None = None


def compare_license_types(software: Licensed, software_two: Licensed) -> bool:
    return software.licensing_info() == software_two.licensing_info()


class SomeTrait:
    def some_function(self) -> bool:
        return True


class OtherTrait:
    def other_function(self) -> bool:
        return True


class SomeStruct(SomeTrait, OtherTrait):
    pass


class OtherStruct(SomeTrait, OtherTrait):
    pass


def some_func(item: SomeTrait) -> bool:
    """Requires an item offering both some_function and other_function."""
    return item.some_function() and item.other_function()