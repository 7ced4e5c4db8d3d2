"""Lookup implementations."""

from repoxauth.core.lookup.gradle import GradleLookup
from repoxauth.core.lookup.mapping import MappingLookup
from repoxauth.core.lookup.properties import load_properties, parse_properties

__all__ = ["GradleLookup", "MappingLookup", "load_properties", "parse_properties"]
