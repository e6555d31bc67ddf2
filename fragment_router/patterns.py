"""Regex patterns for route template compilation and fragment cleanup."""

import re

# Template rewriting expressions, applied in this order
escape_pattern = re.compile(r"[\-{}\[\]+?.,\\\^$|#\s]")
optional_pattern = re.compile(r"\((.*?)\)")
named_pattern = re.compile(r"(\(\?)?:\w+", re.ASCII)
splat_pattern = re.compile(r"\*\w+", re.ASCII)

# Fragment normalization
route_stripper = re.compile(r"^[#/]|\s+\Z")
path_stripper = re.compile(r"#.*\Z", re.DOTALL)
