"""Helper module - String, regex and node utilities."""

from .node_helper import NodeHelper
from .regex_helper import RegexHelper
from .string_helper import StringHelper

__all__ = ["NodeHelper", "RegexHelper", "StringHelper"]
