"""
argbind

Copyright (c) 2025 argbind contributors.
Licensed under the MIT License. See LICENSE file for details.
"""

from .binding import DEFAULT_PRIORITY, Binding, DeferredAction
from .cell import Cell
from .cluster import expand_clusters, is_cluster
from .dispatcher import dispatch, order_actions
from .registry import BindingRegistry
from .restrictors import Restrictor, email, in_range, one_of, pattern, unrestricted
from .token import Token
from .tokenizer import tokenize
from .utils import coerce_value
from .value_type import ValueType

__all__ = [
    "DEFAULT_PRIORITY",
    "Binding",
    "BindingRegistry",
    "Cell",
    "DeferredAction",
    "Restrictor",
    "Token",
    "ValueType",
    "coerce_value",
    "dispatch",
    "email",
    "expand_clusters",
    "in_range",
    "is_cluster",
    "one_of",
    "order_actions",
    "pattern",
    "tokenize",
    "unrestricted",
]
