from dupbags.interface.bag import Bag, from_pairs, get, keys, new, put, update, values
from dupbags.interface.multiset import Multiset, as_multisets
from dupbags.operations.eager import (
    Reconciliation,
    difference,
    intersect,
    reconcile,
    symmetric_difference,
)
from dupbags.operations.stream import (
    ReconciliationStreams,
    difference_stream,
    intersect_stream,
    reconcile_stream,
    symmetric_difference_stream,
)
from dupbags.utils.config import DuplicateBagsConfig, apply_config, get_config

__all__ = [
    "Bag",
    "new",
    "put",
    "get",
    "keys",
    "values",
    "update",
    "from_pairs",
    "Multiset",
    "as_multisets",
    "intersect",
    "difference",
    "symmetric_difference",
    "reconcile",
    "Reconciliation",
    "intersect_stream",
    "difference_stream",
    "symmetric_difference_stream",
    "reconcile_stream",
    "ReconciliationStreams",
    "DuplicateBagsConfig",
    "get_config",
    "apply_config",
]
