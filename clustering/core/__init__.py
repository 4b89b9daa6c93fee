from .distance import METRICS, Distance, block_distances, l1_norm, l2_norm
from .space import RandomSource, TerminationCriteria, VectorSpace, numpy_random_source
from .validation import ValidationError, as_batch, validate_inputs
from .seeding import kmeans_plus_plus
from .accumulator import ClusterAccumulator
from .base import KMeansBase, assign_block
from .serial import KMeansSerial
from .executor import Executor, ThreadPoolAdapter
from .threaded import KMeansThreaded, ThreadingConfig
from .engine import kmeans

__all__ = [
    "METRICS",
    "Distance",
    "block_distances",
    "l1_norm",
    "l2_norm",
    "RandomSource",
    "TerminationCriteria",
    "VectorSpace",
    "numpy_random_source",
    "ValidationError",
    "as_batch",
    "validate_inputs",
    "kmeans_plus_plus",
    "ClusterAccumulator",
    "KMeansBase",
    "assign_block",
    "KMeansSerial",
    "Executor",
    "ThreadPoolAdapter",
    "KMeansThreaded",
    "ThreadingConfig",
    "kmeans",
]
