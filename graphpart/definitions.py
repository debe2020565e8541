"""Shared constants, enumerations and hashing helpers for graph partitioning."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_UINT32_MAX = 2**32 - 1
_INT32_MAX = 2**31 - 1
_UINT64_MAX = 2**64 - 1

UNDEFINED_EDGE = _UINT32_MAX
UNDEFINED_EDGEWEIGHT = _INT32_MAX
UNDEFINED_NODE = _UINT32_MAX
UNASSIGNED = _UINT32_MAX
ASSIGNED = _UINT32_MAX - 1
INVALID_PARTITION = _UINT32_MAX
BOUNDARY_STRIPE_NODE = _UINT32_MAX
NOTINQUEUE = _INT32_MAX
ROOT = 0

UNDEFINED_LONGNODE = _UINT64_MAX
UNDEFINED_LONGEDGE = _UINT64_MAX

PRIME = 0x01000193
SEED = 0x811C9DC5


@dataclass
class EdgeSourcePair:
    """An edge together with the node it leaves from."""

    e: int
    source: int


@dataclass
class SourceTargetPair:
    """The two endpoints of an edge."""

    source: int
    target: int


class EdgeRating(IntEnum):
    EXPANSIONSTAR = 0
    EXPANSIONSTAR2 = 1
    WEIGHT = 2
    REALWEIGHT = 3
    PSEUDOGEOM = 4
    EXPANSIONSTAR2ALGDIST = 5
    SEPARATOR_MULTX = 6
    SEPARATOR_ADDX = 7
    SEPARATOR_MAX = 8
    SEPARATOR_LOG = 9
    SEPARATOR_R1 = 10
    SEPARATOR_R2 = 11
    SEPARATOR_R3 = 12
    SEPARATOR_R4 = 13
    SEPARATOR_R5 = 14
    SEPARATOR_R6 = 15
    SEPARATOR_R7 = 16
    SEPARATOR_R8 = 17


class PermutationQuality(IntEnum):
    NONE = 0
    FAST = 1
    GOOD = 2


class MatchingType(IntEnum):
    RANDOM = 0
    GPA = 1
    RANDOM_GPA = 2
    CLUSTER_COARSENING = 3


class InitialPartitioningType(IntEnum):
    RECPARTITION = 0
    BIPARTITION = 1
    MULTIBFS = 2
    FENNEL = 3


class RefinementSchedulingAlgorithm(IntEnum):
    FAST = 0
    ACTIVE_BLOCKS = 1
    ACTIVE_BLOCKS_REF_KWAY = 2


class RefinementType(IntEnum):
    FM = 0
    FM_FLOW = 1
    FLOW = 2


class StopRule(IntEnum):
    SIMPLE = 0
    MULTIPLE_K = 1
    STRONG = 2
    MULTIBFS = 3


class BipartitionAlgorithm(IntEnum):
    BFS = 0
    FM = 1


class KWayStopRule(IntEnum):
    SIMPLE = 0
    ADAPTIVE = 1


class MLSRule(IntEnum):
    COIN_RNDTIE = 0
    COIN_DIFFTIE = 1
    NOCOIN_RNDTIE = 2
    NOCOIN_DIFFTIE = 3


class CycleRefinementAlgorithm(IntEnum):
    PLAYFIELD = 0
    ULTRA_MODEL = 1
    ULTRA_MODEL_PLUS = 2


class NodeOrderingType(IntEnum):
    RANDOM = 0
    DEGREE = 1
    NATURAL = 2


class LsNeighborhoodType(IntEnum):
    NSQUARE = 0
    NSQUAREPRUNED = 1
    COMMUNICATIONGRAPH = 2


class ConstructionAlgorithm(IntEnum):
    RANDOM = 0
    IDENTITY = 1
    OLDGROWING = 2
    OLDGROWING_FASTER = 3
    OLDGROWING_MATRIX = 4
    FASTHIERARCHY_BOTTOMUP = 5
    FASTHIERARCHY_TOPDOWN = 6


class DistanceConstructionAlgorithm(IntEnum):
    RANDOM = 0
    IDENTITY = 1
    HIERARCHY = 2
    HIERARCHY_ONLINE = 3


class PreConfigMapping(IntEnum):
    FAST = 0
    ECO = 1
    STRONG = 2


class OnePassStreamAlgorithm(IntEnum):
    BALANCED = 0
    CHUNKING = 1
    HASHING = 2
    GREEDY = 3
    LDG = 4
    FENNEL = 5
    FRACTIONAL_GREEDY = 6


class FennelDynamicSetup(IntEnum):
    ORIGINAL = 0
    DOUBLE = 1
    LINEAR = 2
    QUADRATIC = 3
    MID_LINEAR = 4
    MID_QUADRATIC = 5
    MID_CONSTANT = 6
    EDGE_CUT = 7


class FennelBatchOrder(IntEnum):
    UNCHANGED = 0
    ASC_DEGREE = 1
    DESC_DEGREE = 2


class GhostNeighborsProcedure(IntEnum):
    CONTRACT_ALL = 0
    KEEP_ALL = 1
    KEEP_THRESHOLD_CONTRACT_REST = 2


class GraphTranslateFormat(IntEnum):
    EDGE_STREAM_TO_METISEXTERNAL = 0
    EDGE_STREAM_TO_METISBUFFERED = 1
    EDGE_STREAM_TO_METIS = 2
    EDGE_STREAM_TO_HMETIS = 3
    METIS_TO_HMETIS = 4


def fnv0a(one_byte: int, hash_value: int = SEED) -> int:
    """Fold a single byte into a 32-bit FNV-1a hash."""
    return ((one_byte & 0xFF) ^ hash_value) * PRIME & _UINT32_MAX


def _fnv_bytes(data: bytes, hash_value: int) -> int:
    for byte in data:
        hash_value = fnv0a(byte, hash_value)
    return hash_value


def fnv1a(four_bytes: int, hash_value: int = SEED) -> int:
    """Hash a 32-bit integer, byte by byte in little-endian order."""
    return _fnv_bytes((four_bytes & _UINT32_MAX).to_bytes(4, "little"), hash_value)


def fnv2a(eight_bytes: int, hash_value: int = SEED) -> int:
    """Hash a 64-bit integer, byte by byte in little-endian order."""
    return _fnv_bytes((eight_bytes & _UINT64_MAX).to_bytes(8, "little"), hash_value)