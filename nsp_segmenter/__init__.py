"""nsp_segmenter - Dictionary-driven N-shortest-path word segmentation."""

__version__ = "0.1.0"

from .config import Config, DictionaryConfig, OutputConfig, SegmentationConfig
from .dictionary import load_dictionary
from .enumerator import PathEnumerator, compute_paths
from .errors import InvalidArgumentError, ResourceExhaustedError, SegmentationError
from .graph import build_graph, split_sentence
from .models import Edge, Path, PathCollection, Token, Vertex, WordGraph
from .pipeline import SegmentationPipeline
from .segmenter import NShortestPathSegmenter, segment
from .selector import rank_weight_classes, select_top_n

__all__ = [
    "Config",
    "DictionaryConfig",
    "OutputConfig",
    "SegmentationConfig",
    "load_dictionary",
    "PathEnumerator",
    "compute_paths",
    "InvalidArgumentError",
    "ResourceExhaustedError",
    "SegmentationError",
    "build_graph",
    "split_sentence",
    "Edge",
    "Path",
    "PathCollection",
    "Token",
    "Vertex",
    "WordGraph",
    "SegmentationPipeline",
    "NShortestPathSegmenter",
    "segment",
    "rank_weight_classes",
    "select_top_n",
]
