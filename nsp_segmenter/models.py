"""Data models for the N-shortest-path segmenter."""

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass(frozen=True)
class Token:
    """A dictionary hit found while scanning a sentence."""

    start: int  # Character offset of the first character
    length: int  # Number of characters, always >= 2
    word: str

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class Edge:
    """A candidate word spanning from its owning vertex to ``endpoint``."""

    endpoint: int  # Index of the destination vertex
    word: str
    weight: int = 1


@dataclass
class Vertex:
    """A character boundary in the sentence and its outgoing edges."""

    index: int
    edges: list[Edge] = field(default_factory=list)

    def add_edge(self, edge: Edge) -> None:
        self.edges.append(edge)


@dataclass
class WordGraph:
    """DAG over character boundaries ``0..=len(sentence)``.

    Vertices live in a flat list indexed by position; edges refer to their
    destination by index only.
    """

    sentence: str
    vertices: list[Vertex]

    @property
    def length(self) -> int:
        """Number of characters in the sentence."""
        return len(self.vertices) - 1

    @property
    def terminal(self) -> int:
        """Index of the terminal vertex."""
        return self.length

    @property
    def edge_count(self) -> int:
        return sum(len(vertex.edges) for vertex in self.vertices)


@dataclass(frozen=True)
class Path:
    """One candidate segmentation of a sentence prefix."""

    weight: int
    words: tuple[str, ...]

    def extend(self, edge: Edge) -> "Path":
        """Return a new path with ``edge`` appended."""
        return Path(weight=self.weight + edge.weight, words=self.words + (edge.word,))

    def join(self, delimiter: str = "-") -> str:
        return delimiter.join(self.words)

    @classmethod
    def from_edge(cls, edge: Edge) -> "Path":
        return cls(weight=edge.weight, words=(edge.word,))


@dataclass
class PathCollection:
    """All paths ending at one vertex, grouped by weight."""

    weight_to_paths: dict[int, list[Path]] = field(default_factory=dict)

    def add(self, path: Path) -> None:
        """Append ``path`` to the bucket for its weight, creating it if absent."""
        bucket = self.weight_to_paths.get(path.weight)
        if bucket is None:
            self.weight_to_paths[path.weight] = [path]
        else:
            bucket.append(path)

    def weights(self) -> list[int]:
        """Distinct weights present, ascending."""
        return sorted(self.weight_to_paths)

    def paths(self) -> Iterator[Path]:
        """Iterate every path across all weight classes."""
        for bucket in self.weight_to_paths.values():
            yield from bucket

    def bucket(self, weight: int) -> list[Path]:
        return self.weight_to_paths.get(weight, [])

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.weight_to_paths.values())

    def __bool__(self) -> bool:
        return bool(self.weight_to_paths)


@dataclass
class SegmentationRecord:
    """One output row of the batch pipeline."""

    segmentation: str  # Words joined by the configured delimiter
    weight: int
    weight_rank: int  # 1 for the lightest weight class
    record_id: str
    source_line_number: int
    clause_order: int
    start_index: int  # Clause offsets within the normalized line
    end_index: int

    def to_row(self) -> dict:
        return {
            "Segmentation": self.segmentation,
            "Weight": self.weight,
            "Weight_Rank": self.weight_rank,
            "Record_ID": self.record_id,
            "Source_Line_Number": self.source_line_number,
            "Clause_Order": self.clause_order,
            "Start_Index": self.start_index,
            "End_Index": self.end_index,
        }


@dataclass
class SegmentationResult:
    """Result of segmenting one input line."""

    records: list[SegmentationRecord]
    line_number: int
    clause_count: int
    skipped_clauses: int = 0
    record_id: Optional[str] = None
