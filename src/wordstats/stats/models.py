from types import MappingProxyType
from typing import Dict, Mapping, Tuple, Any
from dataclasses import dataclass, field, asdict


@dataclass(frozen=True)
class WordStats:
    """单个文件的词统计结果"""
    word_count: int
    is_count: int
    are_count: int
    you_count: int
    longest_word: str
    shortest_word: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def __str__(self) -> str:
        return (f"{self.word_count} words "
                f"(is={self.is_count}, are={self.are_count}, you={self.you_count}), "
                f"longest={self.longest_word!r}, shortest={self.shortest_word!r}")


@dataclass(frozen=True)
class AnalysisResult:
    """一次目录扫描的统计结果

    per_file 以文件名（不含路径）为键，同名文件后写覆盖先写，构造时复制为只读映射。
    errors 记录被跳过的文件或子目录，格式为 "<路径>: <原因>"。
    """
    directory_path: str
    per_file: Mapping[str, WordStats] = field(default_factory=dict)
    overall_longest_word: str = ""
    overall_shortest_word: str = ""
    errors: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "per_file", MappingProxyType(dict(self.per_file)))
        object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def file_count(self) -> int:
        return len(self.per_file)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "directory_path": self.directory_path,
            "files": {name: stats.to_dict() for name, stats in self.per_file.items()},
            "overall_longest_word": self.overall_longest_word,
            "overall_shortest_word": self.overall_shortest_word,
            "errors": list(self.errors),
        }
