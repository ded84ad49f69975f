"""
Stats 模块 - 统计目录中文本文件的词数、目标词次数以及最长/最短词

提供了简单易用的接口，支持递归与非递归两种文件选择方式。
"""

from typing import Optional

from .models import WordStats, AnalysisResult
from .analyzer import FileAnalyzer
from .aggregator import DirectoryAggregator


def analyze_content(content: str) -> WordStats:
    """
    统计一段文本

    Args:
        content: 文本内容

    Returns:
        WordStats: 统计结果
    """
    return FileAnalyzer().analyze(content)


def aggregate_directory(
    dir_path: str,
    include_subdirectories: bool = True,
    cancel_token: Optional[str] = None
) -> AnalysisResult:
    """
    统计目录中所有选中文件的词信息

    Args:
        dir_path: 目录路径
        include_subdirectories: 是否递归处理子目录（递归时只统计 .txt 文件）
        cancel_token: 取消 token

    Returns:
        AnalysisResult: 目录统计结果
    """
    aggregator = DirectoryAggregator()
    return aggregator.aggregate(
        directory_path=dir_path,
        include_subdirectories=include_subdirectories,
        cancel_token=cancel_token
    )


__all__ = [
    'WordStats',
    'AnalysisResult',
    'FileAnalyzer',
    'DirectoryAggregator',
    'analyze_content',
    'aggregate_directory',
]
