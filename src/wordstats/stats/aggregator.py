"""
目录词统计模块

遍历目录，对选中的文件逐个做词统计，并汇总所有文件中最长/最短的词。
"""

import os
from typing import Dict, Iterator, List, Optional, Tuple
from loguru import logger

from wordstats.common.exceptions import TraversalError, FileReadError
from wordstats.common.files import read_file
from wordstats.common.scan_cancel import scan_cancel
from .analyzer import FileAnalyzer
from .models import WordStats, AnalysisResult

TEXT_FILE_SUFFIX = ".txt"


def fold_overall_words(overall_longest: str,
                       overall_shortest: str,
                       stats: WordStats) -> Tuple[str, str]:
    """
    把单个文件的结果并入全局最长/最短词

    两者都只在严格更长/更短时替换，长度相同时保留先出现的词。
    全局最短词为空时直接取当前文件的最短词。

    Returns:
        (overall_longest, overall_shortest)
    """
    if len(stats.longest_word) > len(overall_longest):
        overall_longest = stats.longest_word

    if not overall_shortest or len(stats.shortest_word) < len(overall_shortest):
        overall_shortest = stats.shortest_word

    return overall_longest, overall_shortest


class DirectoryAggregator:
    """目录词统计汇总器"""

    def __init__(self, analyzer: Optional[FileAnalyzer] = None):
        self.analyzer = analyzer or FileAnalyzer()

    def _check_root(self, directory_path: str) -> None:
        if not os.path.exists(directory_path):
            raise TraversalError(directory_path, "directory does not exist")
        if not os.path.isdir(directory_path):
            raise TraversalError(directory_path, "not a directory")

    def _iter_top_level_files(self, directory_path: str) -> Iterator[str]:
        """非递归模式：只取根目录下的普通文件，不过滤扩展名"""
        try:
            with os.scandir(directory_path) as entries:
                items = [entry.path for entry in entries]
        except OSError as e:
            raise TraversalError(directory_path, str(e)) from e

        for file_path in items:
            if os.path.isfile(file_path):
                yield file_path

    def _iter_text_files(self, directory_path: str, errors: List[str]) -> Iterator[str]:
        """递归模式：取所有层级下以 .txt 结尾的普通文件"""
        root_errors: List[OSError] = []

        def on_error(e: OSError):
            if os.path.abspath(e.filename or "") == directory_path:
                root_errors.append(e)
                return
            logger.warning(f"跳过无法访问的目录: {e.filename}, 错误: {e}")
            errors.append(f"{e.filename}: {e.strerror or e}")

        for root, dirs, files in os.walk(directory_path, onerror=on_error):
            for file in files:
                if not file.endswith(TEXT_FILE_SUFFIX):
                    continue
                file_path = os.path.join(root, file)
                if os.path.isfile(file_path):
                    yield file_path

        if root_errors:
            raise TraversalError(directory_path, str(root_errors[0])) from root_errors[0]

    def _select_files(self, directory_path: str,
                      include_subdirectories: bool,
                      errors: List[str]) -> Iterator[str]:
        if include_subdirectories:
            return self._iter_text_files(directory_path, errors)
        return self._iter_top_level_files(directory_path)

    def analyze_file(self, file_path: str) -> WordStats:
        """
        读取并统计单个文件

        Raises:
            FileReadError: 文件无法打开或解码
        """
        content = read_file(file_path)
        return self.analyzer.analyze(content)

    def aggregate(self,
                  directory_path: str,
                  include_subdirectories: bool = True,
                  cancel_token: Optional[str] = None) -> AnalysisResult:
        """
        统计目录中选中文件的词信息

        Args:
            directory_path: 根目录
            include_subdirectories: True 时递归统计所有 .txt 文件，
                False 时只统计根目录下的文件（不过滤扩展名）
            cancel_token: 取消 token，每次读取文件前检查一次

        Returns:
            AnalysisResult: 统计结果

        Raises:
            TraversalError: 根目录不存在、不是目录或无法列出
            ScanCancelledError: 扫描过程中请求了取消
        """
        directory_path = os.path.abspath(directory_path)
        self._check_root(directory_path)

        per_file: Dict[str, WordStats] = {}
        errors: List[str] = []
        overall_longest = ""
        overall_shortest = ""

        for file_path in self._select_files(directory_path, include_subdirectories, errors):
            scan_cancel.check_and_raise(cancel_token)

            try:
                stats = self.analyze_file(file_path)
            except FileReadError as e:
                logger.warning(f"读取文件失败, 已跳过: {e}")
                errors.append(str(e))
                continue

            logger.debug(f"{file_path}: {stats}")
            overall_longest, overall_shortest = fold_overall_words(
                overall_longest, overall_shortest, stats)
            per_file[os.path.basename(file_path)] = stats

        logger.info(f"目录统计完成: {directory_path}, "
                    f"{len(per_file)}个文件, {len(errors)}个错误")

        return AnalysisResult(
            directory_path=directory_path,
            per_file=per_file,
            overall_longest_word=overall_longest,
            overall_shortest_word=overall_shortest,
            errors=tuple(errors),
        )
