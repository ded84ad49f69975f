"""
单文件词统计模块

对一段文本内容做分词、目标词计数以及最长/最短词查找。
"""

import re
from typing import List

from .models import WordStats

# 只按 ASCII 空白切分，不做 Unicode 分词
WHITESPACE_PATTERN = re.compile(r"\s+", re.ASCII)

TARGET_TOKENS = ("is", "are", "you")


def split_words(content: str) -> List[str]:
    """
    按连续空白切分文本

    规则：
    - 文本中没有空白（包括空文本）时，返回只含文本本身的列表，空文本得到 [""]
    - 以空白开头时，第一个词为空字符串
    - 末尾的空字符串全部丢弃，因此纯空白文本得到 []

    Args:
        content: 文本内容

    Returns:
        List[str]: 词列表
    """
    words = WHITESPACE_PATTERN.split(content)
    if len(words) == 1:
        return words

    while words and words[-1] == "":
        words.pop()
    return words


def count_substring(content: str, substring: str) -> int:
    """
    统计子串出现次数（区分大小写，不重叠，从左到右）

    每次匹配后从匹配末尾继续查找，例如 "isis" 中 "is" 出现 2 次。
    """
    return content.count(substring)


def find_longest_word(words: List[str]) -> str:
    longest_word = ""
    for word in words:
        if len(word) > len(longest_word):
            longest_word = word
    return longest_word


def find_shortest_word(words: List[str]) -> str:
    if not words:
        return ""

    shortest_word = words[0]
    for word in words:
        if len(word) < len(shortest_word):
            shortest_word = word
    return shortest_word


class FileAnalyzer:
    """单文件词统计器，纯计算，不做任何 IO"""

    def analyze(self, content: str) -> WordStats:
        """
        统计一段文本

        Args:
            content: 文件的完整文本内容

        Returns:
            WordStats: 统计结果，空文本也会返回结果（word_count 为 1）
        """
        words = split_words(content)
        is_count, are_count, you_count = (
            count_substring(content, token) for token in TARGET_TOKENS
        )
        return WordStats(
            word_count=len(words),
            is_count=is_count,
            are_count=are_count,
            you_count=you_count,
            longest_word=find_longest_word(words),
            shortest_word=find_shortest_word(words),
        )
