"""
Pytest 配置文件

提供测试fixtures和配置。
"""

import os
import tempfile

import pytest
from loguru import logger


@pytest.fixture
def temp_dir():
    """临时目录fixture"""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield temp_dir


@pytest.fixture
def sample_dir(temp_dir):
    """示例目录fixture，包含两个 .txt 文件、一个 .md 文件和一个子目录"""
    files = {
        "a.txt": "is is are you",
        "b.txt": "you are are is elephant",
        "readme.md": "not counted when recursive",
        os.path.join("sub", "c.txt"): "nested hippopotamus",
    }
    for path, content in files.items():
        full_path = os.path.join(temp_dir, path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)
    yield temp_dir


@pytest.fixture(autouse=True)
def reset_logger():
    """main() 会替换 loguru 的 sink，测试结束后移除"""
    yield
    logger.remove()
