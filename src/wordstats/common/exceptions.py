from typing import Optional


class WordStatsError(IOError):
    """wordstats 所有错误的基类"""


class TraversalError(WordStatsError):
    """根目录不存在、不是目录或无法列出时抛出，整个扫描失败"""

    def __init__(self, directory_path: str, message: str):
        self.directory_path = directory_path
        self.message = message
        super().__init__(f"{directory_path}: {message}")


class FileReadError(WordStatsError):
    """单个文件无法打开或解码"""

    def __init__(self, file_path: str, message: str):
        self.file_path = file_path
        self.message = message
        super().__init__(f"{file_path}: {message}")


class ScanCancelledError(WordStatsError):
    """当取消请求被触发时抛出的异常"""

    def __init__(self, token: Optional[str] = None, message: str = "Scan was cancelled"):
        self.token = token
        self.message = message
        super().__init__(self.message)
