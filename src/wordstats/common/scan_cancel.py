import threading
from typing import Dict, Optional, Set

from wordstats.common.exceptions import ScanCancelledError


class ScanCancel:
    """扫描取消标志注册表

    扫描在两次文件读取之间调用 check_and_raise，由其他线程（例如界面线程）
    调用 set 请求取消。
    """

    def __init__(self):
        self._global_flag = False
        self._token_flags: Dict[str, bool] = {}
        self._messages: Dict[str, str] = {}
        self._lock = threading.Lock()
        self._active_tokens: Set[str] = set()

    def register_token(self, token: str) -> None:
        """注册一个 token，表示一次扫描开始，但尚未请求取消"""
        with self._lock:
            self._token_flags[token] = False
            self._active_tokens.add(token)

    def get_active_tokens(self) -> Set[str]:
        with self._lock:
            return self._active_tokens.copy()

    def is_requested(self, token: Optional[str] = None) -> bool:
        """检查是否请求了特定 token 或全局的取消"""
        with self._lock:
            if token is not None and self._token_flags.get(token):
                return True
            return self._global_flag

    def set(self, token: Optional[str] = None, message: Optional[str] = None) -> None:
        """设置特定 token 或全局的取消标志"""
        with self._lock:
            if token is None:
                self._global_flag = True
            else:
                self._token_flags[token] = True
            if message:
                self._messages[token or ""] = message

    def reset(self, token: Optional[str] = None) -> None:
        """重置特定 token 或全局的取消标志"""
        with self._lock:
            if token is None:
                self._global_flag = False
                self._token_flags.clear()
                self._messages.clear()
                self._active_tokens.clear()
            else:
                self._token_flags.pop(token, None)
                self._messages.pop(token, None)
                self._active_tokens.discard(token)

    def check_and_raise(self, token: Optional[str] = None) -> None:
        """检查是否请求了取消，如果是则抛出异常"""
        if not self.is_requested(token):
            return
        with self._lock:
            message = self._messages.get(token or "") or self._messages.get("")
        self.reset(token)
        raise ScanCancelledError(token, message or "Scan was cancelled")


scan_cancel = ScanCancel()
