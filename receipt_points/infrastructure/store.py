"""In-memory score table shared by all request workers"""

import threading
import uuid
from typing import Callable, Dict, Tuple

IdFactory = Callable[[], str]


def new_receipt_id() -> str:
    """Default identifier generator: random UUID4 string"""
    return str(uuid.uuid4())


class ReceiptStore:
    """Thread-safe mapping from receipt identifier to awarded points"""

    def __init__(self):
        self._points: Dict[str, int] = {}
        self._lock = threading.Lock()

    def put(self, receipt_id: str, points: int) -> None:
        """Store points for an identifier, overwriting any previous value"""
        with self._lock:
            self._points[receipt_id] = points

    def get(self, receipt_id: str) -> Tuple[int, bool]:
        """Return (points, found); points is 0 when found is False"""
        with self._lock:
            if receipt_id not in self._points:
                return 0, False
            return self._points[receipt_id], True

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
