from .cancel import CancelToken, CanceledError
from .path import expand_home, is_hidden_name

__all__ = [
    "CancelToken",
    "CanceledError",
    "expand_home",
    "is_hidden_name",
]
