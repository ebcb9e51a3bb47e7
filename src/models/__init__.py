from .user import UserModel
from .thread import ThreadModel
from .reply import ReplyModel

__all__ = ["UserModel", "ThreadModel", "ReplyModel"]
