from .message import MessageRead

__all__ = ["MessageRead"]
