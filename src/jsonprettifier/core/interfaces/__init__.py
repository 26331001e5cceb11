from .codec import ValueCodecProtocol
from .fs import FileDiscoveryProtocol
from .logging import LoggerLikeProtocol
from .text import CommentStripperProtocol

__all__ = [
    'ValueCodecProtocol',
    'FileDiscoveryProtocol',
    'LoggerLikeProtocol',
    'CommentStripperProtocol',
]
