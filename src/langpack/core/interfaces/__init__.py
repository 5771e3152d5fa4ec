from .logging import LoggerLikeProtocol
from .store import StringStoreProtocol, TemplateEntry
from .templating import TemplateEngineProtocol

__all__ = [
    'LoggerLikeProtocol',
    'StringStoreProtocol',
    'TemplateEntry',
    'TemplateEngineProtocol',
]
