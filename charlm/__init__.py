from .char_stream import CharStream
from .context_table import ContextTable
from .distribution import CharData, CharEntry, build_distribution
from .errors import ModelStateError
from .language_model import LanguageModel
from .sampler import sample

__all__ = [
    'CharData',
    'CharEntry',
    'CharStream',
    'ContextTable',
    'LanguageModel',
    'ModelStateError',
    'build_distribution',
    'sample',
]
