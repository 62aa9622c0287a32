"""word-diff — word-granularity edit scripts for incremental UI updates."""

from .classifier import CharClassifier
from .tokenizer import tokenize
from .sequence import diff_tokens, opcodes
from .builder import EditBuilder, build_edits
from .differ import WordDiffer, WordDifferConfig, apply_edits, diff_words
from .store import ScriptStore
from .config import create_differ, load_config, load_from_yaml
from .types import CharKind, DiffOp, EditEntry, EditScript, Token

__all__ = [
    "CharClassifier", "CharKind",
    "tokenize", "Token",
    "diff_tokens", "opcodes", "DiffOp",
    "EditBuilder", "build_edits", "EditEntry", "EditScript",
    "WordDiffer", "WordDifferConfig", "diff_words", "apply_edits",
    "ScriptStore",
    "create_differ", "load_config", "load_from_yaml",
]
__version__ = "0.1.0"
