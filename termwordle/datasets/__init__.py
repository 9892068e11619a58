from .dictionary import Dictionary
from .validator import audit_dictionary, pretty_summary
from .io import read_lines, normalize_entry

__all__ = ["Dictionary", "audit_dictionary", "pretty_summary", "read_lines", "normalize_entry"]
