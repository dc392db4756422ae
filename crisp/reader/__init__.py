from crisp.reader.parser import tokenize, parse, parse_all, parse_atom, read

__all__ = ("tokenize", "parse", "parse_all", "parse_atom", "read")
