from egg.reader.parser import parse, parse_expression, parse_application, skip_space

__all__ = ["parse", "parse_expression", "parse_application", "skip_space"]
