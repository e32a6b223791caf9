from scanner import Scanner
from parser import Parser


def scan(text: str):
    """Return a list of tokens for the given source text."""
    return Scanner(text).tokenize()


def parse(text: str, strict: bool = False):
    """Convenience: scan+parse a source text into a Program node."""
    return Parser(Scanner(text), strict=strict).parse()
