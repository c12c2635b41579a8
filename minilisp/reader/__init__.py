from minilisp.reader.parser import Reader, EOF, EndOfInput, parse_integer
from minilisp.reader.ports import Port, StringPort, FilePort, InputStack

__all__ = [
    "Reader",
    "EOF",
    "EndOfInput",
    "parse_integer",
    "Port",
    "StringPort",
    "FilePort",
    "InputStack",
]
