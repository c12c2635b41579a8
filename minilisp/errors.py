
class MiniLispError(Exception):
    """ Base class for all minilisp errors"""
    pass


class MiniLispSyntaxError(MiniLispError):
    """ Raised by the reader after it has resynchronized past malformed input"""

    def __init__(self, message: str, source: str = "<string>", line: int = 0, column: int = 0):
        super().__init__(f"{source}:{line}:{column}: {message}")
        self.message = message
        self.source = source
        self.line = line
        self.column = column


class MiniLispEOFError(MiniLispSyntaxError):
    """ Raised when input ends in the middle of a list or string"""


class MiniLispUnboundSymbol(MiniLispError):
    """ Raised when a symbol is used before it is bound"""


class MiniLispTypeError(MiniLispError):
    """ Raised when a value does not carry the tag an operation expects"""


class MiniLispNotCallable(MiniLispTypeError):
    """ Raised when a value that is neither primitive nor closure is applied"""


class MiniLispArityError(MiniLispError):
    """ Raised when the number of arguments passed to a function is incorrect"""


class MiniLispLoadError(MiniLispError):
    """ Raised when a file given to load cannot be found or opened"""


class MiniLispRecursionError(MiniLispError):
    """ Raised when evaluation exhausts the host call stack"""
