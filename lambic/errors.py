"""Error hierarchy for Lambic.

Every failure the reader or evaluator recognizes is raised as a subclass of
LambicError, so an embedding host can catch one base class.
"""


class LambicError(Exception):
    """ Base class for all Lambic errors"""
    pass


class ParseError(LambicError):
    """ Raised by the reader for malformed source"""

    def __init__(self, message: str, position: int | None = None, incomplete: bool = False):
        if position is not None:
            message = f"{message} (at offset {position})"
        super().__init__(message)
        self.position = position
        # True when more input could complete the source (an open paren or comment)
        self.incomplete = incomplete


class UnboundVariable(LambicError):
    """ Raised when a symbol is looked up but no frame binds it"""

    def __init__(self, name, message: str | None = None):
        super().__init__(message or f"Unbound variable: {name}")
        self.name = name


class MalformedForm(LambicError):
    """ Raised when a special form has the wrong shape"""


class InvalidBindingForm(MalformedForm):
    """ Raised for malformed let/let*/letrec/define bindings and parameter lists"""


class LambicTypeError(LambicError):
    """ Raised when a value of the wrong runtime kind is used"""


class ArityError(LambicError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""


class DivisionByZero(LambicError):
    """ Raised when dividing by zero"""


class RecursionDepthExceeded(LambicError):
    """ Raised when evaluation exhausts the host call stack"""


class NumericOverflow(LambicError):
    """ Raised when a numeric result cannot be represented as a float"""
