## rpncalc — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘


class RpnError(Exception):
    def __init__(self, message: str = "", *, rpn_token=None, rpn_meta=None, rpn_stack=None):
        """Base class for all errors raised while evaluating an expression."""
        super().__init__(message)
        self.rpn_token: str = rpn_token
        self.rpn_meta: dict = rpn_meta
        self.rpn_stack: list = rpn_stack

class RpnParseError(RpnError, ValueError):
    def __init__(self, message, *, filename=None, line=None, column=None, token=None):
        super().__init__(message, rpn_token=token, rpn_meta={'filename': filename, 'line': line, 'column': column})
        self.filename = filename
        self.line = line
        self.column = column
        self.token = token


class RpnStackUnderflow(RpnError, IndexError):
    """Pop or peek on a stack without enough items."""
    pass

class RpnNotANumber(RpnError, ValueError):
    pass

class RpnDivisionByZero(RpnError, ZeroDivisionError):
    pass

class RpnInvalidExponent(RpnError, ValueError):
    pass

class RpnOverflowError(RpnError, OverflowError):
    """Result or literal outside of the machine-width signed integer range."""
    pass

class RpnUndefinedVariable(RpnError, NameError):
    pass


class RpnUnknownToken(RpnError, ValueError):
    pass

class RpnTrailingOperand(RpnError, ValueError):
    """An expression must not end on a bare number."""
    pass
