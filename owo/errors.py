class OwoError(Exception):
    """ Base class for all owo errors"""
    pass


class OwoLexError(OwoError):
    """ Raised when the lexer cannot make progress on a character"""

    def __init__(self, character: str):
        super().__init__(f"Unexpected character: {character}")
        self.character = character


class OwoParseError(OwoError):
    """ Raised when parentheses are unbalanced or the program does not start with '('"""


class OwoEvalError(OwoError):
    """ Base class for errors raised while evaluating an expression"""


class OwoInvalidArgumentCount(OwoEvalError):
    """ Raised when an operator, special form or call has the wrong number of elements"""


class OwoInvalidOperator(OwoEvalError):
    """ Raised when a binary operator symbol is not recognised"""


class OwoInvalidArgumentType(OwoEvalError):
    """ Raised when an operand or name has the wrong type"""


class OwoInvalidConditionType(OwoEvalError):
    """ Raised when an if condition does not evaluate to a boolean"""


class OwoInvalidLambda(OwoEvalError):
    """ Raised when a lambda form has a malformed parameter list or body"""


class OwoUndefinedSymbol(OwoEvalError):
    """ Raised when a symbol is not bound anywhere in the environment chain"""


class OwoUndefinedFunction(OwoEvalError):
    """ Raised when a call names a function that is not bound"""


class OwoInvalidFunction(OwoEvalError):
    """ Raised when a call names a value that is not a lambda"""


class OwoDivisionByZero(OwoEvalError):
    """ Raised when an integer division has a zero divisor"""


class OwoIntegerOverflow(OwoEvalError):
    """ Raised when an arithmetic result does not fit in a signed 64-bit integer"""


class OwoRecursionError(OwoEvalError):
    """ Raised when evaluation exhausts the host call stack"""
