class KappaError(Exception):
    """ Base class for all Kappa errors"""
    exit_code = 1


class KappaSyntaxError(KappaError):
    """ Raised when source text or a special form is malformed"""
    exit_code = 2


class KappaInvalidSymbol(KappaSyntaxError):
    """ Raised when a non-symbol is used where a name is required"""


class KappaTypeError(KappaError):
    """ Raised when an operand has the wrong type (TypeMismatch)"""
    exit_code = 3


class KappaNotCallable(KappaError):
    """ Raised when the function position of a call is not a closure"""
    exit_code = 4


class KappaArityError(KappaError):
    """ Raised when a closure receives the wrong number of arguments or a malformed argument chain"""
    exit_code = 5


class KappaMalformedContinuation(KappaError):
    """ Raised when argument slot 0 of a call does not hold a closure"""
    exit_code = 6


class KappaUnboundSymbol(KappaError):
    """ Raised when a symbol is used before it is bound"""
    exit_code = 7


class KappaNameError(KappaError):
    """ Raised when a name is defined twice in one scope"""
    exit_code = 7


class KappaOverflowError(KappaError):
    """ Raised when an integer leaves the signed 64-bit range"""
    exit_code = 8


class KappaNestingError(KappaError):
    """ Raised when an expression nests deeper than the host stack allows"""
