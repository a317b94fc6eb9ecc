class VaRError(Exception):
    """Base class for all errors raised by :mod:`hist_var`."""


class InvalidParameterError(VaRError, ValueError):
    """Raised when a scalar input violates its precondition.

    Examples are ``alpha`` outside ``[0, 1]``, a negative maturity or
    volatility, ``maturity <= today`` or a sample count below two. The
    message names the offending parameter and the value received.
    """


class DomainError(VaRError, ArithmeticError):
    """Raised when a numeric operation would leave its mathematical domain.

    Typical causes are a zero volatility or non-positive time-to-maturity
    reaching the Black-Scholes ``d1`` denominator.
    """


class InvalidInputError(DomainError, ValueError):
    """Raised when a series input is outside the domain of a stage.

    Notes
    -----
    The return extractor raises this for any non-positive price, since
    ``log(p_i / p_{i-1})`` is undefined there. It is a :class:`DomainError`
    so callers catching domain failures see it too.
    """
