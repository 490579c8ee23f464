"""Wyjątki domenowe silnika harmonogramu"""


class MortgageError(ValueError):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAmount(MortgageError):
    pass


class InvalidRate(MortgageError):
    pass


class InvalidTerm(MortgageError):
    pass


class InvalidPeriod(MortgageError):
    pass


class InvalidLoan(MortgageError):
    pass


class DivisionByZero(MortgageError, ZeroDivisionError):
    pass
