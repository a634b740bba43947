""" Snag model errors.

Configuration problems are reported when the model is set up, broken
contracts (negative masses, fractions outside [0, 1]) when they happen and
accounting problems by the balance checks.
"""


class SnagError(Exception):
    """ base class of all snag model errors """


class ConfigError(SnagError, ValueError):
    """ invalid thresholds, initial state or .cfg contents """


class ContractViolation(SnagError, ValueError):
    """ a caller broke an operation's contract """


class BalanceError(SnagError, ValueError):
    """ carbon or nitrogen books do not close """
