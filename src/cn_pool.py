""" Carbon and nitrogen containers.

A CarbonNitrogenTuple is just a C and N mass pair (kg/ha), used for the
book-keeping fluxes. A CarbonNitrogenPool in addition carries the
decomposition rate (yr-1) of its content and is used for everything that
either decays itself or is handed to the soil with a rate attached.
"""

from .exceptions import ContractViolation


class CarbonNitrogenTuple(object):
    """ C and N mass pair [kg/ha] """

    def __init__(self, c=0.0, n=0.0):
        self.c = float(c)
        self.n = float(n)
        self.check()

    def check(self):
        if self.c < 0.0 or self.n < 0.0:
            raise ContractViolation("Negative mass in pool: C=%f, N=%f" %
                                    (self.c, self.n))

    def add_biomass(self, biomass, cn_ratio):
        """ add 'biomass', N is derived from the C:N ratio of the material

        Parameters:
        -----------
        biomass : float
            mass added [kg/ha]
        cn_ratio : float
            C:N ratio of the added material [-]
        """
        if biomass < 0.0:
            raise ContractViolation("Negative biomass added: %f" % biomass)
        if biomass == 0.0:
            return
        if cn_ratio <= 0.0:
            raise ContractViolation("Invalid C:N ratio: %f" % cn_ratio)
        self.c += biomass
        self.n += biomass / cn_ratio

    def clear(self):
        self.c = 0.0
        self.n = 0.0

    def is_empty(self):
        return self.c == 0.0 and self.n == 0.0

    @property
    def cn_ratio(self):
        return self.c / self.n if self.n > 0.0 else 0.0

    def copy(self):
        return CarbonNitrogenTuple(self.c, self.n)

    def __add__(self, other):
        return CarbonNitrogenTuple(self.c + other.c, self.n + other.n)

    def __iadd__(self, other):
        self.c += other.c
        self.n += other.n
        return self

    def __mul__(self, factor):
        _check_factor(factor)
        return CarbonNitrogenTuple(self.c * factor, self.n * factor)

    __rmul__ = __mul__

    def __imul__(self, factor):
        _check_factor(factor)
        self.c *= factor
        self.n *= factor
        return self

    def __repr__(self):
        return "%s(c=%r, n=%r)" % (self.__class__.__name__, self.c, self.n)


class CarbonNitrogenPool(CarbonNitrogenTuple):
    """ C and N pair plus the decomposition rate of the content [yr-1]

    add_biomass() and add() overwrite the rate (the caller knows which rate
    regime the pool is in), adding two pools with '+' blends the rates with
    the carbon content as weights.
    """
    def __init__(self, c=0.0, n=0.0, decomposition_rate=0.0):
        CarbonNitrogenTuple.__init__(self, c, n)
        self.decomposition_rate = float(decomposition_rate)

    def add_biomass(self, biomass, cn_ratio, decomposition_rate):
        """ add 'biomass' with C:N ratio 'cn_ratio' and set the rate

        Parameters:
        -----------
        biomass : float
            mass added [kg/ha]
        cn_ratio : float
            C:N ratio of the added material [-]
        decomposition_rate : float
            decomposition rate of the pool from now on [yr-1]
        """
        if biomass == 0.0:
            return
        CarbonNitrogenTuple.add_biomass(self, biomass, cn_ratio)
        self.decomposition_rate = decomposition_rate

    def add(self, other, decomposition_rate):
        """ add the C and N of 'other' (tuple or pool), set the rate """
        other.check()
        self.c += other.c
        self.n += other.n
        self.decomposition_rate = decomposition_rate

    def weighted_rate(self, other):
        """ carbon weighted decomposition rate of self and 'other' """
        if other.c == 0.0:
            return self.decomposition_rate
        p_old = self.c / (self.c + other.c)
        return (self.decomposition_rate * p_old +
                other.decomposition_rate * (1.0 - p_old))

    def clear(self):
        CarbonNitrogenTuple.clear(self)
        self.decomposition_rate = 0.0

    def copy(self):
        return CarbonNitrogenPool(self.c, self.n, self.decomposition_rate)

    def __add__(self, other):
        rate = self.weighted_rate(other) if hasattr(other,
                                                    "decomposition_rate") \
                                         else self.decomposition_rate
        return CarbonNitrogenPool(self.c + other.c, self.n + other.n, rate)

    def __iadd__(self, other):
        if hasattr(other, "decomposition_rate"):
            self.decomposition_rate = self.weighted_rate(other)
        self.c += other.c
        self.n += other.n
        return self

    def __mul__(self, factor):
        _check_factor(factor)
        return CarbonNitrogenPool(self.c * factor, self.n * factor,
                                  self.decomposition_rate)

    __rmul__ = __mul__

    def __repr__(self):
        return "%s(c=%r, n=%r, decomposition_rate=%r)" % \
                (self.__class__.__name__, self.c, self.n,
                 self.decomposition_rate)


def _check_factor(factor):
    if factor < 0.0:
        raise ContractViolation("Negative scaling factor: %f" % factor)
