#!/usr/bin/env python
""" Check the snag model C and N books close every year """

import sys
from math import fabs

from .exceptions import BalanceError


class CheckBalance(object):
    """ Check the model is balancing C and N

    Whatever was in the pools at the start of the year plus what was routed
    in during the year must end up either in the pools or in one of the
    yearly fluxes. Only carbon is respired, so the N books have no
    atmosphere term.
    """
    def __init__(self, tolerance=1E-6, raise_error=True):
        """
        Parameters
        ----------
        tolerance : float
            allowed relative imbalance
        raise_error : logical
            raise a BalanceError (True) or just complain on stderr
        """
        self.tolerance = tolerance
        self.raise_error = raise_error

    def check_carbon_balance(self, before, inputs, snag, year=None):
        """
        Parameters
        ----------
        before : CarbonNitrogenTuple
            pools at the start of the year [kg/ha]
        inputs : CarbonNitrogenTuple
            biomass routed into the snag during the year [kg/ha]
        snag : Snag
            snag after the annual update

        Returns:
        --------
        balance : float
            sources - sinks - stores [kg C/ha]
        """
        sinks = (snag.flux_to_atmosphere.c + snag.flux_to_extern.c +
                 snag.flux_to_disturbance.c + snag.labile_flux.c +
                 snag.refractory_flux.c)
        balance = before.c + inputs.c - sinks - snag.pools_carbon
        self.report("C", balance, before.c + inputs.c, year)

        return balance

    def check_nitrogen_balance(self, before, inputs, snag, year=None):
        """ as check_carbon_balance, N is never lost to the atmosphere """
        sinks = (snag.flux_to_extern.n + snag.flux_to_disturbance.n +
                 snag.labile_flux.n + snag.refractory_flux.n)
        balance = before.n + inputs.n - sinks - snag.pools_nitrogen
        self.report("N", balance, before.n + inputs.n, year)

        return balance

    def report(self, what, balance, sources, year):
        if fabs(balance) <= self.tolerance * max(1.0, sources):
            return
        msg = "%s balance check error%s: %g kg/ha" % \
                (what, "" if year is None else " in year %d" % year, balance)
        if self.raise_error:
            raise BalanceError(msg)
        sys.stderr.write("**** %s\n" % msg)
