# -*- coding: UTF-8 -*-
""" Reference evapotranspiration of a resource unit.

The snag climate factor only needs the monthly ratio of precipitation to
reference evapotranspiration, so this is a bare bones water cycle: the
reference ET is the Priestley-Taylor "potential evaporation" of a wet
reference surface, summed up by month.
"""

from math import exp

import numpy as np

from . import constants as const
from .utilities import day_length, days_in_year


class WaterCycle(object):
    """ Monthly reference evapotranspiration, calculated once a year.

    Anything asking for reference ET calls run() first; the calculation is
    only done the first time for every climate year.
    """
    def __init__(self, climate, params):
        """
        Parameters
        ----------
        climate : Climate
            daily climate of the resource unit
        params: floats, object
            model parameters
        """
        self.climate = climate
        self.params = params
        self.P = PriestleyTaylor(zele_sea=self.params.elevation)
        self.year_run = None
        self.ref_et_month = np.zeros(const.MONTHS_IN_YR)

    def run(self):
        """ calculate this year's reference ET, no-op if already done """
        if self.year_run == self.climate.current_year:
            return
        press = self.P.calc_atmos_pressure()
        ndays = self.climate.days_of_year()
        yr_days = days_in_year(self.climate.current_year)
        ref_et = np.zeros(ndays)
        tair = self.climate.temperature_daytime
        sw_rad = self.climate.sw_rad
        for i, doy in enumerate(self.climate.doy):
            daylen = day_length(doy, yr_days, self.params.latitude)
            net_rad = self.calc_radiation(tair[i], sw_rad[i], daylen)
            ref_et[i] = self.P.calc_evaporation(net_rad, tair[i], press,
                                                pt_coeff=self.params.pt_coeff)
        self.ref_et_month = np.bincount(self.climate.months - 1,
                                        weights=ref_et,
                                        minlength=const.MONTHS_IN_YR)
        self.year_run = self.climate.current_year

    @property
    def reference_evapotranspiration(self):
        """ monthly reference ET [mm month-1] """
        return self.ref_et_month

    def calc_radiation(self, tavg, sw_rad, daylen):
        """
        Estimate net radiation assuming 'clear' skies...

        References:
        -----------
        * Ritchie, 1972, Water Resources Research, 8, 1204-1213.
        * Monteith and Unsworth (1990) Principles of Environmental Physics.

        Parameters:
        -----------
        tavg : float
            average daytime temp [degC]
        sw_rad : float
            sw down radiation [mj m-2 d-1]
        daylen : float
            daylength in hours

        Returns:
        --------
        net_rad : float
            net radiation [mj m-2 d-1]

        """
        # Net loss of longwave radiation
        # Monteith and Unsworth '90, pg. 52, 54.
        net_lw = (107.0 - 0.3 * tavg) * daylen * const.WATT_HR_TO_MJ
        return max(0.0, sw_rad * (1.0 - self.params.albedo) - net_lw)


class PriestleyTaylor(object):

    """
    Calculate ET using Priestley Taylor, "potenial evaporation", i.e.
    simplified Penman method (radiation, temperature are the only inputs).
    Justification is that ET is generally determined by Rnet, rather than
    wind and air dryness.

    Key assumption is that the role of the soil heat flux is ignored at daily
    time scales.

    References:
    -----------
    * Priestley and Taylor (1972) On the assessment of surface heat flux and
      evaporation using large-scale parameters. Monthly Weather Review, 100,
      81-82.
    * Allen et al. (1998) Crop evapotranspiration - Guidelines for computing
      crop water requirements - FAO Irrigation and drainage paper 56.
    """
    def __init__(self, cp=1.013E-3, epsilon=0.6222, zele_sea=125.0):
        """
        Parameters:
        -----------
        cp : float
            specific heat of dry air [MJ kg-1 degC-1]
        epsilon : float
            ratio molecular weight of water vap/dry air
        zele_sea : float
            elevation above sea level [m]
        """
        self.cp = cp
        self.epsilon = epsilon
        self.zele_sea = zele_sea

    def calc_evaporation(self, net_rad, tavg, press, pt_coeff=1.26):
        """
        Parameters:
        -----------
        net_rad : float
            net radiation [mj m-2 day-1]
        tavg : float
            daytime average temperature [degC]
        press : float
            average daytime pressure [kPa]
        pt_coeff : float, optional
            Priestley-Taylor coefficient

        Returns:
        --------
        et : float
            evapotranspiration [mm day-1]
        """
        lambdax = self.calc_latent_heat_of_vapourisation(tavg)
        gamma = self.calc_pyschrometric_constant(lambdax, press)
        slope = self.calc_slope_of_saturation_vapour_pressure_curve(tavg)

        return (pt_coeff / lambdax) * (slope / (slope + gamma)) * net_rad

    def calc_slope_of_saturation_vapour_pressure_curve(self, tavg):
        """ Eqn 13 from FAO paper, Allen et al. 1998.

        Returns:
        --------
        slope : float
            slope of saturation vapour pressure curve [kPa degC-1]

        """
        t = tavg + 237.3
        arg1 = 4098.0 * (0.6108 * exp((17.27 * tavg) / t))
        arg2 = t**2
        return (arg1 / arg2)

    def calc_pyschrometric_constant(self, lambdax, press):
        """ Psychrometric constant ratio of specific heat of moist air at
        a constant pressure to latent heat of vaporisation.

        * Eqn 8 from FAO paper, Allen et al. 1998.

        Returns:
        --------
        gamma : float
            pyschrometric_constant [kPa degC-1]

        """
        return (self.cp * press) / (self.epsilon * lambdax)

    def calc_atmos_pressure(self):
        """ Pressure exerted by the weight of earth's atmosphere.

        * Eqn 7 from FAO paper, Allen et al. 1998.

        Returns:
        --------
        press : float
            modelled average daytime pressure [kPa]

        """
        return (101.3 * ((293.0 - 0.0065 * self.zele_sea) / (293.0))**5.26)

    def calc_latent_heat_of_vapourisation(self, tavg):
        """ After Harrison (1963), should roughly = 2.45 MJ kg-1

        Returns:
        -----------
        lambdax : float
             latent heat of water vaporization [MJ kg-1]
        """
        return 2.501 - 0.002361 * tavg
