""" Daily climate of a resource unit, one calendar year at a time """

import sys
import numpy as np

from . import constants as const
from .exceptions import ConfigError
from .utilities import month_of_day, uniq


class Climate(object):
    """ Daily met forcing split into calendar years.

    The snag model needs the daytime mean temperature of every day of the
    current year and the monthly precipitation sums; the water cycle also
    needs the shortwave radiation.
    """
    required = ["year", "doy", "tair", "rain", "sw_rad"]

    def __init__(self, met_data, latitude=0.0):
        """
        Parameters
        ----------
        met_data : floats, dictionary
            meteorological forcing data, columns year, doy, tair [degC],
            rain [mm d-1], sw_rad [MJ m-2 d-1]
        latitude : float
            latitude [degrees], used for the day length
        """
        missing = [var for var in self.required if var not in met_data]
        if missing:
            raise ConfigError("Met data is missing column(s): %s" %
                              ", ".join(missing))
        self.latitude = latitude
        self.met_data = dict((var, np.asarray(met_data[var], dtype=float))
                             for var in self.required)
        self.years = [int(yr) for yr in uniq(list(self.met_data["year"]))]
        self.month = np.array([month_of_day(yr, doy) for (yr, doy) in
                               zip(self.met_data["year"],
                                   self.met_data["doy"])], dtype=int)
        self.current_year = None
        self.index = None

    def set_year(self, year):
        """ make 'year' the current year """
        index = np.flatnonzero(self.met_data["year"] == year)
        if index.size == 0:
            raise ConfigError("No met data for year %d" % year)
        if index.size < 365:
            sys.stderr.write("**** Met data only covers %d days of %d\n" %
                             (index.size, year))
        self.current_year = year
        self.index = index

    def days_of_year(self):
        return self.index.size

    @property
    def doy(self):
        return self.met_data["doy"][self.index].astype(int)

    @property
    def temperature_daytime(self):
        return self.met_data["tair"][self.index]

    @property
    def precipitation(self):
        return self.met_data["rain"][self.index]

    @property
    def sw_rad(self):
        return self.met_data["sw_rad"][self.index]

    @property
    def months(self):
        """ calendar month (1-12) of every day of the current year """
        return self.month[self.index]

    @property
    def precipitation_by_month(self):
        """ monthly precipitation sums of the current year [mm] """
        return np.bincount(self.months - 1, weights=self.precipitation,
                           minlength=const.MONTHS_IN_YR)
