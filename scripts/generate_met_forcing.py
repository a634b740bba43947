#!/usr/bin/env python

"""
Create a synthetic daily met forcing file for the snag model.

Seasonal cycles of daytime temperature and shortwave radiation plus a bit of
noise, rain falls on random days. Columns: year, doy, tair (degC), rain (mm),
sw_rad (MJ m-2 d-1).

That's all folks.
"""

import sys
import calendar

import numpy as np


def main(ofname, start_yr=2000, end_yr=2010, tmean=8.0, tamp=9.0,
         rain_yr=1100.0, wet_day_frac=0.45, seed=None):

    rs = np.random.RandomState(seed)

    f = open(ofname, "w")
    f.write("#year,doy,tair,rain,sw_rad\n")
    for yr in range(start_yr, end_yr + 1):
        ndays = 366 if calendar.isleap(yr) else 365
        doy = np.arange(1, ndays + 1)
        season = np.sin(2.0 * np.pi * (doy - 110.0) / ndays)
        tair = tmean + tamp * season + rs.normal(0.0, 3.0, ndays)
        sw_rad = np.maximum(1.0, 14.0 + 10.0 * season +
                            rs.normal(0.0, 3.0, ndays))
        wet = rs.uniform(size=ndays) < wet_day_frac
        rain = np.where(wet, rs.exponential(rain_yr / (wet_day_frac * ndays),
                                            ndays), 0.0)
        for i in range(ndays):
            f.write("%d,%d,%.2f,%.2f,%.2f\n" % (yr, doy[i], tair[i], rain[i],
                                                sw_rad[i]))
    f.close()


if __name__ == "__main__":

    if len(sys.argv) != 2:
        sys.stderr.write("usage: %s out_file.csv\n" % sys.argv[0])
        sys.exit(1)
    main(sys.argv[1], seed=1)
