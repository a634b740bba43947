#!/usr/bin/env python
""" Climate, reference ET and the climate factor of decomposition """

import unittest
from math import exp

import numpy as np

from snag.climate import Climate
from snag.water_balance import WaterCycle
from snag.snag import Snag
from snag.exceptions import ConfigError, ContractViolation

from snag_fixtures import Params, make_met_data, make_resource_unit


class ClimateTests(unittest.TestCase):

    def test_missing_column(self):
        met_data = make_met_data()
        del met_data["rain"]
        self.assertRaises(ConfigError, Climate, met_data)

    def test_unknown_year(self):
        climate = Climate(make_met_data(years=(2001, 2002)))
        self.assertEqual(climate.years, [2001, 2002])
        self.assertRaises(ConfigError, climate.set_year, 1999)

    def test_monthly_precipitation(self):
        climate = Climate(make_met_data(years=(2001, 2004), rain=2.0))
        climate.set_year(2004)
        self.assertEqual(climate.days_of_year(), 366)
        precip = climate.precipitation_by_month
        self.assertEqual(len(precip), 12)
        self.assertAlmostEqual(precip[0], 62.0)
        self.assertAlmostEqual(precip[1], 58.0)
        self.assertAlmostEqual(np.sum(precip), 732.0)
        self.assertEqual(climate.months[-1], 12)


class WaterCycleTests(unittest.TestCase):

    def test_reference_et(self):
        ru = make_resource_unit()
        ru.water_cycle.run()
        ref_et = ru.water_cycle.reference_evapotranspiration
        self.assertEqual(len(ref_et), 12)
        self.assertTrue(np.all(ref_et >= 0.0))
        self.assertGreater(np.sum(ref_et), 0.0)

    def test_runs_once_per_year(self):
        climate = Climate(make_met_data(years=(2001, 2002)))
        climate.set_year(2001)
        wc = WaterCycle(climate, Params())
        wc.run()
        wc.ref_et_month = np.ones(12) * -1.0
        wc.run()
        self.assertTrue(np.all(wc.reference_evapotranspiration == -1.0))
        climate.set_year(2002)
        wc.run()
        self.assertTrue(np.all(wc.reference_evapotranspiration >= 0.0))

    def test_partial_year_keeps_calendar_day_length(self):
        full = make_met_data()
        january = dict((var, values[:31]) for (var, values) in full.items())
        ref_et = []
        for met_data in (full, january):
            ru = make_resource_unit(met_data)
            ru.water_cycle.run()
            ref_et.append(ru.water_cycle.reference_evapotranspiration)
        self.assertGreater(ref_et[1][0], 0.0)
        self.assertAlmostEqual(ref_et[1][0], ref_et[0][0])
        self.assertTrue(np.all(ref_et[1][1:] == 0.0))

    def test_no_radiation_no_et(self):
        ru = make_resource_unit(make_met_data(sw_rad=0.0))
        ru.water_cycle.run()
        self.assertTrue(np.all(ru.water_cycle.reference_evapotranspiration
                               == 0.0))


class ResourceUnitTests(unittest.TestCase):

    def test_stockable_area(self):
        ru = make_resource_unit(stockable_area=2500.0)
        self.assertAlmostEqual(ru.area_factor, 0.25)
        self.assertRaises(ConfigError, make_resource_unit,
                          stockable_area=20000.0)


class ClimateFactorTests(unittest.TestCase):

    def climate_factor(self, **kwargs):
        ru = make_resource_unit(make_met_data(**kwargs))
        return Snag().calculate_climate_factors(ru)

    def test_no_resource_unit(self):
        self.assertRaises(ContractViolation, Snag().calculate_climate_factors)

    def test_reference_conditions(self):
        # at 10 degC the temperature response is one, without reference ET
        # the water response is 1 / (1 + 30)
        re = self.climate_factor(tair=10.0, rain=5.0, sw_rad=0.0)
        self.assertAlmostEqual(re, 1.0 / 31.0)

    def test_wet_site(self):
        re = self.climate_factor(tair=10.0, rain=100.0, sw_rad=15.0)
        self.assertAlmostEqual(re, 1.0, places=6)

    def test_warmer_and_wetter_decay_faster(self):
        cold = self.climate_factor(tair=0.0)
        warm = self.climate_factor(tair=20.0)
        dry = self.climate_factor(rain=0.1)
        wet = self.climate_factor(rain=6.0)
        self.assertGreater(warm, cold)
        self.assertGreater(wet, dry)

    def test_bounds(self):
        for tair in (-60.0, -46.0, -40.0, -10.0, 0.0, 25.0, 40.0):
            for rain in (0.0, 1.0, 50.0):
                re = self.climate_factor(tair=tair, rain=rain)
                self.assertTrue(np.isfinite(re))
                self.assertGreaterEqual(re, 0.0)
                if tair > -46.0:
                    self.assertGreater(re, 0.0)

    def test_cold_year_follows_lloyd_taylor(self):
        # no radiation, no reference ET: the water response is 1 / 31
        re = self.climate_factor(tair=-35.0, sw_rad=0.0)
        ft = exp(308.56 * (1.0 / 56.02 - 1.0 / (-35.0 + 273.15 - 227.13)))
        self.assertAlmostEqual(re / (ft / 31.0), 1.0, places=9)
        self.assertAlmostEqual(re, 5.50e-12, places=13)

    def test_factor_is_stored(self):
        ru = make_resource_unit()
        s = Snag()
        re = s.calculate_climate_factors(ru)
        self.assertEqual(s.climate_factor, re)


if __name__ == "__main__":

    unittest.main()
