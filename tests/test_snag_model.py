#!/usr/bin/env python
""" The stand-alone driver: set up from a .cfg file and the annual loop """

import os
import shutil
import tempfile
import unittest

from snag.snag_model import SnagModel
from snag.species import Tree
import snag.constants as const

from snag_fixtures import make_met_data
from test_file_parser import write_met_file


CFG = """
[files]
met_fname = met.csv

[params]
dbh_lower = 20.0
dbh_higher = 60.0
stockable_area = 5000.0
fire_years = 2002,
fire_factor = 0.5

[state]
swd_carbon = 2000.0
swd_cn = 60.0
swd_count = 40.0
swd_decomposition_rate = 0.05
swd_half_life = 15.0
other_carbon = 1000.0

[control]
disturbance = %s

[species]
[[piab]]
[[fasy]]
is_evergreen = False
turnover_branch = 0.02
"""


class SnagModelTests(unittest.TestCase):

    def setUp(self):
        self.tmp_dir = tempfile.mkdtemp()
        write_met_file(os.path.join(self.tmp_dir, "met.csv"),
                       make_met_data(years=(2001, 2002, 2003)))

    def tearDown(self):
        shutil.rmtree(self.tmp_dir)

    def make_model(self, disturbance=False):
        fname = os.path.join(self.tmp_dir, "snag.cfg")
        with open(fname, "w") as f:
            f.write(CFG % disturbance)
        return SnagModel(fname, met_header=1)

    def make_tree(self, model, code, dbh):
        return Tree(model.species[code], dbh, 25.0, volume=1.0,
                    stem_mass=400.0, branch_mass=80.0, foliage_mass=30.0,
                    fine_root_mass=15.0, coarse_root_mass=90.0)

    def test_initial_state_is_scaled(self):
        M = self.make_model()
        medium = M.snag.standing_woody_debris(const.MEDIUM)
        self.assertAlmostEqual(medium.c, 1000.0)
        self.assertAlmostEqual(medium.n_snags, 20.0)
        self.assertAlmostEqual(M.snag.total_carbon, 1500.0)
        self.assertIs(M.ru.snag, M.snag)

    def test_run_sim(self):
        M = self.make_model()
        stand = [self.make_tree(M, "fasy", 35.0)]
        mortality = {2001: [self.make_tree(M, "piab", 45.0),
                            self.make_tree(M, "piab", 10.0)]}
        harvest = {2002: [(self.make_tree(M, "piab", 70.0), 1.0, 0.5, 0.0)]}
        output = M.run_sim(stand=stand, mortality=mortality, harvest=harvest)

        names = M.get_output_names()
        self.assertEqual(len(output), 3)
        self.assertEqual([row[0] for row in output], [2001, 2002, 2003])
        for row in output:
            self.assertEqual(len(row), len(names))
        rows = [dict(zip(names, row)) for row in output]

        self.assertGreater(rows[0]["swd1_count"], 0.0)
        self.assertAlmostEqual(rows[1]["to_extern_c"], 400.0 + 40.0)
        self.assertAlmostEqual(rows[2]["to_extern_c"], 0.0)
        for row in rows:
            self.assertGreater(row["climate_factor"], 0.0)
            self.assertGreater(row["to_atm_c"], 0.0)
            self.assertAlmostEqual(row["to_dist_c"], 0.0)

        # deciduous foliage litter keeps adding up until someone zeroes it
        self.assertAlmostEqual(M.snag.deciduous_foliage_litter,
                               3 * 0.2 * 30.0)

    def test_fire(self):
        M = self.make_model(disturbance=True)
        output = M.run_sim()
        rows = [dict(zip(M.get_output_names(), row)) for row in output]
        self.assertAlmostEqual(rows[0]["to_dist_c"], 0.0)
        self.assertGreater(rows[1]["to_dist_c"], 0.0)
        self.assertLess(rows[1]["total_carbon"],
                        0.6 * rows[0]["total_carbon"])

    def test_fire_switched_off(self):
        M = self.make_model(disturbance=False)
        output = M.run_sim()
        rows = [dict(zip(M.get_output_names(), row)) for row in output]
        self.assertAlmostEqual(rows[1]["to_dist_c"], 0.0)


if __name__ == "__main__":

    unittest.main()
