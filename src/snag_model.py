#!/usr/bin/env python
""" Stand-alone driver of the snag model for a single resource unit.

Reads the .cfg file and the daily met forcing, sets up climate, water cycle,
resource unit and snag pools and runs the annual loop: new year, routing of
this year's litter, dead and harvested trees, disturbance events, annual
update and (optionally) the C and N balance checks.
"""

import sys

from .file_parser import initialise_model_data
from .climate import Climate
from .water_balance import WaterCycle
from .resource_unit import ResourceUnit
from .snag import Snag, InitialSnags
from .cn_pool import CarbonNitrogenTuple
from .litter_production import Litter
from .disturbance import Disturbance
from .check_balance import CheckBalance


class SnagModel(object):
    """ Snag pools of one resource unit driven by prescribed tree deaths.

    The trees come from outside (a growth model, an inventory, a test): the
    model only handles what happens to them once they are dead.
    """
    def __init__(self, fname, met_header=0):
        """ Set up model

        * Read user config file and adjust the model parameters, control or
          initial state attributes that are used within the code.
        * Read meterological forcing file
        * Setup all class instances and load the initial snag state

        Parameters:
        ----------
        fname : string
            filename of model parameters, including path
        met_header : int
            row number of met file header with variable names
        """
        self.annual_output = [] # store annual outputs

        # initialise model structures and read met data
        (self.control, self.params,
            self.state, self.files,
            self.species, self.met_data) = initialise_model_data(fname,
                                                                 met_header)

        # class instances
        self.climate = Climate(self.met_data, latitude=self.params.latitude)
        self.water_cycle = WaterCycle(self.climate, self.params)
        self.ru = ResourceUnit(0, self.climate, self.water_cycle,
                               stockable_area=self.params.stockable_area)
        self.snag = Snag()
        self.snag.setup_thresholds(self.params.dbh_lower,
                                   self.params.dbh_higher)
        self.snag.setup(self.ru, InitialSnags.from_model(self.params,
                                                         self.state))
        if self.control.scale_initial_state:
            self.snag.scale_initial_state()
        self.ru.snag = self.snag

        self.lf = Litter()
        self.cb = CheckBalance()
        self.db = Disturbance(self.params)
        if not self.control.disturbance and self.db.events:
            sys.stderr.write("**** Disturbance events defined but "
                             "control.disturbance is off\n")

        self.years = self.climate.years

    def run_sim(self, stand=None, mortality=None, harvest=None):
        """ Run model simulation!

        Parameters:
        -----------
        stand : list, optional
            living trees (Tree objects) shedding turnover litter every year
        mortality : dictionary, optional
            year -> list of trees dying in that year
        harvest : dictionary, optional
            year -> list of (tree, remove_stem, remove_branch, remove_foliage)
            tuples, the fractions (0-1) of the compartments taken out

        Returns:
        --------
        annual_output : list
            one row per year, see get_output_names()
        """
        stand = stand or []
        mortality = mortality or {}
        harvest = harvest or {}

        # =============== #
        #   YEAR LOOP     #
        # =============== #
        for yr in self.years:
            self.climate.set_year(yr)
            self.snag.new_year()
            before = CarbonNitrogenTuple(self.snag.pools_carbon,
                                         self.snag.pools_nitrogen)

            self.lf.calculate_litter(self.snag, stand)
            for tree in mortality.get(yr, []):
                self.snag.add_mortality(tree)
            for (tree, remove_stem, remove_branch,
                 remove_foliage) in harvest.get(yr, []):
                self.snag.add_harvest(tree, remove_stem, remove_branch,
                                      remove_foliage)

            if self.control.disturbance:
                self.db.apply(yr, self.snag)

            self.snag.calculate_year(self.ru)

            # =============== #
            #   END OF YEAR   #
            # =============== #
            if self.control.check_balance:
                self.cb.check_carbon_balance(before, self.snag.routed_input,
                                             self.snag, year=yr)
                self.cb.check_nitrogen_balance(before,
                                               self.snag.routed_input,
                                               self.snag, year=yr)
            self.save_annual_outputs(yr)

            if self.control.print_progress:
                sys.stderr.write("Year %d: re=%.3f, snag C=%.1f kg/ha\n" %
                                 (yr, self.snag.climate_factor,
                                  self.snag.total_carbon))

        return self.annual_output

    def get_output_names(self):
        return ["year"] + list(self.snag.annual_output().keys())

    def save_annual_outputs(self, year):
        """ Save the annual fluxes + state in a big list. """
        output = [year] + list(self.snag.annual_output().values())
        self.annual_output.append(output)


def main():
    """ run the snag model with the .cfg file given on the cmd line """

    # timing...
    import time
    start_time = time.time()

    if len(sys.argv) != 2:
        sys.stderr.write("usage: %s params.cfg\n" % sys.argv[0])
        sys.exit(1)

    M = SnagModel(sys.argv[1])
    M.run_sim()
    names = M.get_output_names()
    for row in M.annual_output:
        values = dict(zip(names, row))
        sys.stdout.write("%d %.4f %.2f\n" % (values["year"],
                                             values["climate_factor"],
                                             values["total_carbon"]))

    end_time = time.time()
    sys.stderr.write("\nTotal simulation time: %.3f seconds\n\n" %
                                                    (end_time - start_time))


if __name__ == "__main__":

    main()
