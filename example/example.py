#!/usr/bin/env python

"""
Example script of how I would run the model: a small spruce/beech stand
losing a few trees every year, a harvest in 2003 and (see the .cfg file) a
fire in 2005 followed by salvage logging of the snags.

Create the met forcing first:
    python ../scripts/generate_met_forcing.py met_data/example_met_forcing.csv
"""

import os
import sys

import numpy as np
import matplotlib.pyplot as plt

from snag.snag_model import SnagModel
from snag.species import Tree


def make_tree(species, dbh):
    """ crude allometry, biomass in kg per tree """
    stem = 0.1 * dbh**2.4
    return Tree(species, dbh, 1.3 + 25.0 * (1.0 - np.exp(-0.04 * dbh)),
                volume=stem / 450.0, stem_mass=stem, branch_mass=0.15 * stem,
                foliage_mass=0.05 * stem, fine_root_mass=0.03 * stem,
                coarse_root_mass=0.2 * stem)


def main(cfg_fname):

    M = SnagModel(cfg_fname)
    piab = M.species["piab"]
    fasy = M.species["fasy"]

    np.random.seed(42)
    stand = ([make_tree(piab, dbh) for dbh in np.random.uniform(15, 60, 300)] +
             [make_tree(fasy, dbh) for dbh in np.random.uniform(10, 50, 200)])
    mortality = {}
    for yr in M.years:
        dbh = np.random.uniform(5, 70, np.random.poisson(4))
        mortality[yr] = [make_tree(piab, d) for d in dbh]
    harvest = {2003: [(make_tree(piab, dbh), 0.9, 0.2, 0.0)
                      for dbh in np.random.uniform(35, 60, 20)]}

    M.run_sim(stand=stand, mortality=mortality, harvest=harvest)

    names = M.get_output_names()
    out = np.array(M.annual_output)
    col = dict((name, out[:,i]) for i, name in enumerate(names))

    fig = plt.figure(figsize=(8, 9))
    ax1 = fig.add_subplot(311)
    ax2 = fig.add_subplot(312)
    ax3 = fig.add_subplot(313)

    ax1.plot(col["year"], col["swd_c"] / 1000.0, "k-", label="Standing")
    ax1.plot(col["year"], col["other_c"] / 1000.0, "g-",
             label="Branches + coarse roots")
    ax1.legend(loc="best", ncol=1)
    ax1.set_ylabel("Carbon (t C ha$^{-1}$)")

    for i, c in zip((1, 2, 3), ("b", "r", "k")):
        ax2.plot(col["year"], col["swd%d_count" % i], c + "-",
                 label="dbh class %d" % i)
    ax2.legend(loc="best", ncol=1)
    ax2.set_ylabel("Snags (ha$^{-1}$)")

    ax3.plot(col["year"], col["to_atm_c"], "r-", label="Atmosphere")
    ax3.plot(col["year"], col["refractory_c"], "b-", label="Refractory")
    ax3.plot(col["year"], col["to_dist_c"], "k--", label="Disturbance")
    ax3.legend(loc="best", ncol=1)
    ax3.set_ylabel("Flux (kg C ha$^{-1}$ yr$^{-1}$)")
    ax3.set_xlabel("Year")
    plt.show()


if __name__ == "__main__":

    fname = os.path.join("params", "example.cfg")
    if len(sys.argv) > 1:
        fname = sys.argv[1]
    main(fname)
