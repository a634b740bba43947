""" Standing dead wood (snags) and coarse woody debris of a resource unit.

Dead trees are split into their biomass compartments. Foliage and fine
roots go straight to the labile soil input, stems become standing woody
debris (SWD) in three dbh classes and branches plus coarse roots are spread
over five baskets of "other wood", one of which drops to the soil every
year. Once a year the pools decay (C is respired, N stays behind), snags
fall to the ground following a half-life that is modified by the climate
and near-empty dbh classes are flushed to the refractory soil input.

References:
-----------
* Seidl, R. et al. (2012) An individual-based process model to simulate
  landscape-scale forest ecosystem dynamics. Ecological Modelling, 231,
  87-100.
* Adair, E. C. et al. (2008) Global Change Biology, 14, 2636-2660.
* Lloyd, J. and Taylor, J. A. (1994) Functional Ecology, 8, 315-323.
"""

from collections import namedtuple
from math import exp

import numpy as np

from . import constants as const
from .cn_pool import CarbonNitrogenPool, CarbonNitrogenTuple
from .exceptions import ConfigError, ContractViolation
from .utilities import float_eq


SwdState = namedtuple("SwdState", ["c", "n", "n_snags", "avg_dbh",
                                   "avg_height", "avg_volume",
                                   "time_since_death", "ksw", "half_life",
                                   "pending_c", "pending_n"])


class InitialSnags(object):
    """ Initial snag state of a resource unit (per ha)

    Parameters:
    -----------
    swd_carbon : float
        carbon of standing woody debris, put into the medium dbh class [kg/ha]
    swd_cn : float
        C:N ratio of the standing woody debris [-]
    swd_count : float
        number of snags [ha-1]
    swd_decomposition_rate : float
        decay rate of standing woody debris (ksw) [yr-1]
    swd_half_life : float
        half-life of the standing snags [yr]
    other_carbon : float
        carbon of branches and coarse roots [kg/ha]
    other_cn : float
        C:N ratio of branches and coarse roots [-]
    young_refractory_rate : float
        decomposition rate of young refractory soil matter (kyr) [yr-1],
        the initial pools carry this rate
    """
    def __init__(self, swd_carbon=0.0, swd_cn=50.0, swd_count=0.0,
                 swd_decomposition_rate=0.0, swd_half_life=0.0,
                 other_carbon=0.0, other_cn=50.0,
                 young_refractory_rate=0.1):
        self.swd_carbon = swd_carbon
        self.swd_cn = swd_cn
        self.swd_count = swd_count
        self.swd_decomposition_rate = swd_decomposition_rate
        self.swd_half_life = swd_half_life
        self.other_carbon = other_carbon
        self.other_cn = other_cn
        self.young_refractory_rate = young_refractory_rate

    @classmethod
    def from_model(cls, params, state):
        """ build from the model params and initial state objects """
        return cls(swd_carbon=state.swd_carbon, swd_cn=state.swd_cn,
                   swd_count=state.swd_count,
                   swd_decomposition_rate=state.swd_decomposition_rate,
                   swd_half_life=state.swd_half_life,
                   other_carbon=state.other_carbon, other_cn=state.other_cn,
                   young_refractory_rate=params.young_refractory_rate)

    def validate(self):
        errors = []
        for name in ("swd_carbon", "swd_count", "swd_decomposition_rate",
                     "other_carbon", "young_refractory_rate"):
            if getattr(self, name) < 0.0:
                errors.append("%s must not be negative" % name)
        for name in ("swd_cn", "other_cn"):
            if getattr(self, name) <= 0.0:
                errors.append("%s must be positive" % name)
        if self.swd_carbon > 0.0 and self.swd_half_life <= 0.0:
            errors.append("swd_half_life must be positive if there is "
                          "standing woody debris")
        if errors:
            raise ConfigError("Invalid initial snag state: %s" %
                              "; ".join(errors))


class StandingWoodyDebris(object):
    """ Standing dead stems of one dbh class.

    The statistics (average dbh, height, volume, half-life) are weighted by
    stem numbers, the decay rate ksw by carbon. Trees dying this year are
    collected in 'pending' and merged into the pool by the annual update.
    """
    def __init__(self, carbon_threshold=0.0):
        self.pool = CarbonNitrogenPool()
        self.pending = CarbonNitrogenPool()
        self.carbon_threshold = carbon_threshold
        self.n_snags = 0.0
        self.clear_statistics()

    def clear_statistics(self):
        self.avg_dbh = 0.0
        self.avg_height = 0.0
        self.avg_volume = 0.0
        self.time_since_death = 0.0
        self.ksw = 0.0
        self.current_ksw = 0.0
        self.half_life = 0.0

    def add_snag(self, tree, stem_biomass, stem_to_snag):
        """ add a dead stem to this year's input of the class

        Parameters:
        -----------
        tree : Tree
            the dying tree
        stem_biomass : float
            stem (and reserve) biomass of the tree [kg]
        stem_to_snag : float
            fraction of the stem that stays standing [-]
        """
        species = tree.species
        p_old = self.n_snags / (self.n_snags + 1.0)
        p_new = 1.0 / (self.n_snags + 1.0)
        self.avg_dbh = self.avg_dbh * p_old + tree.dbh * p_new
        self.avg_height = self.avg_height * p_old + tree.height * p_new
        self.avg_volume = self.avg_volume * p_old + tree.volume * p_new
        self.time_since_death = self.time_since_death * p_old + p_new
        self.half_life = (self.half_life * p_old +
                          species.snag_half_life * p_new)

        # decay rate of this year's input, weighted by carbon
        stem_c = stem_biomass * const.BIOMASS_C_FRACTION
        if stem_c > 0.0:
            total_c = self.pending.c + stem_c
            self.current_ksw = (self.current_ksw * self.pending.c / total_c +
                                species.snag_ksw * stem_c / total_c)
        self.n_snags += 1.0
        self.pending.add_biomass(stem_biomass * stem_to_snag,
                                 species.cn_wood, species.snag_kyr)

    def merge_pending(self):
        """ move this year's input into the pool, update ksw """
        if self.pending.is_empty():
            return
        total_c = self.pool.c + self.pending.c
        if total_c > 0.0:
            self.ksw = (self.ksw * self.pool.c / total_c +
                        self.current_ksw * self.pending.c / total_c)
        self.pool += self.pending
        self.pending.clear()

    def empty(self):
        self.pool.clear()
        self.n_snags = 0.0
        self.clear_statistics()

    def is_empty(self):
        return self.pool.is_empty() and self.pending.is_empty()

    def snapshot(self):
        return SwdState(self.pool.c, self.pool.n, self.n_snags, self.avg_dbh,
                        self.avg_height, self.avg_volume,
                        self.time_since_death, self.ksw, self.half_life,
                        self.pending.c, self.pending.n)


class Snag(object):
    """ Snag pools and fluxes of one resource unit.

    Yearly sequence: new_year(), any number of routing calls (add_mortality,
    add_harvest, add_disturbance, add_turnover_litter, add_turnover_wood,
    add_to_soil, remove_carbon, management), then calculate_year().
    All masses are kg/ha.
    """
    def __init__(self):
        self.ru = None
        self.dbh_lower = -1.0
        self.dbh_higher = 0.0
        self._swd = [StandingWoodyDebris() for i in
                     range(const.N_SWD_CLASSES)]
        self._other_wood = [CarbonNitrogenPool() for i in
                            range(const.N_OTHER_WOOD)]
        self.branch_counter = 0
        self.climate_factor = 0.0
        self.total_carbon = 0.0
        self.total_swd = CarbonNitrogenTuple()
        self.total_other_wood = CarbonNitrogenTuple()

        # year-scoped book-keeping
        self.total_input = CarbonNitrogenTuple()
        self.routed_input = CarbonNitrogenTuple()
        self.standing_woody_to_soil = CarbonNitrogenTuple()
        self.flux_to_atmosphere = CarbonNitrogenTuple()
        self.flux_to_disturbance = CarbonNitrogenTuple()
        self.flux_to_extern = CarbonNitrogenTuple()
        self.labile_flux = CarbonNitrogenPool()
        self.refractory_flux = CarbonNitrogenPool()
        self.labile_flux_aboveground_c = 0.0
        self.refractory_flux_aboveground_c = 0.0
        self.deciduous_foliage_litter = 0.0

    # =============== #
    #   SETUP         #
    # =============== #
    def setup_thresholds(self, lower, upper):
        """ dbh class breaks and the per stem carbon thresholds

        The thresholds are 10% of the carbon of a typical tree in the middle
        of each class (Psme woody allometry); a class whose average snag
        holds less carbon than that is emptied.

        Parameters:
        -----------
        lower : float
            break between the small and medium class [cm]
        upper : float
            break between the medium and large class [cm]
        """
        if lower <= 0.0 or lower >= upper:
            raise ConfigError("Invalid snag dbh class breaks: lower=%s, "
                              "upper=%s" % (lower, upper))
        if (float_eq(lower, self.dbh_lower) and
            float_eq(upper, self.dbh_higher)):
            return
        self.dbh_lower = lower
        self.dbh_higher = upper
        mid_dbh = [lower / 2.0,
                   lower + (upper - lower) / 2.0,
                   upper + (upper - lower) / 2.0]
        for swd, dbh in zip(self._swd, mid_dbh):
            swd.carbon_threshold = (const.ALLOMETRY_A *
                                    dbh**const.ALLOMETRY_B *
                                    const.BIOMASS_C_FRACTION *
                                    const.SNAG_THRESHOLD_FRAC)

    def setup(self, ru, initial):
        """ Reset the pools and load the initial state

        The initial standing wood goes into the medium class, the initial
        branch/coarse root carbon is split evenly over the five baskets.

        Parameters:
        -----------
        ru : ResourceUnit
            owning resource unit
        initial : InitialSnags
            initial state
        """
        if self.dbh_lower <= 0.0:
            raise ConfigError("call setup_thresholds() before setup()")
        initial.validate()

        self.ru = ru
        self.climate_factor = 0.0
        self.branch_counter = 0
        for swd in self._swd:
            swd.empty()
            swd.pending.clear()

        kyr = initial.young_refractory_rate
        medium = self._swd[const.MEDIUM]
        medium.pool = CarbonNitrogenPool(initial.swd_carbon,
                                         initial.swd_carbon / initial.swd_cn,
                                         kyr)
        medium.ksw = initial.swd_decomposition_rate
        medium.n_snags = initial.swd_count
        medium.half_life = initial.swd_half_life

        other = CarbonNitrogenPool(initial.other_carbon,
                                   initial.other_carbon / initial.other_cn,
                                   kyr)
        share = other * (1.0 / const.N_OTHER_WOOD)
        self._other_wood = [share.copy() for i in range(const.N_OTHER_WOOD)]
        self.update_totals()

    def scale_initial_state(self):
        """ scale the initial pools to the stockable area of the unit """
        area_factor = self.ru.area_factor
        medium = self._swd[const.MEDIUM]
        medium.pool *= area_factor
        medium.n_snags *= area_factor
        for pool in self._other_wood:
            pool *= area_factor
        self.total_carbon *= area_factor
        self.total_swd *= area_factor
        self.total_other_wood *= area_factor

    def new_year(self):
        """ clear this year's input and all yearly fluxes """
        for swd in self._swd:
            swd.pending.clear()
            swd.current_ksw = 0.0
        self.standing_woody_to_soil.clear()
        self.total_input.clear()
        self.routed_input.clear()
        self.flux_to_atmosphere.clear()
        self.flux_to_extern.clear()
        self.flux_to_disturbance.clear()
        self.labile_flux.clear()
        self.refractory_flux.clear()
        self.labile_flux_aboveground_c = 0.0
        self.refractory_flux_aboveground_c = 0.0

    def zero_deciduous_foliage(self):
        self.deciduous_foliage_litter = 0.0

    # =============== #
    #   STATE         #
    # =============== #
    def pool_index(self, dbh):
        """ dbh class of a stem: 0 (<= lower), 2 (> upper) or 1 """
        if dbh <= self.dbh_lower:
            return const.SMALL
        if dbh > self.dbh_higher:
            return const.LARGE
        return const.MEDIUM

    def is_state_empty(self):
        return (all(swd.is_empty() for swd in self._swd) and
                all(pool.is_empty() for pool in self._other_wood))

    def is_empty(self):
        """ no carbon in any pool and nothing on its way to the soil """
        return (self.labile_flux.is_empty() and
                self.refractory_flux.is_empty() and self.is_state_empty())

    def standing_woody_debris(self, index):
        """ snapshot of dbh class 'index' """
        return self._swd[index].snapshot()

    @property
    def carbon_thresholds(self):
        """ per stem carbon below which a dbh class is emptied [kg] """
        return tuple(swd.carbon_threshold for swd in self._swd)

    @property
    def other_wood(self):
        """ copies of the five branch/coarse root baskets """
        return tuple(pool.copy() for pool in self._other_wood)

    @property
    def pools_carbon(self):
        """ carbon of all pools incl. this year's pending input """
        return (sum(swd.pool.c + swd.pending.c for swd in self._swd) +
                sum(pool.c for pool in self._other_wood))

    @property
    def pools_nitrogen(self):
        return (sum(swd.pool.n + swd.pending.n for swd in self._swd) +
                sum(pool.n for pool in self._other_wood))

    def update_totals(self):
        self.total_swd = CarbonNitrogenTuple()
        for swd in self._swd:
            self.total_swd += swd.pool
        self.total_other_wood = CarbonNitrogenTuple()
        for pool in self._other_wood:
            self.total_other_wood += pool
        self.total_carbon = self.total_swd.c + self.total_other_wood.c

    # =============== #
    #   CLIMATE       #
    # =============== #
    def calculate_climate_factors(self, ru=None):
        """ Climate modifier of decomposition 're' of the current year

        Mean over the days of the year of a temperature factor (variable
        Q10 model of Lloyd and Taylor, 1994) times a monthly water factor
        from the precipitation / reference ET ratio (Adair et al. 2008).

        Parameters:
        -----------
        ru : ResourceUnit, optional
            defaults to the owning resource unit

        Returns:
        --------
        re : float
            climate factor [-]
        """
        ru = self.ru if ru is None else ru
        if ru is None:
            raise ContractViolation("No resource unit, call setup() first")

        # needs this year's reference ET, the water cycle only runs once
        ru.water_cycle.run()
        ref_et = np.asarray(ru.water_cycle.reference_evapotranspiration,
                            dtype=float)
        precip = np.asarray(ru.climate.precipitation_by_month, dtype=float)
        ratio = np.zeros(const.MONTHS_IN_YR)
        wet = ref_et > 0.0
        ratio[wet] = precip[wet] / ref_et[wet]
        fw_month = 1.0 / (1.0 + const.FW_SCALE * np.exp(const.FW_SLOPE *
                                                        ratio))

        # keep clear of the Lloyd & Taylor pole at -46.02 degC
        tair = np.maximum(ru.climate.temperature_daytime, const.LT_TMIN)
        ft = np.exp(const.LT_E0 * (1.0 / const.LT_TREF - 1.0 /
                                   (tair + const.DEG_TO_KELVIN - const.LT_T0)))
        fw = fw_month[ru.climate.months - 1]

        ndays = ru.climate.days_of_year()
        if ndays == 0:
            raise ContractViolation("No climate days in year %s" %
                                    ru.climate.current_year)
        self.climate_factor = float(np.sum(ft * fw) / ndays)

        return self.climate_factor

    # =============== #
    #   ANNUAL UPDATE #
    # =============== #
    def calculate_year(self, ru=None):
        """ Annual decay and transfer of all snag pools

        Pending input is merged, everything decays with the climate factor,
        standing snags fall and classes with too little left are emptied.

        Parameters:
        -----------
        ru : ResourceUnit, optional
            defaults to the owning resource unit
        """
        if self.ru is None and ru is None:
            raise ContractViolation("calculate_year() called before setup()")

        # always needed, the soil shares the climate factor
        re = self.calculate_climate_factors(ru)
        self.climate_factor = re
        if self.is_empty():
            self.update_totals()
            return
        if re <= 0.0:
            raise ContractViolation("Climate factor must be positive: %f" % re)

        # every year one of the five baskets drops to the soil
        self.refractory_flux += self._other_wood[self.branch_counter]
        self._other_wood[self.branch_counter].clear()
        self.branch_counter = (self.branch_counter + 1) % const.N_OTHER_WOOD

        # decay of branches/coarse roots, the N stays
        for pool in self._other_wood:
            if pool.c > 0.0:
                survive_rate = exp(-re * pool.decomposition_rate)
                self.flux_to_atmosphere.c += pool.c * (1.0 - survive_rate)
                pool.c *= survive_rate

        for i, swd in enumerate(self._swd):
            swd.merge_pending()
            if swd.pool.c > 0.0:
                self.decay_standing_woody_debris(i, swd, re)

        self.update_totals()

    def decay_standing_woody_debris(self, i, swd, re):
        # reduce the carbon, the N stays, i.e. the C:N ratio drifts
        survive_rate = exp(-swd.ksw * re)
        self.flux_to_atmosphere.c += swd.pool.c * (1.0 - survive_rate)
        swd.pool.c *= survive_rate

        # transition to downed woody debris, snags stand longer if
        # decomposition is slow and vice versa
        if swd.half_life <= 0.0:
            raise ContractViolation("Snag class %d holds carbon but has no "
                                    "half-life" % i)
        half_life = swd.half_life / re
        rate = -const.LN2 / half_life

        # small snags fall faster
        if i == const.SMALL:
            rate *= 2.0
        transfer = 1.0 - exp(rate)

        to_soil = swd.pool * transfer
        self.standing_woody_to_soil += to_soil
        self.refractory_flux += to_soil
        swd.pool *= (1.0 - transfer)
        swd.n_snags *= (1.0 - transfer)
        swd.time_since_death += 1.0

        # a handful of stems left, or the average snag is reduced to less
        # than 10% of a typical tree: everything goes to the soil
        if (swd.n_snags < const.MIN_SNAG_STEMS or
            (swd.n_snags > 0.0 and
             swd.pool.c / swd.n_snags < swd.carbon_threshold)):
            self.standing_woody_to_soil += swd.pool
            self.refractory_flux += swd.pool
            swd.empty()

    # =============== #
    #   ROUTING       #
    # =============== #
    def add_turnover_litter(self, species, litter_foliage, litter_fineroot):
        """ foliage and fine root litter of living trees """
        self.labile_flux.add_biomass(litter_foliage, species.cn_foliage,
                                     species.snag_kyl)
        self.labile_flux.add_biomass(litter_fineroot, species.cn_fine_root,
                                     species.snag_kyl)
        self.routed_input.add_biomass(litter_foliage, species.cn_foliage)
        self.routed_input.add_biomass(litter_fineroot, species.cn_fine_root)
        self.labile_flux_aboveground_c += litter_foliage
        if not species.is_evergreen:
            self.deciduous_foliage_litter += litter_foliage

    def add_turnover_wood(self, species, woody_biomass):
        """ woody litter (branches, coarse roots) of living trees """
        self.refractory_flux.add_biomass(woody_biomass, species.cn_wood,
                                         species.snag_kyr)
        self.routed_input.add_biomass(woody_biomass, species.cn_wood)

    def add_to_soil(self, species, woody_debris, litter):
        """ dead material from the regeneration layer, straight to the soil

        Parameters:
        -----------
        species : Species
        woody_debris : CarbonNitrogenTuple
            woody material -> refractory input
        litter : CarbonNitrogenTuple
            foliage and fine roots -> labile input
        """
        self.labile_flux.add(litter, species.snag_kyl)
        self.refractory_flux.add(woody_debris, species.snag_kyr)
        self.routed_input += litter
        self.routed_input += woody_debris

    def add_biomass_to_soil(self, woody_pool, litter_pool):
        """ add pools (with their own decomposition rates) to the soil input,
        all of it is counted as aboveground """
        self.labile_flux += litter_pool
        self.refractory_flux += woody_pool
        self.routed_input += litter_pool
        self.routed_input += woody_pool
        self.labile_flux_aboveground_c += litter_pool.c
        self.refractory_flux_aboveground_c += woody_pool.c

    def add_biomass_pools(self, tree, stem_to_snag, stem_to_soil,
                          branch_to_snag, branch_to_soil, foliage_to_soil):
        """ Split a dead tree between snags, soil and removals

        Whatever part of stem, branches and foliage is neither routed to
        the snags nor to the soil leaves the system (harvest, fire).

        Parameters:
        -----------
        tree : Tree
            the tree to process
        stem_to_snag : float
            fraction (0..1) of the stem biomass that stays standing
        stem_to_soil : float
            fraction (0..1) of the stem biomass that goes to the soil
        branch_to_snag : float
            fraction (0..1) of the branch biomass that goes to the
            branch/coarse root baskets
        branch_to_soil : float
            fraction (0..1) of the branch biomass that goes to the soil
        foliage_to_soil : float
            fraction (0..1) of the foliage biomass that goes to the soil
        """
        check_fractions(stem_to_snag, stem_to_soil, branch_to_snag,
                        branch_to_soil, foliage_to_soil)
        check_pair(stem_to_snag, stem_to_soil, "Stem")
        check_pair(branch_to_snag, branch_to_soil, "Branch")
        species = tree.species
        stem = tree.stem_and_reserve_mass
        branch = tree.branch_mass

        # fine roots and a part of the foliage go to the labile pool
        self.labile_flux.add_biomass(tree.fine_root_mass,
                                     species.cn_fine_root, species.snag_kyl)
        foliage_soil = tree.foliage_mass * foliage_to_soil
        self.labile_flux.add_biomass(foliage_soil, species.cn_foliage,
                                     species.snag_kyl)
        self.labile_flux_aboveground_c += foliage_soil

        # coarse roots and a part of the branches are spread over five years
        biomass_rest = ((tree.coarse_root_mass + branch_to_snag * branch) /
                        const.N_OTHER_WOOD)
        for pool in self._other_wood:
            pool.add_biomass(biomass_rest, species.cn_wood, species.snag_kyr)

        # the rest of the branches and a part of the stem go to the soil
        branch_soil = branch * branch_to_soil
        stem_soil = stem * stem_to_soil
        self.refractory_flux.add_biomass(branch_soil, species.cn_wood,
                                         species.snag_kyr)
        self.refractory_flux.add_biomass(stem_soil, species.cn_wood,
                                         species.snag_kyr)
        self.refractory_flux_aboveground_c += branch_soil + stem_soil

        self.total_input.add_biomass(branch * branch_to_snag +
                                     tree.coarse_root_mass +
                                     stem * stem_to_snag, species.cn_wood)

        if stem_to_snag > 0.0:
            swd = self._swd[self.pool_index(tree.dbh)]
            swd.add_snag(tree, stem, stem_to_snag)

        # N of the removed foliage is counted with the wood C:N ratio
        removed = (tree.foliage_mass * max(0.0, 1.0 - foliage_to_soil) +
                   branch * max(0.0, 1.0 - branch_to_snag - branch_to_soil) +
                   stem * max(0.0, 1.0 - stem_to_snag - stem_to_soil))
        self.flux_to_extern.add_biomass(removed, species.cn_wood)

        # everything but fine roots and the foliage litter counts as wood
        self.routed_input.add_biomass(tree.fine_root_mass,
                                      species.cn_fine_root)
        self.routed_input.add_biomass(foliage_soil, species.cn_foliage)
        self.routed_input.add_biomass(max(0.0, tree.total_mass -
                                          tree.fine_root_mass -
                                          foliage_soil), species.cn_wood)

    def add_mortality(self, tree):
        """ a tree died: stem and branches stay, foliage drops """
        self.add_biomass_pools(tree, 1.0, 0.0, 1.0, 0.0, 1.0)

    def add_harvest(self, tree, remove_stem_fraction, remove_branch_fraction,
                    remove_foliage_fraction):
        """ Residues of a harvested tree

        Parameters:
        -----------
        tree : Tree
        remove_stem_fraction, remove_branch_fraction,
        remove_foliage_fraction : float
            fraction (0..1) of the compartment taken out of the forest, the
            remainder goes to the soil
        """
        check_fractions(remove_stem_fraction, remove_branch_fraction,
                        remove_foliage_fraction)
        self.add_biomass_pools(tree, 0.0, 1.0 - remove_stem_fraction,
                               0.0, 1.0 - remove_branch_fraction,
                               1.0 - remove_foliage_fraction)

    def add_disturbance(self, tree, stem_to_snag, stem_to_soil,
                        branch_to_snag, branch_to_soil, foliage_to_soil):
        """ a tree killed by fire, wind, insects...; see add_biomass_pools """
        self.add_biomass_pools(tree, stem_to_snag, stem_to_soil,
                               branch_to_snag, branch_to_soil,
                               foliage_to_soil)

    def remove_carbon(self, factor):
        """ Disturbance: 'factor' (0..1) of all snag pools, incl. this year's
        input, is lost (e.g. burnt) """
        check_fractions(factor)
        for swd in self._swd:
            self.flux_to_disturbance += (swd.pool + swd.pending) * factor
            swd.pool *= 1.0 - factor
            swd.pending *= 1.0 - factor
        for pool in self._other_wood:
            self.flux_to_disturbance += pool * factor
            pool *= 1.0 - factor

    def management(self, factor):
        """ Cut 'factor' (0..1) of the standing wood and the branch/coarse
        root baskets and move it to the soil """
        check_fractions(factor)
        for swd in self._swd:
            felled = (swd.pool + swd.pending) * factor
            self.standing_woody_to_soil += felled
            self.refractory_flux += felled
            self.refractory_flux_aboveground_c += felled.c
            swd.pool *= 1.0 - factor
            swd.pending *= 1.0 - factor
        for pool in self._other_wood:
            self.refractory_flux += pool * factor
            pool *= 1.0 - factor

    def annual_output(self):
        """ state and fluxes of the year as a flat dictionary """
        output = {"climate_factor": self.climate_factor,
                  "total_carbon": self.total_carbon,
                  "swd_c": self.total_swd.c, "swd_n": self.total_swd.n,
                  "other_c": self.total_other_wood.c,
                  "other_n": self.total_other_wood.n,
                  "input_c": self.total_input.c,
                  "swd_to_soil_c": self.standing_woody_to_soil.c,
                  "swd_to_soil_n": self.standing_woody_to_soil.n,
                  "to_atm_c": self.flux_to_atmosphere.c,
                  "to_dist_c": self.flux_to_disturbance.c,
                  "to_dist_n": self.flux_to_disturbance.n,
                  "to_extern_c": self.flux_to_extern.c,
                  "to_extern_n": self.flux_to_extern.n,
                  "labile_c": self.labile_flux.c,
                  "labile_n": self.labile_flux.n,
                  "refractory_c": self.refractory_flux.c,
                  "refractory_n": self.refractory_flux.n}
        for i, swd in enumerate(self._swd):
            output["swd%d_c" % (i+1)] = swd.pool.c
            output["swd%d_count" % (i+1)] = swd.n_snags
            output["swd%d_tsd" % (i+1)] = swd.time_since_death
        return output


def check_fractions(*fractions):
    """ all fractions within [0, 1] """
    for frac in fractions:
        if frac < 0.0 or frac > 1.0:
            raise ContractViolation("Fraction outside [0, 1]: %s" % frac)


def check_pair(to_snag, to_soil, what, tol=1E-9):
    """ snag and soil fractions of a compartment must not exceed one """
    if to_snag + to_soil > 1.0 + tol:
        raise ContractViolation("%s fractions to snags and soil sum to more "
                                "than one: %s + %s" % (what, to_snag, to_soil))
