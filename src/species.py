""" Species parameters and the (dying, harvested or living) trees handed to
the snag model. Biomass compartments are in kg dry mass per ha. """

from .exceptions import ConfigError


class Species(object):
    """ Species parameters used by the snag routing

    Parameters:
    -----------
    code : string
        species code, e.g. "piab"
    cn_foliage, cn_fine_root, cn_wood : float
        C:N ratios of foliage, fine roots and wood [-]
    snag_kyl : float
        decomposition rate of labile material (litter) [yr-1]
    snag_kyr : float
        decomposition rate of refractory material (woody debris) [yr-1]
    snag_ksw : float
        decomposition rate of standing woody debris [yr-1]
    snag_half_life : float
        half-life of standing snags before they fall [yr]
    turnover_leaf, turnover_root, turnover_branch : float
        annual turnover fractions of living trees [yr-1]
    is_evergreen : logical
    """
    def __init__(self, code, cn_foliage=75.0, cn_fine_root=40.0,
                 cn_wood=300.0, snag_kyl=0.15, snag_kyr=0.0807,
                 snag_ksw=0.08, snag_half_life=20.0, turnover_leaf=0.2,
                 turnover_root=0.33, turnover_branch=0.0,
                 is_evergreen=True):
        self.code = code
        self.cn_foliage = cn_foliage
        self.cn_fine_root = cn_fine_root
        self.cn_wood = cn_wood
        self.snag_kyl = snag_kyl
        self.snag_kyr = snag_kyr
        self.snag_ksw = snag_ksw
        self.snag_half_life = snag_half_life
        self.turnover_leaf = turnover_leaf
        self.turnover_root = turnover_root
        self.turnover_branch = turnover_branch
        self.is_evergreen = is_evergreen
        self.validate()

    def validate(self):
        for name in ("cn_foliage", "cn_fine_root", "cn_wood",
                     "snag_half_life"):
            if getattr(self, name) <= 0.0:
                raise ConfigError("Species %s: %s must be positive" %
                                  (self.code, name))
        for name in ("snag_kyl", "snag_kyr", "snag_ksw", "turnover_leaf",
                     "turnover_root", "turnover_branch"):
            if getattr(self, name) < 0.0:
                raise ConfigError("Species %s: %s must not be negative" %
                                  (self.code, name))

    def __repr__(self):
        return "Species(%r)" % self.code


class Tree(object):
    """ A single tree as seen by the snag model

    Parameters:
    -----------
    species : Species
    dbh : float
        diameter at breast height [cm]
    height : float
        tree height [m]
    volume : float
        stem volume [m3]
    stem_mass, branch_mass, foliage_mass, fine_root_mass, coarse_root_mass : float
        biomass compartments [kg]
    npp_reserve : float
        NPP reserve pool, travels with the stem [kg]
    """
    def __init__(self, species, dbh, height, volume=0.0, stem_mass=0.0,
                 branch_mass=0.0, foliage_mass=0.0, fine_root_mass=0.0,
                 coarse_root_mass=0.0, npp_reserve=0.0):
        self.species = species
        self.dbh = dbh
        self.height = height
        self.volume = volume
        self.stem_mass = stem_mass
        self.branch_mass = branch_mass
        self.foliage_mass = foliage_mass
        self.fine_root_mass = fine_root_mass
        self.coarse_root_mass = coarse_root_mass
        self.npp_reserve = npp_reserve

    @property
    def stem_and_reserve_mass(self):
        return self.stem_mass + self.npp_reserve

    @property
    def total_mass(self):
        return (self.stem_mass + self.npp_reserve + self.branch_mass +
                self.foliage_mass + self.fine_root_mass +
                self.coarse_root_mass)

    def __repr__(self):
        return "Tree(%s, dbh=%.1f, height=%.1f)" % (self.species.code,
                                                     self.dbh, self.height)
