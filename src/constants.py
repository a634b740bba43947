"""
A series of model constants, well.

Module defines a series of constants, e.g.
import snag.constants as const
>>> print(const.RU_AREA)
>>>10000.0

Refs
====
* Lloyd, J. and Taylor, J. A. (1994) On the temperature dependence of soil
  respiration. Functional Ecology, 8, 315-323.
* Adair, E. C. et al. (2008) Simple three-pool model accurately describes
  patterns of long-term litter decomposition in diverse climates. Global
  Change Biology, 14, 2636-2660.
"""
from math import log

M2_AS_HA = 1E-4
HA_AS_M2 = 1.0 / 1E-4
KG_AS_TONNES = 1E-3
TONNES_AS_KG = 1.0 / KG_AS_TONNES
DEG_TO_KELVIN = 273.15
WATT_HR_TO_MJ = 0.0036
MONTHS_IN_YR = 12
NDAYS_IN_YR = 365

# area of a (full) resource unit [m2]
RU_AREA = 10000.0

# carbon fraction of dry biomass
BIOMASS_C_FRACTION = 0.5

LN2 = log(2.0)

# number of standing woody debris (dbh) classes and rotating branch/coarse
# root baskets
N_SWD_CLASSES = 3
N_OTHER_WOOD = 5
SMALL, MEDIUM, LARGE = 0, 1, 2

# Psme woody allometry (kg biomass from dbh, cm), used for the per stem
# carbon thresholds of the standing woody debris classes
ALLOMETRY_A = 0.10568
ALLOMETRY_B = 2.4247
SNAG_THRESHOLD_FRAC = 0.1

# stems per class below which the class is emptied
MIN_SNAG_STEMS = 0.5

# Lloyd & Taylor (1994) temperature response
LT_E0 = 308.56
LT_TREF = 56.02
LT_T0 = 227.13
LT_TMIN = -46.0

# Adair et al. (2008) water response
FW_SCALE = 30.0
FW_SLOPE = -8.5
