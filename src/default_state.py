"""
Snag model default initial state (per ha)

Read into the model unless the user changes these at runtime with definitions
in the .cfg file

"""

# standing woody debris, goes into the medium dbh class
swd_carbon = 0.0              # carbon (kg C ha-1)
swd_cn = 50.0                 # C:N ratio
swd_count = 0.0               # number of snags (ha-1)
swd_decomposition_rate = 0.0  # ksw (yr-1)
swd_half_life = 0.0           # half-life of the standing snags (yr)

# branches and coarse roots, split over the five baskets
other_carbon = 0.0            # carbon (kg C ha-1)
other_cn = 50.0               # C:N ratio
