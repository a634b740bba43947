"""
Snag model default parameters

Read into the model unless the user changes these at runtime with definitions
in the .cfg file

"""

# standing woody debris dbh classes
dbh_lower = 20.0              # break between small and medium snags (cm)
dbh_higher = 100.0            # break between medium and large snags (cm)

# soil
young_refractory_rate = 0.1   # decomposition rate of young refractory matter, kyr (yr-1)

# resource unit
stockable_area = 10000.0      # area of the resource unit that can hold trees (m2)
latitude = 47.5               # latitude (degrees, negative for south)
albedo = 0.18                 # albedo of the reference surface
elevation = 500.0             # elevation above sea level (m)
pt_coeff = 1.26               # Priestley-Taylor coefficient

# prescribed disturbance events, only used if control.disturbance is on
fire_years = []               # years with a fire
fire_factor = 0.0             # fraction of the snag pools burnt (0-1)
salvage_years = []            # years with salvage logging of snags
salvage_factor = 0.0          # fraction of the snags felled to the ground (0-1)
