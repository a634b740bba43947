"""
Snag model default files and locations. These should of course be specified
in any config file, but this will act as a dummy to remind a user
"""

cfg_fname = "params/snag.cfg"
met_fname = "met_data/met_forcing.csv"
