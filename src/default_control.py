"""
Snag model default control flags

Read into the model unless the user changes these at runtime with definitions
in the .cfg file

"""

scale_initial_state = True    # scale the initial pools by the stockable area
check_balance = True          # check the annual C and N books close
disturbance = False           # apply the fire/salvage events in params
print_progress = False        # one line per simulated year to stderr
