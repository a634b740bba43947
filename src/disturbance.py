""" Prescribed disturbance events hitting the snags of a resource unit """

import sys

from .exceptions import ConfigError


class Disturbance(object):
    """ Schedule of fire and salvage events

    A fire burns 'factor' of all snag pools (the loss is booked as
    disturbance flux), salvage logging fells 'factor' of the standing wood
    and the branch/coarse root baskets to the ground.
    """
    kinds = ("fire", "salvage")

    def __init__(self, params=None):
        """
        Parameters
        ----------
        params: floats, object
            model parameters, fire_years/fire_factor and
            salvage_years/salvage_factor define the events
        """
        self.events = []
        if params is not None:
            for year in params.fire_years or []:
                self.add_event(year, "fire", params.fire_factor)
            for year in params.salvage_years or []:
                self.add_event(year, "salvage", params.salvage_factor)

    def add_event(self, year, kind, factor):
        if kind not in self.kinds:
            raise ConfigError("Unknown disturbance %r, expected one of %s" %
                              (kind, ", ".join(self.kinds)))
        if factor < 0.0 or factor > 1.0:
            raise ConfigError("Disturbance factor outside [0, 1]: %s" %
                              factor)
        self.events.append((int(year), kind, factor))

    def events_in(self, year):
        return [ev for ev in self.events if ev[0] == year]

    def apply(self, year, snag):
        """ apply all of this year's events to 'snag', returns their number """
        events = self.events_in(year)
        for (yr, kind, factor) in events:
            if kind == "fire":
                snag.remove_carbon(factor)
            else:
                snag.management(factor)
            sys.stderr.write("%s in %d removed %.0f%% of the snags\n" %
                             (kind.capitalize(), yr, factor * 100.0))

        return len(events)
