""" A resource unit: the spatial unit (1 ha) that owns climate, water cycle
and snag pools. """

from . import constants as const
from .exceptions import ConfigError


class ResourceUnit(object):

    REFERENCE_AREA = const.RU_AREA

    def __init__(self, index, climate, water_cycle,
                 stockable_area=const.RU_AREA):
        """
        Parameters
        ----------
        index : int
            resource unit id
        climate : Climate
            daily climate of the resource unit
        water_cycle : WaterCycle
            reference ET of the resource unit
        stockable_area : float
            area of the resource unit that can hold trees [m2]
        """
        if stockable_area < 0.0 or stockable_area > self.REFERENCE_AREA:
            raise ConfigError("Stockable area must be within 0-%.0f m2: %f" %
                              (self.REFERENCE_AREA, stockable_area))
        self.index = index
        self.climate = climate
        self.water_cycle = water_cycle
        self.stockable_area = stockable_area
        self.snag = None

    @property
    def area_factor(self):
        """ stockable fraction of the resource unit """
        return self.stockable_area / self.REFERENCE_AREA
