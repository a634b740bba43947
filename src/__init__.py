""" Standing deadwood and coarse woody debris C and N model """

__version__ = "1.0.0"
