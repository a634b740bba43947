#!/usr/bin/env python
""" Load all the model initialisation data, see docstring below"""

import os
import sys
import keyword
import importlib

from configobj import ConfigObj, ConfigObjError, flatten_errors, \
                      get_extra_values
from validate import Validator

from . import default_params as p
from . import default_control as c
from . import default_state as s
from . import default_files as fi
from .exceptions import ConfigError
from .species import Species


# types and ranges of everything a user may set, anything else is rejected
CONFIGSPEC = """
[files]
cfg_fname = string(default=None)
met_fname = string(default=None)

[params]
dbh_lower = float(min=0, default=None)
dbh_higher = float(min=0, default=None)
young_refractory_rate = float(min=0, default=None)
stockable_area = float(min=0, max=10000, default=None)
latitude = float(min=-90, max=90, default=None)
albedo = float(min=0, max=1, default=None)
elevation = float(default=None)
pt_coeff = float(min=0, default=None)
fire_years = int_list(default=None)
fire_factor = float(min=0, max=1, default=None)
salvage_years = int_list(default=None)
salvage_factor = float(min=0, max=1, default=None)

[state]
swd_carbon = float(min=0, default=None)
swd_cn = float(min=0, default=None)
swd_count = float(min=0, default=None)
swd_decomposition_rate = float(min=0, default=None)
swd_half_life = float(min=0, default=None)
other_carbon = float(min=0, default=None)
other_cn = float(min=0, default=None)

[control]
scale_initial_state = boolean(default=None)
check_balance = boolean(default=None)
disturbance = boolean(default=None)
print_progress = boolean(default=None)

[species]
[[__many__]]
cn_foliage = float(min=0, default=75.0)
cn_fine_root = float(min=0, default=40.0)
cn_wood = float(min=0, default=300.0)
snag_kyl = float(min=0, default=0.15)
snag_kyr = float(min=0, default=0.0807)
snag_ksw = float(min=0, default=0.08)
snag_half_life = float(min=0, default=20.0)
turnover_leaf = float(min=0, max=1, default=0.2)
turnover_root = float(min=0, max=1, default=0.33)
turnover_branch = float(min=0, max=1, default=0.0)
is_evergreen = boolean(default=True)
""".splitlines()


def initialise_model_data(fname, met_header=0):
    """ Load default model data, met forcing and return
    If there are user supplied input files initialise model with these instead

    Parameters:
    ----------
    fname : string
        filename of input options, parameters. Filename should include path!
    met_header : int
        row number of met file header with variable names

    Returns:
    --------
    control : integers, object
        model control flags
    params: floats, object
        model parameters
    state: floats, object
        model initial state
    files : strings, object
        file names
    species : dictionary
        Species objects by species code
    met_data : floats, dictionary
        meteorological forcing data

    """
    # if this code is run in a monte carlo fashion python doesn't reimport the
    # modules with each instances! Force it to
    importlib.reload(p)
    importlib.reload(c)
    importlib.reload(s)
    importlib.reload(fi)

    R = ReadConfigFile(fname)
    config = R.load_files()
    (user_control, user_params,
     user_state, user_files) = R.get_config_dicts(config)

    params = adjust_object_attributes(user_params, p)
    state = adjust_object_attributes(user_state, s)
    control = adjust_object_attributes(user_control, c)
    files = adjust_object_attributes(user_files, fi)
    species = read_species(config)

    # met file is relative to the .cfg file
    met_fname = files.met_fname
    if not os.path.isabs(met_fname):
        met_fname = os.path.join(os.path.dirname(os.path.abspath(fname)),
                                 met_fname)
    met_data = read_met_forcing(met_fname, met_header)

    return (control, params, state, files, species, met_data)


class ReadConfigFile(object):
    """ Read supplied config file (.cfg/.ini), check it against the configspec.

    Return various dictionaries based on defined sections.
    """
    def __init__(self, fname):
        """
        Parameters:
        ----------
        fname : string
            filename of parameter (CFG) file [including path]

        """
        self.config_file = fname

    def load_files(self):
        """ load and validate the config file, return a dictionary

        Returns:
        --------
        config : object
            user defined parameter file as an object

        """
        try:
            config = ConfigObj(self.config_file, configspec=CONFIGSPEC,
                               file_error=True)
        except (ConfigObjError, IOError) as e:
            raise IOError('Could not read config file "%s": %s' %
                          (self.config_file, e))

        results = config.validate(Validator(), preserve_errors=True)
        errors = []
        if results is not True:
            for (sections, key, error) in flatten_errors(config, results):
                where = "/".join(sections + [key or "(section)"])
                reason = str(error) if error else "missing value"
                errors.append("%s: %s" % (where, reason))
        for (sections, key) in get_extra_values(config):
            errors.append("%s: not a model variable" %
                          "/".join(list(sections) + [key]))
        if errors:
            raise ConfigError('Invalid config file "%s":\n  %s' %
                              (self.config_file, "\n  ".join(errors)))

        return config

    def get_config_dicts(self, config):
        """ Break config dictionary into small dictionaries based on sections.

        Keys the user didn't set are left out, so the module defaults stay.

        Parameters:
        -----------
        config : dictionary
            User supplied config dict

        Returns:
        --------
        control : dictionary
            model control flags
        params: dictionary
            model parameters
        state: dictionary
            model state
        files : dictionary
            file names

        """
        user_control = self.build_dict(config, "control")
        user_params = self.build_dict(config, "params")
        user_state = self.build_dict(config, "state")
        user_files = self.build_dict(config, "files")

        # add default cfg fname incase user wants to know where we came from
        user_files["cfg_fname"] = self.config_file

        return (user_control, user_params, user_state, user_files)

    def build_dict(self, config, section):
        d = {}
        for key, value in config[section].items():
            if key not in config[section].defaults:
                d[key] = value
        return d


def read_species(config):
    """ Build the species table from the [species] section

    Parameters:
    -----------
    config : dictionary
        validated config

    Returns:
    --------
    species : dictionary
        Species objects by species code
    """
    species = {}
    for code, values in config["species"].items():
        species[code] = Species(code, **dict(values))

    return species


def read_met_forcing(fname, met_header=0, comment='#'):
    """ Read the driving data into a dictionary
    method searches for the line 'met_header' (the variable names, may
    start with a hash tag) in order to build the named dictionary

    Parameters:
    -----------
    fname : string
        filename of the met file
    met_header : int
        row number of met file header with variable names
    comment : string, optional
        character defining a comment

    Returns:
    --------
    data : dictionary
        met forcing data

    """
    data = {}
    var_names = None
    try:
        with open(fname, 'r') as f:
            for line_number, line in enumerate(f):
                if line_number == met_header:
                    # remove comment tag
                    var_names = [v.strip() for v in
                                 line.replace(comment, ' ').split(",")]
                elif line_number < met_header or not line.strip() or \
                     line.lstrip().startswith(comment):
                    continue
                else:
                    values = [float(i) for i in line.split(",")]
                    for name, value in zip(var_names, values):
                        data.setdefault(name, []).append(value)
    except IOError:
        raise IOError('Could not read met file: "%s"' % fname)
    except ValueError as e:
        raise ConfigError('Bad value in met file "%s": %s' % (fname, e))

    if var_names is None:
        raise ConfigError('Met file "%s" has no header on line %d' %
                          (fname, met_header))
    if not data:
        sys.stderr.write("**** Met file %s holds no data\n" % fname)

    return data


def adjust_object_attributes(user_dict, obj):
    """Loop through the user supplied dict and change relevant attributes

    Parameters:
    -----------
    user_dict : dictionary
        dictionary that contains values to change
    obj : object
        default model parameters

    Returns:
    --------
    obj : object
        adjusted parameters object

    """
    # check user hasn't specified a parameter we are not expecting...
    # make sure parameters is not named a reserved python word
    bad_words = keyword.kwlist
    bad_vars = [method for method in dir(str) if method[:2] == '__']
    for key, value in user_dict.items():
        if key in bad_words or key in bad_vars:
            raise ConfigError("You cant name your parameter anything "
                              "from:\n\n %s" % (bad_words + bad_vars))
        elif hasattr(obj, key):
            setattr(obj, key, value)
        else:
            raise ConfigError(".cfg file contains variable not in the "
                              "model: %s" % key)
    return obj
