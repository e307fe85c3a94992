#!/usr/bin/env python3

'''
    frequently used parameters

    default options for `sideaxes`
'''

import numpy as np

from ._tools import validate_choice, check_real_finite
from .size import UNITS

__all__=['get_sideaxes_defaults', 'set_sideaxes_defaults',
         'reset_sideaxes_defaults']

SIDES=['north', 'south', 'west', 'east']
ORIENTATIONS=['relative', 'west', 'east', 'south', 'north']

# default options to create side axes
_defaults_init=dict(
    gap=0,
    size=None,      # fill to edge of figure
    link=True,
    orientation='relative',
    units='centimeters',
)
_defaults=dict(_defaults_init)

## validators for each option
_validators={}
def _register_validator(name):
    '''
        register a function to validate an option
    '''
    def wrapper(func):
        _validators[name]=func
        return func
    return wrapper

@_register_validator('gap')
def _validate_gap(val):
    return check_real_finite(val, 'gap')

@_register_validator('size')
def _validate_size(val):
    return check_real_finite(val, 'size', allow_none=True)

@_register_validator('link')
def _validate_link(val):
    if not isinstance(val, (bool, np.bool_)):
        raise TypeError('only allow bool for `link`, '
                        'but got %s' % type(val).__name__)
    return bool(val)

@_register_validator('orientation')
def _validate_orientation(val):
    return validate_choice(val, ORIENTATIONS, 'orientation')

@_register_validator('units')
def _validate_units(val):
    return validate_choice(val, UNITS, 'units')

def validate_option(name, val):
    '''
        validate value of option `name`

        return standardized value
    '''
    return _validators[name](val)

# getter/setter
def get_sideaxes_defaults():
    '''
        return copy of current default options
    '''
    return dict(_defaults)

def set_sideaxes_defaults(**kwargs):
    '''
        set default options used in `sideaxes`

        valid keys:
            gap, size, link, orientation, units

        all values are validated before any is updated
    '''
    news={}
    for k, v in kwargs.items():
        if k not in _validators:
            raise ValueError('unexpected option for sideaxes: \'%s\', '
                             'only allow %s' % (k, list(_validators)))
        news[k]=validate_option(k, v)

    _defaults.update(news)

def reset_sideaxes_defaults():
    '''
        restore default options
    '''
    _defaults.clear()
    _defaults.update(_defaults_init)
