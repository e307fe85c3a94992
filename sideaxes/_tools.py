#!/usr/bin/env python3

'''
    useful tools for side axes:
        argument check, and method binding to instance
'''

import numbers

import numpy as np

# argument check
def confirm_arg_in(arg, valids, name=None):
    '''
        confirm `arg` in a valid list
        otherwise raise ValueError

        :param name: str, optional
            name of the argument
    '''
    if name is None:
        name='arg'
    else:
        name='`%s`' % name

    if arg not in valids:
        raise ValueError(
            'only allow %s in %s' % (name, repr(valids)))

def validate_choice(arg, valids, name=None):
    '''
        validate string `arg` against a list of choices

        case-insensitive, and unambiguous prefix is accepted,
            e.g. 'cent' for 'centimeters'

        return the matched choice in `valids`
    '''
    sname='arg' if name is None else '`%s`' % name

    if not isinstance(arg, str):
        raise TypeError('only allow str for %s, '
                        'but got %s' % (sname, type(arg).__name__))

    s=arg.lower()
    if s in valids:
        return s

    matched=[v for v in valids if s and v.startswith(s)]
    if len(matched)==1:
        return matched[0]

    if len(matched)>1:
        raise ValueError('ambiguous value for %s: \'%s\', '
                         'could be any of %s' % (sname, arg, repr(matched)))

    confirm_arg_in(arg, valids, name)

def check_real_finite(val, name=None, allow_none=False):
    '''
        check `val` is finite real number

        raise TypeError for non-real value,
              ValueError for nan or inf
    '''
    if allow_none and val is None:
        return val

    sname='arg' if name is None else '`%s`' % name

    if isinstance(val, bool) or not isinstance(val, numbers.Real):
        raise TypeError('only allow real number for %s, '
                        'but got %s' % (sname, type(val).__name__))

    if not np.isfinite(val):
        raise ValueError('only allow finite number for %s, '
                         'but got %s' % (sname, val))

    return float(val)

# bind new function to existed method
class PostCallHook:
    '''
        replacement of a method of instance,
            calling `getattr(target, handler)()` after the original method

        original method is looked up from class of the instance,
            and no closure is held, so instance is still picklable
    '''
    def __init__(self, obj, attr, target, handler):
        self.obj=obj
        self.attr=attr
        self.target=target
        self.handler=handler

        self.__doc__=getattr(type(obj), attr).__doc__

    def __call__(self, *args, **kwargs):
        res=getattr(type(self.obj), self.attr)(self.obj, *args, **kwargs)
        getattr(self.target, self.handler)()
        return res

def bind_post_call_to_instance(obj, attr, target, handler):
    '''
        bind to instance method a handler called after the old one

        Parameters:
            obj: object
                instance to bind

            attr: str
                name of method, defined in class of `obj`

            target, handler: object, str
                call by `getattr(target, handler)()`
                    after old method returns
    '''
    hook=PostCallHook(obj, attr, target, handler)
    setattr(obj, attr, hook)
    return hook
