#!/usr/bin/env python3

'''
    position of side axes

    side axes is placed outside of parent axes,
        sharing the whole edge on the given side

    gap and size are given in a physical unit,
        which is converted to figure fraction
            by ratio of parent's position in the two units
'''

import numpy as np

from .view import units_scope

__all__=['side_position', 'default_side_size', 'normalize_rect']

def _parent_positions(view, units):
    '''
        position of parent view in normalized units and `units`

        units of view is restored after reading
    '''
    with units_scope(view, 'normalized'):
        pos_frac=view.get_position()

    with units_scope(view, units):
        pos_unit=view.get_position()

    return pos_frac, pos_unit

def default_side_size(side, pos_unit, scale, gap=0):
    '''
        default size of side axes, to fill space to figure edge

        Parameters:
            side: 'north', 'south', 'west', 'east'

            pos_unit: array (x, y, w, h)
                position of parent in units of `gap`

            scale: array (sx, sy)
                ratio of length in normalized units to that in units of `gap`
    '''
    x, y, w, h=pos_unit
    sx, sy=scale

    if side=='west':
        return x-gap
    if side=='south':
        return y-gap
    if side=='east':
        return 1/sx-x-w-gap
    if side=='north':
        return 1/sy-y-h-gap

    raise ValueError('unexpected side: \'%s\'' % side)

def side_position(view, side, gap=0, size=None, units='centimeters'):
    '''
        position of side axes in normalized units

        Parameters:
            view: `AxesView`
                parent view

            side: 'north', 'south', 'west', 'east'
                side of parent to place the axes

            gap: float
                distance between edges of parent and new axes,
                    in unit `units`

            size: None or float
                width (for west, east) or height (for north, south)
                    of new axes, in unit `units`

                if None, extend to edge of figure

            units: str
                units for `gap` and `size`

        return (pos, size)
            pos: array (x, y, w, h) in figure fraction
            size: size used, in `units`
    '''
    pos_frac, pos_unit=_parent_positions(view, units)
    s=pos_frac[2:]/pos_unit[2:]

    if size is None:
        size=default_side_size(side, pos_unit, s, gap)

    x, y, w, h=pos_frac
    sx, sy=s

    if side=='west':
        pos=[x-sx*(gap+size), y, size*sx, h]
    elif side=='east':
        pos=[x+w+sx*gap, y, size*sx, h]
    elif side=='north':
        pos=[x, y+h+sy*gap, w, size*sy]
    elif side=='south':
        pos=[x, y-sy*(gap+size), w, size*sy]
    else:
        raise ValueError('unexpected side: \'%s\'' % side)

    return np.array(pos), size

def normalize_rect(pos):
    '''
        rect (x, y, w, h) with non-negative width and height

        mirrored rect, e.g. from negative size, is replaced by
            the rect covering same region
    '''
    x, y, w, h=pos
    return [min(x, x+w), min(y, y+h), abs(w), abs(h)]
