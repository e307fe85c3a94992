#!/usr/bin/env python3

'''
    module to create side axes

    a side axes shares an edge with an existing axes,
        and, if linked, keeps the bordering axis same as the parent,
            i.e. limits, scale and direction
'''

import logging

import matplotlib.pyplot as plt
from matplotlib.axes import Axes

from ._tools import validate_choice
from .params import SIDES, get_sideaxes_defaults, validate_option
from .view import AxesView
from .viewmtx import CARDINAL_VIEWS, find_axis
from .geometry import side_position, normalize_rect
from .link import ViewLink

__all__=['sideaxes']

logger=logging.getLogger(__name__)

def _parse_args(args):
    '''
        parse positional args (side,) or (ax, side)
    '''
    if len(args)==1:
        ax, side=None, args[0]
    elif len(args)==2:
        ax, side=args
    else:
        raise TypeError('only allow positional args (side) or (ax, side), '
                        'but got %i args' % len(args))

    if ax is not None and not isinstance(ax, (Axes, AxesView)):
        raise TypeError('only support `plt.Axes` or `AxesView` for ax, '
                        'but got %s' % type(ax).__name__)

    side=validate_choice(side, SIDES, 'side')

    return ax, side

def sideaxes(*args, **kwargs):
    '''
        create axes sharing an edge with an existing axes

        usage:
            sideaxes(side, **kwargs)
            sideaxes(ax, side, **kwargs)

        Parameters:
            ax: `plt.Axes`, `AxesView`, or None
                parent axes

                if None, use current axes, `plt.gca()`

            side: 'north', 'south', 'west', 'east'
                side of parent to create axes at

                unambiguous prefix is accepted, like 'so' for 'south'

        Optional kwargs:
            gap: float, default 0
                distance between edges of parent and new axes,
                    in unit `units`

            size: None or float
                width (for west, east) or height (for north, south)
                    of new axes in unit `units`

                if None, extend to edge of figure

            link: bool, default True
                whether to keep the bordering axis same as parent,
                    including limits, scale and direction

                if False, limits of the axis is left as (0, 1)

            orientation: 'relative', 'west', 'east', 'south' or 'north'
                direction positive y-axis points to

                'relative' means same as `side`

            units: str, default 'centimeters'
                units of `gap` and `size`

                'normalized', 'inches', 'centimeters', 'millimeters',
                'points', 'pt_tex', 'pixels' or 'characters'

            defaults of these options could be changed by
                `set_sideaxes_defaults`

            other kwargs are passed to `fig.add_axes`

        return the new `plt.Axes`
            use `AxesView.of` to access its view
    '''
    ax, side=_parse_args(args)

    # options, all validated before any axes created
    opts=get_sideaxes_defaults()
    for k in list(opts.keys()):
        if k in kwargs:
            opts[k]=validate_option(k, kwargs.pop(k))

    gap, size=opts['gap'], opts['size']
    units=opts['units']

    orientation=opts['orientation']
    if orientation=='relative':
        orientation=side

    # parent
    if ax is None:
        ax=plt.gca()
    parent=ax if isinstance(ax, AxesView) else AxesView.of(ax)

    # position
    pos, size=side_position(parent, side, gap=gap, size=size, units=units)

    # matplotlib rejects negative width or height
    fig=parent.figure
    newax=fig.add_axes(normalize_rect(pos), **kwargs)
    newax.set_axis_off()
    newax.set_autoscale_on(False)

    child=AxesView(newax, view=CARDINAL_VIEWS[orientation], side=side)

    # range of axis not shared
    #   negative size gives range (size, 0), direction kept normal
    iother=0 if side in ['west', 'east'] else 1
    axis, _=find_axis(child.get_view(), iother)
    child.set_limits(axis, sorted((0, size)))

    logger.debug('create side axes at %s of %r: position=%s, orientation=%s',
                 side, parent.axes, pos, orientation)

    if opts['link']:
        ViewLink(parent, child, side).connect()

    return newax
