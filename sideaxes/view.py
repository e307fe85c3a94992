#!/usr/bin/env python3

'''
    adapter of `plt.Axes` as a view

    a view has
        - position in selectable units
        - limits, scale, direction for each semantic axis x, y, z
        - view angles (azimuth, elevation), see `viewmtx`
        - callbacks fired after change of these properties

    semantic axis projected along horizontal/vertical screen direction
        lives in x/y-axis of the matplotlib axes,
        which is inverted if projection sign is negative
    axis perpendicular to screen (z for 2d axes) is kept in the adapter
'''

import logging
from contextlib import contextmanager

import numpy as np
import matplotlib.pyplot as plt
from matplotlib import cbook
from matplotlib.axes import Axes

from ._tools import validate_choice, confirm_arg_in, \
                    bind_post_call_to_instance
from .size import UNITS, unit_in_inches
from .viewmtx import AXES, DEFAULT_VIEW, find_axis, is_planar_view

__all__=['AxesView', 'units_scope']

logger=logging.getLogger(__name__)

SCALES=['linear', 'log']
DIRECTIONS=['normal', 'reverse']

# property of semantic axis
def _axis_property(axis, name):
    '''
        property for `name` of an axis,
            e.g. `xlim` for limits of x-axis
    '''
    def fget(self):
        return getattr(self, 'get_'+name)(axis)

    def fset(self, val):
        getattr(self, 'set_'+name)(axis, val)

    return property(fget, fset, doc='%s of %s-axis' % (name, axis))

class AxesView:
    '''
        view of an `plt.Axes`

        use `AxesView.of(ax)` to get the adapter,
            only one adapter for one axes
    '''
    _ATTR='_sideaxes_view'   # attr of axes to hold adapter

    PROPS=[a+p for p in ['lim', 'scale', 'dir'] for a in AXES]+['view']

    def __init__(self, ax, view=None, side=None):
        '''
            init of adapter

            Parameters:
                ax: `plt.Axes`
                    axes to adapt

                view: None, or (float, float)
                    view angles of axes

                    if None, use default 2d view (0, 90)

                side: None, or str
                    side tag if created as side axes
        '''
        if not isinstance(ax, Axes):
            raise TypeError('only support `plt.Axes` for view, '
                            'but got %s' % type(ax).__name__)

        if getattr(ax, self._ATTR, None) is not None:
            raise ValueError('adapter already exists for the axes, '
                             'use `AxesView.of`')

        self._ax=ax
        self._units='normalized'
        self._view=DEFAULT_VIEW
        self.side=side

        # axis out of screen
        self._zstate=dict(limits=(0., 1.), scale='linear', direction='normal')

        # callbacks: func(view, prop)
        self.callbacks=cbook.CallbackRegistry(signals=self.PROPS)

        # links
        self._links=[]    # links from this view to children
        self.link=None    # link from parent

        setattr(ax, self._ATTR, self)

        # relay of change in matplotlib axes
        #   scale is updated by `_update_transScale` for all shared axes
        #   `clear` resets scale, limits and the callback registry of axes
        self._mpl_callbacks=None
        self._connect_mpl_relay()
        bind_post_call_to_instance(ax, '_update_transScale',
                                   self, '_on_mpl_scale_changed')
        bind_post_call_to_instance(ax, 'clear', self, '_on_mpl_cleared')

        if view is not None:
            self.set_view(view)

    @classmethod
    def of(cls, ax):
        '''
            adapter of an axes, created if not exists
        '''
        view=getattr(ax, cls._ATTR, None)
        if view is None:
            view=cls(ax)
        return view

    @classmethod
    def current(cls):
        '''
            adapter of current axes, `plt.gca()`
        '''
        return cls.of(plt.gca())

    # basic attrs
    axes=property(lambda self: self._ax)
    figure=property(lambda self: self._ax.get_figure())

    def is_alive(self):
        '''
            whether the axes still exists in a figure
        '''
        fig=getattr(self._ax, 'figure', None)
        return fig is not None and self._ax in fig.axes

    def remove(self):
        '''
            remove the axes from figure

            links from/to this view are also disconnected
        '''
        if self.link is not None:
            self.link.disconnect()

        for link in list(self._links):
            link.disconnect()

        logger.debug('remove axes %r', self._ax)
        self._ax.remove()

    # links
    def _prune_links(self):
        '''
            disconnect links whose parent or child is removed
        '''
        for link in [l for l in self._links if l.is_stale()]:
            link.disconnect()

    def _add_link(self, link):
        self._prune_links()
        self._links.append(link)

    def _discard_link(self, link):
        if link in self._links:
            self._links.remove(link)

    @property
    def links(self):
        '''
            links from this view to its side views

            stale links are dropped
        '''
        self._prune_links()
        return list(self._links)

    # notification
    def _notify(self, prop):
        self.callbacks.process(prop, self, prop)

    def _notify_screen(self, i, props):
        '''
            notify change of axis at screen coordinate i
        '''
        axis, _=find_axis(self._view, i)
        for p in props:
            self._notify(axis+p)

    def _connect_mpl_relay(self):
        '''
            listen to limits change of matplotlib axes

            done again if registry of axes is replaced
        '''
        registry=self._ax.callbacks
        if registry is self._mpl_callbacks:
            return

        registry.connect('xlim_changed', self._on_mpl_xlim_changed)
        registry.connect('ylim_changed', self._on_mpl_ylim_changed)
        self._mpl_callbacks=registry

    def _on_mpl_xlim_changed(self, ax):
        self._notify_screen(0, ['lim', 'dir'])

    def _on_mpl_ylim_changed(self, ax):
        self._notify_screen(1, ['lim', 'dir'])

    def _on_mpl_scale_changed(self):
        # which axis changed is unknown
        for i in range(2):
            self._notify_screen(i, ['scale'])

    def _on_mpl_cleared(self):
        self._connect_mpl_relay()
        for i in range(2):
            self._notify_screen(i, ['scale', 'lim', 'dir'])

    # units and position
    @property
    def units(self):
        '''
            units of position
        '''
        return self._units

    @units.setter
    def units(self, units):
        self._units=validate_choice(units, UNITS, 'units')

    def _scale_from_normalized(self, units):
        '''
            factor to convert position in normalized units to `units`
        '''
        if units=='normalized':
            return np.ones(4)

        fig=self.figure
        fw, fh=fig.get_size_inches()
        ux, uy=unit_in_inches(units, fig)

        sx, sy=fw/ux, fh/uy
        return np.array([sx, sy, sx, sy])

    def get_position(self):
        '''
            position (x, y, w, h) in current units
        '''
        pos=np.array(self._ax.get_position().bounds, dtype=float)
        return pos*self._scale_from_normalized(self._units)

    def set_position(self, pos):
        '''
            set position (x, y, w, h) given in current units
        '''
        pos=np.asarray(pos, dtype=float)
        if pos.shape!=(4,):
            raise ValueError('only allow position as (x, y, w, h)')

        pos=pos/self._scale_from_normalized(self._units)
        self._ax.set_position(list(pos))

    position=property(get_position, set_position)

    # view angles
    def get_view(self):
        '''
            (azimuth, elevation) in degrees
        '''
        return self._view

    def set_view(self, view):
        '''
            set view angles

            state of semantic axes (limits, scale, direction) is kept

            only view with x, y projected on screen coordinates supported
                for 2d axes
        '''
        az, el=view
        view=(float(az), float(el))
        if not is_planar_view(view):
            raise ValueError('only support view with x, y-axis along '
                             'screen coordinates for 2d axes, '
                             'but got %s' % repr(view))

        states=[self._get_state(a) for a in 'xy']

        self._view=view
        for a, s in zip('xy', states):
            self._set_state(a, s)

        self._notify('view')

    view=property(get_view, set_view)

    # semantic axis
    def _check_axis(self, axis):
        confirm_arg_in(axis, list(AXES), 'axis')
        return axis

    def _screen_of(self, axis):
        '''
            screen coordinate and sign of a semantic axis

            return None if not on screen
        '''
        for i in range(2):
            a, s=find_axis(self._view, i)
            if a==axis:
                return i, s
        return None

    def _mpl_lim(self, i):
        return getattr(self._ax, 'get_%slim' % 'xy'[i])()

    def _set_mpl_lim(self, i, lims, sgn, direction):
        '''
            set limits to matplotlib axis at screen coordinate i
        '''
        lo, hi=lims
        inverted=(direction=='reverse')!=(sgn<0)
        if inverted:
            lo, hi=hi, lo
        getattr(self._ax, 'set_%slim' % 'xy'[i])(lo, hi)

    def _get_state(self, axis):
        return dict(limits=self.get_limits(axis),
                    scale=self.get_scale(axis),
                    direction=self.get_direction(axis))

    def _set_state(self, axis, state):
        t=self._screen_of(axis)
        assert t is not None

        i, sgn=t
        getattr(self._ax, 'set_%sscale' % 'xy'[i])(state['scale'])
        self._set_mpl_lim(i, state['limits'], sgn, state['direction'])

    ## getter
    def get_limits(self, axis):
        '''
            limits (low, high) of semantic axis
        '''
        axis=self._check_axis(axis)

        t=self._screen_of(axis)
        if t is None:
            return self._zstate['limits']

        lo, hi=self._mpl_lim(t[0])
        return (min(lo, hi), max(lo, hi))

    def get_scale(self, axis):
        '''
            scale of semantic axis, 'linear' or 'log'
        '''
        axis=self._check_axis(axis)

        t=self._screen_of(axis)
        if t is None:
            return self._zstate['scale']

        return getattr(self._ax, 'get_%sscale' % 'xy'[t[0]])()

    def get_direction(self, axis):
        '''
            direction of semantic axis, 'normal' or 'reverse'
        '''
        axis=self._check_axis(axis)

        t=self._screen_of(axis)
        if t is None:
            return self._zstate['direction']

        i, sgn=t
        lo, hi=self._mpl_lim(i)
        inverted=lo>hi

        return DIRECTIONS[int(inverted!=(sgn<0))]

    ## setter
    def set_limits(self, axis, lims):
        '''
            set limits (low, high) of semantic axis
                keeping its direction
        '''
        axis=self._check_axis(axis)

        lo, hi=lims
        lims=(float(lo), float(hi))

        t=self._screen_of(axis)
        if t is None:
            self._zstate['limits']=lims
            self._notify(axis+'lim')
            return

        i, sgn=t
        self._set_mpl_lim(i, lims, sgn, self.get_direction(axis))

    def set_scale(self, axis, scale):
        '''
            set scale of semantic axis
        '''
        axis=self._check_axis(axis)
        confirm_arg_in(scale, SCALES, 'scale')

        t=self._screen_of(axis)
        if t is None:
            self._zstate['scale']=scale
            self._notify(axis+'scale')
            return

        getattr(self._ax, 'set_%sscale' % 'xy'[t[0]])(scale)

    def set_direction(self, axis, direction):
        '''
            set direction of semantic axis
        '''
        axis=self._check_axis(axis)
        confirm_arg_in(direction, DIRECTIONS, 'direction')

        t=self._screen_of(axis)
        if t is None:
            self._zstate['direction']=direction
            self._notify(axis+'dir')
            return

        i, sgn=t
        self._set_mpl_lim(i, self.get_limits(axis), sgn, direction)

    ## properties, like xlim, yscale, zdir
    xlim=_axis_property('x', 'limits')
    ylim=_axis_property('y', 'limits')
    zlim=_axis_property('z', 'limits')

    xscale=_axis_property('x', 'scale')
    yscale=_axis_property('y', 'scale')
    zscale=_axis_property('z', 'scale')

    xdir=_axis_property('x', 'direction')
    ydir=_axis_property('y', 'direction')
    zdir=_axis_property('z', 'direction')

    def __repr__(self):
        return '<%s of %r, view=%s, side=%s>' % (type(self).__name__,
                            self._ax, self._view, self.side)

# scoped units
@contextmanager
def units_scope(view, units):
    '''
        switch units of view temporarily

        original units is restored when exiting,
            even if an exception raised
    '''
    old=view.units
    view.units=units
    try:
        yield view
    finally:
        view.units=old
