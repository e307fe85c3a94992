#!/usr/bin/env python3

'''
    link between parent and side view

    one-directional:
        limits, scale and direction of the axis along shared screen coordinate
            are copied from parent to child after any change in parent
        child never writes back to parent
'''

import logging

from .viewmtx import find_axis

__all__=['ViewLink']

logger=logging.getLogger(__name__)

# screen coordinate shared by parent and child
SHARED_SCREEN=dict(west=1, east=1, north=0, south=0)

class ViewLink:
    '''
        link of the shared axis from parent view to a side view
    '''
    # props of parent to listen
    PARENT_PROPS=['xlim', 'ylim', 'xscale', 'yscale', 'xdir', 'ydir', 'view']

    def __init__(self, parent, child, side):
        '''
            init of link

            no sync done until `connect`

            Parameters:
                parent, child: `AxesView`
                    views to link

                side: 'north', 'south', 'west', 'east'
                    side of parent where child locates
        '''
        if side not in SHARED_SCREEN:
            raise ValueError('unexpected side: \'%s\'' % side)

        self.parent=parent
        self.child=child
        self.side=side

        self._cids=[]

    @property
    def screen(self):
        '''
            shared screen coordinate
                0 for horizontal, 1 for vertical
        '''
        return SHARED_SCREEN[self.side]

    @property
    def connected(self):
        return bool(self._cids)

    # lifecycle
    def connect(self):
        '''
            sync once and then listen to change of parent
        '''
        if self.connected:
            return self

        if self.child.link is not None:
            raise ValueError('child view already linked to a parent')

        self.sync()

        for p in self.PARENT_PROPS:
            cid=self.parent.callbacks.connect(p, self._on_parent_changed)
            self._cids.append(cid)

        self.parent._add_link(self)
        self.child.link=self

        logger.debug('connect link %r', self)

        return self

    def disconnect(self):
        '''
            stop listening to parent
        '''
        for cid in self._cids:
            self.parent.callbacks.disconnect(cid)
        self._cids=[]

        self.parent._discard_link(self)
        if self.child.link is self:
            self.child.link=None

        logger.debug('disconnect link %r', self)

    # sync
    def is_stale(self):
        '''
            whether parent or child no longer exists in figure
        '''
        return not (self.parent.is_alive() and self.child.is_alive())

    def _on_parent_changed(self, view, prop):
        if self.is_stale():
            logger.debug('stale link %r on change of \'%s\'', self, prop)
            self.disconnect()
            return

        self.sync()

    def sync(self):
        '''
            copy state of shared axis from parent to child

            direction is flipped if signs of projections
                of the two axes to screen differ

            nothing done for stale link
        '''
        if self.is_stale():
            return

        i=self.screen

        src, s1=find_axis(self.parent.get_view(), i)
        dst, s2=find_axis(self.child.get_view(), i)

        flipped=s1*s2<0

        self.child.set_scale(dst, self.parent.get_scale(src))
        self.child.set_limits(dst, self.parent.get_limits(src))

        d=self.parent.get_direction(src)
        if flipped:
            d='normal' if d=='reverse' else 'reverse'
        self.child.set_direction(dst, d)

    def __repr__(self):
        return '<%s %s: %r -> %r>' % (type(self).__name__, self.side,
                                      self.parent.axes, self.child.axes)
