#!/usr/bin/env python3

'''
    view matrix of axes

    orientation of an axes is given by view angles (azimuth, elevation)
        in degrees, as camera position around the data box

    rows of view matrix are directions on screen:
        0: horizontal (rightwards)
        1: vertical (upwards)
        2: depth (out of screen)

    columns are semantic axes x, y, z
'''

import numbers

import numpy as np

__all__=['viewmtx', 'find_axis', 'CARDINAL_VIEWS', 'DEFAULT_VIEW']

AXES='xyz'
SCREENS=['horizontal', 'vertical']

# default view for 2d axes: x rightwards, y upwards
DEFAULT_VIEW=(0, 90)

# rotations where positive y points to the given direction
CARDINAL_VIEWS=dict(
    north=(0, 90),
    south=(180, 90),
    west=(-90, 90),
    east=(90, 90),
)

def viewmtx(az, el):
    '''
        4x4 orthographic view transform

        Parameters:
            az, el: float
                azimuth and elevation in degrees
                    az: rotation around z-axis
                        measured from negative y-axis, counterclockwise
                    el: elevation above xy-plane
    '''
    a, e=np.deg2rad([az, el])

    sa, ca=np.sin(a), np.cos(a)
    se, ce=np.sin(e), np.cos(e)

    return np.array([
        [ ca,     sa,    0,  0],
        [-se*sa,  se*ca, ce, 0],
        [ ce*sa, -ce*ca, se, 0],
        [ 0,      0,     0,  1],
    ])

def screen_index(screen):
    '''
        standardize screen coordinate to index 0, 1

        Parameters:
            screen: 0, 1, 'horizontal', 'vertical'
    '''
    if isinstance(screen, str):
        if screen not in SCREENS:
            raise ValueError('only allow screen coordinate in %s, '
                             'but got \'%s\'' % (SCREENS, screen))
        return SCREENS.index(screen)

    if isinstance(screen, numbers.Integral) and screen in (0, 1):
        return int(screen)

    raise ValueError('unexpected screen coordinate: %s' % repr(screen))

def find_axis(view, screen):
    '''
        semantic axis rendered along a screen coordinate

        axis with largest projection along the screen direction
            is chosen, first one if tie

        Parameters:
            view: (float, float)
                azimuth and elevation

            screen: 0, 1, 'horizontal', 'vertical'
                screen coordinate

        return (axis, sign)
            axis: 'x', 'y' or 'z'
            sign: 1 or -1, whether axis increases towards
                right/upward or inverse
    '''
    i=screen_index(screen)

    row=viewmtx(*view)[i, :3]
    ind=int(np.argmax(np.abs(row)))

    sgn=1 if row[ind]>0 else -1

    return AXES[ind], sgn

def is_planar_view(view, rtol=1e-9):
    '''
        whether x, y axes are projected exactly on screen coordinates

        that is, first two rows of view matrix, restricted to x, y,
            is a signed permutation,
            and z-axis perpendicular to screen
    '''
    m=viewmtx(*view)[:2, :3]

    a=np.abs(m)
    if not np.allclose(a[:, 2], 0, atol=rtol):
        return False

    a=a[:, :2]
    return np.allclose(np.sort(a, axis=1), [[0, 1], [0, 1]], atol=rtol) and \
           np.allclose(a.sum(axis=0), 1, atol=rtol)
